import os
from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException
from ..schemas import IngressRequest, IngressResponse
from ..services import ephem
from ..services.orchestrators.kundali_full import as_utc
from ..services.transit_ingress import compute_ingresses

router = APIRouter(prefix="/v1/transits", tags=["transits"])

@router.post("/ingress", response_model=IngressResponse)
def compute_ingress_route(req: IngressRequest):
    ephem.init_paths(os.getenv("EPHEMERIS_DIR"))
    unknown = [b for b in req.bodies if b not in ephem.BODIES]
    if unknown:
        raise HTTPException(status_code=422, detail=f"Unsupported bodies: {', '.join(unknown)}")
    at = as_utc(req.at or datetime.now(timezone.utc))
    transits = compute_ingresses(ephem.jd_from_datetime(at), req.bodies)
    return IngressResponse(meta={"at": at.isoformat(), "zodiac": "sidereal"}, transits=transits)
