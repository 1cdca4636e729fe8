import os
from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException

from ..schemas import Chart, KundaliComputeRequest
from ..services import ephem
from ..services.errors import DashaCycleError, InvalidInstantError
from ..services.orchestrators.kundali_full import compute_kundali

router = APIRouter(prefix="/v1/kundali", tags=["kundali"])


@router.post("/compute", response_model=Chart)
def compute_kundali_route(req: KundaliComputeRequest):
    ephem.init_paths(os.getenv("EPHEMERIS_DIR"))
    now = req.now or datetime.now(timezone.utc)
    try:
        return compute_kundali(req.birth, now, include_transits=req.include_transits)
    except InvalidInstantError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except DashaCycleError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
