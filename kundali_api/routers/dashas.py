import os
from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException
from ..schemas import DashaComputeRequest, DashaComputeResponse
from ..services import ephem
from ..services.dashas_vimshottari import compute_vimshottari, current_dasha
from ..services.errors import DashaCycleError, InvalidInstantError
from ..services.orchestrators.kundali_full import as_utc
from ..services.sidereal import AYANAMSA_MODEL, body_sidereal_longitude

router = APIRouter(prefix="/v1/dashas", tags=["dashas"])

@router.post("/compute", response_model=DashaComputeResponse)
def compute_dashas(req: DashaComputeRequest):
    ephem.init_paths(os.getenv("EPHEMERIS_DIR"))
    b = req.birth
    now = as_utc(req.now or datetime.now(timezone.utc))
    try:
        birth_dt = ephem.birth_datetime_utc(b.date, b.time, b.tz)
        moon_lon = body_sidereal_longitude("Moon", ephem.jd_from_datetime(birth_dt))
        current = current_dasha(moon_lon, birth_dt, now)
    except InvalidInstantError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except DashaCycleError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    periods = compute_vimshottari(moon_lon, birth_dt, levels=req.options.levels, cycles=req.options.cycles)
    return DashaComputeResponse(
        meta={"system":"vedic","ayanamsa":AYANAMSA_MODEL,"levels":req.options.levels,"now":now.isoformat()},
        current=current,
        periods=periods,
    )
