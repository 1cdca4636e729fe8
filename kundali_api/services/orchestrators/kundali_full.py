import logging
from datetime import datetime, timezone
from hashlib import sha256
from typing import Any, Dict, List, Optional

from ...schemas.kundali import BirthInput, Chart
from .. import ephem
from ..ascendant import ascendant_sign, sidereal_ascendant
from ..constants import degree_in_sign, round_in_sign, sign_name, sign_of
from ..dashas_vimshottari import current_dasha
from ..derivations import YOGAS, bio, strength
from ..dignities import dignity_for
from ..doshas import analyze_doshas
from ..houses import assign_houses
from ..nodes import NODE_STRENGTH, lunar_nodes
from ..sidereal import AYANAMSA_MODEL, ayanamsa, body_sidereal_longitude
from ..transit_ingress import compute_ingresses
from ..vedic import nakshatra_from_lon_sidereal

logger = logging.getLogger(__name__)

PLANET_ORDER = ("Sun", "Moon", "Mars", "Mercury", "Jupiter", "Venus", "Saturn")


def as_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def chart_id_for(birth: BirthInput) -> str:
    seed = f"{birth.date}|{ephem.normalize_time(birth.time)}|{birth.lat:.6f}|{birth.lon:.6f}|{birth.tz}|{AYANAMSA_MODEL}"
    return "kdl_" + sha256(seed.encode()).hexdigest()[:24]


def _raw_planet(name: str, lon: float, fixed_strength: Optional[float] = None) -> Dict[str, Any]:
    return {
        "name": name,
        "longitude": lon,
        "sign": sign_of(lon),
        "strength": strength(lon) if fixed_strength is None else fixed_strength,
    }


def _finish_planet(p: Dict[str, Any]) -> Dict[str, Any]:
    lon = p["longitude"]
    return {
        "name": p["name"],
        "sign": p["sign"],
        "sign_name": sign_name(p["sign"]),
        "degree": round_in_sign(degree_in_sign(lon), 2),
        "longitude": round(lon, 4),
        "house": p["house"],
        "strength": p["strength"],
        "dignity": dignity_for(p["name"], p["sign"]),
        "nakshatra": nakshatra_from_lon_sidereal(lon)["name"],
        # no retrograde detection
        "retrograde": False,
    }


def compute_kundali(birth: BirthInput, now: datetime, eph: Optional[object] = None,
                    include_transits: bool = True) -> Chart:
    """Build the sidereal chart for ``birth`` with dasha and transits as of ``now``."""
    eph = ephem.resolve(eph)
    now = as_utc(now)
    birth_dt = ephem.birth_datetime_utc(birth.date, birth.time, birth.tz)
    jd = ephem.jd_from_datetime(birth_dt)
    ayan = ayanamsa(jd)

    raw: List[Dict[str, Any]] = [
        _raw_planet(name, body_sidereal_longitude(name, jd, eph, ayan)) for name in PLANET_ORDER
    ]
    for name, lon in lunar_nodes(jd, ayan, eph).items():
        raw.append(_raw_planet(name, lon, NODE_STRENGTH))

    asc_lon = sidereal_ascendant(jd, birth.lat, birth.lon, ayan, eph)
    asc_sign = ascendant_sign(asc_lon)
    assign_houses(raw, asc_sign)
    planets = [_finish_planet(p) for p in raw]

    moon_lon = next(p["longitude"] for p in raw if p["name"] == "Moon")
    dasha = current_dasha(moon_lon, birth_dt, now)
    transits = compute_ingresses(ephem.jd_from_datetime(now), eph=eph) if include_transits else []

    chart = Chart(
        chart_id=chart_id_for(birth),
        birth=birth,
        ascendant=asc_sign,
        ascendant_sign=sign_name(asc_sign),
        ascendant_degree=round_in_sign(degree_in_sign(asc_lon), 2),
        nakshatra=nakshatra_from_lon_sidereal(moon_lon)["name"],
        dasha=dasha,
        yogas=list(YOGAS),
        planets=planets,
        doshas=analyze_doshas(planets),
        bio=bio(asc_sign),
        transits=transits,
        meta={
            "engine": "wh-kundali",
            "engine_version": ephem.ENGINE_VERSION,
            "zodiac": "sidereal",
            "house_system": "whole_sign",
            "ayanamsa": AYANAMSA_MODEL,
            "ayanamsa_deg": round(ayan, 6),
            "backend": ephem.backend_name(),
            "now": now.isoformat(),
        },
    )
    logger.info(
        "kundali.computed",
        extra={"chart_id": chart.chart_id, "ascendant": asc_sign, "mahadasha": dasha["current_mahadasha"]},
    )
    return chart
