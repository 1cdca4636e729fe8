import math
from typing import Dict, Optional

from . import ephem
from .constants import OBLIQUITY_DEG, normalize_deg


def _ramc(jd_ut: float, lon: float, eph) -> float:
    gst = eph.sidereal_time(jd_ut)
    lst = gst + lon / 15.0
    return normalize_deg(lst * 15.0)


def angles(jd_ut: float, lat: float, lon: float, eph: Optional[object] = None) -> Dict[str, float]:
    """Tropical ascendant and midheaven for a place and instant.

    Near the poles ``tan(lat)`` diverges and the result loses accuracy; no
    error is raised.
    """
    eph = ephem.resolve(eph)
    ramc = math.radians(_ramc(jd_ut, lon, eph))
    eps = math.radians(OBLIQUITY_DEG)
    phi = math.radians(lat)

    # eastern intersection of horizon and ecliptic; the textbook form
    # atan2(-cos RAMC, ...) yields the descendant, 180 deg away, so houses
    # and Mangal Dosha deliberately differ from charts built on it
    asc = math.atan2(
        math.cos(ramc),
        -(math.sin(ramc) * math.cos(eps) + math.tan(phi) * math.sin(eps)),
    )
    mc = math.atan2(math.sin(ramc), math.cos(ramc) * math.cos(eps))
    return {
        "ramc": math.degrees(ramc),
        "asc": normalize_deg(math.degrees(asc)),
        "mc": normalize_deg(math.degrees(mc)),
    }


def sidereal_ascendant(jd_ut: float, lat: float, lon: float, ayanamsa_deg: float,
                       eph: Optional[object] = None) -> float:
    return normalize_deg(angles(jd_ut, lat, lon, eph)["asc"] - ayanamsa_deg)


def ascendant_sign(sidereal_asc: float) -> int:
    return (int(sidereal_asc // 30) % 12) + 1
