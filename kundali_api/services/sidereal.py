"""Tropical to sidereal conversion with a linear Lahiri-style ayanamsa."""

from typing import Optional

from . import ephem
from .constants import normalize_deg

J2000_JD = 2451545.0  # 2000-01-01 12:00 UT
AYANAMSA_AT_J2000 = 23.85
ANNUAL_PRECESSION_DEG = 50.29 / 3600.0
AYANAMSA_MODEL = "lahiri-linear"


def ayanamsa(jd_ut: float) -> float:
    days_since = jd_ut - J2000_JD
    return AYANAMSA_AT_J2000 + (days_since / 365.25) * ANNUAL_PRECESSION_DEG


def sidereal_longitude(tropical_lon: float, ayanamsa_deg: float) -> float:
    return normalize_deg(tropical_lon - ayanamsa_deg)


def body_sidereal_longitude(body: str, jd_ut: float, eph: Optional[object] = None,
                            ayanamsa_deg: Optional[float] = None) -> float:
    """Sidereal ecliptic longitude of ``body`` at ``jd_ut``.

    The ayanamsa is evaluated at the same instant unless one is supplied.
    """
    eph = ephem.resolve(eph)
    lon, _lat = eph.ecliptic_coordinates(eph.geocentric_vector(body, jd_ut))
    if ayanamsa_deg is None:
        ayanamsa_deg = ayanamsa(jd_ut)
    return sidereal_longitude(lon, ayanamsa_deg)
