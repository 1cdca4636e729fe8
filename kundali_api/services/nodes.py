"""True (osculating) lunar node from the Moon's instantaneous orbit plane."""

import math
from typing import Dict, Optional

from . import ephem
from .constants import OBLIQUITY_DEG, normalize_deg

VELOCITY_DT_DAYS = 1.0 / 1440.0  # one minute
NODE_STRENGTH = 100.0


def _cross(a, b):
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def true_node_longitude(jd_ut: float, eph: Optional[object] = None) -> float:
    """Tropical longitude of the Moon's ascending node at ``jd_ut``."""
    eph = ephem.resolve(eph)
    r1 = eph.geocentric_vector("Moon", jd_ut)
    r2 = eph.geocentric_vector("Moon", eph.advance(jd_ut, VELOCITY_DT_DAYS))
    v = (r2[0] - r1[0], r2[1] - r1[1], r2[2] - r1[2])

    # angular momentum, equatorial frame
    h = _cross(r1, v)

    eps = math.radians(OBLIQUITY_DEG)
    h_ecl = (
        h[0],
        h[1] * math.cos(eps) + h[2] * math.sin(eps),
        -h[1] * math.sin(eps) + h[2] * math.cos(eps),
    )
    # (0, 0, 1) x h_ecl = (-h_y, h_x, 0)
    return normalize_deg(math.degrees(math.atan2(h_ecl[0], -h_ecl[1])))


def lunar_nodes(jd_ut: float, ayanamsa_deg: float, eph: Optional[object] = None) -> Dict[str, float]:
    """Sidereal Rahu and Ketu longitudes."""
    rahu = normalize_deg(true_node_longitude(jd_ut, eph) - ayanamsa_deg)
    return {"Rahu": rahu, "Ketu": normalize_deg(rahu + 180.0)}
