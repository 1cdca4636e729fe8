"""Next sign ingress for the classical bodies.

The search is a march, not a root finder: it jumps to 80% of the mean-motion
estimate and then steps in fixed increments until the sign changes. A body
faster than its table rate can already be past the boundary at the jump; the
search then walks back into the starting sign before marching forward again.
The reported ``days_remaining`` overshoots the true ingress by at most one
refinement step.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, Iterable, List, Optional

from . import ephem
from .constants import degree_in_sign, round_in_sign, sign_name, sign_of
from .sidereal import body_sidereal_longitude

logger = logging.getLogger(__name__)

TRANSIT_BODIES = ("Sun", "Moon", "Mars", "Mercury", "Jupiter", "Venus", "Saturn")

# Approximate mean daily motion, degrees/day
MEAN_DAILY_MOTION: Dict[str, float] = {
    "Sun": 1.0,
    "Moon": 13.2,
    "Mercury": 1.2,
    "Venus": 1.2,
    "Mars": 0.5,
    "Jupiter": 0.083,
    "Saturn": 0.034,
}
REFINE_STEP_DAYS: Dict[str, float] = {"Moon": 0.2, "Jupiter": 5.0, "Saturn": 10.0}
DEFAULT_STEP_DAYS = 1.0
JUMP_FRACTION = 0.8
MAX_REFINE_STEPS = 1000


def next_ingress(body: str, jd_now: float, eph: Optional[object] = None,
                 max_steps: int = MAX_REFINE_STEPS) -> Dict[str, Any]:
    eph = ephem.resolve(eph)
    lon = body_sidereal_longitude(body, jd_now, eph)
    sign = sign_of(lon)
    degree = degree_in_sign(lon)

    estimate = (30.0 - degree) / MEAN_DAILY_MOTION.get(body, 1.0)
    days = float(max(0, math.floor(estimate * JUMP_FRACTION)))
    step = REFINE_STEP_DAYS.get(body, DEFAULT_STEP_DAYS)

    def sign_after(d: float) -> int:
        return sign_of(body_sidereal_longitude(body, eph.advance(jd_now, d), eph))

    steps = 1
    if sign_after(days) != sign:
        # jumped past the boundary (or a whole sign): walk back into the start sign
        while steps < max_steps:
            days = max(0.0, days - step)
            steps += 1
            if sign_after(days) == sign:
                break
    days += step

    resolved = False
    while steps < max_steps:
        steps += 1
        if sign_after(days) != sign:
            resolved = True
            break
        days += step

    if not resolved:
        logger.warning(
            "transit.ingress.unresolved",
            extra={"body": body, "searched_days": days, "steps": max_steps},
        )

    return {
        "name": body,
        "sign": sign_name(sign),
        "sign_index": sign,
        "degree": round_in_sign(degree, 1),
        "progress": round(degree / 30.0 * 100),
        "days_remaining": math.ceil(days) if resolved else None,
        "resolved": resolved,
        "description": f"Transiting {sign_name(sign)}",
    }


def compute_ingresses(jd_now: float, bodies: Optional[Iterable[str]] = None,
                      eph: Optional[object] = None) -> List[Dict[str, Any]]:
    if bodies is None:
        bodies = TRANSIT_BODIES
    return [next_ingress(b, jd_now, eph) for b in bodies]
