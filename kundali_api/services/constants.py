import math

from .errors import InvalidInstantError

SIGN_NAMES = ["Aries","Taurus","Gemini","Cancer","Leo","Virgo","Libra","Scorpio","Sagittarius","Capricorn","Aquarius","Pisces"]

# Mean obliquity of the ecliptic at J2000.0, degrees
OBLIQUITY_DEG = 23.4392911


def normalize_deg(deg: float) -> float:
    """Map any finite angle into [0, 360)."""
    if not math.isfinite(deg):
        raise InvalidInstantError(f"Non-finite angle: {deg!r}")
    d = deg % 360.0
    # -1e-17 % 360 rounds up to exactly 360.0
    if d >= 360.0:
        d = 0.0
    return d


def sign_of(lon: float) -> int:
    """1-based sign index of a longitude."""
    return int(normalize_deg(lon) // 30) + 1


def degree_in_sign(lon: float) -> float:
    return normalize_deg(lon) % 30.0


def sign_name(sign: int) -> str:
    return SIGN_NAMES[(sign - 1) % 12]


def sign_name_from_lon(lon: float) -> str:
    return sign_name(sign_of(lon))


def round_in_sign(deg: float, ndigits: int) -> float:
    """Round a degree-in-sign for display without reaching 30."""
    return min(round(deg, ndigits), 30.0 - 10 ** -ndigits)
