"""Swiss Ephemeris adapter used by the kundali engine.

The engine only talks to an object exposing ``geocentric_vector``,
``ecliptic_coordinates``, ``sidereal_time`` and ``advance``. Instants are
Julian days in UT.
"""

from __future__ import annotations

import math
import os
import re
from datetime import datetime, timezone
from typing import Dict, Optional, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import swisseph as swe

from .constants import OBLIQUITY_DEG, normalize_deg
from .errors import InvalidInstantError


# Engine version for API responses
try:
    ENGINE_VERSION = f"swisseph-{swe.version}"
except AttributeError:
    ENGINE_VERSION = "swisseph-2.10"  # Fallback if version not available

BODIES: Dict[str, int] = {
    "Sun": swe.SUN,
    "Moon": swe.MOON,
    "Mars": swe.MARS,
    "Mercury": swe.MERCURY,
    "Jupiter": swe.JUPITER,
    "Venus": swe.VENUS,
    "Saturn": swe.SATURN,
}

_TIME_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})(?::(\d{2}))?\s*([AaPp][Mm])?\s*$")


def _backend_flag() -> int:
    """Return the Swiss Ephemeris backend flag based on environment configuration."""

    raw_backend = os.getenv("EPHEMERIS_BACKEND")
    backend = raw_backend.strip().lower() if raw_backend else "swieph"
    return swe.FLG_MOSEPH if backend == "moseph" else swe.FLG_SWIEPH


def backend_name() -> str:
    return "moseph" if _backend_flag() == swe.FLG_MOSEPH else "swieph"


def init_paths(ephe_dir: str | os.PathLike[str] | None) -> None:
    """Set the Swiss Ephemeris file search path when available."""

    if not ephe_dir:
        return

    path = os.fspath(ephe_dir)
    if os.path.isdir(path):
        swe.set_ephe_path(path)


def normalize_time(time_str: str) -> str:
    """Turn ``HH:MM``, ``HH:MM:SS`` or ``h:mm AM/PM`` into ``HH:MM:SS``."""

    match = _TIME_RE.match(time_str or "")
    if not match:
        raise InvalidInstantError(f"Invalid time: {time_str!r}")
    hour, minute = int(match.group(1)), int(match.group(2))
    second = int(match.group(3) or 0)
    ampm = match.group(4)
    if ampm:
        if not 1 <= hour <= 12:
            raise InvalidInstantError(f"Invalid 12-hour time: {time_str!r}")
        ampm = ampm.upper()
        if ampm == "PM" and hour < 12:
            hour += 12
        if ampm == "AM" and hour == 12:
            hour = 0
    if hour > 23 or minute > 59 or second > 59:
        raise InvalidInstantError(f"Invalid time: {time_str!r}")
    return f"{hour:02d}:{minute:02d}:{second:02d}"


def birth_datetime_utc(date_str: str, time_str: str, tz: str) -> datetime:
    """Convert a local date/time in an IANA zone to an aware UTC datetime."""

    try:
        zone = ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise InvalidInstantError(f"Invalid timezone: {tz!r}") from exc
    clock = normalize_time(time_str)
    try:
        dt_local = datetime.fromisoformat(f"{date_str}T{clock}")
    except (TypeError, ValueError) as exc:
        raise InvalidInstantError(f"Invalid date: {date_str!r}") from exc
    return dt_local.replace(tzinfo=zone).astimezone(timezone.utc)


def jd_from_datetime(dt: datetime) -> float:
    """Julian day (UT) of a datetime; naive values are taken as UTC."""

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt_utc = dt.astimezone(timezone.utc)
    hour = (
        dt_utc.hour
        + dt_utc.minute / 60
        + dt_utc.second / 3600
        + dt_utc.microsecond / 3_600_000_000
    )
    return swe.julday(dt_utc.year, dt_utc.month, dt_utc.day, hour, swe.GREG_CAL)


def to_jd_utc(date_str: str, time_str: str, tz: str) -> float:
    """Convert a local date/time to a Julian day in UTC."""

    return jd_from_datetime(birth_datetime_utc(date_str, time_str, tz))


class SwissEphemeris:
    """Geocentric positions and sidereal time backed by ``pyswisseph``."""

    def geocentric_vector(self, body: str, jd_ut: float) -> Tuple[float, float, float]:
        """Equatorial (of date) geocentric position in AU."""
        try:
            code = BODIES[body]
        except KeyError:
            raise ValueError(f"Unsupported body: {body}") from None
        flag = _backend_flag() | swe.FLG_EQUATORIAL | swe.FLG_XYZ
        values, _ = swe.calc_ut(jd_ut, code, flag)
        return values[0], values[1], values[2]

    def ecliptic_coordinates(self, vector: Tuple[float, float, float]) -> Tuple[float, float]:
        """Ecliptic longitude/latitude in degrees of an equatorial vector."""
        x, y, z = vector
        eps = math.radians(OBLIQUITY_DEG)
        ye = y * math.cos(eps) + z * math.sin(eps)
        ze = -y * math.sin(eps) + z * math.cos(eps)
        lon = normalize_deg(math.degrees(math.atan2(ye, x)))
        lat = math.degrees(math.atan2(ze, math.hypot(x, ye)))
        return lon, lat

    def sidereal_time(self, jd_ut: float) -> float:
        """Greenwich sidereal time in hours."""
        return swe.sidtime(jd_ut)

    def advance(self, jd_ut: float, delta_days: float) -> float:
        return jd_ut + delta_days


DEFAULT_EPHEMERIS = SwissEphemeris()


def resolve(eph: Optional[object]) -> object:
    return DEFAULT_EPHEMERIS if eph is None else eph
