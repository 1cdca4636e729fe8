from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Dignity = Literal["Exalted", "Own Sign", "Friendly", "Neutral", "Enemy", "Debilitated"]
Severity = Literal["None", "Low", "Medium", "High"]


class BirthInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: str  # YYYY-MM-DD
    time: str  # HH:MM[:SS] or h:mm AM/PM
    gender: Optional[str] = None
    location: Optional[str] = None
    lat: float = Field(..., ge=-90, le=90, allow_inf_nan=False)
    lon: float = Field(..., ge=-180, le=180, allow_inf_nan=False)
    tz: str = "UTC"


class PlanetPosition(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    sign: int = Field(..., ge=1, le=12)
    sign_name: str
    degree: float = Field(..., ge=0, lt=30)
    longitude: float
    house: int = Field(..., ge=1, le=12)
    strength: float = Field(..., ge=0, le=100)
    dignity: Dignity
    nakshatra: str
    retrograde: bool = False


class DashaPeriod(BaseModel):
    model_config = ConfigDict(frozen=True)

    current_mahadasha: str
    current_antardasha: str
    start_date: str  # ISO date, antardasha window
    end_date: str
    next_antardasha: str
    next_antardasha_date: str
    progress: int = Field(..., ge=0, le=100)
    mahadasha_start: str
    mahadasha_end: str


class Dosha(BaseModel):
    model_config = ConfigDict(frozen=True)

    present: bool
    name: str
    severity: Severity
    description: str
    remedy: Optional[str] = None


class Bio(BaseModel):
    model_config = ConfigDict(frozen=True)

    element: str
    quality: str
    lucky_gem: str
    lucky_color: str


class TransitData(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    sign: str
    sign_index: int
    degree: float
    progress: int
    days_remaining: Optional[int] = None  # None when the ingress search gave up
    resolved: bool
    description: str


class Chart(BaseModel):
    model_config = ConfigDict(frozen=True)

    chart_id: str
    birth: BirthInput
    ascendant: int = Field(..., ge=1, le=12)
    ascendant_sign: str
    ascendant_degree: float
    nakshatra: str
    dasha: DashaPeriod
    yogas: List[str]
    planets: List[PlanetPosition]
    doshas: List[Dosha]
    bio: Bio
    transits: List[TransitData]
    meta: Dict[str, Any]


class KundaliComputeRequest(BaseModel):
    birth: BirthInput
    now: Optional[datetime] = None  # defaults to the current UTC time
    include_transits: bool = True
