from datetime import datetime
from pydantic import BaseModel, Field
from typing import Optional, List, Literal, Dict, Any
from .kundali import BirthInput, DashaPeriod

Level = Literal[1, 2]  # 1 = Mahadasha only, 2 = Maha + Antar

class DashaOptions(BaseModel):
    levels: Level = 2
    cycles: int = Field(1, ge=1, le=2)

class DashaComputeRequest(BaseModel):
    birth: BirthInput
    now: Optional[datetime] = None
    options: DashaOptions = DashaOptions()

class DashaTimelinePeriod(BaseModel):
    level: int
    lord: str
    start: str  # ISO date
    end: str    # ISO date
    parent: Optional[str] = None  # maha lord for antars

class DashaComputeResponse(BaseModel):
    meta: Dict[str, Any]
    current: DashaPeriod
    periods: List[DashaTimelinePeriod]
