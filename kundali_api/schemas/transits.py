from datetime import datetime
from pydantic import BaseModel
from typing import List, Optional, Dict, Any
from .kundali import TransitData

class IngressRequest(BaseModel):
    at: Optional[datetime] = None  # defaults to the current UTC time
    bodies: List[str] = ["Sun","Moon","Mars","Mercury","Jupiter","Venus","Saturn"]

class IngressResponse(BaseModel):
    meta: Dict[str, Any]
    transits: List[TransitData]
