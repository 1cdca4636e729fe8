from .kundali import (
    BirthInput,
    PlanetPosition,
    DashaPeriod,
    Dosha,
    Bio,
    TransitData,
    Chart,
    KundaliComputeRequest,
)

from .dashas import DashaComputeRequest, DashaComputeResponse
from .transits import IngressRequest, IngressResponse
