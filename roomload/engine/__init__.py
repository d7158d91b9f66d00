from .inputs import (
    Geometry,
    Occupancy,
    Window,
    Envelope,
    InternalLoads,
    AirExchangeRates,
    DesignConditions,
    SystemData,
    InputRecord
)
from .settings import CalculationMode, EngineSettings
from .normalization import NormalizedInput, normalize, check_preconditions, validate
from .results import Results
from .calculator import compute_loads
