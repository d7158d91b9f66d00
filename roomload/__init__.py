from .pint_setup import UNITS, Quantity

from .exceptions import (
    ComputationError,
    InvalidPreconditionError,
    OutOfRangeError,
    ConvergenceWarning
)

from .engine import (
    CalculationMode,
    EngineSettings,
    InputRecord,
    Results,
    compute_loads
)
