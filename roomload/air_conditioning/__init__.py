from .process import (
    AirStream,
    AdiabaticMixing,
    Fan,
    CoolingCoil,
    ADPSolution,
    solve_apparatus_dew_point
)
from .cooling_design import CoolingDesign, CoolingOutput
from .heating_design import HeatingDesign, HeatingOutput
