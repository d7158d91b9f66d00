from .constants import (
    STANDARD_PRESSURE,
    STANDARD_TEMPERATURE,
    RHO_STANDARD_AIR,
    CP_DRY_AIR,
    H_FG
)

from .psychrometrics import (
    saturation_pressure,
    humidity_ratio,
    saturation_humidity_ratio,
    humidity_ratio_from_RH,
    humidity_ratio_from_Twb,
    relative_humidity,
    enthalpy,
    pressure_from_altitude
)

from .humid_air import HumidAir
