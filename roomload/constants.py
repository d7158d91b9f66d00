"""Unit-conversion factors and the fixed design policies of the engine."""
from . import Quantity

Q_ = Quantity

# unit conversion
WATTS_PER_TON = 3516.85      # W per refrigeration ton (12 000 Btu/h)
WATT_TO_BTU = 3.412          # (Btu/h) per W
INCH_TO_M = 0.0254
FT_TO_M = 0.3048

# design policies
SAFETY_FACTOR = Q_(20.0, 'pct')
CFM_PER_TON = Q_(400.0, 'ft ** 3 / min / TR')
DUCT_VELOCITY = Q_(900.0, 'ft / min')
DUCT_ASPECT_RATIO = 2.0      # width : height of rectangular ducts
SHADING_FACTOR = 0.5         # fraction of solar gain passing external shading

# material take-off for one reference run of duct
REFERENCE_RUN_LENGTH = Q_(10.0, 'm')
FLANGES_PER_RUN = 10
SCREWS_PER_RUN = 200

# defaults for unset inputs
DEFAULT_INDOOR_TEMPERATURE = Q_(24.0, 'degC')
DEFAULT_INDOOR_RH = Q_(50.0, 'pct')
DEFAULT_WINTER_OUTDOOR_RH = Q_(80.0, 'pct')
DEFAULT_FAN_EFFICIENCY = Q_(0.65, 'frac')

# numerical guards
EPSILON = 1.0e-9
ADP_MAX_ITERATIONS = 20
ADP_TOLERANCE = 1.0e-6       # K
