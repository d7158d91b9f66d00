from .. import Quantity as Q_

STANDARD_PRESSURE = Q_(101325.0, 'Pa')
STANDARD_TEMPERATURE = Q_(20.0, 'degC')
RHO_STANDARD_AIR = Q_(1.2, 'kg / m ** 3')
CP_DRY_AIR = Q_(1006.0, 'J / (kg * K)')
CP_WATER_VAPOR = Q_(1860.0, 'J / (kg * K)')
CP_WATER = Q_(4186.0, 'J / (kg * K)')
H_FG = Q_(2501.0, 'kJ / kg')       # latent heat of vaporization at 0 °C
H_IG = Q_(2830.0, 'kJ / kg')       # latent heat of sublimation at 0 °C
MOLAR_MASS_RATIO = 0.621945        # M_water / M_dry_air

# magnitudes in SI base units for the numeric correlations
P_STD = STANDARD_PRESSURE.to('Pa').m
RHO_AIR = RHO_STANDARD_AIR.to('kg / m ** 3').m
CP_A = CP_DRY_AIR.to('J / (kg * K)').m
CP_V = CP_WATER_VAPOR.to('J / (kg * K)').m
CP_W = CP_WATER.to('J / (kg * K)').m
HFG = H_FG.to('J / kg').m
HIG = H_IG.to('J / kg').m
