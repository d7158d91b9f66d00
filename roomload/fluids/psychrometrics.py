"""Moist-air property correlations (ASHRAE Handbook - Fundamentals,
Chapter 1: Psychrometrics).

All functions work with plain floats: temperatures in °C, pressures in Pa,
humidity ratios in kg/kg, relative humidity in percent and specific enthalpy
in J/kg of dry air. Class `HumidAir` wraps these functions for use with
quantities.
"""
import math
from roomload.constants import EPSILON
from roomload.exceptions import OutOfRangeError
from roomload.logging import ModuleLogger
from .constants import (
    P_STD,
    CP_A,
    CP_V,
    CP_W,
    HFG,
    HIG,
    MOLAR_MASS_RATIO
)

logger = ModuleLogger.get_logger(__name__)
logger.setLevel(ModuleLogger.WARNING)

T_ZERO = 273.15

# Hyland-Wexler coefficients of the saturation pressure over ice
# (-100 °C to 0 °C) and over liquid water (0 °C to 200 °C).
_C_ICE = (
    -5.6745359e3,
    6.3925247,
    -9.6778430e-3,
    6.2215701e-7,
    2.0747825e-9,
    -9.4840240e-13,
    4.1635019
)
_C_LIQUID = (
    -5.8002206e3,
    1.3914993,
    -4.8640239e-2,
    4.1764768e-5,
    -1.4452093e-8,
    6.5459673
)


def saturation_pressure(T_db: float) -> float:
    """Returns the saturation pressure of water vapor in Pa at dry-bulb
    temperature `T_db` in °C. Below 0 °C the saturation curve over ice is
    used, otherwise the curve over liquid water.
    """
    T = T_db + T_ZERO
    if T_db < 0.0:
        c1, c2, c3, c4, c5, c6, c7 = _C_ICE
        ln_pws = (
            c1 / T + c2 + c3 * T + c4 * T ** 2
            + c5 * T ** 3 + c6 * T ** 4 + c7 * math.log(T)
        )
    else:
        c8, c9, c10, c11, c12, c13 = _C_LIQUID
        ln_pws = (
            c8 / T + c9 + c10 * T + c11 * T ** 2
            + c12 * T ** 3 + c13 * math.log(T)
        )
    return math.exp(ln_pws)


def humidity_ratio(p_w: float, P: float = P_STD) -> float:
    """Returns the humidity ratio in kg/kg of moist air with partial vapor
    pressure `p_w` at total pressure `P` (both in Pa).
    """
    if p_w < 0.0:
        raise OutOfRangeError('p_w', p_w, "vapor pressure cannot be negative")
    if P - p_w <= EPSILON:
        raise OutOfRangeError(
            'p_w', p_w,
            f"vapor pressure must stay below the total pressure of {P:.0f} Pa"
        )
    return MOLAR_MASS_RATIO * p_w / (P - p_w)


def saturation_humidity_ratio(T_db: float, P: float = P_STD) -> float:
    """Returns the humidity ratio of saturated air at `T_db` (°C)."""
    return humidity_ratio(saturation_pressure(T_db), P)


def humidity_ratio_from_RH(T_db: float, RH: float, P: float = P_STD) -> float:
    """Returns the humidity ratio of air at dry-bulb temperature `T_db` (°C)
    and relative humidity `RH` (%).
    """
    if not 0.0 <= RH <= 100.0:
        raise OutOfRangeError('RH', RH, "relative humidity must lie between 0 and 100 %")
    p_w = RH / 100.0 * saturation_pressure(T_db)
    return humidity_ratio(p_w, P)


def humidity_ratio_from_Twb(T_db: float, T_wb: float, P: float = P_STD) -> float:
    """Returns the humidity ratio of air at dry-bulb temperature `T_db` and
    thermodynamic wet-bulb temperature `T_wb` (both in °C), using the
    psychrometer equation (ASHRAE Fundamentals 2017, Ch. 1, eq. 33 and 35).

    If the wet-bulb temperature is (practically) equal to the dry-bulb
    temperature, the air is saturated and the saturation humidity ratio is
    returned. A negative result is clamped to zero.
    """
    if T_wb - T_db > EPSILON:
        raise OutOfRangeError(
            'T_wb', T_wb,
            f"wet-bulb temperature cannot exceed the dry-bulb temperature ({T_db} °C)"
        )
    W_s = saturation_humidity_ratio(T_wb, P)
    if T_db - T_wb < EPSILON:
        return W_s
    if T_wb >= 0.0:
        num = (HFG - (CP_W - CP_V) * T_wb) * W_s - CP_A * (T_db - T_wb)
        den = HFG + CP_V * T_db - CP_W * T_wb
    else:
        # wet bulb covered with ice
        c_ice = 2100.0
        num = (HIG - (c_ice - CP_V) * T_wb) * W_s - CP_A * (T_db - T_wb)
        den = HIG + CP_V * T_db - c_ice * T_wb
    if abs(den) < EPSILON:
        return W_s
    W = num / den
    if W < 0.0:
        logger.warning(
            f"humidity ratio at {T_db:.2f} °C DB / {T_wb:.2f} °C WB "
            f"evaluates to {W:.6f} kg/kg; clamped to 0 kg/kg"
        )
        W = 0.0
    return W


def vapor_pressure(W: float, P: float = P_STD) -> float:
    """Returns the partial pressure of water vapor in Pa of air with humidity
    ratio `W` (kg/kg).
    """
    return P * W / (MOLAR_MASS_RATIO + W)


def relative_humidity(T_db: float, W: float, P: float = P_STD) -> float:
    """Returns the relative humidity in percent of air at `T_db` (°C) with
    humidity ratio `W` (kg/kg).
    """
    return 100.0 * vapor_pressure(W, P) / saturation_pressure(T_db)


def enthalpy(T_db: float, W: float) -> float:
    """Returns the specific enthalpy of moist air in J/kg dry air."""
    return CP_A * T_db + W * (HFG + CP_V * T_db)


def pressure_from_altitude(Z: float) -> float:
    """Returns the standard atmospheric pressure in Pa at altitude `Z` in
    meters above sea level.
    """
    return P_STD * (1.0 - 2.25577e-5 * Z) ** 5.2559
