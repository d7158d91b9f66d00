"""Normalization, validation and pre-flight checks of the input record.

`normalize` turns the input record with its optional fields into a record in
which every quantity is set and expressed in its SI unit. `check_preconditions`
and `validate` then reject inputs the calculation cannot proceed with, before
any formula could divide by zero or run out of its range.
"""
from __future__ import annotations

from dataclasses import dataclass
import math
from .. import Quantity
from ..constants import (
    SAFETY_FACTOR,
    DEFAULT_INDOOR_TEMPERATURE,
    DEFAULT_INDOOR_RH,
    DEFAULT_WINTER_OUTDOOR_RH,
    DEFAULT_FAN_EFFICIENCY
)
from ..exceptions import InvalidPreconditionError, OutOfRangeError
from ..fluids import STANDARD_PRESSURE, pressure_from_altitude
from ..load_calc import (
    ActivityLevel,
    Orientation,
    U_VALUE_WINDOW,
    U_VALUE_INSULATION
)
from ..logging import ModuleLogger
from .inputs import InputRecord
from .settings import CalculationMode

Q_ = Quantity

logger = ModuleLogger.get_logger(__name__)
logger.setLevel(ModuleLogger.WARNING)


@dataclass(frozen=True)
class NormalizedInput:
    project_name: str
    floor_area: Quantity
    height: Quantity
    n_people: int
    activity: ActivityLevel
    lighting: Quantity
    equipment: Quantity
    window_area: Quantity
    window_U: Quantity
    orientation: Orientation
    shaded: bool
    solar_gain: Quantity | None
    wall_area: Quantity
    wall_U: Quantity
    roof_area: Quantity
    roof_U: Quantity
    air_changes: Quantity
    V_dot_person: Quantity
    T_out: Quantity
    T_wb_out: Quantity | None
    RH_out: Quantity | None
    T_in: Quantity
    RH_in: Quantity
    T_out_winter: Quantity | None
    RH_out_winter: Quantity
    safety_factor: Quantity
    T_supply: Quantity | None
    P: Quantity
    design_airflow: Quantity | None
    dP_fan: Quantity
    eta_fan: Quantity

    @property
    def volume(self) -> Quantity:
        return (self.floor_area * self.height).to('m ** 3')


def _is_unset(value) -> bool:
    if value is None:
        return True
    m = value.m if isinstance(value, Quantity) else value
    return isinstance(m, float) and math.isnan(m)


def _optional(value, unit: str) -> Quantity | None:
    """Returns `value` expressed in `unit`, or None if it is unset. A plain
    number is taken to be expressed in `unit` already.
    """
    if _is_unset(value):
        return None
    if isinstance(value, Quantity):
        return value.to(unit)
    return Q_(float(value), unit)


def _coerce(value, unit: str, default: Quantity | None = None) -> Quantity:
    """Returns `value` expressed in `unit`; an unset value is replaced by
    `default`, or by zero if there is no default.
    """
    q = _optional(value, unit)
    if q is not None:
        return q
    if default is not None:
        return default.to(unit)
    return Q_(0.0, unit)


def normalize(inputs: InputRecord) -> NormalizedInput:
    """Returns the normalized version of input record `inputs`."""
    geo = inputs.geometry
    floor_area = _optional(geo.floor_area, 'm ** 2')
    if floor_area is None:
        floor_area = (
            _coerce(geo.length, 'm') * _coerce(geo.width, 'm')
        ).to('m ** 2')
    height = _optional(geo.height, 'm')
    if height is None:
        height = _coerce(geo.ceiling_height, 'm')

    count = inputs.occupancy.count
    n_people = 0 if _is_unset(count) else int(count)

    env = inputs.envelope
    window = env.window
    U_insulation = U_VALUE_INSULATION[env.insulation]
    U_unit = 'W / (m ** 2 * K)'

    dc = inputs.design
    altitude = _optional(dc.altitude, 'm')
    if altitude is None:
        P = STANDARD_PRESSURE
    else:
        P = Q_(pressure_from_altitude(altitude.m), 'Pa')

    system = inputs.system
    norm = NormalizedInput(
        project_name=inputs.project_name,
        floor_area=floor_area,
        height=height,
        n_people=n_people,
        activity=inputs.occupancy.activity,
        lighting=_coerce(inputs.internal_loads.lighting, 'W'),
        equipment=_coerce(inputs.internal_loads.equipment, 'W'),
        window_area=_coerce(window.area, 'm ** 2'),
        window_U=_coerce(window.U, U_unit, U_VALUE_WINDOW[window.glass_type]),
        orientation=window.orientation,
        shaded=bool(window.shaded),
        solar_gain=_optional(window.solar_gain, 'W'),
        wall_area=_coerce(env.wall_area, 'm ** 2'),
        wall_U=_coerce(env.wall_U, U_unit, U_insulation),
        roof_area=_coerce(env.roof_area, 'm ** 2'),
        roof_U=_coerce(env.roof_U, U_unit, U_insulation),
        air_changes=_coerce(inputs.air_exchange.air_changes, '1 / hr'),
        V_dot_person=_coerce(inputs.air_exchange.outdoor_air_per_person, 'L / s'),
        T_out=_coerce(dc.T_out, 'degC'),
        T_wb_out=_optional(dc.T_wb_out, 'degC'),
        RH_out=_optional(dc.RH_out, 'pct'),
        T_in=_coerce(dc.T_in, 'degC', DEFAULT_INDOOR_TEMPERATURE),
        RH_in=_coerce(dc.RH_in, 'pct', DEFAULT_INDOOR_RH),
        T_out_winter=_optional(dc.T_out_winter, 'degC'),
        RH_out_winter=_coerce(dc.RH_out_winter, 'pct', DEFAULT_WINTER_OUTDOOR_RH),
        safety_factor=_coerce(dc.safety_factor, 'pct', SAFETY_FACTOR),
        T_supply=_optional(dc.T_supply, 'degC'),
        P=P,
        design_airflow=_optional(system.design_airflow, 'm ** 3 / s'),
        dP_fan=_coerce(system.dP_fan, 'Pa'),
        eta_fan=_coerce(system.eta_fan, 'frac', DEFAULT_FAN_EFFICIENCY)
    )
    logger.debug(
        f"normalized input '{norm.project_name}': floor area {norm.floor_area:~P.2f}, "
        f"volume {norm.volume:~P.2f}, {norm.n_people} people"
    )
    return norm


def check_preconditions(norm: NormalizedInput, mode: CalculationMode) -> None:
    """Raises `InvalidPreconditionError` when a quantity the calculation in
    `mode` cannot do without is zero or missing. The simple calculation has
    no such quantities.
    """
    if mode is not CalculationMode.PSYCHROMETRIC:
        return
    if norm.design_airflow is not None and norm.design_airflow.m == 0.0:
        raise InvalidPreconditionError('system.design_airflow')
    if norm.floor_area.m == 0.0:
        raise InvalidPreconditionError('geometry.floor_area')
    if norm.design_airflow is None:
        if norm.T_supply is None or norm.T_supply.m >= norm.T_in.m:
            raise InvalidPreconditionError(
                'system.design_airflow',
                "a design airflow, or a target supply temperature below the "
                "indoor temperature, is required"
            )
    if norm.T_wb_out is None and norm.RH_out is None:
        raise InvalidPreconditionError(
            'design.RH_out',
            "the outdoor wet-bulb temperature or relative humidity is required"
        )


def _check_non_negative(field: str, value: Quantity | float | None) -> None:
    if value is None:
        return
    m = value.m if isinstance(value, Quantity) else value
    if m < 0.0:
        raise OutOfRangeError(field, m, "value cannot be negative")


def _check_RH(field: str, RH: Quantity | None) -> None:
    if RH is None:
        return
    if not 0.0 <= RH.to('pct').m <= 100.0:
        raise OutOfRangeError(field, RH.to('pct').m, "relative humidity must lie between 0 and 100 %")


def validate(norm: NormalizedInput, mode: CalculationMode) -> None:
    """Raises `OutOfRangeError` for the first input that lies outside its
    physically plausible range.
    """
    for field, value in (
        ('geometry.floor_area', norm.floor_area),
        ('geometry.height', norm.height),
        ('occupancy.count', norm.n_people),
        ('internal_loads.lighting', norm.lighting),
        ('internal_loads.equipment', norm.equipment),
        ('envelope.window.area', norm.window_area),
        ('envelope.window.U', norm.window_U),
        ('envelope.window.solar_gain', norm.solar_gain),
        ('envelope.wall_area', norm.wall_area),
        ('envelope.wall_U', norm.wall_U),
        ('envelope.roof_area', norm.roof_area),
        ('envelope.roof_U', norm.roof_U),
        ('air_exchange.air_changes', norm.air_changes),
        ('air_exchange.outdoor_air_per_person', norm.V_dot_person),
        ('design.safety_factor', norm.safety_factor),
    ):
        _check_non_negative(field, value)
    if mode is not CalculationMode.PSYCHROMETRIC:
        return
    _check_non_negative('system.design_airflow', norm.design_airflow)
    _check_non_negative('system.dP_fan', norm.dP_fan)
    eta = norm.eta_fan.to('frac').m
    if not 0.0 < eta <= 1.0:
        raise OutOfRangeError('system.eta_fan', eta, "fan efficiency must lie in (0, 1]")
    _check_RH('design.RH_out', norm.RH_out)
    _check_RH('design.RH_in', norm.RH_in)
    _check_RH('design.RH_out_winter', norm.RH_out_winter)
    if norm.T_wb_out is not None and norm.T_wb_out.m > norm.T_out.m:
        raise OutOfRangeError(
            'design.T_wb_out', norm.T_wb_out.m,
            f"wet-bulb temperature cannot exceed the dry-bulb temperature ({norm.T_out.m} °C)"
        )
