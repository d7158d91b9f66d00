"""Input record of the load calculation.

Every numeric field is a pint quantity in any compatible unit, or None when
the user left it blank. Blank fields are coerced to zero or to a documented
default when the input is normalized (see `normalization.normalize`).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from .. import Quantity
from ..load_calc import (
    ActivityLevel,
    GlassType,
    Orientation,
    InsulationType,
    BuildingType,
    EquipmentClass,
    AirSystemType
)


@dataclass
class Geometry:
    """Dimensions of the room. The floor area is `floor_area` if given, else
    `length` x `width`; the height is `height` if given, else
    `ceiling_height`.
    """
    length: Quantity | None = None
    width: Quantity | None = None
    height: Quantity | None = None
    floor_area: Quantity | None = None
    ceiling_height: Quantity | None = None


@dataclass
class Occupancy:
    count: int | None = None
    activity: ActivityLevel = ActivityLevel.SITTING


@dataclass
class Window:
    """Glazing of the room. A direct `U` overrides the U-value of
    `glass_type`; a direct `solar_gain` overrides the gain derived from
    `orientation` and `shaded`.
    """
    area: Quantity | None = None
    U: Quantity | None = None
    glass_type: GlassType = GlassType.DOUBLE
    orientation: Orientation = Orientation.SOUTH
    shaded: bool = False
    solar_gain: Quantity | None = None


@dataclass
class Envelope:
    """Opaque and glazed envelope of the room. Direct U-values of walls and
    roof override the U-value of the `insulation` class.
    """
    window: Window = field(default_factory=Window)
    wall_area: Quantity | None = None
    wall_U: Quantity | None = None
    roof_area: Quantity | None = None
    roof_U: Quantity | None = None
    insulation: InsulationType = InsulationType.STANDARD


@dataclass
class InternalLoads:
    lighting: Quantity | None = None
    equipment: Quantity | None = None


@dataclass
class AirExchangeRates:
    """Infiltration as air changes per hour of the room volume and outdoor
    air for ventilation per occupant.
    """
    air_changes: Quantity | None = None
    outdoor_air_per_person: Quantity | None = None


@dataclass
class DesignConditions:
    """Outdoor and indoor design conditions.

    Attributes
    ----------
    T_out:
        Summer outdoor dry-bulb temperature.
    T_wb_out:
        Summer outdoor wet-bulb temperature. Takes precedence over `RH_out`.
    RH_out:
        Summer outdoor relative humidity.
    T_in:
        Indoor dry-bulb temperature (default 24 °C).
    RH_in:
        Indoor relative humidity (default 50 %).
    T_out_winter:
        Winter outdoor dry-bulb temperature. The heating pass only runs when
        it is given.
    RH_out_winter:
        Winter outdoor relative humidity (default 80 %).
    safety_factor:
        Safety margin on the subtotal of the cooling load (default 20 %).
    T_supply:
        Target supply air temperature, used to derive the supply air flow
        rate when no design airflow is given.
    altitude:
        Site altitude, sets the atmospheric pressure.
    """
    T_out: Quantity | None = None
    T_wb_out: Quantity | None = None
    RH_out: Quantity | None = None
    T_in: Quantity | None = None
    RH_in: Quantity | None = None
    T_out_winter: Quantity | None = None
    RH_out_winter: Quantity | None = None
    safety_factor: Quantity | None = None
    T_supply: Quantity | None = None
    altitude: Quantity | None = None


@dataclass
class SystemData:
    design_airflow: Quantity | None = None
    dP_fan: Quantity | None = None
    eta_fan: Quantity | None = None
    equipment_class: EquipmentClass = EquipmentClass.SPLIT
    air_system: AirSystemType = AirSystemType.CONSTANT_VOLUME


@dataclass
class InputRecord:
    project_name: str = ''
    geometry: Geometry = field(default_factory=Geometry)
    occupancy: Occupancy = field(default_factory=Occupancy)
    envelope: Envelope = field(default_factory=Envelope)
    internal_loads: InternalLoads = field(default_factory=InternalLoads)
    air_exchange: AirExchangeRates = field(default_factory=AirExchangeRates)
    design: DesignConditions = field(default_factory=DesignConditions)
    system: SystemData = field(default_factory=SystemData)
    building_type: BuildingType = BuildingType.RESIDENTIAL
