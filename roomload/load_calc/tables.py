"""Enumeration-indexed tables of design data.

Every table is an immutable mapping that must hold an entry for each member
of its key enumeration; a missing entry raises at import time.
"""
from enum import Enum
from types import MappingProxyType
from typing import Mapping, TypeVar
from .. import Quantity

Q_ = Quantity

TEnum = TypeVar('TEnum', bound=Enum)


class ActivityLevel(Enum):
    SITTING = 'sitting'
    LIGHT_WORK = 'light_work'
    HEAVY_WORK = 'heavy_work'
    ASSEMBLY = 'assembly'


class GlassType(Enum):
    SINGLE = 'single'
    DOUBLE = 'double'
    LOW_E = 'low_e'


class Orientation(Enum):
    NORTH = 'north'
    EAST = 'east'
    SOUTH = 'south'
    WEST = 'west'


class InsulationType(Enum):
    NONE = 'none'
    STANDARD = 'standard'
    HIGH = 'high'


class BuildingType(Enum):
    RESIDENTIAL = 'residential'
    COMMERCIAL = 'commercial'
    INDUSTRIAL = 'industrial'


class EquipmentClass(Enum):
    SPLIT = 'split'
    PACKAGED = 'packaged'
    CHILLED_WATER = 'chilled_water'


class AirSystemType(Enum):
    CONSTANT_VOLUME = 'constant_volume'
    VARIABLE_VOLUME = 'variable_volume'


def _table(key_type: type[TEnum], entries: dict[TEnum, object]) -> Mapping[TEnum, object]:
    missing = [member.name for member in key_type if member not in entries]
    if missing:
        raise ValueError(
            f"table keyed by {key_type.__name__} has no entry for: "
            f"{', '.join(missing)}"
        )
    return MappingProxyType(dict(entries))


# Total heat release per person used by the sensible-only calculation.
HEAT_GAIN_PERSON = _table(ActivityLevel, {
    ActivityLevel.SITTING: Q_(100.0, 'W'),
    ActivityLevel.LIGHT_WORK: Q_(120.0, 'W'),
    ActivityLevel.HEAVY_WORK: Q_(250.0, 'W'),
    ActivityLevel.ASSEMBLY: Q_(95.0, 'W')
})

# Sensible and latent heat release per person (ASHRAE Fundamentals 2017,
# Ch. 18, Table 1, adjusted values). ASSEMBLY holds the rates fitted for
# densely occupied theaters and auditoriums.
HEAT_GAIN_PERSON_SEN_LAT = _table(ActivityLevel, {
    ActivityLevel.SITTING: (Q_(70.0, 'W'), Q_(45.0, 'W')),
    ActivityLevel.LIGHT_WORK: (Q_(80.0, 'W'), Q_(140.0, 'W')),
    ActivityLevel.HEAVY_WORK: (Q_(170.0, 'W'), Q_(300.0, 'W')),
    ActivityLevel.ASSEMBLY: (Q_(65.0, 'W'), Q_(30.0, 'W'))
})

U_VALUE_WINDOW = _table(GlassType, {
    GlassType.SINGLE: Q_(5.8, 'W / (m ** 2 * K)'),
    GlassType.DOUBLE: Q_(2.8, 'W / (m ** 2 * K)'),
    GlassType.LOW_E: Q_(1.8, 'W / (m ** 2 * K)')
})

# Peak solar radiation intensity on glazing per facade orientation.
SOLAR_RADIATION = _table(Orientation, {
    Orientation.NORTH: Q_(100.0, 'W / m ** 2'),
    Orientation.EAST: Q_(350.0, 'W / m ** 2'),
    Orientation.SOUTH: Q_(250.0, 'W / m ** 2'),
    Orientation.WEST: Q_(400.0, 'W / m ** 2')
})

# U-value of walls and ceiling per insulation level.
U_VALUE_INSULATION = _table(InsulationType, {
    InsulationType.NONE: Q_(2.0, 'W / (m ** 2 * K)'),
    InsulationType.STANDARD: Q_(0.6, 'W / (m ** 2 * K)'),
    InsulationType.HIGH: Q_(0.3, 'W / (m ** 2 * K)')
})
