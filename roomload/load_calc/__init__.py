from .tables import (
    ActivityLevel,
    GlassType,
    Orientation,
    InsulationType,
    BuildingType,
    EquipmentClass,
    AirSystemType,
    HEAT_GAIN_PERSON,
    HEAT_GAIN_PERSON_SEN_LAT,
    U_VALUE_WINDOW,
    SOLAR_RADIATION,
    U_VALUE_INSULATION
)

from .internal_heat_gains import (
    InternalHeatGain,
    PeopleHeatGain,
    LightingHeatGain,
    EquipmentHeatGain
)

from .envelope import (
    ExteriorSurface,
    Fenestration,
    clamped_temperature_difference
)

from .air_exchange import (
    AirExchange,
    Infiltration,
    Ventilation
)

from .space import (
    LoadComponent,
    LoadBreakdown,
    HeatingLoad,
    Space
)
