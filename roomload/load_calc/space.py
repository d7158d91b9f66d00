from __future__ import annotations

from dataclasses import dataclass, field
import pandas as pd
from .. import Quantity
from ..constants import WATT_TO_BTU
from ..fluids import HumidAir
from ..logging import ModuleLogger
from .internal_heat_gains import InternalHeatGain
from .envelope import ExteriorSurface, Fenestration
from .air_exchange import Infiltration, Ventilation

Q_ = Quantity

logger = ModuleLogger.get_logger(__name__)
logger.setLevel(ModuleLogger.WARNING)


@dataclass(frozen=True)
class LoadComponent:
    """Sensible and latent contribution of one heat source to the zone
    load.
    """
    name: str
    sensible: Quantity = Q_(0.0, 'W')
    latent: Quantity = Q_(0.0, 'W')

    @property
    def total(self) -> Quantity:
        return self.sensible + self.latent


@dataclass(frozen=True)
class LoadBreakdown:
    """Cooling load of the zone per heat source, with the safety margin
    applied once to the subtotal.

    The subtotal is never negative: a net cooling credit is not a load.
    Ventilation air is part of the subtotal, but not of the room load
    (`room_sensible`, `room_latent`) that the supply air needs to remove, as
    ventilation air is treated by the cooling coil before it enters the
    zone.
    """
    people: LoadComponent
    lighting: LoadComponent
    equipment: LoadComponent
    windows: LoadComponent
    walls: LoadComponent
    roof: LoadComponent
    infiltration: LoadComponent
    ventilation: LoadComponent
    safety_factor: Quantity = Q_(20.0, 'pct')

    @property
    def components(self) -> tuple[LoadComponent, ...]:
        return (
            self.people, self.lighting, self.equipment, self.windows,
            self.walls, self.roof, self.infiltration, self.ventilation
        )

    @property
    def walls_and_ceiling(self) -> Quantity:
        return self.walls.total + self.roof.total

    @property
    def sensible_subtotal(self) -> Quantity:
        return sum((c.sensible for c in self.components), Q_(0.0, 'W'))

    @property
    def latent_subtotal(self) -> Quantity:
        return sum((c.latent for c in self.components), Q_(0.0, 'W'))

    @property
    def subtotal(self) -> Quantity:
        Q_sub = self.sensible_subtotal + self.latent_subtotal
        return max(Q_(0.0, 'W'), Q_sub)

    @property
    def factor(self) -> float:
        return 1.0 + self.safety_factor.to('frac').m

    @property
    def total(self) -> Quantity:
        return self.subtotal * self.factor

    @property
    def total_btu(self) -> Quantity:
        return Q_(self.total.to('W').m * WATT_TO_BTU, 'Btu / hr')

    @property
    def total_tons(self) -> Quantity:
        return self.total.to('TR')

    @property
    def room_sensible(self) -> Quantity:
        """Design sensible load of the room, without ventilation air and
        including the safety margin.
        """
        Q_sen = self.sensible_subtotal - self.ventilation.sensible
        return max(Q_(0.0, 'W'), Q_sen) * self.factor

    @property
    def room_latent(self) -> Quantity:
        """Design latent load of the room, without ventilation air and
        including the safety margin.
        """
        Q_lat = self.latent_subtotal - self.ventilation.latent
        return max(Q_(0.0, 'W'), Q_lat) * self.factor

    def to_dataframe(self, unit: str = 'W', n_digits: int = 1) -> pd.DataFrame:
        """Returns a Pandas DataFrame with one row per heat source."""
        d = {
            'source': [],
            f'sensible [{unit}]': [],
            f'latent [{unit}]': [],
            f'total [{unit}]': []
        }
        for c in self.components:
            d['source'].append(c.name)
            d[f'sensible [{unit}]'].append(round(c.sensible.to(unit).m, n_digits))
            d[f'latent [{unit}]'].append(round(c.latent.to(unit).m, n_digits))
            d[f'total [{unit}]'].append(round(c.total.to(unit).m, n_digits))
        return pd.DataFrame(d)


@dataclass(frozen=True)
class HeatingLoad:
    """Heat loss of the zone at winter design conditions. Internal heat
    gains are not credited, and neither is outdoor air warmer than the zone.
    """
    conduction: dict[str, Quantity] = field(default_factory=dict)
    infiltration: Quantity = Q_(0.0, 'W')
    ventilation: Quantity = Q_(0.0, 'W')
    safety_factor: Quantity = Q_(20.0, 'pct')

    @property
    def room_subtotal(self) -> Quantity:
        return sum(self.conduction.values(), Q_(0.0, 'W')) + self.infiltration

    @property
    def room_total(self) -> Quantity:
        """Design heating load of the room (without ventilation air)."""
        return self.room_subtotal * (1.0 + self.safety_factor.to('frac').m)

    @property
    def total(self) -> Quantity:
        """Design heating load including the ventilation air."""
        Q_sub = self.room_subtotal + self.ventilation
        return Q_sub * (1.0 + self.safety_factor.to('frac').m)


class Space:
    """A single room or zone that collects the heat sources acting on it."""

    def __init__(self):
        self.ID: str = ''
        self.floor_area: Quantity = Q_(0.0, 'm ** 2')
        self.height: Quantity = Q_(0.0, 'm')
        self.internal_heat_gains: dict[str, InternalHeatGain] = {}
        self.exterior_surfaces: dict[str, ExteriorSurface] = {}
        self.infiltration: Infiltration | None = None
        self.ventilation: Ventilation | None = None

    @classmethod
    def create(cls, ID: str, floor_area: Quantity, height: Quantity) -> Space:
        """Creates a space.

        Parameters
        ----------
        ID: str
            Name of the space.
        floor_area: Quantity
            Floor area of the space.
        height: Quantity
            Ceiling height of the space.
        """
        self = cls()
        self.ID = ID
        self.floor_area = floor_area.to('m ** 2')
        self.height = height.to('m')
        return self

    @property
    def volume(self) -> Quantity:
        return (self.floor_area * self.height).to('m ** 3')

    def add_internal_heat_gain(self, *ihg: InternalHeatGain) -> None:
        self.internal_heat_gains.update({i.name: i for i in ihg})

    def add_exterior_surface(self, *surfaces: ExteriorSurface) -> None:
        self.exterior_surfaces.update({s.ID: s for s in surfaces})

    def add_infiltration(self, n_ach: Quantity) -> Infiltration:
        self.infiltration = Infiltration.create('infiltration', self.volume, n_ach)
        return self.infiltration

    def add_ventilation(self, n_people: int, V_dot_person: Quantity) -> Ventilation:
        self.ventilation = Ventilation.create('ventilation', n_people, V_dot_person)
        return self.ventilation

    def _internal_component(self, name: str) -> LoadComponent:
        ihg = self.internal_heat_gains.get(name)
        if ihg is None:
            return LoadComponent(name)
        Q_sen, Q_lat = ihg.Q_dot()
        return LoadComponent(name, Q_sen, Q_lat)

    def _surface_component(self, name: str, outdoor_air: HumidAir, indoor_air: HumidAir) -> LoadComponent:
        surface = self.exterior_surfaces.get(name)
        if surface is None:
            return LoadComponent(name)
        return LoadComponent(name, surface.Q_dot_cooling(outdoor_air.Tdb, indoor_air.Tdb))

    def get_cooling_load(
        self,
        outdoor_air: HumidAir,
        indoor_air: HumidAir,
        safety_factor: Quantity,
        latent: bool = True
    ) -> LoadBreakdown:
        """Returns the cooling load of the space at the given outdoor and
        indoor air states.

        Parameters
        ----------
        outdoor_air:
            Outdoor air state at summer design conditions.
        indoor_air:
            Desired state of the zone air.
        safety_factor:
            Safety margin added to the subtotal of the heat gains.
        latent:
            If False, latent heat is not counted separately (the heat release
            of people is then their total heat release, see
            `PeopleHeatGain.from_activity`) and ventilation air is ignored.
        """
        infiltration = LoadComponent('infiltration')
        if self.infiltration is not None:
            infiltration = LoadComponent(
                'infiltration',
                self.infiltration.Q_dot_sen(outdoor_air, indoor_air),
                self.infiltration.Q_dot_lat(outdoor_air, indoor_air) if latent else Q_(0.0, 'W')
            )
        ventilation = LoadComponent('ventilation')
        if latent and self.ventilation is not None:
            ventilation = LoadComponent(
                'ventilation',
                self.ventilation.Q_dot_sen(outdoor_air, indoor_air),
                self.ventilation.Q_dot_lat(outdoor_air, indoor_air)
            )
        breakdown = LoadBreakdown(
            people=self._internal_component('people'),
            lighting=self._internal_component('lighting'),
            equipment=self._internal_component('equipment'),
            windows=self._surface_component('windows', outdoor_air, indoor_air),
            walls=self._surface_component('walls', outdoor_air, indoor_air),
            roof=self._surface_component('roof', outdoor_air, indoor_air),
            infiltration=infiltration,
            ventilation=ventilation,
            safety_factor=safety_factor.to('pct')
        )
        if (breakdown.sensible_subtotal + breakdown.latent_subtotal).m < 0.0:
            logger.warning(
                f"space '{self.ID}': heat gains sum up to a net cooling credit "
                f"of {breakdown.sensible_subtotal + breakdown.latent_subtotal:~P.1f}; "
                "subtotal set to 0 W"
            )
        logger.debug(
            f"space '{self.ID}': cooling load subtotal = "
            f"{breakdown.subtotal:~P.1f}, total = {breakdown.total:~P.1f}"
        )
        return breakdown

    def get_heating_load(
        self,
        outdoor_air: HumidAir,
        indoor_air: HumidAir,
        safety_factor: Quantity
    ) -> HeatingLoad:
        """Returns the heat loss of the space at winter design conditions."""
        conduction = {
            ID: surface.Q_dot_heating(indoor_air.Tdb, outdoor_air.Tdb)
            for ID, surface in self.exterior_surfaces.items()
        }
        Q_inf = Q_(0.0, 'W')
        if self.infiltration is not None:
            Q_inf = self.infiltration.Q_dot_heating(indoor_air, outdoor_air)
        Q_ven = Q_(0.0, 'W')
        if self.ventilation is not None:
            Q_ven = self.ventilation.Q_dot_heating(indoor_air, outdoor_air)
        return HeatingLoad(conduction, Q_inf, Q_ven, safety_factor.to('pct'))

    def get_summary(self, breakdown: LoadBreakdown, unit: str = 'W', n_digits: int = 1) -> pd.DataFrame:
        """Returns a Pandas DataFrame with the cooling load per heat source of
        the space, followed by the subtotal and the total with safety margin.
        """
        df = breakdown.to_dataframe(unit, n_digits)
        totals = pd.DataFrame({
            'source': ['subtotal', 'total'],
            f'sensible [{unit}]': [
                round(breakdown.sensible_subtotal.to(unit).m, n_digits),
                round(breakdown.sensible_subtotal.to(unit).m * breakdown.factor, n_digits)
            ],
            f'latent [{unit}]': [
                round(breakdown.latent_subtotal.to(unit).m, n_digits),
                round(breakdown.latent_subtotal.to(unit).m * breakdown.factor, n_digits)
            ],
            f'total [{unit}]': [
                round(breakdown.subtotal.to(unit).m, n_digits),
                round(breakdown.total.to(unit).m, n_digits)
            ]
        })
        return pd.concat([df, totals], ignore_index=True)
