from __future__ import annotations

from .. import Quantity
from ..fluids import HumidAir, RHO_STANDARD_AIR, CP_DRY_AIR, H_FG
from .envelope import clamped_temperature_difference

Q_ = Quantity


class AirExchange:
    """Outdoor air entering the zone. The mass flow rate of dry air follows
    from the volume flow rate and the density of standard air.
    """

    def __init__(self, name: str):
        self.name = name
        self.V_dot: Quantity = Q_(0.0, 'm ** 3 / s')

    @property
    def m_dot(self) -> Quantity:
        """Mass flow rate of dry air."""
        return (RHO_STANDARD_AIR * self.V_dot).to('kg / s')

    def Q_dot_sen(self, outdoor_air: HumidAir, indoor_air: HumidAir) -> Quantity:
        dT = outdoor_air.Tdb.to('K') - indoor_air.Tdb.to('K')
        return (self.m_dot * CP_DRY_AIR * dT).to('W')

    def Q_dot_lat(self, outdoor_air: HumidAir, indoor_air: HumidAir) -> Quantity:
        dW = outdoor_air.W - indoor_air.W
        return (self.m_dot * H_FG * dW).to('W')

    def Q_dot_heating(self, indoor_air: HumidAir, outdoor_air: HumidAir) -> Quantity:
        """Sensible heat needed to warm up the entering winter air. Zero when
        the outdoor air is not colder than the indoor air.
        """
        dT = clamped_temperature_difference(indoor_air.Tdb, outdoor_air.Tdb)
        return (self.m_dot * CP_DRY_AIR * dT).to('W')


class Infiltration(AirExchange):
    """Uncontrolled leakage of outdoor air into the zone, expressed as a
    number of air changes per hour of the zone volume. Only a load is
    counted, never a cooling or dehumidification credit.
    """

    def __init__(self, name: str):
        super().__init__(name)
        self.n_ach: Quantity = Q_(0.0, '1 / hr')

    @classmethod
    def create(cls, name: str, volume: Quantity, n_ach: Quantity) -> Infiltration:
        obj = cls(name)
        obj.n_ach = n_ach.to('1 / hr')
        obj.V_dot = (n_ach * volume).to('m ** 3 / s')
        return obj

    def Q_dot_sen(self, outdoor_air: HumidAir, indoor_air: HumidAir) -> Quantity:
        dT = clamped_temperature_difference(outdoor_air.Tdb, indoor_air.Tdb)
        return (self.m_dot * CP_DRY_AIR * dT).to('W')

    def Q_dot_lat(self, outdoor_air: HumidAir, indoor_air: HumidAir) -> Quantity:
        dW = max(Q_(0.0, 'kg / kg'), outdoor_air.W - indoor_air.W)
        return (self.m_dot * H_FG * dW).to('W')


class Ventilation(AirExchange):
    """Outdoor air deliberately supplied to the zone at a fixed rate per
    occupant. Its sensible and latent contributions keep their sign: when
    outdoor air is cooler or drier than the zone air, the contribution is
    negative. The winter heat loss counts only the heating of colder
    outdoor air.
    """

    def __init__(self, name: str):
        super().__init__(name)
        self.n_people: int = 0
        self.V_dot_person: Quantity = Q_(0.0, 'L / s')

    @classmethod
    def create(cls, name: str, n_people: int, V_dot_person: Quantity) -> Ventilation:
        obj = cls(name)
        obj.n_people = n_people
        obj.V_dot_person = V_dot_person.to('L / s')
        obj.V_dot = (n_people * V_dot_person).to('m ** 3 / s')
        return obj
