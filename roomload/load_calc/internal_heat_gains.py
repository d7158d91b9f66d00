from abc import ABC, abstractmethod
from .. import Quantity
from .tables import (
    ActivityLevel,
    HEAT_GAIN_PERSON,
    HEAT_GAIN_PERSON_SEN_LAT
)

Q_ = Quantity


class InternalHeatGain(ABC):

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def Q_dot(self) -> tuple[Quantity, Quantity]:
        """Returns a 2-tuple with the sensible and the latent internal heat
        gain in Watts.
        """
        ...


class PeopleHeatGain(InternalHeatGain):
    """Represents the heat gain from people in the space."""

    def __init__(self, name: str):
        super().__init__(name)
        self.n_people: int = 0
        self.Q_dot_sen_person: Quantity = Q_(0.0, 'W')
        self.Q_dot_lat_person: Quantity = Q_(0.0, 'W')

    @classmethod
    def create(
        cls,
        name: str,
        n_people: int,
        Q_dot_sen_person: Quantity,
        Q_dot_lat_person: Quantity = Q_(0.0, 'W')
    ) -> 'PeopleHeatGain':
        """
        Creates a `PeopleHeatGain` object.

        Parameters
        ----------
        name:
            Identifier for the internal heat gain
        n_people:
            Number of people in the space.
        Q_dot_sen_person :
            Sensible heat release per person.
        Q_dot_lat_person :
            Latent heat release per person.
        """
        phg = cls(name)
        phg.n_people = n_people
        phg.Q_dot_sen_person = Q_dot_sen_person.to('W')
        phg.Q_dot_lat_person = Q_dot_lat_person.to('W')
        return phg

    @classmethod
    def from_activity(
        cls,
        name: str,
        n_people: int,
        activity: ActivityLevel,
        split_latent: bool = True
    ) -> 'PeopleHeatGain':
        """Creates a `PeopleHeatGain` object with the heat release per person
        looked up for the given activity level. If `split_latent` is False,
        the total heat release per person is counted as sensible heat.
        """
        if split_latent:
            Q_dot_sen, Q_dot_lat = HEAT_GAIN_PERSON_SEN_LAT[activity]
            return cls.create(name, n_people, Q_dot_sen, Q_dot_lat)
        return cls.create(name, n_people, HEAT_GAIN_PERSON[activity])

    def Q_dot(self) -> tuple[Quantity, Quantity]:
        Q_dot_sen = self.n_people * self.Q_dot_sen_person
        Q_dot_lat = self.n_people * self.Q_dot_lat_person
        return Q_dot_sen, Q_dot_lat


class LightingHeatGain(InternalHeatGain):
    """Represents the heat gain from space lighting. All electric power of the
    lighting is released as sensible heat.
    """

    def __init__(self, name: str):
        super().__init__(name)
        self.Q_dot_light: Quantity = Q_(0.0, 'W')

    @classmethod
    def create(cls, name: str, Q_dot_light: Quantity) -> 'LightingHeatGain':
        lhg = cls(name)
        lhg.Q_dot_light = Q_dot_light.to('W')
        return lhg

    def Q_dot(self) -> tuple[Quantity, Quantity]:
        return self.Q_dot_light, Q_(0.0, 'W')


class EquipmentHeatGain(InternalHeatGain):
    """Represents the heat gain from appliances and equipment in the space,
    counted as sensible heat only.
    """

    def __init__(self, name: str):
        super().__init__(name)
        self.Q_dot_eqp: Quantity = Q_(0.0, 'W')

    @classmethod
    def create(cls, name: str, Q_dot_eqp: Quantity) -> 'EquipmentHeatGain':
        ehg = cls(name)
        ehg.Q_dot_eqp = Q_dot_eqp.to('W')
        return ehg

    def Q_dot(self) -> tuple[Quantity, Quantity]:
        return self.Q_dot_eqp, Q_(0.0, 'W')
