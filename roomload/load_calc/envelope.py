from __future__ import annotations

from .. import Quantity
from ..constants import SHADING_FACTOR
from .tables import Orientation, SOLAR_RADIATION

Q_ = Quantity


def clamped_temperature_difference(T_hot: Quantity, T_cold: Quantity) -> Quantity:
    """Returns `T_hot - T_cold`, or zero if `T_cold` is the higher of the two
    temperatures: a temperature difference in the wrong direction never
    counts as a load.
    """
    dT = T_hot.to('degC').m - T_cold.to('degC').m
    return Q_(max(0.0, dT), 'K')


class ExteriorSurface:
    """Opaque or transparent surface of the zone envelope (wall, roof,
    window) that conducts heat between the zone and the outdoors.
    """

    def __init__(self):
        self.ID: str = ''
        self.area: Quantity = Q_(0.0, 'm ** 2')
        self.U: Quantity = Q_(0.0, 'W / (m ** 2 * K)')

    @classmethod
    def create(cls, ID: str, area: Quantity, U: Quantity) -> ExteriorSurface:
        """Creates an exterior surface.

        Parameters
        ----------
        ID: str
            Name to identify the surface.
        area: Quantity
            Area of the surface.
        U: Quantity
            Thermal transmittance (U-value) of the surface.
        """
        obj = cls()
        obj.ID = ID
        obj.area = area.to('m ** 2')
        obj.U = U.to('W / (m ** 2 * K)')
        return obj

    @property
    def UA(self) -> Quantity:
        return (self.U * self.area).to('W / K')

    def Q_dot_cooling(self, T_out: Quantity, T_in: Quantity) -> Quantity:
        """Heat gain by conduction when the outdoor temperature `T_out` exceeds
        the indoor temperature `T_in`, else zero.
        """
        dT = clamped_temperature_difference(T_out, T_in)
        return (self.UA * dT).to('W')

    def Q_dot_heating(self, T_in: Quantity, T_out: Quantity) -> Quantity:
        """Heat loss by conduction when the indoor temperature `T_in` exceeds
        the winter outdoor temperature `T_out`, else zero.
        """
        dT = clamped_temperature_difference(T_in, T_out)
        return (self.UA * dT).to('W')


class Fenestration(ExteriorSurface):
    """Window that, next to conduction, lets in solar radiation."""

    def __init__(self):
        super().__init__()
        self.orientation: Orientation = Orientation.SOUTH
        self.shaded: bool = False
        self._Q_dot_solar: Quantity | None = None

    @classmethod
    def create(
        cls,
        ID: str,
        area: Quantity,
        U: Quantity,
        orientation: Orientation = Orientation.SOUTH,
        shaded: bool = False,
        Q_dot_solar: Quantity | None = None
    ) -> Fenestration:
        """Creates a window.

        Parameters
        ----------
        ID: str
            Name to identify the window.
        area: Quantity
            Glazed area.
        U: Quantity
            U-value of the window.
        orientation: Orientation
            Facade orientation of the window; selects the solar radiation
            intensity.
        shaded: bool
            Whether the window is shaded from the outside, which halves the
            solar heat gain.
        Q_dot_solar: Quantity, optional
            Solar heat gain through the window if known directly. Takes
            precedence over the gain derived from `orientation` and `shaded`.
        """
        obj = super().create(ID, area, U)
        obj.orientation = orientation
        obj.shaded = shaded
        obj._Q_dot_solar = Q_dot_solar.to('W') if Q_dot_solar is not None else None
        return obj

    @property
    def Q_dot_solar(self) -> Quantity:
        """Solar heat gain through the window."""
        if self._Q_dot_solar is not None:
            return self._Q_dot_solar
        I_sol = SOLAR_RADIATION[self.orientation]
        f_shade = SHADING_FACTOR if self.shaded else 1.0
        return (f_shade * I_sol * self.area).to('W')

    def Q_dot_cooling(self, T_out: Quantity, T_in: Quantity) -> Quantity:
        """Sum of conduction and solar heat gain through the window."""
        return super().Q_dot_cooling(T_out, T_in) + self.Q_dot_solar

    def Q_dot_conduction(self, T_out: Quantity, T_in: Quantity) -> Quantity:
        return super().Q_dot_cooling(T_out, T_in)
