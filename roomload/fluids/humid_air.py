import math
from CoolProp.HumidAirProp import HAPropsSI
from .. import Quantity
from ..exceptions import OutOfRangeError
from . import psychrometrics as psy
from .constants import STANDARD_PRESSURE

Q_ = Quantity


class HumidAir:
    """State of moist air, fixed by its dry-bulb temperature and its humidity
    ratio at a given total pressure.

    Relative humidity and enthalpy follow the correlations in module
    `psychrometrics`, the same ones the load and coil calculations use.
    Dew point, wet-bulb temperature and specific volume come from CoolProp.
    """
    _P: float = STANDARD_PRESSURE.to('Pa').m

    def __init__(self, Tdb: Quantity, W: Quantity, P: Quantity | None = None):
        if P is not None: self.P = P
        self._Tdb = Tdb.to('degC').m
        self._W = W.to('kg / kg').m
        self._validate_inputs()

    def _validate_inputs(self):
        for k, v in (('Tdb', self._Tdb), ('W', self._W)):
            if v is None or math.isnan(v):
                raise ValueError(
                    f"Humid air state cannot be determined: "
                    f"parameter {k} is NaN or None."
                )
        if self._W < 0.0:
            raise OutOfRangeError('W', self._W, "humidity ratio cannot be negative")

    @classmethod
    def from_RH(cls, Tdb: Quantity, RH: Quantity, P: Quantity | None = None) -> 'HumidAir':
        """Creates the state of air with dry-bulb temperature `Tdb` and
        relative humidity `RH`.
        """
        P_ = (P or STANDARD_PRESSURE).to('Pa').m
        W = psy.humidity_ratio_from_RH(Tdb.to('degC').m, RH.to('pct').m, P_)
        return cls(Tdb, Q_(W, 'kg / kg'), P)

    @classmethod
    def from_Twb(cls, Tdb: Quantity, Twb: Quantity, P: Quantity | None = None) -> 'HumidAir':
        """Creates the state of air with dry-bulb temperature `Tdb` and
        thermodynamic wet-bulb temperature `Twb`.
        """
        P_ = (P or STANDARD_PRESSURE).to('Pa').m
        W = psy.humidity_ratio_from_Twb(Tdb.to('degC').m, Twb.to('degC').m, P_)
        return cls(Tdb, Q_(W, 'kg / kg'), P)

    @classmethod
    def saturated(cls, Tdb: Quantity, P: Quantity | None = None) -> 'HumidAir':
        """Creates the state of saturated air at dry-bulb temperature `Tdb`."""
        P_ = (P or STANDARD_PRESSURE).to('Pa').m
        W = psy.saturation_humidity_ratio(Tdb.to('degC').m, P_)
        return cls(Tdb, Q_(W, 'kg / kg'), P)

    def __str__(self):
        return (
            f"{self.Tdb.to('degC'):~P.2f} DB, "
            f"{self.W.to('g/kg'):~P.2f} AH "
            f"({self.RH.to('pct'):~P.0f} RH)"
        )

    def __repr__(self):
        return f"HumidAir(Tdb={self._Tdb:.3f} °C, W={self._W:.6f} kg/kg)"

    @property
    def P(self) -> Quantity:
        return Q_(self._P, 'Pa')

    @P.setter
    def P(self, v: Quantity):
        self._P = v.to('Pa').m

    @property
    def Tdb(self) -> Quantity:
        return Q_(self._Tdb, 'degC')

    @property
    def W(self) -> Quantity:
        return Q_(self._W, 'kg / kg')

    @property
    def Pw(self) -> Quantity:
        return Q_(psy.vapor_pressure(self._W, self._P), 'Pa')

    @property
    def RH(self) -> Quantity:
        return Q_(psy.relative_humidity(self._Tdb, self._W, self._P), 'pct')

    @property
    def h(self) -> Quantity:
        return Q_(psy.enthalpy(self._Tdb, self._W), 'J / kg')

    def _get_property(self, sym_out: str) -> float:
        try:
            val_out = HAPropsSI(sym_out, 'P', self._P, 'Tdb', self._Tdb + 273.15, 'W', self._W)
        except ValueError:
            val_out = float('nan')
        return val_out

    @property
    def v(self) -> Quantity:
        """Specific volume per unit mass of dry air."""
        return Q_(self._get_property('V'), 'm ** 3 / kg')

    @property
    def rho(self) -> Quantity:
        return 1 / self.v

    @property
    def Tdp(self) -> Quantity:
        if self._W <= 0.0:
            # dry air has no dew point
            return Q_(float('nan'), 'degC')
        return Q_(self._get_property('Tdp'), 'K').to('degC')

    @property
    def Twb(self) -> Quantity:
        if self.RH.to('pct').m >= 100.0 - 1e-6:
            return self.Tdb
        return Q_(self._get_property('Twb'), 'K').to('degC')
