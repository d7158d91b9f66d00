from __future__ import annotations

from dataclasses import dataclass, field
from .. import Quantity
from ..constants import ADP_MAX_ITERATIONS, ADP_TOLERANCE, EPSILON
from ..exceptions import InvalidPreconditionError
from ..logging import ModuleLogger
from ..fluids import HumidAir, RHO_STANDARD_AIR, CP_DRY_AIR, H_FG
from ..fluids import psychrometrics as psy
from ..charts import PsychrometricChart
from .process import AirStream, AdiabaticMixing, Fan, CoolingCoil, T_ADP_MIN

Q_ = Quantity

logger = ModuleLogger.get_logger(__name__)
logger.setLevel(ModuleLogger.WARNING)

MAX_LEAVING_RH = Q_(95.0, 'pct')

DEFAULT_UNITS = {
    'm_dot': ('kg / hr', 1),
    'V_dot': ('m ** 3 / hr', 1),
    'T': ('degC', 2),
    'W': ('g / kg', 2),
    'RH': ('pct', 1),
    'Q_dot': ('kW', 3),
    'SHR': ('frac', 3)
}


def _format_state(air: HumidAir, units: dict[str, tuple[str, int]]) -> str:
    return (
        f"{air.Tdb.to(units['T'][0]):~P.{units['T'][1]}f} DB, "
        f"{air.W.to(units['W'][0]):~P.{units['W'][1]}f} AH "
        f"({air.RH.to(units['RH'][0]):~P.{units['RH'][1]}f} RH)"
    )


@dataclass
class CoolingOutput:
    m_dot_supply: Quantity
    m_dot_vent: Quantity
    m_dot_recir: Quantity
    outdoor_air: HumidAir
    mixed_air: HumidAir
    cooled_air: HumidAir
    supply_air: HumidAir
    zone_air: HumidAir
    Q_dot_sen_zone: Quantity
    Q_dot_lat_zone: Quantity
    SHR_zone: Quantity
    Q_dot_fan: Quantity
    Q_dot_cc_sen: Quantity
    Q_dot_cc_lat: Quantity
    Q_dot_cc: Quantity
    SHR_cc: Quantity
    ADP: HumidAir | None = None
    BF: Quantity | None = None
    adp_iterations: int = 0
    adp_converged: bool = False
    units: dict[str, tuple[str, int]] = field(default_factory=dict)

    def __post_init__(self):
        self.V_dot_supply = self.m_dot_supply / RHO_STANDARD_AIR
        self.V_dot_vent = self.m_dot_vent / RHO_STANDARD_AIR
        self.V_dot_recir = self.m_dot_recir / RHO_STANDARD_AIR
        self.units = {**DEFAULT_UNITS, **self.units}

    @property
    def outdoor_air_fraction(self) -> Quantity:
        m_sup = self.m_dot_supply.to('kg / s').m
        if m_sup <= 0.0:
            return Q_(0.0, 'frac')
        return Q_(self.m_dot_vent.to('kg / s').m / m_sup, 'frac')

    @property
    def states(self) -> dict[str, HumidAir]:
        """Air states along the cooling process, in flow order."""
        return {
            'Outdoor Air': self.outdoor_air,
            'Mixed Air': self.mixed_air,
            'Coil-Leaving Air': self.cooled_air,
            'Supply-Fan-Outlet Air': self.supply_air,
            'Room/Zone Air': self.zone_air
        }

    def __str__(self):
        u = self.units
        output = (
            "supply air mass flow rate = "
            f"{self.m_dot_supply.to(u['m_dot'][0]):~P.{u['m_dot'][1]}f}\n"
            "ventilation air mass flow rate = "
            f"{self.m_dot_vent.to(u['m_dot'][0]):~P.{u['m_dot'][1]}f}\n"
            "recirculation air mass flow rate = "
            f"{self.m_dot_recir.to(u['m_dot'][0]):~P.{u['m_dot'][1]}f}\n"
            "supply air volume flow rate = "
            f"{self.V_dot_supply.to(u['V_dot'][0]):~P.{u['V_dot'][1]}f}\n"
        )
        for name, air in self.states.items():
            output += f"{name.lower()} = {_format_state(air, u)}\n"
        output += (
            "zone cooling load = "
            f"{self.Q_dot_sen_zone.to(u['Q_dot'][0]):~P.{u['Q_dot'][1]}f} (S), "
            f"{self.Q_dot_lat_zone.to(u['Q_dot'][0]):~P.{u['Q_dot'][1]}f} (L), "
            f"{self.SHR_zone.to(u['SHR'][0]):~P.{u['SHR'][1]}f}\n"
            "supply fan heat gain = "
            f"{self.Q_dot_fan.to(u['Q_dot'][0]):~P.{u['Q_dot'][1]}f}\n"
            "cooling coil load = "
            f"{self.Q_dot_cc_sen.to(u['Q_dot'][0]):~P.{u['Q_dot'][1]}f} (S), "
            f"{self.Q_dot_cc_lat.to(u['Q_dot'][0]):~P.{u['Q_dot'][1]}f} (L), "
            f"{self.Q_dot_cc.to(u['Q_dot'][0]):~P.{u['Q_dot'][1]}f}, "
            f"{self.SHR_cc.to(u['SHR'][0]):~P.{u['SHR'][1]}f}\n"
        )
        if self.ADP is not None:
            output += f"apparatus dew point = {self.ADP.Tdb.to(u['T'][0]):~P.{u['T'][1]}f}\n"
        else:
            output += "apparatus dew point = n/a\n"
        if self.BF is not None:
            output += f"bypass factor = {self.BF.to('frac'):~P.3f}"
        else:
            output += "bypass factor = n/a"
        return output

    @property
    def psychrometric_chart(self) -> PsychrometricChart:
        """Returns a psychrometric chart with the cooling processes drawn on
        it.
        """
        psy_chart = PsychrometricChart()
        psy_chart.plot_process(
            name='air mixing',
            start_point=self.outdoor_air,
            end_point=self.zone_air,
            mix_point=self.mixed_air
        )
        psy_chart.plot_process(
            name='air cooling',
            start_point=self.mixed_air,
            end_point=self.cooled_air
        )
        psy_chart.plot_process(
            name='fan heating',
            start_point=self.cooled_air,
            end_point=self.supply_air
        )
        psy_chart.plot_process(
            name='zone',
            start_point=self.supply_air,
            end_point=self.zone_air
        )
        if self.ADP is not None:
            psy_chart.plot_line('coil condition line', self.cooled_air, self.ADP)
            psy_chart.plot_point('apparatus dew point', self.ADP, color='red')
        return psy_chart


class CoolingDesign:
    """Determines the air states and the cooling coil load of a single-zone
    constant-volume system at summer design conditions.

    Notes
    -----
    The supply fan is downstream of the cooling coil (draw-through
    arrangement): the coil must cool the air below the supply temperature by
    the temperature rise across the fan.
    """

    def __init__(
        self,
        zone_air: HumidAir,
        outdoor_air: HumidAir,
        Q_dot_zone_sen: Quantity,
        Q_dot_zone_lat: Quantity,
        V_dot_vent: Quantity,
        V_dot_supply: Quantity | None = None,
        T_supply: Quantity | None = None,
        dP_fan: Quantity | None = None,
        eta_fan: Quantity | None = None,
        adp_max_iterations: int = ADP_MAX_ITERATIONS,
        adp_tolerance: float = ADP_TOLERANCE,
        units: dict[str, tuple[str, int]] | None = None
    ) -> None:
        """Creates a `CoolingDesign` instance.

        Parameters
        ----------
        zone_air:
            Desired state of the zone air.
        outdoor_air:
            State of the outdoor air at summer design conditions.
        Q_dot_zone_sen:
            Sensible cooling load of the zone, without ventilation air.
        Q_dot_zone_lat:
            Latent cooling load of the zone, without ventilation air.
        V_dot_vent:
            Volume flow rate of outdoor ventilation air.
        V_dot_supply: optional
            Design volume flow rate of supply air. If None, the supply air
            flow rate follows from the sensible zone load and `T_supply`.
        T_supply: optional
            Target dry-bulb temperature of the supply air. Only used when
            `V_dot_supply` is None.
        dP_fan: optional
            Supply fan pressure. If None, fan heat is not taken into account.
        eta_fan: optional
            Overall efficiency of the supply fan and motor.
        adp_max_iterations:
            Maximum number of iterations to find the apparatus dew point.
        adp_tolerance:
            Convergence tolerance (K) of the apparatus dew point.
        units: optional
            Units to be used for displaying the results. Keys are:
            'm_dot', 'V_dot', 'Q_dot', 'T', 'W', 'RH' and 'SHR'. Values are
            2-tuples with the unit (str) and the number of decimals (int).
        """
        self.zone_air = zone_air
        self.outdoor_air = outdoor_air
        self.Q_dot_zone_sen = Q_dot_zone_sen.to('W')
        self.Q_dot_zone_lat = Q_dot_zone_lat.to('W')
        self.V_dot_vent = V_dot_vent.to('m ** 3 / s')
        self.V_dot_supply = V_dot_supply
        self.T_supply = T_supply
        self.dP_fan = dP_fan
        self.eta_fan = eta_fan
        self.adp_max_iterations = adp_max_iterations
        self.adp_tolerance = adp_tolerance
        self.units = units or {}

        self.m_dot_supply: Quantity | None = None
        self.m_dot_vent: Quantity | None = None
        self.m_dot_recir: Quantity | None = None
        self.mixed_air: HumidAir | None = None
        self.cooled_air: HumidAir | None = None
        self.supply_air: HumidAir | None = None
        self.supply_fan: Fan | None = None
        self.cooling_coil: CoolingCoil | None = None

    def design(self) -> CoolingOutput:
        """Runs the design calculations and returns the results in a
        `CoolingOutput` instance.
        """
        self.m_dot_supply = self._determine_supply_flow()
        self.mixed_air, self.m_dot_vent, self.m_dot_recir = self._determine_mixed_air()
        self.cooled_air, self.supply_air = self._determine_cooled_air()
        self.cooling_coil = CoolingCoil(
            air_in=self.mixed_air,
            air_out=self.cooled_air,
            m_da=self.m_dot_supply,
            max_iter=self.adp_max_iterations,
            tol=self.adp_tolerance
        )
        adp = self.cooling_coil.adp_solution
        Q_zone = (self.Q_dot_zone_sen + self.Q_dot_zone_lat).to('W').m
        SHR_zone = self.Q_dot_zone_sen.m / Q_zone if Q_zone > 0.0 else 0.0
        logger.debug(
            f"cooling coil: {self.mixed_air} -> {self.cooled_air}, "
            f"Q = {self.cooling_coil.Q.to('kW'):~P.3f}"
        )
        return CoolingOutput(
            m_dot_supply=self.m_dot_supply,
            m_dot_vent=self.m_dot_vent,
            m_dot_recir=self.m_dot_recir,
            outdoor_air=self.outdoor_air,
            mixed_air=self.mixed_air,
            cooled_air=self.cooled_air,
            supply_air=self.supply_air,
            zone_air=self.zone_air,
            Q_dot_sen_zone=self.Q_dot_zone_sen,
            Q_dot_lat_zone=self.Q_dot_zone_lat,
            SHR_zone=Q_(SHR_zone, 'frac'),
            Q_dot_fan=self.supply_fan.Q if self.supply_fan else Q_(0.0, 'W'),
            Q_dot_cc_sen=self.cooling_coil.Q_sen,
            Q_dot_cc_lat=self.cooling_coil.Q_lat,
            Q_dot_cc=self.cooling_coil.Q,
            SHR_cc=self.cooling_coil.SHR,
            ADP=self.cooling_coil.ADP,
            BF=self.cooling_coil.BF,
            adp_iterations=adp.iterations,
            adp_converged=adp.converged,
            units=self.units
        )

    def _determine_supply_flow(self) -> Quantity:
        # the design airflow is a boundary condition; without it, the supply
        # air flow rate follows from the sensible heat balance of the zone at
        # the target supply air temperature
        if self.V_dot_supply is not None:
            m_dot = (RHO_STANDARD_AIR * self.V_dot_supply).to('kg / s')
            if m_dot.m <= 0.0:
                raise InvalidPreconditionError('system.design_airflow')
            return m_dot
        if self.T_supply is None:
            raise InvalidPreconditionError(
                'system.design_airflow',
                "a design airflow or a target supply temperature is required"
            )
        dT = self.zone_air.Tdb.to('degC').m - self.T_supply.to('degC').m
        if dT <= EPSILON or self.Q_dot_zone_sen.m <= 0.0:
            raise InvalidPreconditionError(
                'design.T_supply',
                "the target supply temperature must be below the zone "
                "temperature and the zone must have a sensible cooling load"
            )
        return (self.Q_dot_zone_sen / (CP_DRY_AIR * Q_(dT, 'K'))).to('kg / s')

    def _determine_mixed_air(self) -> tuple[HumidAir, Quantity, Quantity]:
        # outdoor ventilation air mixes with return air from the zone in the
        # mixing plenum upstream of the cooling coil
        m_dot_vent = (RHO_STANDARD_AIR * self.V_dot_vent).to('kg / s')
        if m_dot_vent > self.m_dot_supply:
            logger.warning(
                f"ventilation air flow rate ({m_dot_vent:~P.4f}) exceeds the supply "
                f"air flow rate ({self.m_dot_supply:~P.4f}): the system runs on "
                "100 % outdoor air"
            )
            m_dot_vent = self.m_dot_supply
        m_dot_recir = self.m_dot_supply - m_dot_vent
        mixing_chamber = AdiabaticMixing(
            in1=AirStream(self.zone_air, m_dot_recir),
            in2=AirStream(self.outdoor_air, m_dot_vent)
        )
        return mixing_chamber.stream_out.state, m_dot_vent, m_dot_recir

    def _required_supply_air(self) -> tuple[float, float]:
        # state of the supply air that balances the sensible and latent room
        # load at the supply air flow rate
        m = self.m_dot_supply.to('kg / s').m
        T_s = self.zone_air.Tdb.to('degC').m - self.Q_dot_zone_sen.m / (m * CP_DRY_AIR.m)
        W_s = self.zone_air.W.to('kg / kg').m - self.Q_dot_zone_lat.m / (m * H_FG.to('J / kg').m)
        if W_s < 0.0:
            logger.warning(
                "latent room load cannot be removed by the supply air flow "
                "rate: supply air humidity ratio set to 0 kg/kg"
            )
            W_s = 0.0
        return T_s, W_s

    def _check_coil_leaving_temperature(self, T: float) -> None:
        if T < T_ADP_MIN:
            raise InvalidPreconditionError(
                'system.design_airflow',
                f"the design airflow is too small to carry the room load: the "
                f"supply air would have to leave the coil at {T:.1f} °C, below "
                f"{T_ADP_MIN:.0f} °C"
            )

    def _determine_cooled_air(self) -> tuple[HumidAir, HumidAir]:
        # draw-through fan: the air leaving the coil is colder than the supply
        # air by the temperature rise across the fan
        T_s, W_s = self._required_supply_air()
        self._check_coil_leaving_temperature(T_s)
        T_cl = T_s
        if self.dP_fan is not None and self.eta_fan is not None:
            fan = Fan(
                self.m_dot_supply, self.dP_fan, self.eta_fan,
                air_out=HumidAir(Q_(T_s, 'degC'), Q_(W_s, 'kg / kg'), self.zone_air.P)
            )
            T_cl = fan.air_in.Tdb.to('degC').m
            self._check_coil_leaving_temperature(T_cl)
        P = self.zone_air.P.to('Pa').m
        W_m = self.mixed_air.W.to('kg / kg').m
        W_cl = W_s
        if W_cl > W_m:
            # a cooling coil does not humidify
            logger.debug("coil runs dry: leaving humidity ratio = entering humidity ratio")
            W_cl = W_m
        W_cl_max = psy.humidity_ratio_from_RH(T_cl, MAX_LEAVING_RH.m, P)
        if W_cl > W_cl_max:
            logger.warning(
                f"required supply air state ({T_s:.2f} °C, {W_s * 1e3:.2f} g/kg) "
                f"cannot be reached: air leaving the coil is limited to "
                f"{MAX_LEAVING_RH:~P.0f} RH"
            )
            W_cl = W_cl_max
        cooled_air = HumidAir(Q_(T_cl, 'degC'), Q_(W_cl, 'kg / kg'), self.zone_air.P)
        if self.dP_fan is not None and self.eta_fan is not None:
            self.supply_fan = Fan(self.m_dot_supply, self.dP_fan, self.eta_fan, air_in=cooled_air)
            supply_air = self.supply_fan.air_out
        else:
            supply_air = cooled_air
        return cooled_air, supply_air
