from __future__ import annotations

from dataclasses import dataclass, field
from .. import Quantity
from ..exceptions import InvalidPreconditionError
from ..logging import ModuleLogger
from ..fluids import HumidAir, RHO_STANDARD_AIR, CP_DRY_AIR
from ..charts import PsychrometricChart
from .process import AirStream, AdiabaticMixing, Fan
from .cooling_design import DEFAULT_UNITS, _format_state

Q_ = Quantity

logger = ModuleLogger.get_logger(__name__)
logger.setLevel(ModuleLogger.WARNING)


@dataclass
class HeatingOutput:
    m_dot_supply: Quantity
    m_dot_vent: Quantity
    m_dot_recir: Quantity
    outdoor_air: HumidAir
    mixed_air: HumidAir
    heated_air: HumidAir
    supply_air: HumidAir
    zone_air: HumidAir
    Q_dot_zone: Quantity
    Q_dot_fan: Quantity
    Q_dot_hc: Quantity
    units: dict[str, tuple[str, int]] = field(default_factory=dict)

    def __post_init__(self):
        self.V_dot_supply = self.m_dot_supply / RHO_STANDARD_AIR
        self.units = {**DEFAULT_UNITS, **self.units}

    @property
    def T_entering(self) -> Quantity:
        """Air temperature at the heating coil inlet."""
        return self.mixed_air.Tdb

    @property
    def T_leaving(self) -> Quantity:
        """Air temperature at the heating coil outlet."""
        return self.heated_air.Tdb

    @property
    def states(self) -> dict[str, HumidAir]:
        return {
            'Outdoor Air': self.outdoor_air,
            'Mixed Air': self.mixed_air,
            'Coil-Leaving Air': self.heated_air,
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
        )
        for name, air in self.states.items():
            output += f"{name.lower()} = {_format_state(air, u)}\n"
        output += (
            "zone heating load = "
            f"{self.Q_dot_zone.to(u['Q_dot'][0]):~P.{u['Q_dot'][1]}f}\n"
            "heating coil load = "
            f"{self.Q_dot_hc.to(u['Q_dot'][0]):~P.{u['Q_dot'][1]}f}"
        )
        return output

    @property
    def psychrometric_chart(self) -> PsychrometricChart:
        """Returns a psychrometric chart with the heating processes drawn on
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
            name='air heating',
            start_point=self.mixed_air,
            end_point=self.supply_air
        )
        psy_chart.plot_process(
            name='zone',
            start_point=self.supply_air,
            end_point=self.zone_air
        )
        return psy_chart


class HeatingDesign:
    """Determines the air states and the heating coil load of a single-zone
    constant-volume system at winter design conditions. The supply air flow
    rate is the one selected for the summer design.
    """

    def __init__(
        self,
        zone_air: HumidAir,
        outdoor_air: HumidAir,
        Q_dot_zone: Quantity,
        V_dot_vent: Quantity,
        m_dot_supply: Quantity,
        dP_fan: Quantity | None = None,
        eta_fan: Quantity | None = None,
        units: dict[str, tuple[str, int]] | None = None
    ) -> None:
        """Creates a `HeatingDesign` instance.

        Parameters
        ----------
        zone_air:
            Desired state of the zone air in winter.
        outdoor_air:
            State of the outdoor air at winter design conditions.
        Q_dot_zone:
            Heating load of the zone, without ventilation air.
        V_dot_vent:
            Volume flow rate of outdoor ventilation air.
        m_dot_supply:
            Mass flow rate of supply air.
        dP_fan: optional
            Supply fan pressure. If None, fan heat is not taken into account.
        eta_fan: optional
            Overall efficiency of the supply fan and motor.
        units: optional
            See `CoolingDesign`.
        """
        self.zone_air = zone_air
        self.outdoor_air = outdoor_air
        self.Q_dot_zone = Q_dot_zone.to('W')
        self.V_dot_vent = V_dot_vent.to('m ** 3 / s')
        self.m_dot_supply = m_dot_supply.to('kg / s')
        self.dP_fan = dP_fan
        self.eta_fan = eta_fan
        self.units = units or {}

    def design(self) -> HeatingOutput:
        """Runs the design calculations and returns the results in a
        `HeatingOutput` instance.
        """
        if self.m_dot_supply.m <= 0.0:
            raise InvalidPreconditionError('system.design_airflow')
        m_dot_vent = (RHO_STANDARD_AIR * self.V_dot_vent).to('kg / s')
        if m_dot_vent > self.m_dot_supply:
            logger.warning(
                "ventilation air flow rate exceeds the supply air flow rate: "
                "the system runs on 100 % outdoor air"
            )
            m_dot_vent = self.m_dot_supply
        m_dot_recir = self.m_dot_supply - m_dot_vent
        mixed_air = AdiabaticMixing(
            in1=AirStream(self.zone_air, m_dot_recir),
            in2=AirStream(self.outdoor_air, m_dot_vent)
        ).stream_out.state

        # supply air temperature that balances the heat loss of the zone;
        # heating is sensible: the humidity ratio of the mixed air is kept
        T_z = self.zone_air.Tdb.to('degC').m
        T_s = T_z + self.Q_dot_zone.m / (self.m_dot_supply.m * CP_DRY_AIR.m)
        supply_air = HumidAir(Q_(T_s, 'degC'), mixed_air.W, self.zone_air.P)

        fan = None
        heated_air = supply_air
        if self.dP_fan is not None and self.eta_fan is not None:
            fan = Fan(self.m_dot_supply, self.dP_fan, self.eta_fan, air_out=supply_air)
            heated_air = fan.air_in
        if heated_air.Tdb.to('degC').m < mixed_air.Tdb.to('degC').m:
            # the mixed air is warm enough: the heating coil is off
            logger.debug("mixed air needs no heating: heating coil load = 0 W")
            heated_air = mixed_air
            if fan is not None:
                fan = Fan(self.m_dot_supply, self.dP_fan, self.eta_fan, air_in=mixed_air)
                supply_air = fan.air_out
            else:
                supply_air = mixed_air
        dT_hc = heated_air.Tdb.to('degC').m - mixed_air.Tdb.to('degC').m
        Q_dot_hc = Q_(max(0.0, self.m_dot_supply.m * CP_DRY_AIR.m * dT_hc), 'W')
        return HeatingOutput(
            m_dot_supply=self.m_dot_supply,
            m_dot_vent=m_dot_vent,
            m_dot_recir=m_dot_recir,
            outdoor_air=self.outdoor_air,
            mixed_air=mixed_air,
            heated_air=heated_air,
            supply_air=supply_air,
            zone_air=self.zone_air,
            Q_dot_zone=self.Q_dot_zone,
            Q_dot_fan=fan.Q if fan is not None else Q_(0.0, 'W'),
            Q_dot_hc=Q_dot_hc,
            units=self.units
        )
