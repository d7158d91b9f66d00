"""
Tests of the air-handling processes, the apparatus dew point solver and the
cooling and heating design of a single-zone system
"""
import pytest

from roomload import Quantity, ConvergenceWarning, InvalidPreconditionError
from roomload.fluids import HumidAir
from roomload.fluids import psychrometrics as psy
from roomload.air_conditioning import (
    AirStream,
    AdiabaticMixing,
    Fan,
    CoolingCoil,
    CoolingDesign,
    HeatingDesign,
    solve_apparatus_dew_point
)

Q_ = Quantity


@pytest.fixture
def zone_air() -> HumidAir:
    return HumidAir.from_RH(Q_(24, 'degC'), Q_(50, 'pct'))


@pytest.fixture
def outdoor_air() -> HumidAir:
    return HumidAir.from_RH(Q_(35, 'degC'), Q_(40, 'pct'))


class TestMixingAndFan:

    def test_mixing_is_flow_weighted(self, zone_air, outdoor_air):
        mixing = AdiabaticMixing(
            in1=AirStream(zone_air, Q_(0.75, 'kg / s')),
            in2=AirStream(outdoor_air, Q_(0.25, 'kg / s'))
        )
        mixed = mixing.stream_out
        assert mixed.m_da.to('kg / s').m == pytest.approx(1.0)
        assert mixed.state.Tdb.to('degC').m == pytest.approx(0.75 * 24 + 0.25 * 35)
        W = 0.75 * zone_air.W.m + 0.25 * outdoor_air.W.m
        assert mixed.state.W.to('kg / kg').m == pytest.approx(W)

    def test_mixing_without_flow_is_rejected(self, zone_air, outdoor_air):
        mixing = AdiabaticMixing(
            in1=AirStream(zone_air, Q_(0, 'kg / s')),
            in2=AirStream(outdoor_air, Q_(0, 'kg / s'))
        )
        with pytest.raises(ValueError):
            _ = mixing.stream_out

    def test_fan_temperature_rise(self, zone_air):
        fan = Fan(Q_(0.48, 'kg / s'), Q_(250, 'Pa'), Q_(0.65, 'frac'), air_in=zone_air)
        W_input = 0.4 * 250 / 0.65
        assert fan.W_input.to('W').m == pytest.approx(W_input)
        assert fan.dT.to('K').m == pytest.approx(W_input / (0.48 * 1006))
        assert fan.air_out.W == zone_air.W
        assert fan.air_out.Tdb.to('degC').m == pytest.approx(24 + fan.dT.m)

    def test_fan_backs_out_inlet_state(self, zone_air):
        fan = Fan(Q_(0.48, 'kg / s'), Q_(250, 'Pa'), Q_(0.65, 'frac'), air_out=zone_air)
        assert fan.air_in.Tdb.to('degC').m == pytest.approx(24 - fan.dT.m)

    def test_fan_needs_a_state(self):
        with pytest.raises(ValueError):
            Fan(Q_(0.48, 'kg / s'), Q_(250, 'Pa'), Q_(0.65, 'frac'))


class TestApparatusDewPoint:

    def test_adp_lies_on_condition_line_and_saturation_curve(self):
        T_m, W_m = 27.1, 0.011825
        T_l, W_l = 14.3, 0.0097
        sol = solve_apparatus_dew_point(T_m, W_m, T_l, W_l)
        assert sol.converged
        assert sol.iterations <= 20
        assert sol.T_adp < T_l
        s = (W_m - W_l) / (T_m - T_l)
        W_line = W_l + s * (sol.T_adp - T_l)
        assert psy.saturation_humidity_ratio(sol.T_adp) == pytest.approx(W_line, rel=1e-6)

    def test_dry_coil_adp_is_dew_point(self):
        air_in = HumidAir(Q_(30, 'degC'), Q_(0.008, 'kg / kg'))
        sol = solve_apparatus_dew_point(30.0, 0.008, 18.0, 0.008)
        assert sol.converged
        assert psy.saturation_humidity_ratio(sol.T_adp) == pytest.approx(0.008, rel=1e-6)
        assert sol.T_adp == pytest.approx(air_in.Tdp.to('degC').m, abs=0.1)

    def test_solver_is_deterministic(self):
        args = (27.1, 0.011825, 14.3, 0.0097)
        assert solve_apparatus_dew_point(*args) == solve_apparatus_dew_point(*args)

    def test_equal_temperatures_are_degenerate(self):
        sol = solve_apparatus_dew_point(20.0, 0.010, 20.0, 0.009)
        assert sol.T_adp is None
        assert not sol.converged
        assert sol.iterations == 0

    def test_non_convergence_is_reported(self):
        with pytest.warns(ConvergenceWarning):
            sol = solve_apparatus_dew_point(27.1, 0.011825, 14.3, 0.0097, max_iter=1)
        assert sol.T_adp is None
        assert not sol.converged


class TestCoolingCoil:

    def test_loads_and_bypass_factor(self):
        air_in = HumidAir(Q_(27.1, 'degC'), Q_(0.011825, 'kg / kg'))
        air_out = HumidAir(Q_(14.3, 'degC'), Q_(0.0097, 'kg / kg'))
        coil = CoolingCoil(air_in, air_out, Q_(0.48, 'kg / s'))
        assert coil.Q_sen.to('W').m == pytest.approx(0.48 * 1006 * 12.8)
        assert coil.Q_lat.to('W').m == pytest.approx(0.48 * 2501e3 * 0.002125)
        assert 0.0 < coil.SHR.m < 1.0
        T_adp = coil.ADP.Tdb.to('degC').m
        assert coil.BF.m == pytest.approx((14.3 - T_adp) / (27.1 - T_adp))
        assert 0.0 < coil.BF.m < 1.0
        assert coil.beta.m == pytest.approx(1.0 - coil.BF.m)

    def test_no_load_gives_zero_SHR(self):
        air = HumidAir(Q_(20, 'degC'), Q_(0.008, 'kg / kg'))
        coil = CoolingCoil(air, air, Q_(0.5, 'kg / s'))
        assert coil.Q.m == 0.0
        assert coil.SHR.m == 0.0
        assert coil.ADP is None
        assert coil.BF is None


class TestCoolingDesign:

    def test_design_with_fixed_airflow(self, zone_air, outdoor_air):
        output = CoolingDesign(
            zone_air=zone_air,
            outdoor_air=outdoor_air,
            Q_dot_zone_sen=Q_(4, 'kW'),
            Q_dot_zone_lat=Q_(0.5, 'kW'),
            V_dot_vent=Q_(50, 'L / s'),
            V_dot_supply=Q_(400, 'L / s'),
            dP_fan=Q_(250, 'Pa'),
            eta_fan=Q_(0.65, 'frac')
        ).design()
        m = output.m_dot_supply.to('kg / s').m
        assert m == pytest.approx(0.48)
        assert output.outdoor_air_fraction.m == pytest.approx(0.125)
        # the supply air balances the sensible room load
        T_s = output.supply_air.Tdb.to('degC').m
        assert T_s == pytest.approx(24 - 4000 / (m * 1006))
        # the coil cools below the supply temperature by the fan heat
        dT_fan = output.Q_dot_fan.to('W').m / (m * 1006)
        assert output.cooled_air.Tdb.to('degC').m == pytest.approx(T_s - dT_fan)
        assert output.ADP.Tdb.to('degC').m < output.cooled_air.Tdb.to('degC').m
        assert output.adp_converged
        assert list(output.states) == [
            'Outdoor Air', 'Mixed Air', 'Coil-Leaving Air',
            'Supply-Fan-Outlet Air', 'Room/Zone Air'
        ]
        assert 'cooling coil load' in str(output)

    def test_supply_flow_from_supply_temperature(self, zone_air, outdoor_air):
        output = CoolingDesign(
            zone_air=zone_air,
            outdoor_air=outdoor_air,
            Q_dot_zone_sen=Q_(4, 'kW'),
            Q_dot_zone_lat=Q_(0.5, 'kW'),
            V_dot_vent=Q_(50, 'L / s'),
            T_supply=Q_(14, 'degC')
        ).design()
        assert output.m_dot_supply.to('kg / s').m == pytest.approx(4000 / (1006 * 10))
        assert output.supply_air.Tdb.to('degC').m == pytest.approx(14.0)

    def test_zero_airflow_is_rejected(self, zone_air, outdoor_air):
        design = CoolingDesign(
            zone_air, outdoor_air, Q_(4, 'kW'), Q_(0.5, 'kW'), Q_(50, 'L / s'),
            V_dot_supply=Q_(0, 'L / s')
        )
        with pytest.raises(InvalidPreconditionError):
            design.design()

    def test_airflow_too_small_for_sensible_load_is_rejected(self, zone_air, outdoor_air):
        # 4 kW over 30 L/s asks for supply air of about -86 °C
        design = CoolingDesign(
            zone_air, outdoor_air, Q_(4, 'kW'), Q_(0.5, 'kW'), Q_(20, 'L / s'),
            V_dot_supply=Q_(30, 'L / s')
        )
        with pytest.raises(InvalidPreconditionError) as exc_info:
            design.design()
        assert exc_info.value.field == 'system.design_airflow'

    @pytest.mark.filterwarnings("ignore::roomload.exceptions.ConvergenceWarning")
    def test_ventilation_above_supply_flow_is_capped(self, zone_air, outdoor_air):
        output = CoolingDesign(
            zone_air, outdoor_air, Q_(1, 'kW'), Q_(0.1, 'kW'), Q_(500, 'L / s'),
            V_dot_supply=Q_(400, 'L / s')
        ).design()
        assert output.outdoor_air_fraction.m == pytest.approx(1.0)
        assert output.m_dot_recir.m == pytest.approx(0.0)

    def test_coil_leaving_air_is_not_supersaturated(self, outdoor_air):
        humid_zone = HumidAir.from_RH(Q_(24, 'degC'), Q_(70, 'pct'))
        output = CoolingDesign(
            humid_zone, outdoor_air, Q_(6, 'kW'), Q_(0.2, 'kW'), Q_(50, 'L / s'),
            V_dot_supply=Q_(400, 'L / s')
        ).design()
        assert output.cooled_air.RH.to('pct').m <= 95.0 + 1e-6


class TestHeatingDesign:

    def test_heating_coil_load(self, zone_air):
        winter_air = HumidAir.from_RH(Q_(0, 'degC'), Q_(80, 'pct'))
        output = HeatingDesign(
            zone_air=zone_air,
            outdoor_air=winter_air,
            Q_dot_zone=Q_(2, 'kW'),
            V_dot_vent=Q_(50, 'L / s'),
            m_dot_supply=Q_(0.48, 'kg / s')
        ).design()
        T_mix = 0.875 * 24 + 0.125 * 0
        assert output.T_entering.to('degC').m == pytest.approx(T_mix)
        T_s = 24 + 2000 / (0.48 * 1006)
        assert output.T_leaving.to('degC').m == pytest.approx(T_s)
        assert output.Q_dot_hc.to('W').m == pytest.approx(0.48 * 1006 * (T_s - T_mix))
        # heating is sensible
        assert output.heated_air.W == output.mixed_air.W

    def test_fan_heat_reduces_heating_coil_load(self, zone_air):
        winter_air = HumidAir.from_RH(Q_(0, 'degC'), Q_(80, 'pct'))
        kwargs = dict(
            zone_air=zone_air, outdoor_air=winter_air, Q_dot_zone=Q_(2, 'kW'),
            V_dot_vent=Q_(50, 'L / s'), m_dot_supply=Q_(0.48, 'kg / s')
        )
        without_fan = HeatingDesign(**kwargs).design()
        with_fan = HeatingDesign(**kwargs, dP_fan=Q_(250, 'Pa'), eta_fan=Q_(0.65, 'frac')).design()
        assert with_fan.Q_dot_hc.m == pytest.approx(without_fan.Q_dot_hc.m - with_fan.Q_dot_fan.to('W').m)

    def test_no_heating_needed(self, zone_air):
        mild_air = HumidAir.from_RH(Q_(26, 'degC'), Q_(50, 'pct'))
        output = HeatingDesign(
            zone_air, mild_air, Q_(0, 'W'), Q_(400, 'L / s'), Q_(0.48, 'kg / s')
        ).design()
        assert output.Q_dot_hc.m == 0.0
