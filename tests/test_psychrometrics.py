"""
Tests of the moist-air correlations and the HumidAir state
"""
import math
import pytest

from roomload import Quantity, OutOfRangeError
from roomload.fluids import HumidAir
from roomload.fluids import psychrometrics as psy

Q_ = Quantity


class TestSaturationPressure:

    def test_liquid_branch_at_20C(self):
        # ASHRAE Fundamentals, Ch. 1, Table 3: 2.3392 kPa
        assert psy.saturation_pressure(20.0) == pytest.approx(2339.2, rel=1e-3)

    def test_ice_branch_at_minus_10C(self):
        # ASHRAE Fundamentals, Ch. 1, Table 3: 0.25990 kPa (over ice)
        assert psy.saturation_pressure(-10.0) == pytest.approx(259.90, rel=1e-3)

    def test_branches_meet_at_freezing_point(self):
        p_ice = psy.saturation_pressure(-1e-9)
        p_liquid = psy.saturation_pressure(0.0)
        assert p_ice == pytest.approx(p_liquid, rel=1e-3)

    def test_increases_with_temperature(self):
        temperatures = [-30.0, -5.0, 0.0, 5.0, 25.0, 50.0]
        pressures = [psy.saturation_pressure(T) for T in temperatures]
        assert pressures == sorted(pressures)


class TestHumidityRatio:

    @pytest.mark.parametrize('T_db', [-10.0, 0.0, 24.0, 43.9])
    def test_zero_relative_humidity_gives_dry_air(self, T_db):
        assert psy.humidity_ratio_from_RH(T_db, 0.0) == 0.0

    @pytest.mark.parametrize('T_db', [-10.0, 0.0, 24.0, 43.9])
    def test_full_relative_humidity_gives_saturation(self, T_db):
        assert psy.humidity_ratio_from_RH(T_db, 100.0) == psy.saturation_humidity_ratio(T_db)

    def test_relative_humidity_out_of_range(self):
        with pytest.raises(OutOfRangeError):
            psy.humidity_ratio_from_RH(24.0, 105.0)
        with pytest.raises(OutOfRangeError):
            psy.humidity_ratio_from_RH(24.0, -1.0)

    def test_wet_bulb_equal_to_dry_bulb_gives_saturation(self):
        assert psy.humidity_ratio_from_Twb(30.0, 30.0) == psy.saturation_humidity_ratio(30.0)

    def test_wet_bulb_above_dry_bulb_is_rejected(self):
        with pytest.raises(OutOfRangeError):
            psy.humidity_ratio_from_Twb(20.0, 22.0)

    def test_very_dry_air_is_clamped_to_zero(self):
        # a wet-bulb temperature far below the dry-bulb temperature
        assert psy.humidity_ratio_from_Twb(50.0, 5.0) == 0.0

    def test_wet_bulb_below_freezing(self):
        W = psy.humidity_ratio_from_Twb(2.0, -1.0)
        assert 0.0 < W < psy.saturation_humidity_ratio(2.0)

    def test_hot_dry_outdoor_air(self):
        # 43.9 °C DB / 21.7 °C WB
        W = psy.humidity_ratio_from_Twb(43.9, 21.7)
        assert W == pytest.approx(0.0073, abs=5e-4)

    def test_vapor_pressure_inverts_humidity_ratio(self):
        W = psy.humidity_ratio(1500.0)
        assert psy.vapor_pressure(W) == pytest.approx(1500.0)

    def test_pressure_at_altitude(self):
        assert psy.pressure_from_altitude(0.0) == pytest.approx(101325.0)
        # ASHRAE Fundamentals, Ch. 1, Table 1: 89.875 kPa at 1000 m
        assert psy.pressure_from_altitude(1000.0) == pytest.approx(89875.0, rel=1e-3)


class TestHumidAir:

    def test_from_RH(self):
        air = HumidAir.from_RH(Q_(24.7, 'degC'), Q_(64, 'pct'))
        assert air.RH.to('pct').m == pytest.approx(64.0)
        assert air.W.to('kg / kg').m == pytest.approx(0.0125, abs=3e-4)

    def test_wet_bulb_round_trip(self):
        air = HumidAir.from_Twb(Q_(43.9, 'degC'), Q_(21.7, 'degC'))
        assert air.Twb.to('degC').m == pytest.approx(21.7, abs=0.1)

    def test_dew_point(self):
        air = HumidAir.from_RH(Q_(20, 'degC'), Q_(50, 'pct'))
        assert air.Tdp.to('degC').m == pytest.approx(9.27, abs=0.1)

    def test_dew_point_of_dry_air_is_undefined(self):
        air = HumidAir(Q_(20, 'degC'), Q_(0, 'kg / kg'))
        assert math.isnan(air.Tdp.m)

    def test_saturated_air(self):
        air = HumidAir.saturated(Q_(15, 'degC'))
        assert air.RH.to('pct').m == pytest.approx(100.0)
        assert air.Twb.to('degC').m == pytest.approx(15.0)

    def test_enthalpy(self):
        air = HumidAir(Q_(25, 'degC'), Q_(0.010, 'kg / kg'))
        # 1.006 * 25 + 0.010 * (2501 + 1.86 * 25) kJ/kg
        assert air.h.to('kJ / kg').m == pytest.approx(50.625)

    def test_specific_volume(self):
        air = HumidAir(Q_(25, 'degC'), Q_(0.010, 'kg / kg'))
        # ASHRAE ideal-gas value: 0.8582 m³/kg dry air
        assert air.v.to('m ** 3 / kg').m == pytest.approx(0.8582, rel=2e-3)
        assert air.rho.to('kg / m ** 3').m == pytest.approx(1 / 0.8582, rel=2e-3)

    def test_negative_humidity_ratio_is_rejected(self):
        with pytest.raises(OutOfRangeError):
            HumidAir(Q_(25, 'degC'), Q_(-0.001, 'kg / kg'))

    def test_nan_temperature_is_rejected(self):
        with pytest.raises(ValueError):
            HumidAir(Q_(float('nan'), 'degC'), Q_(0.01, 'kg / kg'))

    def test_str(self):
        air = HumidAir(Q_(25, 'degC'), Q_(0.010, 'kg / kg'))
        assert 'DB' in str(air) and 'AH' in str(air) and 'RH' in str(air)
