"""
Pytest configuration and fixtures
"""
import matplotlib
matplotlib.use('Agg')

import pytest

from roomload import Quantity, EngineSettings, CalculationMode
from roomload.engine import (
    InputRecord,
    Geometry,
    Occupancy,
    Window,
    Envelope,
    InternalLoads,
    AirExchangeRates,
    DesignConditions,
    SystemData
)
from roomload.load_calc import ActivityLevel, GlassType, Orientation, InsulationType

Q_ = Quantity


@pytest.fixture
def scenario_a_inputs() -> InputRecord:
    """Room of 6 x 5 x 3 m with five seated occupants on a 48 °C day."""
    return InputRecord(
        project_name='Scenario A',
        geometry=Geometry(length=Q_(6, 'm'), width=Q_(5, 'm'), height=Q_(3, 'm')),
        occupancy=Occupancy(count=5, activity=ActivityLevel.SITTING),
        envelope=Envelope(
            window=Window(
                area=Q_(4, 'm ** 2'),
                glass_type=GlassType.DOUBLE,
                orientation=Orientation.SOUTH,
                shaded=False
            ),
            wall_area=Q_(66, 'm ** 2'),
            roof_area=Q_(30, 'm ** 2'),
            insulation=InsulationType.STANDARD
        ),
        internal_loads=InternalLoads(lighting=Q_(300, 'W'), equipment=Q_(800, 'W')),
        design=DesignConditions(T_out=Q_(48, 'degC'), T_in=Q_(24, 'degC'))
    )


@pytest.fixture
def scenario_c_inputs() -> InputRecord:
    """Same room in a hot-dry climate, with ventilation air, infiltration and
    a fixed design airflow for the psychrometric calculation.
    """
    return InputRecord(
        project_name='Scenario C',
        geometry=Geometry(length=Q_(6, 'm'), width=Q_(5, 'm'), height=Q_(3, 'm')),
        occupancy=Occupancy(count=5, activity=ActivityLevel.SITTING),
        envelope=Envelope(
            window=Window(area=Q_(4, 'm ** 2'), U=Q_(2.8, 'W / (m ** 2 * K)')),
            wall_area=Q_(66, 'm ** 2'),
            wall_U=Q_(0.6, 'W / (m ** 2 * K)'),
            roof_area=Q_(30, 'm ** 2'),
            roof_U=Q_(0.6, 'W / (m ** 2 * K)')
        ),
        internal_loads=InternalLoads(lighting=Q_(300, 'W'), equipment=Q_(800, 'W')),
        air_exchange=AirExchangeRates(
            air_changes=Q_(0.5, '1 / hr'),
            outdoor_air_per_person=Q_(10, 'L / s')
        ),
        design=DesignConditions(
            T_out=Q_(43.9, 'degC'),
            T_wb_out=Q_(21.7, 'degC'),
            T_in=Q_(24.7, 'degC'),
            RH_in=Q_(64, 'pct'),
            T_out_winter=Q_(2, 'degC')
        ),
        system=SystemData(
            design_airflow=Q_(400, 'L / s'),
            dP_fan=Q_(250, 'Pa'),
            eta_fan=Q_(0.65, 'frac')
        )
    )


@pytest.fixture
def simple_settings() -> EngineSettings:
    return EngineSettings(calculation_mode=CalculationMode.SIMPLE)


@pytest.fixture
def psychrometric_settings() -> EngineSettings:
    return EngineSettings(calculation_mode=CalculationMode.PSYCHROMETRIC)
