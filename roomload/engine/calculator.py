from __future__ import annotations

from .. import Quantity
from ..logging import ModuleLogger
from ..fluids import HumidAir
from ..load_calc import (
    Space,
    PeopleHeatGain,
    LightingHeatGain,
    EquipmentHeatGain,
    ExteriorSurface,
    Fenestration,
    LoadBreakdown
)
from ..air_distribution import (
    Airflow,
    DuctSizing,
    MaterialTakeoff,
    size_duct,
    estimate_materials
)
from ..air_conditioning import CoolingDesign, HeatingDesign
from .inputs import InputRecord
from .settings import CalculationMode, EngineSettings
from .normalization import NormalizedInput, normalize, check_preconditions, validate
from .results import Results

Q_ = Quantity

logger = ModuleLogger.get_logger(__name__)
logger.setLevel(ModuleLogger.WARNING)


def compute_loads(inputs: InputRecord, settings: EngineSettings | None = None) -> Results:
    """Computes the cooling load, the supply air flow rate, the supply duct
    sizes and the duct material quantities of a room, and in psychrometric
    mode also the air states through the air-handling unit at summer and
    winter design conditions.

    Parameters
    ----------
    inputs:
        The input record of the room.
    settings: optional
        Engine configuration. Selects the calculation mode (simple by
        default) and the design policies.

    Raises
    ------
    InvalidPreconditionError
        If a quantity the calculation cannot do without is zero or missing.
    OutOfRangeError
        If an input lies outside its physically plausible range.
    """
    settings = settings or EngineSettings()
    mode = settings.calculation_mode
    norm = normalize(inputs)
    check_preconditions(norm, mode)
    validate(norm, mode)
    logger.debug(f"computing loads of '{norm.project_name}' in {mode.value} mode")
    if mode is CalculationMode.PSYCHROMETRIC:
        return _compute_psychrometric(norm, settings)
    return _compute_simple(norm, settings)


def _build_space(norm: NormalizedInput, latent: bool) -> Space:
    space = Space.create(norm.project_name or 'zone', norm.floor_area, norm.height)
    space.add_internal_heat_gain(
        PeopleHeatGain.from_activity('people', norm.n_people, norm.activity, split_latent=latent),
        LightingHeatGain.create('lighting', norm.lighting),
        EquipmentHeatGain.create('equipment', norm.equipment)
    )
    space.add_exterior_surface(
        Fenestration.create(
            'windows', norm.window_area, norm.window_U,
            norm.orientation, norm.shaded, norm.solar_gain
        ),
        ExteriorSurface.create('walls', norm.wall_area, norm.wall_U),
        ExteriorSurface.create('roof', norm.roof_area, norm.roof_U)
    )
    if norm.air_changes.m > 0.0:
        space.add_infiltration(norm.air_changes)
    if latent and norm.n_people > 0 and norm.V_dot_person.m > 0.0:
        space.add_ventilation(norm.n_people, norm.V_dot_person)
    return space


def _size_air_distribution(
    V_dot: Quantity,
    settings: EngineSettings
) -> tuple[Airflow, DuctSizing, MaterialTakeoff]:
    duct = size_duct(V_dot, settings.duct_velocity, settings.duct_aspect_ratio)
    materials = estimate_materials(duct.rect_duct, settings.reference_run_length)
    logger.debug(
        f"supply duct for {duct.airflow.cfm:~P.0f}: round {duct.round_diameter:~P.1f}, "
        f"rectangular {duct.rect_width:~P.1f} x {duct.rect_height:~P.1f}"
    )
    return duct.airflow, duct, materials


def _load_density(loads: LoadBreakdown, floor_area: Quantity) -> Quantity | None:
    if floor_area.m <= 0.0:
        return None
    return (loads.total / floor_area).to('W / m ** 2')


def _compute_simple(norm: NormalizedInput, settings: EngineSettings) -> Results:
    # sensible-only: the humidity of outdoor and indoor air plays no part
    outdoor_air = HumidAir(norm.T_out, Q_(0.0, 'kg / kg'), norm.P)
    indoor_air = HumidAir(norm.T_in, Q_(0.0, 'kg / kg'), norm.P)
    space = _build_space(norm, latent=False)
    loads = space.get_cooling_load(outdoor_air, indoor_air, norm.safety_factor, latent=False)
    V_dot = (loads.total_tons * settings.cfm_per_ton).to('ft ** 3 / min')
    airflow, duct, materials = _size_air_distribution(V_dot, settings)
    return Results(
        mode=CalculationMode.SIMPLE,
        loads=loads,
        airflow=airflow,
        duct=duct,
        materials=materials,
        load_density=_load_density(loads, norm.floor_area)
    )


def _compute_psychrometric(norm: NormalizedInput, settings: EngineSettings) -> Results:
    if norm.T_wb_out is not None:
        outdoor_air = HumidAir.from_Twb(norm.T_out, norm.T_wb_out, norm.P)
    else:
        outdoor_air = HumidAir.from_RH(norm.T_out, norm.RH_out, norm.P)
    indoor_air = HumidAir.from_RH(norm.T_in, norm.RH_in, norm.P)
    logger.debug(f"outdoor air: {outdoor_air}; indoor air: {indoor_air}")

    space = _build_space(norm, latent=True)
    loads = space.get_cooling_load(outdoor_air, indoor_air, norm.safety_factor, latent=True)
    V_dot_vent = space.ventilation.V_dot if space.ventilation else Q_(0.0, 'm ** 3 / s')

    cooling = CoolingDesign(
        zone_air=indoor_air,
        outdoor_air=outdoor_air,
        Q_dot_zone_sen=loads.room_sensible,
        Q_dot_zone_lat=loads.room_latent,
        V_dot_vent=V_dot_vent,
        V_dot_supply=norm.design_airflow,
        T_supply=norm.T_supply,
        dP_fan=norm.dP_fan,
        eta_fan=norm.eta_fan,
        adp_max_iterations=settings.adp_max_iterations,
        adp_tolerance=settings.adp_tolerance,
        units=settings.units
    ).design()
    airflow, duct, materials = _size_air_distribution(cooling.V_dot_supply, settings)

    heating_load = heating = None
    if norm.T_out_winter is not None:
        winter_air = HumidAir.from_RH(norm.T_out_winter, norm.RH_out_winter, norm.P)
        heating_load = space.get_heating_load(winter_air, indoor_air, norm.safety_factor)
        heating = HeatingDesign(
            zone_air=indoor_air,
            outdoor_air=winter_air,
            Q_dot_zone=heating_load.room_total,
            V_dot_vent=V_dot_vent,
            m_dot_supply=cooling.m_dot_supply,
            dP_fan=norm.dP_fan,
            eta_fan=norm.eta_fan,
            units=settings.units
        ).design()

    return Results(
        mode=CalculationMode.PSYCHROMETRIC,
        loads=loads,
        airflow=airflow,
        duct=duct,
        materials=materials,
        load_density=_load_density(loads, norm.floor_area),
        cooling=cooling,
        heating_load=heating_load,
        heating=heating
    )
