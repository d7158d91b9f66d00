from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from .. import Quantity
from ..constants import (
    CFM_PER_TON,
    DUCT_VELOCITY,
    DUCT_ASPECT_RATIO,
    REFERENCE_RUN_LENGTH,
    ADP_MAX_ITERATIONS,
    ADP_TOLERANCE
)


class CalculationMode(Enum):
    """SIMPLE: sensible-only cooling load, airflow from the capacity-to-flow
    ratio. PSYCHROMETRIC: sensible and latent loads, airflow as a boundary
    condition, air states through the air-handling unit and a heating pass.
    """
    SIMPLE = 'simple'
    PSYCHROMETRIC = 'psychrometric'


@dataclass(frozen=True)
class EngineSettings:
    """Configuration of the load calculation engine.

    Attributes
    ----------
    calculation_mode:
        Selects the calculation strategy.
    duct_velocity:
        Design air velocity in the supply duct.
    cfm_per_ton:
        Supply air flow rate per refrigeration ton (simple mode).
    duct_aspect_ratio:
        Width-to-height ratio of rectangular ducts.
    reference_run_length:
        Duct length for which the material quantities are given.
    adp_max_iterations:
        Maximum number of iterations to find the apparatus dew point.
    adp_tolerance:
        Convergence tolerance (K) of the apparatus dew point.
    units:
        Units used for displaying the psychrometric results, see
        `CoolingDesign`.
    """
    calculation_mode: CalculationMode = CalculationMode.SIMPLE
    duct_velocity: Quantity = DUCT_VELOCITY
    cfm_per_ton: Quantity = CFM_PER_TON
    duct_aspect_ratio: float = DUCT_ASPECT_RATIO
    reference_run_length: Quantity = REFERENCE_RUN_LENGTH
    adp_max_iterations: int = ADP_MAX_ITERATIONS
    adp_tolerance: float = ADP_TOLERANCE
    units: dict[str, tuple[str, int]] = field(default_factory=dict)
