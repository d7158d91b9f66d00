from .cross_section import (
    CrossSection,
    Circular,
    Rectangular
)

from .duct_sizing import (
    Airflow,
    DuctSizing,
    MaterialTakeoff,
    size_duct,
    estimate_materials
)
