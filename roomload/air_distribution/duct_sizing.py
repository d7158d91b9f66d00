from __future__ import annotations

from dataclasses import dataclass
from .. import Quantity
from ..constants import (
    DUCT_VELOCITY,
    DUCT_ASPECT_RATIO,
    REFERENCE_RUN_LENGTH,
    FLANGES_PER_RUN,
    SCREWS_PER_RUN
)
from .cross_section import Circular, Rectangular, CrossSection

Q_ = Quantity


@dataclass(frozen=True)
class Airflow:
    """Design airflow of the supply duct and the design air velocity in
    it.
    """
    V_dot: Quantity
    velocity: Quantity = DUCT_VELOCITY

    @property
    def cfm(self) -> Quantity:
        return self.V_dot.to('ft ** 3 / min')

    @property
    def L_per_s(self) -> Quantity:
        return self.V_dot.to('L / s')


@dataclass(frozen=True)
class DuctSizing:
    """Round and rectangular duct cross-sections that carry the design
    airflow at the design velocity. Both have the same area.
    """
    airflow: Airflow
    round_duct: Circular
    rect_duct: Rectangular

    @property
    def area(self) -> Quantity:
        return self.round_duct.area.to('ft ** 2')

    @property
    def round_diameter(self) -> Quantity:
        return self.round_duct.diameter.to('inch')

    @property
    def rect_width(self) -> Quantity:
        return self.rect_duct.width.to('inch')

    @property
    def rect_height(self) -> Quantity:
        return self.rect_duct.height.to('inch')


@dataclass(frozen=True)
class MaterialTakeoff:
    """Quantities of material for one reference run of rectangular duct."""
    run_length: Quantity
    sheet_metal: Quantity
    insulation: Quantity
    flanges: int
    screws: int


def size_duct(
    V_dot: Quantity,
    velocity: Quantity = DUCT_VELOCITY,
    aspect_ratio: float = DUCT_ASPECT_RATIO
) -> DuctSizing:
    """Returns the duct cross-sections for volume flow rate `V_dot` at the
    design air `velocity`. The rectangular duct has the given aspect ratio
    (width : height) and the same area as the round duct.

    A zero (or negative) airflow gives zero-sized ducts.
    """
    V_dot = V_dot.to('ft ** 3 / min')
    if V_dot.m > 0.0:
        A = (V_dot / velocity).to('ft ** 2')
    else:
        A = Q_(0.0, 'ft ** 2')
    return DuctSizing(
        airflow=Airflow(V_dot, velocity.to('ft / min')),
        round_duct=Circular.from_area(A),
        rect_duct=Rectangular.from_area(A, aspect_ratio)
    )


def estimate_materials(
    cross_section: CrossSection,
    run_length: Quantity = REFERENCE_RUN_LENGTH,
    flanges: int = FLANGES_PER_RUN,
    screws: int = SCREWS_PER_RUN
) -> MaterialTakeoff:
    """Returns the sheet metal and insulation area needed for a duct run of
    the given length: both equal the duct perimeter times the run length.
    Flange and screw counts are fixed per reference run.
    """
    A_sheet = (cross_section.perimeter * run_length).to('m ** 2')
    return MaterialTakeoff(
        run_length=run_length.to('m'),
        sheet_metal=A_sheet,
        insulation=A_sheet,
        flanges=flanges,
        screws=screws
    )
