import math
from abc import ABC, abstractmethod
from .. import Quantity, UNITS
from ..constants import DUCT_ASPECT_RATIO

u = UNITS


class CrossSection(ABC):

    @classmethod
    @abstractmethod
    def from_area(cls, *args, **kwargs):
        """Create `CrossSection` instance with a given area."""
        ...

    @property
    @abstractmethod
    def area(self) -> Quantity:
        """Get cross-sectional area."""
        ...

    @property
    @abstractmethod
    def perimeter(self) -> Quantity:
        """Get the wetted perimeter of the cross-section."""
        ...

    @property
    def hydraulic_diameter(self) -> Quantity:
        """Get hydraulic diameter of cross-section."""
        if self.perimeter.m == 0.0:
            return 0.0 * u.mm
        return 4.0 * self.area / self.perimeter


class Circular(CrossSection):

    def __init__(self, diameter: Quantity = 0.0 * u.mm):
        self.diameter = diameter

    @classmethod
    def from_area(cls, area: Quantity) -> 'Circular':
        """Create the circular cross-section that has the given area."""
        D = (4.0 * area / math.pi) ** 0.5
        return cls(D.to('mm'))

    @property
    def area(self) -> Quantity:
        return math.pi * self.diameter ** 2 / 4.0

    @property
    def perimeter(self) -> Quantity:
        return math.pi * self.diameter


class Rectangular(CrossSection):

    def __init__(self, width: Quantity = 0.0 * u.mm, height: Quantity = 0.0 * u.mm):
        self.width = width
        self.height = height

    @classmethod
    def from_area(cls, area: Quantity, aspect_ratio: float = DUCT_ASPECT_RATIO) -> 'Rectangular':
        """Create the rectangular cross-section that has the given area and
        aspect ratio (width divided by height).
        """
        H = (area / aspect_ratio) ** 0.5
        W = aspect_ratio * H
        return cls(W.to('mm'), H.to('mm'))

    @property
    def aspect_ratio(self) -> float:
        return (self.width / self.height).to('').m

    @property
    def area(self) -> Quantity:
        return self.width * self.height

    @property
    def perimeter(self) -> Quantity:
        return 2.0 * (self.width + self.height)

    @property
    def equivalent_diameter(self) -> Quantity:
        """Diameter of the circular duct with the same friction loss and
        airflow (ASHRAE Fundamentals, Ch. 21, eq. 25).
        """
        a, b = self.width, self.height
        return 1.30 * (a * b) ** 0.625 / (a + b) ** 0.250
