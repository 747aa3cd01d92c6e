"""
Counter Geometry - Width-Derived Sizing

Every size the counter paints with is a fraction of one configured width,
so the whole widget scales proportionally.
"""

import math
from dataclasses import dataclass

try:
    from ..utils.constants import DEFAULT_WIDTH
except ImportError:
    from utils.constants import DEFAULT_WIDTH


@dataclass(frozen=True)
class CounterGeometry:
    """
    Sizes of the counter, derived from its width.

    Attributes:
        width: Width of the control pill in pixels

    Example:
        >>> geometry = CounterGeometry(300)
        >>> geometry.horizontal_limit
        130.0
    """

    width: float = DEFAULT_WIDTH

    def __post_init__(self):
        """Reject widths that cannot be drawn."""
        if not (math.isfinite(self.width) and self.width > 0):
            raise ValueError(f"Counter width must be a positive number, got {self.width}")

    @property
    def height(self) -> float:
        """Height of the control pill."""
        return self.width / 2.5

    @property
    def spacing(self) -> float:
        """Gap between the controls and horizontal padding."""
        return self.width / 10

    @property
    def label_size(self) -> float:
        """Diameter of the count circle."""
        return self.width / 3

    @property
    def label_font_size(self) -> float:
        return self.label_size / 2.5

    @property
    def control_size(self) -> float:
        """Diameter of each control button."""
        return self.width / 4.2

    @property
    def radius(self) -> float:
        """Corner radius of the control pill."""
        return self.width / 4.9

    @property
    def horizontal_limit(self) -> float:
        """Label travel left/right before the rubber band engages."""
        return self.width / 3 + self.spacing

    @property
    def vertical_limit(self) -> float:
        """Label travel downward before the rubber band engages."""
        return self.height / 1.2
