"""
Flat washer geometry (ISO 7089 / ISO 7093).
"""

import logging

from build123d import Part

from ..enums import WasherSeries
from ..calculator.catalog import SizeInput
from ..calculator.dimensions import washer_dimensions
from .geometry_base import BaseGeometry
from .shapes import revolved_profile

logger = logging.getLogger(__name__)


class WasherGeometry(BaseGeometry):
    """
    Plain washer lying on z=0.

    Args:
        outer_diameter: Outside diameter (d2)
        inner_diameter: Hole diameter (d1)
        thickness: Thickness (h)
        tolerance: Clearance in mm; shrinks the outside, grows the hole
        outer_top_chamfer: 45° chamfer on the outer top edge
    """

    _part_name = "washer"

    def __init__(
        self,
        outer_diameter: float,
        inner_diameter: float,
        thickness: float,
        tolerance: float = 0.0,
        outer_top_chamfer: float = 0.0,
    ):
        if inner_diameter <= 0 or outer_diameter <= inner_diameter:
            raise ValueError(
                f"Washer needs 0 < inner < outer diameter, got "
                f"inner={inner_diameter}, outer={outer_diameter}"
            )
        if thickness <= 0:
            raise ValueError(f"Washer thickness must be positive, got {thickness}")
        if outer_top_chamfer < 0 or outer_top_chamfer >= thickness:
            raise ValueError(
                f"Chamfer must be within 0..{thickness}, got {outer_top_chamfer}"
            )
        self.outer_diameter = outer_diameter
        self.inner_diameter = inner_diameter
        self.thickness = thickness
        self.tolerance = tolerance
        self.outer_top_chamfer = outer_top_chamfer
        self._part = None

    def build(self) -> Part:
        if self._part is not None:
            return self._part

        outer = (self.outer_diameter - self.tolerance) / 2
        inner = (self.inner_diameter + self.tolerance) / 2
        chamfer = self.outer_top_chamfer
        logger.info(f"Building washer: ⌀{2 * inner:.2f}/⌀{2 * outer:.2f} x {self.thickness:.2f}mm")

        points = [(inner, 0.0), (outer, 0.0)]
        if chamfer > 0:
            points += [(outer, self.thickness - chamfer), (outer - chamfer, self.thickness)]
        else:
            points.append((outer, self.thickness))
        points.append((inner, self.thickness))

        washer = revolved_profile(points)
        washer.label = f"Washer {self.inner_diameter:g}x{self.outer_diameter:g}x{self.thickness:g}"
        self._part = washer
        return self._part


def iso7089(size: SizeInput, tolerance: float = 0.0) -> WasherGeometry:
    """ISO 7089 normal series plain washer."""
    return plain_washer(size, WasherSeries.NORMAL, tolerance)


def iso7093(size: SizeInput, tolerance: float = 0.0) -> WasherGeometry:
    """ISO 7093-1 large series plain washer."""
    return plain_washer(size, WasherSeries.LARGE, tolerance)


def plain_washer(
    size: SizeInput,
    series: WasherSeries = WasherSeries.NORMAL,
    tolerance: float = 0.0,
) -> WasherGeometry:
    dims = washer_dimensions(size, large=series == WasherSeries.LARGE)
    return WasherGeometry(
        outer_diameter=dims.outer_diameter,
        inner_diameter=dims.inner_diameter,
        thickness=dims.thickness,
        tolerance=tolerance,
    )
