"""
Hole cutters: threaded holes, clearance holes and head recesses.

Cutters are solids meant to be subtracted from a part. Each hole opens at
z=0 and runs to z=depth along +Z; head recesses additionally reach
HEAD_CLEARANCE_MM above the opening (-Z) so they cut through whatever
material sits over the head.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from build123d import Part

from ..enums import Operation
from ..calculator.angle import Angle
from ..calculator.constants import COUNTERSINK_ANGLE_DEG, HEAD_CLEARANCE_MM
from ..calculator.lead_in import LeadInEnds
from ..calculator.thread import ThreadSpec
from .booleans import fuse_all, clip_z
from .geometry_base import BaseGeometry
from .screw import thread_solid
from .shapes import cylinder, frustum, polygon_prism, circumradius

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Countersink:
    """
    Conical recess for flat-head fasteners.

    Attributes:
        top_diameter: Diameter at the opening
        angle: Included cone angle (default 90°)
    """
    top_diameter: float
    angle: Angle = Angle.from_degrees(COUNTERSINK_ANGLE_DEG)

    def __post_init__(self):
        if self.top_diameter <= 0:
            raise ValueError(f"Countersink diameter must be positive, got {self.top_diameter}")
        if not 0 < self.angle.degrees < 180:
            raise ValueError(f"Countersink angle must be in (0°, 180°), got {self.angle}")

    def cone_height(self, tolerance: float = 0.0) -> float:
        return (self.top_diameter + tolerance) / 2 * (self.angle / 2).tan()

    def build(self, tolerance: float = 0.0) -> Part:
        radius = (self.top_diameter + tolerance) / 2
        clearance = cylinder(radius, HEAD_CLEARANCE_MM, z=-HEAD_CLEARANCE_MM)
        cone = frustum(radius, 0.0, self.cone_height(tolerance))
        return fuse_all([clearance, cone])


@dataclass(frozen=True)
class Counterbore:
    """Cylindrical recess for cap-screw heads."""
    diameter: float
    depth: float

    def __post_init__(self):
        if self.diameter <= 0 or self.depth < 0:
            raise ValueError(
                f"Counterbore needs positive diameter and non-negative depth, "
                f"got diameter={self.diameter}, depth={self.depth}"
            )

    def build(self, tolerance: float = 0.0) -> Part:
        return cylinder(
            (self.diameter + tolerance) / 2,
            self.depth + HEAD_CLEARANCE_MM,
            z=-HEAD_CLEARANCE_MM,
        )


@dataclass(frozen=True)
class PolygonalRecess:
    """Prismatic pocket that holds a polygonal head or nut against rotation."""
    sides: int
    width_across_flats: float
    depth: float
    rotation: float = 0.0

    def build(self, tolerance: float = 0.0) -> Part:
        return polygon_prism(
            self.sides,
            self.width_across_flats + tolerance,
            self.depth + HEAD_CLEARANCE_MM,
            z=-HEAD_CLEARANCE_MM,
            rotation=self.rotation,
        )


Recess = Union[Countersink, Counterbore, PolygonalRecess]


class ClearanceHoleGeometry(BaseGeometry):
    """
    Plain hole a bolt passes through, optionally with a head recess.

    The recess is clipped to the hole depth so a shallow hole never gets a
    recess deeper than itself.
    """

    _part_name = "clearance hole"

    def __init__(
        self,
        diameter: float,
        depth: float,
        entry: Optional[Recess] = None,
        tolerance: float = 0.0,
    ):
        if diameter <= 0:
            raise ValueError(f"Hole diameter must be positive, got {diameter}")
        if depth <= 0:
            raise ValueError(f"Hole depth must be positive, got {depth}")
        self.diameter = diameter
        self.depth = depth
        self.entry = entry
        self.tolerance = tolerance
        self._part = None

    def build(self) -> Part:
        if self._part is not None:
            return self._part

        radius = (self.diameter + self.tolerance) / 2
        logger.info(f"Building clearance hole: ⌀{2 * radius:.2f}mm x {self.depth:.2f}mm")
        hole = cylinder(radius, self.depth)

        if self.entry is not None:
            recess = self.entry.build(self.tolerance)
            bottom = -HEAD_CLEARANCE_MM - 1.0
            reach = max(radius, _recess_radius(self.entry, self.tolerance))
            hole = fuse_all([hole, clip_z(recess, bottom, self.depth, reach)])

        self._part = hole
        return self._part


def _recess_radius(recess: Recess, tolerance: float) -> float:
    if isinstance(recess, Countersink):
        return (recess.top_diameter + tolerance) / 2
    if isinstance(recess, Counterbore):
        return (recess.diameter + tolerance) / 2
    return circumradius(recess.sides, recess.width_across_flats + tolerance)


class ThreadedHoleGeometry(BaseGeometry):
    """
    Internal thread cutter with optional lead-in cones at the ends.

    The leading cone widens the opening at z=0, the trailing cone the far
    end at z=depth.
    """

    _part_name = "threaded hole"

    def __init__(
        self,
        thread: ThreadSpec,
        depth: float,
        lead_ins: Optional[LeadInEnds] = None,
        tolerance: float = 0.0,
    ):
        if depth <= 0:
            raise ValueError(f"Hole depth must be positive, got {depth}")
        self.thread = thread
        self.depth = depth
        self.lead_ins = lead_ins or LeadInEnds.none()
        self.tolerance = tolerance
        self._part = None

    def build(self) -> Part:
        if self._part is not None:
            return self._part

        logger.info(f"Building threaded hole: {self.thread.describe()}, depth={self.depth:.2f}mm")
        void = thread_solid(
            self.thread, self.depth, tolerance=self.tolerance, operation=Operation.SUBTRACTION,
        )
        self._part = fuse_all([void.part] + lead_in_cones(
            self.thread, self.lead_ins, self.depth, void.minor_radius,
        ))
        return self._part


def lead_in_cones(thread: ThreadSpec, lead_ins: LeadInEnds, length: float, minor_radius: float):
    """Cones that chamfer the entries of an internal thread spanning z=0..length."""
    cones = []
    if lead_ins.leading is not None:
        depth, run = lead_ins.leading.resolved(thread)
        if depth > 0 and run > 0:
            cones.append(frustum(minor_radius + depth, minor_radius, run))
    if lead_ins.trailing is not None:
        depth, run = lead_ins.trailing.resolved(thread)
        if depth > 0 and run > 0:
            cones.append(frustum(minor_radius, minor_radius + depth, run, z=length - run))
    return cones
