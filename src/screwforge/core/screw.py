"""
Threaded solid generation using build123d.

``thread_solid`` turns a ThreadSpec and a length into the 3D thread: the
profile swept along a helix once per start, mirrored for left-hand
threads, fused with a core cylinder, clipped to the requested length and
chamfered at the ends. The same solid serves as material for external
threads and, built with ``Operation.SUBTRACTION``, as the void for nuts
and threaded holes.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from build123d import Part, Cylinder, Align, Pos, Plane

from ..enums import Operation
from ..calculator.thread import ThreadSpec, relative_tolerance
from ..calculator.threadform import SolidThreadform, cross_section
from ..calculator.lead_in import LeadIn, LeadInEnds
from ..calculator.constants import CORE_OVERLAP_MM, LEAD_IN_CUTTER_EXTENSION
from .booleans import fuse_all, cut, clip_z
from .geometry_base import BaseGeometry
from .geometry_repair import repair_geometry, largest_solid
from .shapes import revolved_profile
from .sweep import sweep_profile

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class ThreadedSolid:
    """
    Thread geometry together with the ThreadSpec it was built from.

    ``part`` is None when the requested length was zero or negative.
    Fasteners read ``thread`` back from here instead of carrying the
    spec separately.
    """
    part: Optional[Part]
    thread: ThreadSpec
    length: float
    tolerance: float = 0.0
    operation: Operation = Operation.ADDITION

    @property
    def is_empty(self) -> bool:
        return self.part is None

    @property
    def relative_tolerance(self) -> float:
        return relative_tolerance(self.tolerance, self.operation)

    @property
    def minor_radius(self) -> float:
        return (self.thread.minor_diameter + self.relative_tolerance) / 2

    @property
    def major_radius(self) -> float:
        return (self.thread.major_diameter + self.relative_tolerance) / 2


def lead_in_cutter(
    major_radius: float,
    depth: float,
    length: float,
    face_z: float,
    inward: int,
) -> Part:
    """
    Ring that removes the material outside a lead-in cone.

    The cone runs from ``major_radius - depth`` on the end face at
    *face_z* to ``major_radius`` at ``length`` along *inward* (+1 when the
    solid lies above the face, -1 when below).
    """
    extension = LEAD_IN_CUTTER_EXTENSION
    outer = major_radius + depth + 1.0
    inner_z = face_z + inward * length * (1 + extension)
    outer_z = face_z - inward * length * extension

    points = [
        (max(0.0, major_radius - depth * (1 + extension)), outer_z),
        (major_radius + depth * extension, inner_z),
        (outer, inner_z),
        (outer, outer_z),
    ]
    return revolved_profile(points)


def _apply_lead_in(part, thread: ThreadSpec, lead_in: Optional[LeadIn], major_radius: float, face_z: float, inward: int):
    if lead_in is None:
        return part
    depth, length = lead_in.resolved(thread)
    if depth <= 0 or length <= 0:
        # Zero-depth thread (plain rod): nothing to chamfer
        logger.debug(f"Lead-in at z={face_z:.3f} resolves to nothing on {thread.describe()}")
        return part
    logger.debug(f"Lead-in at z={face_z:.3f}: depth={depth:.3f}, length={length:.3f}")
    return cut(part, lead_in_cutter(major_radius, depth, length, face_z, inward))


def _swept_body(thread: ThreadSpec, length: float, minor_radius: float, major_radius: float):
    extended_length = length + thread.pitch

    if isinstance(thread.form, SolidThreadform):
        # Solid turns tile the full pitch: the sweep is a plain cylinder
        return Cylinder(
            radius=major_radius, height=length,
            align=(Align.CENTER, Align.CENTER, Align.MIN),
        )

    profile = cross_section(thread.form, thread)
    logger.info(f"Sweeping {thread.starts} start(s) of {thread.describe()}...")
    ridges = [
        sweep_profile(
            profile,
            radius=minor_radius,
            lead=thread.lead,
            height=extended_length,
            start_angle=360.0 / thread.starts * index,
        )
        for index in range(thread.starts)
    ]

    if thread.is_left_handed:
        ridges = [ridge.mirror(Plane.YZ) for ridge in ridges]

    logger.info(f"Creating core cylinder (radius={minor_radius:.3f}mm, height={extended_length:.3f}mm)...")
    core = Cylinder(
        radius=minor_radius + CORE_OVERLAP_MM,
        height=extended_length,
        align=(Align.CENTER, Align.CENTER, Align.MIN),
    )
    body = fuse_all([core] + ridges)

    body = Pos(0, 0, -thread.pitch / 2) * body
    logger.info(f"Trimming to final length ({length:.3f}mm)...")
    return clip_z(body, 0.0, length, major_radius)


def thread_solid(
    thread: ThreadSpec,
    length: float,
    lead_ins: Optional[LeadInEnds] = None,
    tolerance: float = 0.0,
    operation: Operation = Operation.ADDITION,
) -> ThreadedSolid:
    """
    Build the threaded solid for *thread* from z=0 to z=length.

    Args:
        thread: Thread specification
        length: Axial length in mm; zero or negative gives an empty result
        lead_ins: Chamfers for the min-Z (leading) and max-Z (trailing) ends
        tolerance: Clearance in mm applied to both diameters
        operation: ADDITION shrinks by the tolerance, SUBTRACTION grows by it

    Returns:
        ThreadedSolid tagged with *thread*
    """
    lead_ins = lead_ins or LeadInEnds.none()
    result = ThreadedSolid(None, thread, length, tolerance, operation)
    if length <= 0:
        logger.debug(f"Thread length {length} <= 0, no geometry")
        return result

    minor_radius = result.minor_radius
    major_radius = result.major_radius

    body = _swept_body(thread, length, minor_radius, major_radius)
    body = _apply_lead_in(body, thread, lead_ins.leading, major_radius, 0.0, +1)
    body = _apply_lead_in(body, thread, lead_ins.trailing, major_radius, length, -1)

    body = largest_solid(repair_geometry(body))
    body.label = thread.describe()
    logger.debug(f"Thread solid volume: {body.volume:.3f} mm³")
    return ThreadedSolid(body, thread, length, tolerance, operation)


class ScrewGeometry(BaseGeometry):
    """A bare threaded rod: the thread solid on its own."""

    _part_name = "screw"

    def __init__(
        self,
        thread: ThreadSpec,
        length: float,
        lead_ins: Optional[LeadInEnds] = None,
        tolerance: float = 0.0,
    ):
        if length <= 0:
            raise ValueError(f"Screw length must be positive, got {length}")
        self.thread = thread
        self.length = length
        self.lead_ins = lead_ins or LeadInEnds.none()
        self.tolerance = tolerance
        self._part = None

    def build(self) -> Part:
        if self._part is not None:
            return self._part
        solid = thread_solid(self.thread, self.length, self.lead_ins, self.tolerance)
        self._part = solid.part
        return self._part
