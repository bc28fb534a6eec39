"""
Bolt geometry: head, drive socket, unthreaded shank, thread and point.

Coordinate frame: the top of the head sits at z=0 and the shank runs along
+Z. The nominal length is measured the way the head type is measured in
practice: from under the head for cap and hex heads, overall for
countersunk heads (``consumed_length`` is the part of the nominal length
taken up by the head).

Supports:
- Hex, cylindrical (socket cap, rounded cheese) and countersunk heads,
  the latter optionally raised
- Hex, slotted, Phillips and Torx drive sockets
- Lead-in and chamfered/dog points
- DIN 931, DIN 912, ISO 10642, ISO 2009, DIN 964, DIN 7985, DIN 965/966,
  ISO 14581 and DIN 913/915 standard sizes
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from build123d import Part, Box, Sphere, Align, Pos

from ..enums import Handedness, SetScrewPoint, PhillipsSize, TorxSize
from ..calculator.angle import Angle
from ..calculator.catalog import CatalogError, SizeInput, iso_metric
from ..calculator.constants import (
    HEX_CHAMFER_ANGLE_DEG,
    COUNTERSINK_ANGLE_DEG,
    SOCKET_BOTTOM_ANGLE_DEG,
    SOCKET_HEAD_CHAMFER_RATIO,
    SLOT_WIDTH_RATIO,
    SLOT_DEPTH_RATIO,
    PHILLIPS_TOP_ANGLE_DEG,
    PHILLIPS_BOTTOM_ANGLE_DEG,
    TORX_LOBE_RADIUS_RATIO,
    TORX_LOBE_CENTER_RATIO,
    TORX_INNER_FILLET_RATIO,
    TORX_BOTTOM_ANGLE_DEG,
    CORE_OVERLAP_MM,
    CUTTER_OVERSHOOT_MM,
)
from ..calculator.dimensions import (
    hex_head_dimensions,
    socket_head_dimensions,
    countersunk_dimensions,
    slotted_countersunk_head_diameter,
    set_screw_dimensions,
    raised_countersunk_lens_height,
    phillips_cheese_head_dimensions,
    phillips_countersunk_dimensions,
    torx_countersunk_dimensions,
    phillips_recess_dimensions,
    torx_outer_diameter,
)
from ..calculator.lead_in import LeadIn, LeadInEnds
from ..calculator.thread import ThreadSpec, no_thread
from .booleans import fuse_all, cut, common
from .geometry_base import BaseGeometry
from .geometry_repair import repair_geometry, largest_solid
from .holes import ClearanceHoleGeometry, Countersink, Counterbore, PolygonalRecess
from .screw import thread_solid
from .shapes import cylinder, frustum, polygon_prism, circumradius, revolved_profile, hexalobular_prism

logger = logging.getLogger(__name__)


# =============================================================================
# Heads
# =============================================================================

@dataclass(frozen=True)
class PolygonalHead:
    """
    Hex (or other polygon) head, chamfered on the top corners.

    Attributes:
        sides: Number of flats
        width_across_flats: Distance between opposite flats
        height: Head height (k)
        chamfer_angle: Angle of the corner chamfer against the top face;
            None for sharp corners
        flat_diameter: Diameter of the flat circle left on top by the
            chamfer; defaults to the width across flats
    """
    sides: int
    width_across_flats: float
    height: float
    chamfer_angle: Optional[Angle] = None
    flat_diameter: Optional[float] = None

    consumed_length = 0.0
    lead_in = None

    @property
    def clearance_length(self) -> float:
        return self.height

    def build(self, tolerance: float = 0.0) -> Part:
        width = self.width_across_flats - tolerance
        head = polygon_prism(self.sides, width, self.height)
        if self.chamfer_angle is None:
            return head

        scale = width / self.width_across_flats
        flat_radius = (self.flat_diameter or self.width_across_flats) * scale / 2
        outer = circumradius(self.sides, width) + CUTTER_OVERSHOOT_MM
        # Chamfer cone rises from the flat circle at z=0
        cone_end = (outer - flat_radius) * self.chamfer_angle.tan()
        envelope = revolved_profile([
            (0.0, 0.0),
            (flat_radius, 0.0),
            (outer, cone_end),
            (outer, max(self.height, cone_end) + CUTTER_OVERSHOOT_MM),
            (0.0, max(self.height, cone_end) + CUTTER_OVERSHOOT_MM),
        ])
        return common(head, envelope)

    def recess(self) -> PolygonalRecess:
        return PolygonalRecess(self.sides, self.width_across_flats, self.height)


@dataclass(frozen=True)
class CylindricalHead:
    """
    Cylindrical (cheese or socket cap) head.

    Attributes:
        diameter: Head diameter (dk)
        height: Head height (k)
        top_chamfer: Chamfer on the top edge
        top_radius: Radius of the sphere that rounds the top (rf); the
            sphere touches the top face on the axis
    """
    diameter: float
    height: float
    top_chamfer: float = 0.0
    top_radius: Optional[float] = None

    consumed_length = 0.0
    lead_in = None

    @property
    def clearance_length(self) -> float:
        return self.height

    def build(self, tolerance: float = 0.0) -> Part:
        radius = (self.diameter - tolerance) / 2
        if self.top_chamfer <= 0:
            head = cylinder(radius, self.height)
        else:
            head = revolved_profile([
                (0.0, 0.0),
                (radius - self.top_chamfer, 0.0),
                (radius, self.top_chamfer),
                (radius, self.height),
                (0.0, self.height),
            ])
        if self.top_radius is None:
            return head
        return common(head, Pos(0, 0, self.top_radius) * Sphere(self.top_radius))

    def recess(self) -> Counterbore:
        return Counterbore(self.diameter, self.height)


@dataclass(frozen=True)
class CountersunkHead:
    """
    Countersunk head: a cone from the top diameter down to the shank,
    optionally under a raised lens (oval head).

    The cone lies inside the nominal length, so ``consumed_length`` is the
    cone height; only the lens sits above the countersink.
    """
    top_diameter: float
    bolt_diameter: float
    angle: Angle = Angle.from_degrees(COUNTERSINK_ANGLE_DEG)
    lens_height: float = 0.0

    lead_in = None
    clearance_length = 0.0

    @property
    def height(self) -> float:
        return (self.top_diameter - self.bolt_diameter) / 2 * (self.angle / 2).tan() + self.lens_height

    @property
    def consumed_length(self) -> float:
        return self.height - self.lens_height

    def build(self, tolerance: float = 0.0) -> Part:
        top_diameter = self.top_diameter - tolerance
        cone_height = top_diameter / 2 * (self.angle / 2).tan()
        cone = frustum(top_diameter / 2, 0.0, cone_height, z=self.lens_height)
        if self.lens_height <= 0:
            return cone

        # Spherical cap whose rim meets the cone at z=lens_height
        sphere_radius = (self.lens_height + top_diameter ** 2 / (4 * self.lens_height)) / 2
        lens = common(
            Pos(0, 0, sphere_radius) * Sphere(sphere_radius),
            cylinder(top_diameter / 2, self.lens_height),
        )
        return fuse_all([lens, cone])

    def recess(self) -> Countersink:
        return Countersink(self.top_diameter, self.angle)


@dataclass(frozen=True)
class ChamferedHead:
    """
    Headless end of a set screw: only a chamfer on the first thread turn.
    """
    chamfer: float

    height = 0.0
    consumed_length = 0.0
    clearance_length = 0.0

    @property
    def lead_in(self) -> LeadIn:
        return LeadIn.constant(self.chamfer)

    def build(self, tolerance: float = 0.0) -> None:
        return None

    def recess(self) -> None:
        return None


BoltHead = Union[PolygonalHead, CylindricalHead, CountersunkHead, ChamferedHead]


# =============================================================================
# Sockets
# =============================================================================

@dataclass(frozen=True)
class PolygonalSocket:
    """
    Hex (or other polygon) drive socket with an optional drilled cone bottom.
    """
    sides: int
    width_across_flats: float
    depth: float
    bottom_angle: Optional[Angle] = None

    def build(self, tolerance: float = 0.0) -> Part:
        width = self.width_across_flats + tolerance
        if self.bottom_angle is None:
            return polygon_prism(self.sides, width, self.depth)

        radius = circumradius(self.sides, width)
        bottom_depth = radius / (self.bottom_angle / 2).tan()
        prism = polygon_prism(self.sides, width, self.depth + bottom_depth)
        drill = fuse_all([
            cylinder(radius, self.depth),
            frustum(radius, 0.0, bottom_depth, z=self.depth),
        ])
        return common(prism, drill)


@dataclass(frozen=True)
class SlottedSocket:
    """Straight slot across the head."""
    width: float
    depth: float
    length: float

    def build(self, tolerance: float = 0.0) -> Part:
        return Box(
            self.length + 1.0, self.width + tolerance, self.depth,
            align=(Align.CENTER, Align.CENTER, Align.MIN),
        )


@dataclass(frozen=True)
class PhillipsSocket:
    """
    Phillips cross recess (ISO 4757).

    Two crossing slots, bevelled where they meet, intersected with a
    double cone: the upper cone narrows from ``width`` at the head surface
    to the bottom width g, the lower cone closes to a point.

    Attributes:
        size: Driver size
        width: Recess diameter at the head surface (m)
    """
    size: PhillipsSize
    width: float

    def _depths(self, tolerance: float = 0.0) -> Tuple[float, float]:
        bottom = phillips_recess_dimensions(self.size).bottom_width + tolerance
        top_depth = ((self.width + tolerance) - bottom) / 2 / Angle.from_degrees(PHILLIPS_TOP_ANGLE_DEG).tan()
        bottom_depth = bottom / 2 * Angle.from_degrees(PHILLIPS_BOTTOM_ANGLE_DEG).tan()
        return top_depth, bottom_depth

    @property
    def depth(self) -> float:
        return sum(self._depths())

    def build(self, tolerance: float = 0.0) -> Part:
        dims = phillips_recess_dimensions(self.size)
        width = self.width + tolerance
        bottom = dims.bottom_width + tolerance
        slot = dims.slot_width + tolerance
        top_depth, bottom_depth = self._depths(tolerance)
        depth = top_depth + bottom_depth

        cone = fuse_all([
            frustum(width / 2, bottom / 2, top_depth),
            frustum(bottom / 2, 0.0, bottom_depth, z=top_depth),
        ])
        align = (Align.CENTER, Align.CENTER, Align.MIN)
        cross = fuse_all([
            Box(width + 1.0, slot, depth, align=align),
            Box(slot, width + 1.0, depth, align=align),
            # Corner bevels: a square with its corners on the diagonals, b apart
            polygon_prism(4, (dims.corner_distance + tolerance) / math.sqrt(2), depth),
        ])
        return common(cone, cross)


@dataclass(frozen=True)
class TorxSocket:
    """Hexalobular (Torx) socket with a 90° drilled cone under it."""
    size: TorxSize
    depth: float

    def build(self, tolerance: float = 0.0) -> Part:
        a = torx_outer_diameter(self.size)
        radius = (a + tolerance) / 2
        cone_height = radius / (Angle.from_degrees(TORX_BOTTOM_ANGLE_DEG) / 2).tan()
        star = hexalobular_prism(
            lobe_center=a * TORX_LOBE_CENTER_RATIO,
            lobe_radius=a * TORX_LOBE_RADIUS_RATIO,
            fillet_radius=a * TORX_INNER_FILLET_RATIO,
            height=self.depth + cone_height,
            offset=tolerance / 2,
        )
        drill = fuse_all([
            cylinder(radius, self.depth),
            frustum(radius, 0.0, cone_height, z=self.depth),
        ])
        return common(star, drill)


BoltSocket = Union[PolygonalSocket, SlottedSocket, PhillipsSocket, TorxSocket]


# =============================================================================
# Points
# =============================================================================

@dataclass(frozen=True)
class LeadInPoint:
    """Free end chamfered by a lead-in; takes no length of its own."""
    lead_in: LeadIn = field(default_factory=LeadIn.standard)

    consumed_length = 0.0

    def build(self, thread: ThreadSpec, tolerance: float = 0.0) -> None:
        return None


@dataclass(frozen=True)
class ChamferedPoint:
    """
    Set screw point: a chamfer on the last turn and an optional dog point.

    Attributes:
        chamfer_size: Radial chamfer depth; the point diameter is the major
            diameter minus twice this
        dog_point_length: Length of the reduced cylinder beyond the thread
    """
    chamfer_size: float
    dog_point_length: float = 0.0

    @property
    def consumed_length(self) -> float:
        return self.dog_point_length

    @property
    def lead_in(self) -> LeadIn:
        return LeadIn.constant(self.chamfer_size)

    def build(self, thread: ThreadSpec, tolerance: float = 0.0) -> Optional[Part]:
        if self.dog_point_length <= 0:
            return None
        radius = (thread.major_diameter - tolerance) / 2 - self.chamfer_size
        return cylinder(radius, self.dog_point_length)


BoltPoint = Union[LeadInPoint, ChamferedPoint]


# =============================================================================
# Bolt
# =============================================================================

class BoltGeometry(BaseGeometry):
    """
    Complete bolt built from a head, optional socket, shank and point.

    Args:
        thread: Thread of the shank
        length: Nominal length in mm
        head: Head shape
        socket: Drive socket cut into the head
        point: Shape of the free end
        unthreaded_length: Plain shank between head and thread
        unthreaded_diameter: Plain shank diameter (default: major diameter)
        tolerance: Clearance in mm; external features shrink by it
    """

    _part_name = "bolt"

    def __init__(
        self,
        thread: ThreadSpec,
        length: float,
        head: BoltHead,
        socket: Optional[BoltSocket] = None,
        point: Optional[BoltPoint] = None,
        unthreaded_length: float = 0.0,
        unthreaded_diameter: Optional[float] = None,
        tolerance: float = 0.0,
    ):
        if length <= 0:
            raise ValueError(f"Bolt length must be positive, got {length}")
        if unthreaded_length < 0 or unthreaded_length > length:
            raise ValueError(
                f"Unthreaded length must be within 0..{length}, got {unthreaded_length}"
            )
        self.thread = thread
        self.length = length
        self.head = head
        self.socket = socket
        self.point = point
        self.unthreaded_length = unthreaded_length
        self.unthreaded_diameter = unthreaded_diameter or thread.major_diameter
        self.tolerance = tolerance
        self._part = None

    @property
    def base_level(self) -> float:
        """Z where the shank leaves the head."""
        return self.head.height - self.head.consumed_length

    @property
    def thread_length(self) -> float:
        consumed = self.point.consumed_length if self.point is not None else 0.0
        return self.length - self.unthreaded_length - consumed

    @property
    def lead_ins(self) -> LeadInEnds:
        leading = self.head.lead_in if self.unthreaded_length == 0 else None
        trailing = getattr(self.point, "lead_in", None)
        return LeadInEnds(leading, trailing)

    def build(self) -> Part:
        if self._part is not None:
            return self._part

        base = self.base_level
        thread_start = base + self.unthreaded_length
        thread_end = thread_start + max(self.thread_length, 0.0)
        logger.info(
            f"Building bolt: {self.thread.describe()}, length={self.length:.2f}mm, "
            f"thread length={self.thread_length:.2f}mm"
        )

        threaded = thread_solid(self.thread, self.thread_length, self.lead_ins, self.tolerance)
        joint_radius = threaded.minor_radius

        parts = [self.head.build(self.tolerance)]
        if self.unthreaded_length > 0:
            radius = (self.unthreaded_diameter - self.tolerance) / 2
            joint_radius = min(joint_radius, radius)
            parts.append(cylinder(radius, self.unthreaded_length, z=base))
        if threaded.part is not None:
            parts.append(Pos(0, 0, thread_start) * threaded.part)
        point = self.point.build(self.thread, self.tolerance) if self.point is not None else None
        if point is not None:
            parts.append(Pos(0, 0, thread_end) * point)

        seams = []
        if base > 0 and len(parts) > 1:
            seams.append(base)
        if threaded.part is not None and self.unthreaded_length > 0:
            seams.append(thread_start)
        if threaded.part is not None and point is not None:
            seams.append(thread_end)
        # Thin overlapping discs at each seam so coplanar faces fuse into one solid
        for z in seams:
            parts.append(cylinder(joint_radius / 2, 2 * CORE_OVERLAP_MM, z=z - CORE_OVERLAP_MM))

        body = fuse_all(parts)
        if self.socket is not None:
            logger.info("Cutting drive socket...")
            socket = Pos(0, 0, -CUTTER_OVERSHOOT_MM) * self.socket.build(self.tolerance)
            body = cut(body, socket)

        body = largest_solid(repair_geometry(body))
        body.label = f"{self.thread.describe()} x {self.length:g}"
        self._part = body
        return self._part

    def clearance_hole(
        self,
        depth: Optional[float] = None,
        recessed_head: bool = False,
    ) -> ClearanceHoleGeometry:
        """
        Clearance hole sized for this bolt.

        With *recessed_head* the hole is deep enough to sink the head below
        the surface; otherwise it covers the length below the head.
        """
        if depth is None:
            if recessed_head:
                depth = self.length + self.head.clearance_length
            else:
                depth = self.length - self.head.consumed_length
        entry = self.head.recess() if recessed_head else None
        return ClearanceHoleGeometry(
            self.thread.major_diameter, depth, entry=entry, tolerance=self.tolerance,
        )


# =============================================================================
# Standard bolts
# =============================================================================

def hex_head(
    size: SizeInput,
    length: float,
    unthreaded_length: float = 0.0,
    handedness: Handedness = Handedness.RIGHT,
    starts: int = 1,
    tolerance: float = 0.0,
) -> BoltGeometry:
    """DIN 931 hex head bolt."""
    thread = iso_metric(size, handedness=handedness, starts=starts)
    dims = hex_head_dimensions(size)
    head = PolygonalHead(
        sides=6,
        width_across_flats=dims.width_across_flats,
        height=dims.head_height,
        chamfer_angle=Angle.from_degrees(HEX_CHAMFER_ANGLE_DEG),
    )
    return BoltGeometry(
        thread, length, head,
        unthreaded_length=unthreaded_length, tolerance=tolerance,
    )


def hex_socket_head_cap(
    size: SizeInput,
    length: float,
    unthreaded_length: float = 0.0,
    handedness: Handedness = Handedness.RIGHT,
    starts: int = 1,
    tolerance: float = 0.0,
) -> BoltGeometry:
    """DIN 912 hex socket head cap screw."""
    thread = iso_metric(size, handedness=handedness, starts=starts)
    dims = socket_head_dimensions(size)
    d = thread.major_diameter
    head = CylindricalHead(
        diameter=dims.head_diameter,
        height=d,
        top_chamfer=d * SOCKET_HEAD_CHAMFER_RATIO,
    )
    socket = PolygonalSocket(
        sides=6,
        width_across_flats=dims.socket_width,
        depth=d / 2,
        bottom_angle=Angle.from_degrees(SOCKET_BOTTOM_ANGLE_DEG),
    )
    return BoltGeometry(
        thread, length, head, socket=socket,
        unthreaded_length=unthreaded_length, tolerance=tolerance,
    )


def hex_socket_countersunk(
    size: SizeInput,
    length: float,
    unthreaded_length: float = 0.0,
    handedness: Handedness = Handedness.RIGHT,
    starts: int = 1,
    tolerance: float = 0.0,
) -> BoltGeometry:
    """ISO 10642 hex socket countersunk screw."""
    thread = iso_metric(size, handedness=handedness, starts=starts)
    dims = countersunk_dimensions(size)
    head = CountersunkHead(top_diameter=dims.head_diameter, bolt_diameter=thread.major_diameter)
    socket = PolygonalSocket(
        sides=6,
        width_across_flats=dims.socket_width,
        depth=dims.socket_depth,
        bottom_angle=Angle.from_degrees(SOCKET_BOTTOM_ANGLE_DEG),
    )
    return BoltGeometry(
        thread, length, head, socket=socket,
        unthreaded_length=unthreaded_length, tolerance=tolerance,
    )


def _plain_neck_bolt(
    thread: ThreadSpec,
    length: float,
    head: CountersunkHead,
    socket: BoltSocket,
    unthreaded_length: float,
    tolerance: float,
) -> BoltGeometry:
    # Shank stays plain at the pitch diameter for a tenth of d below the cone
    unthreaded_length = max(head.consumed_length + thread.major_diameter / 10, unthreaded_length)
    return BoltGeometry(
        thread, length, head, socket=socket,
        unthreaded_length=unthreaded_length,
        unthreaded_diameter=thread.pitch_diameter,
        tolerance=tolerance,
    )


def _slot(head_diameter: float, lens_height: float = 0.0) -> SlottedSocket:
    return SlottedSocket(
        width=head_diameter * SLOT_WIDTH_RATIO,
        depth=head_diameter * SLOT_DEPTH_RATIO + lens_height,
        length=head_diameter,
    )


def slotted_countersunk(
    size: SizeInput,
    length: float,
    unthreaded_length: float = 0.0,
    handedness: Handedness = Handedness.RIGHT,
    starts: int = 1,
    tolerance: float = 0.0,
) -> BoltGeometry:
    """
    ISO 2009 slotted countersunk screw.

    The shank under the head is left plain at the pitch diameter for at
    least a tenth of the major diameter below the cone.
    """
    thread = iso_metric(size, handedness=handedness, starts=starts)
    head_diameter = slotted_countersunk_head_diameter(size)
    head = CountersunkHead(
        top_diameter=head_diameter,
        bolt_diameter=thread.major_diameter - thread.depth,
    )
    return _plain_neck_bolt(thread, length, head, _slot(head_diameter), unthreaded_length, tolerance)


def raised_slotted_countersunk(
    size: SizeInput,
    length: float,
    unthreaded_length: float = 0.0,
    handedness: Handedness = Handedness.RIGHT,
    starts: int = 1,
    tolerance: float = 0.0,
) -> BoltGeometry:
    """
    DIN 964 (ISO 2010) raised slotted countersunk screw.

    The ISO 2009 head with a lens on top; the slot is deepened by the lens
    height. Length is measured from the rim of the countersink.
    """
    thread = iso_metric(size, handedness=handedness, starts=starts)
    head_diameter = slotted_countersunk_head_diameter(size)
    lens_height = raised_countersunk_lens_height(size)
    head = CountersunkHead(
        top_diameter=head_diameter,
        bolt_diameter=thread.major_diameter - thread.depth,
        lens_height=lens_height,
    )
    socket = _slot(head_diameter, lens_height)
    return _plain_neck_bolt(thread, length, head, socket, unthreaded_length, tolerance)


def phillips_cheese_head(
    size: SizeInput,
    length: float,
    unthreaded_length: float = 0.0,
    handedness: Handedness = Handedness.RIGHT,
    starts: int = 1,
    tolerance: float = 0.0,
) -> BoltGeometry:
    """DIN 7985 (ISO 7045) Phillips raised cheese head screw."""
    thread = iso_metric(size, handedness=handedness, starts=starts)
    dims = phillips_cheese_head_dimensions(size)
    head = CylindricalHead(
        diameter=dims.head_diameter,
        height=dims.head_height,
        top_radius=dims.top_radius,
    )
    return BoltGeometry(
        thread, length, head,
        socket=PhillipsSocket(dims.phillips_size, dims.socket_width),
        unthreaded_length=unthreaded_length,
        unthreaded_diameter=thread.pitch_diameter,
        tolerance=tolerance,
    )


def phillips_countersunk(
    size: SizeInput,
    length: float,
    unthreaded_length: float = 0.0,
    handedness: Handedness = Handedness.RIGHT,
    starts: int = 1,
    tolerance: float = 0.0,
    raised: bool = False,
) -> BoltGeometry:
    """
    DIN 965 Phillips countersunk screw, or DIN 966 with ``raised``.

    The raised (oval) head carries a lens a quarter of the thread diameter
    high.
    """
    thread = iso_metric(size, handedness=handedness, starts=starts)
    dims = phillips_countersunk_dimensions(size)
    head = CountersunkHead(
        top_diameter=dims.head_diameter,
        bolt_diameter=thread.major_diameter - thread.depth,
        lens_height=thread.major_diameter / 4 if raised else 0.0,
    )
    socket = PhillipsSocket(dims.phillips_size, dims.socket_width)
    return _plain_neck_bolt(thread, length, head, socket, unthreaded_length, tolerance)


def torx_countersunk(
    size: SizeInput,
    length: float,
    unthreaded_length: float = 0.0,
    handedness: Handedness = Handedness.RIGHT,
    starts: int = 1,
    tolerance: float = 0.0,
) -> BoltGeometry:
    """ISO 14581 hexalobular socket countersunk screw."""
    thread = iso_metric(size, handedness=handedness, starts=starts)
    dims = torx_countersunk_dimensions(size)
    head = CountersunkHead(
        top_diameter=dims.head_diameter,
        bolt_diameter=thread.major_diameter - thread.depth,
    )
    socket = TorxSocket(dims.torx_size, dims.socket_depth)
    return _plain_neck_bolt(thread, length, head, socket, unthreaded_length, tolerance)


def hex_socket_set_screw(
    size: SizeInput,
    length: float,
    point: SetScrewPoint = SetScrewPoint.FLAT,
    handedness: Handedness = Handedness.RIGHT,
    starts: int = 1,
    tolerance: float = 0.0,
) -> BoltGeometry:
    """
    DIN 913 (flat point) or DIN 915 (dog point) hex socket set screw.

    Raises:
        CatalogError: If the size has no dog point variant
    """
    thread = iso_metric(size, handedness=handedness, starts=starts)
    dims = set_screw_dimensions(size)
    d = thread.major_diameter

    if point == SetScrewPoint.DOG:
        if dims.dog_point_diameter is None:
            raise CatalogError(f"{thread.designation} has no DIN 915 dog point size")
        point_diameter = dims.dog_point_diameter
        dog_length = d / 2
    else:
        point_diameter = dims.flat_point_diameter
        dog_length = 0.0

    return BoltGeometry(
        thread, length,
        head=ChamferedHead(chamfer=thread.depth),
        socket=PolygonalSocket(6, dims.socket_width, dims.socket_depth),
        point=ChamferedPoint((d - point_diameter) / 2, dog_point_length=dog_length),
        tolerance=tolerance,
    )


def unthreaded(
    diameter: float,
    length: float,
    head: BoltHead,
    socket: Optional[BoltSocket] = None,
    point: Optional[BoltPoint] = None,
    tolerance: float = 0.0,
) -> BoltGeometry:
    """Bolt with a plain shank, for when thread detail does not matter."""
    return BoltGeometry(
        no_thread(diameter), length, head,
        socket=socket, point=point,
        unthreaded_length=length, unthreaded_diameter=diameter,
        tolerance=tolerance,
    )
