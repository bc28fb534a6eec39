"""
Nut geometry: a polygonal body with an internal thread cut through it.

The nut sits on z=0 and extends to z=thickness. The thread void is built
in the subtraction context, so tolerance widens the hole while it shrinks
the body across flats.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from build123d import (
    Part, Plane, Axis, BuildPart, BuildSketch, BuildLine, Polyline, make_face, fillet, revolve, extrude,
)

from ..enums import Handedness, Operation, SquareNutSeries
from ..calculator.angle import Angle
from ..calculator.catalog import SizeInput, iso_metric
from ..calculator.constants import (
    HEX_CHAMFER_ANGLE_DEG,
    HEX_NUT_FLAT_DIAMETER_RATIO,
    FLANGE_ANGLE_DEG,
    CUTTER_OVERSHOOT_MM,
)
from ..calculator.dimensions import (
    hex_nut_dimensions,
    square_nut_dimensions,
    flanged_hex_nut_dimensions,
    t_slot_nut_dimensions,
)
from ..calculator.lead_in import LeadIn, LeadInEnds
from ..calculator.thread import ThreadSpec, relative_tolerance
from .booleans import cut, common, fuse_all
from .geometry_base import BaseGeometry
from .geometry_repair import repair_geometry, largest_solid
from .holes import lead_in_cones
from .screw import thread_solid
from .shapes import cylinder, polygon_prism, circumradius, revolved_profile

logger = logging.getLogger(__name__)

# Included cone angle of the countersunk thread entries on standard nuts
NUT_LEAD_IN_CONE_ANGLE_DEG = 120.0
T_SLOT_LEAD_IN_CONE_ANGLE_DEG = 90.0


@dataclass(frozen=True)
class PolygonalNutBody:
    """
    Hex, square or other polygonal nut body.

    Attributes:
        sides: Number of flats
        thickness: Nut height (m)
        width_across_flats: Distance between opposite flats (s)
        chamfer_angle: Corner chamfer angle against the end faces
        top_chamfer_depth: Radial depth of the chamfer at z=thickness
        bottom_chamfer_depth: Radial depth of the chamfer at z=0
    """
    sides: int
    thickness: float
    width_across_flats: float
    chamfer_angle: Optional[Angle] = None
    top_chamfer_depth: float = 0.0
    bottom_chamfer_depth: float = 0.0

    def __post_init__(self):
        if self.sides < 3:
            raise ValueError(f"A nut needs at least 3 sides, got {self.sides}")
        if self.thickness <= 0 or self.width_across_flats <= 0:
            raise ValueError(
                f"Nut thickness and width must be positive, got "
                f"thickness={self.thickness}, width={self.width_across_flats}"
            )

    @property
    def threaded_depth(self) -> float:
        return self.thickness

    @property
    def rotation(self) -> float:
        return 180.0 / self.sides

    def build(self, tolerance: float = 0.0) -> Part:
        width = self.width_across_flats + relative_tolerance(tolerance, Operation.ADDITION)
        body = polygon_prism(self.sides, width, self.thickness, rotation=self.rotation)

        if self.chamfer_angle is None or (self.top_chamfer_depth <= 0 and self.bottom_chamfer_depth <= 0):
            return body

        radius = circumradius(self.sides, width)
        outer = radius + CUTTER_OVERSHOOT_MM
        slope = self.chamfer_angle.tan()

        # Envelope profile, bottom edge first
        points = [(0.0, 0.0)]
        if self.bottom_chamfer_depth > 0:
            points.append((radius - self.bottom_chamfer_depth, 0.0))
            points.append((outer, (self.bottom_chamfer_depth + CUTTER_OVERSHOOT_MM) * slope))
        else:
            points.append((outer, 0.0))
        if self.top_chamfer_depth > 0:
            points.append((outer, self.thickness - (self.top_chamfer_depth + CUTTER_OVERSHOOT_MM) * slope))
            points.append((radius - self.top_chamfer_depth, self.thickness))
        else:
            points.append((outer, self.thickness))
        points.append((0.0, self.thickness))

        return common(body, revolved_profile(points))

    def nut_trap(self, tolerance: float = 0.0, depth_clearance: float = 0.0) -> Part:
        """Pocket that holds this nut: the plain polygon, widened by tolerance."""
        return polygon_prism(
            self.sides,
            self.width_across_flats + tolerance,
            self.thickness + depth_clearance,
            rotation=self.rotation,
        )


@dataclass(frozen=True)
class FlangedNutBody:
    """
    Nut body with a conical washer flange at z=0.

    The flange is a cone of ``angle`` against the base plane, its rim
    rounded by ``rounding_diameter``; ``flange_diameter`` is where the rim
    rounding meets the base plane.
    """
    base: PolygonalNutBody
    flange_diameter: float
    rounding_diameter: float
    angle: Angle = Angle.from_degrees(FLANGE_ANGLE_DEG)

    def __post_init__(self):
        if self.flange_diameter <= 0 or self.rounding_diameter < 0:
            raise ValueError(
                f"Flange needs a positive diameter and non-negative rounding, got "
                f"diameter={self.flange_diameter}, rounding={self.rounding_diameter}"
            )
        if not 0 < self.angle.degrees < 90:
            raise ValueError(f"Flange angle must be in (0°, 90°), got {self.angle}")

    @property
    def threaded_depth(self) -> float:
        return self.base.threaded_depth

    @property
    def extended_diameter(self) -> float:
        """Diameter of the flange cone before its rim is rounded."""
        radius = self.rounding_diameter / 2
        x_offset = self.angle.sin() * radius
        y_offset = self.angle.cos() * radius
        return self.flange_diameter + 2 * ((y_offset + radius) / self.angle.tan() + x_offset)

    def build(self, tolerance: float = 0.0) -> Part:
        radius = self.extended_diameter / 2 + relative_tolerance(tolerance, Operation.ADDITION) / 2
        apex = self.angle.tan() * radius
        with BuildPart() as flange:
            with BuildSketch(Plane.XZ) as profile:
                with BuildLine():
                    Polyline((0.0, 0.0), (radius, 0.0), (0.0, apex), close=True)
                make_face()
                if self.rounding_diameter > 0:
                    fillet(profile.vertices().sort_by(Axis.X)[-1], radius=self.rounding_diameter / 2)
            revolve(axis=Axis.Z)
        return fuse_all([self.base.build(tolerance), flange.part])

    def nut_trap(self, tolerance: float = 0.0, depth_clearance: float = 0.0) -> Part:
        """Round pocket that clears the flange."""
        return cylinder(
            (self.extended_diameter + tolerance) / 2,
            self.base.thickness + depth_clearance,
        )


@dataclass(frozen=True)
class TSlotNutBody:
    """
    T-slot nut for extruded profiles: a wide base that rides in the
    channel and a narrower neck that passes the slot opening.

    The base spans z=0..base_height, the neck continues to ``height``; the
    neck runs along X. ``chamfer_depth`` bevels the bottom long edges.
    """
    base_width: float
    base_height: float
    neck_width: float
    height: float
    chamfer_depth: float = 0.0

    def __post_init__(self):
        if not 0 < self.base_height < self.height:
            raise ValueError(
                f"Base height must lie within (0, {self.height}), got {self.base_height}"
            )
        if not 0 < self.neck_width < self.base_width:
            raise ValueError(
                f"Neck width must lie within (0, {self.base_width}), got {self.neck_width}"
            )
        if self.chamfer_depth < 0 or self.chamfer_depth >= min(self.base_height, self.base_width / 2):
            raise ValueError(f"Chamfer depth {self.chamfer_depth} does not fit the base")

    @property
    def threaded_depth(self) -> float:
        return self.height

    def _solid(self, width_offset: float, extra_depth: float, chamfer: float) -> Part:
        half_base = (self.base_width + width_offset) / 2
        half_neck = (self.neck_width + width_offset) / 2
        base_top = self.base_height + extra_depth
        top = self.height + extra_depth
        # Cross-section in the YZ plane, extruded along X
        if chamfer > 0:
            bottom = [(-half_base + chamfer, 0.0), (half_base - chamfer, 0.0), (half_base, chamfer)]
        else:
            bottom = [(-half_base, 0.0), (half_base, 0.0)]
        points = bottom + [
            (half_base, base_top),
            (half_neck, base_top),
            (half_neck, top),
            (-half_neck, top),
            (-half_neck, base_top),
            (-half_base, base_top),
        ]
        if chamfer > 0:
            points.append((-half_base, chamfer))
        with BuildPart() as nut:
            with BuildSketch(Plane.YZ):
                with BuildLine():
                    Polyline(*points, close=True)
                make_face()
            extrude(amount=half_base, both=True)
        return nut.part

    def build(self, tolerance: float = 0.0) -> Part:
        return self._solid(relative_tolerance(tolerance, Operation.ADDITION), 0.0, self.chamfer_depth)

    def nut_trap(self, tolerance: float = 0.0, depth_clearance: float = 0.0) -> Part:
        """Pocket of the nut outline without the chamfer, widened by tolerance."""
        return self._solid(tolerance, depth_clearance, 0.0)


NutBody = Union[PolygonalNutBody, FlangedNutBody, TSlotNutBody]


class NutGeometry(BaseGeometry):
    """
    Threaded nut.

    Args:
        thread: Internal thread
        body: Outer shape
        lead_ins: Countersinks at the thread entries
        tolerance: Clearance in mm
    """

    _part_name = "nut"

    def __init__(
        self,
        thread: ThreadSpec,
        body: NutBody,
        lead_ins: Optional[LeadInEnds] = None,
        tolerance: float = 0.0,
    ):
        self.thread = thread
        self.body = body
        self.lead_ins = lead_ins or LeadInEnds.none()
        self.tolerance = tolerance
        self._part = None

    def build(self) -> Part:
        if self._part is not None:
            return self._part

        depth = self.body.threaded_depth
        logger.info(
            f"Building nut: {self.thread.describe()}, {type(self.body).__name__}, "
            f"threaded depth={depth:.2f}mm"
        )
        void = thread_solid(
            self.thread, depth, tolerance=self.tolerance, operation=Operation.SUBTRACTION,
        )
        cutter = fuse_all([void.part] + lead_in_cones(
            self.thread, self.lead_ins, depth, void.minor_radius,
        ))

        logger.info("Cutting thread...")
        nut = cut(self.body.build(self.tolerance), cutter)
        nut = largest_solid(repair_geometry(nut))
        nut.label = f"Nut {self.thread.describe()}"
        self._part = nut
        return self._part

    def nut_trap(self, depth_clearance: float = 0.0) -> Part:
        return self.body.nut_trap(self.tolerance, depth_clearance)


def _standard_lead_ins(cone_angle: float = NUT_LEAD_IN_CONE_ANGLE_DEG) -> LeadInEnds:
    return LeadInEnds.both(LeadIn.angle(Angle.from_degrees(cone_angle)))


def hex_nut(
    size: SizeInput,
    handedness: Handedness = Handedness.RIGHT,
    starts: int = 1,
    tolerance: float = 0.0,
) -> NutGeometry:
    """DIN 934 hex nut, both ends chamfered down to 0.95 s."""
    thread = iso_metric(size, handedness=handedness, starts=starts)
    dims = hex_nut_dimensions(size)
    s = dims.width_across_flats
    chamfer_depth = circumradius(6, s) - s * HEX_NUT_FLAT_DIAMETER_RATIO / 2
    body = PolygonalNutBody(
        sides=6,
        thickness=dims.thickness,
        width_across_flats=s,
        chamfer_angle=Angle.from_degrees(HEX_CHAMFER_ANGLE_DEG),
        top_chamfer_depth=chamfer_depth,
        bottom_chamfer_depth=chamfer_depth,
    )
    return NutGeometry(thread, body, _standard_lead_ins(), tolerance)


def square_nut(
    size: SizeInput,
    series: SquareNutSeries = SquareNutSeries.REGULAR,
    handedness: Handedness = Handedness.RIGHT,
    starts: int = 1,
    tolerance: float = 0.0,
) -> NutGeometry:
    """DIN 557 square nut (chamfered top) or DIN 562 thin square nut (sharp)."""
    thin = series == SquareNutSeries.THIN
    thread = iso_metric(size, handedness=handedness, starts=starts)
    dims = square_nut_dimensions(size, thin=thin)
    s = dims.width_across_flats
    if thin:
        body = PolygonalNutBody(sides=4, thickness=dims.thickness, width_across_flats=s)
    else:
        body = PolygonalNutBody(
            sides=4,
            thickness=dims.thickness,
            width_across_flats=s,
            chamfer_angle=Angle.from_degrees(HEX_CHAMFER_ANGLE_DEG),
            top_chamfer_depth=circumradius(4, s) - s / 2,
        )
    return NutGeometry(thread, body, _standard_lead_ins(), tolerance)


def flanged_hex_nut(
    size: SizeInput,
    handedness: Handedness = Handedness.RIGHT,
    starts: int = 1,
    tolerance: float = 0.0,
) -> NutGeometry:
    """DIN 6923 (ISO 4161) flanged hex nut; the hex is chamfered on top only."""
    thread = iso_metric(size, handedness=handedness, starts=starts)
    dims = flanged_hex_nut_dimensions(size)
    s = dims.width_across_flats
    base = PolygonalNutBody(
        sides=6,
        thickness=dims.thickness,
        width_across_flats=s,
        chamfer_angle=Angle.from_degrees(HEX_CHAMFER_ANGLE_DEG),
        top_chamfer_depth=circumradius(6, s) - s * HEX_NUT_FLAT_DIAMETER_RATIO / 2,
    )
    body = FlangedNutBody(base, dims.flange_diameter, dims.rounding_diameter)
    return NutGeometry(thread, body, _standard_lead_ins(), tolerance)


def t_slot_nut(
    size: SizeInput,
    handedness: Handedness = Handedness.RIGHT,
    starts: int = 1,
    tolerance: float = 0.0,
) -> NutGeometry:
    """DIN 508 T-slot nut with 90° thread entries."""
    thread = iso_metric(size, handedness=handedness, starts=starts)
    dims = t_slot_nut_dimensions(size)
    body = TSlotNutBody(
        base_width=dims.base_width,
        base_height=dims.base_height,
        neck_width=dims.neck_width,
        height=dims.height,
        chamfer_depth=dims.chamfer_depth,
    )
    return NutGeometry(thread, body, _standard_lead_ins(T_SLOT_LEAD_IN_CONE_ANGLE_DEG), tolerance)
