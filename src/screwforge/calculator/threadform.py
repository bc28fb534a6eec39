"""
Thread profile forms.

A threadform describes the 2D cross-section of one thread turn in a local
frame where x is the radial offset from the minor diameter (0 at the minor
diameter, ``depth`` at the major diameter) and y is the axial position,
centred on 0.

The set of forms is closed: Trapezoidal (V, ACME, square, buttress),
Knuckle (round, Edison lamp bases) and Solid (unthreaded shanks). The
module-level functions ``cross_section``, ``minimum_pitch`` and
``pitch_diameter`` dispatch on the form type.
"""

import math
from dataclasses import dataclass
from typing import List, Tuple, Union, TYPE_CHECKING

from .angle import Angle
from .constants import (
    THREAD_ROOT_INSET_MM,
    KNUCKLE_TANGENCY_EPSILON,
    PROFILE_ARC_RESOLUTION_DEG,
)

if TYPE_CHECKING:
    from .thread import ThreadSpec

Point2D = Tuple[float, float]


# =============================================================================
# Profile path
# =============================================================================

@dataclass(frozen=True)
class LineSegment:
    """Straight edge of a profile path."""
    start: Point2D
    end: Point2D

    def points(self, resolution: Angle) -> List[Point2D]:
        return [self.end]


@dataclass(frozen=True)
class ArcSegment:
    """Circular edge of a profile path, swept from start_angle to end_angle."""
    center: Point2D
    radius: float
    start_angle: Angle
    end_angle: Angle
    clockwise: bool = False

    @property
    def sweep(self) -> Angle:
        """Unsigned angle swept by the arc, in (0, 360] degrees."""
        if self.clockwise:
            delta = self.start_angle.radians - self.end_angle.radians
        else:
            delta = self.end_angle.radians - self.start_angle.radians
        while delta <= 0:
            delta += math.tau
        return Angle(delta)

    def point_at(self, angle: Angle) -> Point2D:
        cx, cy = self.center
        return (cx + self.radius * angle.cos(), cy + self.radius * angle.sin())

    def angle_at(self, fraction: float) -> Angle:
        step = self.sweep * fraction
        return self.start_angle - step if self.clockwise else self.start_angle + step

    @property
    def start(self) -> Point2D:
        return self.point_at(self.start_angle)

    @property
    def end(self) -> Point2D:
        return self.point_at(self.end_angle)

    @property
    def mid(self) -> Point2D:
        return self.point_at(self.angle_at(0.5))

    def points(self, resolution: Angle) -> List[Point2D]:
        count = max(2, math.ceil(self.sweep.radians / resolution.radians))
        return [self.point_at(self.angle_at(i / count)) for i in range(1, count + 1)]


Segment = Union[LineSegment, ArcSegment]


@dataclass(frozen=True)
class ThreadProfile:
    """
    Closed cross-section path of one thread turn.

    The path begins at ``start`` and follows ``segments`` in order; the edge
    from the last segment back to ``start`` is implicit.
    """
    start: Point2D
    segments: Tuple[Segment, ...]

    @property
    def line_count(self) -> int:
        """Number of explicit straight segments (flanks and crest flats)."""
        return sum(1 for s in self.segments if isinstance(s, LineSegment))

    @property
    def arc_count(self) -> int:
        return sum(1 for s in self.segments if isinstance(s, ArcSegment))

    def points(self, resolution: Angle = Angle.from_degrees(PROFILE_ARC_RESOLUTION_DEG)) -> List[Point2D]:
        """Polyline approximation of the closed path, starting at ``start``."""
        pts = [self.start]
        for segment in self.segments:
            pts.extend(segment.points(resolution))
        return pts

    def bounds(self) -> Tuple[Point2D, Point2D]:
        """((min_radial, min_axial), (max_radial, max_axial)) of the flattened path."""
        pts = self.points(Angle.from_degrees(1.0))
        xs = [p[0] for p in pts]
        ys = [p[1] for p in pts]
        return (min(xs), min(ys)), (max(xs), max(ys))


# =============================================================================
# Forms
# =============================================================================

@dataclass(frozen=True)
class TrapezoidalThreadform:
    """
    Trapezoidal profile with independent flank angles.

    V-shaped, ACME, square and buttress threads are special cases. Flank
    angles are measured from the radial direction; the leading flank faces
    the -axial side.
    """
    leading_flank_angle: Angle
    trailing_flank_angle: Angle
    crest_width: float

    def __post_init__(self):
        for name in ("leading_flank_angle", "trailing_flank_angle"):
            angle = getattr(self, name)
            if not isinstance(angle, Angle):
                raise TypeError(f"{name} must be an Angle, got {type(angle).__name__}")
            if angle.degrees < 0 or angle.degrees >= 90:
                raise ValueError(f"{name} must be in [0°, 90°), got {angle.degrees:g}°")
        if self.crest_width < 0:
            raise ValueError(f"crest_width must be non-negative, got {self.crest_width}")

    @classmethod
    def symmetric(cls, angle: Angle, crest_width: float) -> "TrapezoidalThreadform":
        """Symmetric form from the included angle between the two flanks."""
        half = angle / 2
        return cls(half, half, crest_width)

    @property
    def flank_tangent_sum(self) -> float:
        return self.leading_flank_angle.tan() + self.trailing_flank_angle.tan()


@dataclass(frozen=True)
class KnuckleThreadform:
    """Round profile made of a crest arc and two half root arcs."""
    crest_radius: float
    root_radius: float

    def __post_init__(self):
        if self.crest_radius <= 0 or self.root_radius <= 0:
            raise ValueError(
                f"Knuckle radii must be positive, got crest={self.crest_radius}, "
                f"root={self.root_radius}"
            )


@dataclass(frozen=True)
class SolidThreadform:
    """Rectangular profile spanning the full pitch, for unthreaded shanks."""


Threadform = Union[TrapezoidalThreadform, KnuckleThreadform, SolidThreadform]


# =============================================================================
# Cross-sections
# =============================================================================

def _trapezoidal_section(form: TrapezoidalThreadform, spec: "ThreadSpec") -> ThreadProfile:
    depth = spec.depth
    inset = THREAD_ROOT_INSET_MM
    half_crest = form.crest_width / 2
    leading_tan = form.leading_flank_angle.tan()
    trailing_tan = form.trailing_flank_angle.tan()

    # depth / tan(90° - a) == depth * tan(a)
    slope_leading = depth / (Angle.right() - form.leading_flank_angle).tan()
    slope_trailing = depth / (Angle.right() - form.trailing_flank_angle).tan()

    root_leading = (-inset, -(half_crest + slope_leading + inset * leading_tan))
    crest_leading = (depth, -half_crest)
    crest_trailing = (depth, half_crest)
    root_trailing = (-inset, half_crest + slope_trailing + inset * trailing_tan)

    segments: List[Segment] = [LineSegment(root_leading, crest_leading)]
    if form.crest_width > 0:
        segments.append(LineSegment(crest_leading, crest_trailing))
    segments.append(LineSegment(crest_trailing, root_trailing))
    return ThreadProfile(root_leading, tuple(segments))


def knuckle_arcs_tangent(form: KnuckleThreadform, spec: "ThreadSpec") -> bool:
    """True when crest and root arcs meet without a straight flank between them."""
    distance, radius_sum = _knuckle_center_distance(form, spec)
    return distance <= radius_sum + KNUCKLE_TANGENCY_EPSILON


def _knuckle_center_distance(form: KnuckleThreadform, spec: "ThreadSpec") -> Tuple[float, float]:
    crest_x = spec.depth - form.crest_radius
    dx = form.root_radius - crest_x
    dy = spec.pitch / 2
    return math.hypot(dx, dy), form.crest_radius + form.root_radius


def _knuckle_section(form: KnuckleThreadform, spec: "ThreadSpec") -> ThreadProfile:
    depth = spec.depth
    pitch = spec.pitch
    crest_r = form.crest_radius
    root_r = form.root_radius

    crest_center = (depth - crest_r, 0.0)
    root_top = (root_r, pitch / 2)
    root_bottom = (root_r, -pitch / 2)

    distance, radius_sum = _knuckle_center_distance(form, spec)
    angle_to_top = Angle.atan2(root_top[1] - crest_center[1], root_top[0] - crest_center[0])
    # Profile is symmetric about the axial origin
    angle_to_bottom = -angle_to_top

    offset = Angle.acos(min(1.0, radius_sum / distance))
    crest_top = angle_to_top + offset
    crest_bottom = angle_to_bottom - offset
    tangent = distance <= radius_sum + KNUCKLE_TANGENCY_EPSILON

    half_turn = Angle.from_degrees(180)
    bottom_arc = ArcSegment(root_bottom, root_r, half_turn, crest_bottom + half_turn, clockwise=True)
    crest_arc = ArcSegment(crest_center, crest_r, crest_bottom, crest_top)
    top_arc = ArcSegment(root_top, root_r, crest_top + half_turn, half_turn, clockwise=True)

    segments: List[Segment] = [bottom_arc]
    if not tangent:
        segments.append(LineSegment(bottom_arc.end, crest_arc.start))
    segments.append(crest_arc)
    if not tangent:
        segments.append(LineSegment(crest_arc.end, top_arc.start))
    segments.append(top_arc)
    return ThreadProfile(bottom_arc.start, tuple(segments))


def _solid_section(spec: "ThreadSpec") -> ThreadProfile:
    inset = THREAD_ROOT_INSET_MM
    half = spec.pitch / 2
    corners = [(-inset, -half), (spec.depth, -half), (spec.depth, half), (-inset, half)]
    segments = tuple(LineSegment(a, b) for a, b in zip(corners, corners[1:]))
    return ThreadProfile(corners[0], segments)


def cross_section(form: Threadform, spec: "ThreadSpec") -> ThreadProfile:
    """2D cross-section of one turn of ``form`` sized for ``spec``."""
    if isinstance(form, TrapezoidalThreadform):
        return _trapezoidal_section(form, spec)
    if isinstance(form, KnuckleThreadform):
        return _knuckle_section(form, spec)
    if isinstance(form, SolidThreadform):
        return _solid_section(spec)
    raise TypeError(f"Unknown threadform: {form!r}")


# =============================================================================
# Derived dimensions
# =============================================================================

def minimum_pitch(form: Threadform, spec: "ThreadSpec") -> float:
    """Smallest pitch at which adjacent turns of the profile do not overlap."""
    if isinstance(form, TrapezoidalThreadform):
        return form.crest_width + spec.depth * form.flank_tangent_sum
    if isinstance(form, (KnuckleThreadform, SolidThreadform)):
        return 0.0
    raise TypeError(f"Unknown threadform: {form!r}")


def pitch_diameter(form: Threadform, spec: "ThreadSpec") -> float:
    """Diameter at which the thread width equals the groove width."""
    if isinstance(form, TrapezoidalThreadform):
        tangent_sum = form.flank_tangent_sum
        if tangent_sum == 0:
            # Vertical flanks: width is constant over the depth
            return (spec.major_diameter + spec.minor_diameter) / 2
        return spec.major_diameter + 2 * (form.crest_width - spec.pitch / 2) / tangent_sum
    if isinstance(form, KnuckleThreadform):
        r = form.crest_radius
        sagitta = r - math.sqrt(r * r - spec.pitch ** 2 / 16)
        return spec.major_diameter - 2 * sagitta
    if isinstance(form, SolidThreadform):
        return spec.major_diameter
    raise TypeError(f"Unknown threadform: {form!r}")
