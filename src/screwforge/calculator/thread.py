"""
Screw thread specification.

``ThreadSpec`` is the immutable description every geometry builder
consumes: handedness, number of starts, pitch, major and minor diameter
and the threadform. Invalid combinations are defects in the calling code
and raise ``ThreadDefinitionError`` at construction time.

Example:
    >>> from screwforge.calculator.thread import v_shaped_standard
    >>> m8 = v_shaped_standard(8.0, 1.25)
    >>> round(m8.minor_diameter, 3)
    6.647
"""

from dataclasses import dataclass, field, replace

from ..enums import Handedness, Operation
from .angle import Angle
from .constants import (
    V_THREAD_ANGLE_DEG,
    V_THREAD_MINOR_DIAMETER_RATIO,
    V_THREAD_CREST_WIDTH_RATIO,
    MM_PER_INCH,
    ACME_ANGLE_DEG,
    ACME_CREST_WIDTH_RATIO,
    METRIC_TRAPEZOIDAL_ANGLE_DEG,
    METRIC_TRAPEZOIDAL_CREST_WIDTH_RATIO,
    SQUARE_CREST_WIDTH_RATIO,
    BUTTRESS_LEADING_FLANK_DEG,
    BUTTRESS_TRAILING_FLANK_DEG,
    BUTTRESS_CREST_WIDTH_RATIO,
    BUTTRESS_DEPTH_RATIO,
    PITCH_COMPARISON_EPSILON_MM,
)
from .threadform import (
    Threadform,
    TrapezoidalThreadform,
    KnuckleThreadform,
    SolidThreadform,
    minimum_pitch,
    pitch_diameter,
)


class ThreadDefinitionError(AssertionError):
    """
    A thread definition is geometrically impossible.

    Raised for non-positive dimensions, a major diameter smaller than the
    minor diameter, fewer than one start, a pitch below the profile's
    minimum pitch, or a knuckle crest radius under a quarter pitch.
    Subclasses AssertionError because it marks a broken precondition in
    calling code, not bad user input.
    """


@dataclass(frozen=True)
class ThreadSpec:
    """Immutable screw thread parameters. Dimensions in millimetres."""
    pitch: float
    major_diameter: float
    minor_diameter: float
    form: Threadform
    handedness: Handedness = Handedness.RIGHT
    starts: int = 1
    designation: str = field(default="", compare=False)

    def __post_init__(self):
        if isinstance(self.handedness, str):
            object.__setattr__(self, "handedness", Handedness(self.handedness.lower()))
        if not isinstance(self.starts, int) or self.starts < 1:
            raise ThreadDefinitionError(f"starts must be an integer >= 1, got {self.starts!r}")
        if self.pitch <= 0:
            raise ThreadDefinitionError(f"pitch must be positive, got {self.pitch}")
        if self.major_diameter <= 0 or self.minor_diameter <= 0:
            raise ThreadDefinitionError(
                f"Diameters must be positive, got major={self.major_diameter}, "
                f"minor={self.minor_diameter}"
            )
        if self.major_diameter < self.minor_diameter:
            raise ThreadDefinitionError(
                f"Major diameter ({self.major_diameter}) is smaller than "
                f"minor diameter ({self.minor_diameter})"
            )
        if self.major_diameter == self.minor_diameter and not isinstance(self.form, SolidThreadform):
            raise ThreadDefinitionError(
                f"Major and minor diameter are equal ({self.major_diameter}); "
                f"only the solid form describes an unthreaded shank"
            )

        if isinstance(self.form, KnuckleThreadform) and self.form.crest_radius < self.pitch / 4:
            raise ThreadDefinitionError(
                f"Knuckle crest radius {self.form.crest_radius}mm is below a quarter pitch "
                f"({self.pitch / 4:.4f}mm); the crest arc cannot span the pitch line"
            )

        smallest = minimum_pitch(self.form, self)
        if self.pitch < smallest - PITCH_COMPARISON_EPSILON_MM:
            raise ThreadDefinitionError(
                f"Pitch {self.pitch}mm is below the minimum {smallest:.4f}mm for this "
                f"profile; adjacent turns would overlap"
            )

    @property
    def depth(self) -> float:
        """Radial thread depth."""
        return (self.major_diameter - self.minor_diameter) / 2

    @property
    def lead(self) -> float:
        """Axial advance per revolution."""
        return self.starts * self.pitch

    @property
    def pitch_diameter(self) -> float:
        return pitch_diameter(self.form, self)

    @property
    def minimum_pitch(self) -> float:
        return minimum_pitch(self.form, self)

    @property
    def is_left_handed(self) -> bool:
        return self.handedness == Handedness.LEFT

    @property
    def is_threaded(self) -> bool:
        return not isinstance(self.form, SolidThreadform)

    def with_handedness(self, handedness: Handedness) -> "ThreadSpec":
        return replace(self, handedness=handedness)

    def with_starts(self, starts: int) -> "ThreadSpec":
        return replace(self, starts=starts)

    def describe(self) -> str:
        """Short human-readable description, e.g. ``M8x1.25 LH``."""
        name = self.designation or f"{self.major_diameter:g}x{self.pitch:g}"
        if self.starts > 1:
            name += f" {self.starts}-start"
        if self.is_left_handed:
            name += " LH"
        return name


def make_thread(
    handedness: Handedness,
    starts: int,
    pitch: float,
    major_diameter: float,
    minor_diameter: float,
    form: Threadform,
) -> ThreadSpec:
    """Build a ThreadSpec; raises ThreadDefinitionError if the pitch is too small."""
    return ThreadSpec(
        pitch=pitch,
        major_diameter=major_diameter,
        minor_diameter=minor_diameter,
        form=form,
        handedness=handedness,
        starts=starts,
    )


def relative_tolerance(tolerance: float, operation: Operation) -> float:
    """
    Signed diameter offset for a thread built in the given boolean context.

    Voids for subtraction (internal threads) grow by the tolerance, solids
    for addition (external threads) shrink by it.
    """
    return tolerance if operation == Operation.SUBTRACTION else -tolerance


def no_thread(diameter: float) -> ThreadSpec:
    """Placeholder spec for an unthreaded shank of the given diameter."""
    return ThreadSpec(
        pitch=1.0,
        major_diameter=diameter,
        minor_diameter=diameter,
        form=SolidThreadform(),
        designation=f"Ø{diameter:g}",
    )


# =============================================================================
# Named forms
# =============================================================================

def v_shaped_standard(
    major_diameter: float,
    pitch: float,
    handedness: Handedness = Handedness.RIGHT,
    starts: int = 1,
    designation: str = "",
) -> ThreadSpec:
    """ISO metric / unified 60° thread with the standard truncation."""
    return ThreadSpec(
        pitch=pitch,
        major_diameter=major_diameter,
        minor_diameter=major_diameter - pitch * V_THREAD_MINOR_DIAMETER_RATIO,
        form=TrapezoidalThreadform.symmetric(
            Angle.from_degrees(V_THREAD_ANGLE_DEG),
            pitch * V_THREAD_CREST_WIDTH_RATIO,
        ),
        handedness=handedness,
        starts=starts,
        designation=designation,
    )


def acme(major_diameter: float, pitch: float, handedness: Handedness = Handedness.RIGHT, starts: int = 1) -> ThreadSpec:
    return ThreadSpec(
        pitch=pitch,
        major_diameter=major_diameter,
        minor_diameter=major_diameter - pitch,
        form=TrapezoidalThreadform.symmetric(
            Angle.from_degrees(ACME_ANGLE_DEG), pitch * ACME_CREST_WIDTH_RATIO
        ),
        handedness=handedness,
        starts=starts,
        designation=f"ACME {major_diameter:g}x{pitch:g}",
    )


def metric_trapezoidal(major_diameter: float, pitch: float, handedness: Handedness = Handedness.RIGHT, starts: int = 1) -> ThreadSpec:
    return ThreadSpec(
        pitch=pitch,
        major_diameter=major_diameter,
        minor_diameter=major_diameter - pitch,
        form=TrapezoidalThreadform.symmetric(
            Angle.from_degrees(METRIC_TRAPEZOIDAL_ANGLE_DEG),
            pitch * METRIC_TRAPEZOIDAL_CREST_WIDTH_RATIO,
        ),
        handedness=handedness,
        starts=starts,
        designation=f"Tr{major_diameter:g}x{pitch:g}",
    )


def square(major_diameter: float, pitch: float, handedness: Handedness = Handedness.RIGHT, starts: int = 1) -> ThreadSpec:
    return ThreadSpec(
        pitch=pitch,
        major_diameter=major_diameter,
        minor_diameter=major_diameter - pitch,
        form=TrapezoidalThreadform.symmetric(Angle.zero(), pitch * SQUARE_CREST_WIDTH_RATIO),
        handedness=handedness,
        starts=starts,
        designation=f"Sq{major_diameter:g}x{pitch:g}",
    )


def buttress(
    major_diameter: float,
    pitch: float,
    leading_flank_angle: Angle = Angle.from_degrees(BUTTRESS_LEADING_FLANK_DEG),
    trailing_flank_angle: Angle = Angle.from_degrees(BUTTRESS_TRAILING_FLANK_DEG),
    handedness: Handedness = Handedness.RIGHT,
    starts: int = 1,
) -> ThreadSpec:
    """Asymmetric thread carrying load on the steep leading flank."""
    depth = pitch * BUTTRESS_DEPTH_RATIO
    return ThreadSpec(
        pitch=pitch,
        major_diameter=major_diameter,
        minor_diameter=major_diameter - 2 * depth,
        form=TrapezoidalThreadform(
            leading_flank_angle, trailing_flank_angle, pitch * BUTTRESS_CREST_WIDTH_RATIO
        ),
        handedness=handedness,
        starts=starts,
        designation=f"B{major_diameter:g}x{pitch:g}",
    )


def unified(
    major_diameter_inches: float,
    threads_per_inch: float,
    handedness: Handedness = Handedness.RIGHT,
    starts: int = 1,
) -> ThreadSpec:
    """Unified (UTS) thread from inch dimensions; result is in millimetres."""
    return v_shaped_standard(
        major_diameter_inches * MM_PER_INCH,
        MM_PER_INCH / threads_per_inch,
        handedness=handedness,
        starts=starts,
        designation=f"{major_diameter_inches:g}in-{threads_per_inch:g}",
    )
