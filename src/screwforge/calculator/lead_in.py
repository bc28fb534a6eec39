"""
Lead-in chamfers for threaded features.

A ``LeadIn`` describes the chamfer at one axial end of a thread and
resolves to a (radial depth, axial length) pair for a given ThreadSpec.
``LeadInEnds`` pairs an optional lead-in for the leading (min Z) end with
one for the trailing (max Z) end.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ..enums import LeadInSide
from .angle import Angle
from .thread import ThreadSpec


class LeadInKind(Enum):
    CONSTANT = "constant"
    DEPTH_MULTIPLE = "depth_multiple"
    PITCH_MULTIPLE = "pitch_multiple"
    CONE_ANGLE = "cone_angle"


@dataclass(frozen=True)
class LeadIn:
    """Size of a lead-in chamfer, absolute or relative to the thread."""
    kind: LeadInKind
    depth: float = 0.0
    length: float = 0.0
    multiple: float = 1.0
    cone_angle: Optional[Angle] = None

    def __post_init__(self):
        if self.kind == LeadInKind.CONSTANT:
            if self.depth <= 0 or self.length <= 0:
                raise ValueError(
                    f"Lead-in depth and length must be positive, got "
                    f"depth={self.depth}, length={self.length}"
                )
        elif self.kind == LeadInKind.CONE_ANGLE:
            if self.cone_angle is None or not 0 < self.cone_angle.degrees < 180:
                raise ValueError(f"Lead-in cone angle must be in (0°, 180°), got {self.cone_angle}")
        elif self.multiple <= 0:
            raise ValueError(f"Lead-in multiple must be positive, got {self.multiple}")

    @classmethod
    def constant(cls, depth: float, length: Optional[float] = None) -> "LeadIn":
        """Explicit chamfer; a missing length gives a 45° chamfer."""
        return cls(LeadInKind.CONSTANT, depth=depth, length=depth if length is None else length)

    @classmethod
    def depth_multiple(cls, multiple: float) -> "LeadIn":
        return cls(LeadInKind.DEPTH_MULTIPLE, multiple=multiple)

    @classmethod
    def pitch_multiple(cls, multiple: float = 1.0) -> "LeadIn":
        return cls(LeadInKind.PITCH_MULTIPLE, multiple=multiple)

    @classmethod
    def angle(cls, cone_angle: Angle) -> "LeadIn":
        """Full thread depth, axial length set by the included cone angle."""
        return cls(LeadInKind.CONE_ANGLE, cone_angle=cone_angle)

    @classmethod
    def standard(cls) -> "LeadIn":
        """45° chamfer one thread depth deep."""
        return cls.depth_multiple(1.0)

    def resolved(self, thread: ThreadSpec) -> Tuple[float, float]:
        """(radial depth, axial length) of this chamfer on ``thread``."""
        if self.kind == LeadInKind.CONSTANT:
            return self.depth, self.length
        if self.kind == LeadInKind.DEPTH_MULTIPLE:
            size = thread.depth * self.multiple
            return size, size
        if self.kind == LeadInKind.PITCH_MULTIPLE:
            size = thread.pitch * self.multiple
            return size, size
        depth = thread.depth
        # Rounded so a 90° cone resolves exactly to depth_multiple(1)
        run = round((Angle.right() - self.cone_angle / 2).tan(), 12)
        return depth, depth * run


@dataclass(frozen=True)
class LeadInEnds:
    """Optional lead-ins for the leading (min Z) and trailing (max Z) ends."""
    leading: Optional[LeadIn] = None
    trailing: Optional[LeadIn] = None

    @classmethod
    def none(cls) -> "LeadInEnds":
        return cls()

    @classmethod
    def both(cls, lead_in: Optional[LeadIn] = None) -> "LeadInEnds":
        lead_in = lead_in or LeadIn.standard()
        return cls(lead_in, lead_in)

    @classmethod
    def leading_only(cls, lead_in: Optional[LeadIn] = None) -> "LeadInEnds":
        return cls(leading=lead_in or LeadIn.standard())

    @classmethod
    def trailing_only(cls, lead_in: Optional[LeadIn] = None) -> "LeadInEnds":
        return cls(trailing=lead_in or LeadIn.standard())

    @classmethod
    def asymmetric(cls, leading: LeadIn, trailing: LeadIn) -> "LeadInEnds":
        return cls(leading, trailing)

    @classmethod
    def for_side(cls, side: LeadInSide, lead_in: Optional[LeadIn] = None) -> "LeadInEnds":
        """Standard (or given) lead-in on the ends named by ``side``."""
        if side == LeadInSide.BOTH:
            return cls.both(lead_in)
        if side == LeadInSide.LEADING:
            return cls.leading_only(lead_in)
        if side == LeadInSide.TRAILING:
            return cls.trailing_only(lead_in)
        return cls.none()

    @property
    def is_empty(self) -> bool:
        return self.leading is None and self.trailing is None
