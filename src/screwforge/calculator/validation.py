"""
Thread Validation Rules

Checks a ThreadSpec (and optionally a length and lead-ins) against
practical manufacturing limits. Structural impossibilities are rejected
by ThreadSpec itself; the rules here report designs that are legal but
likely to print or machine badly.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .constants import (
    MINIMUM_PITCH_MARGIN_PERCENT,
    SHALLOW_THREAD_DEPTH_MM,
    KNUCKLE_NEAR_TANGENT_MM,
    KNUCKLE_TANGENCY_EPSILON,
)
from .lead_in import LeadInEnds
from .thread import ThreadSpec
from .threadform import KnuckleThreadform


class Severity(Enum):
    """Validation message severity"""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding"""
    severity: Severity
    code: str
    message: str
    suggestion: Optional[str] = None


@dataclass
class ValidationResult:
    """Complete validation result"""
    valid: bool  # True if no errors
    messages: List[ValidationMessage] = field(default_factory=list)

    @property
    def errors(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    @property
    def infos(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.INFO]


def validate_thread(
    thread: ThreadSpec,
    length: Optional[float] = None,
    lead_ins: Optional[LeadInEnds] = None,
) -> ValidationResult:
    """
    Validate a thread against manufacturing rules.

    Args:
        thread: Thread to check
        length: Optional threaded length in mm
        lead_ins: Optional lead-ins planned for the thread ends

    Returns:
        ValidationResult with all findings
    """
    messages: List[ValidationMessage] = []

    messages.extend(_validate_pitch_margin(thread))
    messages.extend(_validate_depth(thread))
    messages.extend(_validate_knuckle(thread))
    messages.extend(_validate_length(thread, length, lead_ins))
    messages.extend(_describe_thread(thread))

    has_errors = any(m.severity == Severity.ERROR for m in messages)
    return ValidationResult(valid=not has_errors, messages=messages)


def _validate_pitch_margin(thread: ThreadSpec) -> List[ValidationMessage]:
    smallest = thread.minimum_pitch
    if smallest <= 0:
        return []

    margin_percent = (thread.pitch - smallest) / smallest * 100
    if margin_percent < MINIMUM_PITCH_MARGIN_PERCENT:
        return [ValidationMessage(
            severity=Severity.WARNING,
            code="PITCH_NEAR_MINIMUM",
            message=(
                f"Pitch {thread.pitch}mm is within {margin_percent:.1f}% of the profile's "
                f"minimum pitch ({smallest:.3f}mm); thread roots will be very narrow"
            ),
            suggestion="Reduce the crest width or flank angles, or increase the pitch",
        )]
    return []


def _validate_depth(thread: ThreadSpec) -> List[ValidationMessage]:
    if thread.is_threaded and thread.depth < SHALLOW_THREAD_DEPTH_MM:
        return [ValidationMessage(
            severity=Severity.WARNING,
            code="THREAD_SHALLOW",
            message=f"Thread depth {thread.depth:.3f}mm is below {SHALLOW_THREAD_DEPTH_MM}mm",
            suggestion="Very shallow threads are lost to printer or machining tolerances",
        )]
    return []


def _validate_knuckle(thread: ThreadSpec) -> List[ValidationMessage]:
    form = thread.form
    if not isinstance(form, KnuckleThreadform):
        return []

    crest_x = thread.depth - form.crest_radius
    distance = ((form.root_radius - crest_x) ** 2 + (thread.pitch / 2) ** 2) ** 0.5
    gap = distance - (form.crest_radius + form.root_radius)

    if gap < -KNUCKLE_NEAR_TANGENT_MM:
        return [ValidationMessage(
            severity=Severity.WARNING,
            code="KNUCKLE_ARCS_OVERLAP",
            message=(
                f"Crest and root arcs overlap by {-gap:.4f}mm; the profile is "
                f"built as if they were tangent"
            ),
            suggestion="Reduce the arc radii or increase the pitch",
        )]
    if KNUCKLE_TANGENCY_EPSILON < gap < KNUCKLE_NEAR_TANGENT_MM:
        return [ValidationMessage(
            severity=Severity.WARNING,
            code="KNUCKLE_NEAR_TANGENT",
            message=f"Knuckle flanks are only {gap:.2e}mm long",
            suggestion="Use radii that make the arcs exactly tangent",
        )]
    return []


def _validate_length(
    thread: ThreadSpec,
    length: Optional[float],
    lead_ins: Optional[LeadInEnds],
) -> List[ValidationMessage]:
    if length is None:
        return []

    messages = []
    if length <= 0:
        messages.append(ValidationMessage(
            severity=Severity.INFO,
            code="LENGTH_EMPTY",
            message=f"Length {length}mm produces no thread geometry",
        ))
        return messages

    if length < thread.pitch:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="LENGTH_SHORT",
            message=f"Length {length}mm is shorter than one pitch ({thread.pitch}mm)",
        ))

    if lead_ins is not None:
        total = 0.0
        for lead_in in (lead_ins.leading, lead_ins.trailing):
            if lead_in is not None:
                depth, axial = lead_in.resolved(thread)
                total += axial
                if depth > thread.major_diameter / 2:
                    messages.append(ValidationMessage(
                        severity=Severity.ERROR,
                        code="LEAD_IN_TOO_DEEP",
                        message=(
                            f"Lead-in depth {depth:.2f}mm exceeds the thread radius "
                            f"({thread.major_diameter / 2:.2f}mm)"
                        ),
                    ))
        if total > length:
            messages.append(ValidationMessage(
                severity=Severity.ERROR,
                code="LEAD_IN_TOO_LONG",
                message=f"Lead-ins ({total:.2f}mm) are longer than the thread ({length}mm)",
                suggestion="Use smaller lead-ins or chamfer only one end",
            ))
    return messages


def _describe_thread(thread: ThreadSpec) -> List[ValidationMessage]:
    messages = []
    if thread.starts > 1:
        messages.append(ValidationMessage(
            severity=Severity.INFO,
            code="MULTI_START",
            message=f"{thread.starts}-start thread, lead {thread.lead:g}mm per turn",
        ))
    if thread.is_left_handed:
        messages.append(ValidationMessage(
            severity=Severity.INFO,
            code="LEFT_HAND",
            message="Left-hand thread",
        ))
    return messages
