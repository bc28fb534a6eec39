"""
Thread Calculator - threadforms, thread specs and standard sizes.

Pure Python; importing this package does not load build123d.

Example:
    >>> from screwforge.calculator import iso_metric, LeadInEnds
    >>> from screwforge.core import thread_solid
    >>>
    >>> # Look up a standard thread
    >>> m8 = iso_metric("M8")
    >>>
    >>> # Generate 3D geometry
    >>> solid = thread_solid(m8, length=20, lead_ins=LeadInEnds.both())
    >>> solid.part.export_step("m8.step")
"""

from .angle import Angle, degrees

from .threadform import (
    TrapezoidalThreadform,
    KnuckleThreadform,
    SolidThreadform,
    ThreadProfile,
    LineSegment,
    ArcSegment,
    cross_section,
    minimum_pitch,
    pitch_diameter,
    knuckle_arcs_tangent,
)

from .thread import (
    ThreadSpec,
    ThreadDefinitionError,
    make_thread,
    no_thread,
    relative_tolerance,
    v_shaped_standard,
    acme,
    metric_trapezoidal,
    square,
    buttress,
    unified,
)

from .lead_in import LeadIn, LeadInEnds

from .catalog import (
    CatalogError,
    ISO_METRIC_COARSE_PITCHES,
    EDISON_SIZES,
    UNIFIED_COARSE,
    iso_metric,
    edison,
    unified_coarse,
    parse_thread,
    parse_metric_size,
)

from .validation import (
    Severity,
    ValidationMessage,
    ValidationResult,
    validate_thread,
)

__all__ = [
    # Angles
    "Angle",
    "degrees",

    # Threadforms
    "TrapezoidalThreadform",
    "KnuckleThreadform",
    "SolidThreadform",
    "ThreadProfile",
    "LineSegment",
    "ArcSegment",
    "cross_section",
    "minimum_pitch",
    "pitch_diameter",
    "knuckle_arcs_tangent",

    # Thread specs
    "ThreadSpec",
    "ThreadDefinitionError",
    "make_thread",
    "no_thread",
    "relative_tolerance",
    "v_shaped_standard",
    "acme",
    "metric_trapezoidal",
    "square",
    "buttress",
    "unified",

    # Lead-ins
    "LeadIn",
    "LeadInEnds",

    # Catalogs
    "CatalogError",
    "ISO_METRIC_COARSE_PITCHES",
    "EDISON_SIZES",
    "UNIFIED_COARSE",
    "iso_metric",
    "edison",
    "unified_coarse",
    "parse_thread",
    "parse_metric_size",

    # Validation
    "Severity",
    "ValidationMessage",
    "ValidationResult",
    "validate_thread",
]
