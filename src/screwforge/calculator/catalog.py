"""
Standard thread catalogs.

Table-driven constructors on top of ``ThreadSpec``: ISO metric (coarse and
fine), Edison lamp bases and unified coarse (UNC). Lookups take either a
number or a designation string and raise ``CatalogError`` for sizes that
are not in a table; unlike ``ThreadDefinitionError`` this is an ordinary
recoverable error, since designations usually come from user input.

Example:
    >>> from screwforge.calculator.catalog import parse_thread
    >>> parse_thread("M8").pitch
    1.25
    >>> parse_thread("M8x1").pitch
    1.0
"""

import re
from dataclasses import replace
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Union

from ..enums import Handedness
from .threadform import KnuckleThreadform
from .thread import ThreadSpec, v_shaped_standard, metric_trapezoidal, unified


class CatalogError(ValueError):
    """Unknown standard size or malformed thread designation."""


SizeInput = Union[str, float, int]

# =============================================================================
# ISO 261 / ISO 262 - Metric coarse pitches
# =============================================================================

ISO_METRIC_COARSE_PITCHES: Mapping[float, float] = MappingProxyType({
    1.0: 0.25, 1.2: 0.25, 1.4: 0.3, 1.6: 0.35, 1.8: 0.35,
    2.0: 0.4, 2.5: 0.45, 3.0: 0.5, 3.5: 0.6, 4.0: 0.7,
    5.0: 0.8, 6.0: 1.0, 7.0: 1.0, 8.0: 1.25, 10.0: 1.5,
    12.0: 1.75, 14.0: 2.0, 16.0: 2.0, 18.0: 2.5, 20.0: 2.5,
    22.0: 2.5, 24.0: 3.0, 27.0: 3.0, 30.0: 3.5, 33.0: 3.5,
    36.0: 4.0, 39.0: 4.0, 42.0: 4.5, 45.0: 4.5, 48.0: 5.0,
    52.0: 5.0, 56.0: 5.5, 60.0: 5.5, 64.0: 6.0,
})

# =============================================================================
# IEC 60061 - Edison screw bases: (major diameter, pitch, minor diameter)
# =============================================================================

EDISON_SIZES: Mapping[str, Tuple[float, float, float]] = MappingProxyType({
    "E5.5": (5.5, 1.0, 4.9),
    "E10": (10.0, 1.81, 8.8),
    "E12": (12.0, 2.54, 10.73),
    "E14": (14.0, 2.82, 12.5),
    "E16": (16.0, 2.5, 14.7),
    "E17": (17.0, 2.82, 15.62),
    "E18": (18.0, 3.0, 17.0),
    "E26": (26.0, 3.63, 24.32),
    "E27": (27.0, 3.62, 24.5),
    "E33": (33.0, 4.23, 30.8),
    "E39": (39.0, 6.35, 36.47),
    "E40": (40.0, 6.35, 36.3),
})

# =============================================================================
# ASME B1.1 - Unified coarse: (major diameter in inches, threads per inch)
# =============================================================================

UNIFIED_COARSE: Mapping[str, Tuple[float, float]] = MappingProxyType({
    "#4": (0.112, 40), "#6": (0.138, 32), "#8": (0.164, 32), "#10": (0.190, 24),
    "1/4": (0.25, 20), "5/16": (0.3125, 18), "3/8": (0.375, 16), "7/16": (0.4375, 14),
    "1/2": (0.5, 13), "9/16": (0.5625, 12), "5/8": (0.625, 11), "3/4": (0.75, 10),
    "7/8": (0.875, 9), "1": (1.0, 8),
})

_METRIC_PATTERN = re.compile(r"^M?(\d+(?:\.\d+)?)(?:\s*[X×]\s*(\d+(?:\.\d+)?))?$")
_TRAPEZOIDAL_PATTERN = re.compile(r"^TR\s*(\d+(?:\.\d+)?)\s*[X×]\s*(\d+(?:\.\d+)?)$")
_UNIFIED_PATTERN = re.compile(r"^(#\d+|\d+/\d+|\d+)(?:\s*-\s*(\d+(?:\.\d+)?))?$")


def parse_metric_size(size: SizeInput) -> Tuple[float, Optional[float]]:
    """
    Parse ``"M8"``, ``"M8x1"``, ``"m1.6"``, ``8`` into (diameter, pitch or None).

    Raises:
        CatalogError: If the designation is malformed or non-positive
    """
    if isinstance(size, (int, float)) and not isinstance(size, bool):
        if size <= 0:
            raise CatalogError(f"Metric size must be positive, got {size}")
        return float(size), None

    text = str(size).strip().upper()
    match = _METRIC_PATTERN.match(text)
    if not match:
        raise CatalogError(f"Not a metric thread designation: {size!r}")

    diameter = float(match.group(1))
    pitch = float(match.group(2)) if match.group(2) else None
    if diameter <= 0 or (pitch is not None and pitch <= 0):
        raise CatalogError(f"Metric size must be positive: {size!r}")
    return diameter, pitch


def metric_designation(diameter: float) -> str:
    return f"M{diameter:g}"


def iso_metric(
    size: SizeInput,
    pitch: Optional[float] = None,
    handedness: Handedness = Handedness.RIGHT,
    starts: int = 1,
) -> ThreadSpec:
    """
    ISO metric thread; coarse pitch unless one is given or designated.

    Raises:
        CatalogError: If no pitch is given and the size has no coarse pitch
    """
    diameter, designated_pitch = parse_metric_size(size)
    pitch = pitch or designated_pitch
    coarse = ISO_METRIC_COARSE_PITCHES.get(diameter)
    if pitch is None:
        if coarse is None:
            raise CatalogError(
                f"M{diameter:g} has no ISO coarse pitch; give an explicit pitch"
            )
        pitch = coarse

    designation = metric_designation(diameter)
    if pitch != coarse:
        designation += f"x{pitch:g}"
    return v_shaped_standard(
        diameter, pitch, handedness=handedness, starts=starts, designation=designation
    )


def knuckle_radius(major_diameter: float, minor_diameter: float, pitch: float) -> float:
    """Equal crest and root radius that makes the knuckle arcs exactly tangent."""
    depth = (major_diameter - minor_diameter) / 2
    return (depth ** 2 + pitch ** 2 / 4) / (4 * depth)


def edison(size: SizeInput, handedness: Handedness = Handedness.RIGHT) -> ThreadSpec:
    """
    Edison screw (lamp base) knuckle thread.

    Raises:
        CatalogError: If the size is not a known Edison base
    """
    if isinstance(size, (int, float)) and not isinstance(size, bool):
        key = f"E{size:g}"
    else:
        key = str(size).strip().upper()
        if not key.startswith("E"):
            key = "E" + key
    if key not in EDISON_SIZES:
        raise CatalogError(
            f"Unknown Edison size {size!r}; known sizes: {', '.join(EDISON_SIZES)}"
        )

    major, pitch, minor = EDISON_SIZES[key]
    radius = knuckle_radius(major, minor, pitch)
    return ThreadSpec(
        pitch=pitch,
        major_diameter=major,
        minor_diameter=minor,
        form=KnuckleThreadform(crest_radius=radius, root_radius=radius),
        handedness=handedness,
        designation=key,
    )


def unified_coarse(size: str, handedness: Handedness = Handedness.RIGHT) -> ThreadSpec:
    """
    Unified thread from ``"1/4"`` (coarse) or ``"1/4-28"`` (explicit TPI).

    Raises:
        CatalogError: If the size is not a known unified size
    """
    text = str(size).strip().replace('"', "")
    match = _UNIFIED_PATTERN.match(text)
    if not match or match.group(1) not in UNIFIED_COARSE:
        raise CatalogError(
            f"Unknown unified size {size!r}; known sizes: {', '.join(UNIFIED_COARSE)}"
        )

    inches, coarse_tpi = UNIFIED_COARSE[match.group(1)]
    tpi = float(match.group(2)) if match.group(2) else coarse_tpi
    spec = unified(inches, tpi, handedness=handedness)
    return _with_designation(spec, f"{match.group(1)}-{tpi:g}")


def _with_designation(spec: ThreadSpec, designation: str) -> ThreadSpec:
    return replace(spec, designation=designation)


def parse_thread(designation: str, handedness: Optional[Handedness] = None) -> ThreadSpec:
    """
    Thread from a designation string.

    Understands ``M8``, ``M8x1``, ``E27``, ``Tr10x2``, ``1/4``, ``#10-32``
    and a trailing ``LH`` for left-handed threads.

    Raises:
        CatalogError: If the designation is not recognised
    """
    text = str(designation).strip().upper()
    if not text:
        raise CatalogError("Empty thread designation")

    if text.endswith("LH"):
        text = text[:-2].rstrip(" -")
        handedness = handedness or Handedness.LEFT
    handedness = handedness or Handedness.RIGHT

    if text.startswith("M"):
        return iso_metric(text, handedness=handedness)
    if text.startswith("E"):
        return edison(text, handedness=handedness)

    trapezoidal = _TRAPEZOIDAL_PATTERN.match(text)
    if trapezoidal:
        return metric_trapezoidal(
            float(trapezoidal.group(1)), float(trapezoidal.group(2)), handedness=handedness
        )

    return unified_coarse(text, handedness=handedness)
