"""
Topology repair for thread and fastener solids.

Helical sweeps fused with cores and trimmed by boxes occasionally leave
OpenCascade shapes that report ``is_valid == False`` (split shells,
duplicated coincident faces). ``repair_geometry`` runs a sequence of
increasingly heavy fixes and stops at the first valid result.
"""

import logging
import tempfile
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from OCP.ShapeFix import ShapeFix_Shape, ShapeFix_Solid
from OCP.ShapeUpgrade import ShapeUpgrade_UnifySameDomain
from OCP.BRepBuilderAPI import BRepBuilderAPI_Sewing, BRepBuilderAPI_MakeSolid
from OCP.TopExp import TopExp_Explorer
from OCP.TopAbs import TopAbs_SHELL, TopAbs_FACE
from OCP.TopoDS import TopoDS

from build123d import Part, export_step, import_step

logger = logging.getLogger(__name__)

SEWING_TOLERANCE_MM = 1e-6


def _unify(shape):
    unifier = ShapeUpgrade_UnifySameDomain(shape, True, True, True)
    unifier.Build()
    return unifier.Shape()


def _sew_into_solid(shape) -> Optional[Part]:
    sewer = BRepBuilderAPI_Sewing(SEWING_TOLERANCE_MM)
    explorer = TopExp_Explorer(shape, TopAbs_FACE)
    face_count = 0
    while explorer.More():
        sewer.Add(explorer.Current())
        face_count += 1
        explorer.Next()
    if face_count == 0:
        return None

    sewer.Perform()
    shell_explorer = TopExp_Explorer(sewer.SewedShape(), TopAbs_SHELL)
    if not shell_explorer.More():
        return None

    solid_maker = BRepBuilderAPI_MakeSolid(TopoDS.Shell(shell_explorer.Current()))
    if not solid_maker.IsDone():
        return None

    fixer = ShapeFix_Solid(solid_maker.Solid())
    fixer.Perform()
    return Part(fixer.Solid())


def _shape_fix(shape) -> Part:
    fixer = ShapeFix_Shape(shape)
    fixer.Perform()
    return Part(fixer.Shape())


def step_roundtrip(part: Part) -> Part:
    """Export to a temporary STEP file and read it back.

    The STEP writer and reader normalise pipe-shell topology, which makes
    ``volume`` report correctly and later booleans reliable.
    """
    with tempfile.NamedTemporaryFile(suffix=".step", delete=False) as f:
        step_path = Path(f.name)
    try:
        export_step(part, str(step_path))
        return import_step(str(step_path))
    finally:
        step_path.unlink(missing_ok=True)


def repair_geometry(part: Part) -> Part:
    """
    Multi-strategy repair for invalid topology after boolean operations.

    Strategies, in order:

    1. unify - merge faces sharing the same underlying surface.
    2. sew - stitch all faces into one shell, build and fix a solid.
    3. shapefix - general ShapeFix_Shape on the unified shape.
    4. step - STEP export and re-import.

    Args:
        part: Part to repair.

    Returns:
        The first valid result, or *part* unchanged if none is valid.
    """
    if part.is_valid:
        return part

    shape = part.wrapped if hasattr(part, "wrapped") else part
    try:
        unified = _unify(shape)
    except Exception as e:
        logger.debug(f"Geometry repair skipped: {e}")
        return part

    strategies: List[Tuple[str, Callable[[], Optional[Part]]]] = [
        ("unify", lambda: Part(unified)),
        ("sew + solid", lambda: _sew_into_solid(unified)),
        ("ShapeFix", lambda: _shape_fix(unified)),
        ("STEP roundtrip", lambda: step_roundtrip(part)),
    ]
    for name, strategy in strategies:
        try:
            result = strategy()
        except Exception as e:
            logger.debug(f"Repair strategy '{name}' failed: {e}")
            continue
        if result is not None and result.is_valid:
            logger.debug(f"Geometry repair successful ({name})")
            return result

    logger.debug("Geometry repair did not achieve valid solid, using original")
    return part


def largest_solid(part):
    """
    Reduce a boolean result to its largest solid.

    Repair may return a Compound wrapping one valid solid (volume 0 on the
    Compound but correct on the inner Solid); trims can also leave slivers.
    """
    if not hasattr(part, "solids"):
        return part
    solids = list(part.solids())
    if not solids:
        return part
    if len(solids) == 1:
        return solids[0]
    dropped = len(solids) - 1
    logger.debug(f"Keeping largest of {len(solids)} solids, dropping {dropped}")
    return max(solids, key=lambda s: s.volume)
