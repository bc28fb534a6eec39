"""
Boolean operations with OpenCascade first and build123d operators as fallback.

Direct BRepAlgoAPI calls are more reliable than the build123d operators on
swept thread solids; when OCC reports failure the operator is tried and a
warning logged.
"""

import logging
from typing import Iterable, Optional

from OCP.BRepAlgoAPI import BRepAlgoAPI_Fuse, BRepAlgoAPI_Cut, BRepAlgoAPI_Common

from build123d import Part, Box, Align, Pos

logger = logging.getLogger(__name__)


def _wrapped(shape):
    return shape.wrapped if hasattr(shape, "wrapped") else shape


def fuse(a, b) -> Part:
    try:
        op = BRepAlgoAPI_Fuse(_wrapped(a), _wrapped(b))
        op.Build()
        if op.IsDone():
            return Part(op.Shape())
        logger.warning("OCP union failed, using build123d operator")
    except Exception as e:
        logger.warning(f"OCP union error ({e}), using build123d operator")
    return a + b


def cut(a, b) -> Part:
    try:
        op = BRepAlgoAPI_Cut(_wrapped(a), _wrapped(b))
        op.Build()
        if op.IsDone():
            return Part(op.Shape())
        logger.warning("OCP cut failed, using build123d operator")
    except Exception as e:
        logger.warning(f"OCP cut error ({e}), using build123d operator")
    return a - b


def common(a, b) -> Part:
    try:
        op = BRepAlgoAPI_Common(_wrapped(a), _wrapped(b))
        op.Build()
        if op.IsDone():
            return Part(op.Shape())
        logger.warning("OCP intersection failed, using build123d operator")
    except Exception as e:
        logger.warning(f"OCP intersection error ({e}), using build123d operator")
    return a & b


def fuse_all(shapes: Iterable) -> Optional[Part]:
    """Fuse shapes sequentially, skipping None entries."""
    result = None
    for shape in shapes:
        if shape is None:
            continue
        result = shape if result is None else fuse(result, shape)
    return result


def clip_z(part, bottom: float, top: float, radius: float) -> Part:
    """
    Keep only the part of *part* between z=bottom and z=top.

    Cuts with two boxes rather than intersecting with one so each cut
    leaves a single planar end face.
    """
    size = radius * 4
    height = (top - bottom) + 4 * radius

    top_box = Pos(0, 0, top) * Box(
        length=size, width=size, height=height,
        align=(Align.CENTER, Align.CENTER, Align.MIN),
    )
    bottom_box = Pos(0, 0, bottom) * Box(
        length=size, width=size, height=height,
        align=(Align.CENTER, Align.CENTER, Align.MAX),
    )

    logger.debug(f"Clipping to {bottom:.3f} <= z <= {top:.3f}")
    return cut(cut(part, top_box), bottom_box)
