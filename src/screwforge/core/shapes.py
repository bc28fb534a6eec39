"""
Primitive solids shared by the fastener builders.

All shapes are built around the Z axis with their base at the given z.
"""

import math
from typing import Sequence, Tuple

from build123d import (
    Part, Cone, Cylinder, RegularPolygon, Align, Pos, Plane, Axis,
    BuildPart, BuildSketch, BuildLine, Polyline, ThreePointArc, make_face, revolve, extrude,
)


def cylinder(radius: float, height: float, z: float = 0.0) -> Part:
    return Pos(0, 0, z) * Cylinder(
        radius=radius, height=height,
        align=(Align.CENTER, Align.CENTER, Align.MIN),
    )


def frustum(bottom_radius: float, top_radius: float, height: float, z: float = 0.0) -> Part:
    """Truncated cone from *bottom_radius* at z to *top_radius* at z + height."""
    return Pos(0, 0, z) * Cone(
        bottom_radius=bottom_radius,
        top_radius=top_radius,
        height=height,
        align=(Align.CENTER, Align.CENTER, Align.MIN),
    )


def polygon_prism(
    sides: int,
    width_across_flats: float,
    height: float,
    z: float = 0.0,
    rotation: float = 0.0,
) -> Part:
    """
    Regular prism measured across flats.

    With zero rotation a flat faces +X for even side counts.
    """
    polygon = RegularPolygon(
        radius=width_across_flats / 2,
        side_count=sides,
        major_radius=False,
        rotation=rotation,
    )
    return Pos(0, 0, z) * extrude(polygon, amount=height)


def circumradius(sides: int, width_across_flats: float) -> float:
    return width_across_flats / 2 / math.cos(math.pi / sides)


def revolved_profile(points: Sequence[Tuple[float, float]]) -> Part:
    """Revolve a closed (radius, z) polygon about the Z axis."""
    with BuildPart() as part:
        with BuildSketch(Plane.XZ):
            with BuildLine():
                Polyline(*points, close=True)
            make_face()
        revolve(axis=Axis.Z)
    return part.part


def _polar(radius: float, degrees: float) -> Tuple[float, float]:
    angle = math.radians(degrees)
    return (radius * math.cos(angle), radius * math.sin(angle))


def _toward(origin: Tuple[float, float], target: Tuple[float, float], distance: float) -> Tuple[float, float]:
    dx, dy = target[0] - origin[0], target[1] - origin[1]
    length = math.hypot(dx, dy)
    return (origin[0] + dx / length * distance, origin[1] + dy / length * distance)


def hexalobular_prism(
    lobe_center: float,
    lobe_radius: float,
    fillet_radius: float,
    height: float,
    offset: float = 0.0,
) -> Part:
    """
    Six-lobed star prism (Torx outline), extruded from z=0.

    Convex lobes of *lobe_radius* centred at *lobe_center* on the 0°, 60°, ...
    directions alternate with concave arcs of *fillet_radius* on the
    bisectors, each tangent to both neighbouring lobes. *offset* grows the
    outline outward.
    """
    outer = lobe_radius + offset
    inner = fillet_radius - offset
    # Fillet centres sit on the 30° bisectors, tangent to both lobes
    half = math.radians(30.0)
    reach = lobe_radius + fillet_radius
    fillet_center = lobe_center * math.cos(half) + math.sqrt(
        reach ** 2 - (lobe_center * math.sin(half)) ** 2
    )

    arcs = []
    for index in range(6):
        angle = 60.0 * index
        lobe = _polar(lobe_center, angle)
        next_lobe = _polar(lobe_center, angle + 60.0)
        before = _polar(fillet_center, angle - 30.0)
        after = _polar(fillet_center, angle + 30.0)
        entry = _toward(lobe, before, outer)
        exit_ = _toward(lobe, after, outer)
        arcs.append((entry, _polar(lobe_center + outer, angle), exit_))
        arcs.append((exit_, _polar(fillet_center - inner, angle + 30.0), _toward(next_lobe, after, outer)))

    with BuildPart() as part:
        with BuildSketch():
            with BuildLine():
                for start, middle, end in arcs:
                    ThreePointArc(start, middle, end)
            make_face()
        extrude(amount=height)
    return part.part
