"""
Helical sweep of a thread profile.

The profile is drawn on the plane that contains the thread axis and the
helix start point, with local x pointing radially outward and local y
along +Z, then swept along the helix with OCC's MakePipeShell.
"""

import logging
import math

from OCP.BRepOffsetAPI import BRepOffsetAPI_MakePipeShell
from OCP.BRepBuilderAPI import BRepBuilderAPI_MakeWire
from OCP.TopExp import TopExp_Explorer
from OCP.TopAbs import TopAbs_EDGE
from OCP.TopoDS import TopoDS
from OCP.gp import gp_Dir

from build123d import (
    Part, Helix, Axis, Vector, Plane,
    BuildSketch, BuildLine, Line, ThreePointArc, make_face,
)

from ..calculator.threadform import ThreadProfile, LineSegment, ArcSegment
from .geometry_repair import step_roundtrip, largest_solid

logger = logging.getLogger(__name__)


def profile_face(profile: ThreadProfile, plane: Plane, radial_offset: float):
    """
    Face of *profile* on *plane*, shifted radially by *radial_offset*.

    Profile coordinates are (radial, axial); radial 0 lands at
    *radial_offset* along the plane's x direction.
    """
    def local(point):
        return (point[0] + radial_offset, point[1])

    with BuildSketch(plane) as sk:
        with BuildLine():
            current = profile.start
            for segment in profile.segments:
                if isinstance(segment, ArcSegment):
                    ThreePointArc(local(current), local(segment.mid), local(segment.end))
                else:
                    Line(local(current), local(segment.end))
                current = segment.end
            Line(local(current), local(profile.start))
        make_face()
    return sk.sketch.faces()[0]


def _helix_wire(helix):
    wire_maker = BRepBuilderAPI_MakeWire()
    explorer = TopExp_Explorer(helix.wrapped, TopAbs_EDGE)
    while explorer.More():
        wire_maker.Add(TopoDS.Edge(explorer.Current()))
        explorer.Next()
    return wire_maker.Wire()


def sweep_profile(
    profile: ThreadProfile,
    radius: float,
    lead: float,
    height: float,
    start_angle: float = 0.0,
) -> Part:
    """
    Sweep *profile* along a right-handed helix around the Z axis.

    Args:
        profile: Thread cross-section (radial, axial)
        radius: Helix radius; profile radial 0 sits here
        lead: Axial advance per turn
        height: Axial height of the helix, starting at z=0
        start_angle: Rotation of the helix start about Z, degrees

    Returns:
        Solid of the swept thread ridge

    Raises:
        RuntimeError: If OCC cannot build the pipe shell
    """
    helix = Helix(
        pitch=lead,
        height=height,
        radius=radius,
        center=(0, 0, 0),
        direction=(0, 0, 1),
    )
    if start_angle != 0:
        helix = helix.rotate(Axis.Z, start_angle)

    start_point = helix @ 0
    angle = math.atan2(start_point.Y, start_point.X)
    radial_dir = Vector(math.cos(angle), math.sin(angle), 0)

    # x radial, y along +Z
    axial_plane = Plane(
        origin=(0, 0, start_point.Z),
        x_dir=radial_dir,
        z_dir=radial_dir.cross(Vector(0, 0, 1)),
    )
    face = profile_face(profile, axial_plane, radius)

    # SetMode(gp_Dir(0,0,1)) keeps the profile's radial direction pointing
    # away from the Z axis along the whole helix, so crest and root radii
    # stay constant.
    logger.debug(
        f"Sweeping profile along helix (r={radius:.3f}, lead={lead:.3f}, "
        f"h={height:.3f}, start={start_angle:.1f}°)"
    )
    pipe = BRepOffsetAPI_MakePipeShell(_helix_wire(helix))
    pipe.SetMode(gp_Dir(0, 0, 1))
    pipe.Add(face.outer_wire().wrapped)
    pipe.Build()

    if not pipe.IsDone():
        raise RuntimeError("OCC MakePipeShell failed to build")

    pipe.MakeSolid()

    ridge = largest_solid(step_roundtrip(Part(pipe.Shape())))
    logger.debug(f"Sweep completed: volume={ridge.volume:.3f}")
    return ridge
