"""
Screwforge Core - 3D thread and fastener geometry using build123d.

No JSON dependencies - pure Python API.

Example:
    >>> from screwforge.calculator import iso_metric, LeadInEnds
    >>> from screwforge.core import thread_solid, hex_nut
    >>>
    >>> solid = thread_solid(iso_metric("M6"), length=12, lead_ins=LeadInEnds.both())
    >>> nut = hex_nut("M6", tolerance=0.2)
    >>> nut.export_step("m6_nut.step")
"""

from .geometry_base import BaseGeometry
from .geometry_repair import repair_geometry, largest_solid

from .screw import ThreadedSolid, ScrewGeometry, thread_solid, lead_in_cutter

from .bolt import (
    BoltGeometry,
    PolygonalHead,
    CylindricalHead,
    CountersunkHead,
    ChamferedHead,
    PolygonalSocket,
    SlottedSocket,
    PhillipsSocket,
    TorxSocket,
    LeadInPoint,
    ChamferedPoint,
    hex_head,
    hex_socket_head_cap,
    hex_socket_countersunk,
    hex_socket_set_screw,
    slotted_countersunk,
    raised_slotted_countersunk,
    phillips_cheese_head,
    phillips_countersunk,
    torx_countersunk,
    unthreaded,
)

from .nut import (
    NutGeometry,
    PolygonalNutBody,
    FlangedNutBody,
    TSlotNutBody,
    hex_nut,
    square_nut,
    flanged_hex_nut,
    t_slot_nut,
)

from .washer import WasherGeometry, iso7089, iso7093, plain_washer

from .holes import (
    ThreadedHoleGeometry,
    ClearanceHoleGeometry,
    Countersink,
    Counterbore,
    PolygonalRecess,
)

__all__ = [
    # Base
    "BaseGeometry",
    "repair_geometry",
    "largest_solid",

    # Threads
    "ThreadedSolid",
    "ScrewGeometry",
    "thread_solid",
    "lead_in_cutter",

    # Bolts
    "BoltGeometry",
    "PolygonalHead",
    "CylindricalHead",
    "CountersunkHead",
    "ChamferedHead",
    "PolygonalSocket",
    "SlottedSocket",
    "PhillipsSocket",
    "TorxSocket",
    "LeadInPoint",
    "ChamferedPoint",
    "hex_head",
    "hex_socket_head_cap",
    "hex_socket_countersunk",
    "hex_socket_set_screw",
    "slotted_countersunk",
    "raised_slotted_countersunk",
    "phillips_cheese_head",
    "phillips_countersunk",
    "torx_countersunk",
    "unthreaded",

    # Nuts
    "NutGeometry",
    "PolygonalNutBody",
    "FlangedNutBody",
    "TSlotNutBody",
    "hex_nut",
    "square_nut",
    "flanged_hex_nut",
    "t_slot_nut",

    # Washers
    "WasherGeometry",
    "iso7089",
    "iso7093",
    "plain_washer",

    # Holes
    "ThreadedHoleGeometry",
    "ClearanceHoleGeometry",
    "Countersink",
    "Counterbore",
    "PolygonalRecess",
]
