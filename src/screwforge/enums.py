"""Type-safe enums shared by the thread calculator, geometry and JSON layers."""

from enum import Enum


class Handedness(Enum):
    """Thread hand / helix direction"""
    RIGHT = "right"
    LEFT = "left"


class Operation(Enum):
    """Boolean context a thread solid is built for.

    Decides the sign of the tolerance offset: material that is added
    (external threads) shrinks, voids that are subtracted (internal
    threads) grow.
    """
    ADDITION = "addition"
    SUBTRACTION = "subtraction"


class LeadInSide(Enum):
    """Which axial ends of a threaded feature receive a lead-in chamfer"""
    NONE = "none"
    LEADING = "leading"  # min Z
    TRAILING = "trailing"  # max Z
    BOTH = "both"


class PartKind(Enum):
    """Kind of part described in a parts file"""
    THREAD = "thread"
    BOLT = "bolt"
    NUT = "nut"
    WASHER = "washer"
    THREADED_HOLE = "threaded_hole"
    CLEARANCE_HOLE = "clearance_hole"


class BoltStyle(Enum):
    """Standard bolt constructions"""
    HEX_HEAD = "hex_head"  # DIN 931
    SOCKET_HEAD_CAP = "socket_head_cap"  # DIN 912
    COUNTERSUNK = "countersunk"  # ISO 10642
    SLOTTED_COUNTERSUNK = "slotted_countersunk"  # ISO 2009
    SET_SCREW = "set_screw"  # DIN 913 / DIN 915
    PHILLIPS_CHEESE_HEAD = "phillips_cheese_head"  # DIN 7985
    PHILLIPS_COUNTERSUNK = "phillips_countersunk"  # DIN 965
    RAISED_PHILLIPS_COUNTERSUNK = "raised_phillips_countersunk"  # DIN 966
    TORX_COUNTERSUNK = "torx_countersunk"  # ISO 14581
    RAISED_SLOTTED_COUNTERSUNK = "raised_slotted_countersunk"  # DIN 964


class NutStyle(Enum):
    """Standard nut constructions"""
    HEX = "hex"  # DIN 934
    SQUARE = "square"  # DIN 557 / DIN 562
    FLANGED_HEX = "flanged_hex"  # DIN 6923
    T_SLOT = "t_slot"  # DIN 508


class SquareNutSeries(Enum):
    """Square nut thickness series"""
    REGULAR = "regular"  # DIN 557
    THIN = "thin"  # DIN 562


class WasherSeries(Enum):
    """Plain washer series"""
    NORMAL = "normal"  # ISO 7089
    LARGE = "large"  # ISO 7093


class SetScrewPoint(Enum):
    """Set screw point type"""
    FLAT = "flat"  # DIN 913 / ISO 4026
    DOG = "dog"  # DIN 915 / ISO 4028


class PhillipsSize(Enum):
    """Phillips cross recess driver size"""
    PH0 = "PH0"
    PH1 = "PH1"
    PH2 = "PH2"
    PH3 = "PH3"
    PH4 = "PH4"


class TorxSize(Enum):
    """Hexalobular (Torx) driver size"""
    T6 = "T6"
    T8 = "T8"
    T10 = "T10"
    T15 = "T15"
    T20 = "T20"
    T25 = "T25"
    T30 = "T30"
    T40 = "T40"
    T45 = "T45"
    T50 = "T50"
    T55 = "T55"
    T60 = "T60"
    T70 = "T70"
    T80 = "T80"
    T90 = "T90"
    T100 = "T100"
