"""
Standard fastener dimension tables.

Sizes are keyed by nominal metric diameter in mm. Lookup functions accept
the same inputs as ``iso_metric`` (``"M8"``, ``8``) and raise
``CatalogError`` when a standard does not define the size.

Sources:
- DIN 934: hex nuts (width across flats s, height m)
- DIN 557 / DIN 562: square nuts (s, regular m, thin m)
- ISO 7089 / ISO 7093: plain washers (d1, d2 normal, d2 large, h)
- DIN 931: hex head bolts (head height k, width across flats s)
- DIN 912: hex socket head cap screws (head diameter dk, socket s)
- ISO 10642: hex socket countersunk screws (dk, socket s, socket depth t)
- ISO 2009: slotted countersunk screws (dk)
- DIN 913 / DIN 915: hex socket set screws (flat dp, dog dp, socket s, t)
- DIN 964: raised slotted countersunk screws (lens height f)
- DIN 7985: Phillips raised cheese head screws (dk, k, rf, PH size, m)
- DIN 965 / DIN 966: Phillips countersunk screws (dk, PH size, m)
- ISO 14581: hexalobular countersunk screws (dk, t, T size)
- DIN 6923: flanged hex nuts (s, m, flange dc, edge rounding)
- DIN 508: T-slot nuts (base a, base height, neck width, full height, chamfer)
- ISO 4757 / ISO 10664: Phillips recess and hexalobular socket sizes
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, TypeVar

from ..enums import PhillipsSize, TorxSize
from .catalog import CatalogError, SizeInput, parse_metric_size


# =============================================================================
# Result types
# =============================================================================

@dataclass(frozen=True)
class HexNutDimensions:
    width_across_flats: float
    thickness: float


@dataclass(frozen=True)
class SquareNutDimensions:
    width_across_flats: float
    thickness: float


@dataclass(frozen=True)
class WasherDimensions:
    inner_diameter: float
    outer_diameter: float
    thickness: float


@dataclass(frozen=True)
class HexHeadDimensions:
    head_height: float
    width_across_flats: float


@dataclass(frozen=True)
class SocketHeadDimensions:
    head_diameter: float
    socket_width: float


@dataclass(frozen=True)
class CountersunkDimensions:
    head_diameter: float
    socket_width: float
    socket_depth: float


@dataclass(frozen=True)
class SetScrewDimensions:
    flat_point_diameter: float
    dog_point_diameter: Optional[float]
    socket_width: float
    socket_depth: float


@dataclass(frozen=True)
class PhillipsHeadDimensions:
    head_diameter: float
    phillips_size: PhillipsSize
    socket_width: float
    head_height: Optional[float] = None
    top_radius: Optional[float] = None


@dataclass(frozen=True)
class TorxCountersunkDimensions:
    head_diameter: float
    socket_depth: float
    torx_size: TorxSize


@dataclass(frozen=True)
class PhillipsRecessDimensions:
    """ISO 4757 recess: corner distance b, bottom width g, slot width f."""
    corner_distance: float
    bottom_width: float
    slot_width: float


@dataclass(frozen=True)
class FlangedNutDimensions:
    width_across_flats: float
    thickness: float
    flange_diameter: float
    rounding_diameter: float


@dataclass(frozen=True)
class TSlotNutDimensions:
    base_width: float
    base_height: float
    neck_width: float
    height: float
    chamfer_depth: float


# =============================================================================
# Tables
# =============================================================================

# DIN 934: (s, m)
HEX_NUT_DIN934: Mapping[float, Tuple[float, float]] = MappingProxyType({
    2.0: (4, 1.6), 2.5: (5, 2), 3.0: (5.5, 2.4), 3.5: (6, 2.8), 4.0: (7, 3.2),
    5.0: (8, 4), 6.0: (10, 5), 7.0: (11, 5.5), 8.0: (13, 6.5), 10.0: (17, 8),
    12.0: (19, 10), 14.0: (22, 11), 16.0: (24, 13), 18.0: (27, 15), 20.0: (30, 16),
    22.0: (32, 18), 24.0: (36, 19), 27.0: (41, 22), 30.0: (46, 24), 33.0: (50, 26),
    36.0: (55, 29), 39.0: (60, 31), 42.0: (65, 34), 45.0: (70, 36), 48.0: (75, 38),
    52.0: (80, 42), 56.0: (85, 45), 60.0: (90, 48), 64.0: (95, 51),
})

# DIN 557 / DIN 562: (s, regular m, thin m); None where a series lacks the size
SQUARE_NUT_DIN557_562: Mapping[float, Tuple[float, Optional[float], Optional[float]]] = MappingProxyType({
    1.6: (3.2, None, 1), 2.0: (4, None, 1.2), 2.5: (5, None, 1.6),
    3.0: (5.5, None, 1.8), 3.5: (6, None, 2), 4.0: (7, None, 2.2),
    5.0: (8, 4, 2.7), 6.0: (10, 5, 3.2), 8.0: (13, 6.5, 4),
    10.0: (17, 8, 5), 12.0: (18, 10, None), 16.0: (24, 13, None),
})

# ISO 7089 / ISO 7093: (d1, d2 normal, d2 large, h)
WASHER_ISO7089_7093: Mapping[float, Tuple[float, float, Optional[float], float]] = MappingProxyType({
    1.6: (1.7, 4, None, 0.3), 2.0: (2.2, 5, None, 0.3), 2.5: (2.7, 6, 8, 0.5),
    3.0: (3.2, 7, 9, 0.5), 3.5: (3.7, 8, 11, 0.5), 4.0: (4.3, 9, 12, 0.8),
    5.0: (5.3, 10, 15, 1), 6.0: (6.4, 12, 18, 1.6), 7.0: (7.4, 14, 22, 1.6),
    8.0: (8.4, 16, 24, 1.6), 10.0: (10.5, 20, 30, 2), 12.0: (13, 24, 37, 2.5),
    14.0: (15, 28, 44, 2.5), 16.0: (17, 30, 50, 3), 18.0: (19, 34, 56, 3),
    20.0: (21, 37, 60, 3), 22.0: (23, 39, 66, 3), 24.0: (25, 44, 72, 4),
    27.0: (28, 50, 85, 4), 30.0: (31, 56, 92, 4), 33.0: (34, 60, 105, 5),
    36.0: (37, 66, 110, 5), 39.0: (40, 72, None, 6), 42.0: (43, 78, None, 7),
    45.0: (46, 85, None, 7), 48.0: (50, 92, None, 8), 52.0: (54, 98, None, 8),
    56.0: (58, 105, None, 9), 60.0: (66, 110, None, 10), 64.0: (70, 115, None, 10),
})

# DIN 931: (k, s)
HEX_HEAD_DIN931: Mapping[float, Tuple[float, float]] = MappingProxyType({
    1.6: (1.1, 3.2), 2.0: (1.4, 4), 2.5: (1.7, 5), 3.0: (2, 5.5), 4.0: (2.8, 7),
    5.0: (3.5, 8), 6.0: (4, 10), 8.0: (5.3, 13), 10.0: (6.4, 16), 12.0: (7.5, 18),
    16.0: (10, 24), 20.0: (12.5, 30), 24.0: (15, 36), 30.0: (18.7, 46),
    36.0: (22.5, 55), 42.0: (26, 65), 48.0: (30, 75), 56.0: (35, 85), 64.0: (40, 95),
})

# DIN 912: (dk, s)
SOCKET_HEAD_DIN912: Mapping[float, Tuple[float, float]] = MappingProxyType({
    1.6: (3.0, 1.5), 2.0: (3.8, 1.5), 2.5: (4.5, 2), 3.0: (5.5, 2.5), 4.0: (7.0, 3),
    5.0: (8.5, 4), 6.0: (10.0, 5), 8.0: (13.0, 6), 10.0: (16.0, 8), 12.0: (18.0, 10),
    14.0: (21.0, 12), 16.0: (24.0, 14), 20.0: (30.0, 17), 24.0: (36.0, 19),
    30.0: (45.0, 22), 36.0: (54.0, 27), 42.0: (63.0, 32), 48.0: (72.0, 36),
    56.0: (84.0, 41), 64.0: (96.0, 46),
})

# ISO 10642: (dk, s, t)
COUNTERSUNK_ISO10642: Mapping[float, Tuple[float, float, float]] = MappingProxyType({
    2.0: (3.7, 1.3, 0.75), 2.5: (4.8, 1.5, 1.0), 3.0: (5.54, 2, 1.1),
    4.0: (7.53, 2.5, 1.4), 5.0: (9.43, 3, 1.75), 6.0: (11.34, 4, 2.2),
    8.0: (15.24, 5, 2.9), 10.0: (19.22, 6, 3.5), 12.0: (23.12, 8, 4.3),
    14.0: (26.52, 10, 4.5), 16.0: (29.01, 10, 4.8), 20.0: (35.4, 12, 5.6),
})

# ISO 2009: dk
SLOTTED_COUNTERSUNK_ISO2009: Mapping[float, float] = MappingProxyType({
    1.0: 1.9, 1.2: 2.3, 1.4: 2.6, 1.6: 3.0, 2.0: 3.8, 2.5: 4.7, 3.0: 5.6,
    3.5: 6.5, 4.0: 7.5, 5.0: 9.2, 6.0: 11.0, 8.0: 14.5, 10.0: 18.0,
    12.0: 22.0, 14.0: 25.0, 16.0: 29.0, 18.0: 33.0, 20.0: 36.0,
})

# DIN 913 / DIN 915: (flat dp, dog dp, s, t)
SET_SCREW_DIN913_915: Mapping[float, Tuple[float, Optional[float], float, float]] = MappingProxyType({
    1.6: (0.8, 0.55, 0.7, 1.5), 2.0: (1, 0.75, 0.9, 1.7), 2.5: (1.5, 1.25, 1.3, 2),
    3.0: (2, 1.75, 1.5, 2), 4.0: (2.5, 2.25, 2, 2.5), 5.0: (3.5, 3.2, 2.5, 3),
    6.0: (4, 3.7, 3, 3.5), 8.0: (5.5, 5.2, 4, 5), 10.0: (7, 6.64, 5, 6),
    12.0: (8.5, 8.14, 6, 8), 14.0: (10, None, 6, 9), 16.0: (12, 11.57, 8, 10),
    18.0: (13, None, 10, 11), 20.0: (15, 14.57, 10, 12), 22.0: (17, None, 12, 13.5),
    24.0: (18, 17.57, 12, 15),
})

# DIN 964: lens height f on top of the ISO 2009 head
RAISED_COUNTERSUNK_DIN964: Mapping[float, float] = MappingProxyType({
    1.0: 0.25, 1.2: 0.3, 1.4: 0.35, 1.6: 0.4, 2.0: 0.5, 2.5: 0.6, 3.0: 0.75,
    3.5: 0.9, 4.0: 1.0, 5.0: 2.5, 6.0: 3.0, 8.0: 4.0, 10.0: 5.0,
})

# DIN 7985: (dk, k, rf, recess size, m)
PHILLIPS_CHEESE_HEAD_DIN7985: Mapping[float, Tuple[float, float, float, PhillipsSize, float]] = MappingProxyType({
    1.6: (3.2, 1.3, 3, PhillipsSize.PH0, 1.8), 2.0: (4, 1.6, 4, PhillipsSize.PH1, 2.5),
    2.5: (5, 2, 5, PhillipsSize.PH1, 2.7), 3.0: (6, 2.4, 6, PhillipsSize.PH1, 3.1),
    3.5: (7, 2.7, 7, PhillipsSize.PH2, 4.2), 4.0: (8, 3.1, 8, PhillipsSize.PH2, 4.6),
    5.0: (10, 3.8, 10, PhillipsSize.PH2, 5.3), 6.0: (12, 4.6, 12, PhillipsSize.PH3, 6.8),
    8.0: (16, 6, 16, PhillipsSize.PH4, 9), 10.0: (20, 7.5, 20, PhillipsSize.PH4, 10.2),
})

# DIN 965 / DIN 966: (dk, recess size, m)
PHILLIPS_COUNTERSUNK_DIN965: Mapping[float, Tuple[float, PhillipsSize, float]] = MappingProxyType({
    1.6: (3, PhillipsSize.PH0, 1.7), 2.0: (3.8, PhillipsSize.PH1, 2.35),
    2.5: (4.7, PhillipsSize.PH1, 2.7), 3.0: (5.6, PhillipsSize.PH1, 2.9),
    3.5: (6.5, PhillipsSize.PH2, 3.9), 4.0: (7.5, PhillipsSize.PH2, 4.4),
    5.0: (9.2, PhillipsSize.PH2, 4.6), 6.0: (11, PhillipsSize.PH3, 6.6),
    8.0: (14.5, PhillipsSize.PH4, 8.7), 10.0: (18, PhillipsSize.PH4, 9.6),
})

# ISO 14581: (dk, t, socket size)
TORX_COUNTERSUNK_ISO14581: Mapping[float, Tuple[float, float, TorxSize]] = MappingProxyType({
    2.0: (3.8, 0.51, TorxSize.T6), 2.5: (4.7, 0.66, TorxSize.T8), 3.0: (5.5, 0.70, TorxSize.T10),
    3.5: (7.3, 1.16, TorxSize.T15), 4.0: (8.4, 1.14, TorxSize.T20), 5.0: (9.3, 1.12, TorxSize.T25),
    6.0: (11.3, 1.39, TorxSize.T30), 8.0: (15.8, 2.15, TorxSize.T45), 10.0: (18.3, 2.41, TorxSize.T50),
})

# DIN 6923 (M3, M4 extended): (s, m, dc, edge rounding diameter)
FLANGED_HEX_NUT_DIN6923: Mapping[float, Tuple[float, float, float, float]] = MappingProxyType({
    3.0: (5.5, 4.0, 6.7, 0.65), 4.0: (7.0, 4.65, 8.6, 0.8), 5.0: (8.0, 5.0, 9.8, 1.0),
    6.0: (10.0, 6.0, 12.2, 1.1), 8.0: (13.0, 8.0, 15.8, 1.2), 10.0: (15.0, 10.0, 19.6, 1.5),
    12.0: (18.0, 12.0, 23.8, 1.8), 14.0: (21.0, 14.0, 27.6, 2.1), 16.0: (24.0, 16.0, 31.9, 2.4),
    20.0: (30.0, 20.0, 39.9, 3.0),
})

# DIN 508: (a, base height, neck width, full height, chamfer)
T_SLOT_NUT_DIN508: Mapping[float, Tuple[float, float, float, float, float]] = MappingProxyType({
    4.0: (9, 3, 5, 6.5, 1), 5.0: (10, 4, 6, 8, 1.6), 6.0: (13, 6, 8, 10, 1.6),
    8.0: (15, 6, 10, 12, 1.6), 10.0: (18, 7, 12, 14, 2.5), 12.0: (22, 8, 14, 16, 2.5),
    16.0: (28, 10, 18, 20, 2.5), 20.0: (35, 14, 22, 28, 2.5), 24.0: (44, 18, 28, 36, 4),
    30.0: (54, 22, 36, 44, 6), 36.0: (65, 26, 42, 52, 6), 42.0: (75, 30, 48, 60, 6),
    48.0: (85, 34, 54, 70, 6),
})

# ISO 4757: (b, g, f)
PHILLIPS_RECESS_ISO4757: Mapping[PhillipsSize, Tuple[float, float, float]] = MappingProxyType({
    PhillipsSize.PH0: (0.61, 0.81, 0.35),
    PhillipsSize.PH1: (0.97, 1.27, 0.55),
    PhillipsSize.PH2: (1.47, 2.29, 0.7),
    PhillipsSize.PH3: (2.41, 3.81, 0.85),
    PhillipsSize.PH4: (3.48, 5.08, 1.25),
})

# ISO 10664: outer diameter A
TORX_OUTER_DIAMETER_ISO10664: Mapping[TorxSize, float] = MappingProxyType({
    TorxSize.T6: 1.75, TorxSize.T8: 2.4, TorxSize.T10: 2.8, TorxSize.T15: 3.35,
    TorxSize.T20: 3.95, TorxSize.T25: 4.5, TorxSize.T30: 5.6, TorxSize.T40: 6.75,
    TorxSize.T45: 7.93, TorxSize.T50: 8.95, TorxSize.T55: 11.35, TorxSize.T60: 13.45,
    TorxSize.T70: 15.7, TorxSize.T80: 17.75, TorxSize.T90: 20.2, TorxSize.T100: 22.4,
})


# =============================================================================
# Lookups
# =============================================================================

T = TypeVar("T")


def _lookup(table: Mapping[float, T], size: SizeInput, standard: str) -> Tuple[float, T]:
    diameter, _ = parse_metric_size(size)
    if diameter not in table:
        known = ", ".join(f"M{d:g}" for d in table)
        raise CatalogError(f"M{diameter:g} is not a {standard} size; known sizes: {known}")
    return diameter, table[diameter]


def hex_nut_dimensions(size: SizeInput) -> HexNutDimensions:
    _, (s, m) = _lookup(HEX_NUT_DIN934, size, "DIN 934 hex nut")
    return HexNutDimensions(width_across_flats=s, thickness=m)


def square_nut_dimensions(size: SizeInput, thin: bool = False) -> SquareNutDimensions:
    standard = "DIN 562 thin square nut" if thin else "DIN 557 square nut"
    diameter, (s, regular, thin_m) = _lookup(SQUARE_NUT_DIN557_562, size, standard)
    thickness = thin_m if thin else regular
    if thickness is None:
        raise CatalogError(f"M{diameter:g} is not a {standard} size")
    return SquareNutDimensions(width_across_flats=s, thickness=thickness)


def washer_dimensions(size: SizeInput, large: bool = False) -> WasherDimensions:
    standard = "ISO 7093 large washer" if large else "ISO 7089 washer"
    diameter, (d1, d2_normal, d2_large, h) = _lookup(WASHER_ISO7089_7093, size, standard)
    outer = d2_large if large else d2_normal
    if outer is None:
        raise CatalogError(f"M{diameter:g} is not an {standard} size")
    return WasherDimensions(inner_diameter=d1, outer_diameter=outer, thickness=h)


def hex_head_dimensions(size: SizeInput) -> HexHeadDimensions:
    _, (k, s) = _lookup(HEX_HEAD_DIN931, size, "DIN 931 hex head bolt")
    return HexHeadDimensions(head_height=k, width_across_flats=s)


def socket_head_dimensions(size: SizeInput) -> SocketHeadDimensions:
    _, (dk, s) = _lookup(SOCKET_HEAD_DIN912, size, "DIN 912 socket head cap screw")
    return SocketHeadDimensions(head_diameter=dk, socket_width=s)


def countersunk_dimensions(size: SizeInput) -> CountersunkDimensions:
    _, (dk, s, t) = _lookup(COUNTERSUNK_ISO10642, size, "ISO 10642 countersunk screw")
    return CountersunkDimensions(head_diameter=dk, socket_width=s, socket_depth=t)


def slotted_countersunk_head_diameter(size: SizeInput) -> float:
    _, dk = _lookup(SLOTTED_COUNTERSUNK_ISO2009, size, "ISO 2009 slotted countersunk screw")
    return dk


def set_screw_dimensions(size: SizeInput) -> SetScrewDimensions:
    _, (flat, dog, s, t) = _lookup(SET_SCREW_DIN913_915, size, "DIN 913 set screw")
    return SetScrewDimensions(
        flat_point_diameter=flat, dog_point_diameter=dog, socket_width=s, socket_depth=t
    )


def raised_countersunk_lens_height(size: SizeInput) -> float:
    _, f = _lookup(RAISED_COUNTERSUNK_DIN964, size, "DIN 964 raised countersunk screw")
    return f


def phillips_cheese_head_dimensions(size: SizeInput) -> PhillipsHeadDimensions:
    _, (dk, k, rf, ph, m) = _lookup(PHILLIPS_CHEESE_HEAD_DIN7985, size, "DIN 7985 cheese head screw")
    return PhillipsHeadDimensions(
        head_diameter=dk, phillips_size=ph, socket_width=m, head_height=k, top_radius=rf,
    )


def phillips_countersunk_dimensions(size: SizeInput) -> PhillipsHeadDimensions:
    _, (dk, ph, m) = _lookup(PHILLIPS_COUNTERSUNK_DIN965, size, "DIN 965 countersunk screw")
    return PhillipsHeadDimensions(head_diameter=dk, phillips_size=ph, socket_width=m)


def torx_countersunk_dimensions(size: SizeInput) -> TorxCountersunkDimensions:
    _, (dk, t, torx) = _lookup(TORX_COUNTERSUNK_ISO14581, size, "ISO 14581 countersunk screw")
    return TorxCountersunkDimensions(head_diameter=dk, socket_depth=t, torx_size=torx)


def flanged_hex_nut_dimensions(size: SizeInput) -> FlangedNutDimensions:
    _, (s, m, dc, rounding) = _lookup(FLANGED_HEX_NUT_DIN6923, size, "DIN 6923 flanged hex nut")
    return FlangedNutDimensions(
        width_across_flats=s, thickness=m, flange_diameter=dc, rounding_diameter=rounding,
    )


def t_slot_nut_dimensions(size: SizeInput) -> TSlotNutDimensions:
    _, (a, base_height, neck, height, chamfer) = _lookup(T_SLOT_NUT_DIN508, size, "DIN 508 T-slot nut")
    return TSlotNutDimensions(
        base_width=a, base_height=base_height, neck_width=neck, height=height, chamfer_depth=chamfer,
    )


def phillips_recess_dimensions(size: PhillipsSize) -> PhillipsRecessDimensions:
    b, g, f = PHILLIPS_RECESS_ISO4757[PhillipsSize(size)]
    return PhillipsRecessDimensions(corner_distance=b, bottom_width=g, slot_width=f)


def torx_outer_diameter(size: TorxSize) -> float:
    return TORX_OUTER_DIAMETER_ISO10664[TorxSize(size)]
