"""
JSON input/output for parts files.

A parts file lists threads and fasteners to generate, each described by
a thread designation and a few options. Uses Pydantic for validation and
enum coercion.
"""

import json
from functools import partial
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..enums import (
    Handedness,
    LeadInSide,
    PartKind,
    BoltStyle,
    NutStyle,
    SquareNutSeries,
    WasherSeries,
    SetScrewPoint,
)
from ..calculator.catalog import parse_thread

SCHEMA_VERSION = "1.0"


def _coerce_enum(enum_type, value):
    if isinstance(value, str):
        text = value.strip().lower().replace("-", "_")
        if enum_type is Handedness and text in ("lh", "rh"):
            return Handedness.LEFT if text == "lh" else Handedness.RIGHT
        return enum_type(text)
    return value


_ENUM_FIELDS = {
    "kind": PartKind,
    "handedness": Handedness,
    "lead_in": LeadInSide,
    "bolt_style": BoltStyle,
    "set_screw_point": SetScrewPoint,
    "nut_style": NutStyle,
    "square_nut_series": SquareNutSeries,
    "washer_series": WasherSeries,
}


class PartSpec(BaseModel):
    """One part to generate."""
    name: str
    kind: PartKind = PartKind.THREAD
    thread: str = Field(..., description="Thread designation, e.g. 'M8', 'E27', 'Tr16x4', '1/4-20'")
    length_mm: Optional[float] = Field(None, gt=0)
    starts: int = Field(1, ge=1)
    handedness: Optional[Handedness] = None  # None: from the designation (LH suffix)
    lead_in: LeadInSide = LeadInSide.NONE
    tolerance_mm: Optional[float] = Field(None, ge=0)

    # Bolt options
    bolt_style: BoltStyle = BoltStyle.HEX_HEAD
    unthreaded_length_mm: float = Field(0.0, ge=0)
    set_screw_point: SetScrewPoint = SetScrewPoint.FLAT
    recessed_head: bool = False

    # Nut and washer options
    nut_style: NutStyle = NutStyle.HEX
    square_nut_series: SquareNutSeries = SquareNutSeries.REGULAR
    washer_series: WasherSeries = WasherSeries.NORMAL

    model_config = ConfigDict(extra="ignore")

    @field_validator(*_ENUM_FIELDS, mode="before")
    @classmethod
    def coerce_enums(cls, v, info):
        return _coerce_enum(_ENUM_FIELDS[info.field_name], v)

    @property
    def needs_length(self) -> bool:
        return self.kind in (
            PartKind.THREAD, PartKind.BOLT, PartKind.THREADED_HOLE, PartKind.CLEARANCE_HOLE,
        )


class PartsFile(BaseModel):
    """A parts file: shared settings and the list of parts."""
    schema_version: str = SCHEMA_VERSION
    tolerance_mm: float = Field(0.0, ge=0)
    parts: List[PartSpec] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")

    def tolerance_for(self, part: PartSpec) -> float:
        return self.tolerance_mm if part.tolerance_mm is None else part.tolerance_mm


def load_parts_json(filepath: Union[str, Path]) -> PartsFile:
    """
    Load a parts file.

    Args:
        filepath: Path to JSON file

    Returns:
        PartsFile with all parts validated

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If JSON is invalid or missing required fields
        ValueError: If a part that needs a length has none
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"Parts file not found: {filepath}")

    with open(filepath, 'r') as f:
        data = json.load(f)

    # A bare list of parts is accepted too
    if isinstance(data, list):
        data = {"parts": data}

    parts_file = PartsFile.model_validate(data)
    for part in parts_file.parts:
        if part.needs_length and part.length_mm is None:
            raise ValueError(f"Part '{part.name}' ({part.kind.value}) needs length_mm")
    return parts_file


def save_parts_json(parts_file: PartsFile, filepath: Union[str, Path]) -> None:
    """
    Save a parts file as JSON.

    Args:
        parts_file: Parts to save
        filepath: Path to save JSON file
    """
    filepath = Path(filepath)
    data = parts_file.model_dump(mode="json")
    data["schema_version"] = SCHEMA_VERSION

    with open(filepath, 'w') as f:
        json.dump(data, f, indent=2)


def thread_from_spec(part: PartSpec):
    """ThreadSpec named by a part, with its hand and start count applied."""
    thread = parse_thread(part.thread, handedness=part.handedness)
    if part.starts != 1:
        thread = thread.with_starts(part.starts)
    return thread


def part_from_spec(part: PartSpec, tolerance: float = 0.0):
    """
    Build the geometry object a part describes (not yet built).

    Standard fasteners (bolts, nuts, washers) are looked up by the metric
    size of the designation; a trailing LH makes them left-handed.

    Raises:
        CatalogError: If the thread or fastener size is not in a catalog
        ValueError: If a washer is given more than one start
    """
    # Geometry needs build123d; imported here so loading stays light
    from .. import core
    from ..calculator.lead_in import LeadInEnds

    thread = thread_from_spec(part)
    lead_ins = LeadInEnds.for_side(part.lead_in)

    if part.kind == PartKind.THREAD:
        return core.ScrewGeometry(thread, part.length_mm, lead_ins, tolerance)

    if part.kind == PartKind.THREADED_HOLE:
        return core.ThreadedHoleGeometry(thread, part.length_mm, lead_ins, tolerance)

    size = thread.designation
    threading = dict(handedness=thread.handedness, starts=thread.starts)

    if part.kind == PartKind.NUT:
        if part.nut_style == NutStyle.SQUARE:
            return core.square_nut(size, part.square_nut_series, tolerance=tolerance, **threading)
        constructors = {
            NutStyle.HEX: core.hex_nut,
            NutStyle.FLANGED_HEX: core.flanged_hex_nut,
            NutStyle.T_SLOT: core.t_slot_nut,
        }
        return constructors[part.nut_style](size, tolerance=tolerance, **threading)

    if part.kind == PartKind.WASHER:
        if thread.starts != 1:
            raise ValueError(f"A washer has no thread; starts={thread.starts} does not apply")
        return core.plain_washer(size, part.washer_series, tolerance)

    if part.bolt_style == BoltStyle.SET_SCREW:
        bolt = core.hex_socket_set_screw(
            size, part.length_mm, point=part.set_screw_point,
            tolerance=tolerance, **threading,
        )
    else:
        constructors = {
            BoltStyle.HEX_HEAD: core.hex_head,
            BoltStyle.SOCKET_HEAD_CAP: core.hex_socket_head_cap,
            BoltStyle.COUNTERSUNK: core.hex_socket_countersunk,
            BoltStyle.SLOTTED_COUNTERSUNK: core.slotted_countersunk,
            BoltStyle.RAISED_SLOTTED_COUNTERSUNK: core.raised_slotted_countersunk,
            BoltStyle.PHILLIPS_CHEESE_HEAD: core.phillips_cheese_head,
            BoltStyle.PHILLIPS_COUNTERSUNK: core.phillips_countersunk,
            BoltStyle.RAISED_PHILLIPS_COUNTERSUNK: partial(core.phillips_countersunk, raised=True),
            BoltStyle.TORX_COUNTERSUNK: core.torx_countersunk,
        }
        bolt = constructors[part.bolt_style](
            size, part.length_mm,
            unthreaded_length=part.unthreaded_length_mm,
            tolerance=tolerance,
            **threading,
        )

    if part.kind == PartKind.CLEARANCE_HOLE:
        return bolt.clearance_hole(recessed_head=part.recessed_head)
    return bolt
