"""
Tests for the IO module - parts file loading and part construction.
"""

import json
import pytest
from pathlib import Path
from pydantic import ValidationError

from screwforge.calculator import CatalogError
from screwforge.enums import (
    Handedness,
    LeadInSide,
    PartKind,
    BoltStyle,
    WasherSeries,
    SetScrewPoint,
)
from screwforge.io import (
    SCHEMA_VERSION,
    PartSpec,
    PartsFile,
    load_parts_json,
    save_parts_json,
    thread_from_spec,
    part_from_spec,
)


class TestLoadPartsJson:
    """Tests for load_parts_json function."""

    def test_load_valid_file(self, parts_file):
        loaded = load_parts_json(parts_file)

        assert isinstance(loaded, PartsFile)
        assert [p.name for p in loaded.parts] == ["rod", "lead_screw", "cap_screw", "nut", "washer"]

    def test_enums_coerced(self, parts_file):
        parts = {p.name: p for p in load_parts_json(parts_file).parts}

        assert parts["rod"].kind == PartKind.THREAD
        assert parts["rod"].lead_in == LeadInSide.BOTH
        assert parts["lead_screw"].handedness == Handedness.LEFT
        assert parts["cap_screw"].bolt_style == BoltStyle.SOCKET_HEAD_CAP
        assert parts["washer"].washer_series == WasherSeries.LARGE

    def test_defaults(self, parts_file):
        nut = load_parts_json(parts_file).parts[3]

        assert nut.starts == 1
        assert nut.handedness is None
        assert nut.length_mm is None
        assert nut.lead_in == LeadInSide.NONE

    def test_tolerance_per_part(self, parts_file):
        loaded = load_parts_json(parts_file)
        rod, _, cap_screw = loaded.parts[:3]

        assert loaded.tolerance_for(rod) == 0.1
        assert loaded.tolerance_for(cap_screw) == 0.0

    def test_file_not_found(self):
        with pytest.raises(FileNotFoundError):
            load_parts_json("nonexistent.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("not valid json {")
        with pytest.raises(json.JSONDecodeError):
            load_parts_json(path)

    def test_bare_list(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text(json.dumps([{"name": "n", "kind": "nut", "thread": "M5"}]))

        loaded = load_parts_json(path)
        assert loaded.schema_version == SCHEMA_VERSION
        assert loaded.parts[0].kind == PartKind.NUT

    def test_missing_length(self, tmp_path):
        path = tmp_path / "bolt.json"
        path.write_text(json.dumps({"parts": [{"name": "b", "kind": "bolt", "thread": "M5"}]}))

        with pytest.raises(ValueError, match="length_mm"):
            load_parts_json(path)

    def test_string_path(self, parts_file):
        assert len(load_parts_json(str(parts_file)).parts) == 5


class TestPartSpec:

    def test_thread_required(self):
        with pytest.raises(ValidationError):
            PartSpec(name="x")

    def test_unknown_kind(self):
        with pytest.raises(ValidationError):
            PartSpec(name="x", thread="M5", kind="spring")

    @pytest.mark.parametrize("value, expected", [
        ("lh", Handedness.LEFT),
        ("RH", Handedness.RIGHT),
        ("Left", Handedness.LEFT),
        (Handedness.RIGHT, Handedness.RIGHT),
    ])
    def test_handedness_aliases(self, value, expected):
        assert PartSpec(name="x", thread="M5", handedness=value).handedness == expected

    def test_dashed_enum_values(self):
        part = PartSpec(name="x", thread="M5", kind="threaded-hole", set_screw_point="DOG")
        assert part.kind == PartKind.THREADED_HOLE
        assert part.set_screw_point == SetScrewPoint.DOG

    def test_extra_fields_ignored(self):
        part = PartSpec(name="x", thread="M5", colour="red")
        assert not hasattr(part, "colour")

    def test_length_must_be_positive(self):
        with pytest.raises(ValidationError):
            PartSpec(name="x", thread="M5", length_mm=0)

    def test_starts_at_least_one(self):
        with pytest.raises(ValidationError):
            PartSpec(name="x", thread="M5", starts=0)

    @pytest.mark.parametrize("kind, needs", [
        ("thread", True),
        ("bolt", True),
        ("threaded_hole", True),
        ("clearance_hole", True),
        ("nut", False),
        ("washer", False),
    ])
    def test_needs_length(self, kind, needs):
        assert PartSpec(name="x", thread="M5", kind=kind).needs_length == needs


class TestSavePartsJson:

    def test_round_trip(self, parts_file, tmp_path):
        loaded = load_parts_json(parts_file)
        out = tmp_path / "saved.json"
        save_parts_json(loaded, out)

        assert load_parts_json(out) == loaded

    def test_enums_saved_as_values(self, parts_file, tmp_path):
        out = tmp_path / "saved.json"
        save_parts_json(load_parts_json(parts_file), out)

        data = json.loads(Path(out).read_text())
        assert data["schema_version"] == SCHEMA_VERSION
        assert data["parts"][2]["bolt_style"] == "socket_head_cap"
        assert data["parts"][1]["handedness"] == "left"


class TestThreadFromSpec:

    def test_starts_and_hand(self, parts_file):
        lead_screw = load_parts_json(parts_file).parts[1]
        thread = thread_from_spec(lead_screw)

        assert thread.starts == 2
        assert thread.is_left_handed
        assert thread.lead == 8.0

    def test_hand_from_designation(self):
        assert thread_from_spec(PartSpec(name="x", thread="M8 LH")).is_left_handed

    def test_unknown_designation(self):
        with pytest.raises(CatalogError):
            thread_from_spec(PartSpec(name="x", thread="Q9"))


class TestPartFromSpec:
    """Geometry objects are created but not built."""

    def test_thread(self):
        from screwforge.core import ScrewGeometry
        geo = part_from_spec(PartSpec(name="x", thread="M8", length_mm=20, lead_in="both"), 0.1)

        assert isinstance(geo, ScrewGeometry)
        assert geo.length == 20
        assert geo.tolerance == 0.1
        assert geo.lead_ins.leading is not None and geo.lead_ins.trailing is not None

    def test_threaded_hole(self):
        from screwforge.core import ThreadedHoleGeometry
        geo = part_from_spec(PartSpec(name="x", kind="threaded_hole", thread="M5", length_mm=10))
        assert isinstance(geo, ThreadedHoleGeometry)
        assert geo.depth == 10

    def test_socket_head_bolt(self):
        from screwforge.core import BoltGeometry, CylindricalHead
        geo = part_from_spec(PartSpec(
            name="x", kind="bolt", thread="M6", length_mm=16, bolt_style="socket_head_cap",
        ))
        assert isinstance(geo, BoltGeometry)
        assert isinstance(geo.head, CylindricalHead)

    def test_left_hand_bolt(self):
        geo = part_from_spec(PartSpec(name="x", kind="bolt", thread="M6 LH", length_mm=16))
        assert geo.thread.is_left_handed

    def test_set_screw(self):
        from screwforge.core import ChamferedPoint
        geo = part_from_spec(PartSpec(
            name="x", kind="bolt", thread="M6", length_mm=8,
            bolt_style="set_screw", set_screw_point="dog",
        ))
        assert isinstance(geo.point, ChamferedPoint)
        assert geo.point.dog_point_length == 3.0

    def test_hex_nut(self):
        from screwforge.core import NutGeometry
        geo = part_from_spec(PartSpec(name="x", kind="nut", thread="M6"))
        assert isinstance(geo, NutGeometry)
        assert geo.body.sides == 6

    def test_square_nut(self):
        geo = part_from_spec(PartSpec(name="x", kind="nut", thread="M6", nut_style="square"))
        assert geo.body.sides == 4

    def test_large_washer(self):
        geo = part_from_spec(PartSpec(name="x", kind="washer", thread="M6", washer_series="large"))
        assert geo.outer_diameter == 18

    def test_clearance_hole(self):
        from screwforge.core import ClearanceHoleGeometry, Counterbore
        geo = part_from_spec(PartSpec(
            name="x", kind="clearance_hole", thread="M6", length_mm=16,
            bolt_style="socket_head_cap", recessed_head=True,
        ))
        assert isinstance(geo, ClearanceHoleGeometry)
        assert geo.depth == 16 + 6
        assert isinstance(geo.entry, Counterbore)

    def test_nut_starts(self):
        geo = part_from_spec(PartSpec(name="x", kind="nut", thread="M8", starts=2))
        assert geo.thread.starts == 2
        assert geo.thread.lead == pytest.approx(2.5)

    def test_square_nut_starts_and_hand(self):
        geo = part_from_spec(PartSpec(
            name="x", kind="nut", thread="M8", nut_style="square", starts=2, handedness="left",
        ))
        assert geo.thread.starts == 2
        assert geo.thread.is_left_handed

    @pytest.mark.parametrize("style", ["hex_head", "socket_head_cap", "set_screw", "torx_countersunk"])
    def test_bolt_starts(self, style):
        geo = part_from_spec(PartSpec(
            name="x", kind="bolt", thread="M6", length_mm=16, bolt_style=style, starts=2,
        ))
        assert geo.thread.starts == 2

    def test_clearance_hole_bolt_starts(self):
        from screwforge.core import ClearanceHoleGeometry
        geo = part_from_spec(PartSpec(
            name="x", kind="clearance_hole", thread="M6", length_mm=16, starts=2,
        ))
        assert isinstance(geo, ClearanceHoleGeometry)

    def test_washer_rejects_starts(self):
        with pytest.raises(ValueError):
            part_from_spec(PartSpec(name="x", kind="washer", thread="M6", starts=2))

    @pytest.mark.parametrize("style, socket_type", [
        ("phillips_cheese_head", "PhillipsSocket"),
        ("phillips_countersunk", "PhillipsSocket"),
        ("raised_phillips_countersunk", "PhillipsSocket"),
        ("torx_countersunk", "TorxSocket"),
        ("raised_slotted_countersunk", "SlottedSocket"),
    ])
    def test_drive_styles(self, style, socket_type):
        from screwforge import core
        geo = part_from_spec(PartSpec(name="x", kind="bolt", thread="M5", length_mm=12, bolt_style=style))
        assert isinstance(geo.socket, getattr(core, socket_type))

    def test_raised_styles_carry_lens(self):
        raised = part_from_spec(PartSpec(
            name="x", kind="bolt", thread="M6", length_mm=16, bolt_style="raised_phillips_countersunk",
        ))
        plain = part_from_spec(PartSpec(
            name="x", kind="bolt", thread="M6", length_mm=16, bolt_style="phillips_countersunk",
        ))
        assert raised.head.lens_height == pytest.approx(1.5)
        assert plain.head.lens_height == 0.0

    def test_flanged_hex_nut(self):
        from screwforge.core import FlangedNutBody
        geo = part_from_spec(PartSpec(name="x", kind="nut", thread="M8", nut_style="flanged-hex"))
        assert isinstance(geo.body, FlangedNutBody)

    def test_t_slot_nut(self):
        from screwforge.core import TSlotNutBody
        geo = part_from_spec(PartSpec(name="x", kind="nut", thread="M6 LH", nut_style="t_slot"))
        assert isinstance(geo.body, TSlotNutBody)
        assert geo.thread.is_left_handed

    def test_unknown_fastener_size(self):
        with pytest.raises(CatalogError):
            part_from_spec(PartSpec(name="x", kind="nut", thread="M1"))
