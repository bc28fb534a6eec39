"""
Tests for threaded solid generation.

These tests require geometry building (slow). Threads are checked through
XY cross-sections: crest and root radii, and where the crests sit.
"""

import math
import pytest

from screwforge.calculator import (
    Angle,
    LeadIn,
    LeadInEnds,
    iso_metric,
    edison,
    metric_trapezoidal,
    no_thread,
)
from screwforge.core import ThreadedSolid, ScrewGeometry, thread_solid
from screwforge.enums import Handedness, Operation
from tests.helpers.geometry_sampling import (
    measure_radial_profile,
    crest_angles,
    angle_difference,
)

pytestmark = pytest.mark.slow


class TestEmptyLengths:

    @pytest.mark.parametrize("length", [0.0, -5.0])
    def test_no_geometry(self, m8, length):
        result = thread_solid(m8, length)
        assert isinstance(result, ThreadedSolid)
        assert result.is_empty
        assert result.part is None
        assert result.thread is m8

    def test_screw_geometry_rejects_empty(self, m8):
        with pytest.raises(ValueError):
            ScrewGeometry(m8, 0.0)


class TestM8Rod:
    """A 20mm M8 thread: major diameter 8, one crest per section."""

    def test_valid_solid(self, built_m8_rod):
        assert built_m8_rod.part.is_valid
        assert len(built_m8_rod.part.solids()) == 1

    def test_tagged_with_spec(self, built_m8_rod, m8):
        assert built_m8_rod.thread == m8
        assert built_m8_rod.part.label == "M8"

    def test_outer_diameter(self, built_m8_rod):
        profile = measure_radial_profile(built_m8_rod.part, 10.0)
        assert 2 * profile["max_radius"] == pytest.approx(8.0, abs=0.05)

    def test_root_diameter(self, built_m8_rod, m8):
        profile = measure_radial_profile(built_m8_rod.part, 10.0)
        assert 2 * profile["min_radius"] == pytest.approx(m8.minor_diameter, abs=0.1)

    def test_axial_extent(self, built_m8_rod):
        part = built_m8_rod.part
        assert measure_radial_profile(part, 0.05)["points"]
        assert measure_radial_profile(part, 19.95)["points"]
        assert not measure_radial_profile(part, -0.05)["points"]
        assert not measure_radial_profile(part, 20.05)["points"]

    def test_volume_between_core_and_envelope(self, built_m8_rod, m8):
        volume = built_m8_rod.part.volume
        assert math.pi * (m8.minor_diameter / 2) ** 2 * 20 < volume < math.pi * 4 ** 2 * 20

    @pytest.mark.parametrize("z", [3.0, 10.0, 16.5])
    def test_one_ridge_per_section(self, built_m8_rod, m8, z):
        assert len(crest_angles(built_m8_rod.part, z, 4.0, m8.depth)) == 1

    def test_right_hand_advance(self, built_m8_rod, m8):
        """A quarter pitch higher, the crest has turned +90° about Z."""
        a0 = crest_angles(built_m8_rod.part, 10.0, 4.0, m8.depth)[0]
        a1 = crest_angles(built_m8_rod.part, 10.0 + m8.pitch / 4, 4.0, m8.depth)[0]
        assert angle_difference(a1, a0) == pytest.approx(math.pi / 2, abs=0.2)


class TestHandedness:

    def test_left_is_mirror_of_right(self, built_short_rh_lh):
        right, left = built_short_rh_lh
        assert left.part.volume == pytest.approx(right.part.volume, rel=1e-3)

        depth = right.thread.depth
        for z in (1.0, 2.0, 3.0):
            r = crest_angles(right.part, z, 3.0, depth)[0]
            l = crest_angles(left.part, z, 3.0, depth)[0]
            # Mirroring in the YZ plane maps angle a to 180° - a
            assert angle_difference(l, math.pi - r) == pytest.approx(0.0, abs=0.1)

    def test_left_hand_advance(self, built_short_rh_lh):
        _, left = built_short_rh_lh
        depth = left.thread.depth
        a0 = crest_angles(left.part, 2.0, 3.0, depth)[0]
        a1 = crest_angles(left.part, 2.25, 3.0, depth)[0]
        assert angle_difference(a1, a0) == pytest.approx(-math.pi / 2, abs=0.2)


class TestMultiStart:

    def test_two_crests_half_a_turn_apart(self, built_two_start):
        depth = built_two_start.thread.depth
        for z in (2.0, 4.5):
            angles = crest_angles(built_two_start.part, z, 3.0, depth)
            assert len(angles) == 2
            assert abs(angle_difference(angles[0], angles[1])) == pytest.approx(math.pi, abs=0.1)

    def test_lead_is_twice_pitch(self, built_two_start):
        """One full lead higher the crests are back where they started."""
        thread = built_two_start.thread
        before = crest_angles(built_two_start.part, 2.0, 3.0, thread.depth)
        after = crest_angles(built_two_start.part, 2.0 + thread.lead, 3.0, thread.depth)
        assert len(after) == len(before)
        for a in before:
            assert min(abs(angle_difference(a, b)) for b in after) < 0.1

    def test_trapezoidal_three_start(self):
        thread = metric_trapezoidal(16.0, 4.0, starts=3)
        solid = thread_solid(thread, 6.0)
        assert len(crest_angles(solid.part, 3.0, 8.0, thread.depth)) == 3


class TestLeadIns:

    def test_lead_ins_remove_material(self, m8):
        plain = thread_solid(m8, 8.0)
        chamfered = thread_solid(m8, 8.0, LeadInEnds.both())
        assert chamfered.part.volume < plain.part.volume

    def test_leading_end_narrowed(self, m8):
        solid = thread_solid(m8, 8.0, LeadInEnds.leading_only())
        near_face = measure_radial_profile(solid.part, 0.1)
        far_end = measure_radial_profile(solid.part, 7.9)
        assert near_face["max_radius"] < 4.0 - m8.depth / 2
        assert far_end["max_radius"] == pytest.approx(4.0, abs=0.05)

    def test_trailing_end_narrowed(self, m8):
        solid = thread_solid(m8, 8.0, LeadInEnds.trailing_only())
        assert measure_radial_profile(solid.part, 7.9)["max_radius"] < 4.0 - m8.depth / 2

    def test_length_preserved(self, m8):
        solid = thread_solid(m8, 8.0, LeadInEnds.both())
        assert measure_radial_profile(solid.part, 0.05)["points"]
        assert measure_radial_profile(solid.part, 7.95)["points"]


class TestTolerance:

    def test_addition_shrinks(self, m8):
        solid = thread_solid(m8, 5.0, tolerance=0.2)
        assert solid.major_radius == pytest.approx(3.9)
        assert 2 * measure_radial_profile(solid.part, 2.5)["max_radius"] == pytest.approx(7.8, abs=0.05)

    def test_subtraction_grows(self, m8):
        solid = thread_solid(m8, 5.0, tolerance=0.2, operation=Operation.SUBTRACTION)
        assert solid.minor_radius == pytest.approx((m8.minor_diameter + 0.2) / 2)
        assert 2 * measure_radial_profile(solid.part, 2.5)["max_radius"] == pytest.approx(8.2, abs=0.05)


class TestOtherForms:

    def test_solid_form_is_cylinder(self):
        solid = thread_solid(no_thread(5.0), 10.0)
        assert solid.part.volume == pytest.approx(math.pi * 2.5 ** 2 * 10, rel=1e-3)

    def test_solid_form_ignores_depth_relative_lead_ins(self):
        """Lead-ins sized by thread depth resolve to nothing on a plain rod."""
        solid = thread_solid(no_thread(5.0), 10.0, LeadInEnds.both())
        assert solid.part.is_valid
        assert solid.part.volume == pytest.approx(math.pi * 2.5 ** 2 * 10, rel=1e-3)

    def test_solid_form_cone_angle_lead_in(self):
        solid = thread_solid(
            no_thread(5.0), 10.0, LeadInEnds.leading_only(LeadIn.angle(Angle.from_degrees(120))),
        )
        assert solid.part.volume == pytest.approx(math.pi * 2.5 ** 2 * 10, rel=1e-3)

    def test_solid_form_constant_lead_in_chamfers(self):
        solid = thread_solid(no_thread(5.0), 10.0, LeadInEnds.both(LeadIn.constant(0.5)))
        assert solid.part.is_valid
        assert solid.part.volume < math.pi * 2.5 ** 2 * 10

    def test_edison(self):
        thread = edison("E14")
        solid = thread_solid(thread, 6.0)
        profile = measure_radial_profile(solid.part, 3.0)
        assert solid.part.is_valid
        assert 2 * profile["max_radius"] == pytest.approx(14.0, abs=0.05)
        assert len(crest_angles(solid.part, 3.0, 7.0, thread.depth)) == 1

    def test_left_hand_edison(self):
        thread = edison("E14", handedness=Handedness.LEFT)
        solid = thread_solid(thread, 6.0)
        assert solid.part.is_valid


class TestScrewGeometry:

    def test_build_cached(self, m6):
        geo = ScrewGeometry(m6, 4.0, LeadInEnds.both())
        assert geo.build() is geo.build()

    def test_export_step(self, m6, tmp_path):
        geo = ScrewGeometry(m6, 4.0)
        assert geo._part is None

        step_path = tmp_path / "m6.step"
        geo.export_step(str(step_path))

        assert step_path.exists()
        assert step_path.stat().st_size > 0
        assert geo._part is not None
