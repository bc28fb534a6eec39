"""
Tests for threadform cross-sections and derived dimensions.

Pure calculator code; no geometry is built.
"""

import math
import pytest

from screwforge.calculator import (
    Angle,
    TrapezoidalThreadform,
    KnuckleThreadform,
    SolidThreadform,
    LineSegment,
    ArcSegment,
    cross_section,
    minimum_pitch,
    knuckle_arcs_tangent,
    make_thread,
    no_thread,
    edison,
    iso_metric,
    acme,
    metric_trapezoidal,
    square,
    buttress,
)
from screwforge.calculator.constants import THREAD_ROOT_INSET_MM
from screwforge.enums import Handedness


def _knuckle_spec(crest_radius, root_radius):
    """E27 dimensions with arbitrary arc radii."""
    return make_thread(
        Handedness.RIGHT, 1, 3.62, 27.0, 24.5,
        KnuckleThreadform(crest_radius, root_radius),
    )


class TestTrapezoidalForm:

    def test_symmetric_halves_included_angle(self):
        form = TrapezoidalThreadform.symmetric(Angle.from_degrees(60), 0.125)
        assert form.leading_flank_angle.degrees == pytest.approx(30.0)
        assert form.trailing_flank_angle.degrees == pytest.approx(30.0)

    def test_flank_angle_must_be_angle(self):
        with pytest.raises(TypeError):
            TrapezoidalThreadform(30, 30, 0.1)

    def test_flank_angle_range(self):
        with pytest.raises(ValueError):
            TrapezoidalThreadform(Angle.from_degrees(90), Angle.from_degrees(30), 0.1)
        with pytest.raises(ValueError):
            TrapezoidalThreadform(Angle.from_degrees(-1), Angle.from_degrees(30), 0.1)

    def test_negative_crest_width(self):
        with pytest.raises(ValueError):
            TrapezoidalThreadform.symmetric(Angle.from_degrees(60), -0.1)

    def test_v_thread_diameter_ordering(self, v_thread_6x1):
        """minor < pitch diameter < major for a 60° V-thread."""
        spec = v_thread_6x1
        assert spec.minor_diameter < spec.pitch_diameter < spec.major_diameter

    def test_v_thread_pitch_diameter_matches_iso(self, v_thread_6x1):
        """ISO 724: d2 = d - 0.6495 P."""
        assert v_thread_6x1.pitch_diameter == pytest.approx(6.0 - 0.649519, abs=1e-4)

    def test_v_thread_minimum_pitch(self, v_thread_6x1):
        """crest + depth × (tan 30° + tan 30°)."""
        depth = v_thread_6x1.depth
        expected = 0.125 + depth * 2 * math.tan(math.radians(30))
        assert minimum_pitch(v_thread_6x1.form, v_thread_6x1) == pytest.approx(expected)
        assert v_thread_6x1.minimum_pitch == pytest.approx(0.75, abs=1e-4)

    def test_section_has_three_lines(self, v_thread_6x1):
        profile = cross_section(v_thread_6x1.form, v_thread_6x1)
        assert profile.line_count == 3
        assert profile.arc_count == 0

    def test_zero_crest_width_drops_crest_flat(self):
        spec = make_thread(
            Handedness.RIGHT, 1, 1.0, 6.0, 5.0,
            TrapezoidalThreadform.symmetric(Angle.from_degrees(60), 0.0),
        )
        profile = cross_section(spec.form, spec)
        assert profile.line_count == 2

    def test_section_bounds(self, v_thread_6x1):
        """Radial extent from just below the root to the crest, within one pitch."""
        profile = cross_section(v_thread_6x1.form, v_thread_6x1)
        (min_x, min_y), (max_x, max_y) = profile.bounds()
        assert min_x == pytest.approx(-THREAD_ROOT_INSET_MM)
        assert max_x == pytest.approx(v_thread_6x1.depth)
        assert max_y - min_y < v_thread_6x1.pitch
        assert min_y == pytest.approx(-max_y)

    def test_crest_is_centred(self, v_thread_6x1):
        profile = cross_section(v_thread_6x1.form, v_thread_6x1)
        crest = [p for p in profile.points() if p[0] == pytest.approx(v_thread_6x1.depth)]
        assert len(crest) == 2
        assert sorted(y for _, y in crest) == pytest.approx([-0.0625, 0.0625])

    def test_buttress_is_asymmetric(self):
        spec = buttress(20.0, 2.0)
        profile = cross_section(spec.form, spec)
        (_, min_y), (_, max_y) = profile.bounds()
        # Steep leading flank, shallow trailing flank
        assert abs(min_y) < abs(max_y)

    def test_square_pitch_diameter_is_mean(self):
        spec = square(20.0, 4.0)
        assert spec.pitch_diameter == pytest.approx((20.0 + 16.0) / 2)

    def test_metric_trapezoidal_pitch_diameter(self):
        """ISO 2904: d2 = d - 0.5 P."""
        spec = metric_trapezoidal(16.0, 4.0)
        assert spec.pitch_diameter == pytest.approx(14.0, abs=0.01)

    def test_acme_minor_diameter(self):
        spec = acme(12.7, 2.54)
        assert spec.minor_diameter == pytest.approx(12.7 - 2.54)
        assert spec.minimum_pitch < spec.pitch


class TestKnuckleForm:

    def test_radii_must_be_positive(self):
        with pytest.raises(ValueError):
            KnuckleThreadform(0.0, 1.0)

    def test_edison_is_exactly_tangent(self, e27):
        assert knuckle_arcs_tangent(e27.form, e27)

    def test_tangent_profile_has_no_flanks(self, e27):
        """Arcs meeting at exact tangency leave no straight flank segments."""
        profile = cross_section(e27.form, e27)
        assert profile.line_count == 0
        assert profile.arc_count == 3

    def test_separated_arcs_get_flanks(self):
        spec = _knuckle_spec(0.95, 0.3)
        assert not knuckle_arcs_tangent(spec.form, spec)
        profile = cross_section(spec.form, spec)
        assert profile.line_count == 2
        assert profile.arc_count == 3

    def test_overlapping_arcs_treated_as_tangent(self):
        spec = _knuckle_spec(1.0, 1.0)
        assert knuckle_arcs_tangent(spec.form, spec)
        assert cross_section(spec.form, spec).line_count == 0

    @pytest.mark.parametrize("radii", [(0.95, 0.3), (1.0, 0.2)])
    def test_flanks_connect_arcs(self, radii):
        spec = _knuckle_spec(*radii)
        segments = cross_section(spec.form, spec).segments
        for before, line, after in zip(segments, segments[1:], segments[2:]):
            if isinstance(line, LineSegment):
                assert line.start == pytest.approx(before.end)
                assert line.end == pytest.approx(after.start)

    def test_profile_spans_one_pitch(self, e27):
        profile = cross_section(e27.form, e27)
        (min_x, min_y), (max_x, max_y) = profile.bounds()
        assert min_y == pytest.approx(-e27.pitch / 2)
        assert max_y == pytest.approx(e27.pitch / 2)
        assert max_x == pytest.approx(e27.depth, abs=1e-3)
        assert min_x == pytest.approx(0.0, abs=1e-9)

    def test_arcs_run_root_crest_root(self, e27):
        arcs = [s for s in cross_section(e27.form, e27).segments if isinstance(s, ArcSegment)]
        assert [a.clockwise for a in arcs] == [True, False, True]
        assert arcs[1].center[0] == pytest.approx(e27.depth - e27.form.crest_radius)

    def test_knuckle_has_no_minimum_pitch(self, e27):
        assert e27.minimum_pitch == 0.0

    def test_pitch_diameter_between_minor_and_major(self, e27):
        assert e27.minor_diameter < e27.pitch_diameter < e27.major_diameter

    def test_edison_e27_catalog_values(self):
        spec = edison("E27")
        assert spec.major_diameter == 27.0
        assert spec.pitch == pytest.approx(3.62)


class TestSolidForm:

    def test_section_is_full_pitch_rectangle(self):
        spec = no_thread(5.0)
        profile = cross_section(spec.form, spec)
        (min_x, min_y), (max_x, max_y) = profile.bounds()
        assert profile.line_count == 3
        assert max_y - min_y == pytest.approx(spec.pitch)
        assert max_x == 0.0

    def test_solid_pitch_diameter_is_major(self):
        spec = no_thread(5.0)
        assert spec.pitch_diameter == 5.0
        assert isinstance(spec.form, SolidThreadform)


class TestDispatch:

    def test_unknown_form(self, m8):
        with pytest.raises(TypeError):
            cross_section(object(), m8)
        with pytest.raises(TypeError):
            minimum_pitch("V", m8)

    def test_iso_metric_section(self):
        spec = iso_metric("M8")
        profile = cross_section(spec.form, spec)
        assert profile.points()[0] == profile.start
