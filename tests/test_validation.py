"""
Tests for manufacturing validation of thread specs.

No geometry building; all tests are fast.
"""

import pytest

from screwforge.calculator import (
    Angle,
    TrapezoidalThreadform,
    KnuckleThreadform,
    LeadIn,
    LeadInEnds,
    Severity,
    make_thread,
    validate_thread,
)
from screwforge.enums import Handedness


def _codes(result):
    return [m.code for m in result.messages]


class TestCleanThreads:

    def test_m8_clean(self, m8):
        result = validate_thread(m8, 20.0, LeadInEnds.both())
        assert result.valid
        assert result.errors == []
        assert result.warnings == []

    def test_edison_clean(self, e27):
        result = validate_thread(e27, 20.0)
        assert result.valid
        assert result.warnings == []


class TestProfileRules:

    def test_pitch_near_minimum(self):
        """0.76mm pitch is within 5% of the 0.75mm minimum."""
        spec = make_thread(
            Handedness.RIGHT, 1, 0.76, 6.0, 6.0 - 1.082532,
            TrapezoidalThreadform.symmetric(Angle.from_degrees(60), 0.125),
        )
        result = validate_thread(spec)
        assert "PITCH_NEAR_MINIMUM" in _codes(result)
        assert result.valid

    def test_shallow_thread(self):
        spec = make_thread(
            Handedness.RIGHT, 1, 1.0, 6.0, 5.9,
            TrapezoidalThreadform.symmetric(Angle.from_degrees(60), 0.1),
        )
        assert "THREAD_SHALLOW" in _codes(validate_thread(spec))

    def test_knuckle_overlap(self):
        spec = make_thread(Handedness.RIGHT, 1, 3.62, 27.0, 24.5, KnuckleThreadform(1.0, 1.0))
        result = validate_thread(spec)
        assert "KNUCKLE_ARCS_OVERLAP" in _codes(result)
        assert result.warnings[0].suggestion


class TestLengthRules:

    def test_empty_length_is_info(self, m8):
        result = validate_thread(m8, 0.0)
        assert result.valid
        assert [m.severity for m in result.messages] == [Severity.INFO]
        assert _codes(result) == ["LENGTH_EMPTY"]

    def test_shorter_than_pitch(self, m8):
        assert "LENGTH_SHORT" in _codes(validate_thread(m8, 1.0))

    def test_lead_ins_longer_than_thread(self, m8):
        """Two standard M8 lead-ins take about 1.35mm."""
        result = validate_thread(m8, 1.3, LeadInEnds.both())
        assert not result.valid
        assert "LEAD_IN_TOO_LONG" in _codes(result)

    def test_lead_ins_fit(self, m8):
        assert validate_thread(m8, 1.4, LeadInEnds.both()).valid

    def test_lead_in_deeper_than_radius(self, m8):
        result = validate_thread(m8, 20.0, LeadInEnds.leading_only(LeadIn.constant(5.0)))
        assert "LEAD_IN_TOO_DEEP" in [m.code for m in result.errors]


class TestDescriptions:

    def test_multi_start(self, m8):
        result = validate_thread(m8.with_starts(2))
        assert "MULTI_START" in [m.code for m in result.infos]

    def test_left_hand(self, m8):
        result = validate_thread(m8.with_handedness(Handedness.LEFT))
        assert "LEFT_HAND" in [m.code for m in result.infos]
        assert result.valid
