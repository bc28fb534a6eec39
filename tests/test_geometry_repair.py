"""
Unit tests for geometry repair and boolean helpers.
"""

import math
import pytest

from build123d import Part, Cylinder, Box, Pos

from screwforge.core.geometry_repair import repair_geometry, largest_solid
from screwforge.core.booleans import fuse, cut, common, fuse_all, clip_z

pytestmark = pytest.mark.slow


class TestRepairGeometry:
    """Tests for repair_geometry()."""

    def test_valid_part_returned_unchanged(self):
        """A valid Part is returned as-is without running any strategy."""
        cyl = Cylinder(radius=10, height=20)
        assert cyl.is_valid

        assert repair_geometry(cyl) is cyl

    def test_returns_part_on_any_input(self):
        box = Box(5, 5, 5)
        result = repair_geometry(box)
        assert result.volume == pytest.approx(125.0)


class TestLargestSolid:

    def test_single_solid(self):
        result = largest_solid(Box(4, 4, 4))
        assert result.volume == pytest.approx(64.0)

    def test_keeps_largest(self):
        parts = fuse(Box(10, 10, 10), Pos(20, 0, 0) * Box(2, 2, 2))
        assert len(parts.solids()) == 2

        assert largest_solid(parts).volume == pytest.approx(1000.0)

    def test_passes_through_non_shapes(self):
        assert largest_solid(None) is None


class TestBooleans:

    def test_fuse_overlapping(self):
        result = fuse(Box(10, 10, 10), Pos(5, 0, 0) * Box(10, 10, 10))
        assert isinstance(result, Part)
        assert result.volume == pytest.approx(1500.0)

    def test_cut(self):
        result = cut(Box(10, 10, 10), Pos(5, 0, 0) * Box(10, 10, 10))
        assert result.volume == pytest.approx(500.0)

    def test_common(self):
        result = common(Box(10, 10, 10), Pos(5, 0, 0) * Box(10, 10, 10))
        assert result.volume == pytest.approx(500.0)

    def test_fuse_all_skips_none(self):
        result = fuse_all([None, Box(2, 2, 2), None, Pos(0, 0, 2) * Box(2, 2, 2)])
        assert result.volume == pytest.approx(16.0)

    def test_fuse_all_empty(self):
        assert fuse_all([]) is None
        assert fuse_all([None]) is None

    def test_clip_z(self):
        cyl = Cylinder(radius=5, height=20)
        result = clip_z(cyl, -2.0, 3.0, 5.0)
        assert result.volume == pytest.approx(math.pi * 25 * 5, rel=1e-4)
        bbox = result.bounding_box()
        assert bbox.min.Z == pytest.approx(-2.0, abs=0.01)
        assert bbox.max.Z == pytest.approx(3.0, abs=0.01)
