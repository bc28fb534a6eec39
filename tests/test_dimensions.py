"""
Tests for standard fastener dimension lookups.
"""

import pytest

from screwforge.calculator import CatalogError
from screwforge.calculator.dimensions import (
    hex_nut_dimensions,
    square_nut_dimensions,
    washer_dimensions,
    hex_head_dimensions,
    socket_head_dimensions,
    countersunk_dimensions,
    slotted_countersunk_head_diameter,
    set_screw_dimensions,
    raised_countersunk_lens_height,
    phillips_cheese_head_dimensions,
    phillips_countersunk_dimensions,
    torx_countersunk_dimensions,
    flanged_hex_nut_dimensions,
    t_slot_nut_dimensions,
    phillips_recess_dimensions,
    torx_outer_diameter,
)
from screwforge.enums import PhillipsSize, TorxSize


class TestNuts:

    def test_din934(self):
        dims = hex_nut_dimensions("M8")
        assert dims.width_across_flats == 13
        assert dims.thickness == 6.5

    def test_numeric_size(self):
        assert hex_nut_dimensions(6) == hex_nut_dimensions("M6")

    def test_din934_unknown(self):
        with pytest.raises(CatalogError, match="DIN 934"):
            hex_nut_dimensions("M1.6")

    def test_din557_regular(self):
        dims = square_nut_dimensions("M8")
        assert dims.width_across_flats == 13
        assert dims.thickness == 6.5

    def test_din562_thin(self):
        assert square_nut_dimensions("M8", thin=True).thickness == 4

    def test_series_gaps(self):
        """Small sizes are thin-only, large sizes regular-only."""
        with pytest.raises(CatalogError):
            square_nut_dimensions("M3")
        with pytest.raises(CatalogError):
            square_nut_dimensions("M12", thin=True)

    def test_din6923_flanged(self):
        dims = flanged_hex_nut_dimensions("M8")
        assert dims.width_across_flats == 13.0
        assert dims.flange_diameter == 15.8
        assert dims.rounding_diameter == 1.2

    def test_din508_t_slot(self):
        dims = t_slot_nut_dimensions("M10")
        assert (dims.base_width, dims.base_height, dims.neck_width) == (18, 7, 12)
        assert dims.height == 14
        assert dims.chamfer_depth == 2.5

    def test_din508_unknown(self):
        with pytest.raises(CatalogError, match="DIN 508"):
            t_slot_nut_dimensions("M3")


class TestWashers:

    def test_iso7089(self):
        dims = washer_dimensions("M8")
        assert (dims.inner_diameter, dims.outer_diameter, dims.thickness) == (8.4, 16, 1.6)

    def test_iso7093(self):
        assert washer_dimensions("M8", large=True).outer_diameter == 24

    def test_iso7093_gap(self):
        with pytest.raises(CatalogError, match="7093"):
            washer_dimensions("M2", large=True)


class TestBolts:

    def test_din931(self):
        dims = hex_head_dimensions("M8")
        assert dims.head_height == 5.3
        assert dims.width_across_flats == 13

    def test_din912(self):
        dims = socket_head_dimensions("M6")
        assert dims.head_diameter == 10.0
        assert dims.socket_width == 5

    def test_iso10642(self):
        dims = countersunk_dimensions("M8")
        assert dims.head_diameter == 15.24
        assert dims.socket_width == 5
        assert dims.socket_depth == 2.9

    def test_iso2009(self):
        assert slotted_countersunk_head_diameter("M5") == 9.2

    def test_set_screw(self):
        dims = set_screw_dimensions("M6")
        assert dims.flat_point_diameter == 4
        assert dims.dog_point_diameter == 3.7
        assert dims.socket_width == 3

    def test_set_screw_without_dog_point(self):
        assert set_screw_dimensions("M14").dog_point_diameter is None

    def test_error_lists_known_sizes(self):
        with pytest.raises(CatalogError, match="M6"):
            countersunk_dimensions("M64")

    def test_din964_lens(self):
        assert raised_countersunk_lens_height("M6") == 3.0

    def test_din964_unknown(self):
        with pytest.raises(CatalogError, match="DIN 964"):
            raised_countersunk_lens_height("M12")

    def test_din7985(self):
        dims = phillips_cheese_head_dimensions("M6")
        assert dims.head_diameter == 12
        assert dims.head_height == 4.6
        assert dims.top_radius == 12
        assert dims.phillips_size == PhillipsSize.PH3

    def test_din965(self):
        dims = phillips_countersunk_dimensions("M4")
        assert (dims.head_diameter, dims.socket_width) == (7.5, 4.4)
        assert dims.phillips_size == PhillipsSize.PH2
        assert dims.head_height is None

    def test_iso14581(self):
        dims = torx_countersunk_dimensions("M5")
        assert dims.head_diameter == 9.3
        assert dims.torx_size == TorxSize.T25

    def test_iso14581_unknown(self):
        with pytest.raises(CatalogError):
            torx_countersunk_dimensions("M1.6")


class TestDrives:

    def test_phillips_recess(self):
        dims = phillips_recess_dimensions(PhillipsSize.PH2)
        assert dims.bottom_width == 2.29
        assert dims.slot_width == 0.7

    def test_phillips_recess_by_name(self):
        assert phillips_recess_dimensions("PH1") == phillips_recess_dimensions(PhillipsSize.PH1)

    def test_every_torx_size_has_a_diameter(self):
        diameters = [torx_outer_diameter(size) for size in TorxSize]
        assert diameters == sorted(diameters)
        assert torx_outer_diameter(TorxSize.T30) == 5.6
