"""
Pytest configuration and shared fixtures for screwforge tests.
"""

import json
import pytest


# ─── Thread specs (module-scoped for sharing) ────────────────────────────


@pytest.fixture(scope="module")
def m8():
    """Module-scoped ISO metric M8 coarse thread."""
    from screwforge.calculator import iso_metric
    return iso_metric("M8")


@pytest.fixture(scope="module")
def m6():
    """Module-scoped ISO metric M6 coarse thread."""
    from screwforge.calculator import iso_metric
    return iso_metric("M6")


@pytest.fixture(scope="module")
def v_thread_6x1():
    """60° V-thread, major 6, pitch 1, crest width 0.125."""
    return _v_thread_6x1()


@pytest.fixture(scope="module")
def e27():
    """Module-scoped Edison E27 knuckle thread."""
    from screwforge.calculator import edison
    return edison("E27")


# ─── Module-scoped built geometry ────────────────────────────────────────


@pytest.fixture(scope="module")
def built_m8_rod(m8):
    """Module-scoped 20mm M8 threaded solid, no lead-ins."""
    from screwforge.core import thread_solid
    return thread_solid(m8, 20.0)


@pytest.fixture(scope="module")
def built_short_rh_lh():
    """Module-scoped (right, left) pair of 4mm M6 threaded solids."""
    from screwforge.calculator import iso_metric
    from screwforge.core import thread_solid
    from screwforge.enums import Handedness
    right = thread_solid(iso_metric("M6"), 4.0)
    left = thread_solid(iso_metric("M6", handedness=Handedness.LEFT), 4.0)
    return right, left


@pytest.fixture(scope="module")
def built_two_start():
    """Module-scoped 8mm two-start M6 threaded solid."""
    from screwforge.calculator import iso_metric
    from screwforge.core import thread_solid
    return thread_solid(iso_metric("M6", starts=2), 8.0)


@pytest.fixture(scope="module")
def built_hex_nut_m6():
    """Module-scoped DIN 934 M6 nut."""
    from screwforge.core import hex_nut
    geo = hex_nut("M6")
    return geo, geo.build()


@pytest.fixture(scope="module")
def built_socket_cap_m5():
    """Module-scoped DIN 912 M5 x 10 socket head cap screw."""
    from screwforge.core import hex_socket_head_cap
    geo = hex_socket_head_cap("M5", 10.0)
    return geo, geo.build()


# ─── Parts files ─────────────────────────────────────────────────────────


@pytest.fixture
def parts_file(tmp_path):
    """Parts file on disk with one part of each common kind."""
    path = tmp_path / "parts.json"
    path.write_text(json.dumps(_parts_data()))
    return path


# ─── Helper functions (no pytest dependency) ──────────────────────────────


def _v_thread_6x1():
    from screwforge.calculator import Angle, TrapezoidalThreadform, make_thread
    from screwforge.enums import Handedness
    return make_thread(
        Handedness.RIGHT, 1, 1.0, 6.0, 6.0 - 1.082532,
        TrapezoidalThreadform.symmetric(Angle.from_degrees(60), 0.125),
    )


def _parts_data():
    """Return a raw parts file dict."""
    return {
        "schema_version": "1.0",
        "tolerance_mm": 0.1,
        "parts": [
            {
                "name": "rod",
                "kind": "thread",
                "thread": "M8",
                "length_mm": 20,
                "lead_in": "both",
            },
            {
                "name": "lead_screw",
                "kind": "thread",
                "thread": "Tr16x4",
                "length_mm": 40,
                "starts": 2,
                "handedness": "left",
            },
            {
                "name": "cap_screw",
                "kind": "bolt",
                "thread": "M6",
                "length_mm": 16,
                "bolt_style": "socket-head-cap",
                "tolerance_mm": 0.0,
            },
            {
                "name": "nut",
                "kind": "nut",
                "thread": "M6",
            },
            {
                "name": "washer",
                "kind": "washer",
                "thread": "M6",
                "washer_series": "large",
            },
        ],
    }
