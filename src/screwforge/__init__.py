"""
Screwforge - parametric screw threads and fasteners for build123d.

Helical threads (ISO metric, unified, trapezoidal, Edison and more),
bolts, nuts, washers and hole cutters as STEP-ready solids.

Example:
    >>> from screwforge.calculator import iso_metric, LeadInEnds
    >>> from screwforge.core import thread_solid, hex_socket_head_cap
    >>>
    >>> # Bare thread
    >>> rod = thread_solid(iso_metric("M8"), length=30, lead_ins=LeadInEnds.both())
    >>>
    >>> # Standard fastener
    >>> bolt = hex_socket_head_cap("M6", length=20, tolerance=0.2)
    >>> bolt.export_step("m6x20.step")

Note: All imports are lazy-loaded for fast startup. The calculator can be
imported without triggering geometry (build123d) or IO (Pydantic) imports.
"""

__version__ = "0.1.0"

# Define which names come from which submodule
# All imports are lazy to minimize startup time

_ENUMS = {
    "Handedness",
    "Operation",
    "LeadInSide",
    "PartKind",
    "BoltStyle",
    "NutStyle",
    "SquareNutSeries",
    "WasherSeries",
    "SetScrewPoint",
    "PhillipsSize",
    "TorxSize",
}

_CALCULATOR = {
    "Angle",
    "ThreadSpec",
    "ThreadDefinitionError",
    "TrapezoidalThreadform",
    "KnuckleThreadform",
    "SolidThreadform",
    "LeadIn",
    "LeadInEnds",
    "CatalogError",
    "make_thread",
    "iso_metric",
    "edison",
    "unified_coarse",
    "parse_thread",
    "validate_thread",
}

_IO = {
    "PartSpec",
    "PartsFile",
    "load_parts_json",
    "save_parts_json",
}

_CORE = {
    "thread_solid",
    "ThreadedSolid",
    "ScrewGeometry",
    "BoltGeometry",
    "NutGeometry",
    "WasherGeometry",
    "ThreadedHoleGeometry",
    "ClearanceHoleGeometry",
    "hex_head",
    "hex_socket_head_cap",
    "hex_socket_countersunk",
    "hex_socket_set_screw",
    "slotted_countersunk",
    "raised_slotted_countersunk",
    "phillips_cheese_head",
    "phillips_countersunk",
    "torx_countersunk",
    "hex_nut",
    "square_nut",
    "flanged_hex_nut",
    "t_slot_nut",
    "iso7089",
    "iso7093",
}

# Cache for lazy-loaded modules
_modules = {}


def __getattr__(name):
    """Lazy load submodules when their attributes are accessed."""
    global _modules

    if name in _ENUMS:
        if "enums" not in _modules:
            from . import enums
            _modules["enums"] = enums
        return getattr(_modules["enums"], name)

    if name in _CALCULATOR:
        if "calculator" not in _modules:
            from . import calculator
            _modules["calculator"] = calculator
        return getattr(_modules["calculator"], name)

    if name in _IO:
        if "io" not in _modules:
            from . import io
            _modules["io"] = io
        return getattr(_modules["io"], name)

    if name in _CORE:
        if "core" not in _modules:
            from . import core
            _modules["core"] = core
        return getattr(_modules["core"], name)

    raise AttributeError(f"module 'screwforge' has no attribute {name!r}")


__all__ = ["__version__"] + sorted(_ENUMS | _CALCULATOR | _IO | _CORE)
