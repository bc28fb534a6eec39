"""
Screwforge IO - parts files.

Example:
    >>> from screwforge.io import PartsFile, PartSpec, save_parts_json, load_parts_json
    >>>
    >>> parts = PartsFile(tolerance_mm=0.2, parts=[
    ...     PartSpec(name="rod", kind="thread", thread="M8", length_mm=30, lead_in="both"),
    ...     PartSpec(name="nut", kind="nut", thread="M8"),
    ... ])
    >>> save_parts_json(parts, "parts.json")
    >>> loaded = load_parts_json("parts.json")
"""

from .loaders import (
    SCHEMA_VERSION,
    PartSpec,
    PartsFile,
    load_parts_json,
    save_parts_json,
    thread_from_spec,
    part_from_spec,
)

__all__ = [
    "SCHEMA_VERSION",
    "PartSpec",
    "PartsFile",
    "load_parts_json",
    "save_parts_json",
    "thread_from_spec",
    "part_from_spec",
]
