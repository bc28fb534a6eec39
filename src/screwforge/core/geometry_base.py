"""
Base class for screwforge geometry classes.

Provides the shared export and display methods used by ScrewGeometry,
BoltGeometry, NutGeometry, WasherGeometry and the hole cutters.
"""

import logging

logger = logging.getLogger(__name__)


class BaseGeometry:
    """Base class providing shared export/display methods for geometry classes.

    Subclasses must:
    - Set self._part = None in __init__
    - Implement build() -> Part
    - Set _part_name class attribute for log messages
    """

    _part_name: str = "part"

    def build(self):
        raise NotImplementedError

    def _built_part(self):
        if self._part is None:
            self.build()
        if self._part is None:
            raise ValueError(f"{self._part_name} has no geometry to export")
        return self._part

    def show(self):
        """Display in OCP viewer (requires ocp_vscode)."""
        part = self.build()
        try:
            from ocp_vscode import show as ocp_show
            ocp_show(part)
        except ImportError:
            logger.warning("ocp_vscode not installed, nothing shown")
        return part

    def export_step(self, filepath: str):
        """Export to STEP file (builds if not already built)."""
        part = self._built_part()

        logger.info(f"Exporting {self._part_name}: volume={part.volume:.2f} mm³")
        from build123d import export_step as b3d_export_step
        b3d_export_step(part, filepath)

        logger.info(f"Exported {self._part_name} to {filepath}")

    def export_stl(self, filepath: str, tolerance: float = 0.001, angular_tolerance: float = 0.1):
        """Export to STL file (builds if not already built)."""
        part = self._built_part()

        from build123d import export_stl as b3d_export_stl
        b3d_export_stl(part, filepath, tolerance=tolerance, angular_tolerance=angular_tolerance)
        logger.info(f"Exported {self._part_name} to {filepath}")

    def export_gltf(self, filepath: str, binary: bool = True):
        """Export to glTF file (builds if not already built).

        Args:
            filepath: Output path (.glb for binary, .gltf for text)
            binary: If True, export as binary .glb (default)
        """
        part = self._built_part()

        from build123d import export_gltf as b3d_export_gltf
        b3d_export_gltf(
            part, filepath, binary=binary,
            linear_deflection=0.001, angular_deflection=0.1,
        )
        logger.info(f"Exported {self._part_name} to {filepath}")
