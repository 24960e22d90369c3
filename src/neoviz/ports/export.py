# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for orbit path export.

Adapters implement this to export sampled orbit polylines in various
formats (CSV, etc.).
"""
from typing import Protocol, runtime_checkable

from neoviz.domain.rotation import Point3


@runtime_checkable
class OrbitExporter(Protocol):
    """Port for exporting a sampled orbit to file."""

    def export(
        self,
        points: list[Point3],
        path: str,
        name: str = "",
    ) -> int:
        """
        Export orbit sample points to a file.

        Args:
            points: Scene-space points from compute_orbit_points.
            path: Output file path.
            name: Object label written alongside each point.

        Returns:
            Number of points exported.
        """
        ...
