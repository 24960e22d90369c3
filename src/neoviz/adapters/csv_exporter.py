# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
CSV orbit exporter.

Exports sampled orbit polylines as CSV rows of scene coordinates.
External dependencies (csv, file I/O) are confined to this adapter.
"""
import csv
import logging

from neoviz.ports.export import OrbitExporter
from neoviz.domain.rotation import Point3

logger = logging.getLogger(__name__)

_HEADER = ['name', 'index', 'x', 'y', 'z']


class CsvOrbitExporter(OrbitExporter):
    """Exports orbit sample points to CSV."""

    def export(
        self,
        points: list[Point3],
        path: str,
        name: str = "",
    ) -> int:
        if not points:
            logger.warning("No orbit points to export for %r; writing header only", name)

        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(_HEADER)
            for i, (x, y, z) in enumerate(points):
                writer.writerow([
                    name,
                    i,
                    f'{x:.6f}',
                    f'{y:.6f}',
                    f'{z:.6f}',
                ])

        return len(points)

    def export_many(
        self,
        orbits: list[tuple[str, list[Point3]]],
        path: str,
    ) -> int:
        """
        Export several labelled orbits into one file; returns total rows.

        Labels need not be unique: a feed spanning several days lists the
        same object once per date, and every entry is written.
        """
        total = 0
        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(_HEADER)
            for name, points in orbits:
                if not points:
                    logger.warning("No orbit points to export for %r", name)
                for i, (x, y, z) in enumerate(points):
                    writer.writerow([name, i, f'{x:.6f}', f'{y:.6f}', f'{z:.6f}'])
                total += len(points)
        return total
