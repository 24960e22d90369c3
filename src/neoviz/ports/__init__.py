# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for observation input and report output.

Adapters implement these to handle different file formats.
"""
from typing import Any, Protocol, runtime_checkable

from neoviz.domain.orbit_estimation import AsteroidObservation


@runtime_checkable
class ObservationReader(Protocol):
    """Port for reading asteroid close-approach observations."""

    def read_observations(self, path: str) -> list[AsteroidObservation]:
        """Read and parse every observation in a file."""
        ...


@runtime_checkable
class ReportWriter(Protocol):
    """Port for writing computed results."""

    def write_report(self, report: dict[str, Any], path: str) -> None:
        """Write a report to an output file."""
        ...
