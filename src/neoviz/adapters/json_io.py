# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON observation reader and report writer.

Reads asteroid records from a JSON list, a single record, or a NASA
NeoWs feed response (``near_earth_objects`` keyed by date), and writes
result reports as indented JSON.
"""
import json
import logging
from typing import Any

from neoviz.domain.orbit_estimation import AsteroidObservation, parse_observation_record
from neoviz.ports import ObservationReader, ReportWriter

logger = logging.getLogger(__name__)


class JsonObservationReader(ObservationReader):
    """Reads asteroid observations from JSON files."""

    def read_observations(self, path: str) -> list[AsteroidObservation]:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
        records = self.extract_records(data)
        observations = [parse_observation_record(r) for r in records]
        logger.debug("Read %d observations from %s", len(observations), path)
        return observations

    @staticmethod
    def extract_records(data: Any) -> list[dict]:
        """Flatten the supported JSON layouts into a list of records."""
        if isinstance(data, list):
            return data
        if not isinstance(data, dict):
            raise ValueError(f"Unsupported JSON document of type {type(data).__name__}")
        feed = data.get('near_earth_objects')
        if isinstance(feed, dict):
            records: list[dict] = []
            for date in sorted(feed):
                records.extend(feed[date])
            return records
        if isinstance(feed, list):
            return feed
        return [data]


class JsonReportWriter(ReportWriter):
    """Writes result reports to JSON files."""

    def write_report(self, report: dict[str, Any], path: str) -> None:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(report, f, indent=2, ensure_ascii=False)
