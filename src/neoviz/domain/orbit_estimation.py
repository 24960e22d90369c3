# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Synthetic orbital elements from close-approach data.

Close-approach records carry a miss distance and a relative velocity but
no Keplerian elements. This module synthesizes a plausible elliptical
orbit in scene units around a unit-scale Earth:

    periapsis = 2.5 + miss_km × VIS_SCALE
    e         = min(0.85, 0.15 + v / 60)
    a         = periapsis / (1 − e)
    P         = 6 + 2a  (hours)

Orientation angles come from a seeded hash of the object identifier so
the same object always renders the same way.
No external dependencies — only stdlib math/dataclasses/logging.
"""
import logging
import math
from dataclasses import dataclass

from .constants import VisualizationConstants
from .seeded_random import seeded_random

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AsteroidObservation:
    """Sparse close-approach observation of a near-Earth object."""
    identifier: str
    miss_distance_km: float | None = None
    relative_velocity_km_s: float | None = None
    is_potentially_hazardous: bool = False
    name: str = ""
    estimated_diameter_max_m: float | None = None

    def __post_init__(self):
        _check_optional_non_negative("miss_distance_km", self.miss_distance_km)
        _check_optional_non_negative("relative_velocity_km_s", self.relative_velocity_km_s)
        _check_optional_non_negative("estimated_diameter_max_m", self.estimated_diameter_max_m)

    @property
    def display_name(self) -> str:
        return self.name or self.identifier

    @property
    def effective_miss_distance_km(self) -> float:
        """Miss distance used for the orbit; None or zero means the default."""
        return self.miss_distance_km or VisualizationConstants.DEFAULT_MISS_DISTANCE_KM

    @property
    def effective_velocity_km_s(self) -> float:
        """Relative velocity used for the orbit; None or zero means the default."""
        return self.relative_velocity_km_s or VisualizationConstants.DEFAULT_VELOCITY_KM_S


@dataclass(frozen=True)
class OrbitalElements:
    """Synthetic elliptical orbit in scene units."""
    semi_major_axis: float
    eccentricity: float
    inclination_deg: float
    ascending_node_deg: float
    arg_periapsis_deg: float
    period_hours: float

    def __post_init__(self):
        if not self.semi_major_axis > 0:
            raise ValueError(f"semi_major_axis must be positive, got {self.semi_major_axis}")
        if not 0.0 <= self.eccentricity < 1.0:
            raise ValueError(f"eccentricity must be in [0, 1), got {self.eccentricity}")
        if not self.period_hours > 0:
            raise ValueError(f"period_hours must be positive, got {self.period_hours}")

    @property
    def semi_minor_axis(self) -> float:
        return self.semi_major_axis * math.sqrt(1.0 - self.eccentricity ** 2)

    @property
    def focus_offset(self) -> float:
        """Distance from the ellipse centre to the focus (Earth)."""
        return self.semi_major_axis * self.eccentricity

    @property
    def periapsis(self) -> float:
        return self.semi_major_axis * (1.0 - self.eccentricity)

    @property
    def apoapsis(self) -> float:
        return self.semi_major_axis * (1.0 + self.eccentricity)


def _check_optional_non_negative(field_name: str, value: float | None) -> None:
    if value is None:
        return
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"{field_name} must be a non-negative finite number, got {value}")


def estimate_orbit(observation: AsteroidObservation) -> OrbitalElements:
    """
    Build synthetic orbital elements from a close-approach observation.

    Missing (None or zero) miss distance and velocity fall back to
    1,000,000 km and 15 km/s. Eccentricity saturates at 0.85, which is
    reached at 42 km/s.

    Args:
        observation: Close-approach data for one object.

    Returns:
        OrbitalElements in scene units. Identical input gives bit-identical
        output.
    """
    c = VisualizationConstants

    miss_km = observation.effective_miss_distance_km
    if not observation.miss_distance_km:
        logger.debug(
            "%s: no miss distance, using default %.0f km",
            observation.identifier, c.DEFAULT_MISS_DISTANCE_KM,
        )

    velocity = observation.effective_velocity_km_s
    if not observation.relative_velocity_km_s:
        logger.debug(
            "%s: no relative velocity, using default %.1f km/s",
            observation.identifier, c.DEFAULT_VELOCITY_KM_S,
        )

    periapsis = c.PERIAPSIS_OFFSET + miss_km * c.VIS_SCALE

    raw_e = c.ECCENTRICITY_BASE + velocity / c.ECCENTRICITY_VELOCITY_DIVISOR
    eccentricity = min(c.ECCENTRICITY_CEILING, raw_e)
    if raw_e > c.ECCENTRICITY_CEILING:
        logger.debug(
            "%s: eccentricity %.3f saturated at %.2f (v=%.2f km/s)",
            observation.identifier, raw_e, c.ECCENTRICITY_CEILING, velocity,
        )

    semi_major = periapsis / (1.0 - eccentricity)

    key = observation.identifier
    base_inclination = (
        c.HAZARDOUS_BASE_INCLINATION_DEG
        if observation.is_potentially_hazardous
        else c.BASE_INCLINATION_DEG
    )
    inclination = base_inclination + seeded_random(key, 0) * c.INCLINATION_SPREAD_DEG
    ascending_node = seeded_random(key, 1) * 360.0
    arg_periapsis = seeded_random(key, 2) * 360.0

    period_hours = c.PERIOD_BASE_HOURS + semi_major * c.PERIOD_HOURS_PER_SCENE_UNIT

    return OrbitalElements(
        semi_major_axis=semi_major,
        eccentricity=eccentricity,
        inclination_deg=inclination,
        ascending_node_deg=ascending_node,
        arg_periapsis_deg=arg_periapsis,
        period_hours=period_hours,
    )


def parse_observation_record(record: dict) -> AsteroidObservation:
    """
    Parse an asteroid record into an AsteroidObservation.

    Accepts the flattened application record (``missDistanceKm``,
    ``relativeVelocityKmS``, ``isPotentiallyHazardous``,
    ``estimatedDiameterMax``) or a raw NASA NeoWs record, where the
    close-approach figures live in the first ``close_approach_data``
    entry as strings.

    Args:
        record: Dict decoded from JSON.

    Returns:
        AsteroidObservation domain object.

    Raises:
        KeyError: If the record has no identifier.
        ValueError: If the record is not an object, or a numeric field
            cannot be parsed or is negative.
    """
    if not isinstance(record, dict):
        raise ValueError(f"record must be a JSON object, got {type(record).__name__}")
    identifier = record.get("neo_reference_id") or record.get("id")
    if not identifier:
        raise KeyError("record has no 'neo_reference_id' or 'id'")

    if "close_approach_data" in record or "is_potentially_hazardous_asteroid" in record:
        approaches = record.get("close_approach_data") or [{}]
        approach = approaches[0] or {}
        miss_km = _parse_number((approach.get("miss_distance") or {}).get("kilometers"))
        velocity = _parse_number(
            (approach.get("relative_velocity") or {}).get("kilometers_per_second")
        )
        hazardous = bool(record.get("is_potentially_hazardous_asteroid", False))
        sizes = (record.get("estimated_diameter") or {}).get("meters") or {}
        diameter = _parse_number(sizes.get("estimated_diameter_max"))
    else:
        miss_km = _parse_number(record.get("missDistanceKm"))
        velocity = _parse_number(record.get("relativeVelocityKmS"))
        hazardous = bool(record.get("isPotentiallyHazardous", False))
        diameter = _parse_number(record.get("estimatedDiameterMax"))

    return AsteroidObservation(
        identifier=str(identifier),
        miss_distance_km=miss_km,
        relative_velocity_km_s=velocity,
        is_potentially_hazardous=hazardous,
        name=str(record.get("name") or ""),
        estimated_diameter_max_m=diameter,
    )


def _parse_number(value) -> float | None:
    """Parse a JSON number or numeric string; None passes through."""
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"not a number: {value!r}") from e
