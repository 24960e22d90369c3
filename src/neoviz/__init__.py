# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
neoviz

Deterministic numerical core for near-Earth object visualization:
synthetic elliptical orbits from close-approach data, orbit path
sampling, fixed-iteration Kepler propagation, impact consequence
estimation, impact scenarios, time-offset controls and display
formatting.
"""

from neoviz.domain.constants import (
    VisualizationConstants,
    ImpactConstants,
)
from neoviz.domain.seeded_random import (
    seeded_random,
    string_hash32,
)
from neoviz.domain.rotation import (
    Point3,
    rotation_x,
    rotation_z,
    orbit_rotation_matrix,
    apply_rotation,
)
from neoviz.domain.orbit_estimation import (
    AsteroidObservation,
    OrbitalElements,
    estimate_orbit,
    parse_observation_record,
)
from neoviz.domain.orbit_geometry import (
    compute_orbit_points,
)
from neoviz.domain.propagation import (
    mean_anomaly_at,
    solve_kepler,
    eccentric_to_true_anomaly,
    get_position_at_time,
    orbit_progress,
)
from neoviz.domain.impact import (
    ImpactParameters,
    ImpactResult,
    estimate_impact,
    impact_comparison,
    format_tnt_equivalent,
)
from neoviz.domain.impact_scenarios import (
    ImpactPreset,
    ImpactLocation,
    IMPACT_PRESETS,
    IMPACT_LOCATIONS,
    DEFAULT_IMPACT_PARAMETERS,
    get_preset,
    resolve_location,
    lat_lng_to_scene,
)
from neoviz.domain.timeline import (
    MAX_OFFSET_HOURS,
    SPEED_OPTIONS,
    DAY_MARKERS,
    TimelineStep,
    clamp_offset,
    advance_offset,
    format_time_offset,
    timeline_fraction,
)
from neoviz.domain.formatting import (
    format_distance,
    format_velocity,
    risk_hex,
    risk_rgb,
    asteroid_visual_size,
)

__version__ = "0.3.0"

__all__ = [
    "VisualizationConstants",
    "ImpactConstants",
    "seeded_random",
    "string_hash32",
    "Point3",
    "rotation_x",
    "rotation_z",
    "orbit_rotation_matrix",
    "apply_rotation",
    "AsteroidObservation",
    "OrbitalElements",
    "estimate_orbit",
    "parse_observation_record",
    "compute_orbit_points",
    "mean_anomaly_at",
    "solve_kepler",
    "eccentric_to_true_anomaly",
    "get_position_at_time",
    "orbit_progress",
    "ImpactParameters",
    "ImpactResult",
    "estimate_impact",
    "impact_comparison",
    "format_tnt_equivalent",
    "ImpactPreset",
    "ImpactLocation",
    "IMPACT_PRESETS",
    "IMPACT_LOCATIONS",
    "DEFAULT_IMPACT_PARAMETERS",
    "get_preset",
    "resolve_location",
    "lat_lng_to_scene",
    "MAX_OFFSET_HOURS",
    "SPEED_OPTIONS",
    "DAY_MARKERS",
    "TimelineStep",
    "clamp_offset",
    "advance_offset",
    "format_time_offset",
    "timeline_fraction",
    "format_distance",
    "format_velocity",
    "risk_hex",
    "risk_rgb",
    "asteroid_visual_size",
]
