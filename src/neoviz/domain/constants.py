# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Visualization and impact constants.

Immutable configuration shared by the orbit estimator, the orbit
geometry, the Kepler propagator and the impact estimator.
No external dependencies — only stdlib dataclasses.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class _VisualizationConstants:
    """Scene-space scaling and orbit-synthesis heuristics."""
    AU_KM: float = 149_597_870.7            # km — astronomical unit
    EARTH_RADIUS_KM: float = 6371.0         # km — mean radius
    SCENE_SCALE: float = 2.0                # scene units — Earth radius in the scene
    VIS_SCALE: float = 0.00004              # km → scene compression for miss distances
    PERIAPSIS_OFFSET: float = 2.5           # scene units — keeps periapsis outside Earth
    DEFAULT_MISS_DISTANCE_KM: float = 1_000_000.0
    DEFAULT_VELOCITY_KM_S: float = 15.0
    ECCENTRICITY_BASE: float = 0.15
    ECCENTRICITY_VELOCITY_DIVISOR: float = 60.0  # km/s per unit eccentricity
    ECCENTRICITY_CEILING: float = 0.85
    HAZARDOUS_BASE_INCLINATION_DEG: float = 5.0
    BASE_INCLINATION_DEG: float = 15.0
    INCLINATION_SPREAD_DEG: float = 25.0
    PERIOD_BASE_HOURS: float = 6.0
    PERIOD_HOURS_PER_SCENE_UNIT: float = 2.0
    DEFAULT_SEGMENTS: int = 256
    KEPLER_ITERATIONS: int = 10

    @property
    def KM_TO_SCENE(self) -> float:
        return self.SCENE_SCALE / self.EARTH_RADIUS_KM

    @property
    def AU_TO_SCENE(self) -> float:
        return self.AU_KM * self.KM_TO_SCENE


@dataclass(frozen=True)
class _ImpactConstants:
    """Empirical scaling coefficients for the impact estimator."""
    JOULES_PER_MEGATON: float = 4.184e15    # J per megaton of TNT
    CRATER_COEFFICIENT: float = 0.07
    CRATER_ENERGY_EXPONENT: float = 0.29
    CRATER_ANGLE_EXPONENT: float = 0.33
    MIN_CRATER_DIAMETER_KM: float = 0.01
    QUAKE_SLOPE: float = 0.67
    QUAKE_INTERCEPT: float = 5.87
    MAX_QUAKE_MAGNITUDE: float = 10.0
    FIREBALL_EXPONENT: float = 0.4
    FIREBALL_COEFFICIENT: float = 1.2       # km per Mt^0.4
    EJECTA_CRATER_RATIO: float = 2.5
    MAX_EJECTA_HEIGHT_KM: float = 100.0
    GIGATON_THRESHOLD_MT: float = 1000.0


VisualizationConstants: _VisualizationConstants = _VisualizationConstants()
ImpactConstants: _ImpactConstants = _ImpactConstants()
