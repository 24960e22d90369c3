# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Impact scenario presets and surface locations.

Reference impactors from small meteorites to the Chicxulub body, named
impact sites, and conversion of latitude/longitude to the scene frame
(Earth radius 2, Y axis through the poles).

External dependency: numpy (random site selection only).
"""
import math
from dataclasses import dataclass

import numpy as np

from .constants import VisualizationConstants
from .impact import ImpactParameters
from .rotation import Point3


@dataclass(frozen=True)
class ImpactPreset:
    """Named reference impactor."""
    name: str
    parameters: ImpactParameters
    description: str


@dataclass(frozen=True)
class ImpactLocation:
    """Named impact site. Coordinates are None for a random site."""
    name: str
    lat_deg: float | None
    lng_deg: float | None

    @property
    def is_random(self) -> bool:
        return self.lat_deg is None or self.lng_deg is None


DEFAULT_IMPACT_PARAMETERS = ImpactParameters(
    diameter_km=0.15, velocity_km_s=20.0, density_kg_m3=3000.0, angle_degs=45.0,
)

IMPACT_PRESETS: tuple[ImpactPreset, ...] = (
    ImpactPreset(
        "Small Meteorite",
        ImpactParameters(0.01, 15.0, 3500.0, 45.0),
        "House-sized rock, burns up mostly in atmosphere",
    ),
    ImpactPreset(
        "Chelyabinsk-type",
        ImpactParameters(0.02, 19.0, 3600.0, 18.0),
        "Like the 2013 Russian airburst event",
    ),
    ImpactPreset(
        "Tunguska-type",
        ImpactParameters(0.06, 15.0, 2500.0, 30.0),
        "Flattened 2,000 km² of Siberian forest in 1908",
    ),
    ImpactPreset(
        "City Killer",
        ImpactParameters(0.15, 20.0, 3000.0, 45.0),
        "Would devastate a metropolitan area",
    ),
    ImpactPreset(
        "Apophis-sized",
        ImpactParameters(0.37, 12.6, 2600.0, 45.0),
        "370 m, like asteroid 99942 Apophis",
    ),
    ImpactPreset(
        "Chicxulub Impactor",
        ImpactParameters(10.0, 20.0, 2600.0, 60.0),
        "The dinosaur killer, 66 million years ago",
    ),
)

IMPACT_LOCATIONS: tuple[ImpactLocation, ...] = (
    ImpactLocation("Atlantic Ocean", 30.0, -40.0),
    ImpactLocation("Pacific Ocean", -10.0, -160.0),
    ImpactLocation("Sahara Desert", 23.0, 10.0),
    ImpactLocation("Siberia", 62.0, 100.0),
    ImpactLocation("Amazon Rainforest", -3.0, -60.0),
    ImpactLocation("Antarctica", -80.0, 0.0),
    ImpactLocation("Random", None, None),
)

# Random sites avoid the polar caps.
_RANDOM_LAT_LIMIT_DEG = 70.0


def get_preset(name: str) -> ImpactPreset:
    """
    Look up a preset by name (case-insensitive).

    Raises:
        KeyError: If no preset has that name.
    """
    wanted = name.strip().lower()
    for preset in IMPACT_PRESETS:
        if preset.name.lower() == wanted:
            return preset
    known = ", ".join(p.name for p in IMPACT_PRESETS)
    raise KeyError(f"unknown preset {name!r} (known: {known})")


def resolve_location(
    location: ImpactLocation,
    rng: np.random.Generator | None = None,
) -> tuple[float, float]:
    """
    Latitude/longitude for a site, drawing one for the Random entry.

    Args:
        location: Impact site.
        rng: Random generator for random sites; a fresh default_rng()
            when omitted.

    Returns:
        (lat_deg, lng_deg). Random sites have lat in [-70, 70) and
        lng in [-180, 180).
    """
    if not location.is_random:
        return location.lat_deg, location.lng_deg
    if rng is None:
        rng = np.random.default_rng()
    lat = float(rng.uniform(-_RANDOM_LAT_LIMIT_DEG, _RANDOM_LAT_LIMIT_DEG))
    lng = float(rng.uniform(-180.0, 180.0))
    return lat, lng


def lat_lng_to_scene(
    lat_deg: float,
    lng_deg: float,
    radius: float = VisualizationConstants.SCENE_SCALE,
) -> Point3:
    """
    Surface point in scene coordinates.

    φ = 90° − lat (polar angle from +Y), θ = lng + 180°:
        (−r·sinφ·cosθ, r·cosφ, r·sinφ·sinθ)
    """
    phi = math.radians(90.0 - lat_deg)
    theta = math.radians(lng_deg + 180.0)
    return (
        -radius * math.sin(phi) * math.cos(theta),
        radius * math.cos(phi),
        radius * math.sin(phi) * math.sin(theta),
    )
