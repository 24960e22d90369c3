# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Orbit path sampling.

Samples an ellipse with one focus (Earth) at the origin and rotates it
into the scene frame. The propagator places bodies on the same ellipse
through plane_point_to_scene, so path and position always agree.

External dependency: numpy (allowed in domain layer).
"""
import math

import numpy as np

from .constants import VisualizationConstants
from .orbit_estimation import OrbitalElements
from .rotation import Point3, apply_rotation, apply_rotation_many, orbit_rotation_matrix


def elements_rotation(elements: OrbitalElements) -> np.ndarray:
    """Scene orientation matrix for a set of elements."""
    return orbit_rotation_matrix(
        elements.ascending_node_deg,
        elements.inclination_deg,
        elements.arg_periapsis_deg,
    )


def plane_point_to_scene(elements: OrbitalElements, angle_rad: float) -> Point3:
    """
    Point on the orbit at a given angle, rotated into the scene frame.

    In the orbit plane: x = a·cos(θ) − a·e, y = b·sin(θ), z = 0.
    """
    a = elements.semi_major_axis
    x = a * math.cos(angle_rad) - elements.focus_offset
    y = elements.semi_minor_axis * math.sin(angle_rad)
    return apply_rotation(elements_rotation(elements), (x, y, 0.0))


def compute_orbit_points(
    elements: OrbitalElements,
    segments: int = VisualizationConstants.DEFAULT_SEGMENTS,
) -> list[Point3]:
    """
    Sample a closed orbit polyline.

    Args:
        elements: Orbital elements in scene units.
        segments: Number of equal angular steps over one revolution.

    Returns:
        segments + 1 points; the last point repeats the first.

    Raises:
        ValueError: If segments < 1.
    """
    if segments < 1:
        raise ValueError(f"segments must be >= 1, got {segments}")

    a = elements.semi_major_axis
    b = elements.semi_minor_axis
    c = elements.focus_offset

    theta = (np.arange(segments) / segments) * math.pi * 2
    local = np.column_stack([
        a * np.cos(theta) - c,
        b * np.sin(theta),
        np.zeros(segments),
    ])

    points = apply_rotation_many(elements_rotation(elements), local)
    points.append(points[0])
    return points
