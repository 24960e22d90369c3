# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Rotation matrices for placing orbit-plane points in the scene.

The orbit orientation is the product Rz(ascending node) · Rx(inclination)
· Rz(argument of periapsis), applied to column vectors. The order is a
scene convention shared by the orbit path and the propagated position;
changing it changes the rendered shape.

External dependency: numpy (allowed in domain layer).
"""
import math
from typing import Tuple

import numpy as np

Point3 = Tuple[float, float, float]


def rotation_x(angle_rad: float) -> np.ndarray:
    """Right-handed rotation about the X axis."""
    c = math.cos(angle_rad)
    s = math.sin(angle_rad)
    return np.array([
        [1.0, 0.0, 0.0],
        [0.0, c, -s],
        [0.0, s, c],
    ])


def rotation_z(angle_rad: float) -> np.ndarray:
    """Right-handed rotation about the Z axis."""
    c = math.cos(angle_rad)
    s = math.sin(angle_rad)
    return np.array([
        [c, -s, 0.0],
        [s, c, 0.0],
        [0.0, 0.0, 1.0],
    ])


def compose(*matrices: np.ndarray) -> np.ndarray:
    """Left-to-right matrix product: compose(A, B, C) = A @ B @ C."""
    result = np.identity(3)
    for m in matrices:
        result = result @ m
    return result


def orbit_rotation_matrix(
    ascending_node_deg: float,
    inclination_deg: float,
    arg_periapsis_deg: float,
) -> np.ndarray:
    """
    Orientation matrix taking orbit-plane coordinates into the scene frame.

    Args:
        ascending_node_deg: Longitude of the ascending node (degrees).
        inclination_deg: Inclination (degrees).
        arg_periapsis_deg: Argument of periapsis (degrees).

    Returns:
        3x3 matrix Rz(node) @ Rx(inclination) @ Rz(arg_periapsis).
    """
    return compose(
        rotation_z(math.radians(ascending_node_deg)),
        rotation_x(math.radians(inclination_deg)),
        rotation_z(math.radians(arg_periapsis_deg)),
    )


def apply_rotation(matrix: np.ndarray, point: Point3) -> Point3:
    """Rotate a single point (treated as a column vector)."""
    v = matrix @ np.array(point, dtype=float)
    return (float(v[0]), float(v[1]), float(v[2]))


def apply_rotation_many(matrix: np.ndarray, points: np.ndarray) -> list[Point3]:
    """Rotate an (N, 3) array of points; returns a list of tuples."""
    rotated = np.asarray(points, dtype=float) @ matrix.T
    return [(float(x), float(y), float(z)) for x, y, z in rotated]
