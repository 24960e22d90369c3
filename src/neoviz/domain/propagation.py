# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Kepler propagation on a synthetic orbit.

Converts a time offset to mean anomaly, solves Kepler's equation
M = E − e·sin(E) with a fixed number of Newton-Raphson steps, converts
to true anomaly and places the body on the orbit path produced by
compute_orbit_points.

The iteration count is fixed (no tolerance test) so that every call has
the same cost and bit-stable output. Ten steps are sufficient for
e <= 0.85.
No external dependencies — only stdlib math/dataclasses.
"""
import math

from .constants import VisualizationConstants
from .orbit_estimation import OrbitalElements
from .orbit_geometry import plane_point_to_scene
from .rotation import Point3

_TWO_PI = math.pi * 2


def mean_anomaly_at(elements: OrbitalElements, hours_offset: float) -> float:
    """
    Mean anomaly (radians) after ``hours_offset`` hours, in [0, 2π).

    Negative offsets move backwards along the orbit.
    """
    m = ((hours_offset / elements.period_hours) * _TWO_PI) % _TWO_PI
    # -tiny % 2π rounds up to exactly 2π
    if m >= _TWO_PI:
        m = 0.0
    return m


def solve_kepler(
    mean_anomaly: float,
    eccentricity: float,
    iterations: int = VisualizationConstants.KEPLER_ITERATIONS,
) -> float:
    """
    Eccentric anomaly E from mean anomaly M by Newton-Raphson.

    E_{k+1} = E_k − (E_k − e·sin(E_k) − M) / (1 − e·cos(E_k)), E_0 = M.

    Args:
        mean_anomaly: M (radians).
        eccentricity: e in [0, 1).
        iterations: Fixed number of Newton steps.

    Returns:
        Eccentric anomaly E (radians).
    """
    e_anom = mean_anomaly
    for _ in range(iterations):
        e_anom = e_anom - (
            (e_anom - eccentricity * math.sin(e_anom) - mean_anomaly)
            / (1.0 - eccentricity * math.cos(e_anom))
        )
    return e_anom


def eccentric_to_true_anomaly(eccentric_anomaly: float, eccentricity: float) -> float:
    """ν = 2·atan2(√(1+e)·sin(E/2), √(1−e)·cos(E/2))."""
    return 2.0 * math.atan2(
        math.sqrt(1.0 + eccentricity) * math.sin(eccentric_anomaly / 2.0),
        math.sqrt(1.0 - eccentricity) * math.cos(eccentric_anomaly / 2.0),
    )


def get_position_at_time(elements: OrbitalElements, hours_offset: float = 0.0) -> Point3:
    """
    Scene position of the body ``hours_offset`` hours from now.

    At offset 0 (and every whole period) the body is at periapsis.

    Args:
        elements: Orbital elements in scene units.
        hours_offset: Time from the present in hours; may be negative.

    Returns:
        (x, y, z) on the ellipse sampled by compute_orbit_points.
    """
    m = mean_anomaly_at(elements, hours_offset)
    e_anom = solve_kepler(m, elements.eccentricity)
    nu = eccentric_to_true_anomaly(e_anom, elements.eccentricity)
    return plane_point_to_scene(elements, nu)


def orbit_progress(elements: OrbitalElements, hours_offset: float) -> float:
    """Fraction of the current revolution completed, in [0, 1)."""
    period = elements.period_hours
    fraction = (hours_offset % period) / period
    return 0.0 if fraction >= 1.0 else fraction
