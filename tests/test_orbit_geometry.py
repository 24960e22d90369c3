# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for domain/orbit_geometry.py — closed orbit path sampling."""
import math

import numpy as np
import pytest

from neoviz.domain.orbit_estimation import AsteroidObservation, OrbitalElements, estimate_orbit
from neoviz.domain.orbit_geometry import (
    compute_orbit_points,
    elements_rotation,
    plane_point_to_scene,
)


def _ellipse_residual(elements: OrbitalElements, point) -> tuple[float, float]:
    """Undo the orientation; return (ellipse equation − 1, out-of-plane z)."""
    local = elements_rotation(elements).T @ np.array(point)
    a = elements.semi_major_axis
    b = elements.semi_minor_axis
    c = elements.focus_offset
    lhs = ((local[0] + c) / a) ** 2 + (local[1] / b) ** 2
    return float(lhs - 1.0), float(local[2])


@pytest.fixture
def elements():
    return estimate_orbit(AsteroidObservation("3542519", 2_400_000.0, 21.0, True))


class TestComputeOrbitPoints:
    def test_default_count(self, elements):
        assert len(compute_orbit_points(elements)) == 257

    @pytest.mark.parametrize("segments", [1, 3, 64, 500])
    def test_count_and_closure(self, elements, segments):
        pts = compute_orbit_points(elements, segments)
        assert len(pts) == segments + 1
        assert pts[0] == pts[segments]

    def test_points_on_ellipse(self, elements):
        for p in compute_orbit_points(elements, 128):
            residual, z = _ellipse_residual(elements, p)
            assert abs(residual) < 1e-12
            assert abs(z) < 1e-9

    def test_radius_between_apsides(self, elements):
        for p in compute_orbit_points(elements, 200):
            r = math.sqrt(p[0] ** 2 + p[1] ** 2 + p[2] ** 2)
            assert elements.periapsis - 1e-9 <= r <= elements.apoapsis + 1e-9

    def test_first_point_is_periapsis(self, elements):
        p = compute_orbit_points(elements, 16)[0]
        r = math.sqrt(p[0] ** 2 + p[1] ** 2 + p[2] ** 2)
        assert r == pytest.approx(elements.periapsis, rel=1e-12)

    def test_unrotated_quarter_points(self):
        el = OrbitalElements(10.0, 0.6, 0.0, 0.0, 0.0, 26.0)
        pts = compute_orbit_points(el, 4)
        expected = [(4.0, 0.0, 0.0), (-6.0, 8.0, 0.0), (-16.0, 0.0, 0.0), (-6.0, -8.0, 0.0)]
        for p, q in zip(pts, expected):
            assert p == pytest.approx(q, abs=1e-12)

    def test_matches_plane_point_to_scene(self, elements):
        pts = compute_orbit_points(elements, 8)
        for i, p in enumerate(pts[:-1]):
            q = plane_point_to_scene(elements, i / 8 * math.pi * 2)
            assert p == pytest.approx(q, abs=1e-9)

    def test_deterministic(self, elements):
        assert compute_orbit_points(elements, 32) == compute_orbit_points(elements, 32)

    @pytest.mark.parametrize("segments", [0, -5])
    def test_invalid_segments(self, elements, segments):
        with pytest.raises(ValueError):
            compute_orbit_points(elements, segments)

    def test_inclined_orbit_leaves_plane(self):
        el = OrbitalElements(10.0, 0.3, 30.0, 0.0, 90.0, 26.0)
        zs = [p[2] for p in compute_orbit_points(el, 64)]
        assert max(zs) > 1.0
        assert min(zs) < -1.0
