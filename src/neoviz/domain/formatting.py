# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Display formatting for asteroid data.

Pure formatting functions for distances, velocities, risk colours and
scene marker sizes.
No external dependencies.
"""

_RISK_HEX = {
    "high": "#ef4444",
    "moderate": "#f59e0b",
    "low": "#eab308",
}
_MINIMAL_RISK_HEX = "#22c55e"

_DEFAULT_DIAMETER_M = 100.0
_MIN_VISUAL_SIZE = 0.06
_MAX_VISUAL_SIZE = 0.25


def format_distance(km: float) -> str:
    """
    Human-readable distance.

    Returns:
        '1.23M km' from one million km, '12.3K km' from one thousand km,
        otherwise whole kilometres.
    """
    if km >= 1_000_000:
        return f"{km / 1_000_000:.2f}M km"
    if km >= 1_000:
        return f"{km / 1_000:.1f}K km"
    return f"{km:.0f} km"


def format_velocity(km_s: float) -> str:
    return f"{km_s:.2f} km/s"


def risk_hex(category: str | None) -> str:
    """Hex colour for a risk category; unknown categories render as minimal."""
    return _RISK_HEX.get(category or "", _MINIMAL_RISK_HEX)


def risk_rgb(category: str | None) -> tuple[float, float, float]:
    """Risk colour as (r, g, b) floats in [0, 1]."""
    h = risk_hex(category).lstrip("#")
    return (
        int(h[0:2], 16) / 255.0,
        int(h[2:4], 16) / 255.0,
        int(h[4:6], 16) / 255.0,
    )


def asteroid_visual_size(diameter_m: float | None) -> float:
    """Scene marker radius: diameter / 2000 clipped to [0.06, 0.25]."""
    d = diameter_m or _DEFAULT_DIAMETER_M
    return max(_MIN_VISUAL_SIZE, min(_MAX_VISUAL_SIZE, d / 2000))
