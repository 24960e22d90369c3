# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Time-offset controls for orbit animation.

The animated offset is measured in hours from the present and bounded
to ±one week. During playback one real second advances the offset by
``speed`` hours; hitting a bound clamps and stops playback.
"""
import math
from dataclasses import dataclass

MAX_OFFSET_HOURS: float = 168.0
SPEED_OPTIONS: tuple[float, ...] = (0.5, 1.0, 2.0, 5.0, 10.0)
DAY_MARKERS: tuple[int, ...] = (-7, -5, -3, -1, 0, 1, 3, 5, 7)

_MINUS = "−"


@dataclass(frozen=True)
class TimelineStep:
    """Offset after one playback tick."""
    offset_hours: float
    playing: bool


def clamp_offset(hours: float, max_hours: float = MAX_OFFSET_HOURS) -> float:
    return max(-max_hours, min(max_hours, hours))


def advance_offset(
    offset_hours: float,
    elapsed_s: float,
    speed: float,
    max_hours: float = MAX_OFFSET_HOURS,
) -> TimelineStep:
    """
    Advance the offset by one playback tick.

    Args:
        offset_hours: Current offset (hours).
        elapsed_s: Real seconds since the previous tick.
        speed: Simulated hours per real second (negative plays backwards).
        max_hours: Symmetric bound on the offset.

    Returns:
        TimelineStep; ``playing`` is False once a bound is reached.
    """
    nxt = offset_hours + elapsed_s * speed
    if nxt >= max_hours:
        return TimelineStep(max_hours, False)
    if nxt <= -max_hours:
        return TimelineStep(-max_hours, False)
    return TimelineStep(nxt, True)


def format_time_offset(hours: float) -> str:
    """'+45m', '−5.5h' or '+2d 3h'."""
    abs_hours = abs(hours)
    sign = _MINUS if hours < 0 else "+"
    if abs_hours < 1:
        return f"{sign}{_round_half_up(abs_hours * 60)}m"
    if abs_hours < 24:
        return f"{sign}{abs_hours:.1f}h"
    days = int(abs_hours // 24)
    rem = _round_half_up(abs_hours % 24)
    return f"{sign}{days}d {rem}h"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def timeline_fraction(hours: float, max_hours: float = MAX_OFFSET_HOURS) -> float:
    """Slider position of the (clamped) offset, 0 at −max and 1 at +max."""
    clamped = clamp_offset(hours, max_hours)
    return (clamped + max_hours) / (max_hours * 2)
