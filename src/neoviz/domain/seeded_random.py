# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Deterministic seeded pseudo-random values.

Stateless: the same (key, index) pair yields the same float in every
process. Used only for cosmetic orbit orientation, never for anything
that must be unpredictable.
"""
import math

_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


def _to_int32(value: int) -> int:
    """Wrap an arbitrary integer to a signed 32-bit value."""
    value &= _INT32_MASK
    return value - 0x100000000 if value & _INT32_SIGN else value


def string_hash32(text: str) -> int:
    """
    Signed 32-bit rolling hash of a string.

    h = int32(h * 31 + c) over the UTF-16 code units of ``text``.
    """
    encoded = text.encode("utf-16-le")
    h = 0
    for i in range(0, len(encoded), 2):
        code_unit = encoded[i] | (encoded[i + 1] << 8)
        h = _to_int32((h << 5) - h + code_unit)
    return h


def seeded_random(key: str | None, index: int) -> float:
    """
    Deterministic pseudo-random float in [0, 1) from a string key and index.

    Args:
        key: Seed string (an asteroid identifier). Empty or None falls back
            to ``"default"``.
        index: Non-negative stream index; different indices give
            independent-looking values for the same key.

    Returns:
        abs(sin(hash(key + str(index)))) mod 1.
    """
    h = string_hash32((key or "default") + str(index))
    return math.fabs(math.sin(h)) % 1.0
