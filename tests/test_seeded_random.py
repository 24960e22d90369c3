# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for domain/seeded_random.py — stateless seeded values."""
import ast
import math

from neoviz.domain.seeded_random import seeded_random, string_hash32


def _reference_hash(text: str) -> int:
    """Independent int32 rolling hash: h = h*31 + c, two's complement."""
    units = text.encode("utf-16-le")
    h = 0
    for i in range(0, len(units), 2):
        h = (h * 31 + int.from_bytes(units[i:i + 2], "little")) & 0xFFFFFFFF
    return h - (1 << 32) if h >= (1 << 31) else h


class TestStringHash:
    def test_single_character(self):
        assert string_hash32("a") == 97

    def test_two_characters(self):
        assert string_hash32("ab") == 97 * 31 + 98

    def test_empty_string(self):
        assert string_hash32("") == 0

    def test_wraps_to_signed_32_bit(self):
        text = "3542519 (2010 PK9) long identifier string" * 4
        h = string_hash32(text)
        assert -(2 ** 31) <= h < 2 ** 31
        assert h == _reference_hash(text)

    def test_surrogate_pairs_hash_as_two_code_units(self):
        """Astral characters contribute their UTF-16 surrogate pair."""
        assert string_hash32("\U0001F600") == 0xD83D * 31 + 0xDE00


class TestSeededRandom:
    def test_in_unit_interval(self):
        for key in ("", "a", "2000433", "Apophis", "x" * 200, "éè"):
            for index in range(50):
                value = seeded_random(key, index)
                assert 0.0 <= value < 1.0, f"{key!r}/{index} -> {value}"

    def test_stable_across_calls(self):
        first = [seeded_random("3542519", i) for i in range(10)]
        second = [seeded_random("3542519", i) for i in range(10)]
        assert first == second

    def test_matches_formula(self):
        expected = math.fabs(math.sin(string_hash32("abc7"))) % 1.0
        assert seeded_random("abc", 7) == expected

    def test_empty_and_none_fall_back_to_default(self):
        assert seeded_random("", 3) == seeded_random("default", 3)
        assert seeded_random(None, 3) == seeded_random("default", 3)

    def test_indices_differ(self):
        values = {seeded_random("2000433", i) for i in range(3)}
        assert len(values) == 3

    def test_large_index(self):
        value = seeded_random("neo", 10 ** 12)
        assert 0.0 <= value < 1.0


class TestSeededRandomPurity:
    def test_module_pure(self):
        import neoviz.domain.seeded_random as mod
        source = ast.parse(open(mod.__file__).read())
        for node in ast.walk(source):
            if isinstance(node, (ast.Import, ast.ImportFrom)):
                if isinstance(node, ast.ImportFrom) and node.module:
                    top = node.module.split(".")[0]
                else:
                    for alias in node.names:
                        top = alias.name.split(".")[0]
                assert top in {"math", "__future__"}, f"Forbidden import: {top}"
