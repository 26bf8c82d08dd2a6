"""
Tests for Quality Gate
======================
Tests for passes_quality_check() and check_quality() in namesmith/quality.py.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from namesmith.quality import (
    QualityGate,
    QualityRules,
    check_quality,
    passes_quality_check,
)


class TestPassesQualityCheck:
    """Tests for the boolean gate."""

    @pytest.mark.parametrize("name", ["Clovana", "loop", "Flowstack", "Novcloud", "Tecstar", "Abc"])
    def test_good_names_pass(self, name):
        assert passes_quality_check(name) is True

    @pytest.mark.parametrize("name", [
        "ai",               # too short
        "aeiouaeiou",       # vowel run
        "bzzzzcrft",        # consonant cluster
        "looop",            # triple identical
        "Rhythm",           # y also counts toward consonant clusters
        "Supercalifragil",  # 15 chars
        "brr",              # no vowel
    ])
    def test_bad_names_fail(self, name):
        assert passes_quality_check(name) is False

    def test_case_insensitive(self):
        """Upper and lower case give the same verdict."""
        assert passes_quality_check("LOOOP") is False
        assert passes_quality_check("CLOVANA") is True

    def test_deterministic(self):
        """The gate is a pure function."""
        results = {passes_quality_check("Flowqx") for _ in range(10)}
        assert len(results) == 1

    def test_length_bounds_inclusive(self):
        assert passes_quality_check("abe") is True
        assert passes_quality_check("abababababab" + "ab") is True   # 14 chars
        assert passes_quality_check("abababababab" + "aba") is False  # 15 chars

    def test_y_counts_as_vowel(self):
        assert passes_quality_check("Sky") is True

    def test_consonant_cluster_limit(self):
        assert passes_quality_check("Techstar") is False  # "chst" is four
        assert passes_quality_check("Tecstar") is True

    def test_empty_string(self):
        assert passes_quality_check("") is False


class TestCheckQualityReasons:
    """Tests for the reason reported by check_quality."""

    def test_ok(self):
        assert check_quality("Clovana") == (True, "ok")

    def test_too_short(self):
        assert check_quality("ai") == (False, "too_short")

    def test_too_long(self):
        assert check_quality("a" + "bab" * 5) == (False, "too_long")

    def test_no_vowel(self):
        assert check_quality("Brr") == (False, "no_vowel")

    def test_consonant_cluster(self):
        assert check_quality("Techstar") == (False, "consonant_cluster:chst")

    def test_no_vowel_reported_before_cluster(self):
        """A vowel-less name fails on the vowel rule even with a long cluster."""
        assert check_quality("bzzzzcrft") == (False, "no_vowel")

    def test_repeated_char(self):
        assert check_quality("looop") == (False, "repeated_char:o")

    def test_vowel_run(self):
        assert check_quality("Floia") == (False, "vowel_run:oia")


class TestCustomRules:
    """Tests for gates built from custom rules."""

    def test_longer_max_length(self):
        gate = QualityGate(QualityRules(max_length=20))
        assert gate("Supercalifragil") is True

    def test_stricter_consonant_run(self):
        gate = QualityGate(QualityRules(max_consonant_run=2))
        assert gate("Tecstar") is False
        assert gate("Clovana") is True
