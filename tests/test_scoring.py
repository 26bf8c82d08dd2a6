"""
Tests for Scoring and Ranking
=============================
Tests for namesmith/scoring.py.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from namesmith.entropy import NameRandom
from namesmith.models import CandidateName, NameStyle, RandomnessLevel
from namesmith.scoring import (
    Scorer,
    capitalize,
    clamp_score,
    dedupe,
    rank_candidates,
    variance_ceiling,
)


class FixedRandom(NameRandom):
    """Random source whose draws are fixed; shuffling is a no-op."""

    def __init__(self, value: float):
        super().__init__(seed=0)
        self.value = value

    def random(self) -> float:
        return self.value

    def shuffled(self, seq):
        return list(seq)


def make(name, score, style=NameStyle.BRANDABLE):
    return CandidateName(name=name, style=style, score=score)


class TestHelpers:
    """Tests for capitalize, clamp and variance helpers."""

    def test_capitalize_first_letter_only(self):
        assert capitalize("novcloud") == "Novcloud"
        assert capitalize("Novcloud") == "Novcloud"
        assert capitalize("mcKinley") == "McKinley"
        assert capitalize("") == ""

    def test_clamp(self):
        assert clamp_score(120) == 100
        assert clamp_score(-5) == 0
        assert clamp_score(42.5) == 42.5

    @pytest.mark.parametrize("level,expected", [
        (RandomnessLevel.LOW, 5),
        (RandomnessLevel.MEDIUM, 15),
        (RandomnessLevel.HIGH, 30),
    ])
    def test_variance_ceiling(self, level, expected):
        assert variance_ceiling(level) == expected


class TestScorer:
    """Tests for Scorer."""

    def test_adds_variance(self):
        scorer = Scorer(RandomnessLevel.MEDIUM, FixedRandom(0.5))
        assert scorer.score(80) == pytest.approx(87.5)

    def test_clamps_to_100(self):
        scorer = Scorer(RandomnessLevel.HIGH, FixedRandom(0.99))
        assert scorer.score(95) == 100

    def test_explicit_ceiling(self):
        scorer = Scorer(RandomnessLevel.HIGH, FixedRandom(0.5))
        assert scorer.score(90, ceiling=10) == pytest.approx(95)

    def test_candidate_capitalized_and_tagged(self):
        scorer = Scorer(RandomnessLevel.LOW, FixedRandom(0.0))
        c = scorer.candidate("flowstack", NameStyle.COMPOUND, 85)
        assert c.name == "Flowstack"
        assert c.style is NameStyle.COMPOUND
        assert c.score == 85
        assert c.rationale is None
        assert c.availability is None
        assert c.folder_id is None

    def test_score_within_range(self):
        scorer = Scorer(RandomnessLevel.HIGH, NameRandom(seed=3))
        for _ in range(200):
            assert 60 <= scorer.score(60) <= 90


class TestDedupe:
    """Tests for dedupe."""

    def test_first_occurrence_wins(self):
        items = [make("Flowz", 80), make("Nexa", 90), make("Flowz", 99)]
        result = dedupe(items)
        assert [c.name for c in result] == ["Flowz", "Nexa"]
        assert result[0].score == 80

    def test_case_insensitive(self):
        items = [make("NovCloud", 70), make("Novcloud", 95)]
        result = dedupe(items)
        assert len(result) == 1
        assert result[0].name == "NovCloud"


class TestRankCandidates:
    """Tests for rank_candidates."""

    def test_sorted_descending(self):
        items = [make("Alpha", 70), make("Bravo", 95), make("Delta", 80)]
        result = rank_candidates(items, RandomnessLevel.MEDIUM, NameRandom(seed=1))
        assert [c.name for c in result] == ["Bravo", "Delta", "Alpha"]

    def test_quality_gate_applied(self):
        items = [make("Looop", 99), make("Bzzzzcrft", 98), make("Clovana", 50)]
        result = rank_candidates(items, RandomnessLevel.LOW, NameRandom(seed=1))
        assert [c.name for c in result] == ["Clovana"]

    def test_truncates_to_limit(self):
        items = [make(f"Nov{chr(97 + i)}ek", 50 + i) for i in range(26)]
        result = rank_candidates(items, RandomnessLevel.LOW, NameRandom(seed=1))
        assert len(result) == 20
        assert result[0].score == 75

    def test_custom_limit(self):
        items = [make("Alpha", 70), make("Bravo", 95), make("Delta", 80)]
        result = rank_candidates(items, RandomnessLevel.LOW, NameRandom(seed=1), limit=2)
        assert [c.name for c in result] == ["Bravo", "Delta"]

    def test_low_randomness_ties_keep_insertion_order(self):
        """Without a shuffle, equal scores stay in generation order (not by name)."""
        items = [make("Zeta", 90), make("Alpha", 90), make("Mira", 90)]
        result = rank_candidates(items, RandomnessLevel.LOW, NameRandom(seed=1))
        assert [c.name for c in result] == ["Zeta", "Alpha", "Mira"]

    def test_shuffle_only_affects_ties(self):
        items = [make(f"Nov{chr(97 + i)}ek", 90) for i in range(25)] + [make("Bravo", 99)]
        result = rank_candidates(items, RandomnessLevel.HIGH, NameRandom(seed=5))
        assert result[0].name == "Bravo"
        assert len(result) == 20
        scores = [c.score for c in result]
        assert scores == sorted(scores, reverse=True)

    def test_empty(self):
        assert rank_candidates([], RandomnessLevel.MEDIUM, NameRandom(seed=1)) == []

    def test_dedupe_after_gate(self):
        items = [make("Flowz", 60), make("flowz", 99)]
        result = rank_candidates(items, RandomnessLevel.LOW, NameRandom(seed=1))
        assert len(result) == 1
        assert result[0].score == 60
