#!/usr/bin/env python3
"""
Scoring and Ranking
===================
Turns raw strategy output into scored CandidateName records and reduces
the aggregate candidate list to the final ranked result:

    quality gate -> dedup (first wins) -> shuffle (unless low) -> sort -> truncate

Scores are base score plus uniform variance, clamped into [0, 100] on
every path.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional

from .entropy import NameRandom
from .models import CandidateName, NameStyle, RandomnessLevel
from .quality import passes_quality_check
from .settings import get_setting

SCORE_MIN = 0.0
SCORE_MAX = 100.0

_DEFAULT_VARIANCE = {
    RandomnessLevel.LOW: 5,
    RandomnessLevel.MEDIUM: 15,
    RandomnessLevel.HIGH: 30,
}


def capitalize(text: str) -> str:
    """Uppercase the first letter only; str.capitalize would lowercase the rest."""
    return text[:1].upper() + text[1:]


def clamp_score(score: float) -> float:
    return min(SCORE_MAX, max(SCORE_MIN, score))


def variance_ceiling(randomness: RandomnessLevel) -> float:
    """Maximum random bonus added to a base score at this randomness level."""
    configured = get_setting(f"generation.variance.{randomness.value}")
    if configured is None:
        return float(_DEFAULT_VARIANCE[randomness])
    return float(configured)


class Scorer:
    """Builds scored candidates for one generation run."""

    def __init__(self, randomness: RandomnessLevel, rng: NameRandom):
        self.randomness = randomness
        self.rng = rng
        self.ceiling = variance_ceiling(randomness)

    def score(self, base: float, ceiling: Optional[float] = None) -> float:
        if ceiling is None:
            ceiling = self.ceiling
        return clamp_score(base + self.rng.random() * ceiling)

    def candidate(self, text: str, style: NameStyle, base: float,
                  ceiling: Optional[float] = None) -> CandidateName:
        return CandidateName(
            name=capitalize(text),
            style=style,
            score=self.score(base, ceiling),
        )

    def candidates(self, texts: Iterable[str], style: NameStyle, base: float,
                   ceiling: Optional[float] = None) -> List[CandidateName]:
        return [self.candidate(t, style, base, ceiling) for t in texts]


def dedupe(candidates: Iterable[CandidateName]) -> List[CandidateName]:
    """Drop repeated names (case-insensitive); the first occurrence wins."""
    unique: Dict[str, CandidateName] = {}
    for c in candidates:
        if c.key not in unique:
            unique[c.key] = c
    return list(unique.values())


def rank_candidates(
    candidates: Iterable[CandidateName],
    randomness: RandomnessLevel,
    rng: NameRandom,
    limit: Optional[int] = None,
    gate: Callable[[str], bool] = passes_quality_check,
) -> List[CandidateName]:
    """
    Filter, deduplicate and rank candidates.

    Shuffling before the stable sort only decides which equal-score names
    survive truncation; the final order is always descending score.
    """
    if limit is None:
        limit = get_setting("generation.limit", 20)

    passed = [c for c in candidates if c.name and gate(c.name)]
    unique = dedupe(passed)

    if randomness is not RandomnessLevel.LOW:
        unique = rng.shuffled(unique)

    unique.sort(key=lambda c: c.score, reverse=True)
    return unique[:limit]
