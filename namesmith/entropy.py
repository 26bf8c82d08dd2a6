#!/usr/bin/env python3
"""
Random Source
=============
Explicit random number source threaded through every strategy and the
ranking shuffle.

Unseeded sources draw from ``secrets.SystemRandom`` so production output
varies call to call; seeded sources use ``random.Random`` for
reproducible runs in tests and from the CLI (``--seed``).
"""

import random
import secrets
from typing import Any, List, Optional, Sequence


class NameRandom:
    """Thin wrapper exposing the handful of draws the generators need."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        if seed is None:
            self._rng = secrets.SystemRandom()
        else:
            self._rng = random.Random(seed)

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self._rng.random()

    def choice(self, seq: Sequence[Any]) -> Any:
        """Return a random element from non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from empty sequence")
        return self._rng.choice(seq)

    def coin_flip(self) -> bool:
        return self._rng.random() > 0.5

    def subset(self, population: Sequence[Any], k: int) -> List[Any]:
        """Return up to k distinct elements in random order."""
        return self._rng.sample(list(population), min(k, len(population)))

    def shuffled(self, seq: Sequence[Any]) -> List[Any]:
        """Fisher-Yates shuffle into a new list."""
        items = list(seq)
        self._rng.shuffle(items)
        return items


def get_rng(seed: Optional[int] = None) -> NameRandom:
    """Create a random source, seeded when ``seed`` is given."""
    return NameRandom(seed)
