#!/usr/bin/env python3
"""
Quality gate for generated brand names.

Rejects candidates that are too short or long, or hard to pronounce:
no vowel, long consonant clusters, long vowel runs, or a character
repeated three times in a row. All checks are case-insensitive.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple

from .settings import get_setting


@dataclass(frozen=True)
class QualityRules:
    min_length: int = 3
    max_length: int = 14
    vowel_chars: str = "aeiouy"
    consonant_chars: str = "bcdfghjklmnpqrstvwxyz"
    max_consonant_run: int = 3
    max_vowel_run: int = 2
    max_repeat_run: int = 2

    @classmethod
    def from_settings(cls) -> "QualityRules":
        cfg = get_setting("quality_gate", {}) or {}
        defaults = cls()
        return cls(
            min_length=cfg.get("min_length", defaults.min_length),
            max_length=cfg.get("max_length", defaults.max_length),
            vowel_chars=cfg.get("vowel_chars", defaults.vowel_chars),
            consonant_chars=cfg.get("consonant_chars", defaults.consonant_chars),
            max_consonant_run=cfg.get("max_consonant_run", defaults.max_consonant_run),
            max_vowel_run=cfg.get("max_vowel_run", defaults.max_vowel_run),
            max_repeat_run=cfg.get("max_repeat_run", defaults.max_repeat_run),
        )


class QualityGate:
    """Compiled form of a QualityRules set."""

    def __init__(self, rules: QualityRules = None):
        self.rules = rules or QualityRules.from_settings()
        r = self.rules
        vowels = re.escape(r.vowel_chars)
        consonants = re.escape(r.consonant_chars)
        self._has_vowel = re.compile(f"[{vowels}]")
        self._consonant_run = re.compile(f"[{consonants}]{{{r.max_consonant_run + 1},}}")
        self._repeat_run = re.compile(f"(.)\\1{{{r.max_repeat_run},}}")
        self._vowel_run = re.compile(f"[{vowels}]{{{r.max_vowel_run + 1},}}")

    def check(self, name: str) -> Tuple[bool, str]:
        """Return (passes, reason). Reason is "ok" for passing names."""
        lower = (name or "").lower()
        r = self.rules

        if len(lower) < r.min_length:
            return False, "too_short"
        if len(lower) > r.max_length:
            return False, "too_long"
        if not self._has_vowel.search(lower):
            return False, "no_vowel"

        match = self._consonant_run.search(lower)
        if match:
            return False, f"consonant_cluster:{match.group(0)}"

        match = self._repeat_run.search(lower)
        if match:
            return False, f"repeated_char:{match.group(1)}"

        match = self._vowel_run.search(lower)
        if match:
            return False, f"vowel_run:{match.group(0)}"

        return True, "ok"

    def __call__(self, name: str) -> bool:
        return self.check(name)[0]


@lru_cache(maxsize=1)
def default_gate() -> QualityGate:
    return QualityGate()


def check_quality(name: str) -> Tuple[bool, str]:
    """Run the configured quality gate and report the first failing rule."""
    return default_gate().check(name)


def passes_quality_check(name: str) -> bool:
    """True if the name passes every quality rule."""
    return default_gate()(name)
