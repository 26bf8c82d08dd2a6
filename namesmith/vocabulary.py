#!/usr/bin/env python3
"""
Vocabulary Tables
=================
Typed view over ``configs/vocabulary.yaml``: stop words, suffix and prefix
lists, tech roots and the phonetic substitution rules used by the
generation strategies.

The tables are plain data so the creative range can be tuned without
touching the strategies themselves.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, FrozenSet, List, Tuple

from .settings import load_yaml_config

VOCABULARY_FILE = "vocabulary.yaml"


@dataclass(frozen=True)
class Vocabulary:
    """All word lists needed by the strategies."""
    stop_words: FrozenSet[str]
    compound_suffixes: Tuple[str, ...]
    compound_prefixes: Tuple[str, ...]
    tech_roots: Tuple[str, ...]
    brandable_suffixes: Tuple[str, ...]
    latin_prefixes: Tuple[str, ...]
    coined_vowels: Tuple[str, ...]
    coined_consonants: Tuple[str, ...]
    coined_endings: Tuple[str, ...]
    blend_words: Tuple[str, ...]
    short_chars: Tuple[str, ...]
    substitutions: Tuple[Tuple[str, str], ...]
    fallback_ending: str
    alternate_endings: Tuple[str, ...]
    stripped_vowels: str


def _require(mapping: Dict, *keys: str):
    current = mapping
    for key in keys:
        if not isinstance(current, dict) or current.get(key) is None:
            raise ValueError(f"{'.'.join(keys)} must be set in {VOCABULARY_FILE}")
        current = current[key]
    return current


def _words(mapping: Dict, *keys: str) -> Tuple[str, ...]:
    values = _require(mapping, *keys)
    if not values:
        raise ValueError(f"{'.'.join(keys)} must be set in {VOCABULARY_FILE}")
    # Unquoted "on", "true", "no" load as booleans
    bad = [v for v in values if not isinstance(v, str)]
    if bad:
        raise ValueError(f"{'.'.join(keys)} in {VOCABULARY_FILE} has non-text entries {bad!r}; quote them")
    return tuple(v.lower() for v in values)


def build_vocabulary(raw: Dict) -> Vocabulary:
    """Validate a raw vocabulary mapping and freeze it."""
    substitutions = []
    for rule in _require(raw, "alternate", "substitutions"):
        if not isinstance(rule, (list, tuple)) or len(rule) != 2:
            raise ValueError(f"alternate.substitutions entries must be [pattern, replacement]: {rule!r}")
        substitutions.append((str(rule[0]), str(rule[1])))

    return Vocabulary(
        stop_words=frozenset(_words(raw, "stop_words")),
        compound_suffixes=_words(raw, "compound_suffixes"),
        compound_prefixes=_words(raw, "compound_prefixes"),
        tech_roots=_words(raw, "tech_roots"),
        brandable_suffixes=_words(raw, "brandable_suffixes"),
        latin_prefixes=_words(raw, "latin_prefixes"),
        coined_vowels=_words(raw, "coined", "vowels"),
        coined_consonants=_words(raw, "coined", "consonants"),
        coined_endings=_words(raw, "coined", "endings"),
        blend_words=_words(raw, "blend_words"),
        short_chars=_words(raw, "short_chars"),
        substitutions=tuple(substitutions),
        fallback_ending=str(_require(raw, "alternate", "fallback_ending")),
        alternate_endings=_words(raw, "alternate", "endings"),
        stripped_vowels=str(_require(raw, "alternate", "stripped_vowels")),
    )


@lru_cache(maxsize=1)
def load_vocabulary() -> Vocabulary:
    """Load the packaged vocabulary tables."""
    return build_vocabulary(load_yaml_config(VOCABULARY_FILE))
