#!/usr/bin/env python3
"""
Generation Strategies
=====================
Independent name-construction strategies. Each one takes a root word and
returns raw (lowercase, uncapitalized) name strings; scoring and style
tagging happen in the generator.

Strategies:
- Coined: root stem + vowel/consonant/vowel, or root stem + fixed ending
- Blended: root stem fused with the stem of a tech word, either order
- Compound: root + suffix word, prefix word + root
- Alternate: vowel stripping, phonetic swaps, z/x endings
- Brandable: root + brandable suffix, Latin prefix + root
- Real word: tech-root metaphors attached to the root, or on their own
- Short: truncated root + single letter
- Cross-keyword: stems of two different roots fused together
"""

from itertools import combinations
from typing import List, Optional, Sequence, Tuple

from ..entropy import NameRandom
from ..settings import get_setting
from ..vocabulary import Vocabulary


def _half(count: int) -> int:
    # Each coined pattern gets half the budget, rounded up
    return (count + 1) // 2


# =============================================================================
# Coined / Blended (high uniqueness)
# =============================================================================

def coined_words(root: str, count: int, rng: NameRandom, vocab: Vocabulary) -> List[str]:
    """Invented words built on the first letters of the root (e.g. "clovana")."""
    stem = root[:get_setting("generation.coined_root_chars", 3)]
    results = []

    for _ in range(_half(count)):
        v1 = rng.choice(vocab.coined_vowels)
        c = rng.choice(vocab.coined_consonants)
        v2 = rng.choice(vocab.coined_vowels)
        results.append(f"{stem}{v1}{c}{v2}")

    for _ in range(_half(count)):
        results.append(f"{stem}{rng.choice(vocab.coined_endings)}")

    return results


def blended_words(root: str, count: int, rng: NameRandom, vocab: Vocabulary) -> List[str]:
    """Fuse the root's stem with the stem of an unrelated tech word."""
    key_part = root[:get_setting("generation.blend_root_chars", 4)]
    word_chars = get_setting("generation.blend_word_chars", 4)
    results = []

    for _ in range(count):
        word_part = rng.choice(vocab.blend_words)[:word_chars]
        if rng.coin_flip():
            results.append(f"{key_part}{word_part}")
        else:
            results.append(f"{word_part}{key_part}")

    return results


# =============================================================================
# Compound
# =============================================================================

def compound_suffixed(root: str, count: int, rng: NameRandom, vocab: Vocabulary) -> List[str]:
    return [f"{root}{s}" for s in rng.subset(vocab.compound_suffixes, count)]


def compound_prefixed(root: str, count: int, rng: NameRandom, vocab: Vocabulary) -> List[str]:
    return [f"{p}{root}" for p in rng.subset(vocab.compound_prefixes, count)]


# =============================================================================
# Alternate spellings
# =============================================================================

def strip_vowels(root: str, vocab: Vocabulary) -> str:
    return ''.join(ch for ch in root if ch not in vocab.stripped_vowels)


def phonetic_swap(root: str, vocab: Vocabulary) -> Optional[str]:
    """
    Apply the first substitution rule whose pattern occurs in the root.

    Every occurrence of that pattern is replaced. With no matching rule the
    fallback ending is appended. Returns None when nothing changed.
    """
    for pattern, replacement in vocab.substitutions:
        if pattern in root:
            alt = root.replace(pattern, replacement)
            break
    else:
        alt = root + vocab.fallback_ending

    return alt if alt != root else None


def alternate_endings(root: str, vocab: Vocabulary) -> List[str]:
    return [f"{root}{e}" for e in vocab.alternate_endings]


# =============================================================================
# Brandable
# =============================================================================

def brandable_suffixed(root: str, count: int, rng: NameRandom, vocab: Vocabulary) -> List[str]:
    return [f"{root}{s}" for s in rng.subset(vocab.brandable_suffixes, count)]


def latin_prefixed(root: str, count: int, rng: NameRandom, vocab: Vocabulary) -> List[str]:
    """Latin-flavoured prefix + root, e.g. "Novcloud"."""
    return [f"{p.capitalize()}{root}" for p in rng.subset(vocab.latin_prefixes, count)]


# =============================================================================
# Real words / metaphors
# =============================================================================

def real_word_metaphors(root: str, count: int, rng: NameRandom,
                        vocab: Vocabulary) -> Tuple[List[str], List[str]]:
    """
    Attach tech-root metaphors to the root.

    Returns (combined, standalone). Each sampled word is appended to the
    root, prepended to it, or emitted alone; standalone words ignore the
    keyword entirely and are scored lower by the caller.
    """
    append_above = get_setting("generation.real_word.append_above", 0.6)
    prepend_above = get_setting("generation.real_word.prepend_above", 0.3)
    combined, standalone = [], []

    for word in rng.subset(vocab.tech_roots, count):
        r = rng.random()
        if r > append_above:
            combined.append(f"{root}{word}")
        elif r > prepend_above:
            combined.append(f"{word}{root}")
        else:
            standalone.append(word)

    return combined, standalone


# =============================================================================
# Short forms
# =============================================================================

def short_forms(root: str, count: int, rng: NameRandom, vocab: Vocabulary) -> List[str]:
    short = root[:get_setting("generation.short_root_chars", 4)]
    return [f"{short}{ch}" for ch in rng.subset(vocab.short_chars, count)]


# =============================================================================
# Cross-keyword blends
# =============================================================================

def cross_keyword_blends(roots: Sequence[str]) -> List[str]:
    """
    Fuse every unordered pair of roots in both orders.

    ("privacy", "health") -> ["priheal", "healpri"]: the first root
    contributes its first three letters, the second its first four.
    """
    first_chars = get_setting("generation.cross_first_chars", 3)
    second_chars = get_setting("generation.cross_second_chars", 4)
    results = []

    for first, second in combinations(roots, 2):
        a = first[:first_chars]
        b = second[:second_chars]
        results.append(f"{a}{b}")
        results.append(f"{b}{a}")

    return results
