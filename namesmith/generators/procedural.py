#!/usr/bin/env python3
"""
Procedural Brand Name Generator
===============================
Runs every strategy allowed by the requested style over each root word,
adds cross-keyword blends, and ranks the pooled candidates.

    Keyword -> roots -> strategies (per root, gated by style)
            -> cross-keyword blends -> quality gate -> dedup -> rank

Usage:
    from namesmith.generators import BrandNameGenerator

    gen = BrandNameGenerator(seed=7)
    for c in gen.generate_for("flow", style="compound"):
        print(c.name, c.style.value, round(c.score, 1))
"""

import logging
from typing import List, Optional

from ..entropy import NameRandom, get_rng
from ..keywords import extract_keywords
from ..models import CandidateName, GenerationRequest, NameStyle
from ..scoring import Scorer, rank_candidates
from ..settings import get_setting, require_setting
from ..vocabulary import Vocabulary, load_vocabulary
from . import strategies

logger = logging.getLogger(__name__)


def _base(key: str) -> float:
    return require_setting(f"generation.base_scores.{key}")


def _count(key: str) -> int:
    return int(require_setting(f"generation.counts.{key}"))


class BrandNameGenerator:
    """
    Keyword-driven procedural generator.

    Parameters
    ----------
    seed : int, optional
        Seed for a reproducible random source. Ignored when ``rng`` is given.
    rng : NameRandom, optional
        Explicit random source shared across calls.
    vocabulary : Vocabulary, optional
        Word tables; defaults to the packaged vocabulary.yaml.
    """

    def __init__(self, seed: Optional[int] = None, rng: NameRandom = None,
                 vocabulary: Vocabulary = None):
        self.rng = rng or get_rng(seed)
        self.vocab = vocabulary or load_vocabulary()

    def generate(self, request: GenerationRequest) -> List[CandidateName]:
        """Generate the ranked candidate list for a request."""
        roots = extract_keywords(request.keyword, self.vocab)
        scorer = Scorer(request.randomness, self.rng)

        pool: List[CandidateName] = []
        for root in roots:
            if not root:
                continue
            pool.extend(self._generate_for_root(root, request, scorer))

        pool.extend(self._cross_blends(roots, scorer))

        ranked = rank_candidates(pool, request.randomness, self.rng)
        logger.debug(
            f"'{request.keyword}' -> roots {roots}: "
            f"{len(pool)} raw candidates, {len(ranked)} ranked"
        )
        return ranked

    def generate_for(self, keyword: str, style="auto", randomness="medium",
                     availability_mode: bool = False) -> List[CandidateName]:
        """Convenience wrapper accepting plain strings for style/randomness."""
        request = GenerationRequest.create(keyword, style, randomness, availability_mode)
        return self.generate(request)

    # -------------------------------------------------------------------------
    # Per-root strategies
    # -------------------------------------------------------------------------

    def _generate_for_root(self, root: str, request: GenerationRequest,
                           scorer: Scorer) -> List[CandidateName]:
        style = request.style
        rng, vocab = self.rng, self.vocab
        unique = request.prioritize_unique
        results: List[CandidateName] = []

        # Coined words have the best odds of an open domain, so they lead
        if unique or style.allows(NameStyle.BRANDABLE):
            count = _count("coined_unique" if unique else "coined")
            results += scorer.candidates(
                strategies.coined_words(root, count, rng, vocab),
                NameStyle.BRANDABLE, _base("coined"))

            count = _count("blended_unique" if unique else "blended")
            results += scorer.candidates(
                strategies.blended_words(root, count, rng, vocab),
                NameStyle.BRANDABLE, _base("blended"))

        if style.allows(NameStyle.COMPOUND):
            results += scorer.candidates(
                strategies.compound_suffixed(root, _count("compound_suffixes"), rng, vocab),
                NameStyle.COMPOUND, _base("compound_suffix"))
            results += scorer.candidates(
                strategies.compound_prefixed(root, _count("compound_prefixes"), rng, vocab),
                NameStyle.COMPOUND, _base("compound_prefix"))

        if style.allows(NameStyle.ALTERNATE):
            results.append(scorer.candidate(
                strategies.strip_vowels(root, vocab),
                NameStyle.ALTERNATE, _base("alternate_stripped")))

            swapped = strategies.phonetic_swap(root, vocab)
            if swapped:
                results.append(scorer.candidate(
                    swapped, NameStyle.ALTERNATE, _base("alternate_swap")))

            endings = strategies.alternate_endings(root, vocab)
            for text, base in zip(endings, _base("alternate_endings")):
                results.append(scorer.candidate(text, NameStyle.ALTERNATE, base))

        if style.allows(NameStyle.BRANDABLE):
            results += scorer.candidates(
                strategies.brandable_suffixed(root, _count("brandable_suffixes"), rng, vocab),
                NameStyle.BRANDABLE, _base("brandable_suffix"))
            results += scorer.candidates(
                strategies.latin_prefixed(root, _count("latin_prefixes"), rng, vocab),
                NameStyle.BRANDABLE, _base("latin_prefix"))

        if style.allows(NameStyle.REAL_WORD):
            combined, standalone = strategies.real_word_metaphors(
                root, _count("real_words"), rng, vocab)
            results += scorer.candidates(combined, NameStyle.REAL_WORD, _base("real_word_combined"))
            results += scorer.candidates(standalone, NameStyle.REAL_WORD, _base("real_word_standalone"))

        if style.allows(NameStyle.SHORT):
            results += scorer.candidates(
                strategies.short_forms(root, _count("short_forms"), rng, vocab),
                NameStyle.SHORT, _base("short"))

        return results

    def _cross_blends(self, roots: List[str], scorer: Scorer) -> List[CandidateName]:
        if len(roots) < 2:
            return []
        ceiling = get_setting("generation.cross_blend_variance", 10)
        return scorer.candidates(
            strategies.cross_keyword_blends(roots),
            NameStyle.BRANDABLE, _base("cross_blend"), ceiling)


def generate_brand_names(keyword: str, style="auto", randomness="medium",
                         availability_mode: bool = False,
                         seed: Optional[int] = None) -> List[CandidateName]:
    """
    Generate up to 20 ranked brand names for a keyword.

    Style and randomness accept enum members or their string values.
    """
    return BrandNameGenerator(seed=seed).generate_for(
        keyword, style, randomness, availability_mode)
