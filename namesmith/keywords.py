#!/usr/bin/env python3
"""
Keyword Normalizer
==================
Turns a free-text keyword into up to three root words.

    "privacy focused mental health app" -> ["mental", "health", "privacy"]
"""

import re
from typing import List, Optional

from .settings import get_setting
from .vocabulary import Vocabulary, load_vocabulary

_NON_ALPHA = re.compile(r'[^a-z]')


def _clean(token: str) -> str:
    return _NON_ALPHA.sub('', token)


def extract_keywords(raw_keyword: Optional[str], vocabulary: Vocabulary = None) -> List[str]:
    """
    Extract the most meaningful root words from a keyword phrase.

    Stop words and tokens shorter than three letters are dropped. Survivors
    are ordered shortest-first (short roots make punchier names) and the
    first three are kept. Always returns at least one root.
    """
    vocabulary = vocabulary or load_vocabulary()
    min_length = get_setting("keywords.min_length", 3)
    max_roots = get_setting("keywords.max_roots", 3)
    fallback_root = get_setting("keywords.fallback_root", "brand")

    tokens = (raw_keyword or "").lower().split()
    words = [_clean(t) for t in tokens]
    words = [w for w in words if len(w) >= min_length and w not in vocabulary.stop_words]

    if not words:
        fallback = _clean(tokens[0]) if tokens else ""
        return [fallback] if fallback else [fallback_root]

    # sorted() is stable, so equal-length roots keep their input order
    return sorted(words, key=len)[:max_roots]
