#!/usr/bin/env python3
"""
Candidate Sources
=================
Pluggable producers of candidate names for the orchestration pipeline.

- LocalNameSource: the procedural generator (always available)
- AnthropicNameSource: Claude-backed generation from a naming brief

Remote output goes through the same quality gate, dedup and ranking as
procedural output, so both sources yield comparable lists.
"""

from __future__ import annotations

import json
import logging
import re
from abc import ABC, abstractmethod
from typing import Any, List, Optional

import anthropic

from .config import get_config
from .entropy import NameRandom, get_rng
from .generators import BrandNameGenerator
from .models import CandidateName, GenerationRequest, NameStyle
from .scoring import clamp_score, rank_candidates
from .settings import get_setting

logger = logging.getLogger(__name__)


class SourceUnavailableError(RuntimeError):
    """A remote source could not be reached or is not configured."""


class NameSource(ABC):
    """Something that turns a GenerationRequest into candidate names."""

    name: str = "source"

    @abstractmethod
    def generate(self, request: GenerationRequest) -> List[CandidateName]:
        ...


class LocalNameSource(NameSource):
    """Procedural generation; never raises for well-formed requests."""

    name = "local"

    def __init__(self, generator: BrandNameGenerator = None, seed: Optional[int] = None):
        self.generator = generator or BrandNameGenerator(seed=seed)

    def generate(self, request: GenerationRequest) -> List[CandidateName]:
        return self.generator.generate(request)


# =============================================================================
# AI response handling
# =============================================================================

_STYLE_KEYWORDS = [
    (('coined', 'fanciful', 'abstract'), NameStyle.BRANDABLE),
    (('compound', 'portmanteau'), NameStyle.COMPOUND),
    (('real', 'dictionary', 'arbitrary', 'evocative'), NameStyle.REAL_WORD),
    (('alter', 'misspell'), NameStyle.ALTERNATE),
    (('short', 'acronym'), NameStyle.SHORT),
]

_CODE_FENCE = re.compile(r'```(?:json)?')


def map_ai_style(label: Any) -> NameStyle:
    """
    Map a naming-taxonomy label ("Fanciful/Coined", "Evocative", ...) onto a
    concrete style. Unrecognized labels count as brandable.
    """
    text = str(label or '').lower()
    for keywords, style in _STYLE_KEYWORDS:
        if any(k in text for k in keywords):
            return style
    return NameStyle.BRANDABLE


def _as_score(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def parse_ai_response(text: str, min_score: float = None) -> List[CandidateName]:
    """
    Parse a ``{"names": [{"name", "style", "score", "rationale"}]}`` reply.

    Markdown code fences are stripped. Entries below ``min_score`` or
    without a name are dropped. Unparsable replies yield an empty list.
    """
    if min_score is None:
        min_score = get_setting("ai.min_score", 80)

    cleaned = _CODE_FENCE.sub('', text or '').strip()
    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError:
        logger.error(f"Failed to parse AI response: {cleaned[:200]!r}")
        return []

    entries = parsed.get('names') if isinstance(parsed, dict) else None
    if not isinstance(entries, list):
        return []

    results = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        name = str(entry.get('name') or '').strip()
        score = _as_score(entry.get('score'))
        if not name or score < min_score:
            continue
        results.append(CandidateName(
            name=name,
            style=map_ai_style(entry.get('style')),
            score=clamp_score(score),
            rationale=entry.get('rationale') or None,
        ))
    return results


# =============================================================================
# Anthropic source
# =============================================================================

SYSTEM_PROMPT = """You are a senior brand naming strategist.

Every name you propose must:
1. Have a traceable semantic, phonetic or conceptual link to the keyword.
2. Be distinctive. Lazy generic compounds ("TechFlow", "DataSync") and stock
   suffixes (-ify, -ly, -io) fail unless the result is genuinely clever.
3. Be pronounceable by a native English speaker on first reading.
4. Avoid accidental offensive meanings in major languages.

Score each name strictly from 0 to 100; most names deserve 50-70 and only
exceptional ones 85+. Do not return names scoring below 80.
Return only JSON, no commentary."""

_STYLE_BRIEF = {
    NameStyle.AUTO: "Mixed strategy (explore 2-3 distinct construct types)",
    NameStyle.BRANDABLE: "Fanciful/coined invented words",
    NameStyle.ALTERNATE: "Alternate spellings of real words",
    NameStyle.COMPOUND: "Compound words and portmanteaus",
    NameStyle.REAL_WORD: "Real dictionary words used evocatively",
    NameStyle.SHORT: "Short names of four to five letters",
}

_AVAILABILITY_BRIEF = """
Priority: maximize .com availability. Prefer keyword-rooted neologisms,
uncommon endings (-ia, -ex, -or, -ax, -ix, -ara, -era) and rhythmic
coinages that still echo the keyword. Avoid single dictionary words.
"""


def build_naming_brief(request: GenerationRequest) -> str:
    """User prompt describing one generation request."""
    lines = [
        f'Keyword: "{request.keyword}"',
        f"Industry: {request.industry or 'General/Technology'}",
        f"Target market: {request.country or 'Global'}",
        f"Vibe: {request.vibe or 'Modern & Professional'}",
        f"Style: {_STYLE_BRIEF[request.style]}",
        f"Creativity level: {request.randomness.value} "
        "(low = safer and descriptive, high = abstract and experimental)",
    ]
    brief = "\n".join(lines)
    if request.availability_mode:
        brief += "\n" + _AVAILABILITY_BRIEF

    brief += (
        "\nGenerate 15-20 brand names. Return JSON of the form\n"
        '{"names": [{"name": "Name", "style": "coined", "score": 88, '
        '"rationale": "one sentence"}]}'
    )
    return brief


class AnthropicNameSource(NameSource):
    """
    Claude-backed candidate source.

    Raises SourceUnavailableError when no API key is configured or the API
    call fails; the pipeline then falls back to procedural generation.
    """

    name = "ai"

    def __init__(self, api_key: str = None, client=None, model: str = None,
                 rng: NameRandom = None):
        self.api_key = api_key or get_config().anthropic_api_key
        self._client = client
        self.model = model or get_setting("ai.model")
        self.rng = rng or get_rng()

    @property
    def client(self):
        if self._client is None:
            if not self.api_key:
                raise SourceUnavailableError("ANTHROPIC_API_KEY is not configured")
            self._client = anthropic.Anthropic(api_key=self.api_key)
        return self._client

    def _temperature(self, request: GenerationRequest) -> float:
        return get_setting(f"ai.temperature.{request.randomness.value}", 0.7)

    def generate(self, request: GenerationRequest) -> List[CandidateName]:
        try:
            message = self.client.messages.create(
                model=self.model,
                max_tokens=get_setting("ai.max_tokens", 2000),
                temperature=self._temperature(request),
                system=SYSTEM_PROMPT,
                messages=[{"role": "user", "content": build_naming_brief(request)}],
            )
        except anthropic.APIError as e:
            raise SourceUnavailableError(f"AI generation failed: {e}") from e

        text = ''.join(
            getattr(block, 'text', '') for block in message.content
        )
        candidates = parse_ai_response(text)
        return rank_candidates(candidates, request.randomness, self.rng)
