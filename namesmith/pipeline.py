#!/usr/bin/env python3
"""
Generation Pipeline
===================
Orchestrates repeated generation attempts until enough usable names exist.

Each attempt:
1. Ask the primary source (e.g. Claude); fall back to procedural
   generation if it is unavailable or returns nothing.
2. Annotate candidates with domain availability (when a checker and TLDs
   are configured).
3. Keep only candidates with at least one available domain.

From the second attempt on, requests switch to availability mode, which
biases the procedural core toward coined words.

Usage:
    from namesmith.pipeline import NamePipeline

    pipeline = NamePipeline()
    result = pipeline.run(GenerationRequest.create("flow"))
    for c in result.names:
        print(c.name)
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional, Sequence, Set

from .availability import AvailabilityChecker, annotate_availability, has_available_domain
from .models import CandidateName, GenerationRequest
from .settings import get_setting
from .sources import LocalNameSource, NameSource, SourceUnavailableError

logger = logging.getLogger(__name__)


@dataclass
class PipelineConfig:
    """Attempt budget for the pipeline."""
    max_attempts: Optional[int] = None
    min_results: Optional[int] = None

    def __post_init__(self):
        cfg = get_setting("pipeline", {}) or {}
        if self.max_attempts is None:
            self.max_attempts = cfg.get("max_attempts")
        if self.min_results is None:
            self.min_results = cfg.get("min_results")

        missing = [
            name for name, value in (
                ("max_attempts", self.max_attempts),
                ("min_results", self.min_results),
            )
            if value is None
        ]
        if missing:
            raise ValueError(f"pipeline settings missing in app.yaml: {', '.join(missing)}")


@dataclass
class PipelineResult:
    names: List[CandidateName]
    new_names: List[CandidateName] = field(default_factory=list)
    attempts: int = 0
    source: str = "local"


def merge_results(existing: Iterable[CandidateName],
                  new: Iterable[CandidateName]) -> List[CandidateName]:
    """Prepend names not already in ``existing`` (case-insensitive)."""
    existing = list(existing)
    seen = {c.key for c in existing}
    fresh = []
    for c in new:
        if c.key not in seen:
            seen.add(c.key)
            fresh.append(c)
    return fresh + existing


class NamePipeline:
    """
    Multi-attempt generation with source fallback and availability filtering.

    Parameters
    ----------
    primary : NameSource, optional
        Preferred source. Defaults to the procedural generator.
    fallback : NameSource, optional
        Used when the primary fails or returns nothing.
    checker : AvailabilityChecker, optional
        Domain availability lookup; without it no filtering happens.
    tlds : sequence of str
        TLDs to check, e.g. ["com", "io"].
    """

    def __init__(self, primary: NameSource = None, fallback: NameSource = None,
                 checker: AvailabilityChecker = None, tlds: Sequence[str] = (),
                 config: PipelineConfig = None):
        self.fallback = fallback or LocalNameSource()
        self.primary = primary or self.fallback
        self.checker = checker
        self.tlds = list(tlds)
        self.config = config or PipelineConfig()

    def _candidates(self, request: GenerationRequest, used: Set[str]) -> List[CandidateName]:
        if self.primary is not self.fallback:
            try:
                candidates = self.primary.generate(request)
            except SourceUnavailableError as e:
                logger.warning(f"{self.primary.name} source unavailable, using {self.fallback.name}: {e}")
                candidates = []
            if candidates:
                used.add(self.primary.name)
                return candidates

        used.add(self.fallback.name)
        return self.fallback.generate(request)

    def _filter(self, candidates: List[CandidateName]) -> List[CandidateName]:
        if self.checker is None or not self.tlds:
            return candidates
        checked = annotate_availability(candidates, self.checker, self.tlds)
        return [c for c in checked if has_available_domain(c, self.tlds)]

    def run(self, request: GenerationRequest,
            existing: Sequence[CandidateName] = ()) -> PipelineResult:
        """
        Generate until ``min_results`` valid names are found or attempts run out.

        ``existing`` holds names already shown to the user; new names are
        merged in front of them, skipping repeats.
        """
        collected: List[CandidateName] = []
        seen = {c.key for c in existing}
        used: Set[str] = set()
        attempts = 0

        while len(collected) < self.config.min_results and attempts < self.config.max_attempts:
            attempts += 1
            attempt_request = request
            if attempts > 1 and not request.availability_mode:
                attempt_request = replace(request, availability_mode=True)

            candidates = self._candidates(attempt_request, used)
            valid = self._filter(candidates)

            for c in valid:
                if c.key not in seen:
                    seen.add(c.key)
                    collected.append(c)

            logger.debug(
                f"Attempt {attempts}/{self.config.max_attempts}: "
                f"{len(candidates)} candidates, {len(valid)} valid, {len(collected)} collected"
            )

        if len(used) > 1:
            source = "mixed"
        else:
            source = next(iter(used), self.fallback.name)

        return PipelineResult(
            names=merge_results(existing, collected),
            new_names=collected,
            attempts=attempts,
            source=source,
        )
