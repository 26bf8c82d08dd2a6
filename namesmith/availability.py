#!/usr/bin/env python3
"""
Availability Annotation
=======================
Interface to an external domain-availability service and the concurrent
annotation step the pipeline runs over each batch of candidates.

No network checker ships with namesmith; plug in any object implementing
AvailabilityChecker.
"""

import logging
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from typing import List, Sequence

from .models import AvailabilityResult, CandidateName
from .settings import get_setting

logger = logging.getLogger(__name__)


class AvailabilityChecker(ABC):
    """External domain availability lookup."""

    @abstractmethod
    def check(self, name: str, tlds: Sequence[str]) -> AvailabilityResult:
        ...


def _annotate_one(checker: AvailabilityChecker, candidate: CandidateName,
                  tlds: Sequence[str]) -> CandidateName:
    try:
        result = checker.check(candidate.name, tlds)
    except Exception as e:
        logger.warning(f"Availability check failed for {candidate.name}: {e}")
        return candidate
    return replace(candidate, availability=result)


def annotate_availability(
    candidates: Sequence[CandidateName],
    checker: AvailabilityChecker,
    tlds: Sequence[str],
    max_workers: int = None,
) -> List[CandidateName]:
    """
    Check every candidate concurrently, preserving input order.

    A failing check leaves that candidate without availability data.
    """
    if not candidates:
        return []
    if max_workers is None:
        max_workers = get_setting("pipeline.availability_workers", 8)

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(lambda c: _annotate_one(checker, c, tlds), candidates))


def has_available_domain(candidate: CandidateName, tlds: Sequence[str]) -> bool:
    """Strict filter: with no TLDs requested everything passes."""
    if not tlds:
        return True
    return candidate.availability is not None and candidate.availability.any_available
