#!/usr/bin/env python3
"""
namesmith - Keyword-Driven Brand Name Generator
================================================

Turns a free-text keyword into a ranked, deduplicated list of candidate
brand names using several construction strategies, a pronounceability
gate, randomized scoring and deterministic ranking.

Quick Start
-----------
    from namesmith import generate_brand_names

    for c in generate_brand_names("mental health", style="brandable"):
        print(c.name, c.style.value, round(c.score, 1))

    # Reproducible output
    names = generate_brand_names("flow", style="compound", randomness="low", seed=7)

Modules
-------
    namesmith.keywords   - Root word extraction
    namesmith.generators - Generation strategies and the procedural generator
    namesmith.quality    - Quality gate
    namesmith.scoring    - Scoring, dedup and ranking
    namesmith.sources    - Local and Claude-backed candidate sources
    namesmith.pipeline   - Multi-attempt orchestration with availability filtering

CLI Usage
---------
    python -m namesmith generate "mental health" --style brandable
    python -m namesmith check Clovana
"""

__version__ = "0.1.0"

from .models import (
    AvailabilityResult,
    CandidateName,
    DomainStatus,
    GenerationRequest,
    NameStyle,
    RandomnessLevel,
)
from .keywords import extract_keywords
from .quality import check_quality, passes_quality_check
from .scoring import rank_candidates
from .generators import BrandNameGenerator, generate_brand_names

__all__ = [
    'AvailabilityResult',
    'CandidateName',
    'DomainStatus',
    'GenerationRequest',
    'NameStyle',
    'RandomnessLevel',
    'extract_keywords',
    'check_quality',
    'passes_quality_check',
    'rank_candidates',
    'BrandNameGenerator',
    'generate_brand_names',
]
