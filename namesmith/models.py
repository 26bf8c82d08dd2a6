#!/usr/bin/env python3
"""
Data Model
==========
Enumerations and records shared by the generation core, the candidate
sources and the orchestration pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional


class NameStyle(Enum):
    """Naming construct. AUTO is a request wildcard and never tags an output."""
    AUTO = "auto"
    BRANDABLE = "brandable"
    ALTERNATE = "alternate"
    COMPOUND = "compound"
    REAL_WORD = "real_word"
    SHORT = "short"

    @classmethod
    def parse(cls, value: Any) -> "NameStyle":
        """Resolve a style from an enum member or its string value."""
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower().replace('-', '_')
        for member in cls:
            if member.value == text:
                return member
        available = ', '.join(m.value for m in cls)
        raise ValueError(f"Unknown style '{value}'. Available styles: {available}")

    def allows(self, style: "NameStyle") -> bool:
        """True when a strategy producing ``style`` runs under this filter."""
        return self is NameStyle.AUTO or self is style


class RandomnessLevel(Enum):
    """How much score variance and shuffling the ranker applies."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def parse(cls, value: Any) -> "RandomnessLevel":
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for member in cls:
            if member.value == text:
                return member
        available = ', '.join(m.value for m in cls)
        raise ValueError(f"Unknown randomness level '{value}'. Available levels: {available}")


@dataclass(frozen=True)
class DomainStatus:
    tld: str
    available: bool


@dataclass(frozen=True)
class AvailabilityResult:
    """Domain availability for one name, as reported by an external checker."""
    domains: List[DomainStatus] = field(default_factory=list)

    @property
    def any_available(self) -> bool:
        return any(d.available for d in self.domains)


@dataclass(frozen=True)
class CandidateName:
    """
    A generated brand name.

    ``rationale``, ``availability`` and ``folder_id`` are attached by outer
    layers via ``dataclasses.replace``; the generation core leaves them unset.
    """
    name: str
    style: NameStyle
    score: float
    rationale: Optional[str] = None
    availability: Optional[AvailabilityResult] = None
    folder_id: Optional[str] = None

    @property
    def key(self) -> str:
        """Case-insensitive identity used for deduplication."""
        return self.name.lower()

    def to_dict(self) -> dict:
        data = {
            'name': self.name,
            'style': self.style.value,
            'score': round(self.score, 2),
        }
        if self.rationale:
            data['rationale'] = self.rationale
        if self.availability is not None:
            data['availability'] = {d.tld: d.available for d in self.availability.domains}
        if self.folder_id:
            data['folder_id'] = self.folder_id
        return data


@dataclass(frozen=True)
class GenerationRequest:
    """Input contract of the generation core."""
    keyword: str
    style: NameStyle = NameStyle.AUTO
    randomness: RandomnessLevel = RandomnessLevel.MEDIUM
    availability_mode: bool = False
    # Context for remote sources; the procedural core ignores these
    industry: Optional[str] = None
    vibe: Optional[str] = None
    country: Optional[str] = None

    @classmethod
    def create(cls, keyword: str, style: Any = NameStyle.AUTO,
               randomness: Any = RandomnessLevel.MEDIUM,
               availability_mode: bool = False, **context) -> "GenerationRequest":
        """Build a request from loosely-typed inputs (CLI strings, JSON)."""
        return cls(
            keyword=keyword or "",
            style=NameStyle.parse(style),
            randomness=RandomnessLevel.parse(randomness),
            availability_mode=bool(availability_mode),
            **context,
        )

    @property
    def prioritize_unique(self) -> bool:
        """Bias toward coined words when chasing availability or maximum variety."""
        return self.availability_mode or self.randomness is RandomnessLevel.HIGH
