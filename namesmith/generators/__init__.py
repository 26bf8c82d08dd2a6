#!/usr/bin/env python3
"""
Brand Name Generators
=====================
Procedural generation from a keyword:
- strategies: coined, blended, compound, alternate, brandable,
  real-word, short and cross-keyword constructions
- procedural: BrandNameGenerator, which runs and ranks them
"""

from . import strategies
from .procedural import BrandNameGenerator, generate_brand_names

__all__ = [
    'strategies',
    'BrandNameGenerator',
    'generate_brand_names',
]
