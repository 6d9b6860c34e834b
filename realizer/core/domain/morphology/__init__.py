# realizer/core/domain/morphology/__init__.py
"""
Morphology engines.

Importing this package registers the built-in engine families
("germanic" for English, "romance" for Spanish).
"""

from .base import (
    ENGINE_REGISTRY,
    MorphologyEngine,
    MorphologyError,
    create_engine,
    list_registered_families,
    register_engine,
)
from .english import EnglishMorphology
from .spanish import SpanishMorphology
from .processor import MorphologyProcessor

__all__ = [
    "ENGINE_REGISTRY",
    "MorphologyEngine",
    "MorphologyError",
    "create_engine",
    "list_registered_families",
    "register_engine",
    "EnglishMorphology",
    "SpanishMorphology",
    "MorphologyProcessor",
]
