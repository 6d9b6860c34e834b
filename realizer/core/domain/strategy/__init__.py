# realizer/core/domain/strategy/__init__.py
"""
Language strategies.

Importing this package registers the built-in languages ("en", "es").
"""

from .base import (
    STRATEGY_REGISTRY,
    LanguageStrategy,
    get_strategy,
    list_strategies,
    register_strategy,
)
from .english import EnglishStrategy
from .spanish import SpanishStrategy

__all__ = [
    "STRATEGY_REGISTRY",
    "LanguageStrategy",
    "get_strategy",
    "list_strategies",
    "register_strategy",
    "EnglishStrategy",
    "SpanishStrategy",
]
