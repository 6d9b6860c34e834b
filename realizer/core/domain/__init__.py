# realizer/core/domain/__init__.py
"""
Domain model of the realizer.

- features.py     feature keys, value enums and FeatureStore
- elements.py     the element tree
- lexical.py      word entries and resolution
- syntax/         linearisation of phrases and clauses
- morphology/     per-language inflection engines
- strategy/       per-language capability sets
- orthography.py  capitalisation, punctuation and layout
- factory.py      PhraseFactory, the builder API
"""

from .exceptions import (
    DomainError,
    FeatureValueError,
    InvalidElementError,
    LanguageNotFoundError,
)

__all__ = [
    "DomainError",
    "FeatureValueError",
    "InvalidElementError",
    "LanguageNotFoundError",
]
