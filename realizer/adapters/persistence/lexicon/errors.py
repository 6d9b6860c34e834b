# realizer/adapters/persistence/lexicon/errors.py
"""
Lexicon adapter errors.

Every loading problem is fatal and surfaces before the first realisation:
a realiser never runs against a half-loaded lexicon. Lookup misses during
realisation are not errors (the resolver falls back to a provisional
word); only the explicit `JsonLexicon.require()` raises `LexemeNotFound`.
"""

from __future__ import annotations

from typing import Optional


class LexiconError(Exception):
    """Root of the lexicon adapter's exceptions."""


class LexiconNotFound(LexiconError):
    """No lexicon directory for the language, or no JSON shard inside it."""

    def __init__(self, language: str, message: Optional[str] = None) -> None:
        self.language = language
        super().__init__(message or f"No lexicon available for '{language}'.")


class LexiconSchemaError(LexiconError):
    """A shard is unreadable, is not JSON, or breaks the entry schema."""

    def __init__(self, path: str, detail: Optional[str] = None) -> None:
        self.path = path
        self.detail = detail
        text = f"Lexicon shard '{path}' is invalid"
        super().__init__(f"{text}: {detail}" if detail else f"{text}.")


class LexemeNotFound(LexiconError):
    """`require()` found no entry for a base form (and category, if given)."""

    def __init__(self, language: str, key: str, pos: Optional[str] = None) -> None:
        self.language = language
        self.key = key
        self.pos = pos
        where = f"'{key}' ({pos})" if pos else f"'{key}'"
        super().__init__(f"No entry {where} in the '{language}' lexicon.")


class LexiconConfigError(LexiconError):
    """The configured lexicon location cannot be used."""


__all__ = [
    "LexiconError",
    "LexiconNotFound",
    "LexiconSchemaError",
    "LexemeNotFound",
    "LexiconConfigError",
]
