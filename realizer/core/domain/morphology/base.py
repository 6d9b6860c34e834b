# realizer/core/domain/morphology/base.py
"""
morphology/base.py

Shared abstractions and utilities for all morphology engines.

This module defines:
- The abstract MorphologyEngine interface (category dispatch, base-form
  resolution, list-level post passes).
- A suffix-mutation helper used by the regular inflection rules.
- A simple registry so engines can be created by language family.
"""

from __future__ import annotations

import abc
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Type

from ..elements import Element, InflectedRequest, Literal
from ..features import Category, Feature
from ..lexical import WordEntry


# ---------------------------------------------------------------------------
# Suffix mutation rules
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SuffixRule:
    """
    One orthographic repair applied to a base before a suffix is appended.

    Attributes:
        base_pattern:
            Regex matched (with `re.search`) against the end of the base.
        suffix_pattern:
            Regex matched (with `re.match`) against the suffix.
        rewrite:
            Function producing the new base from the old one.
    """

    base_pattern: str
    suffix_pattern: str
    rewrite: Callable[[str], str]

    def applies(self, base: str, suffix: str) -> bool:
        return bool(re.search(self.base_pattern, base)) and bool(
            re.match(self.suffix_pattern, suffix)
        )


def add_suffix(base: str, suffix: str, rules: Sequence[SuffixRule]) -> str:
    """
    Apply every matching rule to `base` in order, then append `suffix`.

    Each rule sees the base as left by the previous one.
    """
    stem = base
    for rule in rules:
        if rule.applies(stem, suffix):
            stem = rule.rewrite(stem)
    return stem + suffix


class MorphologyError(RuntimeError):
    """Raised when a morphology engine is misconfigured."""

    pass


# ---------------------------------------------------------------------------
# Abstract engine interface
# ---------------------------------------------------------------------------


class MorphologyEngine(abc.ABC):
    """
    Base class for all morphology engines.

    Engines are registered per language *family* and parameterised by a
    per-language configuration dictionary (irregular overrides, extra
    suffix rules).

    `inflect()` handles the parts every language shares (non-morph
    passthrough, category dispatch, unknown categories) and calls the
    category hooks below, which subclasses override. A hook that is not
    overridden returns the base form unchanged.
    """

    #: Language family identifier, e.g. "germanic", "romance".
    #: This is populated when the class is registered.
    family: str

    def __init__(self, language_code: str, config: Mapping[str, Any]):
        self.language_code = language_code
        self.config: Mapping[str, Any] = config
        self._dispatch: Dict[Category, Callable[[InflectedRequest, Optional[WordEntry]], str]] = {
            Category.NOUN: self.inflect_noun,
            Category.VERB: self.inflect_verb,
            Category.MODAL: self.inflect_modal,
            Category.ADJECTIVE: self.inflect_adjective,
            Category.ADVERB: self.inflect_adverb,
            Category.PRONOUN: self.inflect_pronoun,
            Category.DETERMINER: self.inflect_determiner,
        }

    # Entry point ---------------------------------------------------------

    def inflect(self, request: InflectedRequest, base_word: Optional[WordEntry] = None) -> Literal:
        """
        Turn a request into a literal.

        `base_word` defaults to the request's own back-reference. The
        literal keeps the request's category and discourse role so list
        post passes can still see them.
        """
        word = base_word if base_word is not None else request.base_word
        if request.flag(Feature.NON_MORPH):
            surface = self.get_base_form(request, word)
        else:
            handler = self._dispatch.get(request.category)
            if handler is None:
                surface = self.get_base_form(request, word)
            else:
                surface = handler(request, word)
        return Literal(
            surface,
            category=request.category,
            features={Feature.DISCOURSE_FUNCTION: request.discourse_function},
        )

    @staticmethod
    def get_base_form(request: InflectedRequest, word: Optional[WordEntry]) -> str:
        """
        Verbs prefer the lexicon's canonical spelling (a finite form maps
        back to its infinitive). Other categories prefer the request's own
        base form.
        """
        if request.category is Category.VERB:
            if word is not None:
                return word.default_spelling
            return request.base_form
        if request.base_form:
            return request.base_form
        if word is not None:
            return word.default_spelling
        return ""

    # Category hooks ------------------------------------------------------

    def inflect_noun(self, request: InflectedRequest, word: Optional[WordEntry]) -> str:
        return self.get_base_form(request, word)

    def inflect_verb(self, request: InflectedRequest, word: Optional[WordEntry]) -> str:
        return self.get_base_form(request, word)

    def inflect_modal(self, request: InflectedRequest, word: Optional[WordEntry]) -> str:
        return self.get_base_form(request, word)

    def inflect_adjective(self, request: InflectedRequest, word: Optional[WordEntry]) -> str:
        return self.get_base_form(request, word)

    def inflect_adverb(self, request: InflectedRequest, word: Optional[WordEntry]) -> str:
        return self.get_base_form(request, word)

    def inflect_pronoun(self, request: InflectedRequest, word: Optional[WordEntry]) -> str:
        return self.get_base_form(request, word)

    def inflect_determiner(self, request: InflectedRequest, word: Optional[WordEntry]) -> str:
        return self.get_base_form(request, word)

    # List level ----------------------------------------------------------

    def post_process(self, items: List[Element]) -> List[Element]:
        """Adjust a list of realised siblings (contractions, articles, clitics)."""
        return items

    def regular_variants(self, entry: WordEntry) -> Iterable[str]:
        """Regular surface forms of `entry`, used to index the lexicon by variant."""
        return ()

    # Convenience wrapper -------------------------------------------------

    def inflect_simple(
        self,
        lemma: str,
        category: Category,
        features: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """
        Convenience method when only the surface string is needed.

        Example:
            engine.inflect_simple("jump", Category.VERB, {"form": "present_participle"})
        """
        return self.inflect(InflectedRequest(lemma, category, features)).text


# ---------------------------------------------------------------------------
# Engine registry and factory
# ---------------------------------------------------------------------------

ENGINE_REGISTRY: Dict[str, Type[MorphologyEngine]] = {}
"""
Global registry mapping language family name -> MorphologyEngine subclass.

Example keys: "germanic", "romance".
"""


def register_engine(family: str):
    """
    Class decorator to register a MorphologyEngine subclass under a
    family name.

    Usage:

        @register_engine("romance")
        class SpanishMorphology(MorphologyEngine):
            ...

    After registration, `create_engine("romance", "es", config)` will
    construct the appropriate engine instance.
    """

    def decorator(cls: Type[MorphologyEngine]) -> Type[MorphologyEngine]:
        if not issubclass(cls, MorphologyEngine):
            raise TypeError("Only MorphologyEngine subclasses can be registered")

        if family in ENGINE_REGISTRY:
            raise ValueError(f"Engine already registered for family '{family}'")

        ENGINE_REGISTRY[family] = cls
        cls.family = family  # type: ignore[attr-defined]
        return cls

    return decorator


def create_engine(
    family: str,
    language_code: str,
    config: Mapping[str, Any],
) -> MorphologyEngine:
    """
    Factory function to create a morphology engine for a given family.

    Raises:
        KeyError: if no engine is registered for the given family.
    """
    try:
        cls = ENGINE_REGISTRY[family]
    except KeyError as exc:
        raise KeyError(
            f"No morphology engine registered for family '{family}'"
        ) from exc

    return cls(language_code=language_code, config=config)


def list_registered_families() -> Dict[str, Type[MorphologyEngine]]:
    """
    Return a snapshot of the current engine registry.

    Mainly useful for debugging and introspection.
    """
    return dict(ENGINE_REGISTRY)


__all__ = [
    "SuffixRule",
    "add_suffix",
    "MorphologyError",
    "MorphologyEngine",
    "ENGINE_REGISTRY",
    "register_engine",
    "create_engine",
    "list_registered_families",
]
