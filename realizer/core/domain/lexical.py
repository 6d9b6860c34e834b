# realizer/core/domain/lexical.py
"""
core/domain/lexical.py
======================

Word entries and word resolution.

A `WordEntry` is the immutable view of one lexeme: base form, category,
canonical spelling, baseline features and stored variant forms. Entries
are shared between every tree that mentions the word, so nothing in the
pipeline may mutate them; refinements (pronoun inference) build a new
entry instead.

`WordResolver` turns `(base, category)` into an entry using the lexicon
port and falls back to a provisional entry when the lexicon has nothing.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping, Optional

from .features import Category, FeatureKey, FeatureStore, NumberAgreement, Person

if TYPE_CHECKING:  # pragma: no cover
    from ..ports.lexicon_port import ILexicon


# ---------------------------------------------------------------------------
# Stored variant keys
# ---------------------------------------------------------------------------


class FormKey(str, Enum):
    PLURAL = "plural"
    PAST = "past"
    PAST_PARTICIPLE = "past_participle"
    PRESENT_PARTICIPLE = "present_participle"
    PRESENT3S = "present3s"
    COMPARATIVE = "comparative"
    SUPERLATIVE = "superlative"
    FEMININE_SINGULAR = "feminine_singular"
    FEMININE_PLURAL = "feminine_plural"
    SUPERLATIVE_PLURAL = "superlative_plural"
    SUPERLATIVE_FEMININE_SINGULAR = "superlative_feminine_singular"
    SUPERLATIVE_FEMININE_PLURAL = "superlative_feminine_plural"
    PAST_PARTICIPLE_PLURAL = "past_participle_plural"
    PAST_PARTICIPLE_FEMININE_SINGULAR = "past_participle_feminine_singular"
    PAST_PARTICIPLE_FEMININE_PLURAL = "past_participle_feminine_plural"
    IMPERSONAL = "impersonal"


_PERSON_DIGITS = {Person.FIRST: "1", Person.SECOND: "2", Person.THIRD: "3"}


def paradigm_key(prefix: str, person: Optional[Person], number: Optional[NumberAgreement]) -> str:
    """
    Key of a stored paradigm cell, e.g. ("present", FIRST, SINGULAR) -> "present1s".

    Unset person means third, unset number means singular.
    """
    digit = _PERSON_DIGITS.get(person or Person.THIRD, "3")
    suffix = "p" if number is NumberAgreement.PLURAL else "s"
    return f"{prefix}{digit}{suffix}"


# ---------------------------------------------------------------------------
# Word entry
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class WordEntry:
    """
    One lexeme as the realizer sees it.

    Fields:
        base_form:
            Citation form ("be", "gato", "saltar").
        category:
            Lexical category.
        id:
            Stable lexicon identifier, if the entry came from a lexicon file.
        spelling_variant:
            Canonical spelling; defaults to `base_form`.
        features:
            Frozen baseline features (gender, proper, copular, ...).
        forms:
            Stored surface variants keyed by form name ("plural", "past",
            "present1s", ...). Checked before any rule-based inflection.
        provisional:
            True when the entry was synthesized on a lookup miss.
    """

    base_form: str
    category: Category
    id: Optional[str] = None
    spelling_variant: Optional[str] = None
    features: FeatureStore = field(default_factory=lambda: FeatureStore(frozen=True))
    forms: Mapping[str, str] = field(default_factory=dict)
    provisional: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.base_form, str) or not self.base_form:
            raise ValueError("WordEntry.base_form must be a non-empty string")
        if not self.features.frozen:
            object.__setattr__(self, "features", self.features.copy(frozen=True))
        if not isinstance(self.forms, MappingProxyType):
            object.__setattr__(self, "forms", MappingProxyType(dict(self.forms)))

    @property
    def default_spelling(self) -> str:
        return self.spelling_variant or self.base_form

    def form(self, key: "FormKey | str") -> Optional[str]:
        name = key.value if isinstance(key, FormKey) else key
        return self.forms.get(name)

    def get(self, key: FeatureKey, default: Any = None) -> Any:
        return self.features.get(key, default)

    def flag(self, key: FeatureKey) -> bool:
        return self.features.flag(key)

    def with_features(self, **overrides: Any) -> "WordEntry":
        """Return a new entry with extra baseline features (keys are feature names)."""
        return replace(
            self,
            features=self.features.merged(overrides).copy(frozen=True),
        )


def provisional_word(base: str, category: Category) -> WordEntry:
    """Minimal entry for a word the lexicon does not know."""
    return WordEntry(base_form=base, category=category, provisional=True)


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


class WordResolver:
    """
    Resolve words against a lexicon: base form, then variant, then id,
    then a provisional entry. Pronoun inference is delegated to the
    lexicon's language strategy.
    """

    def __init__(self, lexicon: "ILexicon"):
        self.lexicon = lexicon
        self.strategy = lexicon.strategy

    def resolve(self, base: str, category: Category = Category.ANY) -> WordEntry:
        entry = self._lookup(base, category)
        if entry is None:
            entry = provisional_word(base, category)
        return self.strategy.refine_entry(entry)

    def _lookup(self, base: str, category: Category) -> Optional[WordEntry]:
        lex = self.lexicon
        if category is Category.NOUN and self.strategy.noun_pronoun_aliasing:
            pronoun = lex.lookup(base, Category.PRONOUN)
            if pronoun is not None:
                return pronoun

        entry = lex.lookup(base, category)
        if entry is None:
            entry = lex.lookup_by_variant(base, category)
        if entry is None:
            entry = lex.lookup_by_id(base)
        return entry


__all__ = [
    "FormKey",
    "paradigm_key",
    "WordEntry",
    "provisional_word",
    "WordResolver",
]
