# realizer/core/domain/strategy/base.py
"""
strategy/base.py

The capability set every supported language implements.

A strategy is chosen once, when the lexicon is built, and is handed to
every processor explicitly. It bundles:
- closed word tables (pronouns, interrogative keywords, conjunctions,
  copulas, negation particle, complementiser, passive preposition);
- the language's morphology engine;
- the language-specific pieces of syntax (auxiliary chain, indirect
  objects, interrogative inversion, split-verb placement);
- orthography hooks (interrogative opening mark).

The syntax, morphology and orthography processors are otherwise
language-agnostic.
"""

from __future__ import annotations

import abc
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple, Type

from ..elements import Clause, Coordination, Element, InflectedRequest, LexicalWord
from ..exceptions import LanguageNotFoundError
from ..features import (
    Category,
    Feature,
    FeatureStore,
    Gender,
    InterrogativeType,
    NumberAgreement,
    Person,
)
from ..lexical import WordEntry
from ..morphology.base import MorphologyEngine, create_engine
from ..syntax.verb_group import VerbGroupSpec, slot_base


class LanguageStrategy(abc.ABC):
    """Base class for per-language strategies; see module docstring."""

    #: Language code, populated when the class is registered.
    language: str

    #: Morphology family registered in `morphology.base.ENGINE_REGISTRY`.
    morphology_family: str

    default_conjunction: str
    plural_conjunctions: FrozenSet[str] = frozenset()
    complementiser: str
    passive_preposition: str
    negation_particle: str
    copulas: FrozenSet[str] = frozenset()
    interrogative_words: Mapping[InterrogativeType, str] = {}

    #: Opening mark for questions ("¿"), if the language has one.
    interrogative_marker: Optional[str] = None

    #: Noun lookups that hit a same-spelled pronoun return the pronoun.
    noun_pronoun_aliasing: bool = False

    #: Questions without an auxiliary get a dummy "do".
    do_support: bool = False

    #: Preposition fronted for WHO_INDIRECT_OBJECT questions.
    indirect_object_preposition: Optional[str] = None

    #: Extra surface forms indexed for a base form (English "be" -> "is", ...).
    variant_aliases: Mapping[str, Tuple[str, ...]] = {}

    #: Closed pronoun list: base form -> features inferred for it.
    pronoun_inference: Mapping[str, Mapping[str, Any]] = {}

    morphology_config: Mapping[str, Any] = {}

    def __init__(self) -> None:
        self.morphology: MorphologyEngine = create_engine(
            self.morphology_family, self.language, self.morphology_config
        )

    # ------------------------------------------------------------------
    # Lexicon hooks
    # ------------------------------------------------------------------

    def refine_entry(self, entry: WordEntry) -> WordEntry:
        """
        Fill in pronoun features the lexicon left out.

        Only pronouns listed in `pronoun_inference` are touched, and only
        features the entry does not already carry are added. A new entry is
        returned; the shared one is left as it is.
        """
        if entry.category not in (Category.PRONOUN, Category.ANY):
            return entry
        inferred = self.pronoun_inference.get(entry.base_form.casefold())
        if not inferred:
            return entry
        missing = {
            name: value
            for name, value in inferred.items()
            if not entry.features.is_set(name)
        }
        if not missing:
            return entry
        return entry.with_features(**missing)

    def regular_variants(self, entry: WordEntry) -> Iterable[str]:
        yield from entry.forms.values()
        yield from self.variant_aliases.get(entry.base_form, ())
        yield from self.morphology.regular_variants(entry)

    # ------------------------------------------------------------------
    # Pronouns
    # ------------------------------------------------------------------

    @abc.abstractmethod
    def pronoun_base(self, person: Optional[Person], gender: Optional[Gender]) -> str:
        """Base form used when a noun phrase is pronominalised."""

    def reflexive_pronoun(
        self,
        person: Optional[Person],
        number: Optional[NumberAgreement],
    ) -> Optional[InflectedRequest]:
        """Pronoun slot for reflexive verb groups, if the language has them."""
        return None

    # ------------------------------------------------------------------
    # Verb group
    # ------------------------------------------------------------------

    @abc.abstractmethod
    def build_verb_group(self, spec: VerbGroupSpec) -> List[Element]:
        """Auxiliary chain as a stack, innermost verb first."""

    def is_copular(self, element: Optional[Element]) -> bool:
        if element is None or isinstance(element, Coordination):
            return False
        if isinstance(element, LexicalWord) and element.entry.flag(Feature.COPULAR):
            return True
        if isinstance(element, InflectedRequest) and element.base_word is not None:
            if element.base_word.flag(Feature.COPULAR):
                return True
        return slot_base(element) in self.copulas

    # ------------------------------------------------------------------
    # Phrase and clause hooks
    # ------------------------------------------------------------------

    def wrap_indirect_object(self, element: Element) -> Element:
        return element

    def noun_post_modifier(self, element: Element, agreement: FeatureStore) -> Element:
        return element

    def adjust_agreement(
        self,
        clause: Clause,
        verb_head: Optional[Element],
        number: Optional[NumberAgreement],
        person: Optional[Person],
    ) -> Tuple[Optional[NumberAgreement], Optional[Person]]:
        """Language-specific corrections to the subject agreement of a clause."""
        return number, person

    def mood_overrides(self, clause: Clause) -> Dict[Feature, Any]:
        """Feature changes a clause receives because of its discourse function."""
        return {}

    def needs_do_support(self, features: FeatureStore, copular: bool, yes_no: bool) -> bool:
        return False

    @abc.abstractmethod
    def insert_split_verb(
        self,
        items: List[Element],
        split: Element,
        interrogative_type: Optional[InterrogativeType],
    ) -> List[Element]:
        """Place inverted subjects inside the realised verb phrase."""

    # ------------------------------------------------------------------
    # Coordination
    # ------------------------------------------------------------------

    def is_plural_conjunction(self, conjunction: Optional[str]) -> bool:
        return (conjunction or self.default_conjunction) in self.plural_conjunctions

    def coordination_number(self, conjunction: Optional[str], count: int) -> NumberAgreement:
        if count > 1 and self.is_plural_conjunction(conjunction):
            return NumberAgreement.PLURAL
        return NumberAgreement.SINGULAR

    def interrogative_word(self, itype: InterrogativeType) -> str:
        return self.interrogative_words.get(itype, "")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(language={self.language!r})"


# ---------------------------------------------------------------------------
# Strategy registry
# ---------------------------------------------------------------------------

STRATEGY_REGISTRY: Dict[str, Type[LanguageStrategy]] = {}
"""Global registry mapping language code -> LanguageStrategy subclass."""

_INSTANCES: Dict[str, LanguageStrategy] = {}


def register_strategy(language: str):
    """
    Class decorator to register a LanguageStrategy subclass under a
    language code.

    Usage:

        @register_strategy("es")
        class SpanishStrategy(LanguageStrategy):
            ...
    """

    def decorator(cls: Type[LanguageStrategy]) -> Type[LanguageStrategy]:
        if not issubclass(cls, LanguageStrategy):
            raise TypeError("Only LanguageStrategy subclasses can be registered")

        if language in STRATEGY_REGISTRY:
            raise ValueError(f"Strategy already registered for language '{language}'")

        STRATEGY_REGISTRY[language] = cls
        cls.language = language  # type: ignore[attr-defined]
        return cls

    return decorator


def get_strategy(language: str) -> LanguageStrategy:
    """
    Shared strategy instance for a language code.

    Raises:
        LanguageNotFoundError: if no strategy is registered for the code.
    """
    code = (language or "").strip().casefold()
    instance = _INSTANCES.get(code)
    if instance is not None:
        return instance
    try:
        cls = STRATEGY_REGISTRY[code]
    except KeyError as exc:
        raise LanguageNotFoundError(language) from exc
    instance = cls()
    _INSTANCES[code] = instance
    return instance


def list_strategies() -> Dict[str, Type[LanguageStrategy]]:
    """Snapshot of the registry, for introspection."""
    return dict(STRATEGY_REGISTRY)


__all__ = [
    "LanguageStrategy",
    "STRATEGY_REGISTRY",
    "register_strategy",
    "get_strategy",
    "list_strategies",
]
