# realizer/core/domain/elements.py
"""
core/domain/elements.py
=======================

The element tree: every node the pipeline reads or produces.

Node kinds
----------
- Literal           fixed surface text, never re-inflected
- LexicalWord       shared, read-only reference to a lexicon entry
- InflectedRequest  base form + requested features, resolved by morphology
- Sequence          ordered children without phrase semantics
- Phrase            NounPhrase / VerbPhrase / PrepositionalPhrase / Clause
- Coordination      coordinates joined by a conjunction
- Document, Paragraph, Sentence   root containers

Realisation never edits an input node. Rule code calls `derive()` to get a
shallow copy with overlaid features (and, optionally, replaced slots), so
the same tree can be realised any number of times with the same result.
"""

from __future__ import annotations

import copy
from enum import Enum
from typing import Any, Iterable, List, Mapping, Optional

from .exceptions import InvalidElementError
from .features import (
    Category,
    DiscourseFunction,
    Feature,
    FeatureKey,
    FeatureStore,
)
from .lexical import WordEntry


class PhraseKind(str, Enum):
    NOUN_PHRASE = "noun_phrase"
    VERB_PHRASE = "verb_phrase"
    PREPOSITIONAL_PHRASE = "prepositional_phrase"
    CLAUSE = "clause"


# ---------------------------------------------------------------------------
# Base node
# ---------------------------------------------------------------------------


class Element:
    """Base class of all tree nodes: a feature store plus helpers."""

    def __init__(self, features: Optional[Mapping[FeatureKey, Any]] = None):
        if isinstance(features, FeatureStore):
            self.features = features
        else:
            self.features = FeatureStore(features)

    @property
    def category(self) -> Any:
        return None

    @property
    def discourse_function(self) -> Optional[DiscourseFunction]:
        return self.features.get(Feature.DISCOURSE_FUNCTION)

    def get(self, key: FeatureKey, default: Any = None) -> Any:
        return self.features.get(key, default)

    def flag(self, key: FeatureKey) -> bool:
        return self.features.flag(key)

    def set_feature(self, key: FeatureKey, value: Any) -> "Element":
        self.features.set(key, value)
        return self

    def derive(
        self,
        overrides: Optional[Mapping[FeatureKey, Any]] = None,
        **slots: Any,
    ) -> "Element":
        """
        Shallow copy with `overrides` merged into a fresh feature store and
        the given attributes replaced. The original node is left untouched.
        """
        clone = copy.copy(self)
        clone.features = self.features.merged(overrides or {})
        for name, value in slots.items():
            if not hasattr(clone, name):
                raise AttributeError(f"{type(self).__name__} has no slot '{name}'")
            setattr(clone, name, value)
        return clone


def _check(element: Any, role: str) -> Optional[Element]:
    if element is None or isinstance(element, Element):
        return element
    raise InvalidElementError(f"{role} must be an Element, got {type(element).__name__}")


def _check_all(elements: Optional[Iterable[Any]], role: str) -> List[Element]:
    out: List[Element] = []
    for el in elements or ():
        checked = _check(el, role)
        if checked is not None:
            out.append(checked)
    return out


# ---------------------------------------------------------------------------
# Leaves
# ---------------------------------------------------------------------------


class Literal(Element):
    """Fixed surface text. Morphology passes it through untouched."""

    def __init__(
        self,
        text: str,
        category: Optional[Category] = None,
        features: Optional[Mapping[FeatureKey, Any]] = None,
    ):
        super().__init__(features)
        self.text = text
        self._category = category

    @property
    def category(self) -> Optional[Category]:
        return self._category

    def __repr__(self) -> str:
        return f"Literal({self.text!r})"


class LexicalWord(Element):
    """Shared reference to a lexicon entry. Its features are the entry's frozen baseline."""

    def __init__(self, entry: WordEntry):
        super().__init__(entry.features)
        self.entry = entry

    @property
    def category(self) -> Category:
        return self.entry.category

    @property
    def base_form(self) -> str:
        return self.entry.base_form

    def derive(
        self,
        overrides: Optional[Mapping[FeatureKey, Any]] = None,
        **slots: Any,
    ) -> "InflectedRequest":
        # Words never change; a derived word is a fresh inflection request.
        return InflectedRequest.from_word(self, overrides).derive(None, **slots)

    def __repr__(self) -> str:
        return f"LexicalWord({self.entry.base_form!r}, {self.entry.category.value})"


class InflectedRequest(Element):
    """
    A word waiting for morphology.

    `features` holds the requested inflection. `base_word` links back to
    the lexicon entry for stored variants and baseline features.
    `agreement` carries the gender/number of the governing noun phrase for
    determiners, adjectives and possessive pronouns.
    """

    def __init__(
        self,
        base_form: str,
        category: Category,
        features: Optional[Mapping[FeatureKey, Any]] = None,
        base_word: Optional[WordEntry] = None,
        agreement: Optional[FeatureStore] = None,
    ):
        super().__init__(features)
        self.base_form = base_form
        self._category = category
        self.base_word = base_word
        self.agreement = agreement

    @classmethod
    def from_word(
        cls,
        word: "LexicalWord | WordEntry",
        features: Optional[Mapping[FeatureKey, Any]] = None,
    ) -> "InflectedRequest":
        entry = word.entry if isinstance(word, LexicalWord) else word
        return cls(entry.base_form, entry.category, features, base_word=entry)

    @property
    def category(self) -> Category:
        return self._category

    def lexical(self, key: FeatureKey, default: Any = None) -> Any:
        """Requested value if set, else the base word's baseline value."""
        if self.features.is_set(key):
            return self.features.get(key)
        if self.base_word is not None:
            return self.base_word.get(key, default)
        return default

    def __repr__(self) -> str:
        return f"InflectedRequest({self.base_form!r}, {self._category.value}, {self.features!r})"


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------


class Sequence(Element):
    """Ordered output children. `coordination` marks the output of a Coordination."""

    def __init__(
        self,
        items: Optional[Iterable[Optional[Element]]] = None,
        features: Optional[Mapping[FeatureKey, Any]] = None,
        *,
        coordination: bool = False,
    ):
        super().__init__(features)
        self.items: List[Element] = [i for i in (items or ()) if i is not None]
        self.coordination = coordination

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __repr__(self) -> str:
        return f"Sequence({self.items!r})"


class Phrase(Element):
    """Head + specifier + modifiers + complements, plus the phrase features."""

    kind: PhraseKind

    def __init__(
        self,
        head: Optional[Element] = None,
        *,
        specifier: Optional[Element] = None,
        pre_modifiers: Optional[Iterable[Element]] = None,
        post_modifiers: Optional[Iterable[Element]] = None,
        complements: Optional[Iterable[Element]] = None,
        features: Optional[Mapping[FeatureKey, Any]] = None,
    ):
        super().__init__(features)
        self.head = _check(head, "head")
        self.specifier = _check(specifier, "specifier")
        self.pre_modifiers: List[Element] = _check_all(pre_modifiers, "pre-modifier")
        self.post_modifiers: List[Element] = _check_all(post_modifiers, "post-modifier")
        self.complements: List[Element] = _check_all(complements, "complement")

    @property
    def category(self) -> PhraseKind:
        return self.kind

    # Builder helpers ------------------------------------------------------

    def add_complement(
        self,
        element: Element,
        role: Optional[DiscourseFunction] = None,
    ) -> "Phrase":
        element = _check(element, "complement")
        if role is not None:
            element = _tag(element, role)
        self.complements.append(element)
        return self

    def add_pre_modifier(self, element: Element) -> "Phrase":
        self.pre_modifiers.append(_check(element, "pre-modifier"))
        return self

    def add_post_modifier(self, element: Element) -> "Phrase":
        self.post_modifiers.append(_check(element, "post-modifier"))
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}(head={self.head!r}, features={self.features!r})"


def _tag(element: Element, role: DiscourseFunction) -> Element:
    if isinstance(element, LexicalWord):
        return element.derive({Feature.DISCOURSE_FUNCTION: role})
    element.features.set(Feature.DISCOURSE_FUNCTION, role)
    return element


class NounPhrase(Phrase):
    kind = PhraseKind.NOUN_PHRASE


class VerbPhrase(Phrase):
    kind = PhraseKind.VERB_PHRASE


class PrepositionalPhrase(Phrase):
    kind = PhraseKind.PREPOSITIONAL_PHRASE


class Clause(Phrase):
    """
    Subjects + verb phrase + front modifiers.

    Complements added to a clause are forwarded to its verb phrase, the
    place they are realised from.
    """

    kind = PhraseKind.CLAUSE

    def __init__(
        self,
        subjects: Optional[Iterable[Element]] = None,
        verb_phrase: Optional[Element] = None,
        *,
        front_modifiers: Optional[Iterable[Element]] = None,
        pre_modifiers: Optional[Iterable[Element]] = None,
        post_modifiers: Optional[Iterable[Element]] = None,
        features: Optional[Mapping[FeatureKey, Any]] = None,
    ):
        super().__init__(
            None,
            pre_modifiers=pre_modifiers,
            post_modifiers=post_modifiers,
            features=features,
        )
        self.subjects: List[Element] = [
            _tag(s, DiscourseFunction.SUBJECT) for s in _check_all(subjects, "subject")
        ]
        self.verb_phrase = _check(verb_phrase, "verb phrase")
        self.front_modifiers: List[Element] = _check_all(front_modifiers, "front modifier")

    def add_subject(self, element: Element) -> "Clause":
        self.subjects.append(_tag(_check(element, "subject"), DiscourseFunction.SUBJECT))
        return self

    def add_front_modifier(self, element: Element) -> "Clause":
        self.front_modifiers.append(_check(element, "front modifier"))
        return self

    def add_complement(
        self,
        element: Element,
        role: Optional[DiscourseFunction] = None,
    ) -> "Clause":
        if isinstance(self.verb_phrase, Phrase):
            self.verb_phrase.add_complement(element, role)
        else:
            super().add_complement(element, role)
        return self


class Coordination(Element):
    """
    Coordinates realised independently and joined by `conjunction`
    (None means the language default).
    """

    def __init__(
        self,
        coordinates: Optional[Iterable[Element]] = None,
        conjunction: Optional[str] = None,
        *,
        pre_modifiers: Optional[Iterable[Element]] = None,
        post_modifiers: Optional[Iterable[Element]] = None,
        complements: Optional[Iterable[Element]] = None,
        features: Optional[Mapping[FeatureKey, Any]] = None,
    ):
        super().__init__(features)
        self.coordinates: List[Element] = _check_all(coordinates, "coordinate")
        self.conjunction = conjunction
        self.pre_modifiers: List[Element] = _check_all(pre_modifiers, "pre-modifier")
        self.post_modifiers: List[Element] = _check_all(post_modifiers, "post-modifier")
        self.complements: List[Element] = _check_all(complements, "complement")

    def add_coordinate(self, element: Element) -> "Coordination":
        self.coordinates.append(_check(element, "coordinate"))
        return self

    def __repr__(self) -> str:
        return f"Coordination({self.coordinates!r}, conjunction={self.conjunction!r})"


# ---------------------------------------------------------------------------
# Document structure
# ---------------------------------------------------------------------------


class DocumentElement(Element):
    """Common base of the root containers."""

    def __init__(
        self,
        components: Optional[Iterable[Element]] = None,
        features: Optional[Mapping[FeatureKey, Any]] = None,
    ):
        super().__init__(features)
        self.components: List[Element] = _check_all(components, "component")

    def add_component(self, element: Element) -> "DocumentElement":
        self.components.append(_check(element, "component"))
        return self


class Document(DocumentElement):
    def __init__(
        self,
        components: Optional[Iterable[Element]] = None,
        title: Optional[str] = None,
        features: Optional[Mapping[FeatureKey, Any]] = None,
    ):
        super().__init__(components, features)
        self.title = title


class Paragraph(DocumentElement):
    pass


class Sentence(DocumentElement):
    """A sentence; `realisation` is filled in on the realised copy."""

    def __init__(
        self,
        components: Optional[Iterable[Element]] = None,
        features: Optional[Mapping[FeatureKey, Any]] = None,
        realisation: Optional[str] = None,
    ):
        super().__init__(components, features)
        self.realisation = realisation


__all__ = [
    "PhraseKind",
    "Element",
    "Literal",
    "LexicalWord",
    "InflectedRequest",
    "Sequence",
    "Phrase",
    "NounPhrase",
    "VerbPhrase",
    "PrepositionalPhrase",
    "Clause",
    "Coordination",
    "DocumentElement",
    "Document",
    "Paragraph",
    "Sentence",
]
