# realizer/core/domain/factory.py
"""
core/domain/factory.py
======================

`PhraseFactory`: the builder API clients use to assemble element trees.

Every `create_*` method accepts either ready-made elements or plain
strings. Strings are resolved through the `WordResolver` in the category
the slot implies (a noun-phrase head is a noun, a specifier a determiner,
...). Unknown words become provisional entries, so building never fails
on vocabulary.

Example:

    factory = PhraseFactory(resolver)
    clause = factory.create_clause("the cat", "chase", "the mouse")
    clause.set_feature(Feature.TENSE, Tense.PAST)
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from .elements import (
    Clause,
    Coordination,
    Document,
    Element,
    LexicalWord,
    Literal,
    NounPhrase,
    Paragraph,
    PrepositionalPhrase,
    Sentence,
    VerbPhrase,
)
from .features import Category, DiscourseFunction, FeatureKey
from .lexical import WordEntry, WordResolver

Word = Union[str, Element, None]


class PhraseFactory:
    def __init__(self, resolver: WordResolver):
        self.resolver = resolver

    # ------------------------------------------------------------------
    # Words
    # ------------------------------------------------------------------

    def create_word(self, base: Union[str, WordEntry], category: Category = Category.ANY) -> LexicalWord:
        if isinstance(base, WordEntry):
            return LexicalWord(base)
        return LexicalWord(self.resolver.resolve(base, category))

    def create_literal(self, text: str, category: Optional[Category] = None) -> Literal:
        return Literal(text, category=category)

    def _word(self, value: Word, category: Category) -> Optional[Element]:
        if value is None or isinstance(value, Element):
            return value
        return self.create_word(value, category)

    def _noun(self, value: Word) -> Optional[Element]:
        """Noun head; falls back to any known word ("I", "ella") before going provisional."""
        if value is None or isinstance(value, Element):
            return value
        entry = self.resolver.resolve(value, Category.NOUN)
        if entry.provisional:
            known = self.resolver.resolve(value, Category.ANY)
            if not known.provisional:
                entry = known
        return LexicalWord(entry)

    # ------------------------------------------------------------------
    # Phrases
    # ------------------------------------------------------------------

    def create_noun_phrase(
        self,
        noun: Word = None,
        specifier: Word = None,
        features: Optional[Mapping[FeatureKey, Any]] = None,
    ) -> NounPhrase:
        """
        Noun phrase from a head and an optional specifier.

        A two-word string head ("the cat") is split into specifier and
        noun when no specifier is given.
        """
        if isinstance(noun, str) and specifier is None and " " in noun.strip():
            specifier, noun = noun.strip().split(None, 1)
        return NounPhrase(
            self._noun(noun),
            specifier=self._word(specifier, Category.DETERMINER),
            features=features,
        )

    def create_verb_phrase(
        self,
        verb: Word = None,
        features: Optional[Mapping[FeatureKey, Any]] = None,
    ) -> VerbPhrase:
        return VerbPhrase(self._word(verb, Category.VERB), features=features)

    def create_preposition_phrase(
        self,
        preposition: Word = None,
        complement: Word = None,
        features: Optional[Mapping[FeatureKey, Any]] = None,
    ) -> PrepositionalPhrase:
        phrase = PrepositionalPhrase(self._word(preposition, Category.PREPOSITION), features=features)
        if complement is not None:
            phrase.add_complement(self._as_noun_phrase(complement))
        return phrase

    def create_adjective(self, adjective: str) -> LexicalWord:
        return self.create_word(adjective, Category.ADJECTIVE)

    def create_adverb(self, adverb: str) -> LexicalWord:
        return self.create_word(adverb, Category.ADVERB)

    def _as_noun_phrase(self, value: Union[str, Element]) -> Element:
        if isinstance(value, Element):
            return value
        return self.create_noun_phrase(value)

    def create_clause(
        self,
        subject: Word = None,
        verb: Word = None,
        direct_object: Word = None,
        indirect_object: Word = None,
        features: Optional[Mapping[FeatureKey, Any]] = None,
    ) -> Clause:
        """Subject, verb, direct object and indirect object, each optional."""
        verb_phrase: Optional[Element] = None
        if isinstance(verb, (VerbPhrase, Coordination)) or verb is None:
            verb_phrase = verb
        elif isinstance(verb, Element):
            verb_phrase = VerbPhrase(verb)
        else:
            verb_phrase = self.create_verb_phrase(verb)

        subjects = [] if subject is None else [self._as_noun_phrase(subject)]
        clause = Clause(subjects, verb_phrase, features=features)
        if direct_object is not None:
            clause.add_complement(self._as_noun_phrase(direct_object), DiscourseFunction.OBJECT)
        if indirect_object is not None:
            clause.add_complement(self._as_noun_phrase(indirect_object), DiscourseFunction.INDIRECT_OBJECT)
        return clause

    def create_coordination(
        self,
        *coordinates: Union[str, Element],
        conjunction: Optional[str] = None,
        features: Optional[Mapping[FeatureKey, Any]] = None,
    ) -> Coordination:
        return Coordination(
            [self._as_noun_phrase(c) for c in coordinates],
            conjunction,
            features=features,
        )

    # ------------------------------------------------------------------
    # Document structure
    # ------------------------------------------------------------------

    def create_sentence(
        self,
        *components: Union[str, Element],
        features: Optional[Mapping[FeatureKey, Any]] = None,
    ) -> Sentence:
        return Sentence([self._component(c) for c in components], features=features)

    def create_paragraph(self, *sentences: Element) -> Paragraph:
        return Paragraph(sentences)

    def create_document(self, *components: Element, title: Optional[str] = None) -> Document:
        return Document(components, title=title)

    @staticmethod
    def _component(value: Union[str, Element]) -> Element:
        return Literal(value) if isinstance(value, str) else value


__all__ = ["PhraseFactory"]
