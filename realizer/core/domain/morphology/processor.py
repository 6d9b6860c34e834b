# realizer/core/domain/morphology/processor.py
"""
morphology/processor.py

Walks the output of the syntax stage and turns every `InflectedRequest`
into a `Literal`.

Base words missing from a request are resolved through the lexicon here,
so the syntax stage can emit auxiliaries by base form alone ("be", "haber").
After each sequence is inflected, the engine's list-level pass runs over
its items (a/an, contractions, clitic placement).
"""

from __future__ import annotations

from typing import List, Optional

from ..elements import DocumentElement, Element, InflectedRequest, LexicalWord, Literal, Sequence
from ..features import Category
from ..lexical import WordEntry, WordResolver
from .base import MorphologyEngine


class MorphologyProcessor:
    def __init__(self, resolver: WordResolver):
        self.resolver = resolver
        self.engine: MorphologyEngine = resolver.strategy.morphology

    def realise(self, element: Optional[Element]) -> Optional[Element]:
        if element is None:
            return None
        if isinstance(element, InflectedRequest):
            return self.inflect(element)
        if isinstance(element, LexicalWord):
            return self.inflect(InflectedRequest.from_word(element))
        if isinstance(element, Sequence):
            items = self._realise_all(element.items)
            return Sequence(
                self.engine.post_process(items),
                element.features.copy(),
                coordination=element.coordination,
            )
        if isinstance(element, DocumentElement):
            return element.derive(None, components=self._realise_all(element.components))
        if isinstance(element, Literal):
            return element
        return element

    def _realise_all(self, elements: List[Element]) -> List[Element]:
        out: List[Element] = []
        for element in elements:
            realised = self.realise(element)
            if realised is not None:
                out.append(realised)
        return out

    def inflect(self, request: InflectedRequest) -> Literal:
        return self.engine.inflect(request, self._base_word(request))

    def _base_word(self, request: InflectedRequest) -> WordEntry:
        word = request.base_word
        if request.category is Category.MODAL:
            if word is None or word.provisional:
                word = self.resolver.resolve(request.base_form, Category.MODAL)
            if word.provisional:
                # Modals are often stored as plain verbs ("poder", "can").
                word = self.resolver.resolve(request.base_form, Category.VERB)
            return word
        if word is None:
            word = self.resolver.resolve(request.base_form, request.category)
        return word


__all__ = ["MorphologyProcessor"]
