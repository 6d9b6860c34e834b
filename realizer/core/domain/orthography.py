# realizer/core/domain/orthography.py
"""
core/domain/orthography.py
==========================

Final pass: turn morphology output into strings.

Per sentence:
    1. Flatten the tree and join words with single spaces.
    2. In coordinations of three or more items, every conjunction except
       the last becomes a comma ("A, B and C").
    3. Strip leading commas and capitalise the first letter.
    4. Prepend the language's interrogative marker for questions ("¿").
    5. End with exactly one "?" or ".".

Paragraphs join their sentences with a space. Documents join paragraphs
with a blank line, after an optional title line. Anything that is not a
sentence is joined without capitalisation or punctuation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from .elements import (
    Document,
    DocumentElement,
    Element,
    InflectedRequest,
    Literal,
    Paragraph,
    Sentence,
    Sequence,
)
from .features import Category, Feature

if TYPE_CHECKING:  # pragma: no cover
    from .strategy.base import LanguageStrategy


_TERMINATORS = ".?"


class OrthographyProcessor:
    def __init__(self, strategy: "LanguageStrategy"):
        self.strategy = strategy

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def realise(self, element: Optional[Element]) -> str:
        if element is None:
            return ""
        if isinstance(element, Document):
            return self.realise_document(element)
        if isinstance(element, Paragraph):
            return self.realise_paragraph(element)
        if isinstance(element, Sentence):
            return self.realise_sentence(element)
        if isinstance(element, DocumentElement):
            return " ".join(t for t in (self.realise(c) for c in element.components) if t)
        return self.join(element)

    def realise_document(self, document: Document) -> str:
        blocks: List[str] = []
        loose: List[str] = []
        for component in document.components:
            if isinstance(component, Paragraph):
                if loose:
                    blocks.append(" ".join(loose))
                    loose = []
                text = self.realise_paragraph(component)
                if text:
                    blocks.append(text)
            else:
                text = self.realise(component)
                if text:
                    loose.append(text)
        if loose:
            blocks.append(" ".join(loose))
        body = "\n\n".join(blocks)
        if document.title:
            return f"{document.title}\n{body}" if body else document.title
        return body

    def realise_paragraph(self, paragraph: Paragraph) -> str:
        return " ".join(t for t in (self.realise(c) for c in paragraph.components) if t)

    def realise_sentence(self, sentence: Sentence) -> str:
        """Punctuate one sentence and cache the result on it."""
        text = " ".join(t for t in (self.join(c) for c in sentence.components) if t)
        text = text.lstrip(", ").strip()
        if not text:
            sentence.realisation = ""
            return ""

        interrogative = sentence.flag(Feature.INTERROGATIVE) or any(
            is_interrogative(c) for c in sentence.components
        )
        text = capitalise_first(text)
        marker = self.strategy.interrogative_marker
        if interrogative and marker and not text.startswith(marker):
            text = marker + text
        text = text.rstrip(_TERMINATORS + " ") + ("?" if interrogative else ".")
        sentence.realisation = text
        return text

    # ------------------------------------------------------------------
    # Joining
    # ------------------------------------------------------------------

    def join(self, element: Optional[Element]) -> str:
        """Plain space-joined text of a realised subtree."""
        tokens: List[str] = []
        self._collect(element, tokens)
        return " ".join(tokens).replace(" ,", ",")

    def _collect(self, element: Optional[Element], tokens: List[str]) -> None:
        if element is None:
            return
        if isinstance(element, Literal):
            if element.text:
                tokens.append(element.text)
        elif isinstance(element, InflectedRequest):
            # Morphology has not run on this subtree.
            tokens.append(element.base_form)
        elif isinstance(element, Sequence):
            items = element.items
            last = _last_conjunction(items) if element.coordination else None
            for index, item in enumerate(items):
                if element.coordination and _is_conjunction(item) and index != last:
                    tokens.append(",")
                else:
                    self._collect(item, tokens)
        elif isinstance(element, DocumentElement):
            for component in element.components:
                self._collect(component, tokens)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _is_conjunction(element: Element) -> bool:
    return isinstance(element, Literal) and element.category is Category.CONJUNCTION


def _last_conjunction(items: List[Element]) -> Optional[int]:
    for index in range(len(items) - 1, -1, -1):
        if _is_conjunction(items[index]):
            return index
    return None


def capitalise_first(text: str) -> str:
    if not text:
        return text
    return text[0].upper() + text[1:]


def is_interrogative(element: Element) -> bool:
    """A realised clause (or a coordination of clauses) that is a question."""
    if element.flag(Feature.INTERROGATIVE):
        return True
    if isinstance(element, Sequence) and element.coordination:
        return any(is_interrogative(item) for item in element.items)
    return False


__all__ = ["OrthographyProcessor", "capitalise_first", "is_interrogative"]
