# realizer/core/use_cases/realise_text.py
import time
from typing import Iterable, List, Optional

import structlog

from realizer.core.domain.elements import DocumentElement, Element, Literal, Sentence, Sequence
from realizer.core.domain.exceptions import DomainError, RealisationError
from realizer.core.domain.factory import PhraseFactory
from realizer.core.domain.lexical import WordResolver
from realizer.core.domain.models import Realisation
from realizer.core.domain.morphology.processor import MorphologyProcessor
from realizer.core.domain.orthography import OrthographyProcessor, is_interrogative
from realizer.core.domain.syntax.processor import SyntaxProcessor
from realizer.core.ports.lexicon_port import ILexicon

logger = structlog.get_logger()


class RealiseText:
    """
    Use Case: turns an element tree into text in the lexicon's language.

    Responsibilities:
    1. Runs syntax, morphology and orthography in order.
    2. Wraps a bare phrase in a sentence when sentence output is asked for.
    3. Logs each realisation and reports unexpected failures as domain errors.

    One instance holds no per-call state and may be reused, including from
    several threads.
    """

    def __init__(self, lexicon: ILexicon):
        # The lexicon fixes the language: its strategy drives every stage.
        self.lexicon = lexicon
        self.strategy = lexicon.strategy
        self.resolver = WordResolver(lexicon)
        self.factory = PhraseFactory(self.resolver)
        self.syntax = SyntaxProcessor(self.resolver)
        self.morphology = MorphologyProcessor(self.resolver)
        self.orthography = OrthographyProcessor(self.strategy)

    @property
    def language(self) -> str:
        return self.lexicon.language

    def realise_tree(self, element: Optional[Element]) -> Optional[Element]:
        """Syntax then morphology; the result holds only literals and sequences."""
        return self.morphology.realise(self.syntax.realise(element))

    def realise(self, element: Optional[Element]) -> str:
        """
        Realise any element. Document containers are punctuated, anything
        else is returned as plain space-joined words.
        """
        return self.orthography.realise(self.realise_tree(element))

    def realise_sentence(self, element: Optional[Element]) -> str:
        """Realise an element as a complete sentence ("The cat jumps.")."""
        if element is None:
            return ""
        if not isinstance(element, DocumentElement):
            element = Sentence([element])
        return self.realise(element)

    def execute(self, element: Element, *, as_sentence: bool = True) -> Realisation:
        """
        Executes the realisation and returns a result entity.

        Args:
            element: The tree to realise.
            as_sentence: Wrap non-document elements in a sentence.

        Returns:
            Realisation: text plus metadata.
        """
        logger.info("realisation_started", lang=self.language, element=type(element).__name__)
        start = time.perf_counter()
        try:
            if as_sentence and not isinstance(element, DocumentElement):
                element = Sentence([element])
            realised = self.realise_tree(element)
            text = self.orthography.realise(realised)
        except DomainError:
            raise
        except Exception as e:
            logger.error("realisation_failed", lang=self.language, error=str(e), exc_info=True)
            raise RealisationError(self.language, str(e)) from e

        elapsed_ms = (time.perf_counter() - start) * 1000.0
        interrogative = _is_question(realised)
        logger.info(
            "realisation_success",
            lang=self.language,
            text_preview=text[:50],
            interrogative=interrogative,
            generation_time_ms=round(elapsed_ms, 3),
        )
        return Realisation(
            text=text,
            lang_code=self.language,
            interrogative=interrogative,
            generation_time_ms=elapsed_ms,
            debug_info={
                "element": type(element).__name__,
                "word_count": _count_words(realised),
            },
        )

    def batch(self, elements: Iterable[Element], *, as_sentence: bool = True) -> List[Realisation]:
        """Realise several independent trees, in order."""
        results = [self.execute(e, as_sentence=as_sentence) for e in elements]
        logger.info("batch_realised", lang=self.language, count=len(results))
        return results


def _is_question(element: Optional[Element]) -> bool:
    if element is None:
        return False
    if isinstance(element, DocumentElement):
        return is_interrogative(element) or any(_is_question(c) for c in element.components)
    return is_interrogative(element)


def _count_words(element: Optional[Element]) -> int:
    if element is None:
        return 0
    if isinstance(element, Literal):
        return 1 if element.text else 0
    if isinstance(element, Sequence):
        return sum(_count_words(i) for i in element.items)
    if isinstance(element, DocumentElement):
        return sum(_count_words(c) for c in element.components)
    return 0
