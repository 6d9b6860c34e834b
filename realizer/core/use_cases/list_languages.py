# realizer/core/use_cases/list_languages.py
from typing import Iterable, List

import structlog

from realizer.core.domain.models import LanguageInfo
from realizer.core.domain.strategy import list_strategies

logger = structlog.get_logger()


class ListLanguages:
    """
    Use Case: languages the realizer can produce text in.

    A language is listed when a strategy is registered for it and a lexicon
    is available for it.
    """

    def __init__(self, lexicon_languages: Iterable[str]):
        self.lexicon_languages = {code.casefold() for code in lexicon_languages}

    def execute(self) -> List[LanguageInfo]:
        languages = [
            LanguageInfo(
                code=code,
                strategy=cls.__name__,
                morphology_family=cls.morphology_family,
            )
            for code, cls in sorted(list_strategies().items())
            if code in self.lexicon_languages
        ]
        logger.info("languages_listed", count=len(languages))
        return languages
