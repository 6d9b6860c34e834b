# realizer/core/ports/lexicon_port.py
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from realizer.core.domain.features import Category
from realizer.core.domain.lexical import WordEntry

if TYPE_CHECKING:  # pragma: no cover
    from realizer.core.domain.strategy.base import LanguageStrategy


class ILexicon(ABC):
    """
    Interface (Port) for resolving words against a loaded lexicon.

    Implementations are read-only once constructed and may be shared
    between concurrent realisations.
    """

    @property
    @abstractmethod
    def language(self) -> str:
        """Language code the lexicon was loaded for (e.g. 'en')."""

    @property
    @abstractmethod
    def strategy(self) -> "LanguageStrategy":
        """Language strategy bound to this lexicon at construction time."""

    @abstractmethod
    def lookup(self, base: str, category: Category = Category.ANY) -> Optional[WordEntry]:
        """First entry with this base form (and category, unless ANY)."""

    @abstractmethod
    def lookup_by_variant(self, surface: str, category: Category = Category.ANY) -> Optional[WordEntry]:
        """First entry that has `surface` as a stored or regular variant."""

    @abstractmethod
    def lookup_by_id(self, entry_id: str) -> Optional[WordEntry]:
        """Entry with this lexicon id."""

    def has(self, base: str, category: Category = Category.ANY) -> bool:
        return self.lookup(base, category) is not None
