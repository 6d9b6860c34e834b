# realizer/adapters/persistence/lexicon/index.py
"""
lexicon/index.py

In-memory index over a `LoadedLexicon`, implementing the `ILexicon` port.

- No filesystem knowledge (the loader handles I/O).
- Case-insensitive keys; an exact-case match is preferred when several
  entries share a key ("I" the pronoun, "i" the letter).
- First-writer-wins for ids; duplicates are logged.
- The variant index holds stored forms plus the regular forms the
  language strategy computes, so "is" or "saltando" find their entry.

The index is read-only once built and safe to share between threads.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from realizer.core.domain.features import Category
from realizer.core.domain.lexical import WordEntry
from realizer.core.domain.strategy import LanguageStrategy, get_strategy
from realizer.core.ports.lexicon_port import ILexicon

from .errors import LexemeNotFound
from .types import LoadedLexicon

logger = logging.getLogger(__name__)


def _key(value: str) -> str:
    return value.strip().casefold() if isinstance(value, str) else ""


def _matches(entry: WordEntry, category: Category) -> bool:
    return (
        category is Category.ANY
        or entry.category is category
        or entry.category is Category.ANY
    )


def _pick(candidates: Iterable[WordEntry], surface: str, category: Category) -> Optional[WordEntry]:
    first: Optional[WordEntry] = None
    for entry in candidates:
        if not _matches(entry, category):
            continue
        if entry.base_form == surface:
            return entry
        if first is None:
            first = entry
    return first


class JsonLexicon(ILexicon):
    """
    Lexicon backed by the JSON shards of one language.

    Args:
        data: Entries produced by `loader.load_lexicon`.
        strategy: Strategy to bind; defaults to the one registered for
            `data.language`.
        log_collisions: Log base forms defined by more than one entry.
    """

    def __init__(
        self,
        data: LoadedLexicon,
        strategy: Optional[LanguageStrategy] = None,
        *,
        log_collisions: bool = False,
    ) -> None:
        self._language = data.language
        self._strategy = strategy or get_strategy(data.language)
        self._log_collisions = log_collisions
        self._entries: List[WordEntry] = list(data.entries)

        self._by_base: Dict[str, List[WordEntry]] = {}
        self._by_id: Dict[str, WordEntry] = {}
        self._by_variant: Dict[str, List[WordEntry]] = {}
        self._build_indices()

    # ------------------------------------------------------------------
    # Index construction
    # ------------------------------------------------------------------

    def _build_indices(self) -> None:
        for entry in self._entries:
            base_key = _key(entry.base_form)
            bucket = self._by_base.setdefault(base_key, [])
            if bucket and self._log_collisions:
                logger.info(
                    "Base form '%s' defined by several entries in '%s' (ids: %s, %s).",
                    entry.base_form,
                    self._language,
                    bucket[0].id,
                    entry.id,
                )
            bucket.append(entry)

            if entry.id:
                if entry.id in self._by_id:
                    logger.warning(
                        "Duplicate lexicon id '%s' in '%s'; keeping the first entry ('%s').",
                        entry.id,
                        self._language,
                        self._by_id[entry.id].base_form,
                    )
                else:
                    self._by_id[entry.id] = entry

            for variant in self._strategy.regular_variants(entry):
                variant_key = _key(variant)
                if not variant_key or variant_key == base_key:
                    continue
                variants = self._by_variant.setdefault(variant_key, [])
                if entry not in variants:
                    variants.append(entry)

    # ------------------------------------------------------------------
    # ILexicon
    # ------------------------------------------------------------------

    @property
    def language(self) -> str:
        return self._language

    @property
    def strategy(self) -> LanguageStrategy:
        return self._strategy

    def lookup(self, base: str, category: Category = Category.ANY) -> Optional[WordEntry]:
        return _pick(self._by_base.get(_key(base), ()), base, category)

    def lookup_by_variant(self, surface: str, category: Category = Category.ANY) -> Optional[WordEntry]:
        return _pick(self._by_variant.get(_key(surface), ()), surface, category)

    def lookup_by_id(self, entry_id: str) -> Optional[WordEntry]:
        if not isinstance(entry_id, str):
            return None
        return self._by_id.get(entry_id.strip())

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def require(self, base: str, category: Category = Category.ANY) -> WordEntry:
        """
        Like `lookup`, but raises instead of returning None.

        Raises:
            LexemeNotFound
        """
        entry = self.lookup(base, category)
        if entry is None:
            pos = None if category is Category.ANY else category.value
            raise LexemeNotFound(self._language, base, pos)
        return entry

    def entries(self) -> List[WordEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"JsonLexicon(language={self._language!r}, entries={len(self._entries)})"


__all__ = ["JsonLexicon"]
