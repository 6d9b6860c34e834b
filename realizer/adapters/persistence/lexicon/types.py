# realizer/adapters/persistence/lexicon/types.py
"""
lexicon/types.py
================

Runtime data produced by the loader.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from realizer.core.domain.features import FeatureStore
from realizer.core.domain.lexical import WordEntry

from .schema import EntrySchema


@dataclass(frozen=True)
class LoadedLexicon:
    """
    All entries of one language, in file order then entry order.

    Fields:
        language:
            Normalised language code.
        entries:
            Word entries; duplicates are kept and resolved by the index.
        sources:
            File names the entries were read from, in load order.
    """

    language: str
    entries: Tuple[WordEntry, ...] = ()
    sources: Tuple[str, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.entries)


def entry_from_schema(entry_id: str, raw: EntrySchema) -> WordEntry:
    return WordEntry(
        base_form=raw.lemma,
        category=raw.pos,
        id=entry_id,
        spelling_variant=raw.spelling,
        features=FeatureStore(raw.features, frozen=True),
        forms=dict(raw.forms),
    )


def entries_from_schema(entries: "dict[str, EntrySchema]") -> List[WordEntry]:
    return [entry_from_schema(entry_id, raw) for entry_id, raw in entries.items()]


__all__ = ["LoadedLexicon", "entry_from_schema", "entries_from_schema"]
