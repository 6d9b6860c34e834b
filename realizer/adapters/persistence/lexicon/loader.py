# realizer/adapters/persistence/lexicon/loader.py
"""
lexicon/loader.py
=================

Load per-language lexicon shards from `<lexicon_dir>/{lang}/*.json`.

- Files are read in sorted filename order, so results are deterministic.
- Every file is validated against `schema.LexiconFile`.
- Every failure is fatal: a missing directory raises `LexiconNotFound`,
  bad JSON or a schema violation raises `LexiconSchemaError`.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

from realizer.core.domain.lexical import WordEntry

from .config import LexiconConfig, get_config
from .errors import LexiconNotFound, LexiconSchemaError
from .schema import parse_lexicon_file
from .types import LoadedLexicon, entries_from_schema

logger = logging.getLogger(__name__)


def _norm_lang(lang: str) -> str:
    if not isinstance(lang, str):
        return ""
    return lang.strip().casefold()


def language_dir(lang_code: str, config: Optional[LexiconConfig] = None) -> Path:
    """e.g. "es" -> <lexicon_dir>/es/"""
    cfg = config or get_config()
    return cfg.resolved_lexicon_dir() / _norm_lang(lang_code)


def available_languages(config: Optional[LexiconConfig] = None) -> List[str]:
    """Language codes that have a lexicon directory."""
    base = (config or get_config()).resolved_lexicon_dir()
    if not base.is_dir():
        return []
    return sorted(p.name for p in base.iterdir() if p.is_dir() and not p.name.startswith("."))


def _load_json_file(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise LexiconSchemaError(str(path), f"JSON decode error: {e}") from e
    except OSError as e:
        raise LexiconSchemaError(str(path), f"read error: {e}") from e


def load_lexicon(lang_code: str, config: Optional[LexiconConfig] = None) -> LoadedLexicon:
    """
    Load and validate every shard of a language.

    Raises:
        LexiconNotFound: no directory, or no JSON file in it.
        LexiconSchemaError: a file is not valid JSON or violates the schema.
    """
    lang = _norm_lang(lang_code)
    if not lang:
        raise LexiconNotFound(str(lang_code), "Language code must be a non-empty string.")

    directory = language_dir(lang, config)
    if not directory.is_dir():
        raise LexiconNotFound(lang, f"Lexicon directory for '{lang}' not found: {directory}")

    files = sorted(directory.glob("*.json"))
    if not files:
        raise LexiconNotFound(lang, f"No lexicon files for '{lang}' in {directory}")

    entries: List[WordEntry] = []
    for path in files:
        parsed = parse_lexicon_file(str(path), _load_json_file(path))
        declared = parsed.meta.language
        if declared and _norm_lang(declared) != lang:
            logger.warning(
                "Lexicon file %s declares language '%s' but is loaded for '%s'.",
                path.name,
                declared,
                lang,
            )
        entries.extend(entries_from_schema(parsed.entries))

    logger.info("Loaded %d lexicon entries for '%s' from %d file(s).", len(entries), lang, len(files))
    return LoadedLexicon(
        language=lang,
        entries=tuple(entries),
        sources=tuple(p.name for p in files),
    )


__all__ = ["language_dir", "available_languages", "load_lexicon"]
