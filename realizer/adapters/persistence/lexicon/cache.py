# realizer/adapters/persistence/lexicon/cache.py
"""
Loaded lexicons, kept per language.

The first request for a language reads its shards under a lock; later
requests share the same JsonLexicon. A language whose load raised is not
remembered, so the next request retries. With `cache_enabled` off every
request reads from disk.
"""

from __future__ import annotations

import threading
from typing import Dict, Iterable, List, Optional

from .config import get_config
from .index import JsonLexicon
from .loader import load_lexicon

_loaded: Dict[str, JsonLexicon] = {}
_lock = threading.RLock()


def _key(lang: str) -> str:
    key = lang.strip().casefold() if isinstance(lang, str) else ""
    if not key:
        raise ValueError("Language code must be a non-empty string.")
    return key


def build_lexicon(lang: str) -> JsonLexicon:
    """Read a lexicon from disk, bypassing the cache."""
    cfg = get_config()
    return JsonLexicon(load_lexicon(lang, cfg), log_collisions=cfg.log_collisions)


def get_lexicon(lang: str) -> JsonLexicon:
    """
    Lexicon for `lang`, loaded on first use.

    Raises:
        ValueError: blank language code.
        LexiconNotFound, LexiconSchemaError: the shards could not be loaded.
    """
    key = _key(lang)
    if not get_config().cache_enabled:
        return build_lexicon(key)

    lexicon = _loaded.get(key)
    if lexicon is not None:
        return lexicon

    with _lock:
        lexicon = _loaded.get(key)
        if lexicon is None:
            lexicon = build_lexicon(key)
            _loaded[key] = lexicon
        return lexicon


def clear_cache(lang: Optional[str] = None) -> None:
    """Forget one language, or all of them."""
    with _lock:
        if lang is None:
            _loaded.clear()
        else:
            _loaded.pop(_key(lang), None)


def cached_languages() -> List[str]:
    with _lock:
        return sorted(_loaded)


def preload_languages(langs: Iterable[str]) -> None:
    """Load several lexicons eagerly; the first failure propagates."""
    for lang in langs:
        if str(lang).strip():
            get_lexicon(str(lang))


__all__ = [
    "build_lexicon",
    "get_lexicon",
    "clear_cache",
    "cached_languages",
    "preload_languages",
]
