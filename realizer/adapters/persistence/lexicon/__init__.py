# realizer/adapters/persistence/lexicon/__init__.py
"""
lexicon/__init__.py
-------------------

Public entrypoint for the JSON lexicon adapter:

    from realizer.adapters.persistence.lexicon import get_lexicon

    lexicon = get_lexicon("es")
    lexicon.lookup("gato")

- loader.py: filesystem + JSON parsing into word entries
- schema.py: pydantic models of the JSON shards
- index.py:  JsonLexicon, the ILexicon implementation
- cache.py:  thread-safe per-language cache
- config.py: LexiconConfig (env driven)
"""

from __future__ import annotations

from .cache import (
    build_lexicon,
    cached_languages,
    clear_cache,
    get_lexicon,
    preload_languages,
)
from .config import LexiconConfig, get_config, set_config
from .errors import (
    LexemeNotFound,
    LexiconConfigError,
    LexiconError,
    LexiconNotFound,
    LexiconSchemaError,
)
from .index import JsonLexicon
from .loader import available_languages, load_lexicon
from .schema import SCHEMA_VERSION, EntrySchema, LexiconFile

__all__ = [
    "build_lexicon",
    "cached_languages",
    "clear_cache",
    "get_lexicon",
    "preload_languages",
    "LexiconConfig",
    "get_config",
    "set_config",
    "LexemeNotFound",
    "LexiconConfigError",
    "LexiconError",
    "LexiconNotFound",
    "LexiconSchemaError",
    "JsonLexicon",
    "available_languages",
    "load_lexicon",
    "SCHEMA_VERSION",
    "EntrySchema",
    "LexiconFile",
]
