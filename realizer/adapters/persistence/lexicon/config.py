# realizer/adapters/persistence/lexicon/config.py
"""
Where the lexicon adapter finds its shards, and how it keeps them.

Environment variables (all optional):

    REALIZER_LEXICON_DIR            base directory with one folder per language;
                                    empty selects the bundled lexicons
    REALIZER_LEXICON_CACHE_ENABLED  keep loaded lexicons in memory (default on)
    REALIZER_LEXICON_LOG_COLLISIONS log base forms shared by several entries
                                    (default off; duplicate ids are always logged)

Tests usually pin a directory explicitly:

    set_config(LexiconConfig(lexicon_dir=str(tmp_path)))
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import LexiconConfigError

# realizer/data/lexicon
BUNDLED_LEXICON_DIR = Path(__file__).resolve().parents[3] / "data" / "lexicon"

_ON = frozenset({"1", "true", "yes", "y", "on", "t"})
_OFF = frozenset({"0", "false", "no", "n", "off", "f"})


def _env_flag(name: str, default: bool) -> bool:
    # Unrecognised values keep the default.
    value = os.getenv(name, "").strip().lower()
    if value in _ON:
        return True
    if value in _OFF:
        return False
    return default


def _env_path(name: str) -> str:
    value = os.getenv(name, "").strip()
    return os.path.expandvars(os.path.expanduser(value)) if value else ""


@dataclass
class LexiconConfig:
    """Lexicon location plus cache and diagnostics switches."""

    lexicon_dir: str = ""
    cache_enabled: bool = True
    log_collisions: bool = False

    @classmethod
    def from_env(cls) -> "LexiconConfig":
        return cls(
            lexicon_dir=_env_path("REALIZER_LEXICON_DIR"),
            cache_enabled=_env_flag("REALIZER_LEXICON_CACHE_ENABLED", True),
            log_collisions=_env_flag("REALIZER_LEXICON_LOG_COLLISIONS", False),
        )

    def resolved_lexicon_dir(self) -> Path:
        """
        Absolute directory holding the language folders.

        A configured path that exists but is a file raises LexiconConfigError;
        a missing directory is reported later, per language, as LexiconNotFound.
        """
        if not self.lexicon_dir:
            return BUNDLED_LEXICON_DIR
        base = Path(self.lexicon_dir).resolve()
        if base.exists() and not base.is_dir():
            raise LexiconConfigError(f"Lexicon path '{base}' is not a directory.")
        return base


_active: Optional[LexiconConfig] = None


def get_config() -> LexiconConfig:
    """Process-wide config, read from the environment the first time."""
    global _active
    if _active is None:
        _active = LexiconConfig.from_env()
    return _active


def set_config(config: Optional[LexiconConfig]) -> None:
    """Install a config; None makes the next `get_config()` re-read the environment."""
    global _active
    if config is not None and not isinstance(config, LexiconConfig):
        raise TypeError("config must be a LexiconConfig instance")
    _active = config


__all__ = ["LexiconConfig", "BUNDLED_LEXICON_DIR", "get_config", "set_config"]
