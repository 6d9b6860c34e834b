# tests/conftest.py
import json

import pytest

from realizer.adapters.persistence.lexicon import (
    LexiconConfig,
    clear_cache,
    get_lexicon,
    set_config,
)
from realizer.core.domain.factory import PhraseFactory
from realizer.core.use_cases.realise_text import RealiseText
from realizer.shared.container import Container


@pytest.fixture(autouse=True)
def bundled_lexicons():
    """
    Every test starts from the lexicons shipped with the package and an
    empty lexicon cache, whatever the environment says.
    """
    set_config(LexiconConfig())
    clear_cache()
    yield
    clear_cache()
    set_config(None)


@pytest.fixture
def en():
    """English realiser over the bundled lexicon."""
    return RealiseText(get_lexicon("en"))


@pytest.fixture
def es():
    """Spanish realiser over the bundled lexicon."""
    return RealiseText(get_lexicon("es"))


@pytest.fixture
def en_factory(en) -> PhraseFactory:
    return en.factory


@pytest.fixture
def es_factory(es) -> PhraseFactory:
    return es.factory


@pytest.fixture
def write_lexicon(tmp_path):
    """
    Write a lexicon shard under tmp_path and point the adapter at it.

    Usage: write_lexicon("es", {"E1": {...}}, name="core.json")
    """

    def _write(lang, entries, name="core.json", meta=None):
        lang_dir = tmp_path / lang
        lang_dir.mkdir(exist_ok=True)
        payload = {
            "meta": meta if meta is not None else {"language": lang, "schema_version": 1},
            "entries": entries,
        }
        with open(lang_dir / name, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False)
        set_config(LexiconConfig(lexicon_dir=str(tmp_path)))
        return lang_dir

    return _write


@pytest.fixture
def container():
    """
    Sets up the Dependency Injection Container for testing.
    Overrides are reset after the test.
    """
    container = Container()
    yield container
    container.reset_override()
