# tests/adapters/test_lexicon_loader.py
"""
Loader and cache behaviour of the JSON lexicon adapter.
"""

from __future__ import annotations

import pytest

from realizer.adapters.persistence.lexicon import (
    LexiconConfig,
    LexiconNotFound,
    LexiconSchemaError,
    available_languages,
    cached_languages,
    clear_cache,
    get_lexicon,
    load_lexicon,
    set_config,
)
from realizer.core.domain.features import Category, Feature, Gender


ENTRIES = {
    "E1": {"lemma": "gato", "pos": "noun", "features": {"gender": "masculine"}},
    "E2": {"lemma": "saltar", "pos": "VERB", "forms": {"present3s": "salta"}},
}


class TestLoadLexicon:
    def test_loads_entries_from_all_shards(self, write_lexicon):
        write_lexicon("es", ENTRIES)
        write_lexicon("es", {"E3": {"lemma": "mesa", "pos": "noun"}}, name="extra.json")

        loaded = load_lexicon("es")

        assert loaded.language == "es"
        assert loaded.sources == ("core.json", "extra.json")
        assert [e.base_form for e in loaded.entries] == ["gato", "saltar", "mesa"]

    def test_entry_fields(self, write_lexicon):
        write_lexicon("es", ENTRIES)
        gato, saltar = load_lexicon("ES").entries

        assert gato.id == "E1"
        assert gato.category is Category.NOUN
        assert gato.get(Feature.GENDER) is Gender.MASCULINE
        assert gato.features.frozen
        assert saltar.category is Category.VERB
        assert saltar.form("present3s") == "salta"

    def test_missing_language_directory(self, write_lexicon):
        write_lexicon("es", ENTRIES)
        with pytest.raises(LexiconNotFound):
            load_lexicon("fr")

    def test_directory_without_files(self, tmp_path):
        (tmp_path / "fr").mkdir()
        set_config(LexiconConfig(lexicon_dir=str(tmp_path)))
        with pytest.raises(LexiconNotFound):
            load_lexicon("fr")

    def test_empty_code_is_rejected(self):
        with pytest.raises(LexiconNotFound):
            load_lexicon("  ")

    def test_bad_json_is_fatal(self, write_lexicon):
        lang_dir = write_lexicon("es", ENTRIES)
        (lang_dir / "broken.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(LexiconSchemaError):
            load_lexicon("es")

    @pytest.mark.parametrize(
        "entry",
        [
            {"lemma": "gato", "pos": "animal"},
            {"lemma": "gato", "pos": "noun", "features": {"gender": "neuter-ish"}},
            {"lemma": "gato", "pos": "noun", "features": {"colourfulness": True}},
            {"lemma": "", "pos": "noun"},
            {"lemma": "gato", "pos": "noun", "extra": 1},
        ],
    )
    def test_schema_violations_are_fatal(self, write_lexicon, entry):
        write_lexicon("es", {"E1": entry})
        with pytest.raises(LexiconSchemaError):
            load_lexicon("es")

    def test_available_languages(self, write_lexicon):
        write_lexicon("es", ENTRIES)
        write_lexicon("en", {"E1": {"lemma": "cat", "pos": "noun"}})
        assert available_languages() == ["en", "es"]

    def test_bundled_languages(self):
        assert {"en", "es"} <= set(available_languages())


class TestCache:
    def test_same_instance_until_cleared(self):
        first = get_lexicon("en")
        assert get_lexicon(" EN ") is first
        assert cached_languages() == ["en"]

        clear_cache("en")
        assert get_lexicon("en") is not first

    def test_cache_can_be_disabled(self):
        set_config(LexiconConfig(cache_enabled=False))
        assert get_lexicon("es") is not get_lexicon("es")
        assert cached_languages() == []

    def test_failed_load_is_not_cached(self, write_lexicon):
        write_lexicon("es", {"E1": {"lemma": "gato", "pos": "animal"}})
        with pytest.raises(LexiconSchemaError):
            get_lexicon("es")
        assert cached_languages() == []

    def test_empty_code(self):
        with pytest.raises(ValueError):
            get_lexicon("")
