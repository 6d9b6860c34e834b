# tests/adapters/test_lexicon_index.py
import pytest

from realizer.adapters.persistence.lexicon import JsonLexicon, LexemeNotFound, get_lexicon
from realizer.adapters.persistence.lexicon.types import LoadedLexicon
from realizer.core.domain.features import Category
from realizer.core.domain.lexical import WordEntry, WordResolver


class TestLookup:
    def test_lookup_by_base_and_category(self):
        lexicon = get_lexicon("en")
        assert lexicon.lookup("cat").category is Category.NOUN
        assert lexicon.lookup("CAT", Category.NOUN).base_form == "cat"
        assert lexicon.lookup("cat", Category.VERB) is None

    def test_exact_case_is_preferred(self):
        assert get_lexicon("en").lookup("I").category is Category.PRONOUN

    def test_lookup_by_variant(self):
        lexicon = get_lexicon("en")
        assert lexicon.lookup_by_variant("is").base_form == "be"
        assert lexicon.lookup_by_variant("went").base_form == "go"
        assert lexicon.lookup_by_variant("mice").base_form == "mouse"

    def test_lookup_by_id(self):
        lexicon = get_lexicon("es")
        entry = lexicon.lookup("Juan")
        assert lexicon.lookup_by_id(entry.id) is entry
        assert lexicon.lookup_by_id("nope") is None

    def test_require(self):
        lexicon = get_lexicon("es")
        assert lexicon.require("gato").base_form == "gato"
        with pytest.raises(LexemeNotFound) as excinfo:
            lexicon.require("unicornio", Category.NOUN)
        assert excinfo.value.pos == "noun"

    def test_strategy_is_bound(self):
        assert get_lexicon("es").strategy.language == "es"
        assert len(get_lexicon("es")) > 0


class TestDuplicates:
    def test_first_id_wins(self):
        data = LoadedLexicon(
            language="en",
            entries=(
                WordEntry("cat", Category.NOUN, id="X1"),
                WordEntry("dog", Category.NOUN, id="X1"),
            ),
        )
        lexicon = JsonLexicon(data)
        assert lexicon.lookup_by_id("X1").base_form == "cat"
        assert lexicon.lookup("dog") is not None


class TestResolver:
    def test_unknown_word_is_provisional(self):
        entry = WordResolver(get_lexicon("en")).resolve("blorp", Category.VERB)
        assert entry.provisional
        assert entry.category is Category.VERB

    def test_inflected_surface_resolves_to_lemma(self):
        entry = WordResolver(get_lexicon("es")).resolve("saltando", Category.VERB)
        assert entry.base_form == "saltar"

    def test_spanish_nouns_alias_pronouns(self):
        entry = WordResolver(get_lexicon("es")).resolve("él", Category.NOUN)
        assert entry.category is Category.PRONOUN

    def test_english_nouns_do_not_alias(self):
        entry = WordResolver(get_lexicon("en")).resolve("it", Category.NOUN)
        assert entry.category is not Category.PRONOUN
