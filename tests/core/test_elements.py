# tests/core/test_elements.py
import pytest

from realizer.core.domain.elements import (
    Clause,
    Coordination,
    InflectedRequest,
    LexicalWord,
    Literal,
    NounPhrase,
    Sentence,
    Sequence,
    VerbPhrase,
)
from realizer.core.domain.exceptions import InvalidElementError
from realizer.core.domain.features import (
    Category,
    DiscourseFunction,
    Feature,
    Gender,
    NumberAgreement,
    Person,
    Tense,
)
from realizer.core.domain.lexical import WordEntry, paradigm_key, provisional_word


def _word(base, category, **features):
    return LexicalWord(WordEntry(base, category).with_features(**features))


class TestWordEntry:
    def test_features_are_frozen(self):
        entry = WordEntry("gato", Category.NOUN).with_features(gender="masculine")
        assert entry.features.frozen
        assert entry.get(Feature.GENDER) is Gender.MASCULINE

    def test_forms_and_spelling(self):
        entry = WordEntry("mouse", Category.NOUN, forms={"plural": "mice"}, spelling_variant="mouse")
        assert entry.form("plural") == "mice"
        assert entry.form("past") is None
        assert entry.default_spelling == "mouse"

    def test_provisional_word_has_no_features(self):
        entry = provisional_word("blorp", Category.VERB)
        assert entry.provisional
        assert len(entry.features) == 0

    def test_empty_base_form_is_rejected(self):
        with pytest.raises(ValueError):
            WordEntry("", Category.NOUN)

    def test_paradigm_key_defaults_to_third_singular(self):
        assert paradigm_key("present", None, None) == "present3s"
        assert paradigm_key("past", Person.FIRST, NumberAgreement.PLURAL) == "past1p"


class TestDerive:
    def test_derive_copies_features(self):
        phrase = NounPhrase(_word("cat", Category.NOUN), features={Feature.NUMBER: NumberAgreement.PLURAL})
        derived = phrase.derive({Feature.NUMBER: None})

        assert phrase.get(Feature.NUMBER) is NumberAgreement.PLURAL
        assert not derived.features.is_set(Feature.NUMBER)
        assert derived.head is phrase.head

    def test_derive_replaces_slots(self):
        phrase = VerbPhrase(_word("walk", Category.VERB))
        modifier = Literal("quickly")
        derived = phrase.derive(None, post_modifiers=[modifier])

        assert phrase.post_modifiers == []
        assert derived.post_modifiers == [modifier]

    def test_derive_unknown_slot_fails(self):
        with pytest.raises(AttributeError):
            Literal("x").derive(None, nonsense=1)

    def test_lexical_word_derives_into_request(self):
        word = _word("walk", Category.VERB)
        request = word.derive({Feature.TENSE: Tense.PAST})

        assert isinstance(request, InflectedRequest)
        assert request.base_word is word.entry
        assert request.get(Feature.TENSE) is Tense.PAST
        assert not word.features.is_set(Feature.TENSE)

    def test_request_falls_back_to_lexical_features(self):
        word = _word("mujer", Category.NOUN, gender="feminine")
        request = InflectedRequest.from_word(word)
        assert request.lexical(Feature.GENDER) is Gender.FEMININE


class TestTreeBuilding:
    def test_non_elements_are_rejected(self):
        with pytest.raises(InvalidElementError):
            NounPhrase("cat")
        with pytest.raises(InvalidElementError):
            VerbPhrase(_word("walk", Category.VERB)).add_post_modifier("quickly")

    def test_clause_forwards_complements_to_verb_phrase(self):
        vp = VerbPhrase(_word("chase", Category.VERB))
        clause = Clause([NounPhrase(_word("cat", Category.NOUN))], vp)
        obj = NounPhrase(_word("mouse", Category.NOUN))
        clause.add_complement(obj, DiscourseFunction.OBJECT)

        assert vp.complements == [obj]
        assert obj.discourse_function is DiscourseFunction.OBJECT
        assert clause.subjects[0].discourse_function is DiscourseFunction.SUBJECT

    def test_sequence_drops_missing_items(self):
        seq = Sequence([Literal("a"), None, Literal("b")])
        assert [i.text for i in seq] == ["a", "b"]
        assert len(seq) == 2

    def test_builder_helpers(self):
        clause = Clause()
        clause.add_subject(NounPhrase(_word("cat", Category.NOUN)))
        clause.add_front_modifier(Literal("yesterday"))
        coordination = Coordination([Literal("a")])
        coordination.add_coordinate(Literal("b"))

        assert clause.subjects[0].discourse_function is DiscourseFunction.SUBJECT
        assert [m.text for m in clause.front_modifiers] == ["yesterday"]
        assert len(coordination.coordinates) == 2
        with pytest.raises(InvalidElementError):
            Sentence().add_component("text")
