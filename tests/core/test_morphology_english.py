# tests/core/test_morphology_english.py
import pytest

from realizer.core.domain.elements import InflectedRequest, Literal, Sequence
from realizer.core.domain.features import Category, Form, NumberAgreement, Person, Tense
from realizer.core.domain.morphology.base import SuffixRule, add_suffix, create_engine
from realizer.core.domain.morphology.english import SUFFIX_RULES, starts_with_vowel_sound


def inflect(realiser, base, category, **features):
    entry = realiser.resolver.resolve(base, category)
    return realiser.morphology.inflect(InflectedRequest.from_word(entry, features)).text


class TestSuffixRules:
    @pytest.mark.parametrize(
        "base, suffix, expected",
        [
            ("carry", "s", "carries"),
            ("happy", "er", "happier"),
            ("lie", "ing", "lying"),
            ("bake", "ed", "baked"),
            ("bake", "ing", "baking"),
            ("see", "ing", "seeing"),
            ("box", "s", "boxes"),
            ("walk", "ed", "walked"),
        ],
    )
    def test_english_repairs(self, base, suffix, expected):
        assert add_suffix(base, suffix, SUFFIX_RULES) == expected

    def test_rules_apply_in_sequence(self):
        rules = [
            SuffixRule(r"x$", r".", lambda b: b + "y"),
            SuffixRule(r"y$", r".", lambda b: b + "z"),
        ]
        assert add_suffix("x", "!", rules) == "xyz!"


class TestVerbs:
    def test_present_participle(self, en):
        assert inflect(en, "jump", Category.VERB, form=Form.PRESENT_PARTICIPLE) == "jumping"

    def test_be_paradigm(self, en):
        assert inflect(en, "be", Category.VERB, tense=Tense.PRESENT, person=Person.THIRD,
                       number=NumberAgreement.SINGULAR) == "is"
        assert inflect(en, "be", Category.VERB, tense=Tense.PRESENT, person=Person.FIRST,
                       number=NumberAgreement.SINGULAR) == "am"
        assert inflect(en, "be", Category.VERB, tense=Tense.PRESENT, number=NumberAgreement.PLURAL) == "are"
        assert inflect(en, "be", Category.VERB, tense=Tense.PAST, person=Person.FIRST) == "was"
        assert inflect(en, "be", Category.VERB, tense=Tense.PAST, person=Person.SECOND) == "were"

    def test_stored_variants_beat_rules(self, en):
        assert inflect(en, "go", Category.VERB, tense=Tense.PAST) == "went"
        assert inflect(en, "go", Category.VERB) == "goes"
        assert inflect(en, "eat", Category.VERB, form=Form.PAST_PARTICIPLE) == "eaten"
        assert inflect(en, "have", Category.VERB, person=Person.THIRD) == "has"

    def test_regular_verbs(self, en):
        assert inflect(en, "kiss", Category.VERB) == "kisses"
        assert inflect(en, "carry", Category.VERB, tense=Tense.PAST) == "carried"
        assert inflect(en, "walk", Category.VERB, person=Person.FIRST) == "walk"

    def test_consonant_doubling_needs_the_flag(self, en):
        assert inflect(en, "stop", Category.VERB, tense=Tense.PAST) == "stopped"
        assert inflect(en, "run", Category.VERB, form=Form.PRESENT_PARTICIPLE) == "running"
        # "visit" is unknown, so no doubling
        assert inflect(en, "visit", Category.VERB, tense=Tense.PAST) == "visited"

    def test_negated_verb_stays_bare(self, en):
        assert inflect(en, "walk", Category.VERB, negated=True) == "walk"

    def test_non_morph_passes_through(self, en):
        assert inflect(en, "walk", Category.VERB, non_morph=True, tense=Tense.PAST) == "walk"


class TestNounsAndAdjectives:
    def test_plurals(self, en):
        assert inflect(en, "cat", Category.NOUN, number=NumberAgreement.PLURAL) == "cats"
        assert inflect(en, "mouse", Category.NOUN, number=NumberAgreement.PLURAL) == "mice"
        assert inflect(en, "box", Category.NOUN, number=NumberAgreement.PLURAL) == "boxes"
        assert inflect(en, "John", Category.NOUN, number=NumberAgreement.PLURAL) == "John"

    def test_possessive_noun(self, en):
        assert inflect(en, "cat", Category.NOUN, possessive=True) == "cat's"
        assert inflect(en, "cat", Category.NOUN, possessive=True, number=NumberAgreement.PLURAL) == "cats'"

    def test_comparison(self, en):
        assert inflect(en, "big", Category.ADJECTIVE, is_comparative=True) == "bigger"
        assert inflect(en, "happy", Category.ADJECTIVE, is_superlative=True) == "happiest"
        assert inflect(en, "good", Category.ADJECTIVE, is_comparative=True) == "better"
        assert inflect(en, "quickly", Category.ADVERB, is_comparative=True) == "more quickly"


class TestPronounsAndDeterminers:
    def test_pronoun_cases(self, en):
        assert inflect(en, "he", Category.PRONOUN, discourse_function="object") == "him"
        assert inflect(en, "she", Category.PRONOUN, discourse_function="subject") == "she"
        assert inflect(en, "she", Category.PRONOUN, reflexive=True) == "herself"
        assert inflect(en, "I", Category.PRONOUN, possessive=True, discourse_function="specifier") == "my"
        assert inflect(en, "she", Category.PRONOUN, number=NumberAgreement.PLURAL,
                       discourse_function="subject") == "they"

    def test_wh_words_are_untouched(self, en):
        assert inflect(en, "who", Category.PRONOUN, discourse_function="object") == "who"

    def test_determiner_number(self, en):
        assert inflect(en, "this", Category.DETERMINER, number=NumberAgreement.PLURAL) == "these"
        assert inflect(en, "a", Category.DETERMINER, number=NumberAgreement.PLURAL) == "some"
        assert inflect(en, "the", Category.DETERMINER, number=NumberAgreement.PLURAL) == "the"


class TestArticles:
    @pytest.mark.parametrize(
        "word, expected",
        [("apple", True), ("hour", True), ("university", False), ("cat", False), ("8", True)],
    )
    def test_vowel_sound(self, word, expected):
        assert starts_with_vowel_sound(word) is expected

    def test_a_becomes_an_before_vowel_sound(self):
        engine = create_engine("germanic", "en", {})
        items = [Literal("a", category=Category.DETERMINER), Sequence([Literal("apple")])]
        out = engine.post_process(items)
        assert out[0].text == "an"
        assert items[0].text == "a"

    def test_unknown_category_passes_base_through(self):
        engine = create_engine("germanic", "en", {})
        assert engine.inflect_simple("and", Category.CONJUNCTION, {"number": "plural"}) == "and"
