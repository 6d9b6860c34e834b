# tests/core/test_morphology_spanish.py
import pytest

from realizer.core.domain.elements import InflectedRequest, Literal, Sequence
from realizer.core.domain.features import (
    Category,
    DiscourseFunction,
    FeatureStore,
    Form,
    Gender,
    NumberAgreement,
    Person,
    Tense,
)
from realizer.core.domain.morphology.base import add_suffix, create_engine
from realizer.core.domain.morphology.spanish import SUFFIX_RULES, plural_of, regular_verb, variant_form


def inflect(realiser, base, category, agreement=None, **features):
    entry = realiser.resolver.resolve(base, category)
    request = InflectedRequest.from_word(entry, features)
    if agreement is not None:
        request.agreement = FeatureStore(agreement)
    return realiser.morphology.inflect(request).text


class TestRegularConjugation:
    @pytest.mark.parametrize(
        "base, tense, index, expected",
        [
            ("saltar", Tense.PRESENT, 2, "salta"),
            ("comer", Tense.PRESENT, 3, "comemos"),
            ("vivir", Tense.PRESENT, 4, "vivís"),
            ("hablar", Tense.PAST, 2, "habló"),
            ("comer", Tense.PAST, 5, "comieron"),
            ("hablar", Tense.IMPERFECT, 0, "hablaba"),
            ("vivir", Tense.IMPERFECT, 3, "vivíamos"),
            ("cantar", Tense.FUTURE, 1, "cantarás"),
            ("comer", Tense.CONDITIONAL, 0, "comería"),
        ],
    )
    def test_regular_tables(self, base, tense, index, expected):
        assert regular_verb(base, tense, index) == expected

    def test_plural_spelling(self):
        assert plural_of("gato") == "gatos"
        assert plural_of("mujer") == "mujeres"
        assert plural_of("luz") == "luces"

    @pytest.mark.parametrize(
        "base, suffix, expected",
        [
            ("gato", "s", "gatos"),
            ("mujer", "s", "mujeres"),
            ("luz", "s", "luces"),
            ("comer", "d", "comed"),
            ("hablar", "n", "hablan"),
            ("alto", "ísimo", "altísimo"),
            ("feliz", "ísimo", "felicísimo"),
        ],
    )
    def test_spanish_repairs(self, base, suffix, expected):
        assert add_suffix(base, suffix, SUFFIX_RULES) == expected

    def test_variant_spelling_uses_every_matching_repair(self):
        # z -> c, then the epenthetic e
        assert variant_form("luz", "s") == "luces"
        assert variant_form("papel", "s") == "papeles"


class TestVerbs:
    def test_gerund_and_participle(self, es):
        assert inflect(es, "saltar", Category.VERB, form=Form.PRESENT_PARTICIPLE) == "saltando"
        assert inflect(es, "comer", Category.VERB, form=Form.GERUND) == "comiendo"
        assert inflect(es, "ir", Category.VERB, form=Form.PRESENT_PARTICIPLE) == "yendo"
        assert inflect(es, "besar", Category.VERB, form=Form.PAST_PARTICIPLE,
                       gender=Gender.FEMININE, number=NumberAgreement.PLURAL) == "besadas"
        assert inflect(es, "romper", Category.VERB, form=Form.PAST_PARTICIPLE,
                       gender=Gender.FEMININE) == "rota"

    def test_stored_paradigm_cells(self, es):
        assert inflect(es, "ser", Category.VERB, person=Person.FIRST) == "soy"
        assert inflect(es, "ser", Category.VERB, tense=Tense.IMPERFECT, person=Person.FIRST,
                       number=NumberAgreement.PLURAL) == "éramos"
        assert inflect(es, "estar", Category.VERB, number=NumberAgreement.PLURAL) == "están"
        assert inflect(es, "haber", Category.VERB) == "ha"

    def test_partial_paradigm_falls_back_to_rules(self, es):
        assert inflect(es, "dar", Category.VERB, person=Person.FIRST) == "doy"
        assert inflect(es, "dar", Category.VERB, person=Person.SECOND) == "das"
        assert inflect(es, "cerrar", Category.VERB, person=Person.FIRST, number=NumberAgreement.PLURAL) == "cerramos"

    def test_impersonal_haber(self, es):
        assert inflect(es, "haber", Category.VERB, person=Person.NONE) == "hay"
        assert inflect(es, "haber", Category.VERB, person=Person.NONE, tense=Tense.IMPERFECT) == "había"

    def test_irregular_future_stem(self, es):
        assert inflect(es, "tener", Category.VERB, tense=Tense.FUTURE, person=Person.FIRST) == "tendré"
        assert inflect(es, "haber", Category.VERB, tense=Tense.CONDITIONAL) == "habría"
        assert inflect(es, "hablar", Category.VERB, tense=Tense.FUTURE) == "hablará"

    def test_subjunctive(self, es):
        assert inflect(es, "ser", Category.VERB, form=Form.SUBJUNCTIVE, person=Person.FIRST) == "sea"
        assert inflect(es, "hablar", Category.VERB, form=Form.SUBJUNCTIVE) == "hable"
        assert inflect(es, "comer", Category.VERB, form=Form.SUBJUNCTIVE,
                       number=NumberAgreement.PLURAL) == "coman"

    def test_imperfect_subjunctive_from_preterite(self, es):
        assert inflect(es, "hablar", Category.VERB, form=Form.SUBJUNCTIVE, tense=Tense.PAST,
                       person=Person.FIRST) == "hablara"
        assert inflect(es, "hablar", Category.VERB, form=Form.SUBJUNCTIVE, tense=Tense.PAST,
                       person=Person.FIRST, number=NumberAgreement.PLURAL) == "habláramos"
        assert inflect(es, "tener", Category.VERB, form=Form.SUBJUNCTIVE, tense=Tense.IMPERFECT,
                       number=NumberAgreement.PLURAL) == "tuvieran"

    def test_imperative(self, es):
        assert inflect(es, "saltar", Category.VERB, form=Form.IMPERATIVE, person=Person.SECOND) == "salta"
        assert inflect(es, "comer", Category.VERB, form=Form.IMPERATIVE, person=Person.SECOND,
                       number=NumberAgreement.PLURAL) == "comed"
        assert inflect(es, "ser", Category.VERB, form=Form.IMPERATIVE) == "sé"


class TestNominals:
    def test_noun_number_and_gender(self, es):
        assert inflect(es, "gato", Category.NOUN, number=NumberAgreement.PLURAL) == "gatos"
        assert inflect(es, "gato", Category.NOUN, gender=Gender.FEMININE) == "gata"
        assert inflect(es, "actor", Category.NOUN, gender=Gender.FEMININE,
                       number=NumberAgreement.PLURAL) == "actrices"
        assert inflect(es, "luz", Category.NOUN, number=NumberAgreement.PLURAL) == "luces"
        assert inflect(es, "mujer", Category.NOUN, gender=Gender.FEMININE) == "mujer"

    def test_adjective_agrees_with_governing_phrase(self, es):
        agreement = {"gender": "feminine", "number": "plural"}
        assert inflect(es, "rojo", Category.ADJECTIVE, agreement) == "rojas"
        assert inflect(es, "grande", Category.ADJECTIVE, agreement) == "grandes"
        assert inflect(es, "feliz", Category.ADJECTIVE, agreement) == "felices"
        assert inflect(es, "alto", Category.ADJECTIVE, is_superlative=True) == "altísimo"

    def test_determiner_agreement(self, es):
        assert inflect(es, "el", Category.DETERMINER, {"gender": "feminine"}) == "la"
        assert inflect(es, "el", Category.DETERMINER, {"gender": "masculine"},
                       number=NumberAgreement.PLURAL) == "los"
        assert inflect(es, "un", Category.DETERMINER, {"gender": "feminine", "number": "plural"}) == "unas"

    def test_pronoun_positions(self, es):
        assert inflect(es, "él", Category.PRONOUN, discourse_function=DiscourseFunction.OBJECT) == "lo"
        assert inflect(es, "ella", Category.PRONOUN, discourse_function=DiscourseFunction.OBJECT) == "la"
        assert inflect(es, "yo", Category.PRONOUN, in_prepositional_phrase=True) == "mí"
        assert inflect(es, "nosotros", Category.PRONOUN, reflexive=True) == "nos"
        assert inflect(es, "ella", Category.PRONOUN, number=NumberAgreement.PLURAL,
                       discourse_function=DiscourseFunction.SUBJECT) == "ellas"

    def test_possessive_agrees_with_possessed(self, es):
        assert inflect(es, "él", Category.PRONOUN, {"number": "plural"}, possessive=True,
                       discourse_function=DiscourseFunction.SPECIFIER) == "sus"

    def test_wh_word_forms(self, es):
        assert inflect(es, "quién", Category.PRONOUN, number=NumberAgreement.PLURAL) == "quiénes"
        assert inflect(es, "cuántos", Category.PRONOUN, gender=Gender.FEMININE,
                       number=NumberAgreement.PLURAL) == "cuántas"


class TestListPasses:
    @pytest.fixture
    def engine(self):
        return create_engine("romance", "es", {})

    def test_contractions(self, engine):
        items = [
            Literal("a", category=Category.PREPOSITION),
            Sequence([Literal("el", category=Category.DETERMINER), Literal("hombre")]),
        ]
        out = engine.post_process(items)
        assert out[0].text == "al"
        assert [i.text for i in out[1].items] == ["hombre"]

    def test_no_contraction_before_feminine_article(self, engine):
        items = [
            Literal("de", category=Category.PREPOSITION),
            Sequence([Literal("la", category=Category.DETERMINER), Literal("casa")]),
        ]
        out = engine.post_process(items)
        assert out[0].text == "de"

    def test_clitic_moves_before_verb_cluster(self, engine):
        items = [
            Literal("ha", category=Category.VERB),
            Literal("besado", category=Category.VERB),
            Literal("lo", category=Category.PRONOUN),
        ]
        out = engine.post_process(items)
        assert [i.text for i in out] == ["lo", "ha", "besado"]
