# tests/core/test_realiser_spanish.py
import pytest

from realizer.core.domain.features import Feature, Form, InterrogativeType, NumberAgreement, Person


PLURAL = {Feature.NUMBER: NumberAgreement.PLURAL}


class TestClauses:
    def test_participle_clause_with_prepositional_phrase(self, es, es_factory):
        clause = es_factory.create_clause("el gato", "saltar", features={"form": Form.PRESENT_PARTICIPLE})
        clause.verb_phrase.add_post_modifier(es_factory.create_preposition_phrase("en", "el mostrador"))
        assert es.realise_sentence(clause) == "El gato saltando en el mostrador."

    def test_clitic_object_before_perfect(self, es, es_factory):
        gato = es_factory.create_noun_phrase("gato", features={Feature.PRONOMINAL: True})
        clause = es_factory.create_clause("Juan", "besar", gato, features={"perfect": True})
        assert es.realise_sentence(clause) == "Juan lo ha besado."

    def test_negated_clitic(self, es, es_factory):
        gato = es_factory.create_noun_phrase("gato", features={Feature.PRONOMINAL: True})
        clause = es_factory.create_clause("Juan", "besar", gato, features={"negated": True})
        assert es.realise_sentence(clause) == "Juan no lo besa."

    def test_indirect_object_comes_first(self, es, es_factory):
        clause = es_factory.create_clause("Juan", "dar", "el libro", "María")
        assert es.realise_sentence(clause) == "Juan da a María el libro."

    def test_impersonal_haber(self, es, es_factory):
        clause = es_factory.create_clause(None, "haber", "un gato")
        assert es.realise_sentence(clause) == "Hay un gato."

    @pytest.mark.parametrize(
        "subject, obj, expected",
        [
            ("el gato", "el ratón", "El ratón es perseguido por el gato."),
            ("el hombre", "la mujer", "La mujer es besada por el hombre."),
        ],
    )
    def test_passive_participle_agrees(self, es, es_factory, subject, obj, expected):
        verb = "perseguir" if obj == "el ratón" else "besar"
        clause = es_factory.create_clause(subject, verb, obj, features={"passive": True})
        assert es.realise_sentence(clause) == expected

    def test_progressive_uses_estar(self, es, es_factory):
        clause = es_factory.create_clause("el gato", "saltar", features={"progressive": True})
        assert es.realise_sentence(clause) == "El gato está saltando."

    @pytest.mark.parametrize(
        "features, expected",
        [
            ({"perfect": True, "progressive": True}, "El gato ha estado saltando."),
            ({"progressive": True, "negated": True}, "El gato no está saltando."),
            ({"perfect": True, "negated": True}, "El gato no ha saltado."),
            ({"modal": "deber", "perfect": True}, "El gato debe haber saltado."),
            ({"modal": "deber", "negated": True}, "El gato no debe saltar."),
        ],
    )
    def test_auxiliary_chain(self, es, es_factory, features, expected):
        clause = es_factory.create_clause("el gato", "saltar", features=features)
        assert es.realise_sentence(clause) == expected

    @pytest.mark.parametrize(
        "features, expected",
        [
            ({"perfect": True}, "La mujer ha sido besada por el hombre."),
            ({"progressive": True}, "La mujer está siendo besada por el hombre."),
            ({"negated": True}, "La mujer no es besada por el hombre."),
        ],
    )
    def test_passive_chain(self, es, es_factory, features, expected):
        clause = es_factory.create_clause(
            "el hombre", "besar", "la mujer", features={"passive": True, **features}
        )
        assert es.realise_sentence(clause) == expected

    def test_coordinated_subject_is_plural(self, es, es_factory):
        subject = es_factory.create_coordination("Juan", "María")
        assert es.realise_sentence(es_factory.create_clause(subject, "saltar")) == "Juan y María saltan."

    def test_pronominal_plural_subject(self, es, es_factory):
        mujeres = es_factory.create_noun_phrase(
            "mujer",
            features={Feature.PRONOMINAL: True, Feature.PERSON: Person.THIRD, **PLURAL},
        )
        assert es.realise_sentence(es_factory.create_clause(mujeres, "saltar")) == "Ellas saltan."


class TestQuestions:
    def test_yes_no_gets_opening_mark(self, es, es_factory):
        clause = es_factory.create_clause(
            "el gato", "saltar", features={"interrogative_type": InterrogativeType.YES_NO}
        )
        assert es.realise_sentence(clause) == "¿Salta el gato?"

    def test_who_subject(self, es, es_factory):
        clause = es_factory.create_clause(
            "el gato", "saltar", features={"interrogative_type": InterrogativeType.WHO_SUBJECT}
        )
        assert es.realise_sentence(clause) == "¿Quién salta?"

    def test_how_many_keeps_subject_agreement(self, es, es_factory):
        clause = es_factory.create_clause(
            "la mujer", "besar", "el hombre",
            features={"interrogative_type": InterrogativeType.HOW_MANY},
        )
        assert es.realise_sentence(clause) == "¿Cuántos la mujer besa el hombre?"

    def test_how_many_with_plural_subject(self, es, es_factory):
        gatos = es_factory.create_noun_phrase("gato", features=PLURAL)
        clause = es_factory.create_clause(
            gatos, "saltar", features={"interrogative_type": InterrogativeType.HOW_MANY}
        )
        assert es.realise_sentence(clause) == "¿Cuántos gatos saltan?"


class TestNounPhrases:
    @pytest.mark.parametrize(
        "noun, expected",
        [("gato", "los gatos"), ("mujer", "las mujeres"), ("luz", "las luces")],
    )
    def test_article_agrees_in_gender_and_number(self, es, es_factory, noun, expected):
        assert es.realise(es_factory.create_noun_phrase(noun, "el", features=PLURAL)) == expected

    def test_adjective_follows_and_agrees(self, es, es_factory):
        phrase = es_factory.create_noun_phrase("flor", "el", features=PLURAL)
        phrase.add_post_modifier(es_factory.create_adjective("rojo"))
        assert es.realise(phrase) == "las flores rojas"

    def test_article_contractions(self, es, es_factory):
        assert es.realise(es_factory.create_preposition_phrase("a", "el hombre")) == "al hombre"
        assert es.realise(es_factory.create_preposition_phrase("de", "el gato")) == "del gato"
        assert es.realise(es_factory.create_preposition_phrase("de", "la casa")) == "de la casa"


class TestReuse:
    def test_realising_twice_gives_same_text(self, es, es_factory):
        gato = es_factory.create_noun_phrase("gato", features={Feature.PRONOMINAL: True})
        clause = es_factory.create_clause("Juan", "besar", gato, features={"perfect": True})
        assert es.realise_sentence(clause) == es.realise_sentence(clause)
