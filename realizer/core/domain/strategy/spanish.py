# realizer/core/domain/strategy/spanish.py
"""
SPANISH STRATEGY
----------------

Spanish word tables, the Spanish verb group and the clause-level rules
that have no English counterpart:

- the future and conditional are morphological, so only explicit modals
  produce an auxiliary;
- participles agree in gender and number with the phrase (passive) but not
  under "haber";
- reflexive verbs take a clitic pronoun ("se lava");
- indirect-object noun phrases are introduced by "a";
- subject clauses and imperative object clauses switch to the present
  subjunctive;
- impersonal "haber" ("hay") when a present clause has no subject.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from ..elements import (
    Clause,
    Coordination,
    Element,
    InflectedRequest,
    LexicalWord,
    NounPhrase,
    PrepositionalPhrase,
)
from ..features import (
    Category,
    DiscourseFunction,
    Feature,
    FeatureStore,
    Form,
    Gender,
    InterrogativeType,
    NumberAgreement,
    Person,
    Tense,
)
from ..syntax.verb_group import VerbGroupSpec, head_slot, mark, slot_base, verb_slot
from .base import LanguageStrategy, register_strategy


def _pronoun(person: Person, number: NumberAgreement, gender: Optional[Gender] = None, **extra: Any) -> Dict[str, Any]:
    features: Dict[str, Any] = {"person": person, "number": number}
    if gender is not None:
        features["gender"] = gender
    features.update(extra)
    return features


_S = NumberAgreement.SINGULAR
_P = NumberAgreement.PLURAL
_M = Gender.MASCULINE
_F = Gender.FEMININE

PRONOUN_INFERENCE: Dict[str, Dict[str, Any]] = {
    "yo": _pronoun(Person.FIRST, _S),
    "me": _pronoun(Person.FIRST, _S),
    "mí": _pronoun(Person.FIRST, _S),
    "tú": _pronoun(Person.SECOND, _S),
    "te": _pronoun(Person.SECOND, _S),
    "ti": _pronoun(Person.SECOND, _S),
    "él": _pronoun(Person.THIRD, _S, _M),
    "ella": _pronoun(Person.THIRD, _S, _F),
    "ello": _pronoun(Person.THIRD, _S, Gender.NEUTER),
    "lo": _pronoun(Person.THIRD, _S, _M),
    "la": _pronoun(Person.THIRD, _S, _F),
    "le": _pronoun(Person.THIRD, _S),
    "nosotros": _pronoun(Person.FIRST, _P, _M),
    "nosotras": _pronoun(Person.FIRST, _P, _F),
    "nos": _pronoun(Person.FIRST, _P),
    "vosotros": _pronoun(Person.SECOND, _P, _M),
    "vosotras": _pronoun(Person.SECOND, _P, _F),
    "os": _pronoun(Person.SECOND, _P),
    "ellos": _pronoun(Person.THIRD, _P, _M),
    "ellas": _pronoun(Person.THIRD, _P, _F),
    "los": _pronoun(Person.THIRD, _P, _M),
    "las": _pronoun(Person.THIRD, _P, _F),
    "les": _pronoun(Person.THIRD, _P),
    "se": _pronoun(Person.THIRD, _S, reflexive=True),
    "mi": _pronoun(Person.FIRST, _S, possessive=True),
    "mío": _pronoun(Person.FIRST, _S, possessive=True),
    "tu": _pronoun(Person.SECOND, _S, possessive=True),
    "tuyo": _pronoun(Person.SECOND, _S, possessive=True),
    "su": _pronoun(Person.THIRD, _S, possessive=True),
    "suyo": _pronoun(Person.THIRD, _S, possessive=True),
    "nuestro": _pronoun(Person.FIRST, _P, possessive=True),
    "vuestro": _pronoun(Person.SECOND, _P, possessive=True),
}

# Base forms of the reflexive clitic, by (person, plural).
REFLEXIVE_BASES = {
    (Person.FIRST, False): "yo",
    (Person.FIRST, True): "nosotros",
    (Person.SECOND, False): "tú",
    (Person.SECOND, True): "vosotros",
    (Person.THIRD, False): "él",
    (Person.THIRD, True): "ellos",
}

# Questions whose inverted subject follows the whole verb cluster.
_CLUSTER_INVERSION = frozenset(
    {
        InterrogativeType.WHAT_OBJECT,
        InterrogativeType.WHO_OBJECT,
        InterrogativeType.HOW_PREDICATE,
        InterrogativeType.HOW,
        InterrogativeType.WHY,
        InterrogativeType.WHERE,
    }
)


@register_strategy("es")
class SpanishStrategy(LanguageStrategy):
    morphology_family = "romance"

    default_conjunction = "y"
    plural_conjunctions = frozenset({"y", "o"})
    complementiser = "que"
    passive_preposition = "por"
    negation_particle = "no"
    copulas = frozenset({"ser", "estar"})
    interrogative_words = {
        InterrogativeType.WHO_SUBJECT: "quién",
        InterrogativeType.WHO_OBJECT: "quién",
        InterrogativeType.WHO_INDIRECT_OBJECT: "quién",
        InterrogativeType.WHAT_SUBJECT: "qué",
        InterrogativeType.WHAT_OBJECT: "qué",
        InterrogativeType.HOW: "cómo",
        InterrogativeType.HOW_PREDICATE: "cómo",
        InterrogativeType.WHY: "por qué",
        InterrogativeType.WHERE: "dónde",
        InterrogativeType.HOW_MANY: "cuántos",
    }
    interrogative_marker = "¿"
    noun_pronoun_aliasing = True
    indirect_object_preposition = "a"
    pronoun_inference = PRONOUN_INFERENCE

    def pronoun_base(self, person: Optional[Person], gender: Optional[Gender]) -> str:
        if person is Person.FIRST:
            return "yo"
        if person is Person.SECOND:
            return "tú"
        if gender is Gender.FEMININE:
            return "ella"
        if gender is Gender.MASCULINE:
            return "él"
        return "ello"

    def reflexive_pronoun(
        self,
        person: Optional[Person],
        number: Optional[NumberAgreement],
    ) -> Optional[InflectedRequest]:
        person = person if person in (Person.FIRST, Person.SECOND) else Person.THIRD
        plural = number is NumberAgreement.PLURAL
        base = REFLEXIVE_BASES[(person, plural)]
        return InflectedRequest(
            base,
            Category.PRONOUN,
            {
                Feature.REFLEXIVE: True,
                Feature.PERSON: person,
                Feature.NUMBER: NumberAgreement.PLURAL if plural else NumberAgreement.SINGULAR,
            },
        )

    # ------------------------------------------------------------------
    # Verb group
    # ------------------------------------------------------------------

    def build_verb_group(self, spec: VerbGroupSpec) -> List[Element]:
        form = spec.form
        tense = spec.tense
        if form in (Form.GERUND, Form.INFINITIVE):
            tense = Tense.PRESENT

        modal = spec.modal
        modal_past = modal is not None and tense is Tense.PAST
        gender = self._front_gender(spec)

        stack: List[Element] = []
        front = head_slot(spec.head)
        mark(front, tense=tense)
        if modal is not None:
            mark(front, negated=False)
        mark(front, number=spec.agreement_number, gender=gender)
        if not spec.perfect and form in (Form.INFINITIVE, Form.BARE_INFINITIVE):
            mark(front, non_morph=True)

        if spec.passive:
            front = self._add_be(stack, front, "ser", Form.PAST_PARTICIPLE)
        if spec.progressive:
            front = self._add_be(stack, front, "estar", Form.PRESENT_PARTICIPLE)
        if spec.perfect or modal_past:
            front = self._add_have(stack, front, tense, modal)
        mark(front, number=spec.agreement_number, gender=gender)

        if modal is not None:
            if front is not None:
                mark(front, non_morph=True)
                stack.append(front)
            front = None
            top_tense = stack[-1].get(Feature.TENSE) if stack else tense
            stack.append(
                verb_slot(
                    modal,
                    Category.MODAL,
                    tense=top_tense,
                    person=spec.person,
                    number=spec.number,
                )
            )

        if spec.reflexive:
            if front is not None:
                mark(front, person=spec.person, number=spec.agreement_number)
                stack.append(front)
            stack.append(self.reflexive_pronoun(spec.person, spec.number))
            front = None

        if spec.negated:
            self._add_not(stack, front, spec, modal is not None)
            front = None
        if front is not None:
            self._push_front(stack, front, spec)
        return stack

    @staticmethod
    def _front_gender(spec: VerbGroupSpec) -> Gender:
        if spec.gender is not None:
            return spec.gender
        if (spec.passive or spec.progressive) and spec.object_gender is Gender.FEMININE:
            return Gender.FEMININE
        return Gender.MASCULINE

    @staticmethod
    def _add_be(stack: List[Element], front: Optional[Element], auxiliary: str, form: Form) -> Element:
        tense = None
        if front is not None:
            tense = front.get(Feature.TENSE)
            mark(front, form=form)
            stack.append(front)
        return verb_slot(auxiliary, tense=tense)

    @staticmethod
    def _add_have(
        stack: List[Element],
        front: Optional[Element],
        tense: Optional[Tense],
        modal: Optional[str],
    ) -> Element:
        if front is not None:
            # "han saltado": the participle under haber never agrees.
            mark(front, form=Form.PAST_PARTICIPLE, number=None, gender=None)
            stack.append(front)
        have_tense = Tense.PRESENT if tense is Tense.PAST else tense
        return verb_slot("haber", tense=have_tense, non_morph=True if modal is not None else None)

    def _add_not(
        self,
        stack: List[Element],
        front: Optional[Element],
        spec: VerbGroupSpec,
        has_modal: bool,
    ) -> None:
        particle = verb_slot(self.negation_particle, Category.ADVERB)
        if front is not None:
            mark(front, person=spec.person, number=spec.agreement_number)
        if stack or (front is not None and self.is_copular(front)):
            if front is not None:
                stack.append(front)
        elif front is not None and not has_modal:
            mark(front, negated=True)
            stack.append(front)
        stack.append(particle)

    def _push_front(self, stack: List[Element], front: Element, spec: VerbGroupSpec) -> None:
        form = spec.form
        if form is Form.GERUND:
            mark(front, form=Form.PRESENT_PARTICIPLE)
            stack.append(front)
        elif form in (Form.PAST_PARTICIPLE, Form.PRESENT_PARTICIPLE):
            mark(front, form=form)
            stack.append(front)
        else:
            mark(front, person=spec.person, number=spec.agreement_number)
            plain = form in (None, Form.NORMAL, Form.IMPERATIVE, Form.SUBJUNCTIVE)
            bare_verb = (not plain or spec.interrogative) and not spec.copular and not stack
            if bare_verb or not spec.negated_object_question:
                stack.append(front)
        mark(front, form=form)

    # ------------------------------------------------------------------
    # Phrase and clause hooks
    # ------------------------------------------------------------------

    def wrap_indirect_object(self, element: Element) -> Element:
        if isinstance(element, NounPhrase):
            head = element.head
            if element.flag(Feature.PRONOMINAL):
                return element
            if head is not None and head.category is Category.PRONOUN:
                return element
            return PrepositionalPhrase(
                InflectedRequest(self.indirect_object_preposition, Category.PREPOSITION),
                complements=[element],
                features={Feature.DISCOURSE_FUNCTION: DiscourseFunction.INDIRECT_OBJECT},
            )
        if isinstance(element, Coordination):
            return element.derive(
                None,
                coordinates=[self.wrap_indirect_object(c) for c in element.coordinates],
            )
        return element

    def noun_post_modifier(self, element: Element, agreement: FeatureStore) -> Element:
        # "la puerta cerrada": a verb after the noun is an agreeing participle.
        if isinstance(element, (LexicalWord, InflectedRequest)) and element.category is Category.VERB:
            return element.derive(
                {
                    Feature.FORM: Form.PAST_PARTICIPLE,
                    Feature.GENDER: agreement.get(Feature.GENDER),
                    Feature.NUMBER: agreement.get(Feature.NUMBER),
                }
            )
        return element

    def adjust_agreement(
        self,
        clause: Clause,
        verb_head: Optional[Element],
        number: Optional[NumberAgreement],
        person: Optional[Person],
    ) -> Tuple[Optional[NumberAgreement], Optional[Person]]:
        # "hay un gato": present-tense haber without a subject is impersonal.
        if clause.subjects or verb_head is None or slot_base(verb_head) != "haber":
            return number, person
        if person not in (None, Person.THIRD):
            return number, person
        if clause.get(Feature.TENSE) not in (None, Tense.PRESENT) or clause.flag(Feature.PERFECT):
            return number, person
        return number, Person.NONE

    def mood_overrides(self, clause: Clause) -> Dict[Feature, Any]:
        role = clause.discourse_function
        form = clause.get(Feature.FORM)
        if role in (DiscourseFunction.OBJECT, DiscourseFunction.INDIRECT_OBJECT):
            if form is Form.IMPERATIVE:
                return {Feature.FORM: Form.SUBJUNCTIVE, Feature.TENSE: Tense.PRESENT}
            if form is Form.GERUND and not clause.subjects:
                return {Feature.SUPPRESSED_COMPLEMENTISER: True}
        elif role is DiscourseFunction.SUBJECT and form is not Form.SUBJUNCTIVE:
            return {Feature.FORM: Form.SUBJUNCTIVE, Feature.TENSE: Tense.PRESENT}
        return {}

    def insert_split_verb(
        self,
        items: List[Element],
        split: Element,
        interrogative_type: Optional[InterrogativeType],
    ) -> List[Element]:
        cluster = interrogative_type in _CLUSTER_INVERSION
        out: List[Element] = []
        found_verb = False
        index = 0
        while index < len(items):
            item = items[index]
            is_verb = item.category in (Category.VERB, Category.MODAL)
            if found_verb and not is_verb:
                break
            out.append(item)
            index += 1
            if is_verb:
                found_verb = True
                if not cluster:
                    break
        out.append(split)
        out.extend(items[index:])
        return out


__all__ = ["SpanishStrategy", "PRONOUN_INFERENCE", "REFLEXIVE_BASES"]
