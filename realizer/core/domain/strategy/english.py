# realizer/core/domain/strategy/english.py
"""
ENGLISH STRATEGY
----------------

English word tables and the English verb group.

Verb group
==========
The chain is built from the innermost verb outwards:

    head -> [be + past participle] (passive)
         -> [be + present participle] (progressive)
         -> [have + past participle] (perfect, or a modal in the past)
         -> modal ("to", "will" or the explicit one)

Negation adds "not" after the first auxiliary, or "do not" when there is no
auxiliary at all ("I do not walk"). Questions without an auxiliary get a
dummy "do" from the clause, so the main verb stays in its base form.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from ..elements import Clause, Coordination, Element, InflectedRequest, NounPhrase
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
from ..syntax.verb_group import VerbGroupSpec, head_slot, mark, verb_slot
from .base import LanguageStrategy, register_strategy


_FIRST_S = {"person": Person.FIRST, "number": NumberAgreement.SINGULAR}
_SECOND = {"person": Person.SECOND}
_THIRD_M = {"person": Person.THIRD, "number": NumberAgreement.SINGULAR, "gender": Gender.MASCULINE}
_THIRD_F = {"person": Person.THIRD, "number": NumberAgreement.SINGULAR, "gender": Gender.FEMININE}
_THIRD_N = {"person": Person.THIRD, "number": NumberAgreement.SINGULAR, "gender": Gender.NEUTER}
_FIRST_P = {"person": Person.FIRST, "number": NumberAgreement.PLURAL}
_THIRD_P = {"person": Person.THIRD, "number": NumberAgreement.PLURAL}

PRONOUN_INFERENCE: Dict[str, Dict[str, Any]] = {
    "i": _FIRST_S,
    "me": _FIRST_S,
    "my": {**_FIRST_S, "possessive": True},
    "mine": {**_FIRST_S, "possessive": True},
    "myself": {**_FIRST_S, "reflexive": True},
    "you": _SECOND,
    "your": {**_SECOND, "possessive": True},
    "yours": {**_SECOND, "possessive": True},
    "yourself": {**_SECOND, "number": NumberAgreement.SINGULAR, "reflexive": True},
    "yourselves": {**_SECOND, "number": NumberAgreement.PLURAL, "reflexive": True},
    "he": _THIRD_M,
    "him": _THIRD_M,
    "his": {**_THIRD_M, "possessive": True},
    "himself": {**_THIRD_M, "reflexive": True},
    "she": _THIRD_F,
    "her": _THIRD_F,
    "hers": {**_THIRD_F, "possessive": True},
    "herself": {**_THIRD_F, "reflexive": True},
    "it": _THIRD_N,
    "its": {**_THIRD_N, "possessive": True},
    "itself": {**_THIRD_N, "reflexive": True},
    "we": _FIRST_P,
    "us": _FIRST_P,
    "our": {**_FIRST_P, "possessive": True},
    "ours": {**_FIRST_P, "possessive": True},
    "ourselves": {**_FIRST_P, "reflexive": True},
    "they": _THIRD_P,
    "them": _THIRD_P,
    "their": {**_THIRD_P, "possessive": True},
    "theirs": {**_THIRD_P, "possessive": True},
    "themselves": {**_THIRD_P, "reflexive": True},
}

BE_PARADIGM: Dict[str, str] = {
    "present1s": "am",
    "present3s": "is",
    "present_plural": "are",
    "past1s": "was",
    "past_plural": "were",
    "past_participle": "been",
    "present_participle": "being",
}


@register_strategy("en")
class EnglishStrategy(LanguageStrategy):
    morphology_family = "germanic"
    morphology_config = {"irregular": {"be": BE_PARADIGM}}

    default_conjunction = "and"
    plural_conjunctions = frozenset({"and"})
    complementiser = "that"
    passive_preposition = "by"
    negation_particle = "not"
    copulas = frozenset({"be"})
    interrogative_words = {
        InterrogativeType.WHO_SUBJECT: "who",
        InterrogativeType.WHO_OBJECT: "who",
        InterrogativeType.WHO_INDIRECT_OBJECT: "who",
        InterrogativeType.WHAT_SUBJECT: "what",
        InterrogativeType.WHAT_OBJECT: "what",
        InterrogativeType.HOW: "how",
        InterrogativeType.HOW_PREDICATE: "how",
        InterrogativeType.WHY: "why",
        InterrogativeType.WHERE: "where",
        InterrogativeType.HOW_MANY: "how many",
    }
    do_support = True
    variant_aliases = {"be": tuple(BE_PARADIGM.values())}
    pronoun_inference = PRONOUN_INFERENCE

    def pronoun_base(self, person: Optional[Person], gender: Optional[Gender]) -> str:
        if person is Person.FIRST:
            return "I"
        if person is Person.SECOND:
            return "you"
        if gender is Gender.FEMININE:
            return "she"
        if gender is Gender.MASCULINE:
            return "he"
        return "it"

    # ------------------------------------------------------------------
    # Verb group
    # ------------------------------------------------------------------

    def build_verb_group(self, spec: VerbGroupSpec) -> List[Element]:
        form = spec.form
        tense = spec.tense
        if form in (Form.GERUND, Form.INFINITIVE):
            tense = Tense.PRESENT

        modal_past = False
        if form is Form.INFINITIVE:
            modal = "to"
        elif (
            spec.normal_form
            and tense is Tense.FUTURE
            and spec.modal is None
            and (not spec.head_coordinated or spec.interrogative)
        ):
            modal = "will"
        else:
            modal = spec.modal
            modal_past = modal is not None and tense is Tense.PAST

        stack: List[Element] = []
        front = head_slot(spec.head)
        mark(front, tense=tense)
        if modal is not None:
            mark(front, negated=False)
        if form in (Form.IMPERATIVE, Form.INFINITIVE, Form.BARE_INFINITIVE):
            mark(front, non_morph=True)

        if spec.passive:
            front = self._add_be(stack, front, Form.PAST_PARTICIPLE)
        if spec.progressive:
            front = self._add_be(stack, front, Form.PRESENT_PARTICIPLE)
        if spec.perfect or modal_past:
            front = self._add_have(stack, front, tense, modal)

        if modal is not None:
            mark(front, non_morph=True)
            if front is not None:
                stack.append(front)
            front = None

        if spec.negated:
            front = self._add_not(stack, front, spec, modal is not None)
        if front is not None:
            self._push_front(stack, front, spec)
        if modal is not None:
            stack.append(verb_slot(modal, Category.MODAL, non_morph=True))
        return stack

    @staticmethod
    def _add_be(stack: List[Element], front: Optional[Element], form: Form) -> Element:
        if front is not None:
            mark(front, form=form)
            stack.append(front)
        return verb_slot("be")

    @staticmethod
    def _add_have(
        stack: List[Element],
        front: Optional[Element],
        tense: Optional[Tense],
        modal: Optional[str],
    ) -> Element:
        if front is not None:
            mark(front, form=Form.PAST_PARTICIPLE)
            stack.append(front)
        return verb_slot("have", tense=tense, non_morph=True if modal is not None else None)

    def _add_not(
        self,
        stack: List[Element],
        front: Optional[Element],
        spec: VerbGroupSpec,
        has_modal: bool,
    ) -> Optional[Element]:
        particle = verb_slot(self.negation_particle, Category.ADVERB)
        if stack or (front is not None and self.is_copular(front)):
            stack.append(particle)
            return front

        if front is not None and not has_modal:
            mark(front, negated=True)
            stack.append(front)
        stack.append(particle)
        itype = spec.interrogative_type
        if itype is not None and itype.is_object:
            return front
        return verb_slot("do")

    def _push_front(self, stack: List[Element], front: Element, spec: VerbGroupSpec) -> None:
        form = spec.form
        if form is Form.GERUND:
            mark(front, form=Form.PRESENT_PARTICIPLE)
            stack.append(front)
            return
        if form in (Form.PAST_PARTICIPLE, Form.PRESENT_PARTICIPLE):
            mark(front, form=form)
            stack.append(front)
            return

        itype = spec.interrogative_type
        subject_question = itype is not None and itype.is_subject
        # "how many cats jump": the subject stays put and the verb agrees with it.
        how_many = itype is InterrogativeType.HOW_MANY
        bare_verb = (not spec.normal_form or spec.interrogative) and not spec.copular and not stack
        if bare_verb and not how_many:
            if not subject_question:
                mark(front, non_morph=True)
            stack.append(front)
        else:
            mark(front, tense=spec.tense, person=spec.person, number=spec.agreement_number)
            if not spec.negated_object_question:
                stack.append(front)

    # ------------------------------------------------------------------
    # Clause hooks
    # ------------------------------------------------------------------

    def adjust_agreement(
        self,
        clause: Clause,
        verb_head: Optional[Element],
        number: Optional[NumberAgreement],
        person: Optional[Person],
    ) -> Tuple[Optional[NumberAgreement], Optional[Person]]:
        # "there are two cats", "who are the men": a copula agrees with its
        # complement when the subject is empty or expletive.
        if not self.is_copular(verb_head):
            return number, person
        itype = clause.get(Feature.INTERROGATIVE_TYPE)
        expletive = any(_is_expletive(s) for s in clause.subjects)
        if not expletive and not (itype is not None and itype.is_subject):
            return number, person

        complements = getattr(clause.verb_phrase, "complements", [])
        for complement in complements:
            if complement.discourse_function not in (DiscourseFunction.OBJECT, DiscourseFunction.COMPLEMENT, None):
                continue
            if isinstance(complement, Coordination) and self.is_plural_conjunction(complement.conjunction):
                return NumberAgreement.PLURAL, person
            if complement.get(Feature.NUMBER) is NumberAgreement.PLURAL:
                return NumberAgreement.PLURAL, person
        return NumberAgreement.SINGULAR, person

    def needs_do_support(self, features: FeatureStore, copular: bool, yes_no: bool) -> bool:
        progressive = features.flag(Feature.PROGRESSIVE)
        perfect = features.flag(Feature.PERFECT)
        passive = features.flag(Feature.PASSIVE)
        modal = features.is_set(Feature.MODAL)
        future = features.get(Feature.TENSE) is Tense.FUTURE
        negated = features.flag(Feature.NEGATED)
        if copular or progressive or perfect or passive or modal or future:
            return False
        if yes_no:
            return not negated
        itype = features.get(Feature.INTERROGATIVE_TYPE)
        # A negated question already carries "do not" from its verb group.
        return not negated or (itype is not None and itype.is_object)

    def insert_split_verb(
        self,
        items: List[Element],
        split: Element,
        interrogative_type: Optional[InterrogativeType],
    ) -> List[Element]:
        if not items:
            return [split]
        return [items[0], split, *items[1:]]


def _is_expletive(subject: Element) -> bool:
    if subject.flag(Feature.EXPLETIVE_SUBJECT):
        return True
    if isinstance(subject, NounPhrase) and subject.head is not None:
        return subject.head.flag(Feature.EXPLETIVE_SUBJECT)
    if isinstance(subject, InflectedRequest):
        return bool(subject.lexical(Feature.EXPLETIVE_SUBJECT))
    return False


__all__ = ["EnglishStrategy", "PRONOUN_INFERENCE", "BE_PARADIGM"]
