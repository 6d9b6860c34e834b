# realizer/core/domain/syntax/processor.py
"""
syntax/processor.py
===================

Linearisation of the element tree.

`SyntaxProcessor.realise(element)` walks a phrase tree and returns a tree
of `Sequence` / `InflectedRequest` / `Literal` nodes in surface order,
ready for morphology. Every language-specific decision is delegated to the
`LanguageStrategy` bound to the resolver; the rules here are shared.

The input tree is never modified. Children are specialised with
`Element.derive(...)`, which copies the node and overlays features, so
realising the same tree twice gives the same output.

A phrase with no head realises to `None` and is dropped by its parent.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Tuple

from ..elements import (
    Clause,
    Coordination,
    DocumentElement,
    Element,
    InflectedRequest,
    LexicalWord,
    Literal,
    NounPhrase,
    Phrase,
    PrepositionalPhrase,
    Sequence,
    VerbPhrase,
)
from ..features import (
    VERB_FEATURES,
    Category,
    ClauseStatus,
    DiscourseFunction,
    Feature,
    FeatureKey,
    FeatureStore,
    Form,
    Gender,
    InterrogativeType,
    NumberAgreement,
    Person,
)
from ..lexical import WordEntry, WordResolver
from .verb_group import VerbGroupSpec, split_verb_group

if TYPE_CHECKING:  # pragma: no cover
    from ..strategy.base import LanguageStrategy


# Adjective ordering positions.
QUALITATIVE_POSITION = 1
COLOUR_POSITION = 2
CLASSIFYING_POSITION = 3
NOUN_POSITION = 4

_PERSON_RANK = {Person.FIRST: 0, Person.SECOND: 1, Person.THIRD: 2}

# Noun-phrase features copied onto the head word when set on the phrase.
_HEAD_FEATURES = (
    Feature.GENDER,
    Feature.NUMBER,
    Feature.PERSON,
    Feature.POSSESSIVE,
    Feature.PASSIVE,
    Feature.DISCOURSE_FUNCTION,
    Feature.IN_PREPOSITIONAL_PHRASE,
)


def _set_only(store: FeatureStore, keys: Iterable[Feature]) -> Dict[FeatureKey, Any]:
    return {key: store.get(key) for key in keys if store.is_set(key)}


def _word_entry(element: Optional[Element]) -> Optional[WordEntry]:
    if isinstance(element, LexicalWord):
        return element.entry
    if isinstance(element, InflectedRequest):
        return element.base_word
    if isinstance(element, Phrase):
        return _word_entry(element.head)
    return None


def _lexical(element: Optional[Element], key: Feature) -> Any:
    """Feature value of a word-like element, falling back to its lexicon entry."""
    if element is None:
        return None
    if element.features.is_set(key):
        return element.get(key)
    entry = _word_entry(element)
    return entry.get(key) if entry is not None else None


class SyntaxProcessor:
    """Realise phrases into ordered sequences of words."""

    def __init__(self, resolver: WordResolver):
        self.resolver = resolver
        self.strategy: "LanguageStrategy" = resolver.strategy

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def realise(self, element: Optional[Element]) -> Optional[Element]:
        if element is None:
            return None
        if isinstance(element, LexicalWord):
            return InflectedRequest.from_word(element)
        if isinstance(element, (InflectedRequest, Literal)):
            return element.derive()
        if isinstance(element, Sequence):
            return Sequence(
                self._realise_all(element.items),
                element.features.copy(),
                coordination=element.coordination,
            )
        if isinstance(element, Clause):
            return self.realise_clause(element)
        if isinstance(element, NounPhrase):
            return self.realise_noun_phrase(element)
        if isinstance(element, VerbPhrase):
            return self.realise_verb_phrase(element)
        if isinstance(element, PrepositionalPhrase):
            return self.realise_prepositional_phrase(element)
        if isinstance(element, Coordination):
            return self.realise_coordination(element)
        if isinstance(element, DocumentElement):
            return element.derive(None, components=self._realise_all(element.components))
        return element.derive()

    def _realise_all(self, elements: Iterable[Element]) -> List[Element]:
        out: List[Element] = []
        for element in elements:
            realised = self.realise(element)
            if realised is not None:
                out.append(realised)
        return out

    def _realise_as(
        self,
        element: Optional[Element],
        role: Optional[DiscourseFunction],
        overrides: Optional[Dict[FeatureKey, Any]] = None,
    ) -> Optional[Element]:
        """Realise a derived child and tag the result with `role`."""
        if element is None:
            return None
        if overrides:
            element = element.derive(overrides)
        realised = self.realise(element)
        if realised is not None and role is not None:
            realised.features.set(Feature.DISCOURSE_FUNCTION, role)
        return realised

    # ------------------------------------------------------------------
    # Noun phrases
    # ------------------------------------------------------------------

    def noun_phrase_agreement(self, phrase: NounPhrase) -> FeatureStore:
        """Gender (phrase, else head word) and number of a noun phrase."""
        gender = phrase.get(Feature.GENDER) or _lexical(phrase.head, Feature.GENDER)
        return FeatureStore(
            {
                Feature.GENDER: gender,
                Feature.NUMBER: phrase.get(Feature.NUMBER),
            }
        )

    def realise_noun_phrase(self, phrase: NounPhrase) -> Optional[Element]:
        if phrase.flag(Feature.ELIDED):
            return None
        agreement = self.noun_phrase_agreement(phrase)
        if phrase.flag(Feature.PRONOMINAL):
            return self.create_pronoun(phrase, agreement)
        if phrase.head is None:
            return None

        items: List[Optional[Element]] = []
        specifier = phrase.specifier
        if specifier is not None:
            overrides: Dict[FeatureKey, Any] = {}
            if specifier.category is not Category.PRONOUN and not isinstance(specifier, NounPhrase):
                overrides[Feature.NUMBER] = phrase.get(Feature.NUMBER)
            items.append(self._in_noun_phrase(specifier, DiscourseFunction.SPECIFIER, overrides, agreement))

        pre_modifiers = phrase.pre_modifiers
        if phrase.flag(Feature.ADJECTIVE_ORDERING):
            pre_modifiers = sort_pre_modifiers(pre_modifiers)
        for modifier in pre_modifiers:
            items.append(self._in_noun_phrase(modifier, DiscourseFunction.PRE_MODIFIER, None, agreement))

        items.append(
            self._in_noun_phrase(
                phrase.head,
                None,
                _set_only(phrase.features, _HEAD_FEATURES),
                agreement,
            )
        )

        for complement in phrase.complements:
            items.append(self._in_noun_phrase(complement, DiscourseFunction.COMPLEMENT, None, agreement))
        for modifier in phrase.post_modifiers:
            modifier = self.strategy.noun_post_modifier(modifier, agreement)
            items.append(self._in_noun_phrase(modifier, DiscourseFunction.POST_MODIFIER, None, agreement))

        return Sequence(items, _set_only(phrase.features, (Feature.DISCOURSE_FUNCTION, Feature.NUMBER)))

    def _in_noun_phrase(
        self,
        element: Element,
        role: Optional[DiscourseFunction],
        overrides: Optional[Dict[FeatureKey, Any]],
        agreement: FeatureStore,
    ) -> Optional[Element]:
        realised = self._realise_as(element, role, overrides)
        if isinstance(realised, InflectedRequest) and realised.agreement is None:
            realised.agreement = agreement
        return realised

    def create_pronoun(self, phrase: NounPhrase, agreement: FeatureStore) -> InflectedRequest:
        """
        Replace a pronominal noun phrase by a pronoun.

        The base form comes from the strategy, keyed on person and gender;
        the phrase's modifiers are dropped. The pronoun is returned bare
        (not wrapped in a sequence) so list-level passes can move it.
        """
        person = phrase.get(Feature.PERSON)
        gender = agreement.get(Feature.GENDER)
        entry = self.resolver.resolve(self.strategy.pronoun_base(person, gender), Category.PRONOUN)
        features = {
            Feature.GENDER: gender,
            Feature.PERSON: person or entry.get(Feature.PERSON),
            Feature.POSSESSIVE: phrase.get(Feature.POSSESSIVE),
            Feature.NUMBER: phrase.get(Feature.NUMBER),
            Feature.REFLEXIVE: phrase.get(Feature.REFLEXIVE),
            Feature.PASSIVE: phrase.get(Feature.PASSIVE),
            Feature.IN_PREPOSITIONAL_PHRASE: phrase.get(Feature.IN_PREPOSITIONAL_PHRASE),
            Feature.DISCOURSE_FUNCTION: phrase.get(Feature.DISCOURSE_FUNCTION) or DiscourseFunction.SPECIFIER,
        }
        return InflectedRequest.from_word(entry, features)

    # ------------------------------------------------------------------
    # Verb phrases
    # ------------------------------------------------------------------

    def verb_group_spec(self, phrase: VerbPhrase) -> VerbGroupSpec:
        f = phrase.features
        return VerbGroupSpec(
            head=phrase.head,
            form=f.get(Feature.FORM),
            tense=f.get(Feature.TENSE),
            modal=f.get(Feature.MODAL),
            perfect=f.flag(Feature.PERFECT),
            progressive=f.flag(Feature.PROGRESSIVE),
            passive=f.flag(Feature.PASSIVE),
            negated=f.flag(Feature.NEGATED),
            reflexive=f.flag(Feature.REFLEXIVE),
            interrogative_type=f.get(Feature.INTERROGATIVE_TYPE),
            person=f.get(Feature.PERSON),
            number=f.get(Feature.NUMBER),
            gender=f.get(Feature.GENDER),
            object_gender=self._object_gender(phrase.complements),
            copular=self.strategy.is_copular(phrase.head),
        )

    def _object_gender(self, complements: Iterable[Element]) -> Optional[Gender]:
        for complement in complements:
            if complement.discourse_function is not DiscourseFunction.OBJECT:
                continue
            if not isinstance(complement, NounPhrase):
                continue
            if self.noun_phrase_agreement(complement).get(Feature.GENDER) is Gender.FEMININE:
                return Gender.FEMININE
        return None

    def realise_verb_phrase(self, phrase: VerbPhrase) -> Optional[Element]:
        if phrase.head is None:
            return None

        stack = self.strategy.build_verb_group(self.verb_group_spec(phrase))
        auxiliaries, main = split_verb_group(stack, self.strategy.negation_particle)

        items: List[Optional[Element]] = []
        for slot in auxiliaries:
            items.append(self._realise_as(slot, DiscourseFunction.AUXILIARY))
        for modifier in phrase.pre_modifiers:
            items.append(self._realise_as(modifier, DiscourseFunction.PRE_MODIFIER))
        for slot in main:
            items.append(self.realise(slot))
        items.extend(
            self.realise_complements(
                phrase,
                phrase.get(Feature.INTERROGATIVE_TYPE),
                phrase.flag(Feature.PASSIVE),
            )
        )
        for modifier in phrase.post_modifiers:
            items.append(self._realise_as(modifier, DiscourseFunction.POST_MODIFIER))

        return Sequence(items, _set_only(phrase.features, (Feature.DISCOURSE_FUNCTION,)))

    def realise_complements(
        self,
        phrase: Phrase,
        interrogative_type: Optional[InterrogativeType],
        passive: bool,
    ) -> List[Element]:
        """
        Complements in emission order: indirect objects, then (active voice
        only) direct objects and unclassified complements. The bucket a
        question asks about is left out.
        """
        indirects: List[Element] = []
        directs: List[Element] = []
        unknowns: List[Element] = []
        for complement in phrase.complements:
            role = complement.discourse_function
            if role is DiscourseFunction.INDIRECT_OBJECT:
                complement = self.strategy.wrap_indirect_object(complement)
            realised = self.realise(complement)
            if realised is None:
                continue
            if role is DiscourseFunction.INDIRECT_OBJECT:
                indirects.append(realised)
            elif role is DiscourseFunction.OBJECT:
                directs.append(realised)
            else:
                unknowns.append(realised)

        out: List[Element] = []
        if interrogative_type is None or not interrogative_type.is_indirect_object:
            out.extend(indirects)
        if not passive:
            if interrogative_type is None or not interrogative_type.is_object:
                out.extend(directs)
            out.extend(unknowns)
        return out

    # ------------------------------------------------------------------
    # Prepositional phrases
    # ------------------------------------------------------------------

    def realise_prepositional_phrase(self, phrase: PrepositionalPhrase) -> Optional[Element]:
        if phrase.head is None:
            return None
        items: List[Optional[Element]] = []
        for modifier in phrase.pre_modifiers:
            items.append(self._realise_as(modifier, DiscourseFunction.PRE_MODIFIER))
        items.append(self._realise_as(phrase.head, DiscourseFunction.HEAD))
        for complement in phrase.complements:
            items.append(self._realise_as(complement, None, {Feature.IN_PREPOSITIONAL_PHRASE: True}))
        for modifier in phrase.post_modifiers:
            items.append(self._realise_as(modifier, DiscourseFunction.POST_MODIFIER))
        return Sequence(items, _set_only(phrase.features, (Feature.DISCOURSE_FUNCTION,)))

    # ------------------------------------------------------------------
    # Clauses
    # ------------------------------------------------------------------

    def subject_agreement(self, clause: Clause) -> Tuple[Optional[NumberAgreement], Optional[Person]]:
        """Number and person the verb takes from the clause's subjects."""
        subjects = clause.subjects
        plural = False
        person: Optional[Person] = None

        if len(subjects) > 1:
            plural = True
        elif len(subjects) == 1:
            subject = subjects[0]
            if isinstance(subject, Coordination):
                plural = (
                    self.strategy.coordination_number(subject.conjunction, len(subject.coordinates))
                    is NumberAgreement.PLURAL
                )
                person = _lowest_person(subject.coordinates)
            elif isinstance(subject, NounPhrase):
                head = subject.head
                person = subject.get(Feature.PERSON)
                if person is None and head is not None and head.category is Category.PRONOUN:
                    person = _lexical(head, Feature.PERSON)
                if subject.get(Feature.NUMBER) is NumberAgreement.PLURAL:
                    plural = True
                elif head is None and not subject.flag(Feature.PRONOMINAL):
                    plural = False
                elif head is not None and _lexical(head, Feature.NUMBER) is NumberAgreement.PLURAL:
                    plural = True
            elif not isinstance(subject, Clause):
                plural = _lexical(subject, Feature.NUMBER) is NumberAgreement.PLURAL
                if subject.category is Category.PRONOUN:
                    person = _lexical(subject, Feature.PERSON)

        number = NumberAgreement.PLURAL if plural else clause.get(Feature.NUMBER)
        return number, person

    def _passive_objects(self, clause: Clause) -> List[Element]:
        verb_phrase = clause.verb_phrase
        if not clause.flag(Feature.PASSIVE) or not isinstance(verb_phrase, Phrase):
            return []
        if clause.get(Feature.INTERROGATIVE_TYPE) is InterrogativeType.WHAT_OBJECT:
            return []
        return [
            c for c in verb_phrase.complements
            if c.discourse_function is DiscourseFunction.OBJECT
        ]

    def _passive_agreement(self, objects: List[Element]) -> Tuple[Optional[NumberAgreement], Optional[Person]]:
        number: Optional[NumberAgreement] = None
        plural = len(objects) > 1
        for obj in objects:
            if isinstance(obj, Coordination) and self.strategy.is_plural_conjunction(obj.conjunction):
                plural = True
            if number is None:
                number = obj.get(Feature.NUMBER)
        if plural:
            number = NumberAgreement.PLURAL
        person = _lowest_person(objects) if objects else None
        if objects and person is None:
            person = Person.THIRD
        return number, person

    def _verb_phrase_for(
        self,
        clause: Clause,
        number: Optional[NumberAgreement],
        person: Optional[Person],
        extra_post_modifiers: List[Element],
    ) -> Optional[Element]:
        verb_phrase = clause.verb_phrase
        if verb_phrase is None:
            return None
        overrides = _set_only(clause.features, VERB_FEATURES + (Feature.GENDER,))
        if number is not None:
            overrides[Feature.NUMBER] = number
        if person is not None:
            overrides[Feature.PERSON] = person
        if isinstance(verb_phrase, (Phrase, Coordination)):
            post_modifiers = list(verb_phrase.post_modifiers) + list(clause.post_modifiers) + extra_post_modifiers
            return verb_phrase.derive(overrides, post_modifiers=post_modifiers)
        return verb_phrase.derive(overrides)

    def realise_clause(self, clause: Clause) -> Optional[Element]:
        mood = self.strategy.mood_overrides(clause)
        if mood:
            clause = clause.derive(mood)

        f = clause.features
        itype: Optional[InterrogativeType] = f.get(Feature.INTERROGATIVE_TYPE)
        form = f.get(Feature.FORM)
        passive = f.flag(Feature.PASSIVE)
        role = clause.discourse_function

        verb_head = clause.verb_phrase.head if isinstance(clause.verb_phrase, Phrase) else clause.verb_phrase
        number, person = self.subject_agreement(clause)
        number, person = self.strategy.adjust_agreement(clause, verb_head, number, person)
        if form is Form.IMPERATIVE and person is None and not f.is_set(Feature.PERSON):
            person = Person.SECOND

        passive_objects = self._passive_objects(clause)
        if passive_objects:
            passive_number, passive_person = self._passive_agreement(passive_objects)
            number = passive_number or number
            person = passive_person or person

        front_modifiers = list(clause.front_modifiers)
        moved: List[Element] = []
        suppress_complementiser = f.flag(Feature.SUPPRESSED_COMPLEMENTISER)
        if form in (Form.INFINITIVE, Form.SUBJUNCTIVE):
            moved, front_modifiers = front_modifiers, []
            if form is Form.INFINITIVE:
                suppress_complementiser = True

        verb_phrase = self._verb_phrase_for(clause, number, person, moved)
        vp_features = verb_phrase.features if verb_phrase is not None else f

        items: List[Optional[Element]] = []
        complementiser = self._complementiser(clause, suppress_complementiser)
        cue = self._cue_phrase(clause)
        if role is DiscourseFunction.SUBJECT:
            items.extend((cue, complementiser))
        else:
            items.extend((complementiser, cue))

        subjects = list(clause.subjects)
        split: Optional[Element] = None
        if itype is not None:
            front, split, subjects = self._interrogative(clause, itype, verb_head, vp_features, subjects, number, person)
            items.extend(front)
        else:
            for modifier in front_modifiers:
                items.append(self._realise_as(modifier, DiscourseFunction.FRONT_MODIFIER))

        if form not in (Form.INFINITIVE, Form.IMPERATIVE) and not passive and split is None:
            items.extend(self._realise_subjects(clause, subjects))

        if passive_objects:
            promoted = [
                self._realise_as(obj, DiscourseFunction.OBJECT, {Feature.PASSIVE: True})
                for obj in passive_objects
            ]
            if itype is not None:
                split = Sequence(promoted)
            else:
                items.extend(promoted)

        realised_vp = self.realise(verb_phrase)
        if realised_vp is not None:
            if split is not None and isinstance(realised_vp, Sequence):
                realised_vp = Sequence(
                    self.strategy.insert_split_verb(realised_vp.items, split, itype),
                    realised_vp.features,
                )
            elif split is not None:
                realised_vp = Sequence(self.strategy.insert_split_verb([realised_vp], split, itype))
            items.append(realised_vp)
        elif split is not None:
            items.append(split)

        if passive and subjects:
            items.extend(self._passive_subjects(subjects))

        if itype is not None:
            for modifier in front_modifiers:
                items.append(self._realise_as(modifier, DiscourseFunction.FRONT_MODIFIER))

        features: Dict[FeatureKey, Any] = {Feature.DISCOURSE_FUNCTION: role}
        if itype is not None:
            features[Feature.INTERROGATIVE] = True
        return Sequence(items, features)

    def _complementiser(self, clause: Clause, suppressed: bool) -> Optional[Element]:
        subordinate = clause.get(Feature.CLAUSE_STATUS) is ClauseStatus.SUBORDINATE
        if suppressed or not (subordinate or clause.discourse_function is DiscourseFunction.SUBJECT):
            return None
        value = clause.get(Feature.COMPLEMENTISER) or self.strategy.complementiser
        element = value if isinstance(value, Element) else InflectedRequest(str(value), Category.COMPLEMENTISER)
        return self.realise(element)

    def _cue_phrase(self, clause: Clause) -> Optional[Element]:
        value = clause.get(Feature.CUE_PHRASE)
        if value is None:
            return None
        element = value if isinstance(value, Element) else Literal(str(value))
        return self._realise_as(element, DiscourseFunction.CUE_PHRASE)

    def _realise_subjects(self, clause: Clause, subjects: List[Element]) -> List[Element]:
        possessive = clause.get(Feature.FORM) is Form.GERUND and not clause.flag(Feature.SUPPRESS_GENITIVE_IN_GERUND)
        out: List[Element] = []
        for subject in subjects:
            overrides: Dict[FeatureKey, Any] = {Feature.DISCOURSE_FUNCTION: DiscourseFunction.SUBJECT}
            if possessive:
                overrides[Feature.POSSESSIVE] = True
            realised = self._realise_as(subject, DiscourseFunction.SUBJECT, overrides)
            if realised is not None:
                out.append(realised)
        return out

    def _passive_subjects(self, subjects: List[Element]) -> List[Element]:
        preposition = self.realise(InflectedRequest(self.strategy.passive_preposition, Category.PREPOSITION))
        out: List[Element] = [preposition]
        for subject in subjects:
            realised = self._realise_as(
                subject,
                DiscourseFunction.SUBJECT,
                {Feature.PASSIVE: True, Feature.DISCOURSE_FUNCTION: DiscourseFunction.SUBJECT},
            )
            if realised is not None:
                out.append(realised)
        return out

    # Interrogatives -----------------------------------------------------

    def _interrogative(
        self,
        clause: Clause,
        itype: InterrogativeType,
        verb_head: Optional[Element],
        vp_features: FeatureStore,
        subjects: List[Element],
        number: Optional[NumberAgreement],
        person: Optional[Person],
    ) -> Tuple[List[Element], Optional[Element], List[Element]]:
        """
        Front material, split subjects and remaining subjects for a question.

        Split subjects are placed inside the verb group by the strategy
        ("does John walk", "¿ha comido Juan?").
        """
        strategy = self.strategy
        passive = clause.flag(Feature.PASSIVE)
        copular = strategy.is_copular(verb_head)
        front: List[Element] = []
        split: Optional[Element] = None

        if itype is InterrogativeType.YES_NO:
            if strategy.do_support and strategy.needs_do_support(vp_features, copular, True):
                front.append(self._do_auxiliary(clause, number, person))
            else:
                split = Sequence(self._realise_subjects(clause, subjects))
            return front, split, subjects

        if itype.is_subject:
            if passive:
                front.append(self.realise(InflectedRequest(strategy.passive_preposition, Category.PREPOSITION)))
            front.append(self._keyword(itype, vp_features))
            return front, None, []

        if itype is InterrogativeType.HOW_MANY:
            front.append(self._keyword(itype, vp_features))
            return front, None, subjects

        preposition = self._fronted_preposition(clause, itype)
        if preposition is not None:
            front.append(preposition)
        front.append(self._keyword(itype, vp_features))
        if strategy.do_support and strategy.needs_do_support(vp_features, copular, False):
            front.append(self._do_auxiliary(clause, number, person))
        elif not passive:
            split = Sequence(self._realise_subjects(clause, subjects))
        return front, split, subjects

    def _keyword(self, itype: InterrogativeType, vp_features: FeatureStore) -> Element:
        word = self.strategy.interrogative_word(itype)
        entry = self.resolver.resolve(word, Category.PRONOUN)
        request = InflectedRequest.from_word(
            entry,
            _set_only(vp_features, (Feature.NUMBER, Feature.GENDER)),
        )
        request.features.set(Feature.DISCOURSE_FUNCTION, DiscourseFunction.FRONT_MODIFIER)
        return request

    def _do_auxiliary(
        self,
        clause: Clause,
        number: Optional[NumberAgreement],
        person: Optional[Person],
    ) -> Element:
        return InflectedRequest(
            "do",
            Category.VERB,
            {
                Feature.TENSE: clause.get(Feature.TENSE),
                Feature.PERSON: person or clause.get(Feature.PERSON),
                Feature.NUMBER: number or clause.get(Feature.NUMBER),
                Feature.DISCOURSE_FUNCTION: DiscourseFunction.AUXILIARY,
            },
        )

    def _fronted_preposition(self, clause: Clause, itype: InterrogativeType) -> Optional[Element]:
        """'¿A quién da ...?': the preposition of the questioned object moves to the front."""
        default = self.strategy.indirect_object_preposition
        verb_phrase = clause.verb_phrase
        if default is None or not isinstance(verb_phrase, Phrase):
            return None
        if itype.is_object:
            wanted = DiscourseFunction.OBJECT
        elif itype.is_indirect_object:
            wanted = DiscourseFunction.INDIRECT_OBJECT
        else:
            return None
        target = next((c for c in verb_phrase.complements if c.discourse_function is wanted), None)
        if target is None:
            return None
        if isinstance(target, PrepositionalPhrase):
            return self.realise(target.head)
        if itype.is_indirect_object:
            return self.realise(InflectedRequest(default, Category.PREPOSITION))
        return None

    # ------------------------------------------------------------------
    # Coordination
    # ------------------------------------------------------------------

    def realise_coordination(self, coordination: Coordination) -> Optional[Element]:
        if not coordination.coordinates:
            return None
        f = coordination.features
        conjunction = coordination.conjunction or self.strategy.default_conjunction
        role = f.get(Feature.DISCOURSE_FUNCTION)
        verb_features = _set_only(f, VERB_FEATURES)

        items: List[Optional[Element]] = []
        for modifier in coordination.pre_modifiers:
            items.append(self._realise_as(modifier, DiscourseFunction.PRE_MODIFIER))

        first = True
        for coordinate in coordination.coordinates:
            overrides: Dict[FeatureKey, Any] = {}
            if role is not None:
                overrides[Feature.DISCOURSE_FUNCTION] = role
            if isinstance(coordinate, (VerbPhrase, Clause)):
                overrides.update(verb_features)
            realised = self._realise_as(coordinate, None, overrides)
            if realised is None:
                continue
            if not first:
                items.append(
                    Literal(
                        conjunction,
                        category=Category.CONJUNCTION,
                        features={Feature.DISCOURSE_FUNCTION: DiscourseFunction.CONJUNCTION},
                    )
                )
            items.append(realised)
            first = False

        for complement in coordination.complements:
            items.append(self._realise_as(complement, DiscourseFunction.COMPLEMENT))
        for modifier in coordination.post_modifiers:
            items.append(self._realise_as(modifier, DiscourseFunction.POST_MODIFIER))

        number = self.strategy.coordination_number(coordination.conjunction, len(coordination.coordinates))
        return Sequence(
            items,
            {Feature.DISCOURSE_FUNCTION: role, Feature.NUMBER: number},
            coordination=True,
        )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _lowest_person(elements: Iterable[Element]) -> Optional[Person]:
    """First person beats second, second beats third."""
    best: Optional[Person] = None
    for element in elements:
        person = element.get(Feature.PERSON)
        if person is None and element.category is Category.PRONOUN:
            person = _lexical(element, Feature.PERSON)
        if person is None and isinstance(element, NounPhrase) and element.head is not None:
            if element.head.category is Category.PRONOUN:
                person = _lexical(element.head, Feature.PERSON)
        if person not in _PERSON_RANK:
            continue
        if best is None or _PERSON_RANK[person] < _PERSON_RANK[best]:
            best = person
    return best


def _min_position(modifier: Element) -> int:
    if modifier.category in (Category.NOUN,) or isinstance(modifier, NounPhrase):
        return NOUN_POSITION
    entry = _word_entry(modifier)
    if modifier.category is Category.ADJECTIVE and entry is not None:
        if entry.flag(Feature.QUALITATIVE):
            return QUALITATIVE_POSITION
        if entry.flag(Feature.COLOUR):
            return COLOUR_POSITION
        if entry.flag(Feature.CLASSIFYING):
            return CLASSIFYING_POSITION
    return QUALITATIVE_POSITION


def _max_position(modifier: Element) -> int:
    entry = _word_entry(modifier)
    if modifier.category is Category.ADJECTIVE:
        if entry is not None:
            if entry.flag(Feature.CLASSIFYING):
                return CLASSIFYING_POSITION
            if entry.flag(Feature.COLOUR):
                return COLOUR_POSITION
            if entry.flag(Feature.QUALITATIVE):
                return QUALITATIVE_POSITION
        return CLASSIFYING_POSITION
    return NOUN_POSITION


def sort_pre_modifiers(modifiers: List[Element]) -> List[Element]:
    """
    Order noun pre-modifiers qualitative < colour < classifying < noun.

    Stable bubble sort on position ranges, so modifiers with no ordering
    information stay where they were.
    """
    ordered = list(modifiers)
    if len(ordered) <= 1:
        return ordered
    changed = True
    while changed:
        changed = False
        for i in range(len(ordered) - 1):
            if _min_position(ordered[i]) > _max_position(ordered[i + 1]):
                ordered[i], ordered[i + 1] = ordered[i + 1], ordered[i]
                changed = True
    return ordered


__all__ = [
    "SyntaxProcessor",
    "sort_pre_modifiers",
    "QUALITATIVE_POSITION",
    "COLOUR_POSITION",
    "CLASSIFYING_POSITION",
    "NOUN_POSITION",
]
