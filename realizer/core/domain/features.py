# realizer/core/domain/features.py
"""
core/domain/features.py
=======================

The feature vocabulary shared by every node of an element tree.

This module defines:
- The value enumerations (tense, form, person, number, gender, ...).
- The closed `Feature` key enumeration and the declared value type of
  each key.
- `FeatureStore`, a validated key -> value map with an explicit "unset"
  state.

Unset is not the same thing as False: `store.get(Feature.NEGATED)` is
`None` until someone sets the flag, while `store.flag(Feature.NEGATED)`
collapses both to a boolean for rule code that does not care.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple, Type, Union

from .exceptions import FeatureValueError


# ---------------------------------------------------------------------------
# Value enumerations
# ---------------------------------------------------------------------------


class Tense(str, Enum):
    PAST = "past"
    PRESENT = "present"
    FUTURE = "future"
    IMPERFECT = "imperfect"
    CONDITIONAL = "conditional"


class Form(str, Enum):
    NORMAL = "normal"
    GERUND = "gerund"
    INFINITIVE = "infinitive"
    BARE_INFINITIVE = "bare_infinitive"
    IMPERATIVE = "imperative"
    PAST_PARTICIPLE = "past_participle"
    PRESENT_PARTICIPLE = "present_participle"
    SUBJUNCTIVE = "subjunctive"


class Person(str, Enum):
    FIRST = "first"
    SECOND = "second"
    THIRD = "third"
    # Impersonal verb forms (Spanish "hay").
    NONE = "none"


class NumberAgreement(str, Enum):
    SINGULAR = "singular"
    PLURAL = "plural"
    BOTH = "both"


class Gender(str, Enum):
    MASCULINE = "masculine"
    FEMININE = "feminine"
    NEUTER = "neuter"


class InterrogativeType(str, Enum):
    YES_NO = "yes_no"
    WHO_SUBJECT = "who_subject"
    WHAT_SUBJECT = "what_subject"
    WHO_OBJECT = "who_object"
    WHAT_OBJECT = "what_object"
    WHO_INDIRECT_OBJECT = "who_indirect_object"
    HOW = "how"
    HOW_PREDICATE = "how_predicate"
    WHY = "why"
    WHERE = "where"
    HOW_MANY = "how_many"

    @property
    def is_object(self) -> bool:
        """True when the question asks for the direct object."""
        return self in (InterrogativeType.WHO_OBJECT, InterrogativeType.WHAT_OBJECT)

    @property
    def is_indirect_object(self) -> bool:
        return self is InterrogativeType.WHO_INDIRECT_OBJECT

    @property
    def is_subject(self) -> bool:
        return self in (InterrogativeType.WHO_SUBJECT, InterrogativeType.WHAT_SUBJECT)


class DiscourseFunction(str, Enum):
    SUBJECT = "subject"
    OBJECT = "object"
    INDIRECT_OBJECT = "indirect_object"
    COMPLEMENT = "complement"
    SPECIFIER = "specifier"
    PRE_MODIFIER = "pre_modifier"
    POST_MODIFIER = "post_modifier"
    FRONT_MODIFIER = "front_modifier"
    CUE_PHRASE = "cue_phrase"
    VERB_PHRASE = "verb_phrase"
    AUXILIARY = "auxiliary"
    CONJUNCTION = "conjunction"
    HEAD = "head"


class ClauseStatus(str, Enum):
    MATRIX = "matrix"
    SUBORDINATE = "subordinate"


class Category(str, Enum):
    """Lexical categories plus the wildcard used for lookups."""

    NOUN = "noun"
    VERB = "verb"
    ADJECTIVE = "adjective"
    ADVERB = "adverb"
    PRONOUN = "pronoun"
    DETERMINER = "determiner"
    PREPOSITION = "preposition"
    CONJUNCTION = "conjunction"
    COMPLEMENTISER = "complementiser"
    MODAL = "modal"
    SYMBOL = "symbol"
    ANY = "any"


# ---------------------------------------------------------------------------
# Feature keys
# ---------------------------------------------------------------------------


class Feature(str, Enum):
    # inflection
    TENSE = "tense"
    FORM = "form"
    PERSON = "person"
    NUMBER = "number"
    GENDER = "gender"

    # verb group
    NEGATED = "negated"
    PASSIVE = "passive"
    PERFECT = "perfect"
    PROGRESSIVE = "progressive"
    MODAL = "modal"
    INTERROGATIVE_TYPE = "interrogative_type"

    # clause
    CUE_PHRASE = "cue_phrase"
    COMPLEMENTISER = "complementiser"
    SUPPRESSED_COMPLEMENTISER = "suppressed_complementiser"
    SUPPRESS_GENITIVE_IN_GERUND = "suppress_genitive_in_gerund"
    CLAUSE_STATUS = "clause_status"

    # noun phrase
    PRONOMINAL = "pronominal"
    POSSESSIVE = "possessive"
    REFLEXIVE = "reflexive"
    ELIDED = "elided"
    ADJECTIVE_ORDERING = "adjective_ordering"

    # adjectives and adverbs
    IS_COMPARATIVE = "is_comparative"
    IS_SUPERLATIVE = "is_superlative"

    # coordination
    CONJUNCTION = "conjunction"

    # pipeline bookkeeping
    DISCOURSE_FUNCTION = "discourse_function"
    NON_MORPH = "non_morph"
    INTERROGATIVE = "interrogative"
    IN_PREPOSITIONAL_PHRASE = "in_prepositional_phrase"

    # lexical baseline
    PROPER = "proper"
    COPULAR = "copular"
    EXPLETIVE_SUBJECT = "expletive_subject"
    QUALITATIVE = "qualitative"
    COLOUR = "colour"
    CLASSIFYING = "classifying"
    DOUBLE_CONSONANT = "double_consonant"
    INTRANSITIVE = "intransitive"
    TRANSITIVE = "transitive"
    DITRANSITIVE = "ditransitive"
    COUNTABLE = "countable"


# Anything that is not an enum/bool/str (cue phrases and complementisers
# may be whole elements) is declared as `object`.
FEATURE_TYPES: Dict[Feature, Union[Type[Any], Tuple[Type[Any], ...]]] = {
    Feature.TENSE: Tense,
    Feature.FORM: Form,
    Feature.PERSON: Person,
    Feature.NUMBER: NumberAgreement,
    Feature.GENDER: Gender,
    Feature.NEGATED: bool,
    Feature.PASSIVE: bool,
    Feature.PERFECT: bool,
    Feature.PROGRESSIVE: bool,
    Feature.MODAL: str,
    Feature.INTERROGATIVE_TYPE: InterrogativeType,
    Feature.CUE_PHRASE: object,
    Feature.COMPLEMENTISER: object,
    Feature.SUPPRESSED_COMPLEMENTISER: bool,
    Feature.SUPPRESS_GENITIVE_IN_GERUND: bool,
    Feature.CLAUSE_STATUS: ClauseStatus,
    Feature.PRONOMINAL: bool,
    Feature.POSSESSIVE: bool,
    Feature.REFLEXIVE: bool,
    Feature.ELIDED: bool,
    Feature.ADJECTIVE_ORDERING: bool,
    Feature.IS_COMPARATIVE: bool,
    Feature.IS_SUPERLATIVE: bool,
    Feature.CONJUNCTION: str,
    Feature.DISCOURSE_FUNCTION: DiscourseFunction,
    Feature.NON_MORPH: bool,
    Feature.INTERROGATIVE: bool,
    Feature.IN_PREPOSITIONAL_PHRASE: bool,
    Feature.PROPER: bool,
    Feature.COPULAR: bool,
    Feature.EXPLETIVE_SUBJECT: bool,
    Feature.QUALITATIVE: bool,
    Feature.COLOUR: bool,
    Feature.CLASSIFYING: bool,
    Feature.DOUBLE_CONSONANT: bool,
    Feature.INTRANSITIVE: bool,
    Feature.TRANSITIVE: bool,
    Feature.DITRANSITIVE: bool,
    Feature.COUNTABLE: bool,
}

# Features a clause hands down to its verb phrase.
VERB_FEATURES: Tuple[Feature, ...] = (
    Feature.MODAL,
    Feature.TENSE,
    Feature.NEGATED,
    Feature.NUMBER,
    Feature.PASSIVE,
    Feature.PERFECT,
    Feature.PERSON,
    Feature.PROGRESSIVE,
    Feature.FORM,
    Feature.INTERROGATIVE_TYPE,
)

FeatureKey = Union[Feature, str]


def to_feature(key: FeatureKey) -> Feature:
    """Coerce a string key ("tense", "TENSE") to a `Feature`."""
    if isinstance(key, Feature):
        return key
    if isinstance(key, str):
        try:
            return Feature(key.strip().lower())
        except ValueError:
            pass
    raise FeatureValueError(f"Unknown feature key: {key!r}")


def coerce_value(key: Feature, value: Any) -> Any:
    """
    Validate `value` against the declared type of `key`.

    Enum-typed keys accept the member itself, its value ("past") or its
    name ("PAST"). Everything else must already have the declared type.
    """
    expected = FEATURE_TYPES[key]
    if expected is object:
        return value

    if isinstance(expected, type) and issubclass(expected, Enum):
        if isinstance(value, expected):
            return value
        if isinstance(value, str):
            raw = value.strip()
            for member in expected:
                if raw.lower() == member.value or raw.upper() == member.name:
                    return member
        raise FeatureValueError(
            f"Invalid value {value!r} for feature '{key.value}': expected {expected.__name__}."
        )

    if expected is bool:
        if isinstance(value, bool):
            return value
        raise FeatureValueError(
            f"Invalid value {value!r} for feature '{key.value}': expected bool."
        )

    if isinstance(value, expected):
        return value
    raise FeatureValueError(
        f"Invalid value {value!r} for feature '{key.value}': expected {expected}."
    )


# ---------------------------------------------------------------------------
# Feature store
# ---------------------------------------------------------------------------


class FeatureStore:
    """
    Validated mapping of `Feature` -> value.

    Setting a key to `None` unsets it. A frozen store (lexicon baseline
    features) rejects every mutation.
    """

    __slots__ = ("_values", "_frozen")

    def __init__(
        self,
        values: Optional[Mapping[FeatureKey, Any]] = None,
        *,
        frozen: bool = False,
    ) -> None:
        self._values: Dict[Feature, Any] = {}
        self._frozen = False
        if values:
            for key, value in values.items():
                self.set(key, value)
        self._frozen = frozen

    # Reads ----------------------------------------------------------------

    def get(self, key: FeatureKey, default: Any = None) -> Any:
        return self._values.get(to_feature(key), default)

    def is_set(self, key: FeatureKey) -> bool:
        return to_feature(key) in self._values

    def flag(self, key: FeatureKey) -> bool:
        return self._values.get(to_feature(key)) is True

    def as_dict(self) -> Dict[Feature, Any]:
        return dict(self._values)

    @property
    def frozen(self) -> bool:
        return self._frozen

    # Writes ---------------------------------------------------------------

    def set(self, key: FeatureKey, value: Any) -> None:
        feature = to_feature(key)
        if self._frozen:
            raise FeatureValueError(
                f"Cannot set '{feature.value}' on a frozen feature store."
            )
        if value is None:
            self._values.pop(feature, None)
            return
        self._values[feature] = coerce_value(feature, value)

    def unset(self, key: FeatureKey) -> None:
        self.set(key, None)

    def update(self, values: Mapping[FeatureKey, Any]) -> None:
        for key, value in values.items():
            self.set(key, value)

    # Derivation -----------------------------------------------------------

    def copy(self, *, frozen: bool = False) -> "FeatureStore":
        clone = FeatureStore()
        clone._values = dict(self._values)
        clone._frozen = frozen
        return clone

    def merged(self, overrides: Mapping[FeatureKey, Any]) -> "FeatureStore":
        """Return an unfrozen copy with `overrides` applied (None unsets)."""
        clone = self.copy()
        clone.update(overrides)
        return clone

    # Dunder ---------------------------------------------------------------

    def __contains__(self, key: object) -> bool:
        if isinstance(key, (Feature, str)):
            return self.is_set(key)
        return False

    def __iter__(self) -> Iterator[Feature]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FeatureStore):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        body = ", ".join(f"{k.value}={v!r}" for k, v in self._values.items())
        return f"FeatureStore({body})"


__all__ = [
    "Tense",
    "Form",
    "Person",
    "NumberAgreement",
    "Gender",
    "InterrogativeType",
    "DiscourseFunction",
    "ClauseStatus",
    "Category",
    "Feature",
    "FEATURE_TYPES",
    "VERB_FEATURES",
    "FeatureKey",
    "FeatureStore",
    "to_feature",
    "coerce_value",
]
