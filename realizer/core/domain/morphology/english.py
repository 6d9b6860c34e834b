# realizer/core/domain/morphology/english.py
"""
ENGLISH MORPHOLOGY
------------------

Inflection rules for English, registered under the "germanic" family.

Priority for every category:
    1. explicit irregular override table (config["irregular"], e.g. "be")
    2. stored variant on the lexicon entry
    3. regular suffixation with the spelling repair rules below

The list-level post pass turns "a" into "an" before a vowel sound.
"""

from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional

from ..elements import Element, InflectedRequest, Literal, Sequence
from ..features import (
    Category,
    DiscourseFunction,
    Feature,
    Form,
    Gender,
    NumberAgreement,
    Person,
    Tense,
)
from ..lexical import FormKey, WordEntry
from .base import MorphologyEngine, SuffixRule, add_suffix, register_engine


# ---------------------------------------------------------------------------
# Spelling repairs
# ---------------------------------------------------------------------------

SUFFIX_RULES: List[SuffixRule] = [
    # carry + s -> carries, happy + er -> happier (with the e-drop below)
    SuffixRule(r"[^aeiou]y$", r"[^i]", lambda b: b[:-1] + "ie"),
    # lie + ing -> lying
    SuffixRule(r"ie$", r"ing", lambda b: b[:-2] + "y"),
    # bake + ed -> baked, free + er -> freer
    SuffixRule(r"e$", r"e", lambda b: b[:-1]),
    # bake + ing -> baking, but see + ing -> seeing
    SuffixRule(r"[^iyeo]e$", r"i", lambda b: b[:-1]),
    # box + s -> boxes
    SuffixRule(r"(s|x|z|ch|sh)$", r"s", lambda b: b + "e"),
]

_DOUBLING_RE = re.compile(r"[^aeiou][aeiou][bcdfgklmnprstvz]$")


def _double_final(base: str, suffix: str) -> str:
    # stop + ed -> stopped
    if suffix[:1] in ("e", "i") and _DOUBLING_RE.search(base):
        return base + base[-1]
    return base


# ---------------------------------------------------------------------------
# Pronouns
# ---------------------------------------------------------------------------

# PRONOUNS[number][position][slot]
# position: 0 subject, 1 object, 2 reflexive, 3 possessive, 4 possessive specifier
# slot: 0 first, 1 second, 2 third masculine, 3 third feminine, 4 third neuter
PRONOUNS = {
    NumberAgreement.SINGULAR: (
        ("I", "you", "he", "she", "it"),
        ("me", "you", "him", "her", "it"),
        ("myself", "yourself", "himself", "herself", "itself"),
        ("mine", "yours", "his", "hers", "its"),
        ("my", "your", "his", "her", "its"),
    ),
    NumberAgreement.PLURAL: (
        ("we", "you", "they", "they", "they"),
        ("us", "you", "them", "them", "them"),
        ("ourselves", "yourselves", "themselves", "themselves", "themselves"),
        ("ours", "yours", "theirs", "theirs", "theirs"),
        ("our", "your", "their", "their", "their"),
    ),
}

PERSONAL_PRONOUNS = frozenset(
    word.casefold()
    for table in PRONOUNS.values()
    for row in table
    for word in row
)

WH_PRONOUNS = frozenset({"who", "what", "which", "where", "why", "how", "how many"})


def pronoun_slot(person: Optional[Person], gender: Optional[Gender]) -> int:
    if person is Person.FIRST:
        return 0
    if person is Person.SECOND:
        return 1
    if gender is Gender.MASCULINE:
        return 2
    if gender is Gender.FEMININE:
        return 3
    return 4


def pronoun_position(request: InflectedRequest) -> int:
    role = request.discourse_function
    passive = request.flag(Feature.PASSIVE)
    if request.lexical(Feature.REFLEXIVE):
        return 2
    if request.lexical(Feature.POSSESSIVE):
        return 4 if role is DiscourseFunction.SPECIFIER else 3
    if (
        (role is DiscourseFunction.SUBJECT and not passive)
        or (role is DiscourseFunction.OBJECT and passive)
        or role is DiscourseFunction.SPECIFIER
        or (role is DiscourseFunction.COMPLEMENT and passive)
    ):
        return 0
    return 1


# ---------------------------------------------------------------------------
# Articles
# ---------------------------------------------------------------------------

_AN_EXCEPTIONS = ("hour", "honest", "honour", "honor", "heir")
_A_EXCEPTIONS = ("uni", "use", "usu", "eu", "one", "once")


def starts_with_vowel_sound(word: str) -> bool:
    w = word.casefold()
    if not w:
        return False
    if w.startswith(_AN_EXCEPTIONS):
        return True
    if w.startswith(_A_EXCEPTIONS):
        return False
    if w[0].isdigit():
        return w.startswith("8") or w in ("11", "18")
    return w[0] in "aeiou"


def first_text(element: Element) -> Optional[str]:
    if isinstance(element, Literal):
        return element.text or None
    if isinstance(element, Sequence):
        for item in element.items:
            text = first_text(item)
            if text:
                return text
    return None


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------


@register_engine("germanic")
class EnglishMorphology(MorphologyEngine):
    """English inflection: nouns, verbs, adjectives, adverbs, pronouns, determiners."""

    @property
    def irregular(self) -> Dict[str, Dict[str, str]]:
        return self.config.get("irregular", {})

    # Nouns ---------------------------------------------------------------

    def inflect_noun(self, request: InflectedRequest, word: Optional[WordEntry]) -> str:
        base = self.get_base_form(request, word)
        if request.get(Feature.NUMBER) is NumberAgreement.PLURAL and not request.lexical(Feature.PROPER):
            stored = word.form(FormKey.PLURAL) if word is not None else None
            surface = stored or add_suffix(base, "s", SUFFIX_RULES)
        else:
            surface = base

        if request.flag(Feature.POSSESSIVE):
            surface += "'" if surface.endswith("s") else "'s"
        return surface

    # Verbs ---------------------------------------------------------------

    def _regular(self, base: str, suffix: str, word: Optional[WordEntry]) -> str:
        if word is not None and word.flag(Feature.DOUBLE_CONSONANT):
            base = _double_final(base, suffix)
        return add_suffix(base, suffix, SUFFIX_RULES)

    def _stored(self, base: str, word: Optional[WordEntry], key: str) -> Optional[str]:
        override = self.irregular.get(base, {}).get(key)
        if override:
            return override
        if word is not None:
            return word.form(key)
        return None

    def inflect_verb(self, request: InflectedRequest, word: Optional[WordEntry]) -> str:
        base = self.get_base_form(request, word)
        form = request.get(Feature.FORM)
        tense = request.get(Feature.TENSE)
        person = request.get(Feature.PERSON)
        number = request.get(Feature.NUMBER)
        singular = number in (None, NumberAgreement.SINGULAR)

        if request.flag(Feature.NEGATED) or form is Form.BARE_INFINITIVE:
            return base

        if form in (Form.PRESENT_PARTICIPLE, Form.GERUND):
            return self._stored(base, word, FormKey.PRESENT_PARTICIPLE.value) or self._regular(base, "ing", word)

        if form is Form.PAST_PARTICIPLE:
            return self._stored(base, word, FormKey.PAST_PARTICIPLE.value) or self._regular(base, "ed", word)

        if tense is Tense.PAST:
            if singular and person in (None, Person.FIRST, Person.THIRD):
                stored = self._stored(base, word, "past1s")
            else:
                stored = self._stored(base, word, "past_plural")
            return stored or self._stored(base, word, FormKey.PAST.value) or self._regular(base, "ed", word)

        if singular and person in (None, Person.THIRD) and tense in (None, Tense.PRESENT):
            return self._stored(base, word, FormKey.PRESENT3S.value) or self._regular(base, "s", word)

        if singular and person is Person.FIRST:
            stored = self._stored(base, word, "present1s")
            if stored:
                return stored
        return self._stored(base, word, "present_plural") or base

    # Adjectives and adverbs ----------------------------------------------

    def inflect_adjective(self, request: InflectedRequest, word: Optional[WordEntry]) -> str:
        base = self.get_base_form(request, word)
        if request.flag(Feature.IS_COMPARATIVE):
            return (word.form(FormKey.COMPARATIVE) if word else None) or self._regular(base, "er", word)
        if request.flag(Feature.IS_SUPERLATIVE):
            return (word.form(FormKey.SUPERLATIVE) if word else None) or self._regular(base, "est", word)
        return base

    def inflect_adverb(self, request: InflectedRequest, word: Optional[WordEntry]) -> str:
        base = self.get_base_form(request, word)
        if word is None:
            return base
        if request.flag(Feature.IS_COMPARATIVE):
            return word.form(FormKey.COMPARATIVE) or base
        if request.flag(Feature.IS_SUPERLATIVE):
            return word.form(FormKey.SUPERLATIVE) or base
        return base

    # Pronouns and determiners --------------------------------------------

    def inflect_pronoun(self, request: InflectedRequest, word: Optional[WordEntry]) -> str:
        base = self.get_base_form(request, word)
        key = base.casefold()
        if key in WH_PRONOUNS or key not in PERSONAL_PRONOUNS:
            return base

        number = request.lexical(Feature.NUMBER)
        if number is not NumberAgreement.PLURAL:
            number = NumberAgreement.SINGULAR
        slot = pronoun_slot(request.lexical(Feature.PERSON), request.lexical(Feature.GENDER))
        return PRONOUNS[number][pronoun_position(request)][slot]

    def inflect_determiner(self, request: InflectedRequest, word: Optional[WordEntry]) -> str:
        base = self.get_base_form(request, word)
        number = request.get(Feature.NUMBER)
        if number is None and request.agreement is not None:
            number = request.agreement.get(Feature.NUMBER)
        if number is NumberAgreement.PLURAL:
            stored = word.form(FormKey.PLURAL) if word is not None else None
            if stored:
                return stored
            if base.casefold() == "a":
                return "some"
        return base

    # List level ----------------------------------------------------------

    def post_process(self, items: List[Element]) -> List[Element]:
        out = list(items)
        for i, item in enumerate(out[:-1]):
            if (
                isinstance(item, Literal)
                and item.category is Category.DETERMINER
                and item.text.casefold() == "a"
            ):
                following = first_text(out[i + 1])
                if following and starts_with_vowel_sound(following):
                    text = "An" if item.text[:1].isupper() else "an"
                    out[i] = Literal(text, category=item.category, features=item.features)
        return out

    def regular_variants(self, entry: WordEntry) -> Iterable[str]:
        base = entry.base_form
        if entry.category is Category.NOUN:
            return (add_suffix(base, "s", SUFFIX_RULES),)
        if entry.category is Category.VERB:
            return (
                self._regular(base, "s", entry),
                self._regular(base, "ed", entry),
                self._regular(base, "ing", entry),
            )
        if entry.category is Category.ADJECTIVE:
            return (self._regular(base, "er", entry), self._regular(base, "est", entry))
        return ()


__all__ = [
    "SUFFIX_RULES",
    "PRONOUNS",
    "PERSONAL_PRONOUNS",
    "WH_PRONOUNS",
    "pronoun_slot",
    "pronoun_position",
    "starts_with_vowel_sound",
    "first_text",
    "EnglishMorphology",
]
