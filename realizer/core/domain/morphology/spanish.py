# realizer/core/domain/morphology/spanish.py
"""
SPANISH MORPHOLOGY
------------------

Inflection rules for Spanish, registered under the "romance" family.

Stored variants on the lexicon entry always win (irregular verbs list
their paradigm cells as "present1s", "past3p", "subjunctive2s", ...).
Everything else is derived from the regular -ar / -er / -ir paradigms.

Determiners, adjectives and possessive pronouns agree with the noun
phrase that governs them (`InflectedRequest.agreement`), not with their
own features.

The list-level post pass contracts "a el" / "de el" and moves clitic
pronouns in front of the verb group.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

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
from ..lexical import FormKey, WordEntry, paradigm_key
from .base import MorphologyEngine, SuffixRule, add_suffix, register_engine


VOWELS = "aeiouáéíóú"

# ---------------------------------------------------------------------------
# Spelling repairs
# ---------------------------------------------------------------------------

SUFFIX_RULES: List[SuffixRule] = [
    # luz + s -> luces, feliz + ísimo -> felicísimo
    SuffixRule(r"z$", r"[sieí]", lambda b: b[:-1] + "c"),
    # mujer + s -> mujeres
    SuffixRule(r"[^aeiouáéíóú]$", r"s", lambda b: b + "e"),
    # comer + d -> comed
    SuffixRule(r"r$", r"[dn]", lambda b: b[:-1]),
    # alto + ísimo -> altísimo
    SuffixRule(r"[aeiouáéíóú]$", r"í", lambda b: b[:-1]),
]

# ---------------------------------------------------------------------------
# Regular verb paradigms
# ---------------------------------------------------------------------------
# Each row lists 1s, 2s, 3s, 1p, 2p, 3p endings.

PRESENT: Dict[str, Tuple[str, ...]] = {
    "ar": ("o", "as", "a", "amos", "áis", "an"),
    "er": ("o", "es", "e", "emos", "éis", "en"),
    "ir": ("o", "es", "e", "imos", "ís", "en"),
}

PRETERITE: Dict[str, Tuple[str, ...]] = {
    "ar": ("é", "aste", "ó", "amos", "asteis", "aron"),
    "er": ("í", "iste", "ió", "imos", "isteis", "ieron"),
    "ir": ("í", "iste", "ió", "imos", "isteis", "ieron"),
}

IMPERFECT: Dict[str, Tuple[str, ...]] = {
    "ar": ("aba", "abas", "aba", "ábamos", "abais", "aban"),
    "er": ("ía", "ías", "ía", "íamos", "íais", "ían"),
    "ir": ("ía", "ías", "ía", "íamos", "íais", "ían"),
}

SUBJUNCTIVE_PRESENT: Dict[str, Tuple[str, ...]] = {
    "ar": ("e", "es", "e", "emos", "éis", "en"),
    "er": ("a", "as", "a", "amos", "áis", "an"),
    "ir": ("a", "as", "a", "amos", "áis", "an"),
}

# 1s has no imperative; the slot is never read.
IMPERATIVE: Dict[str, Tuple[str, ...]] = {
    "ar": ("", "a", "e", "emos", "ad", "en"),
    "er": ("", "e", "a", "amos", "ed", "an"),
    "ir": ("", "e", "a", "amos", "id", "an"),
}

# Appended to the infinitive.
FUTURE = ("é", "ás", "á", "emos", "éis", "án")
CONDITIONAL = ("ía", "ías", "ía", "íamos", "íais", "ían")

# Appended to the 3p preterite minus "ron"; 1p accents the stem's last vowel.
SUBJUNCTIVE_IMPERFECT = ("ra", "ras", "ra", "ramos", "rais", "ran")
SUBJUNCTIVE_FUTURE = ("re", "res", "re", "remos", "reis", "ren")

_ACCENT = str.maketrans("aeiou", "áéíóú")

_TENSE_PREFIX = {
    Tense.PRESENT: "present",
    Tense.PAST: "past",
    Tense.IMPERFECT: "imperfect",
    Tense.FUTURE: "future",
    Tense.CONDITIONAL: "conditional",
}


def cell(person: Optional[Person], number: Optional[NumberAgreement]) -> int:
    """Paradigm index 0..5 (unset person means third, unset number singular)."""
    offset = {Person.FIRST: 0, Person.SECOND: 1}.get(person, 2)
    return offset + (3 if number is NumberAgreement.PLURAL else 0)


def conjugation(base: str) -> Optional[str]:
    ending = base[-2:].lower()
    if ending in ("ar", "er", "ir", "ír"):
        return "ir" if ending == "ír" else ending
    return None


def regular_verb(base: str, tense: Tense, index: int) -> str:
    conj = conjugation(base)
    if conj is None:
        return base
    radical = base[:-2]
    if tense is Tense.FUTURE:
        return base + FUTURE[index]
    if tense is Tense.CONDITIONAL:
        return base + CONDITIONAL[index]
    table = {Tense.PAST: PRETERITE, Tense.IMPERFECT: IMPERFECT}.get(tense, PRESENT)
    return radical + table[conj][index]


def regular_gerund(base: str) -> str:
    conj = conjugation(base)
    if conj is None:
        return base
    radical = base[:-2]
    if conj == "ar":
        return radical + "ando"
    # leer -> leyendo
    if radical and radical[-1] in VOWELS:
        return radical + "yendo"
    return radical + "iendo"


def regular_participle(base: str, gender: Optional[Gender], number: Optional[NumberAgreement]) -> str:
    conj = conjugation(base)
    if conj is None:
        return base
    stem = base[:-2] + ("ad" if conj == "ar" else "id")
    return inflect_o_a(stem + "o", gender, number)


def inflect_o_a(masculine: str, gender: Optional[Gender], number: Optional[NumberAgreement]) -> str:
    """Gender/number variant of an -o word: hecho -> hecha, hechos, hechas."""
    word = masculine
    if gender is Gender.FEMININE and word.endswith("o"):
        word = word[:-1] + "a"
    if number is NumberAgreement.PLURAL:
        word = plural_of(word)
    return word


def plural_of(word: str) -> str:
    return add_suffix(word, "s", SUFFIX_RULES) if word else word


def accent_last_vowel(stem: str) -> str:
    for i in range(len(stem) - 1, -1, -1):
        if stem[i] in "aeiou":
            return stem[:i] + stem[i].translate(_ACCENT) + stem[i + 1:]
    return stem


def variant_form(base: str, suffix: str) -> str:
    """Spelling of `base + suffix` used to index regular variants."""
    return add_suffix(base, suffix, SUFFIX_RULES)


# ---------------------------------------------------------------------------
# Pronouns
# ---------------------------------------------------------------------------

# PRONOUNS[number][position][slot]
# position: 0 subject, 1 object, 2 reflexive, 3 possessive, 4 possessive
#           specifier, 5 after a preposition / passive agent
# slot: 0 first, 1 second, 2 third masculine, 3 third feminine, 4 third neuter;
#       possessive rows add 5 when the possessed noun phrase is plural
PRONOUNS = {
    NumberAgreement.SINGULAR: (
        ("yo", "tú", "él", "ella", "ello"),
        ("me", "te", "lo", "la", "lo"),
        ("me", "te", "se", "se", "se"),
        ("mío", "tuyo", "suyo", "suya", "suyo", "míos", "tuyos", "suyos", "suyas", "suyos"),
        ("mi", "tu", "su", "su", "su", "mis", "tus", "sus", "sus", "sus"),
        ("mí", "ti", "él", "ella", "ello"),
    ),
    NumberAgreement.PLURAL: (
        ("nosotros", "vosotros", "ellos", "ellas", "ellos"),
        ("nos", "os", "los", "las", "los"),
        ("nos", "os", "se", "se", "se"),
        ("nuestro", "vuestro", "suyo", "suya", "suyo", "nuestros", "vuestros", "suyos", "suyas", "suyos"),
        ("nuestro", "vuestro", "su", "su", "su", "nuestros", "vuestros", "sus", "sus", "sus"),
        ("nosotros", "vosotros", "ellos", "ellas", "ellos"),
    ),
}

PERSONAL_PRONOUNS = frozenset(
    word for table in PRONOUNS.values() for row in table for word in row
)

WH_PRONOUNS = frozenset(
    {
        "quien", "quién", "que", "qué", "cual", "cuál", "donde", "dónde",
        "porque", "porqué", "por qué", "como", "cómo",
        "cuanto", "cuánto", "cuanta", "cuánta", "cuantos", "cuántos", "cuantas", "cuántas",
    }
)


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
    if role is DiscourseFunction.SUBJECT and passive:
        return 5
    if request.flag(Feature.IN_PREPOSITIONAL_PHRASE):
        return 5
    if (
        role is DiscourseFunction.SUBJECT
        or (role is DiscourseFunction.OBJECT and passive)
        or role is DiscourseFunction.SPECIFIER
        or (role is DiscourseFunction.COMPLEMENT and passive)
    ):
        return 0
    return 1


def first_literal(element: Element) -> Optional[Literal]:
    if isinstance(element, Literal):
        return element
    if isinstance(element, Sequence):
        for item in element.items:
            found = first_literal(item)
            if found is not None:
                return found
    return None


def drop_first_literal(element: Element) -> Optional[Element]:
    """Copy of `element` without its first literal (None if nothing is left)."""
    if isinstance(element, Literal):
        return None
    if isinstance(element, Sequence):
        items = list(element.items)
        for i, item in enumerate(items):
            if first_literal(item) is not None:
                rest = drop_first_literal(item)
                items[i:i + 1] = [rest] if rest is not None else []
                break
        return element.derive(None, items=items)
    return element


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------


@register_engine("romance")
class SpanishMorphology(MorphologyEngine):
    """Spanish inflection with agreement against the governing noun phrase."""

    CONTRACTIONS = {"a": "al", "de": "del"}

    # Agreement helpers ---------------------------------------------------

    @staticmethod
    def _agreement(request: InflectedRequest, key: Feature):
        if request.agreement is not None and request.agreement.is_set(key):
            return request.agreement.get(key)
        return request.lexical(key)

    # Nouns ---------------------------------------------------------------

    def inflect_noun(self, request: InflectedRequest, word: Optional[WordEntry]) -> str:
        base = self.get_base_form(request, word)
        number = request.get(Feature.NUMBER)
        if request.lexical(Feature.PROPER) or number is NumberAgreement.BOTH:
            return base

        gender = request.get(Feature.GENDER)
        lexical_gender = word.get(Feature.GENDER) if word is not None else None
        plural = number is NumberAgreement.PLURAL

        stored = None
        if word is not None:
            if gender is Gender.FEMININE and lexical_gender is not Gender.FEMININE:
                key = FormKey.FEMININE_PLURAL if plural else FormKey.FEMININE_SINGULAR
                stored = word.form(key)
                if stored is None and plural and word.form(FormKey.FEMININE_SINGULAR):
                    stored = plural_of(word.form(FormKey.FEMININE_SINGULAR))
            elif plural:
                stored = word.form(FormKey.PLURAL)
        if stored:
            return stored

        surface = base
        if gender is not None and gender is not lexical_gender:
            if gender is Gender.FEMININE and surface.endswith("o"):
                surface = surface[:-1] + "a"
            elif gender is Gender.MASCULINE and surface.endswith("a") and lexical_gender is None:
                surface = surface[:-1] + "o"
        return plural_of(surface) if plural else surface

    # Verbs ---------------------------------------------------------------

    def _cell(self, word: Optional[WordEntry], key: str) -> Optional[str]:
        return word.form(key) if word is not None else None

    def inflect_verb(self, request: InflectedRequest, word: Optional[WordEntry]) -> str:
        base = self.get_base_form(request, word)
        form = request.get(Feature.FORM) or Form.NORMAL
        tense = request.get(Feature.TENSE) or Tense.PRESENT
        person = request.get(Feature.PERSON)
        number = request.get(Feature.NUMBER)
        if number is NumberAgreement.BOTH:
            number = NumberAgreement.SINGULAR

        if form in (Form.INFINITIVE, Form.BARE_INFINITIVE):
            return base

        if form in (Form.PRESENT_PARTICIPLE, Form.GERUND):
            return self._cell(word, FormKey.PRESENT_PARTICIPLE.value) or regular_gerund(base)

        if form is Form.PAST_PARTICIPLE:
            return self._participle(base, word, request.get(Feature.GENDER), number)

        index = cell(person, number)

        if form is Form.SUBJUNCTIVE:
            if tense in (Tense.PAST, Tense.IMPERFECT, Tense.FUTURE):
                past3p = self._cell(word, "past3p") or regular_verb(base, Tense.PAST, 5)
                if not past3p.endswith("ron"):
                    return base
                stem = past3p[:-3]
                endings = SUBJUNCTIVE_FUTURE if tense is Tense.FUTURE else SUBJUNCTIVE_IMPERFECT
                if index == 3:
                    stem = accent_last_vowel(stem)
                return stem + endings[index]
            stored = self._cell(word, paradigm_key("subjunctive", person, number))
            if stored:
                return stored
            conj = conjugation(base)
            return base[:-2] + SUBJUNCTIVE_PRESENT[conj][index] if conj else base

        if form is Form.IMPERATIVE:
            stored = self._cell(word, paradigm_key("imperative", person or Person.SECOND, number))
            if stored:
                return stored
            conj = conjugation(base)
            if conj is None or index == 0:
                return base
            return base[:-2] + IMPERATIVE[conj][index]

        if person is Person.NONE:
            if tense is Tense.PRESENT:
                stored = self._cell(word, FormKey.IMPERSONAL.value)
                if stored:
                    return stored
            person = Person.THIRD

        stored = self._cell(word, paradigm_key(_TENSE_PREFIX[tense], person, number))
        if stored:
            return stored
        if tense in (Tense.FUTURE, Tense.CONDITIONAL):
            # Irregular future stems (tendr-, habr-) are stored once.
            stem = self._cell(word, "future_stem")
            if stem:
                return stem + (FUTURE if tense is Tense.FUTURE else CONDITIONAL)[index]
        return regular_verb(base, tense, index)

    def _participle(
        self,
        base: str,
        word: Optional[WordEntry],
        gender: Optional[Gender],
        number: Optional[NumberAgreement],
    ) -> str:
        plural = number is NumberAgreement.PLURAL
        if gender is Gender.FEMININE:
            key = FormKey.PAST_PARTICIPLE_FEMININE_PLURAL if plural else FormKey.PAST_PARTICIPLE_FEMININE_SINGULAR
        else:
            key = FormKey.PAST_PARTICIPLE_PLURAL if plural else FormKey.PAST_PARTICIPLE
        stored = self._cell(word, key.value)
        if stored:
            return stored
        masculine = self._cell(word, FormKey.PAST_PARTICIPLE.value)
        if masculine:
            return inflect_o_a(masculine, gender, number)
        return regular_participle(base, gender, number)

    def inflect_modal(self, request: InflectedRequest, word: Optional[WordEntry]) -> str:
        # Spanish modals (poder, deber) conjugate like any verb.
        return self.inflect_verb(request, word)

    # Adjectives and adverbs ----------------------------------------------

    def inflect_adjective(self, request: InflectedRequest, word: Optional[WordEntry]) -> str:
        base = self.get_base_form(request, word)
        gender = self._agreement(request, Feature.GENDER)
        number = self._agreement(request, Feature.NUMBER)
        feminine = gender is Gender.FEMININE
        plural = number is NumberAgreement.PLURAL

        if request.flag(Feature.IS_SUPERLATIVE):
            if feminine:
                key = FormKey.SUPERLATIVE_FEMININE_PLURAL if plural else FormKey.SUPERLATIVE_FEMININE_SINGULAR
            else:
                key = FormKey.SUPERLATIVE_PLURAL if plural else FormKey.SUPERLATIVE
            stored = word.form(key) if word is not None else None
            if stored:
                return stored
            return inflect_o_a(add_suffix(base, "ísimo", SUFFIX_RULES), gender, number)

        if request.flag(Feature.IS_COMPARATIVE):
            stored = word.form(FormKey.COMPARATIVE) if word is not None else None
            if stored:
                return stored

        if word is not None:
            if feminine:
                stored = word.form(FormKey.FEMININE_PLURAL if plural else FormKey.FEMININE_SINGULAR)
            else:
                stored = word.form(FormKey.PLURAL) if plural else None
            if stored:
                return stored
        return inflect_o_a(base, gender, number)

    def inflect_adverb(self, request: InflectedRequest, word: Optional[WordEntry]) -> str:
        base = self.get_base_form(request, word)
        if word is None:
            return base
        if request.flag(Feature.IS_COMPARATIVE):
            return word.form(FormKey.COMPARATIVE) or base
        if request.flag(Feature.IS_SUPERLATIVE):
            return word.form(FormKey.SUPERLATIVE) or base
        return base

    # Determiners and pronouns --------------------------------------------

    def inflect_determiner(self, request: InflectedRequest, word: Optional[WordEntry]) -> str:
        base = self.get_base_form(request, word)
        gender = self._agreement(request, Feature.GENDER)
        number = request.get(Feature.NUMBER)
        if number is None and request.agreement is not None:
            number = request.agreement.get(Feature.NUMBER)
        plural = number is NumberAgreement.PLURAL
        if word is None:
            return base
        if gender is Gender.FEMININE:
            stored = word.form(FormKey.FEMININE_PLURAL if plural else FormKey.FEMININE_SINGULAR)
        else:
            stored = word.form(FormKey.PLURAL) if plural else None
        return stored or base

    def inflect_pronoun(self, request: InflectedRequest, word: Optional[WordEntry]) -> str:
        base = self.get_base_form(request, word)
        key = base.casefold()

        if key in WH_PRONOUNS:
            if word is None:
                return base
            plural = request.get(Feature.NUMBER) is NumberAgreement.PLURAL
            if request.get(Feature.GENDER) is Gender.FEMININE:
                stored = word.form(FormKey.FEMININE_PLURAL if plural else FormKey.FEMININE_SINGULAR)
            else:
                stored = word.form(FormKey.PLURAL) if plural else None
            return stored or base

        person = request.lexical(Feature.PERSON)
        if key not in PERSONAL_PRONOUNS or person is Person.NONE:
            return base

        number = request.lexical(Feature.NUMBER)
        if number is not NumberAgreement.PLURAL:
            number = NumberAgreement.SINGULAR
        position = pronoun_position(request)
        slot = pronoun_slot(person, request.lexical(Feature.GENDER))
        if position in (3, 4) and request.agreement is not None:
            if request.agreement.get(Feature.NUMBER) is NumberAgreement.PLURAL:
                slot += 5
        return PRONOUNS[number][position][slot]

    # List level ----------------------------------------------------------

    def post_process(self, items: List[Element]) -> List[Element]:
        out = self._contract(list(items))
        return self._front_clitics(out)

    def _contract(self, items: List[Element]) -> List[Element]:
        i = 0
        while i < len(items) - 1:
            item = items[i]
            if (
                isinstance(item, Literal)
                and item.category is Category.PREPOSITION
                and item.text in self.CONTRACTIONS
            ):
                nxt = first_literal(items[i + 1])
                if nxt is not None and nxt.category is Category.DETERMINER and nxt.text == "el":
                    items[i] = Literal(self.CONTRACTIONS[item.text], category=item.category, features=item.features)
                    rest = drop_first_literal(items[i + 1])
                    if rest is None:
                        del items[i + 1]
                    else:
                        items[i + 1] = rest
            i += 1
        return items

    @staticmethod
    def _is_verb(element: Element) -> bool:
        return isinstance(element, Literal) and element.category in (Category.VERB, Category.MODAL)

    def _front_clitics(self, items: List[Element]) -> List[Element]:
        first_verb = next((i for i, el in enumerate(items) if self._is_verb(el)), None)
        if first_verb is None:
            return items
        for i in range(first_verb + 1, len(items)):
            item = items[i]
            if (
                isinstance(item, Literal)
                and item.category is Category.PRONOUN
                and self._is_verb(items[i - 1])
            ):
                items.insert(first_verb, items.pop(i))
                first_verb += 1
        return items

    def regular_variants(self, entry: WordEntry) -> Iterable[str]:
        base = entry.base_form
        if entry.category in (Category.NOUN, Category.ADJECTIVE):
            return (variant_form(base, "s"),)
        if entry.category is Category.VERB and conjugation(base):
            return (
                regular_verb(base, Tense.PRESENT, 2),
                regular_verb(base, Tense.PRESENT, 5),
                regular_verb(base, Tense.PAST, 2),
                regular_verb(base, Tense.PAST, 5),
                regular_gerund(base),
                regular_participle(base, None, None),
            )
        return ()


__all__ = [
    "SUFFIX_RULES",
    "PRESENT",
    "PRETERITE",
    "IMPERFECT",
    "SUBJUNCTIVE_PRESENT",
    "IMPERATIVE",
    "PRONOUNS",
    "PERSONAL_PRONOUNS",
    "WH_PRONOUNS",
    "cell",
    "conjugation",
    "regular_verb",
    "regular_gerund",
    "regular_participle",
    "inflect_o_a",
    "plural_of",
    "variant_form",
    "pronoun_position",
    "SpanishMorphology",
]
