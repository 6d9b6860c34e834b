# realizer/core/domain/syntax/verb_group.py
"""
syntax/verb_group.py
====================

Input record and shared helpers for auxiliary-chain construction.

The chain itself is built by each language strategy's
`build_verb_group(spec)`, a pure function of a `VerbGroupSpec`: it
returns the verb slots as a stack (index 0 is the innermost verb, the
last element is the outermost auxiliary). Slots are always fresh
`InflectedRequest` nodes (or a fresh coordination of them), so the
caller's tree is never touched.

`split_verb_group` turns that stack into the auxiliary group and the
main group, both in surface order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from ..elements import Coordination, Element, InflectedRequest, LexicalWord, Literal
from ..features import (
    Category,
    Form,
    Gender,
    InterrogativeType,
    NumberAgreement,
    Person,
    Tense,
    to_feature,
)


@dataclass(frozen=True)
class VerbGroupSpec:
    """Everything the auxiliary chain depends on, read off a verb phrase."""

    head: Optional[Element]
    form: Optional[Form] = None
    tense: Optional[Tense] = None
    modal: Optional[str] = None
    perfect: bool = False
    progressive: bool = False
    passive: bool = False
    negated: bool = False
    reflexive: bool = False
    interrogative_type: Optional[InterrogativeType] = None
    person: Optional[Person] = None
    number: Optional[NumberAgreement] = None
    gender: Optional[Gender] = None
    object_gender: Optional[Gender] = None
    copular: bool = False

    @property
    def interrogative(self) -> bool:
        return self.interrogative_type is not None

    @property
    def head_coordinated(self) -> bool:
        return isinstance(self.head, Coordination)

    @property
    def normal_form(self) -> bool:
        return self.form in (None, Form.NORMAL)

    @property
    def agreement_number(self) -> NumberAgreement:
        return self.number or NumberAgreement.SINGULAR

    @property
    def negated_object_question(self) -> bool:
        return self.negated and self.interrogative_type is not None and self.interrogative_type.is_object


# ---------------------------------------------------------------------------
# Slot helpers
# ---------------------------------------------------------------------------


def verb_slot(base: str, category: Category = Category.VERB, **features: Any) -> InflectedRequest:
    """A fresh auxiliary / particle slot, e.g. verb_slot("be", tense=Tense.PAST)."""
    slot = InflectedRequest(base, category)
    mark(slot, **features)
    return slot


def head_slot(head: Optional[Element]) -> Optional[Element]:
    """Fresh, privately owned copy of the head verb."""
    if head is None:
        return None
    if isinstance(head, LexicalWord):
        return InflectedRequest.from_word(head)
    if isinstance(head, Coordination):
        return head.derive(
            None,
            coordinates=[head_slot(c) for c in head.coordinates],
        )
    if isinstance(head, Literal):
        return head
    return head.derive()


def mark(slot: Optional[Element], **features: Any) -> Optional[Element]:
    """
    Set features on a slot in place (slots are private copies).

    On a coordinated head the features go to every coordinate too.
    `None` values unset.
    """
    if slot is None or isinstance(slot, Literal):
        return slot
    for name, value in features.items():
        key = to_feature(name)
        slot.features.set(key, value)
        if isinstance(slot, Coordination):
            for coordinate in slot.coordinates:
                mark(coordinate, **{name: value})
    return slot


def slot_base(slot: Element) -> Optional[str]:
    if isinstance(slot, InflectedRequest):
        return slot.base_form
    if isinstance(slot, LexicalWord):
        return slot.base_form
    if isinstance(slot, Literal):
        return slot.text
    return None


def is_negation(slot: Element, particle: str) -> bool:
    return slot_base(slot) == particle


# ---------------------------------------------------------------------------
# Splitting
# ---------------------------------------------------------------------------


def split_verb_group(stack: List[Element], particle: str) -> Tuple[List[Element], List[Element]]:
    """
    Split a verb-group stack into (auxiliaries, main group), surface order.

    Scanning from the innermost slot, slots go to the main group until the
    first slot that is not the negation particle; every slot after that is
    an auxiliary.
    """
    main: List[Element] = []
    auxiliaries: List[Element] = []
    main_seen = False
    for slot in stack:
        if main_seen:
            auxiliaries.append(slot)
            continue
        main.append(slot)
        if not is_negation(slot, particle):
            main_seen = True
    return list(reversed(auxiliaries)), list(reversed(main))


__all__ = [
    "VerbGroupSpec",
    "verb_slot",
    "head_slot",
    "mark",
    "slot_base",
    "is_negation",
    "split_verb_group",
]
