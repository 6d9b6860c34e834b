# realizer/core/domain/syntax/__init__.py
"""
Syntax: verb-group construction helpers and the phrase linearisation rules.
"""

from .processor import SyntaxProcessor, sort_pre_modifiers
from .verb_group import VerbGroupSpec, split_verb_group

__all__ = [
    "SyntaxProcessor",
    "sort_pre_modifiers",
    "VerbGroupSpec",
    "split_verb_group",
]
