# realizer/core/ports/__init__.py
from .lexicon_port import ILexicon

__all__ = ["ILexicon"]
