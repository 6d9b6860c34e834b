# realizer/core/use_cases/__init__.py
from .list_languages import ListLanguages
from .realise_text import RealiseText

__all__ = ["ListLanguages", "RealiseText"]
