# realizer/core/domain/models.py
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class LanguageInfo(BaseModel):
    """A language the realizer can produce text in."""
    code: str = Field(..., description="Language code (e.g., 'en', 'es')")
    strategy: str = Field(..., description="Name of the strategy class")
    morphology_family: str = Field(..., description="Morphology engine family (e.g., 'romance')")


class Realisation(BaseModel):
    """
    The output of one realisation.
    """
    text: str
    lang_code: str

    # True when the realised sentence is a question
    interrogative: bool = False

    # Debug info (e.g., element kind, word count)
    debug_info: Optional[Dict[str, Any]] = None

    # Metrics for observability
    generation_time_ms: float = 0.0
