# tests/core/test_domain_models.py
import pytest
from pydantic import ValidationError

from realizer.core.domain.models import LanguageInfo, Realisation


class TestRealisationModel:
    def test_defaults(self):
        """Only text and language are required."""
        result = Realisation(text="The cat jumps.", lang_code="en")
        assert result.interrogative is False
        assert result.debug_info is None
        assert result.generation_time_ms == 0.0

    def test_missing_required_fields(self):
        with pytest.raises(ValidationError):
            Realisation(text="The cat jumps.")

    def test_serialisation(self):
        result = Realisation(text="¿Salta?", lang_code="es", interrogative=True, debug_info={"word_count": 1})
        dumped = result.model_dump()
        assert dumped["interrogative"] is True
        assert dumped["debug_info"] == {"word_count": 1}


class TestLanguageInfoModel:
    def test_valid(self):
        info = LanguageInfo(code="es", strategy="SpanishStrategy", morphology_family="romance")
        assert info.code == "es"

    def test_all_fields_required(self):
        with pytest.raises(ValidationError):
            LanguageInfo(code="es")
