# tests/shared/test_container.py
from realizer.adapters.persistence.lexicon import cached_languages
from realizer.core.use_cases import ListLanguages, RealiseText
from realizer.shared import container as container_module
from realizer.shared.config import AppEnv, LogFormat, Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DEFAULT_LANGUAGE", raising=False)
        monkeypatch.delenv("LOG_FORMAT", raising=False)
        s = Settings(_env_file=None)
        assert s.APP_NAME == "realizer"
        assert s.APP_ENV is AppEnv.DEVELOPMENT
        assert s.DEFAULT_LANGUAGE == "en"
        assert s.LOG_FORMAT is LogFormat.JSON
        assert s.PRELOAD_LANGUAGES == []

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_LANGUAGE", "es")
        monkeypatch.setenv("PRELOAD_LANGUAGES", '["en", "es"]')
        s = Settings(_env_file=None)
        assert s.DEFAULT_LANGUAGE == "es"
        assert s.PRELOAD_LANGUAGES == ["en", "es"]


class TestContainer:
    def test_use_case_uses_default_language(self, container):
        use_case = container.realise_text_use_case()
        assert isinstance(use_case, RealiseText)
        assert use_case.language == "en"

    def test_lexicon_is_shared_between_use_cases(self, container):
        assert container.realise_text_use_case().lexicon is container.realise_text_use_case().lexicon

    def test_lexicon_override(self, container):
        container.lexicon.override(container_module.get_lexicon("es"))
        assert container.realise_text_use_case().language == "es"

    def test_list_languages_use_case(self, container):
        assert isinstance(container.list_languages_use_case(), ListLanguages)

    def test_realiser_for(self):
        realiser = container_module.realiser_for("es")
        clause = realiser.factory.create_clause("el gato", "saltar")
        assert realiser.realise_sentence(clause) == "El gato salta."

    def test_warmup_preloads_configured_languages(self, monkeypatch):
        monkeypatch.setattr(container_module.settings, "PRELOAD_LANGUAGES", ["es"])
        container_module.warmup()
        assert cached_languages() == ["es"]

    def test_bootstrap_returns_global_container(self, monkeypatch):
        monkeypatch.setattr(container_module.settings, "PRELOAD_LANGUAGES", [])
        assert container_module.bootstrap() is container_module.container
