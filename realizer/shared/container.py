# realizer/shared/container.py
from dependency_injector import containers, providers

from realizer.adapters.persistence.lexicon import available_languages, get_lexicon, preload_languages
from realizer.core.use_cases.list_languages import ListLanguages
from realizer.core.use_cases.realise_text import RealiseText
from realizer.shared.config import settings
from realizer.shared.logging_config import configure_logging


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    Wires the cached JSON lexicon of a language into the realisation use case.
    """

    # 1. Configuration
    config = providers.Configuration(pydantic_settings=[settings])

    # 2. Gateways (Infrastructure Adapters)
    # Cached per language by the adapter itself; override `lang` per call.
    lexicon = providers.Callable(get_lexicon, lang=config.DEFAULT_LANGUAGE)
    lexicon_languages = providers.Callable(available_languages)

    # 3. Use Cases
    realise_text_use_case = providers.Factory(
        RealiseText,
        lexicon=lexicon,
    )

    list_languages_use_case = providers.Factory(
        ListLanguages,
        lexicon_languages=lexicon_languages,
    )


def realiser_for(lang: str) -> RealiseText:
    """Use case bound to the lexicon of `lang`."""
    return container.realise_text_use_case(lexicon=container.lexicon(lang=lang))


def warmup() -> None:
    """Load the lexicons listed in PRELOAD_LANGUAGES."""
    preload_languages(settings.PRELOAD_LANGUAGES)


def bootstrap() -> Container:
    """Startup hook for embedding applications: logging first, then lexicon warm-up."""
    configure_logging()
    warmup()
    return container


# Instantiate the container for global access
container = Container()
