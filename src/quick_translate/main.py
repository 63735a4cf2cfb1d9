"""Main entry point for the Quick Translate application."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from quick_translate.coordinators import TranslationSessionController
from quick_translate.core import LanguageCatalog, default_catalog
from quick_translate.io import FileLanguageStore
from quick_translate.services import (
    AwsTranslateGateway,
    ConfigurationError,
    GeminiTranslateGateway,
    InputDebouncer,
    LanguageState,
    SettingsManager,
    TranslationGateway,
)
from quick_translate.ui import TranslatorWindow

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_gateway(settings: SettingsManager, catalog: LanguageCatalog) -> TranslationGateway:
    """Create the gateway selected by TRANSLATION_PROVIDER.

    Raises:
        ConfigurationError: if the provider is unknown or lacks required settings.
    """
    provider = settings.get_translation_provider()

    if provider == "aws":
        return AwsTranslateGateway(region=settings.get_aws_region())

    if provider == "gemini":
        api_key = settings.get_gemini_api_key()
        if not api_key:
            raise ConfigurationError("GEMINI_API_KEY is required when TRANSLATION_PROVIDER=gemini")
        return GeminiTranslateGateway(api_key=api_key, catalog=catalog)

    raise ConfigurationError(
        f"Unknown TRANSLATION_PROVIDER {provider!r}; expected one of {', '.join(SettingsManager.SUPPORTED_PROVIDERS)}"
    )


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Configuration and logging
    settings = SettingsManager()
    configure_logging(settings.get_log_level())

    # 2. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("Quick Translate")
    app.setOrganizationName("QuickTranslate")

    # 3. Initialize Infrastructure
    catalog = default_catalog()
    store = FileLanguageStore(settings.get_preferences_path())
    language_state = LanguageState(catalog, store)

    window = TranslatorWindow(catalog.languages)

    try:
        gateway = build_gateway(settings, catalog)
    except ConfigurationError as e:
        logger.error("Configuration error: %s", e)
        window.show_error("Configuration Error", str(e))
        return 1

    # 4. Instantiate Controller (Dependency Injection)
    controller = TranslationSessionController(
        language_state=language_state,
        gateway=gateway,
        debouncer=InputDebouncer(settings.get_debounce_ms()),
    )

    # 5. Signal Wiring
    window.set_controller(controller)
    controller.start()

    # 6. Show UI and start event loop
    window.show()
    logger.info(
        "Started with %s gateway, %s -> %s",
        gateway.name,
        controller.session.source_lang,
        controller.session.target_lang,
    )

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
