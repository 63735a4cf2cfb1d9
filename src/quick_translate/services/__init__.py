"""Services layer - configuration, language state and provider integrations."""

from quick_translate.services.settings_manager import ConfigurationError, SettingsManager
from quick_translate.services.language_state import LanguageState
from quick_translate.services.input_debouncer import InputDebouncer

# Translation gateways
from quick_translate.services.translation import (
    AwsTranslateGateway,
    GeminiTranslateGateway,
    TranslationError,
    TranslationGateway,
)

from quick_translate.services.api_workers import TranslationWorker, WorkerSignals

__all__ = [
    "ConfigurationError",
    "SettingsManager",
    "LanguageState",
    "InputDebouncer",
    "TranslationGateway",
    "TranslationError",
    "AwsTranslateGateway",
    "GeminiTranslateGateway",
    "TranslationWorker",
    "WorkerSignals",
]
