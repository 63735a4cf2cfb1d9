"""Translation gateways - abstract interface and provider implementations."""

from quick_translate.services.translation.translation_gateway import TranslationError, TranslationGateway
from quick_translate.services.translation.aws_translate_gateway import AwsTranslateGateway
from quick_translate.services.translation.gemini_translate_gateway import GeminiTranslateGateway

__all__ = [
    "TranslationError",
    "TranslationGateway",
    "AwsTranslateGateway",
    "GeminiTranslateGateway",
]
