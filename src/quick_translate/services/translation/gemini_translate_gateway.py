"""Gemini Translate Gateway - translation via the Google Gemini API."""

import logging
from typing import Optional

import google.genai as genai
from google.genai import types

from quick_translate.core import LanguageCatalog
from quick_translate.services.translation.translation_gateway import TranslationError, TranslationGateway

logger = logging.getLogger(__name__)


class GeminiTranslateGateway(TranslationGateway):
    """
    Translation gateway using Google Gemini.

    Uses a low temperature for consistent output. Language codes are turned
    into display names for the prompt when a catalog is provided.
    """

    name = "gemini"

    MODEL_NAME = "gemini-2.0-flash"

    TRANSLATION_PROMPT = """Translate the following {source} text to natural, idiomatic {target}.
Preserve the tone and nuance of the original.
Only output the translation, nothing else.

{source} text:
{text}"""

    def __init__(self, api_key: str, catalog: Optional[LanguageCatalog] = None):
        if not api_key:
            raise ValueError("Gemini API key must not be empty")
        self._api_key = api_key
        self._catalog = catalog

    def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        prompt = self.TRANSLATION_PROMPT.format(
            source=self._language_name(source_lang),
            target=self._language_name(target_lang),
            text=text,
        )
        logger.debug("Gemini request %s -> %s, %d chars", source_lang, target_lang, len(text))

        try:
            client = genai.Client(api_key=self._api_key)
            response = client.models.generate_content(
                model=self.MODEL_NAME,
                contents=prompt,
                config=types.GenerateContentConfig(
                    temperature=0.3,
                    top_p=0.95,
                    top_k=40,
                    max_output_tokens=1024,
                ),
            )
        except Exception as e:
            error_msg = str(e).lower()
            logger.error("Gemini call failed (%s): %s", type(e).__name__, e)

            if "api_key" in error_msg or "authentication" in error_msg:
                raise TranslationError(f"Invalid API key or request: {e}") from e
            if "429" in error_msg or "resource_exhausted" in error_msg or "quota" in error_msg:
                raise TranslationError("API quota exceeded. Please try again later.") from e
            if "deadline" in error_msg or "timeout" in error_msg:
                raise TranslationError("Request timed out. Please check your connection.") from e
            raise TranslationError(f"Translation failed: {e}") from e

        if not response.text or not response.text.strip():
            raise TranslationError("Empty response from API")

        return response.text.strip()

    def _language_name(self, code: str) -> str:
        return self._catalog.name_of(code) if self._catalog else code
