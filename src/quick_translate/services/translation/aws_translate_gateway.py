"""AWS Translate Gateway - translation through the Amazon Translate API."""

import logging
from typing import Any, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from quick_translate.services.translation.translation_gateway import TranslationError, TranslationGateway

logger = logging.getLogger(__name__)


class AwsTranslateGateway(TranslationGateway):
    """
    Thin wrapper around AWS Translate.

    Credentials are resolved by boto3's default provider chain.
    """

    name = "aws-translate"

    def __init__(self, region: str, client: Optional[Any] = None):
        self._client = client or boto3.client("translate", region_name=region)

    def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        try:
            response = self._client.translate_text(
                Text=text,
                SourceLanguageCode=source_lang,
                TargetLanguageCode=target_lang,
            )
        except (ClientError, BotoCoreError) as e:
            logger.error("AWS Translate call failed (%s -> %s): %s", source_lang, target_lang, e)
            raise TranslationError(f"Translation failed: {e}") from e

        translated = response.get("TranslatedText")
        if translated is None:
            raise TranslationError("Empty response from AWS Translate")
        return translated
