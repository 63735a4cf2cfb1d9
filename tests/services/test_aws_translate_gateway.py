"""Unit tests for AwsTranslateGateway."""

from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from quick_translate.services import AwsTranslateGateway, TranslationError


@pytest.fixture
def client():
    client = MagicMock()
    client.translate_text.return_value = {
        "TranslatedText": "سلام دنیا",
        "SourceLanguageCode": "en",
        "TargetLanguageCode": "fa",
    }
    return client


def test_translate_sends_provider_payload(client):
    gateway = AwsTranslateGateway(region="us-east-1", client=client)

    assert gateway.translate("Hello world", "en", "fa") == "سلام دنیا"
    client.translate_text.assert_called_once_with(
        Text="Hello world",
        SourceLanguageCode="en",
        TargetLanguageCode="fa",
    )


def test_client_error_becomes_translation_error(client):
    client.translate_text.side_effect = ClientError(
        {"Error": {"Code": "UnsupportedLanguagePairException", "Message": "nope"}},
        "TranslateText",
    )
    gateway = AwsTranslateGateway(region="us-east-1", client=client)

    with pytest.raises(TranslationError):
        gateway.translate("Hello", "en", "xx")


def test_connection_error_becomes_translation_error(client):
    client.translate_text.side_effect = EndpointConnectionError(endpoint_url="https://translate.example")
    gateway = AwsTranslateGateway(region="us-east-1", client=client)

    with pytest.raises(TranslationError):
        gateway.translate("Hello", "en", "fa")


def test_missing_translated_text_is_an_error(client):
    client.translate_text.return_value = {}
    gateway = AwsTranslateGateway(region="us-east-1", client=client)

    with pytest.raises(TranslationError):
        gateway.translate("Hello", "en", "fa")


def test_default_client_uses_region():
    with patch("quick_translate.services.translation.aws_translate_gateway.boto3") as mock_boto3:
        AwsTranslateGateway(region="eu-west-1")

    mock_boto3.client.assert_called_once_with("translate", region_name="eu-west-1")
