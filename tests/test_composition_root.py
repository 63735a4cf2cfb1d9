"""Tests for gateway selection in the composition root."""

from unittest.mock import MagicMock, patch

import pytest

from quick_translate.core import default_catalog
from quick_translate.main import build_gateway
from quick_translate.services import AwsTranslateGateway, ConfigurationError, GeminiTranslateGateway


@pytest.fixture
def settings():
    settings = MagicMock()
    settings.get_aws_region.return_value = "eu-west-1"
    settings.get_gemini_api_key.return_value = None
    return settings


def test_aws_is_built_with_region(settings):
    settings.get_translation_provider.return_value = "aws"

    with patch("quick_translate.services.translation.aws_translate_gateway.boto3") as mock_boto3:
        gateway = build_gateway(settings, default_catalog())

    assert isinstance(gateway, AwsTranslateGateway)
    mock_boto3.client.assert_called_once_with("translate", region_name="eu-west-1")


def test_gemini_requires_api_key(settings):
    settings.get_translation_provider.return_value = "gemini"

    with pytest.raises(ConfigurationError):
        build_gateway(settings, default_catalog())


def test_gemini_is_built_with_api_key(settings):
    settings.get_translation_provider.return_value = "gemini"
    settings.get_gemini_api_key.return_value = "test-key"

    assert isinstance(build_gateway(settings, default_catalog()), GeminiTranslateGateway)


def test_unknown_provider_is_rejected(settings):
    settings.get_translation_provider.return_value = "babelfish"

    with pytest.raises(ConfigurationError, match="babelfish"):
        build_gateway(settings, default_catalog())
