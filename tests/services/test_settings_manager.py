"""Unit tests for SettingsManager."""

import os
import tempfile
from pathlib import Path

import pytest

from quick_translate.services import SettingsManager

MANAGED_VARIABLES = (
    "GEMINI_API_KEY",
    "TRANSLATION_PROVIDER",
    "AWS_REGION",
    "DEBOUNCE_MS",
    "PREFERENCES_PATH",
    "LOG_LEVEL",
)


@pytest.fixture
def temp_env_dir():
    """Provide a temporary directory for .env files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def clean_env():
    """Remove managed variables from the environment before and after each test."""
    saved = {name: os.environ.pop(name, None) for name in MANAGED_VARIABLES}
    yield
    for name, value in saved.items():
        if value is not None:
            os.environ[name] = value
        else:
            os.environ.pop(name, None)


def make_settings(directory: Path, content: str) -> SettingsManager:
    (directory / ".env").write_text(content)
    return SettingsManager(project_root=directory)


class TestSettingsManagerDefaults:
    """Tests for values used when nothing is configured."""

    def test_defaults(self, temp_env_dir, clean_env):
        settings = make_settings(temp_env_dir, "")
        assert settings.get_translation_provider() == "aws"
        assert settings.get_aws_region() == "us-east-1"
        assert settings.get_gemini_api_key() is None
        assert settings.get_debounce_ms() == 250
        assert settings.get_log_level() == "INFO"
        assert settings.get_preferences_path() == Path.home() / ".quick_translate" / "preferences.json"

    def test_missing_env_file_uses_defaults(self, temp_env_dir, clean_env):
        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_gemini_api_key() is None
        assert settings.get_translation_provider() == "aws"


class TestSettingsManagerValues:
    """Tests for values read from the .env file."""

    def test_reads_values_from_env_file(self, temp_env_dir, clean_env):
        settings = make_settings(
            temp_env_dir,
            "TRANSLATION_PROVIDER=Gemini\n"
            "AWS_REGION=eu-west-1\n"
            "GEMINI_API_KEY=test-key-123\n"
            "DEBOUNCE_MS=400\n"
            "LOG_LEVEL=debug\n",
        )
        assert settings.get_translation_provider() == "gemini"
        assert settings.get_aws_region() == "eu-west-1"
        assert settings.get_gemini_api_key() == "test-key-123"
        assert settings.get_debounce_ms() == 400
        assert settings.get_log_level() == "DEBUG"

    def test_api_key_strips_whitespace(self, temp_env_dir, clean_env):
        settings = make_settings(temp_env_dir, "GEMINI_API_KEY=  test-key  \n")
        assert settings.get_gemini_api_key() == "test-key"

    def test_whitespace_only_api_key_is_none(self, temp_env_dir, clean_env):
        os.environ["GEMINI_API_KEY"] = "   "
        settings = make_settings(temp_env_dir, "")
        assert settings.get_gemini_api_key() is None

    @pytest.mark.parametrize("raw", ["soon", "-5", "2.5"])
    def test_invalid_debounce_falls_back_to_default(self, temp_env_dir, clean_env, raw):
        settings = make_settings(temp_env_dir, f"DEBOUNCE_MS={raw}\n")
        assert settings.get_debounce_ms() == SettingsManager.DEFAULT_DEBOUNCE_MS

    def test_preferences_path_expands_user(self, temp_env_dir, clean_env):
        settings = make_settings(temp_env_dir, "PREFERENCES_PATH=~/prefs.json\n")
        assert settings.get_preferences_path() == Path.home() / "prefs.json"

    def test_process_environment_wins_over_file(self, temp_env_dir, clean_env):
        os.environ["AWS_REGION"] = "ap-south-1"
        settings = make_settings(temp_env_dir, "AWS_REGION=eu-west-1\n")
        assert settings.get_aws_region() == "ap-south-1"

    def test_reload_env_updates_values(self, temp_env_dir, clean_env):
        settings = make_settings(temp_env_dir, "GEMINI_API_KEY=old-key\n")
        assert settings.get_gemini_api_key() == "old-key"

        (temp_env_dir / ".env").write_text("GEMINI_API_KEY=new-key\n")
        settings.reload_env()
        assert settings.get_gemini_api_key() == "new-key"
