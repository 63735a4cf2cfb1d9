"""Settings Manager - Handles provider, API key and runtime configuration."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


class ConfigurationError(Exception):
    """Raised when the configuration cannot produce a working setup."""


class SettingsManager:
    """
    Manages settings read from the environment.

    Values come from a .env file in the project root; variables already
    present in the process environment take precedence.
    """

    DEFAULT_PROVIDER = "aws"
    SUPPORTED_PROVIDERS = ("aws", "gemini")
    DEFAULT_AWS_REGION = "us-east-1"
    DEFAULT_DEBOUNCE_MS = 250
    DEFAULT_LOG_LEVEL = "INFO"

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_translation_provider(self) -> str:
        """Name of the translation provider, lowercased."""
        provider = self._get("TRANSLATION_PROVIDER")
        return provider.lower() if provider else self.DEFAULT_PROVIDER

    def get_aws_region(self) -> str:
        return self._get("AWS_REGION") or self.DEFAULT_AWS_REGION

    def get_gemini_api_key(self) -> Optional[str]:
        """Get the Gemini API key from environment."""
        return self._get("GEMINI_API_KEY")

    def get_debounce_ms(self) -> int:
        """Quiet period in milliseconds; invalid or negative values use the default."""
        raw = self._get("DEBOUNCE_MS")
        if raw is None:
            return self.DEFAULT_DEBOUNCE_MS
        try:
            value = int(raw)
        except ValueError:
            return self.DEFAULT_DEBOUNCE_MS
        return value if value >= 0 else self.DEFAULT_DEBOUNCE_MS

    def get_preferences_path(self) -> Path:
        """Location of the persisted language preferences."""
        raw = self._get("PREFERENCES_PATH")
        if raw:
            return Path(raw).expanduser()
        return Path.home() / ".quick_translate" / "preferences.json"

    def get_log_level(self) -> str:
        return (self._get("LOG_LEVEL") or self.DEFAULT_LOG_LEVEL).upper()

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)

    @staticmethod
    def _get(name: str) -> Optional[str]:
        value = os.getenv(name)
        return value.strip() if value and value.strip() else None
