"""Translation Gateway - abstract adapter to an external translation provider."""

from abc import ABC, abstractmethod


class TranslationError(Exception):
    """Raised when the provider cannot produce a translation."""


class TranslationGateway(ABC):
    """
    Abstract, stateless adapter to a translation provider.

    Implementations (e.g., AwsTranslateGateway) perform a blocking call and
    are run on a background worker by the session controller.
    """

    name: str = "translation"

    @abstractmethod
    def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        """
        Translate text between two languages.

        Args:
            text: Text to translate. Never empty.
            source_lang: Language code of the text.
            target_lang: Language code to translate into.

        Returns:
            The translated text.

        Raises:
            TranslationError: If the provider call fails.
        """
        pass
