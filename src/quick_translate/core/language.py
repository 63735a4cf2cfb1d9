"""Language entities - supported languages and text direction lookup."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional


class Direction(str, Enum):
    """Rendering direction of a language, used only for text alignment."""

    LTR = "ltr"
    RTL = "rtl"


@dataclass(frozen=True)
class Language:
    """A supported language as shown in the language selectors."""

    code: str
    name: str


class LanguageCatalog:
    """Knows which language codes are supported and which render right-to-left."""

    def __init__(self, languages: Iterable[Language], rtl_codes: Iterable[str] = ()):
        self._languages: List[Language] = list(languages)
        self._by_code = {language.code: language for language in self._languages}
        self._rtl_codes = frozenset(rtl_codes)

    @property
    def languages(self) -> List[Language]:
        """Supported languages in display order."""
        return list(self._languages)

    def is_supported(self, code: Optional[str]) -> bool:
        return code is not None and code in self._by_code

    def find(self, code: str) -> Optional[Language]:
        """Return the language for a code, or None if unsupported."""
        return self._by_code.get(code)

    def name_of(self, code: str) -> str:
        """Display name for a code, falling back to the code itself."""
        language = self._by_code.get(code)
        return language.name if language else code

    def is_rtl(self, code: str) -> bool:
        return code in self._rtl_codes

    def direction(self, code: str) -> Direction:
        return Direction.RTL if self.is_rtl(code) else Direction.LTR

    def __len__(self) -> int:
        return len(self._languages)

    def __contains__(self, code: object) -> bool:
        return code in self._by_code
