"""
Supported languages for LinguaBridge.
"""

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class Language:
    code: str
    name: str


# Display order
LANGUAGES: Tuple[Language, ...] = (
    Language("en", "English"),
    Language("es", "Spanish"),
    Language("fr", "French"),
    Language("de", "German"),
    Language("it", "Italian"),
    Language("pt", "Portuguese"),
    Language("ru", "Russian"),
    Language("ja", "Japanese"),
    Language("ko", "Korean"),
    Language("zh", "Chinese (Simplified)"),
    Language("ar", "Arabic"),
    Language("hi", "Hindi"),
    Language("nl", "Dutch"),
    Language("pl", "Polish"),
    Language("tr", "Turkish"),
)

_BY_CODE: Dict[str, Language] = {lang.code: lang for lang in LANGUAGES}


def list_languages() -> Tuple[Language, ...]:
    """Return supported languages in display order."""
    return LANGUAGES


def name_of(code: str) -> str:
    """
    Get the display name for a language code.

    Args:
        code: Language code

    Returns:
        Display name, or the code itself if it is not registered
    """
    lang = _BY_CODE.get(code)
    return lang.name if lang else code


def is_supported(code: str) -> bool:
    return code in _BY_CODE


def language_codes() -> Tuple[str, ...]:
    return tuple(_BY_CODE)
