"""
Built-in phrase dictionary used for offline approximate translation.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional
from languages import language_codes
from validators import ValidationError, validate_phrase_table


@dataclass(frozen=True)
class PhraseEntry:
    key: str
    translations: Mapping[str, str]


def canonicalize(text: str) -> str:
    """Lowercase and trim text for dictionary lookup."""
    return text.lower().strip()


class PhraseDictionary:
    """Immutable phrase table keyed by canonical source phrase."""

    def __init__(self, table: Mapping[str, Mapping[str, str]], known_codes=None):
        """
        Build and validate the dictionary.

        Args:
            table: Mapping of canonical phrase to {language code: translation}
            known_codes: Language codes to validate against (registry by default)

        Raises:
            ValidationError: If keys are not canonical or reference unknown languages
        """
        codes = language_codes() if known_codes is None else known_codes
        errors = validate_phrase_table(table.items(), codes)
        if errors:
            raise ValidationError(
                "Phrase dictionary validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
            )

        # dict preserves insertion order; substring matching relies on it
        self._entries: Mapping[str, PhraseEntry] = MappingProxyType({
            key: PhraseEntry(key, MappingProxyType(dict(translations)))
            for key, translations in table.items()
        })

    def lookup(self, key: str) -> Optional[Mapping[str, str]]:
        entry = self._entries.get(key)
        return entry.translations if entry else None

    def translation(self, key: str, code: str) -> Optional[str]:
        translations = self.lookup(key)
        if translations is None:
            return None
        return translations.get(code)

    def entries(self) -> Iterator[PhraseEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries


_DEFAULT_TABLE: Dict[str, Dict[str, str]] = {
    # Greetings
    "hello": {
        "es": "hola", "fr": "bonjour", "de": "hallo", "it": "ciao", "pt": "olá",
        "ru": "привет", "ja": "こんにちは", "ko": "안녕하세요", "zh": "你好",
        "ar": "مرحبا", "hi": "नमस्ते",
    },
    "hi": {"es": "hola", "fr": "salut", "de": "hallo", "it": "ciao", "pt": "oi"},
    "goodbye": {
        "es": "adiós", "fr": "au revoir", "de": "auf wiedersehen", "it": "ciao", "pt": "tchau",
        "ru": "до свидания", "ja": "さようなら", "ko": "안녕히 가세요", "zh": "再见",
        "ar": "وداعا", "hi": "अलविदा",
    },
    "good morning": {
        "es": "buenos días", "fr": "bonjour", "de": "guten morgen", "it": "buongiorno", "pt": "bom dia",
    },
    "good night": {
        "es": "buenas noches", "fr": "bonne nuit", "de": "gute nacht", "it": "buonanotte", "pt": "boa noite",
    },
    # Common phrases
    "thank you": {
        "es": "gracias", "fr": "merci", "de": "danke", "it": "grazie", "pt": "obrigado",
        "ru": "спасибо", "ja": "ありがとう", "ko": "감사합니다", "zh": "谢谢",
        "ar": "شكرا", "hi": "धन्यवाद",
    },
    "please": {
        "es": "por favor", "fr": "s'il vous plaît", "de": "bitte", "it": "per favore", "pt": "por favor",
    },
    "excuse me": {
        "es": "disculpe", "fr": "excusez-moi", "de": "entschuldigung", "it": "scusi", "pt": "com licença",
    },
    "sorry": {
        "es": "lo siento", "fr": "désolé", "de": "entschuldigung", "it": "mi dispiace", "pt": "desculpe",
    },
    # Questions
    "how are you": {
        "es": "¿cómo estás?", "fr": "comment allez-vous?", "de": "wie geht es dir?",
        "it": "come stai?", "pt": "como você está?",
    },
    "what is your name": {
        "es": "¿cuál es tu nombre?", "fr": "quel est votre nom?", "de": "wie heißt du?",
        "it": "come ti chiami?", "pt": "qual é o seu nome?",
    },
    "where are you from": {
        "es": "¿de dónde eres?", "fr": "d'où venez-vous?", "de": "woher kommst du?",
        "it": "di dove sei?", "pt": "de onde você é?",
    },
    # Common words
    "yes": {"es": "sí", "fr": "oui", "de": "ja", "it": "sì", "pt": "sim"},
    "no": {"es": "no", "fr": "non", "de": "nein", "it": "no", "pt": "não"},
    "water": {"es": "agua", "fr": "eau", "de": "wasser", "it": "acqua", "pt": "água"},
    "food": {"es": "comida", "fr": "nourriture", "de": "essen", "it": "cibo", "pt": "comida"},
    "love": {"es": "amor", "fr": "amour", "de": "liebe", "it": "amore", "pt": "amor"},
    "beautiful": {"es": "hermoso", "fr": "beau", "de": "schön", "it": "bello", "pt": "bonito"},
    # Sentences
    "i love you": {
        "es": "te amo", "fr": "je t'aime", "de": "ich liebe dich", "it": "ti amo", "pt": "eu te amo",
    },
    "i am learning": {
        "es": "estoy aprendiendo", "fr": "j'apprends", "de": "ich lerne",
        "it": "sto imparando", "pt": "estou aprendendo",
    },
    "have a good day": {
        "es": "que tengas un buen día", "fr": "passe une bonne journée", "de": "hab einen schönen tag",
        "it": "buona giornata", "pt": "tenha um bom dia",
    },
}

# Validated at import so a bad table fails at process start
_default_dictionary = PhraseDictionary(_DEFAULT_TABLE)


def get_dictionary() -> PhraseDictionary:
    """Get the built-in phrase dictionary."""
    return _default_dictionary
