"""
Offline fallback translation for LinguaBridge.

When the remote provider is unavailable the fallback resolver builds a
best-effort string from the built-in phrase dictionary. Strategies run in
order and the first one that produces a result wins:

1. exact_match       - the whole input is a known phrase
2. substring_match   - the input contains a known phrase (first one in
                       dictionary order, not the longest)
3. substitute_words  - known single words are replaced in place
4. placeholder       - "[<Language> translation of: "<text>"]"

The placeholder always succeeds, so resolve() never fails.
"""

from typing import Callable, Optional, Sequence
from languages import name_of
from logger import get_logger, translation_context
from metrics import get_metrics
from phrases import PhraseDictionary, canonicalize, get_dictionary

Strategy = Callable[[str, str, PhraseDictionary], Optional[str]]


def exact_match(canonical: str, target_lang: str, dictionary: PhraseDictionary) -> Optional[str]:
    return dictionary.translation(canonical, target_lang)


def substring_match(canonical: str, target_lang: str, dictionary: PhraseDictionary) -> Optional[str]:
    # First qualifying entry in dictionary order wins, even if a longer key
    # also matches.
    for entry in dictionary.entries():
        translated = entry.translations.get(target_lang)
        if translated and entry.key in canonical:
            return f"{translated} (contains: {entry.key})"
    return None


def substitute_words(canonical: str, target_lang: str, dictionary: PhraseDictionary) -> Optional[str]:
    """
    Replace each whitespace-separated word that is itself a dictionary key.

    Returns:
        The words joined with single spaces, or None if no word changed
    """
    words = canonical.split()
    translated = [dictionary.translation(word, target_lang) or word for word in words]

    if any(new != old for new, old in zip(translated, words)):
        return " ".join(translated)
    return None


def placeholder(text: str, target_lang: str) -> str:
    return f'[{name_of(target_lang)} translation of: "{text}"]'


DEFAULT_STRATEGIES: Sequence[Strategy] = (exact_match, substring_match, substitute_words)


class FallbackResolver:
    """Dictionary-based approximate translator."""

    def __init__(
        self,
        dictionary: Optional[PhraseDictionary] = None,
        strategies: Sequence[Strategy] = DEFAULT_STRATEGIES
    ):
        self.dictionary = dictionary if dictionary is not None else get_dictionary()
        self.strategies = tuple(strategies)
        self.logger = get_logger("fallback")
        self.metrics = get_metrics()

    def resolve(self, text: str, target_lang: str) -> str:
        """
        Produce a best-effort translation without the network.

        Args:
            text: Original input text
            target_lang: Target language code

        Returns:
            Translation, annotated partial match, word substitution,
            or a placeholder naming the target language
        """
        canonical = canonicalize(text)

        for strategy in self.strategies:
            result = strategy(canonical, target_lang, self.dictionary)
            if result is not None:
                self._record(strategy.__name__, target_lang)
                return result

        self._record("placeholder", target_lang)
        return placeholder(text, target_lang)

    def _record(self, strategy_name: str, target_lang: str):
        self.logger.debug(
            f"Fallback strategy '{strategy_name}' used for target '{target_lang}'",
            extra=translation_context(strategy=strategy_name, target_lang=target_lang)
        )
        self.metrics.increment("fallback_used", tags={"strategy": strategy_name, "target": target_lang})
