"""
Translation service for LinguaBridge.

Translator is the single entry point used by the API and the CLI. It asks
the remote provider first and falls back to the offline dictionary when
the provider is unavailable, so a resolvable request always yields a string.
"""

from typing import Optional
from async_remote import AsyncRemoteResolver
from fallback import FallbackResolver
from logger import get_logger, translation_context
from metrics import get_metrics
from remote import RemoteResolver, RemoteUnavailable


class Translator:
    """Remote-first translator with offline fallback."""

    def __init__(
        self,
        remote: Optional[RemoteResolver] = None,
        async_remote: Optional[AsyncRemoteResolver] = None,
        fallback: Optional[FallbackResolver] = None
    ):
        """
        Args:
            remote: Blocking resolver used by translate() (None = offline)
            async_remote: Async resolver used by translate_async() (None = offline)
            fallback: Offline resolver (built-in dictionary by default)
        """
        self.remote = remote
        self.async_remote = async_remote
        self.fallback = fallback or FallbackResolver()
        self.logger = get_logger("translator")
        self.metrics = get_metrics()

    def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        """
        Translate text.

        Args:
            text: Text to translate (callers reject empty text beforehand)
            source_lang: Source language code
            target_lang: Target language code

        Returns:
            Translated text
        """
        if source_lang == target_lang:
            self.metrics.increment("same_language")
            return text

        if self.remote is not None:
            try:
                return self.remote.resolve(text, source_lang, target_lang)
            except RemoteUnavailable as e:
                self._log_fallback(e, source_lang, target_lang)

        return self.fallback.resolve(text, target_lang)

    async def translate_async(self, text: str, source_lang: str, target_lang: str) -> str:
        """Async version of translate."""
        if source_lang == target_lang:
            self.metrics.increment("same_language")
            return text

        if self.async_remote is not None:
            try:
                return await self.async_remote.resolve(text, source_lang, target_lang)
            except RemoteUnavailable as e:
                self._log_fallback(e, source_lang, target_lang)

        return self.fallback.resolve(text, target_lang)

    def _log_fallback(self, exc: RemoteUnavailable, source_lang: str, target_lang: str):
        self.logger.warning(
            f"Remote translation unavailable ({exc.reason}), "
            f"using offline fallback for {source_lang} -> {target_lang}",
            extra=translation_context(
                provider=exc.provider, source_lang=source_lang, target_lang=target_lang, reason=exc.reason
            )
        )
