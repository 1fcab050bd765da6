"""
Remote translation providers for LinguaBridge.

A provider knows how to shape one request for its API and how to read the
answer. RemoteResolver performs exactly one blocking call per resolve()
(no retries, no caching) and turns every failure into RemoteUnavailable.
"""

from typing import Any, Dict, Optional
from dataclasses import dataclass, field
from urllib.parse import urlencode, quote
import json
from logger import get_logger, translation_context
from metrics import get_metrics, Timer
from security import (
    fetch_url_secure,
    check_rate_limit,
    FetchError,
    RATE_LIMIT_REQUESTS,
    USER_AGENT
)

DEFAULT_TIMEOUT = 8.0


class RemoteUnavailable(Exception):
    """Raised when the remote provider cannot deliver a translation."""

    def __init__(self, reason: str, provider: Optional[str] = None):
        super().__init__(reason)
        self.reason = reason
        self.provider = provider


@dataclass
class ProviderRequest:
    """One outgoing provider call."""
    method: str
    url: str
    body: Optional[bytes] = None
    headers: Dict[str, str] = field(default_factory=dict)


def decode_json(body: bytes) -> Any:
    try:
        return json.loads(body.decode("utf-8"))
    except (ValueError, RecursionError) as e:
        raise RemoteUnavailable(f"Malformed response body: {e}") from e


class Provider:
    """Base class for translation API providers."""

    name = "base"
    default_url = ""

    def __init__(self, base_url: Optional[str] = None, api_key: Optional[str] = None):
        self.base_url = (base_url or self.default_url).rstrip("/")
        self.api_key = api_key

    def build_request(self, text: str, source_lang: str, target_lang: str) -> ProviderRequest:
        raise NotImplementedError

    def parse_response(self, status: int, payload: Any) -> str:
        raise NotImplementedError


class MyMemoryProvider(Provider):
    """MyMemory public API (GET, no key required)."""

    name = "mymemory"
    default_url = "https://api.mymemory.translated.net"

    def build_request(self, text: str, source_lang: str, target_lang: str) -> ProviderRequest:
        params = {"q": text, "langpair": f"{source_lang}|{target_lang}"}
        if self.api_key:
            params["key"] = self.api_key
        query = urlencode(params, quote_via=quote)
        return ProviderRequest(method="GET", url=f"{self.base_url}/get?{query}")

    def parse_response(self, status: int, payload: Any) -> str:
        """
        Extract the translation from a MyMemory response.

        Expected shape:
            {"responseStatus": 200, "responseData": {"translatedText": "..."}}

        Raises:
            RemoteUnavailable: On any other status or shape
        """
        if status != 200:
            raise RemoteUnavailable(f"HTTP {status}")
        if not isinstance(payload, dict):
            raise RemoteUnavailable("Response is not a JSON object")

        response_status = payload.get("responseStatus")
        if isinstance(response_status, bool) or response_status != 200:
            raise RemoteUnavailable(f"Provider status {response_status!r}")

        data = payload.get("responseData")
        if not isinstance(data, dict):
            raise RemoteUnavailable("Missing responseData")

        translated = data.get("translatedText")
        if not isinstance(translated, str) or not translated:
            raise RemoteUnavailable("Missing translatedText")
        return translated


class LibreTranslateProvider(Provider):
    """LibreTranslate API (POST JSON, optional key)."""

    name = "libretranslate"
    default_url = "https://libretranslate.com"

    def build_request(self, text: str, source_lang: str, target_lang: str) -> ProviderRequest:
        body = {
            "q": text,
            "source": source_lang,
            "target": target_lang,
            "format": "text"
        }
        if self.api_key:
            body["api_key"] = self.api_key
        return ProviderRequest(
            method="POST",
            url=f"{self.base_url}/translate",
            body=json.dumps(body).encode("utf-8"),
            headers={"Content-Type": "application/json"}
        )

    def parse_response(self, status: int, payload: Any) -> str:
        if status != 200:
            raise RemoteUnavailable(f"HTTP {status}")
        if not isinstance(payload, dict):
            raise RemoteUnavailable("Response is not a JSON object")
        if payload.get("error"):
            raise RemoteUnavailable(f"Provider error: {payload['error']}")

        translated = payload.get("translatedText")
        if not isinstance(translated, str) or not translated:
            raise RemoteUnavailable("Missing translatedText")
        return translated


PROVIDERS = {
    MyMemoryProvider.name: MyMemoryProvider,
    LibreTranslateProvider.name: LibreTranslateProvider,
}


def get_provider(name: str, base_url: Optional[str] = None, api_key: Optional[str] = None) -> Provider:
    """
    Create a provider by name.

    Raises:
        ValueError: If the provider name is unknown
    """
    try:
        provider_cls = PROVIDERS[name]
    except KeyError:
        raise ValueError(f"Unknown provider: {name}") from None
    return provider_cls(base_url=base_url, api_key=api_key)


class RemoteResolver:
    """Blocking remote resolver (urllib)."""

    def __init__(
        self,
        provider: Optional[Provider] = None,
        timeout: float = DEFAULT_TIMEOUT,
        rate_limit: int = RATE_LIMIT_REQUESTS,
        user_agent: str = USER_AGENT
    ):
        self.provider = provider or MyMemoryProvider()
        self.timeout = timeout
        self.rate_limit = rate_limit
        self.user_agent = user_agent
        self.logger = get_logger("remote")
        self.metrics = get_metrics()

    def resolve(self, text: str, source_lang: str, target_lang: str) -> str:
        """
        Translate text with one provider call.

        Args:
            text: Source text
            source_lang: Source language code
            target_lang: Target language code

        Returns:
            Translated text exactly as returned by the provider

        Raises:
            RemoteUnavailable: On network, status, or payload failure
        """
        tags = {"provider": self.provider.name}
        try:
            result = self._call(text, source_lang, target_lang)
        except RemoteUnavailable as e:
            self.metrics.increment("remote_errors", tags=tags)
            e.provider = self.provider.name
            self.logger.debug(
                f"{self.provider.name} failed: {e.reason}",
                extra=translation_context(
                    provider=self.provider.name, source_lang=source_lang, target_lang=target_lang, reason=e.reason
                )
            )
            raise

        self.metrics.increment("remote_success", tags=tags)
        return result

    def _call(self, text: str, source_lang: str, target_lang: str) -> str:
        req = self.provider.build_request(text, source_lang, target_lang)

        if not check_rate_limit(req.url, max_requests=self.rate_limit):
            raise RemoteUnavailable("Rate limit exceeded")

        try:
            with Timer("remote_translate", tags={"provider": self.provider.name}):
                status, body = fetch_url_secure(
                    req.url,
                    timeout=self.timeout,
                    method=req.method,
                    data=req.body,
                    headers=req.headers,
                    user_agent=self.user_agent
                )
        except FetchError as e:
            raise RemoteUnavailable(str(e)) from e
        except Exception as e:
            raise RemoteUnavailable(f"Unexpected error: {e}") from e

        return self.provider.parse_response(status, decode_json(body))
