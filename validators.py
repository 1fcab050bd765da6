"""
Validation for LinguaBridge.
Checks phrase table integrity, settings, and incoming translation requests.
"""

from typing import Any, Iterable, List, Mapping, Set, Tuple
from languages import is_supported
from remote import PROVIDERS
from security import validate_url

MAX_TEXT_LENGTH = 5000
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ValidationError(Exception):
    """Raised when static data or configuration validation fails."""
    pass


class InvalidRequest(ValidationError):
    """Raised when a translation request is rejected before resolution."""
    pass


def validate_phrase_table(
    entries: Iterable[Tuple[str, Mapping[str, str]]],
    known_codes: Iterable[str]
) -> List[str]:
    """
    Validate phrase table keys and language references.

    Args:
        entries: (key, translations) pairs in table order
        known_codes: Language codes present in the registry

    Returns:
        List of validation error messages (empty if valid)
    """
    errors: List[str] = []
    codes: Set[str] = set(known_codes)
    seen: Set[str] = set()

    for key, translations in entries:
        if not key:
            errors.append("Phrase entry missing key")
            continue

        if key != key.lower().strip():
            errors.append(f"Phrase key is not canonical: {key!r}")

        if key in seen:
            errors.append(f"Duplicate phrase key: {key}")
        seen.add(key)

        if not translations:
            errors.append(f"Phrase '{key}' has no translations")

        for code, value in translations.items():
            if code not in codes:
                errors.append(f"Phrase '{key}' references unknown language: {code}")
            if not isinstance(value, str) or not value:
                errors.append(f"Phrase '{key}' has empty translation for: {code}")

    return errors


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_settings(settings: Any) -> List[str]:
    """
    Validate runtime settings.

    Args:
        settings: Settings object

    Returns:
        List of validation error messages (empty if valid)
    """
    errors: List[str] = []

    if not isinstance(settings.provider, str) or settings.provider not in PROVIDERS:
        errors.append(f"Unknown provider: {settings.provider}")

    if settings.api_url and not validate_url(settings.api_url, allow_private=settings.allow_private_hosts):
        errors.append(f"Invalid API URL: {settings.api_url}")

    # Values from a JSON file arrive untyped
    if not _is_number(settings.timeout) or settings.timeout <= 0:
        errors.append(f"Invalid timeout: {settings.timeout!r}")

    if not isinstance(settings.rate_limit_requests, int) or isinstance(settings.rate_limit_requests, bool) \
            or settings.rate_limit_requests <= 0:
        errors.append(f"Invalid rate limit: {settings.rate_limit_requests!r}")

    for name in ("offline", "allow_private_hosts", "json_logs"):
        if not isinstance(getattr(settings, name), bool):
            errors.append(f"Setting '{name}' must be true or false: {getattr(settings, name)!r}")

    for name in ("user_agent", "cors_origins"):
        if not isinstance(getattr(settings, name), str):
            errors.append(f"Setting '{name}' must be a string: {getattr(settings, name)!r}")

    for name in ("api_key", "log_file"):
        if getattr(settings, name) is not None and not isinstance(getattr(settings, name), str):
            errors.append(f"Setting '{name}' must be a string: {getattr(settings, name)!r}")

    if not isinstance(settings.log_level, str) or settings.log_level.upper() not in LOG_LEVELS:
        errors.append(f"Invalid log level: {settings.log_level!r}")

    return errors


def validate_request(text: Any, source_lang: Any, target_lang: Any) -> None:
    """
    Validate a translation request from the API or CLI.

    Args:
        text: Source text
        source_lang: Source language code
        target_lang: Target language code

    Raises:
        InvalidRequest: If the request must not reach the translator
    """
    if not isinstance(text, str) or not text.strip():
        raise InvalidRequest("Text must not be empty")

    if len(text) > MAX_TEXT_LENGTH:
        raise InvalidRequest(f"Text exceeds {MAX_TEXT_LENGTH} characters ({len(text)})")

    for label, code in (("source", source_lang), ("target", target_lang)):
        if not isinstance(code, str) or not is_supported(code):
            raise InvalidRequest(f"Unsupported {label} language: {code}")
