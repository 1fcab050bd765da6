"""
Runtime settings for LinguaBridge.
Loaded from an optional JSON file, then overridden by environment variables.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, List, Optional
import json
import os
from async_remote import AsyncRemoteResolver
from remote import DEFAULT_TIMEOUT, RemoteResolver, get_provider
from security import RATE_LIMIT_REQUESTS, USER_AGENT
from translator import Translator
from validators import validate_settings

ENV_PREFIX = "LINGUABRIDGE_"


@dataclass
class Settings:
    provider: str = "mymemory"
    api_url: Optional[str] = None  # provider default when unset
    api_key: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT
    rate_limit_requests: int = RATE_LIMIT_REQUESTS
    user_agent: str = USER_AGENT
    offline: bool = False
    allow_private_hosts: bool = False
    log_level: str = "INFO"
    log_file: Optional[str] = None
    json_logs: bool = False
    cors_origins: str = "*"

    def cors_origin_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


def _coerce(value: str, default: Any) -> Any:
    if isinstance(default, bool):
        return value.strip().lower() in ("1", "true", "yes", "on")
    if isinstance(default, int):
        return int(value)
    if isinstance(default, float):
        return float(value)
    return value


def _env_overrides(environ: Dict[str, str]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    defaults = Settings()
    for f in fields(Settings):
        raw = environ.get(ENV_PREFIX + f.name.upper())
        if raw is None:
            continue
        overrides[f.name] = _coerce(raw, getattr(defaults, f.name))

    if "CORS_ORIGINS" in environ:
        overrides["cors_origins"] = environ["CORS_ORIGINS"]
    return overrides


def load_settings(path: Optional[str] = None, environ: Optional[Dict[str, str]] = None) -> Settings:
    """
    Load and validate settings.

    Args:
        path: Optional JSON settings file
        environ: Environment mapping (os.environ by default)

    Returns:
        Settings object

    Raises:
        FileNotFoundError: If the settings file doesn't exist
        json.JSONDecodeError: If the settings file is invalid JSON
        ValueError: If validation fails or the file has unknown keys
    """
    values: Dict[str, Any] = {}

    if path:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
        if not isinstance(raw, dict):
            raise ValueError("Settings file must contain a JSON object")
        known = {f.name for f in fields(Settings)}
        unknown = sorted(set(raw) - known)
        if unknown:
            raise ValueError(f"Unknown settings: {', '.join(unknown)}")
        values.update(raw)

    values.update(_env_overrides(os.environ if environ is None else environ))

    settings = Settings(**values)

    errors = validate_settings(settings)
    if errors:
        raise ValueError("Settings validation failed:\n" + "\n".join(f"  - {e}" for e in errors))

    return settings


def build_remote(settings: Settings) -> Optional[RemoteResolver]:
    if settings.offline:
        return None
    return RemoteResolver(
        get_provider(settings.provider, settings.api_url, settings.api_key),
        timeout=settings.timeout,
        rate_limit=settings.rate_limit_requests,
        user_agent=settings.user_agent
    )


def build_async_remote(settings: Settings) -> Optional[AsyncRemoteResolver]:
    if settings.offline:
        return None
    return AsyncRemoteResolver(
        get_provider(settings.provider, settings.api_url, settings.api_key),
        timeout=settings.timeout,
        rate_limit=settings.rate_limit_requests,
        user_agent=settings.user_agent
    )


def build_translator(
    settings: Settings,
    async_remote: Optional[AsyncRemoteResolver] = None
) -> Translator:
    """Wire a Translator from settings."""
    return Translator(remote=build_remote(settings), async_remote=async_remote)
