"""
Security utilities for LinguaBridge.
Provides URL validation, response size limits, and per-host rate limiting
for outgoing translation provider calls.
"""

from typing import Dict, List, Optional, Set, Tuple
from urllib.parse import urlparse
from urllib import request, error
import socket
import threading
import time
from collections import defaultdict

MAX_RESPONSE_SIZE = 1024 * 1024  # 1MB
ALLOWED_SCHEMES = {"http", "https"}
USER_AGENT = "LinguaBridge/1.0 (Text Translation Service)"

_PRIVATE_PREFIXES = (
    "10.", "172.16.", "172.17.", "172.18.", "172.19.", "172.20.", "172.21.",
    "172.22.", "172.23.", "172.24.", "172.25.", "172.26.", "172.27.", "172.28.",
    "172.29.", "172.30.", "172.31.", "192.168.", "169.254.",
)

# Rate limiting
_rate_limit_store: Dict[str, List[float]] = defaultdict(list)
_rate_limit_lock = threading.Lock()
RATE_LIMIT_REQUESTS = 60  # requests per window
RATE_LIMIT_WINDOW = 60.0  # seconds


class FetchError(Exception):
    """Raised when an outgoing HTTP call cannot produce a usable response."""
    pass


def validate_url(
    url: str,
    allowed_netlocs: Optional[Set[str]] = None,
    allow_private: bool = False
) -> bool:
    """
    Validate a provider URL.

    Args:
        url: URL to validate
        allowed_netlocs: Set of allowed hostnames (optional whitelist)
        allow_private: Permit localhost and private ranges (self-hosted providers)

    Returns:
        True if URL is acceptable, False otherwise
    """
    if not url or not isinstance(url, str):
        return False

    try:
        parsed = urlparse(url)
    except ValueError:
        return False

    if parsed.scheme not in ALLOWED_SCHEMES:
        return False

    hostname = parsed.hostname
    if not hostname:
        return False

    if not allow_private:
        if hostname in ("localhost", "127.0.0.1", "0.0.0.0"):
            return False
        if hostname.startswith(_PRIVATE_PREFIXES):
            return False

    if allowed_netlocs:
        bare = hostname[4:] if hostname.startswith("www.") else hostname
        if hostname not in allowed_netlocs and bare not in allowed_netlocs:
            return False

    return True


def check_rate_limit(
    url: str,
    max_requests: int = RATE_LIMIT_REQUESTS,
    window: float = RATE_LIMIT_WINDOW
) -> bool:
    """
    Check if a request to the URL's host is within the rate limit.

    Args:
        url: URL being requested
        max_requests: Requests allowed per window
        window: Window length in seconds

    Returns:
        True if within rate limit, False if rate limited
    """
    now = time.time()
    key = urlparse(url).netloc

    with _rate_limit_lock:
        _rate_limit_store[key] = [
            ts for ts in _rate_limit_store[key]
            if now - ts < window
        ]

        if len(_rate_limit_store[key]) >= max_requests:
            return False

        _rate_limit_store[key].append(now)
        return True


def fetch_url_secure(
    url: str,
    timeout: float = 8.0,
    method: str = "GET",
    data: Optional[bytes] = None,
    headers: Optional[Dict[str, str]] = None,
    max_size: int = MAX_RESPONSE_SIZE,
    user_agent: str = USER_AGENT
) -> Tuple[int, bytes]:
    """
    Perform one HTTP request with a timeout and a response size limit.

    Args:
        url: URL to fetch
        timeout: Request timeout in seconds
        method: HTTP method
        data: Request body
        headers: Extra request headers
        max_size: Maximum response size in bytes
        user_agent: User-Agent header value

    Returns:
        (status, body) tuple

    Raises:
        FetchError: On network errors, HTTP error statuses, timeouts,
            or oversized responses
    """
    req_headers = {"User-Agent": user_agent}
    if headers:
        req_headers.update(headers)
    req = request.Request(url, data=data, headers=req_headers, method=method)

    try:
        with request.urlopen(req, timeout=timeout) as resp:
            content_length = resp.headers.get("Content-Length")
            if content_length:
                try:
                    if int(content_length) > max_size:
                        raise FetchError(f"Response too large ({content_length} bytes)")
                except ValueError:
                    pass

            body = b""
            while True:
                chunk = resp.read(8192)
                if not chunk:
                    break
                body += chunk
                if len(body) > max_size:
                    raise FetchError("Response too large")

            return resp.status, body
    except error.HTTPError as e:
        raise FetchError(f"HTTP {e.code}") from e
    except error.URLError as e:
        raise FetchError(f"Network error: {e.reason}") from e
    except (TimeoutError, socket.timeout) as e:
        raise FetchError("Timeout") from e
    except OSError as e:
        raise FetchError(f"Connection failed: {e}") from e
