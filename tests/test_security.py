"""
Security tests for LinguaBridge.
"""

from security import validate_url, check_rate_limit


def test_validate_url_allowed_schemes():
    assert validate_url("https://api.mymemory.translated.net") is True
    assert validate_url("http://libretranslate.com") is True
    assert validate_url("ftp://example.com") is False
    assert validate_url("file:///etc/passwd") is False
    assert validate_url("") is False


def test_validate_url_private_hosts():
    assert validate_url("http://localhost:5000") is False
    assert validate_url("http://192.168.1.1") is False
    assert validate_url("http://10.0.0.1") is False
    assert validate_url("http://localhost:5000", allow_private=True) is True


def test_validate_url_whitelist():
    allowed = {"example.com"}
    assert validate_url("https://example.com", allowed_netlocs=allowed) is True
    assert validate_url("https://www.example.com", allowed_netlocs=allowed) is True
    assert validate_url("https://evil.com", allowed_netlocs=allowed) is False


def test_rate_limiting():
    url = "https://api.example.com/get?q=a"
    for _ in range(3):
        assert check_rate_limit(url, max_requests=3) is True
    assert check_rate_limit(url, max_requests=3) is False
    # Limits are per host
    assert check_rate_limit("https://other.example.com/", max_requests=3) is True
