"""
Shared fixtures for LinguaBridge tests.
"""

import pytest
from metrics import get_metrics
from security import _rate_limit_store


@pytest.fixture(autouse=True)
def reset_shared_state():
    """Clear global metrics and rate limit history between tests."""
    get_metrics().clear()
    _rate_limit_store.clear()
    yield
    get_metrics().clear()
    _rate_limit_store.clear()
