"""
Pytest configuration for the cellar drinking window tests.
"""

import pytest


@pytest.fixture(autouse=True)
def _clear_feature_flag_cache():
    """Feature flags are cached; reset so monkeypatched env vars apply."""
    from app.feature_flags import get_feature_flags
    get_feature_flags.cache_clear()
    yield
    get_feature_flags.cache_clear()


@pytest.fixture(autouse=True)
def _no_evaluation_year_override(monkeypatch):
    """Tests pin the year explicitly; ignore any EVALUATION_YEAR in the shell or .env."""
    monkeypatch.delenv("EVALUATION_YEAR", raising=False)
