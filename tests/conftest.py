"""Root conftest — shared test configuration."""

import pytest

from adcopy.config import Settings, get_settings


@pytest.fixture
def settings() -> Settings:
    """Explicit defaults — ignores any developer .env file."""
    return Settings(
        _env_file=None,
        dki_max_length=30,
        dki_max_batch_keywords=500,
        headline_char_limit=30,
    )


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
