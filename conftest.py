"""Global pytest configuration."""

from collections.abc import Iterator

import pytest

from backend.planner.adapters.reference_data import clear_reference_cache
from backend.planner.config import get_settings


@pytest.fixture(autouse=True)
def reset_cached_state() -> Iterator[None]:
    """Give every test fresh settings and reference tables."""
    get_settings.cache_clear()
    clear_reference_cache()
    yield
    get_settings.cache_clear()
    clear_reference_cache()
