"""
Shared pytest fixtures
"""
from dataclasses import replace
from unittest.mock import MagicMock

import pytest

from gamepulse.config.settings import SETTINGS
from gamepulse.pipelines.cfbd_client import CollegeFootballDataClient
from gamepulse.store.profile_store import ProfileStore
from gamepulse.store.static_profiles import load_static_profiles


@pytest.fixture
def static_profiles():
    return load_static_profiles()


@pytest.fixture
def static_store(static_profiles):
    return ProfileStore(static_profiles)


@pytest.fixture
def fast_settings():
    """Settings with no retry backoff so retry tests do not sleep."""
    return replace(SETTINGS, http=replace(SETTINGS.http, retry_backoff_seconds=0))


@pytest.fixture
def mock_client():
    """API client double returning no data and no errors."""
    client = MagicMock(spec=CollegeFootballDataClient)
    client.trace_id = "trace-mock-client"
    client.settings = SETTINGS
    client.get_error_summary.return_value = None
    return client
