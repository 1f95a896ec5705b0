"""Shared fixtures for the streak client tests."""

from unittest.mock import Mock

import pytest
import requests

from streak_client.api.client import StreakApiClient
from streak_client.config.settings import update_from_kwargs
from streak_client.helpers.state import DashboardState

BASE_URL = "http://backend.test"


def make_response(status_code=200, payload=None, text=""):
    """Build a stand-in for ``requests.Response``."""
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.text = text
    if isinstance(payload, Exception):
        response.json.side_effect = payload
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def settings():
    return update_from_kwargs(
        api_base_url=BASE_URL,
        api_timeout_sec=5,
        default_session="1-hour",
        error_message="Error fetching time",
    )


@pytest.fixture
def http_session():
    """Mock ``requests.Session`` with an empty header dict."""
    session = Mock(spec=requests.Session)
    session.headers = {}
    return session


@pytest.fixture
def api_client(http_session, settings):
    return StreakApiClient(session=http_session, settings=settings)


@pytest.fixture
def loaded_state():
    return DashboardState(
        current_time="2024-05-01T09:00:00+00:00",
        streak=4,
        total_points=46,
        selected_date="2024-05-01",
        selected_session="2-hours",
    )
