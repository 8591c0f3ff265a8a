"""
Shared test configuration and fixtures for provider tests.
"""

import pytest
import httpx
from unittest.mock import AsyncMock, Mock

from bank_of_italy_api.config.settings import Settings
from bank_of_italy_api.infrastructure.providers import BancaDItalia

TEST_BASE_URL = "https://boi.test/rest/v1.0"


def make_response(json_data):
    """Successful HTTP response whose body decodes to ``json_data``."""
    response = Mock()
    response.status_code = 200
    response.raise_for_status = Mock()
    if isinstance(json_data, Exception):
        response.json.side_effect = json_data
    else:
        response.json.return_value = json_data
    return response


def make_status_error(status_code, text="error"):
    error_response = Mock()
    error_response.status_code = status_code
    error_response.text = text
    return httpx.HTTPStatusError(
        f"HTTP {status_code}",
        request=Mock(),
        response=error_response
    )


@pytest.fixture
def test_settings():
    return Settings(BASE_URL=TEST_BASE_URL, LANGUAGE="en")


@pytest.fixture
def mock_client():
    """Mock httpx.AsyncClient for testing"""
    return AsyncMock(spec=httpx.AsyncClient)


@pytest.fixture
def provider(mock_client, test_settings):
    return BancaDItalia(client=mock_client, settings=test_settings)
