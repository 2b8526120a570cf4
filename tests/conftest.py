"""Shared fixtures for endpoint tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from steam_web_api.client.transport import SteamResponse


@pytest.fixture
def mock_transport():
    """Create mock transport."""
    transport = MagicMock()
    transport.get = AsyncMock()
    transport.close = AsyncMock()
    return transport


@pytest.fixture
def respond_with(mock_transport):
    """Make the mock transport validate and return a literal JSON payload."""

    def _respond(payload):
        async def _get(path, params, response_model):
            return SteamResponse(
                status_code=200,
                url=path,
                data=response_model.model_validate(payload),
            )

        mock_transport.get.side_effect = _get

    return _respond

