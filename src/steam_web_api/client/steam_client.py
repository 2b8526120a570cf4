"""Steam Web API client.

SteamClient exposes every supported operation as an async method. Each call
is a single GET through the injected transport:

- format=json is always sent
- the API key is sent to endpoints that require it
- ID lists are flattened to comma separated strings

There is no caching, retrying or rate limiting. Transport, HTTP status and
validation errors reach the caller unchanged.
"""

import logging
from typing import Any

from steam_web_api.client.transport import DEFAULT_BASE_URL, HttpxTransport, Transport
from steam_web_api.endpoints import (
    IPlayerService,
    ISteamNews,
    ISteamUser,
    ISteamUserStats,
)


class SteamClient(ISteamNews, ISteamUser, ISteamUserStats, IPlayerService):
    """Async client for the Steam Web API."""

    BASE_URL = DEFAULT_BASE_URL

    def __init__(
        self,
        api_key: str,
        transport: Transport | None = None,
        logger: logging.Logger | None = None,
    ):
        """
        Initialize Steam API client.

        Args:
            api_key: Steam Web API key. Not validated locally; Steam rejects
                     bad keys with 401/403.
            transport: Transport used for requests. If not provided, an
                       HttpxTransport against BASE_URL is created and owned
                       by this client.
            logger: Logger for request tracing. Defaults to the package
                    logger, which is silent unless the application
                    configures logging.
        """
        self._owns_transport = transport is None
        if transport is None:
            transport = HttpxTransport(base_url=self.BASE_URL, logger=logger)

        super().__init__(
            transport,
            api_key,
            logger or logging.getLogger(__name__),
        )

    async def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            await self.transport.close()

    async def __aenter__(self) -> "SteamClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()
