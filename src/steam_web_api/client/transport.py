"""HTTP transport used by the Steam Web API client.

The client never talks to httpx directly. It holds a reference to an object
implementing the Transport protocol, which performs a GET and returns a
SteamResponse envelope holding the validated body. HttpxTransport is the
default implementation.

Errors are not translated here:
- httpx.TransportError for connection problems and timeouts
- httpx.HTTPStatusError for non-2xx responses
- json.JSONDecodeError for malformed bodies
- pydantic.ValidationError for bodies that don't match the response model
"""

import logging
from dataclasses import dataclass
from typing import Any, Generic, Mapping, Protocol, TypeVar

import httpx
from pydantic import BaseModel


DEFAULT_BASE_URL = "http://api.steampowered.com"

T = TypeVar("T", bound=BaseModel)


@dataclass
class SteamResponse(Generic[T]):
    """Envelope for a successful Steam Web API response."""

    status_code: int
    url: str
    data: T


class Transport(Protocol):
    """Anything able to perform a GET and return a typed body."""

    async def get(
        self,
        path: str,
        params: Mapping[str, Any],
        response_model: type[T],
    ) -> SteamResponse[T]:
        ...

    async def close(self) -> None:
        ...


class HttpxTransport:
    """Transport backed by an httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
        logger: logging.Logger | None = None,
    ):
        """
        Initialize the transport.

        Args:
            base_url: Scheme and host every request path is appended to.
            timeout: Request timeout in seconds (ignored if client is given).
            client: Preconfigured AsyncClient. Its base_url is left untouched.
            logger: Logger for request tracing (default: module logger).
        """
        self.base_url = base_url
        self._logger = logger or logging.getLogger(__name__)
        self._client = client or httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def get(
        self,
        path: str,
        params: Mapping[str, Any],
        response_model: type[T],
    ) -> SteamResponse[T]:
        """
        Perform a GET request and validate the JSON body.

        Args:
            path: Endpoint path (e.g., "/ISteamUser/GetPlayerBans/v1/")
            params: Query parameters, sent as-is
            response_model: pydantic model the body is validated into

        Returns:
            SteamResponse wrapping the validated body

        Raises:
            httpx.HTTPError: On transport failures and non-2xx responses
            ValueError: On malformed JSON or a body that doesn't match the model
        """
        response = await self._client.get(path, params=dict(params))

        # Never log params, they carry the API key
        self._logger.debug(f"GET {path} -> {response.status_code}")

        response.raise_for_status()

        data = response_model.model_validate(response.json())
        return SteamResponse(
            status_code=response.status_code,
            url=str(response.url.copy_remove_param("key")),
            data=data,
        )
