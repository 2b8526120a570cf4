"""Base endpoint class and endpoint registry.

Every Steam Web API operation is declared on an interface class (ISteamUser,
IPlayerService, etc.) that inherits from BaseEndpoint, using the @endpoint
decorator to attach its path, response model and key requirement. The
metaclass collects these declarations into EndpointRegistry, which forms the
full table of supported operations.

Example usage:

    from steam_web_api.endpoints import BaseEndpoint, endpoint
    from steam_web_api.models import PlayerBans

    class ISteamUser(BaseEndpoint):
        '''Steam User API endpoints.'''

        @endpoint(path="/ISteamUser/GetPlayerBans/v1/", response=PlayerBans)
        async def get_player_bans(self, steamids):
            return await self._get(
                "get_player_bans", {"steamids": join_steam_ids(steamids)}
            )
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Coroutine, TypeVar

from pydantic import BaseModel

from steam_web_api.client.transport import SteamResponse, Transport


logger = logging.getLogger(__name__)

# Type for async endpoint methods
F = TypeVar("F", bound=Callable[..., Coroutine[Any, Any, Any]])


@dataclass(frozen=True)
class EndpointSpec:
    """Metadata for a registered endpoint."""

    name: str
    path: str
    response_model: type[BaseModel]
    requires_key: bool = True
    description: str = ""
    handler: Callable[..., Coroutine[Any, Any, Any]] | None = None
    endpoint_class: type["BaseEndpoint"] | None = None


class EndpointRegistry:
    """Registry for all endpoints across interface modules.

    Note: Uses lazy initialization to avoid class-level mutable state issues.
    """

    _endpoints: dict[str, EndpointSpec] | None = None
    _endpoint_classes: list[type["BaseEndpoint"]] | None = None

    @classmethod
    def _ensure_initialized(cls) -> None:
        """Ensure registry is initialized (lazy initialization)."""
        if cls._endpoints is None:
            cls._endpoints = {}
        if cls._endpoint_classes is None:
            cls._endpoint_classes = []

    @classmethod
    def register_endpoint(cls, spec: EndpointSpec) -> None:
        """Register an endpoint in the global registry."""
        cls._ensure_initialized()
        assert cls._endpoints is not None  # For type checker
        if spec.name in cls._endpoints:
            logger.warning(f"Endpoint '{spec.name}' already registered, overwriting")
        cls._endpoints[spec.name] = spec
        logger.debug(f"Registered endpoint: {spec.name} -> {spec.path}")

    @classmethod
    def register_endpoint_class(cls, endpoint_class: type["BaseEndpoint"]) -> None:
        """Register an interface class."""
        cls._ensure_initialized()
        assert cls._endpoint_classes is not None  # For type checker
        if endpoint_class not in cls._endpoint_classes:
            cls._endpoint_classes.append(endpoint_class)

    @classmethod
    def get_endpoint(cls, name: str) -> EndpointSpec | None:
        """Get an endpoint by name."""
        cls._ensure_initialized()
        assert cls._endpoints is not None  # For type checker
        return cls._endpoints.get(name)

    @classmethod
    def get_all_endpoints(cls) -> list[EndpointSpec]:
        """Get all registered endpoints, in declaration order."""
        cls._ensure_initialized()
        assert cls._endpoints is not None  # For type checker
        return list(cls._endpoints.values())

    @classmethod
    def get_endpoint_classes(cls) -> list[type["BaseEndpoint"]]:
        cls._ensure_initialized()
        assert cls._endpoint_classes is not None  # For type checker
        return list(cls._endpoint_classes)

    @classmethod
    def clear(cls) -> None:
        """Clear all registered endpoints (useful for testing)."""
        cls._endpoints = {}
        cls._endpoint_classes = []


def endpoint(
    path: str,
    response: type[BaseModel],
    requires_key: bool = True,
    name: str | None = None,
) -> Callable[[F], F]:
    """
    Decorator to declare a method as a Steam Web API endpoint.

    The method stays a plain coroutine: it assembles the caller parameters
    and hands them to BaseEndpoint._get, which looks the metadata up by
    method name.

    Args:
        path: Endpoint path including the version suffix
              (e.g., "/ISteamNews/GetNewsForApp/v0002/")
        response: pydantic model the JSON body is validated into
        requires_key: Whether the stored API key is sent (default: True)
        name: Registry name (default: the method name)

    Returns:
        Decorated function
    """

    def decorator(func: F) -> F:
        func._endpoint_meta = {  # type: ignore[attr-defined]
            "name": name or func.__name__,
            "path": path,
            "response_model": response,
            "requires_key": requires_key,
            "description": (func.__doc__ or "").strip().split("\n")[0],
        }
        return func

    return decorator


class BaseEndpointMeta(type):
    """Metaclass that auto-registers interface classes and their endpoints."""

    def __new__(
        mcs,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        **kwargs: Any,
    ) -> type:
        cls = super().__new__(mcs, name, bases, namespace, **kwargs)

        declared = [
            attr_value
            for attr_value in namespace.values()
            if hasattr(attr_value, "_endpoint_meta")
        ]

        # Don't register the base class itself, nor classes that only
        # combine interfaces (SteamClient)
        if declared and any(isinstance(b, BaseEndpointMeta) for b in bases):
            EndpointRegistry.register_endpoint_class(cls)  # type: ignore[arg-type]

            for attr_value in declared:
                EndpointRegistry.register_endpoint(
                    EndpointSpec(
                        **attr_value._endpoint_meta,
                        handler=attr_value,
                        endpoint_class=cls,  # type: ignore[arg-type]
                    )
                )

        return cls


class BaseEndpoint(metaclass=BaseEndpointMeta):
    """
    Base class for Steam Web API interface modules.

    Holds the transport and API key shared by all endpoints and turns
    caller parameters into the final query mapping.

    Attributes:
        transport: Object performing the HTTP GET
        api_key: Steam Web API key, sent to endpoints that require it
    """

    def __init__(
        self,
        transport: Transport,
        api_key: str,
        logger: logging.Logger | None = None,
    ) -> None:
        """
        Initialize endpoint with a transport and API key.

        Args:
            transport: Transport used for every request
            api_key: Steam Web API key (not validated locally)
            logger: Logger for request tracing (default: module logger)
        """
        self.transport = transport
        self.api_key = api_key
        self.logger = logger or logging.getLogger(__name__)

    def _build_params(
        self, meta: dict[str, Any], params: dict[str, Any]
    ) -> dict[str, Any]:
        """Build the query mapping for one request."""
        query = {k: v for k, v in params.items() if v is not None}
        query["format"] = "json"
        if meta["requires_key"]:
            query["key"] = self.api_key
        return query

    async def _get(self, name: str, params: dict[str, Any]) -> SteamResponse[Any]:
        """
        Issue the GET request for a declared endpoint.

        Args:
            name: Name of the decorated method on this class
            params: Caller parameters, using Valve's parameter names.
                    None values are dropped.

        Returns:
            The transport's SteamResponse, unchanged
        """
        meta = getattr(type(self), name)._endpoint_meta
        query = self._build_params(meta, params)

        self.logger.debug(f"Calling {meta['name']} ({meta['path']})")
        return await self.transport.get(meta["path"], query, meta["response_model"])
