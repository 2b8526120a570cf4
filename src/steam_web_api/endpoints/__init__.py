"""Steam Web API endpoint modules.

Each endpoint module represents a Steam API interface (ISteamUser, IPlayerService, etc.)
and declares the operations available on that interface.
"""

from .base import BaseEndpoint, EndpointRegistry, EndpointSpec, endpoint
from .player_service import IPlayerService
from .steam_news import ISteamNews
from .steam_user import ISteamUser
from .user_stats import ISteamUserStats

__all__ = [
    "BaseEndpoint",
    "EndpointRegistry",
    "EndpointSpec",
    "endpoint",
    "IPlayerService",
    "ISteamNews",
    "ISteamUser",
    "ISteamUserStats",
]
