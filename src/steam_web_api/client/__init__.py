"""Steam API client module."""

from .transport import HttpxTransport, SteamResponse, Transport
from .steam_client import SteamClient

__all__ = ["SteamClient", "HttpxTransport", "SteamResponse", "Transport"]
