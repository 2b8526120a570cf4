"""Async client binding for the Steam Web API."""

import logging

from .client import HttpxTransport, SteamClient, SteamResponse, Transport

# Silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = ["SteamClient", "HttpxTransport", "SteamResponse", "Transport"]
