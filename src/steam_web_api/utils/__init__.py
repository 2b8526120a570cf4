"""Utility functions for the Steam Web API client."""

from .steam_ids import join_steam_ids, MAX_STEAM_IDS

__all__ = ["join_steam_ids", "MAX_STEAM_IDS"]
