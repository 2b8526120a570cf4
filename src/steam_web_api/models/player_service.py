"""
Response records for the IPlayerService interface.

Endpoints:
- IPlayerService/GetOwnedGames/v0001/
- IPlayerService/GetRecentlyPlayedGames/v0001/
- IPlayerService/IsPlayingSharedGame/v0001/

Valve answers private profiles with an empty {"response": {}}, so counts
and game lists default to zero and empty.
"""

from pydantic import Field

from steam_web_api.models.base import SteamModel


class Game(SteamModel):
    """
    A game entry from GetOwnedGames or GetRecentlyPlayedGames.

    Playtimes are in minutes. name and the image hashes require
    include_appinfo on GetOwnedGames.
    """

    appid: int
    name: str | None = None
    playtime_2weeks: int | None = None
    playtime_forever: int = Field(0, ge=0)
    img_icon_url: str | None = None
    img_logo_url: str | None = None
    has_community_visible_stats: bool | None = None
    playtime_windows_forever: int | None = None
    playtime_mac_forever: int | None = None
    playtime_linux_forever: int | None = None
    playtime_deck_forever: int | None = None
    rtime_last_played: int | None = None
    playtime_disconnected: int | None = None


class OwnedGamesList(SteamModel):
    game_count: int = 0
    games: list[Game] = []


class OwnedGames(SteamModel):
    """Wrapper for GetOwnedGames response."""

    response: OwnedGamesList


class RecentGamesList(SteamModel):
    total_count: int = 0
    games: list[Game] = []


class RecentlyPlayedGames(SteamModel):
    """Wrapper for GetRecentlyPlayedGames response."""

    response: RecentGamesList


class Lender(SteamModel):
    lender_steamid: str = Field(..., description="SteamID64 of the lender, '0' if not borrowed")

    @property
    def is_borrowed(self) -> bool:
        """Check if the game is played through Family Sharing."""
        return self.lender_steamid != "0"


class SharedGame(SteamModel):
    """Wrapper for IsPlayingSharedGame response."""

    response: Lender
