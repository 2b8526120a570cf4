"""ISteamUserStats API endpoints.

This module covers global achievement stats, per-player achievements and
stats, and the stat/achievement schema of a game.

Reference: https://partner.steamgames.com/doc/webapi/ISteamUserStats
"""

from steam_web_api.client.transport import SteamResponse
from steam_web_api.endpoints.base import BaseEndpoint, endpoint
from steam_web_api.models import (
    GlobalAchievementPercentages,
    PlayerAchievements,
    SchemaForGame,
    UserStatsForGame,
)


class ISteamUserStats(BaseEndpoint):
    """ISteamUserStats API endpoints for achievements and game statistics."""

    @endpoint(
        path="/ISteamUserStats/GetGlobalAchievementPercentagesForApp/v0002/",
        response=GlobalAchievementPercentages,
        requires_key=False,
    )
    async def get_global_achievement_percentages_for_app(
        self, gameid: int
    ) -> SteamResponse[GlobalAchievementPercentages]:
        """
        Get global unlock percentages for every achievement of a game.

        Args:
            gameid: AppID of the game you want the stats of.
        """
        return await self._get(
            "get_global_achievement_percentages_for_app",
            {"gameid": gameid},
        )

    @endpoint(
        path="/ISteamUserStats/GetPlayerAchievements/v0001/",
        response=PlayerAchievements,
    )
    async def get_player_achievements(
        self,
        steamid: str,
        appid: int,
        language: str | None = None,
    ) -> SteamResponse[PlayerAchievements]:
        """
        Get the achievements a player has unlocked in a game.

        Args:
            steamid: SteamID64 of the player
            appid: AppID of the game
            language: Language code for achievement names and descriptions
                      (e.g., "english"). Omitted by default, in which case
                      Steam returns only apiname/achieved/unlocktime.
        """
        return await self._get(
            "get_player_achievements",
            {"steamid": steamid, "appid": appid, "l": language},
        )

    @endpoint(
        path="/ISteamUserStats/GetUserStatsForGame/v0002/",
        response=UserStatsForGame,
    )
    async def get_user_stats_for_game(
        self, steamid: str, appid: int
    ) -> SteamResponse[UserStatsForGame]:
        """Get the stat values a player has recorded in a game."""
        return await self._get(
            "get_user_stats_for_game",
            {"steamid": steamid, "appid": appid},
        )

    @endpoint(
        path="/ISteamUserStats/GetSchemaForGame/v2/",
        response=SchemaForGame,
    )
    async def get_schema_for_game(
        self,
        appid: int,
        language: str | None = None,
    ) -> SteamResponse[SchemaForGame]:
        """
        Get the names, default values and display data of a game's stats
        and achievements.

        Args:
            appid: AppID of the game
            language: Language code for display names (default: Steam's choice)
        """
        return await self._get(
            "get_schema_for_game",
            {"appid": appid, "l": language},
        )
