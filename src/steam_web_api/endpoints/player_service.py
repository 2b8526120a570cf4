"""IPlayerService API endpoints.

This module covers game libraries, recent playtime and Family Sharing.

Reference: https://partner.steamgames.com/doc/webapi/IPlayerService

Note: Library endpoints only return data for public profiles, unless the
API key belongs to the account being queried.
"""

from steam_web_api.client.transport import SteamResponse
from steam_web_api.endpoints.base import BaseEndpoint, endpoint
from steam_web_api.models import OwnedGames, RecentlyPlayedGames, SharedGame


class IPlayerService(BaseEndpoint):
    """IPlayerService API endpoints for game libraries and playtime."""

    @endpoint(
        path="/IPlayerService/GetOwnedGames/v0001/",
        response=OwnedGames,
    )
    async def get_owned_games(
        self,
        steamid: str,
        include_app_info: bool = True,
        include_free: bool = True,
    ) -> SteamResponse[OwnedGames]:
        """
        Get the games a player owns along with playtime information.

        Args:
            steamid: SteamID64 of the account
            include_app_info: Include game name and image hashes (default: True)
            include_free: Include free games the player has launched at least
                          once, such as Team Fortress 2 (default: True)
        """
        return await self._get(
            "get_owned_games",
            {
                "steamid": steamid,
                "include_appinfo": include_app_info,
                "include_played_free_games": include_free,
            },
        )

    @endpoint(
        path="/IPlayerService/GetRecentlyPlayedGames/v0001/",
        response=RecentlyPlayedGames,
    )
    async def get_recently_played_games(
        self, steamid: str
    ) -> SteamResponse[RecentlyPlayedGames]:
        """Get the games a player has played in the last two weeks."""
        return await self._get(
            "get_recently_played_games",
            {"steamid": steamid},
        )

    @endpoint(
        path="/IPlayerService/IsPlayingSharedGame/v0001/",
        response=SharedGame,
    )
    async def is_playing_shared_game(
        self, steamid: str, app_id_playing: int
    ) -> SteamResponse[SharedGame]:
        """
        Check if a player is playing a game borrowed through Family Sharing.

        Args:
            steamid: SteamID64 of the player
            app_id_playing: AppID of the game currently being played

        Returns:
            Response whose lender_steamid is the owner's SteamID64,
            or "0" if the game is not borrowed
        """
        return await self._get(
            "is_playing_shared_game",
            {"steamid": steamid, "appid_playing": app_id_playing},
        )
