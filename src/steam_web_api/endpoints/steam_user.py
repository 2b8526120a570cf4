"""ISteamUser API endpoints.

This module covers player profiles, friend lists and bans.

Reference: https://partner.steamgames.com/doc/webapi/ISteamUser
"""

from steam_web_api.client.transport import SteamResponse
from steam_web_api.endpoints.base import BaseEndpoint, endpoint
from steam_web_api.models import FriendList, PlayerBans, PlayerSummaries
from steam_web_api.utils.steam_ids import SteamIDs, join_steam_ids


class ISteamUser(BaseEndpoint):
    """ISteamUser API endpoints for player identity and profile data."""

    @endpoint(
        path="/ISteamUser/GetPlayerSummaries/v0002/",
        response=PlayerSummaries,
    )
    async def get_player_summaries(
        self, steamids: SteamIDs
    ) -> SteamResponse[PlayerSummaries]:
        """
        Get basic profile information for a list of accounts.

        Args:
            steamids: A list of SteamID64 strings, or a comma separated
                      string of them. Steam accepts up to 100 IDs.
        """
        return await self._get(
            "get_player_summaries",
            {"steamids": join_steam_ids(steamids, self.logger)},
        )

    @endpoint(
        path="/ISteamUser/GetFriendList/v0001/",
        response=FriendList,
    )
    async def get_friend_list(self, steamid: str) -> SteamResponse[FriendList]:
        """
        Get the friend list of an account.

        Only works for profiles whose visibility is "Public"; Steam answers
        private profiles with 401.
        """
        return await self._get(
            "get_friend_list",
            {"steamid": steamid, "relationship": "friend"},
        )

    @endpoint(
        path="/ISteamUser/GetPlayerBans/v1/",
        response=PlayerBans,
    )
    async def get_player_bans(self, steamids: SteamIDs) -> SteamResponse[PlayerBans]:
        """Get VAC, game, community and trade ban status for a list of accounts."""
        return await self._get(
            "get_player_bans",
            {"steamids": join_steam_ids(steamids, self.logger)},
        )
