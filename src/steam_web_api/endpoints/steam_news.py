"""ISteamNews API endpoints.

Reference: https://partner.steamgames.com/doc/webapi/ISteamNews

Note: This API does not require an API key.
"""

from steam_web_api.client.transport import SteamResponse
from steam_web_api.endpoints.base import BaseEndpoint, endpoint
from steam_web_api.models import NewsForApp


class ISteamNews(BaseEndpoint):
    """ISteamNews API endpoints for game news and announcements."""

    @endpoint(
        path="/ISteamNews/GetNewsForApp/v0002/",
        response=NewsForApp,
        requires_key=False,
    )
    async def get_news_for_app(
        self,
        appid: int,
        count: int = 3,
        max_length: int = 300,
    ) -> SteamResponse[NewsForApp]:
        """
        Get the latest news entries for a game.

        Args:
            appid: AppID of the game
            count: Number of entries to return (default: 3)
            max_length: Maximum length of each entry's contents (default: 300)
        """
        return await self._get(
            "get_news_for_app",
            {"appid": appid, "count": count, "maxlength": max_length},
        )
