"""
Response records for the ISteamNews interface.

Endpoint: ISteamNews/GetNewsForApp/v0002/
"""

from pydantic import Field

from steam_web_api.models.base import SteamModel


class NewsItem(SteamModel):
    """A single news article or announcement."""

    gid: str
    title: str
    url: str
    is_external_url: bool
    author: str
    contents: str
    feedlabel: str
    date: int = Field(..., description="Unix timestamp of publication")
    feedname: str
    feed_type: int
    appid: int
    tags: list[str] | None = None


class AppNews(SteamModel):
    appid: int
    newsitems: list[NewsItem] = []
    count: int


class NewsForApp(SteamModel):
    """Wrapper for GetNewsForApp response."""

    appnews: AppNews
