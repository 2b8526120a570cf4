"""
Response records for the ISteamUser interface.

Endpoints:
- ISteamUser/GetPlayerSummaries/v0002/
- ISteamUser/GetFriendList/v0001/
- ISteamUser/GetPlayerBans/v1/
"""

from pydantic import Field

from steam_web_api.models.base import SteamModel


class Player(SteamModel):
    """
    Public profile data for one account.

    Only the first group of fields is always present. The rest are returned
    when the profile is public (communityvisibilitystate == 3) or set by the
    user.
    """

    steamid: str
    communityvisibilitystate: int
    profilestate: int | None = None
    personaname: str
    profileurl: str
    avatar: str
    avatarmedium: str
    avatarfull: str
    avatarhash: str | None = None
    personastate: int
    lastlogoff: int | None = None
    commentpermission: int | None = None
    realname: str | None = None
    primaryclanid: str | None = None
    timecreated: int | None = None
    personastateflags: int | None = None
    gameid: str | None = None
    gameextrainfo: str | None = None
    loccountrycode: str | None = None
    locstatecode: str | None = None
    loccityid: int | None = None


class PlayerList(SteamModel):
    players: list[Player] = []


class PlayerSummaries(SteamModel):
    """Wrapper for GetPlayerSummaries response."""

    response: PlayerList


class Friend(SteamModel):
    steamid: str
    relationship: str
    friend_since: int = Field(..., description="Unix timestamp the friendship began")


class Friends(SteamModel):
    friends: list[Friend] = []


class FriendList(SteamModel):
    """Wrapper for GetFriendList response."""

    friendslist: Friends


class PlayerBan(SteamModel):
    """Ban status for one account. Keys keep Valve's PascalCase."""

    SteamId: str
    CommunityBanned: bool
    VACBanned: bool
    NumberOfVACBans: int = Field(..., ge=0)
    DaysSinceLastBan: int = Field(..., ge=0)
    NumberOfGameBans: int = Field(..., ge=0)
    EconomyBan: str


class PlayerBans(SteamModel):
    """Wrapper for GetPlayerBans response (no "response" envelope)."""

    players: list[PlayerBan] = []
