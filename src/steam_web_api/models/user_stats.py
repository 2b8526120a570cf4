"""
Response records for the ISteamUserStats interface.

Endpoints:
- ISteamUserStats/GetGlobalAchievementPercentagesForApp/v0002/
- ISteamUserStats/GetPlayerAchievements/v0001/
- ISteamUserStats/GetUserStatsForGame/v0002/
- ISteamUserStats/GetSchemaForGame/v2/
"""

from pydantic import Field

from steam_web_api.models.base import SteamModel


class AchievementPercentage(SteamModel):
    """
    Global unlock rate of one achievement.

    Steam sends percent either as a number or as a numeric string; the
    upstream type is kept as-is. Use percent_value for arithmetic.
    """

    name: str
    percent: int | float | str

    @property
    def percent_value(self) -> float:
        return float(self.percent)


class AchievementPercentageList(SteamModel):
    achievements: list[AchievementPercentage] = []


class GlobalAchievementPercentages(SteamModel):
    """Wrapper for GetGlobalAchievementPercentagesForApp response."""

    achievementpercentages: AchievementPercentageList


class PlayerAchievement(SteamModel):
    """
    Unlock state of one achievement.

    name and description are only present when a language was requested.
    """

    apiname: str
    achieved: int
    unlocktime: int
    name: str | None = None
    description: str | None = None


class PlayerAchievementStats(SteamModel):
    """
    Achievement payload for one player and game.

    On failure (private profile, unknown app) Valve returns only success
    and error.
    """

    steamID: str | None = None
    gameName: str | None = None
    achievements: list[PlayerAchievement] = []
    success: bool
    error: str | None = None


class PlayerAchievements(SteamModel):
    """Wrapper for GetPlayerAchievements response."""

    playerstats: PlayerAchievementStats


class Stat(SteamModel):
    name: str
    # Integer stats stay int, float stats stay float
    value: int | float


class AchievementState(SteamModel):
    name: str
    achieved: int


class PlayerStats(SteamModel):
    steamID: str
    gameName: str
    stats: list[Stat] = []
    achievements: list[AchievementState] = []


class UserStatsForGame(SteamModel):
    """Wrapper for GetUserStatsForGame response."""

    playerstats: PlayerStats


class StatDefinition(SteamModel):
    name: str
    defaultvalue: int | float
    displayName: str


class AchievementDefinition(SteamModel):
    name: str
    defaultvalue: int
    displayName: str
    hidden: int
    description: str | None = None
    icon: str
    icongray: str


class AvailableGameStats(SteamModel):
    stats: list[StatDefinition] = []
    achievements: list[AchievementDefinition] = []


class GameSchema(SteamModel):
    # All three are absent for apps without a stats schema: {"game": {}}
    gameName: str | None = None
    gameVersion: str | None = None
    availableGameStats: AvailableGameStats = Field(default_factory=AvailableGameStats)


class SchemaForGame(SteamModel):
    """Wrapper for GetSchemaForGame response."""

    game: GameSchema
