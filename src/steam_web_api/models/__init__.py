"""Typed response records for the Steam Web API."""

from .base import SteamModel
from .news import AppNews, NewsForApp, NewsItem
from .player_service import (
    Game,
    Lender,
    OwnedGames,
    OwnedGamesList,
    RecentGamesList,
    RecentlyPlayedGames,
    SharedGame,
)
from .steam_user import (
    Friend,
    FriendList,
    Friends,
    Player,
    PlayerBan,
    PlayerBans,
    PlayerList,
    PlayerSummaries,
)
from .user_stats import (
    AchievementDefinition,
    AchievementPercentage,
    AchievementPercentageList,
    AchievementState,
    AvailableGameStats,
    GameSchema,
    GlobalAchievementPercentages,
    PlayerAchievement,
    PlayerAchievements,
    PlayerAchievementStats,
    PlayerStats,
    SchemaForGame,
    Stat,
    StatDefinition,
    UserStatsForGame,
)

__all__ = [
    "SteamModel",
    "AppNews",
    "NewsForApp",
    "NewsItem",
    "Game",
    "Lender",
    "OwnedGames",
    "OwnedGamesList",
    "RecentGamesList",
    "RecentlyPlayedGames",
    "SharedGame",
    "Friend",
    "FriendList",
    "Friends",
    "Player",
    "PlayerBan",
    "PlayerBans",
    "PlayerList",
    "PlayerSummaries",
    "AchievementDefinition",
    "AchievementPercentage",
    "AchievementPercentageList",
    "AchievementState",
    "AvailableGameStats",
    "GameSchema",
    "GlobalAchievementPercentages",
    "PlayerAchievement",
    "PlayerAchievements",
    "PlayerAchievementStats",
    "PlayerStats",
    "SchemaForGame",
    "Stat",
    "StatDefinition",
    "UserStatsForGame",
]
