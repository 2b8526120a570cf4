"""Tests for ISteamUser endpoints."""

import logging
from unittest.mock import MagicMock

import pytest

from steam_web_api.endpoints.steam_user import ISteamUser
from steam_web_api.models import FriendList, PlayerBans, PlayerSummaries


PLAYER_SUMMARIES_FIXTURE = {
    "response": {
        "players": [
            {
                "steamid": "76561197960435530",
                "communityvisibilitystate": 3,
                "profilestate": 1,
                "personaname": "Robin",
                "profileurl": "https://steamcommunity.com/id/robinwalker/",
                "avatar": "https://avatars.steamstatic.com/f1dd60a188883caf82d0cbfccfe6aba0af1732d4.jpg",
                "avatarmedium": "https://avatars.steamstatic.com/f1dd60a188883caf82d0cbfccfe6aba0af1732d4_medium.jpg",
                "avatarfull": "https://avatars.steamstatic.com/f1dd60a188883caf82d0cbfccfe6aba0af1732d4_full.jpg",
                "avatarhash": "f1dd60a188883caf82d0cbfccfe6aba0af1732d4",
                "personastate": 0,
                "realname": "Robin Walker",
                "primaryclanid": "103582791429521412",
                "timecreated": 1063407589,
                "personastateflags": 0,
                "loccountrycode": "US",
                "locstatecode": "WA",
                "loccityid": 3961,
            },
            {
                "steamid": "76561197960287930",
                "communityvisibilitystate": 1,
                "personaname": "Rabscuttle",
                "profileurl": "https://steamcommunity.com/id/gabelogannewell/",
                "avatar": "https://avatars.steamstatic.com/c5d56249ee5d28a07db4ac9f7f60af961fab5426.jpg",
                "avatarmedium": "https://avatars.steamstatic.com/c5d56249ee5d28a07db4ac9f7f60af961fab5426_medium.jpg",
                "avatarfull": "https://avatars.steamstatic.com/c5d56249ee5d28a07db4ac9f7f60af961fab5426_full.jpg",
                "personastate": 1,
            },
        ]
    }
}

FRIEND_LIST_FIXTURE = {
    "friendslist": {
        "friends": [
            {
                "steamid": "76561197960265731",
                "relationship": "friend",
                "friend_since": 0,
            },
            {
                "steamid": "76561197960265738",
                "relationship": "friend",
                "friend_since": 1276530425,
            },
        ]
    }
}

PLAYER_BANS_FIXTURE = {
    "players": [
        {
            "SteamId": "76561197960435530",
            "CommunityBanned": False,
            "VACBanned": False,
            "NumberOfVACBans": 0,
            "DaysSinceLastBan": 0,
            "NumberOfGameBans": 0,
            "EconomyBan": "none",
        },
        {
            "SteamId": "76561197960287930",
            "CommunityBanned": False,
            "VACBanned": True,
            "NumberOfVACBans": 2,
            "DaysSinceLastBan": 1200,
            "NumberOfGameBans": 1,
            "EconomyBan": "probation",
        },
    ]
}


@pytest.fixture
def steam_user(mock_transport):
    """Create ISteamUser instance with mock transport."""
    return ISteamUser(mock_transport, "test_key")


class TestGetPlayerSummaries:
    """Tests for get_player_summaries endpoint."""

    @pytest.mark.asyncio
    async def test_list_is_comma_joined_in_order(self, steam_user, mock_transport):
        await steam_user.get_player_summaries(
            ["76561197960435530", "76561197960287930", "76561197960265731"]
        )

        path, params, response_model = mock_transport.get.call_args.args
        assert path == "/ISteamUser/GetPlayerSummaries/v0002/"
        assert params["steamids"] == (
            "76561197960435530,76561197960287930,76561197960265731"
        )
        assert response_model is PlayerSummaries

    @pytest.mark.asyncio
    async def test_string_passes_through(self, steam_user, mock_transport):
        await steam_user.get_player_summaries("76561197960435530,76561197960287930")

        _, params, _ = mock_transport.get.call_args.args
        assert params["steamids"] == "76561197960435530,76561197960287930"

    @pytest.mark.asyncio
    async def test_sends_key_and_format(self, steam_user, mock_transport):
        await steam_user.get_player_summaries(["76561197960435530"])

        _, params, _ = mock_transport.get.call_args.args
        assert params["key"] == "test_key"
        assert params["format"] == "json"

    @pytest.mark.asyncio
    async def test_oversized_list_is_sent_with_warning(self, mock_transport):
        """More than 100 IDs is Steam's limit to enforce, not ours."""
        logger = MagicMock(spec=logging.Logger)
        steam_user = ISteamUser(mock_transport, "test_key", logger=logger)
        steam_ids = [str(76561197960265728 + i) for i in range(101)]

        await steam_user.get_player_summaries(steam_ids)

        _, params, _ = mock_transport.get.call_args.args
        assert len(params["steamids"].split(",")) == 101
        logger.warning.assert_called_once()

    @pytest.mark.asyncio
    async def test_parses_response(self, steam_user, respond_with):
        respond_with(PLAYER_SUMMARIES_FIXTURE)

        response = await steam_user.get_player_summaries(
            ["76561197960435530", "76561197960287930"]
        )

        players = response.data.response.players
        assert len(players) == 2
        assert players[0].realname == "Robin Walker"
        assert players[0].loccityid == 3961
        # Private profile: optional fields are absent
        assert players[1].realname is None
        assert players[1].timecreated is None
        assert response.data.model_dump(exclude_unset=True) == PLAYER_SUMMARIES_FIXTURE


class TestGetFriendList:
    """Tests for get_friend_list endpoint."""

    @pytest.mark.asyncio
    async def test_relationship_is_fixed(self, steam_user, mock_transport):
        await steam_user.get_friend_list("76561197960435530")

        path, params, response_model = mock_transport.get.call_args.args
        assert path == "/ISteamUser/GetFriendList/v0001/"
        assert params == {
            "steamid": "76561197960435530",
            "relationship": "friend",
            "format": "json",
            "key": "test_key",
        }
        assert response_model is FriendList

    @pytest.mark.asyncio
    async def test_parses_response(self, steam_user, respond_with):
        respond_with(FRIEND_LIST_FIXTURE)

        response = await steam_user.get_friend_list("76561197960435530")

        friends = response.data.friendslist.friends
        assert len(friends) == 2
        assert friends[1].steamid == "76561197960265738"
        assert friends[1].friend_since == 1276530425
        assert response.data.model_dump(exclude_unset=True) == FRIEND_LIST_FIXTURE


class TestGetPlayerBans:
    """Tests for get_player_bans endpoint."""

    @pytest.mark.asyncio
    async def test_list_is_comma_joined(self, steam_user, mock_transport):
        await steam_user.get_player_bans(["76561197960435530", "76561197960287930"])

        path, params, response_model = mock_transport.get.call_args.args
        assert path == "/ISteamUser/GetPlayerBans/v1/"
        assert params["steamids"] == "76561197960435530,76561197960287930"
        assert params["key"] == "test_key"
        assert response_model is PlayerBans

    @pytest.mark.asyncio
    async def test_single_string_passes_through(self, steam_user, mock_transport):
        await steam_user.get_player_bans("76561197960435530")

        _, params, _ = mock_transport.get.call_args.args
        assert params["steamids"] == "76561197960435530"

    @pytest.mark.asyncio
    async def test_parses_response(self, steam_user, respond_with):
        respond_with(PLAYER_BANS_FIXTURE)

        response = await steam_user.get_player_bans(
            ["76561197960435530", "76561197960287930"]
        )

        bans = response.data.players
        assert len(bans) == 2
        assert bans[0].VACBanned is False
        assert bans[1].NumberOfVACBans == 2
        assert bans[1].EconomyBan == "probation"
        assert response.data.model_dump(exclude_unset=True) == PLAYER_BANS_FIXTURE
