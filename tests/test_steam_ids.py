"""Tests for SteamID list helpers."""

import logging
from unittest.mock import MagicMock

from steam_web_api.utils.steam_ids import MAX_STEAM_IDS, join_steam_ids


class TestJoinSteamIDs:
    """Tests for join_steam_ids."""

    def test_string_passes_through(self):
        assert join_steam_ids("76561197960435530") == "76561197960435530"

    def test_comma_separated_string_passes_through(self):
        value = "76561197960435530,76561197960287930"
        assert join_steam_ids(value) == value

    def test_list_is_joined_in_order(self):
        result = join_steam_ids(
            ["76561197960287930", "76561197960435530", "76561197960265731"]
        )
        assert result == "76561197960287930,76561197960435530,76561197960265731"

    def test_tuple_is_joined(self):
        assert join_steam_ids(("1", "2")) == "1,2"

    def test_single_element_list(self):
        assert join_steam_ids(["76561197960435530"]) == "76561197960435530"

    def test_empty_list(self):
        assert join_steam_ids([]) == ""

    def test_limit_is_not_enforced(self):
        """Steam rejects oversized lists itself; we only warn."""
        log = MagicMock(spec=logging.Logger)
        steam_ids = [str(i) for i in range(MAX_STEAM_IDS + 1)]

        result = join_steam_ids(steam_ids, log)

        assert result.count(",") == MAX_STEAM_IDS
        log.warning.assert_called_once()

    def test_no_warning_at_limit(self):
        log = MagicMock(spec=logging.Logger)

        join_steam_ids([str(i) for i in range(MAX_STEAM_IDS)], log)

        log.warning.assert_not_called()
