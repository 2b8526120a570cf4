"""SteamID list helpers.

Endpoints such as GetPlayerSummaries and GetPlayerBans take a "steamids"
parameter: a comma separated list of SteamID64 values. Callers may pass
either that string directly or a sequence of IDs.
"""

import logging
from typing import Sequence


logger = logging.getLogger(__name__)

# Upstream limit for comma separated SteamID parameters. Not enforced here:
# Valve rejects oversized requests itself.
MAX_STEAM_IDS = 100

SteamIDs = str | Sequence[str]


def join_steam_ids(steamids: SteamIDs, log: logging.Logger | None = None) -> str:
    """
    Flatten one or many SteamIDs into a single query value.

    Args:
        steamids: A SteamID64 string (possibly already comma separated)
                  or a sequence of SteamID64 strings
        log: Logger for the oversize warning (default: module logger)

    Returns:
        The string unchanged, or the sequence joined with "," in order
    """
    if isinstance(steamids, str):
        return steamids

    if len(steamids) > MAX_STEAM_IDS:
        (log or logger).warning(
            f"{len(steamids)} Steam IDs requested, "
            f"Steam accepts at most {MAX_STEAM_IDS} per request"
        )
    return ",".join(str(steam_id) for steam_id in steamids)
