"""API key resolution.

SteamClient never reads the environment itself; applications (and the
bundled CLI) resolve the key here and pass it in.
"""

import os

from dotenv import load_dotenv


API_KEY_ENV_VAR = "STEAM_API_KEY"


def get_api_key(api_key: str | None = None) -> str:
    """
    Resolve the Steam Web API key.

    Args:
        api_key: Explicit key. If not provided, reads STEAM_API_KEY from the
                 environment after loading a .env file if one exists.

    Returns:
        The API key

    Raises:
        ValueError: If no key is available
    """
    if api_key:
        return api_key

    load_dotenv()
    api_key = os.getenv(API_KEY_ENV_VAR)
    if not api_key:
        raise ValueError(f"{API_KEY_ENV_VAR} must be provided or set in environment")
    return api_key
