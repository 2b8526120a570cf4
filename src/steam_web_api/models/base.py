"""Shared base for Steam Web API response records."""

from pydantic import BaseModel, ConfigDict


class SteamModel(BaseModel):
    """
    Base class for all response records.

    Field names mirror the upstream JSON keys exactly (including Valve's
    camelCase keys such as steamID or gameName). Unknown keys are kept so
    fields Valve adds later survive a model_dump().
    """

    model_config = ConfigDict(extra="allow")
