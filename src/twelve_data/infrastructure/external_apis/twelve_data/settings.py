# Copyright (c)
# SPDX-License-Identifier: MIT
"""Pydantic settings for the Twelve Data client."""

from __future__ import annotations

from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.twelvedata.com"


class TwelveDataSettings(BaseSettings):
    """Configuration for the Twelve Data client.

    Environment variables (with ``model_config.env_prefix``):

    * ``TWELVE_DATA_BASE_URL``
    * ``TWELVE_DATA_API_KEY``
    * ``TWELVE_DATA_TIMEOUT_S``
    * ``TWELVE_DATA_CREDENTIAL_LOCATION`` (``query`` or ``header``)
    """

    base_url: str = Field(
        DEFAULT_BASE_URL,
        description="Base URL for the Twelve Data REST API.",
    )
    api_key: SecretStr = Field(
        ...,
        description="Twelve Data API key.",
    )
    timeout_s: float = Field(
        10.0,
        gt=0,
        description="Per-request timeout in seconds for the HTTP transport.",
    )
    credential_location: Literal["query", "header"] = Field(
        "query",
        description="Send the key as an ``apikey`` query parameter or an Authorization header.",
    )

    model_config: SettingsConfigDict = SettingsConfigDict(
        env_prefix="TWELVE_DATA_",
        extra="ignore",
    )

    @property
    def normalized_base_url(self) -> str:
        """Base URL without a trailing slash."""
        return self.base_url.rstrip("/")
