"""Pydantic validation model for StormGlass client configuration."""

import os

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_API_URL = "https://api.stormglass.io/v2"


class StormGlassConfig(BaseModel):
    """Connection settings for the StormGlass API.

    Args:
        api_url: Base URL of the API. Overridden by STORMGLASS_API_URL env var.
        api_token: API token sent in the Authorization header. Overridden by
            STORMGLASS_API_TOKEN env var.
    """

    model_config = ConfigDict(populate_by_name=True)

    api_url: str = Field(default=DEFAULT_API_URL, alias="apiUrl", min_length=1)
    api_token: str = Field(default="", alias="apiToken", repr=False)

    @field_validator("api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Drop trailing slashes so endpoint paths can be appended directly."""
        return v.rstrip("/")

    @model_validator(mode="after")
    def load_env_overrides(self) -> "StormGlassConfig":
        """Override fields from environment variables if set."""
        if env_url := os.environ.get("STORMGLASS_API_URL"):
            self.api_url = env_url.rstrip("/")
        if env_token := os.environ.get("STORMGLASS_API_TOKEN"):
            self.api_token = env_token
        return self
