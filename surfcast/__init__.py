"""Marine forecast client for the StormGlass point-forecast API."""

from surfcast.clients import (
    ClientRequestError,
    ForecastPoint,
    StormGlassClient,
    StormGlassResponseError,
)
from surfcast.config import StormGlassConfig, load_config

__all__ = [
    "ClientRequestError",
    "ForecastPoint",
    "StormGlassClient",
    "StormGlassConfig",
    "StormGlassResponseError",
    "load_config",
]
