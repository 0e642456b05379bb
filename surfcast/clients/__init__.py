"""Upstream forecast API clients."""

from surfcast.clients.stormglass import (
    ClientRequestError,
    ForecastPoint,
    StormGlassClient,
    StormGlassResponseError,
    value_for,
)

__all__ = [
    "ClientRequestError",
    "ForecastPoint",
    "StormGlassClient",
    "StormGlassResponseError",
    "value_for",
]
