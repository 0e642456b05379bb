"""Shared pytest fixtures for surfcast tests."""

from typing import Any
from unittest.mock import MagicMock

import pytest

from surfcast.clients.stormglass import StormGlassClient
from surfcast.config.schema import StormGlassConfig
from surfcast.utils.request import Request, Response


def make_hour(time: str = "2021-01-01T00:00:00+00:00", **overrides: Any) -> dict:
    """Build a raw StormGlass hourly bundle with every variable populated.

    Each variable carries a reading for the canonical "noaa" source plus a
    second provider so tests can check that only noaa values are used.

    Args:
        time: Timestamp for the bundle.
        **overrides: Per-variable source mappings replacing the defaults.

    Returns:
        Dict shaped like one entry of the API's "hours" list.
    """
    hour = {
        "time": time,
        "swellDirection": {"noaa": 64.26, "icon": 60.0},
        "swellHeight": {"noaa": 0.15, "icon": 0.2},
        "swellPeriod": {"noaa": 3.89, "icon": 4.1},
        "waveDirection": {"noaa": 231.38, "icon": 225.0},
        "waveHeight": {"noaa": 0.47, "icon": 0.5},
        "windDirection": {"noaa": 299.45, "icon": 301.2},
        "windSpeed": {"noaa": 100.0, "icon": 98.3},
    }
    hour.update(overrides)
    return hour


@pytest.fixture()
def config() -> StormGlassConfig:
    """Return a config pointing at a fake StormGlass host."""
    return StormGlassConfig(api_url="https://stormglass.test/v2", api_token="test-token")


@pytest.fixture()
def mock_request() -> MagicMock:
    """Return a mocked requester that keeps the real error classifiers."""
    request = MagicMock(spec=Request)
    request.get.return_value = Response(status=200, data={"hours": [make_hour()]})
    return request


@pytest.fixture()
def client(config: StormGlassConfig, mock_request: MagicMock) -> StormGlassClient:
    """Return a StormGlassClient wired to the mocked requester."""
    return StormGlassClient(config, request=mock_request)


@pytest.fixture(autouse=True)
def clear_stormglass_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep real environment overrides out of config tests."""
    monkeypatch.delenv("STORMGLASS_API_URL", raising=False)
    monkeypatch.delenv("STORMGLASS_API_TOKEN", raising=False)
