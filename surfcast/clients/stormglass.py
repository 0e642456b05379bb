"""StormGlass API client for retrieving marine forecast points."""

import json
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from surfcast.config.schema import StormGlassConfig
from surfcast.utils.exceptions import InternalError
from surfcast.utils.logger import setup_logger
from surfcast.utils.request import Request

logger = setup_logger(__name__)

POINT_ENDPOINT = "/weather/point"

# Provider whose readings populate every ForecastPoint field
STORMGLASS_SOURCE = "noaa"

# Variable names requested from the API, in the order they are sent
STORMGLASS_PARAMS = [
    "swellDirection",
    "swellHeight",
    "swellPeriod",
    "waveDirection",
    "waveHeight",
    "windDirection",
    "windSpeed",
]

# Mapping from API variable names to ForecastPoint attribute names
FIELD_MAP: dict[str, str] = {
    "waveHeight": "wave_height",
    "waveDirection": "wave_direction",
    "swellHeight": "swell_height",
    "swellDirection": "swell_direction",
    "swellPeriod": "swell_period",
    "windSpeed": "wind_speed",
    "windDirection": "wind_direction",
}


@dataclass(frozen=True)
class ForecastPoint:
    """One hour of normalized forecast data from the canonical provider."""

    time: str
    wave_height: float
    wave_direction: float
    swell_height: float
    swell_direction: float
    swell_period: float
    wind_speed: float
    wind_direction: float

    def to_dict(self) -> dict[str, Any]:
        """Render the point with the API's camelCase field names."""
        point = {"time": self.time}
        for api_name, attr in FIELD_MAP.items():
            point[api_name] = getattr(self, attr)
        return point


class StormGlassResponseError(InternalError):
    """Raised when the StormGlass service answers with an error status."""

    kind = "response"

    def __init__(self, status: int, body: Any, cause: BaseException | None = None) -> None:
        super().__init__(
            "Unexpected error returned by the StormGlass service: "
            f"Error: {json.dumps(body)} Code: {status}",
            status=status,
            body=body,
            cause=cause,
        )


class ClientRequestError(InternalError):
    """Raised when the request fails before a valid response is received."""

    kind = "request"

    def __init__(self, cause: BaseException) -> None:
        super().__init__(
            "Unexpected error when trying to communicate to StormGlass: "
            f"{_serialize_error(cause)}",
            cause=cause,
        )


def _serialize_error(error: BaseException) -> str:
    return json.dumps({"error": type(error).__name__, "message": str(error)})


def value_for(bundle: Any, variable: str, provider_id: str) -> float | None:
    """Look up one provider's reading for a variable in an hourly bundle.

    Args:
        bundle: Raw hourly object from the API response.
        variable: API variable name, e.g. "waveHeight".
        provider_id: Provider key inside the variable's source mapping.

    Returns:
        The numeric value, or None if the bundle, variable or provider is
        missing or the value is not a finite number.
    """
    if not isinstance(bundle, Mapping):
        return None
    sources = bundle.get(variable)
    if not isinstance(sources, Mapping):
        return None
    value = sources.get(provider_id)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        return None
    return value


class StormGlassClient:
    """Client for the StormGlass point-forecast API.

    Args:
        config: API base URL and token.
        request: HTTP requester. A default ``Request`` is created if None.
    """

    def __init__(self, config: StormGlassConfig, request: Request | None = None) -> None:
        self.config = config
        self.request = request or Request()

    def fetch_points(self, lat: float, lng: float) -> list[ForecastPoint]:
        """Fetch hourly forecast points for a coordinate.

        Args:
            lat: Latitude of the point.
            lng: Longitude of the point.

        Returns:
            Valid forecast points in the order the API returned them.

        Raises:
            StormGlassResponseError: If the service answered with an error status.
            ClientRequestError: On any other failure to complete the request.
        """
        logger.info(f"Fetching StormGlass forecast for ({lat}, {lng})")

        try:
            response = self.request.get(
                f"{self.config.api_url}{POINT_ENDPOINT}",
                params={
                    "lat": lat,
                    "lng": lng,
                    "params": ",".join(STORMGLASS_PARAMS),
                    "source": STORMGLASS_SOURCE,
                },
                headers={"Authorization": self.config.api_token},
            )
        except Exception as e:
            if Request.is_request_error(e):
                error = Request.extract_error_data(e)
                logger.error(
                    f"StormGlass returned HTTP {error.status} for ({lat}, {lng})"
                )
                raise StormGlassResponseError(error.status, error.data, cause=e) from e
            logger.error(f"StormGlass request failed for ({lat}, {lng}): {e}")
            raise ClientRequestError(e) from e

        return self._normalize_response(response.data)

    def _normalize_response(self, points: Any) -> list[ForecastPoint]:
        """Drop incomplete hourly bundles and flatten the rest.

        Args:
            points: Decoded response body, expected to hold an "hours" list.

        Returns:
            ForecastPoints for every complete bundle, input order preserved.
        """
        hours = points.get("hours") if isinstance(points, Mapping) else None
        if not isinstance(hours, list):
            logger.warning("StormGlass response has no 'hours' list")
            return []

        normalized = [
            ForecastPoint(
                time=point["time"],
                **{
                    attr: value_for(point, api_name, STORMGLASS_SOURCE)
                    for api_name, attr in FIELD_MAP.items()
                },
            )
            for point in hours
            if self._is_valid_point(point)
        ]

        dropped = len(hours) - len(normalized)
        if dropped:
            logger.debug(f"Dropped {dropped} incomplete hourly bundles")
        return normalized

    def _is_valid_point(self, point: Any) -> bool:
        # Zero readings count as missing, same as absent ones
        if not isinstance(point, Mapping):
            return False
        time = point.get("time")
        if not isinstance(time, str) or not time:
            return False
        return all(
            value_for(point, variable, STORMGLASS_SOURCE)
            for variable in STORMGLASS_PARAMS
        )
