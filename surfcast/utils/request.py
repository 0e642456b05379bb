"""Thin HTTP requester wrapping a requests Session.

Clients take a ``Request`` instance in their constructor so tests can swap
in a mock without patching the network layer.
"""

from dataclasses import dataclass
from typing import Any

import requests

DEFAULT_TIMEOUT = 30


@dataclass
class Response:
    """Successful HTTP response with a decoded JSON body."""

    status: int
    data: Any


@dataclass
class ResponseErrorData:
    """Status and body extracted from an HTTP error response."""

    status: int
    data: Any


class Request:
    """Issues HTTP requests and classifies their failures.

    Args:
        session: Session used for all requests. A new one is created if None.
        timeout: Per-request timeout in seconds.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.session = session or requests.Session()
        self.timeout = timeout

    def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Response:
        """Send a GET request and decode the JSON body.

        Args:
            url: Absolute URL to request.
            params: Query string parameters.
            headers: Extra request headers.

        Returns:
            Response with the status code and decoded body.

        Raises:
            requests.HTTPError: If the server answered with a 4xx/5xx status.
            requests.RequestException: On connection errors, timeouts or an
                undecodable body.
        """
        response = self.session.get(
            url, params=params, headers=headers, timeout=self.timeout
        )
        response.raise_for_status()
        return Response(status=response.status_code, data=response.json())

    @staticmethod
    def is_request_error(error: BaseException) -> bool:
        """Return True if the error carries an HTTP response from the server."""
        return (
            isinstance(error, requests.HTTPError)
            and getattr(error, "response", None) is not None
        )

    @staticmethod
    def extract_error_data(error: requests.HTTPError) -> ResponseErrorData:
        """Pull the status code and body out of an HTTP error.

        The body is decoded as JSON when possible and falls back to raw text.
        """
        response = error.response
        try:
            data = response.json()
        except ValueError:
            data = response.text
        return ResponseErrorData(status=response.status_code, data=data)
