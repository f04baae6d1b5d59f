"""Exceptions raised by the request executor."""

from typing import Optional


class RestClientError(Exception):
    """Base class for every error the client raises."""


class NetworkError(RestClientError):
    """Connection or IO failure. Never retried."""


class ServerError(RestClientError):
    """Server answered with a status code other than 200 or 202."""

    def __init__(self, status_code: int, url: Optional[str] = None):
        self.status_code = status_code
        self.url = url
        super().__init__(f"Server response failed with code: {status_code}")


class ParseError(RestClientError):
    """Response body is not valid JSON."""


class TypeMismatch(RestClientError):
    """Parsed JSON is a scalar, or the selected array element is not an object."""

    def __init__(self, actual_type: str):
        self.actual_type = actual_type
        super().__init__(f"Expected a JSON object, got {actual_type}")
