"""
Synchronous JSON REST calls over urllib (GET, POST, PUT, DELETE).

Every call opens its own connection, sends Content-Type: application/json,
writes the payload for POST/PUT, accepts only 200/202 and normalizes the body
to a single JSON object. No retries, no pooling.
"""

import http.client
import logging
import urllib.error
import urllib.request
from typing import Any, Optional

from restclient.config import (
    ACCEPTED_STATUS_CODES,
    CONTENT_TYPE,
    DEFAULT_RESPONSE_CHARSET,
    REQUEST_TIMEOUT,
)
from restclient.errors import NetworkError, ParseError, ServerError
from restclient.models import ApiRequest, HttpMethod
from restclient.normalize import normalize_body

logger = logging.getLogger(__name__)

_TRANSPORT_ERRORS = (OSError, http.client.HTTPException)
# urlopen also raises UnicodeError for non-ASCII paths and over-long IDNA host labels.
_OPEN_ERRORS = _TRANSPORT_ERRORS + (ValueError,)


def _open(request: ApiRequest, timeout: Optional[float]):
    """Send the request and return the open response. Caller closes it."""
    try:
        req = urllib.request.Request(
            request.url,
            data=request.body(),
            headers={"Content-Type": CONTENT_TYPE},
            method=request.method.value,
        )
    except ValueError as e:
        raise NetworkError(f"Invalid URL {request.url!r}: {e}") from e

    kwargs = {} if timeout is None else {"timeout": timeout}
    try:
        return urllib.request.urlopen(req, **kwargs)
    except urllib.error.HTTPError as e:
        # urllib raises for 4xx/5xx; the error object holds the open response.
        e.close()
        logger.warning("Response code %s for %s %s", e.code, request.method.value, request.url)
        raise ServerError(e.code, request.url) from e
    except _OPEN_ERRORS as e:
        logger.warning("%s %s failed: %s", request.method.value, request.url, e)
        raise NetworkError(f"{request.method.value} {request.url} failed: {e}") from e


def _read_text(request: ApiRequest, resp) -> str:
    try:
        raw = resp.read()
    except _TRANSPORT_ERRORS as e:
        logger.warning("%s %s failed: %s", request.method.value, request.url, e)
        raise NetworkError(f"Error reading response body: {e}") from e
    charset = resp.headers.get_content_charset() or DEFAULT_RESPONSE_CHARSET
    try:
        return raw.decode(charset)
    except (UnicodeDecodeError, LookupError) as e:
        raise ParseError(f"Response body is not {charset} text: {e}") from e


def execute(request: ApiRequest, timeout: Optional[float] = REQUEST_TIMEOUT) -> dict[str, Any]:
    """
    Run one request/response cycle and return the normalized JSON object.
    Raises NetworkError, ServerError, ParseError or TypeMismatch.
    """
    with _open(request, timeout) as resp:
        status = resp.status
        if status not in ACCEPTED_STATUS_CODES:
            logger.warning("Response code %s for %s %s", status, request.method.value, request.url)
            raise ServerError(status, request.url)
        logger.debug("Response code %s for %s %s", status, request.method.value, request.url)
        text = _read_text(request, resp)
    return normalize_body(text)


def get(url: str, timeout: Optional[float] = REQUEST_TIMEOUT) -> dict[str, Any]:
    return execute(ApiRequest(url=url, method=HttpMethod.GET), timeout)


def post(url: str, payload: str, timeout: Optional[float] = REQUEST_TIMEOUT) -> dict[str, Any]:
    return execute(ApiRequest(url=url, method=HttpMethod.POST, payload=payload), timeout)


def put(url: str, payload: str, timeout: Optional[float] = REQUEST_TIMEOUT) -> dict[str, Any]:
    return execute(ApiRequest(url=url, method=HttpMethod.PUT, payload=payload), timeout)


def delete(url: str, timeout: Optional[float] = REQUEST_TIMEOUT) -> dict[str, Any]:
    return execute(ApiRequest(url=url, method=HttpMethod.DELETE), timeout)
