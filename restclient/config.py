"""Constants for the JSON REST client."""

from typing import Optional

# Only these status codes count as success; anything else raises ServerError.
ACCEPTED_STATUS_CODES: frozenset[int] = frozenset({200, 202})

# Sent on every request, with or without a body.
CONTENT_TYPE: str = "application/json"

PAYLOAD_ENCODING: str = "utf-8"
# Used when the response Content-Type declares no charset.
DEFAULT_RESPONSE_CHARSET: str = "utf-8"

# Seconds; None leaves the platform socket default in place.
REQUEST_TIMEOUT: Optional[float] = None
