"""Data models for the JSON REST client."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from restclient.config import PAYLOAD_ENCODING


class HttpMethod(str, Enum):
    """Supported HTTP verbs."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @property
    def sends_body(self) -> bool:
        return self in (HttpMethod.POST, HttpMethod.PUT)


class ApiRequest(BaseModel):
    """A single request: target URL, verb and optional JSON payload."""

    url: str = Field(..., description="Absolute http(s) URL")
    method: HttpMethod
    payload: Optional[str] = Field(
        None,
        description="JSON-formatted string; required for POST/PUT, ignored otherwise",
    )

    @model_validator(mode="after")
    def check_payload(self) -> "ApiRequest":
        if self.method.sends_body and self.payload is None:
            raise ValueError(f"{self.method.value} requires a payload")
        return self

    def body(self) -> Optional[bytes]:
        """Raw request body. The payload is sent as-is, not re-validated as JSON."""
        if not self.method.sends_body:
            return None
        return self.payload.encode(PAYLOAD_ENCODING)
