"""
Schemas for outbound fetches made through the data proxy.
"""

from pydantic import BaseModel, Field


class FetchResponse(BaseModel):
    """Model representing the response of a single proxy fetch."""

    status: int = Field(..., description="HTTP status code, 0 when the transport failed")
    body: bytes = Field(b"", description="Raw response payload")
    headers: dict[str, str] = Field(default_factory=dict, description="Response headers")
    url: str = Field("", description="Final URL of the request")
    content_length: int = Field(0, ge=0, description="Length of the payload in bytes")

    def is_ok(self) -> bool:
        """Return True when the status is in the 2xx range."""
        return 200 <= self.status <= 299
