"""
Runtime configuration for the oracle program.
"""

import os

from pydantic import BaseModel, Field, field_validator

DEFAULT_PROXY_BASE_URL = "http://testnet-2.proxy.testnet.seda.xyz/proxy"
DEFAULT_SCALE_FACTOR = 1_000_000
DEFAULT_FETCH_TIMEOUT = 10.0


class ProgramSettings(BaseModel):
    """Settings shared by the execution phase, the fetcher and the API."""

    proxy_base_url: str = Field(
        DEFAULT_PROXY_BASE_URL, description="Base endpoint the feed identifier is appended to"
    )
    scale_factor: int = Field(
        DEFAULT_SCALE_FACTOR, gt=0, description="Multiplier applied before truncating the price"
    )
    fetch_timeout: float = Field(
        DEFAULT_FETCH_TIMEOUT, gt=0.0, description="Transport timeout in seconds"
    )
    log_level: str = Field("INFO", description="Root logging level when served")

    @field_validator("proxy_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()

    @classmethod
    def from_env(cls) -> "ProgramSettings":
        """
        Build settings from ORACLE_* environment variables.

        Unset variables keep their defaults.
        """
        values = {}
        base_url = os.getenv("ORACLE_PROXY_BASE_URL")
        if base_url:
            values["proxy_base_url"] = base_url
        timeout = os.getenv("ORACLE_FETCH_TIMEOUT")
        if timeout:
            values["fetch_timeout"] = float(timeout)
        log_level = os.getenv("ORACLE_LOG_LEVEL")
        if log_level:
            values["log_level"] = log_level
        return cls(**values)

    def feed_url(self, feed_id: str) -> str:
        """Return the proxy URL for a feed identifier."""
        return f"{self.proxy_base_url}/{feed_id}"
