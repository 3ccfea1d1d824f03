"""
Shared fixtures for oracle program tests.
"""

from typing import Optional

import pytest

from oracle_program.host.base import Fetcher
from oracle_program.schemas.fetch import FetchResponse


class StaticFetcher(Fetcher):
    """Fetcher that returns a canned response and records every call."""

    def __init__(self, status: int, body: bytes):
        self.response = FetchResponse(status=status, body=body, content_length=len(body))
        self.calls: list[tuple[str, Optional[dict], Optional[bytes]]] = []

    def fetch(self, url, headers=None, body=None) -> FetchResponse:
        self.calls.append((url, headers, body))
        return self.response


@pytest.fixture
def make_fetcher():
    """Return a factory building StaticFetcher instances."""
    return StaticFetcher
