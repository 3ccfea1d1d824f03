"""
HTTP transport for proxy fetches.

Wraps requests so that transport failures surface as a non-ok response
instead of an exception.
"""

import logging
from typing import Optional

import requests

from oracle_program.config import DEFAULT_FETCH_TIMEOUT
from oracle_program.host.base import Fetcher
from oracle_program.schemas.fetch import FetchResponse

logger = logging.getLogger(__name__)

TRANSPORT_FAILURE_STATUS = 0


class ProxyHttpFetcher(Fetcher):
    """Fetcher that talks to the data proxy over HTTP."""

    def __init__(
        self,
        timeout: float = DEFAULT_FETCH_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the fetcher.

        Args:
            timeout: Seconds to wait for the proxy before giving up
            session: Optional session to reuse connections
        """
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    def fetch(
        self,
        url: str,
        headers: Optional[dict[str, str]] = None,
        body: Optional[bytes] = None,
    ) -> FetchResponse:
        method = "GET" if body is None else "POST"
        logger.debug(f"{method} {url}")

        try:
            r = self.session.request(
                method, url, headers=headers, data=body, timeout=self.timeout
            )
        except requests.RequestException as exc:
            logger.warning(f"Transport failure for {url}: {exc}")
            payload = str(exc).encode("utf-8")
            return FetchResponse(
                status=TRANSPORT_FAILURE_STATUS,
                body=payload,
                url=url,
                content_length=len(payload),
            )

        return FetchResponse(
            status=r.status_code,
            body=r.content,
            headers=dict(r.headers),
            url=r.url or url,
            content_length=len(r.content),
        )

    def close(self) -> None:
        """Close the underlying session."""
        self.session.close()
