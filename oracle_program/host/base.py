"""
Host capability interfaces for the oracle program.

Defines the process channel and the fetch transport the execution phase
receives as injected dependencies.
"""

from abc import ABC, abstractmethod
from typing import Optional

from oracle_program.schemas.fetch import FetchResponse


class Process(ABC):
    """Abstract host process channel."""

    @abstractmethod
    def get_inputs(self) -> bytes:
        """Return the raw inputs supplied by the host."""
        ...

    @abstractmethod
    def success(self, result: bytes) -> None:
        """
        Deliver a success report to the host.

        Implementations MUST refuse a second terminal report.

        Args:
            result: Bytes reported as the execution result
        """
        ...

    @abstractmethod
    def error(self, message: bytes) -> None:
        """
        Deliver an error report to the host.

        Implementations MUST refuse a second terminal report.

        Args:
            message: Human-readable error bytes
        """
        ...


class Fetcher(ABC):
    """Abstract outbound HTTP transport."""

    @abstractmethod
    def fetch(
        self,
        url: str,
        headers: Optional[dict[str, str]] = None,
        body: Optional[bytes] = None,
    ) -> FetchResponse:
        """
        Perform one synchronous fetch.

        Implementations MUST NOT raise on transport failures; they return a
        response whose status is not ok instead.

        Args:
            url: Fully built request URL
            headers: Optional request headers
            body: Optional request body

        Returns:
            FetchResponse with status and payload
        """
        ...
