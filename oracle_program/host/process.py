"""
In-memory host process.

Holds the host inputs and records the single terminal report of a run.
"""

import logging
from typing import Literal, Optional

from oracle_program.exceptions import ReportAlreadyDeliveredError
from oracle_program.host.base import Process

logger = logging.getLogger(__name__)

ReportKind = Literal["success", "error"]


class InMemoryProcess(Process):
    """Process channel that keeps the report in memory for the caller."""

    def __init__(self, inputs: bytes):
        self._inputs = bytes(inputs)
        self.report_kind: Optional[ReportKind] = None
        self.report: Optional[bytes] = None

    @property
    def reported(self) -> bool:
        return self.report_kind is not None

    def get_inputs(self) -> bytes:
        return self._inputs

    def success(self, result: bytes) -> None:
        self._deliver("success", result)

    def error(self, message: bytes) -> None:
        self._deliver("error", message)

    def _deliver(self, kind: ReportKind, payload: bytes) -> None:
        if self.report_kind is not None:
            raise ReportAlreadyDeliveredError(
                f"Cannot report {kind}: {self.report_kind} was already reported"
            )
        self.report_kind = kind
        self.report = bytes(payload)
        logger.debug(f"Host received {kind} report ({len(self.report)} bytes)")
