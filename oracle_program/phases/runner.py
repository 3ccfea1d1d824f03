"""
Dry-run harness for the execution phase.

Runs the phase against an in-memory host and turns the outcome into an
ExecutionResult.
"""

import logging
from typing import Optional

from oracle_program.config import ProgramSettings
from oracle_program.exceptions import ExecutionError
from oracle_program.host.base import Fetcher
from oracle_program.host.process import InMemoryProcess
from oracle_program.phases.execution_phase import execution_phase
from oracle_program.phases.price import decode_u128
from oracle_program.schemas.execution import (
    EXIT_ABORTED,
    EXIT_ERROR_REPORTED,
    EXIT_SUCCESS,
    ExecutionResult,
)

logger = logging.getLogger(__name__)


def run_execution_phase(
    inputs: bytes, fetcher: Fetcher, settings: Optional[ProgramSettings] = None
) -> ExecutionResult:
    """
    Run the execution phase once and collect its outcome.

    Exit codes:
    - 0: success reported, result holds the 16 result bytes
    - 1: error reported, error_message holds the reported text
    - 255: the phase aborted before reporting

    Args:
        inputs: Raw host inputs
        fetcher: Outbound HTTP transport
        settings: Program settings

    Returns:
        ExecutionResult describing the run

    Raises:
        ExecutionError: If the phase returned without reporting anything
    """
    process = InMemoryProcess(inputs)

    try:
        execution_phase(process, fetcher, settings)
    except ExecutionError as exc:
        logger.warning(f"Execution phase aborted: {exc}")
        return ExecutionResult(exit_code=EXIT_ABORTED, error_message=str(exc))

    if process.report_kind == "success":
        return ExecutionResult(
            exit_code=EXIT_SUCCESS,
            result=process.report,
            reported_value=decode_u128(process.report),
        )

    if process.report_kind == "error":
        return ExecutionResult(
            exit_code=EXIT_ERROR_REPORTED,
            result=process.report,
            error_message=process.report.decode("utf-8", errors="replace"),
        )

    raise ExecutionError("Execution phase returned without reporting a result")
