"""
Schemas module for the oracle program

Contains Pydantic models for fetch responses and execution results.
"""

from oracle_program.schemas.execution import (
    EXIT_ABORTED,
    EXIT_ERROR_REPORTED,
    EXIT_SUCCESS,
    ExecuteRequest,
    ExecuteResponse,
    ExecutionResult,
)
from oracle_program.schemas.fetch import FetchResponse

__all__ = [
    "EXIT_ABORTED",
    "EXIT_ERROR_REPORTED",
    "EXIT_SUCCESS",
    "ExecuteRequest",
    "ExecuteResponse",
    "ExecutionResult",
    "FetchResponse",
]
