"""
Oracle program phases

The execution phase, its price helpers and the dry-run harness.
"""

from oracle_program.phases.execution_phase import (
    FETCH_ERROR_MESSAGE,
    INVALID_PRICE_MESSAGE,
    execution_phase,
)
from oracle_program.phases.runner import run_execution_phase

__all__ = [
    "FETCH_ERROR_MESSAGE",
    "INVALID_PRICE_MESSAGE",
    "execution_phase",
    "run_execution_phase",
]
