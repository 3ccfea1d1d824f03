"""
Execute API router.

Endpoint for dry-running the execution phase against the data proxy.
"""

import logging
from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException

from oracle_program.config import ProgramSettings
from oracle_program.host.base import Fetcher
from oracle_program.host.http import ProxyHttpFetcher
from oracle_program.phases.runner import run_execution_phase
from oracle_program.schemas.execution import ExecuteRequest, ExecuteResponse

router = APIRouter(tags=["execute"])
logger = logging.getLogger(__name__)


@lru_cache
def get_settings() -> ProgramSettings:
    return ProgramSettings.from_env()


@lru_cache
def get_fetcher() -> Fetcher:
    return ProxyHttpFetcher(timeout=get_settings().fetch_timeout)


@router.post("/execute", response_model=ExecuteResponse)
def execute(
    request: ExecuteRequest,
    fetcher: Fetcher = Depends(get_fetcher),
    settings: ProgramSettings = Depends(get_settings),
) -> ExecuteResponse:
    """
    Run the execution phase once with the given inputs.

    Args:
        request: ExecuteRequest with either text or hex inputs

    Returns:
        ExecuteResponse with exit code, reported bytes and decoded value
    """
    if request.inputs is not None:
        try:
            inputs = request.inputs.encode("utf-8")
        except UnicodeEncodeError:
            raise HTTPException(status_code=400, detail="inputs is not encodable as UTF-8.")
    else:
        try:
            inputs = bytes.fromhex(request.inputs_hex)
        except ValueError:
            raise HTTPException(status_code=400, detail="inputs_hex is not valid hex.")

    logger.info(f"Executing with inputs: {inputs[:80]!r}")
    result = run_execution_phase(inputs, fetcher, settings)
    logger.info(f"Execution finished with exit code {result.exit_code}")

    return ExecuteResponse.from_result(result)
