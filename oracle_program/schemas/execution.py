"""
Execution result schemas for the oracle program.

Defines the outcome of a dry run and the models of the /execute endpoint.
"""

from typing import Optional

from pydantic import BaseModel, Field, model_validator

EXIT_SUCCESS = 0
EXIT_ERROR_REPORTED = 1
EXIT_ABORTED = 255


class ExecutionResult(BaseModel):
    """Model representing the outcome of one execution phase run."""

    exit_code: int = Field(..., description="0 on success, 1 on reported error, 255 on abort")
    result: Optional[bytes] = Field(None, description="Bytes delivered through the host channel")
    reported_value: Optional[int] = Field(
        None, ge=0, description="Decoded u128 value, set on success only"
    )
    error_message: Optional[str] = Field(
        None, description="Reported error text or the reason the phase aborted"
    )

    @property
    def succeeded(self) -> bool:
        return self.exit_code == EXIT_SUCCESS


class ExecuteRequest(BaseModel):
    """Request model for the /execute endpoint."""

    inputs: Optional[str] = Field(None, description="Feed identifier as text (e.g., 'bitcoin')")
    inputs_hex: Optional[str] = Field(None, description="Raw host inputs as a hex string")

    @model_validator(mode="after")
    def _exactly_one_input(self) -> "ExecuteRequest":
        if (self.inputs is None) == (self.inputs_hex is None):
            raise ValueError("Provide exactly one of 'inputs' or 'inputs_hex'")
        return self


class ExecuteResponse(BaseModel):
    """Response model for the /execute endpoint."""

    exit_code: int
    result_hex: Optional[str] = Field(None, description="Hex encoding of the reported bytes")
    reported_value: Optional[int] = Field(
        None, description="Decoded u128 value, as a JSON integer"
    )
    error_message: Optional[str] = None

    @classmethod
    def from_result(cls, result: ExecutionResult) -> "ExecuteResponse":
        return cls(
            exit_code=result.exit_code,
            result_hex=result.result.hex() if result.result is not None else None,
            reported_value=result.reported_value,
            error_message=result.error_message,
        )
