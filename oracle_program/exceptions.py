"""
Exceptions raised by the oracle program.

Decoding errors abort the execution phase before any report is made.
Invalid prices are caught by the execution phase and reported to the host.
"""


class ExecutionError(Exception):
    """Base class for failures that abort an execution phase."""


class DecodingError(ExecutionError):
    """Bytes could not be decoded into the expected value."""


class InputDecodingError(DecodingError):
    """The host inputs are not valid UTF-8."""


class PayloadDecodingError(DecodingError):
    """The fetched payload is not valid UTF-8 or not a single numeric literal."""


class InvalidPriceError(ExecutionError):
    """The fetched price cannot be represented as an unsigned 128-bit value."""


class ReportAlreadyDeliveredError(ExecutionError):
    """A second terminal report was attempted on the same process."""
