"""
Execution phase of the price feed oracle program.

Fetches the price of the requested feed through the data proxy and reports
it to the host as a fixed-point integer.
"""

import logging
from typing import Optional

from oracle_program.config import ProgramSettings
from oracle_program.exceptions import InputDecodingError, InvalidPriceError
from oracle_program.host.base import Fetcher, Process
from oracle_program.phases.price import decode_text, encode_u128, parse_price, scale_price

logger = logging.getLogger(__name__)

FETCH_ERROR_MESSAGE = b"Error while fetching price feed"
INVALID_PRICE_MESSAGE = b"Invalid price in price feed"


def execution_phase(
    process: Process, fetcher: Fetcher, settings: Optional[ProgramSettings] = None
) -> None:
    """
    Run the execution phase once.

    Steps:
    1. Decode the host inputs as the feed identifier
    2. Fetch <proxy_base_url>/<feed identifier>
    3. Report a fixed error when the fetch was rejected
    4. Parse the payload as a number and scale it by the fixed factor
    5. Report the value as 16 little-endian bytes

    Exactly one report reaches the host when this returns. Decoding errors
    propagate before any report is made.

    Args:
        process: Host process channel
        fetcher: Outbound HTTP transport
        settings: Program settings, defaults when omitted

    Raises:
        InputDecodingError: If the host inputs are not valid UTF-8
        PayloadDecodingError: If the payload is not valid UTF-8 or not a number
    """
    settings = settings or ProgramSettings()

    try:
        feed_id = process.get_inputs().decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InputDecodingError(f"Inputs are not valid UTF-8: {exc}") from exc

    response = fetcher.fetch(settings.feed_url(feed_id), None, None)

    if not response.is_ok():
        logger.error(
            f"HTTP Response was rejected: {response.status} - {decode_text(response.body)}"
        )
        process.error(FETCH_ERROR_MESSAGE)
        return

    price = parse_price(response.body)
    logger.info(f"Fetched price: {price}")

    try:
        result = scale_price(price, settings.scale_factor)
    except InvalidPriceError as exc:
        logger.error(f"Rejected price for {feed_id}: {exc}")
        process.error(INVALID_PRICE_MESSAGE)
        return

    logger.info(f"Reporting: {result}")
    process.success(encode_u128(result))
