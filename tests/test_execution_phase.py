"""
Tests for the execution phase.
"""

import logging

import pytest

from oracle_program.config import ProgramSettings
from oracle_program.exceptions import InputDecodingError, PayloadDecodingError
from oracle_program.host.process import InMemoryProcess
from oracle_program.phases.execution_phase import (
    FETCH_ERROR_MESSAGE,
    INVALID_PRICE_MESSAGE,
    execution_phase,
)

BASE_URL = "http://testnet-2.proxy.testnet.seda.xyz/proxy"


class TestExecutionPhase:
    """Test cases for the fetch-validate-transform-report sequence."""

    def test_bitcoin_reports_scaled_price(self, make_fetcher):
        """Test the reference success scenario."""
        process = InMemoryProcess(b"bitcoin")
        fetcher = make_fetcher(200, b"65432.1")

        execution_phase(process, fetcher)

        assert process.report_kind == "success"
        assert process.report == (65432100000).to_bytes(16, "little")
        assert len(process.report) == 16

    def test_fetches_feed_url_exactly_once(self, make_fetcher):
        """Test that one fetch goes to <base>/<identifier> without headers or body."""
        process = InMemoryProcess(b"ethereum")
        fetcher = make_fetcher(200, b"3000")

        execution_phase(process, fetcher)

        assert fetcher.calls == [(f"{BASE_URL}/ethereum", None, None)]

    def test_uses_configured_base_url(self, make_fetcher):
        """Test that the proxy base URL comes from settings."""
        settings = ProgramSettings(proxy_base_url="http://localhost:5384/proxy/")
        fetcher = make_fetcher(200, b"1")

        execution_phase(InMemoryProcess(b"solana"), fetcher, settings)

        assert fetcher.calls[0][0] == "http://localhost:5384/proxy/solana"

    def test_rejected_fetch_reports_fixed_error(self, make_fetcher, caplog):
        """Test the reference failure scenario."""
        process = InMemoryProcess(b"doge")
        fetcher = make_fetcher(500, b"rate limited")

        with caplog.at_level(logging.ERROR):
            execution_phase(process, fetcher)

        assert process.report_kind == "error"
        assert process.report == b"Error while fetching price feed"
        assert process.report == FETCH_ERROR_MESSAGE
        assert "HTTP Response was rejected: 500 - rate limited" in caplog.text

    @pytest.mark.parametrize("status", [0, 199, 301, 404, 502])
    def test_non_2xx_statuses_are_rejected(self, make_fetcher, status):
        """Test that any status outside 2xx reports the fetch error."""
        process = InMemoryProcess(b"bitcoin")

        execution_phase(process, make_fetcher(status, b"65432.1"))

        assert process.report_kind == "error"
        assert process.report == FETCH_ERROR_MESSAGE

    def test_rejected_fetch_with_non_utf8_body_propagates(self, make_fetcher):
        """Test that an undecodable error body aborts without a report."""
        process = InMemoryProcess(b"doge")

        with pytest.raises(PayloadDecodingError):
            execution_phase(process, make_fetcher(500, b"\xff\xfe"))

        assert process.reported is False

    def test_non_numeric_payload_propagates(self, make_fetcher):
        """Test that a non-numeric body aborts before any report."""
        process = InMemoryProcess(b"bitcoin")

        with pytest.raises(PayloadDecodingError):
            execution_phase(process, make_fetcher(200, b"abc"))

        assert process.reported is False

    def test_invalid_utf8_inputs_abort_before_fetch(self, make_fetcher):
        """Test that undecodable inputs abort before any fetch."""
        process = InMemoryProcess(b"\xc3\x28")
        fetcher = make_fetcher(200, b"1")

        with pytest.raises(InputDecodingError):
            execution_phase(process, fetcher)

        assert fetcher.calls == []
        assert process.reported is False

    def test_negative_price_reports_invalid_price(self, make_fetcher):
        """Test that a negative price is reported as an error."""
        process = InMemoryProcess(b"bitcoin")

        execution_phase(process, make_fetcher(200, b"-12.5"))

        assert process.report_kind == "error"
        assert process.report == INVALID_PRICE_MESSAGE

    def test_overflowing_price_reports_invalid_price(self, make_fetcher):
        """Test that a price beyond the u128 range is reported as an error."""
        process = InMemoryProcess(b"bitcoin")

        execution_phase(process, make_fetcher(200, b"1e400"))

        assert process.report == INVALID_PRICE_MESSAGE

    def test_logs_price_and_reported_value(self, make_fetcher, caplog):
        """Test the diagnostic lines of the success path."""
        with caplog.at_level(logging.INFO):
            execution_phase(InMemoryProcess(b"bitcoin"), make_fetcher(200, b"1.5"))

        assert "Fetched price: 1.5" in caplog.text
        assert "Reporting: 1500000" in caplog.text

    def test_accepts_keyword_arguments(self, make_fetcher):
        """Test calling the phase with process, fetcher and settings by keyword."""
        process = InMemoryProcess(b"bitcoin")

        execution_phase(process=process, fetcher=make_fetcher(200, b"2"), settings=ProgramSettings())

        assert process.report == (2000000).to_bytes(16, "little")
