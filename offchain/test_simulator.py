#!/usr/bin/env python3
"""
Tests for local handler simulation
"""

import logging
from unittest.mock import patch

from offchain.functions import source_nft
from offchain.runtime import HandlerError, HttpResponse
from offchain.simulator import simulate_script

logger = logging.getLogger('offchain.functions.test_handler')


def echo_handler(functions, args, secrets):
    logger.info(f"echo {args[0]}")
    return functions.encode_string(args[0])


class TestSimulateScript:
    """Test class for simulate_script"""

    def test_successful_simulation(self):
        """The returned bytes are reported as a hexstring"""
        result = simulate_script(echo_handler, args=["hi"])

        assert result.error_string is None
        assert result.response_bytes_hexstring == "0x" + b"hi".hex()
        assert "echo hi" in result.captured_terminal_output

    def test_handler_error_becomes_error_string(self):
        """Exceptions raised by the handler are reported, not propagated"""
        def failing(functions, args, secrets):
            raise HandlerError("Need betblock key!")

        result = simulate_script(failing)

        assert result.error_string == "Need betblock key!"
        assert result.response_bytes_hexstring is None

    def test_non_bytes_result(self):
        """Handlers must return bytes"""
        result = simulate_script(lambda functions, args, secrets: "text")
        assert "not bytes" in result.error_string

    def test_oversized_result(self):
        """Results larger than the on-chain limit are rejected"""
        result = simulate_script(lambda functions, args, secrets: b"x" * 300)
        assert result.error_string == "response >256 bytes"

    def test_secrets_reach_handler(self):
        """Secrets are passed through to the handler"""
        with patch('offchain.runtime.FunctionsRuntime.make_http_request',
                   return_value=HttpResponse(error=False, data="valid")):
            result = simulate_script(source_nft.handle, args=["w", "0"], secrets={'apiKey': 'key'})

        assert result.error_string is None
        assert bytes.fromhex(result.response_bytes_hexstring[2:]) == b"valid"

    def test_missing_secret_fails_simulation(self):
        result = simulate_script(source_nft.handle, args=["w"], secrets={})
        assert result.error_string == "Need betblock key!"
