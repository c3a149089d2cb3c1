"""
Local execution of a request handler, reporting the same fields the DON would.
"""

import io
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from offchain.runtime import FunctionsRuntime, MAX_HTTP_REQUESTS

logger = logging.getLogger(__name__)

MAX_ON_CHAIN_RESPONSE_BYTES = 256


@dataclass
class SimulationResult:
    response_bytes_hexstring: Optional[str] = None
    error_string: Optional[str] = None
    captured_terminal_output: str = ''


def simulate_script(
    handler: Callable,
    args: Optional[List[str]] = None,
    bytes_args: Optional[List[str]] = None,
    secrets: Optional[Dict[str, str]] = None,
    max_http_requests: int = MAX_HTTP_REQUESTS,
    max_response_bytes: int = MAX_ON_CHAIN_RESPONSE_BYTES,
) -> SimulationResult:
    """
    Run `handler` with a fresh runtime and capture what it logs.

    Args:
        handler: callable taking (functions, args, secrets) and returning bytes
        args: string arguments of the request
        bytes_args: hex-encoded byte arguments of the request
        secrets: secrets mapping visible to the handler
        max_http_requests: HTTP requests allowed per execution
        max_response_bytes: size limit of the returned value

    Returns:
        SimulationResult with either response bytes or an error string
    """
    runtime = FunctionsRuntime(bytes_args=bytes_args, max_http_requests=max_http_requests)

    buffer = io.StringIO()
    capture = logging.StreamHandler(buffer)
    capture.setFormatter(logging.Formatter('%(message)s'))
    handler_logger = logging.getLogger('offchain.functions')
    previous_level = handler_logger.level
    handler_logger.addHandler(capture)
    handler_logger.setLevel(logging.INFO)

    result = None
    error_string = None
    try:
        result = handler(runtime, list(args or []), dict(secrets or {}))
    except Exception as e:
        error_string = str(e) or type(e).__name__
    finally:
        handler_logger.removeHandler(capture)
        handler_logger.setLevel(previous_level)

    output = buffer.getvalue()
    if error_string is not None:
        return SimulationResult(error_string=error_string, captured_terminal_output=output)

    if not isinstance(result, (bytes, bytearray)):
        return SimulationResult(
            error_string=f"returned value not bytes: {type(result).__name__}",
            captured_terminal_output=output,
        )
    if len(result) > max_response_bytes:
        return SimulationResult(
            error_string=f"response >{max_response_bytes} bytes",
            captured_terminal_output=output,
        )

    return SimulationResult(
        response_bytes_hexstring='0x' + bytes(result).hex(),
        captured_terminal_output=output,
    )
