"""
Runtime helpers available to request handlers: HTTP access and result encoding.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import requests
from eth_abi import encode as abi_encode

logger = logging.getLogger(__name__)

# Seconds, handed to requests unchanged
DEFAULT_HTTP_TIMEOUT = 3
MAX_HTTP_REQUESTS = 5

UINT256_MAX = 2 ** 256 - 1
INT256_MIN = -(2 ** 255)
INT256_MAX = 2 ** 255 - 1


class HandlerError(Exception):
    """Raised by a handler to fail the request with a message."""


@dataclass
class HttpResponse:
    """Outcome of `make_http_request`. Failures are reported, never raised."""
    error: bool
    data: Any = None
    status: Optional[int] = None
    headers: Dict[str, str] = field(default_factory=dict)
    message: Optional[str] = None
    code: Optional[str] = None


def encode_string(value: str) -> bytes:
    return value.encode('utf-8')


def encode_uint256(value: int) -> bytes:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"encode_uint256 expects an int, got {type(value).__name__}")
    if value < 0 or value > UINT256_MAX:
        raise ValueError(f"{value} is out of range for uint256")
    return abi_encode(['uint256'], [value])


def encode_int256(value: int) -> bytes:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"encode_int256 expects an int, got {type(value).__name__}")
    if value < INT256_MIN or value > INT256_MAX:
        raise ValueError(f"{value} is out of range for int256")
    return abi_encode(['int256'], [value])


class FunctionsRuntime:
    """The `functions` object passed to every handler."""

    def __init__(self, bytes_args: Optional[List[str]] = None, max_http_requests: int = MAX_HTTP_REQUESTS):
        self.bytes_args = list(bytes_args or [])
        self.max_http_requests = max_http_requests
        self.http_requests_made = 0

    encode_string = staticmethod(encode_string)
    encode_uint256 = staticmethod(encode_uint256)
    encode_int256 = staticmethod(encode_int256)

    def make_http_request(
        self,
        url: str,
        method: str = "get",
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        data: Any = None,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
    ) -> HttpResponse:
        """Perform one HTTP request. Returns an HttpResponse with error=True on failure."""
        if self.http_requests_made >= self.max_http_requests:
            raise HandlerError(f"HTTP request limit of {self.max_http_requests} exceeded")
        self.http_requests_made += 1

        try:
            response = requests.request(
                method.upper(),
                url,
                headers=headers,
                params=params,
                json=data,
                timeout=timeout,
            )
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            logger.debug(f"HTTP error from {url}: {e}")
            return HttpResponse(
                error=True,
                status=e.response.status_code if e.response is not None else None,
                message=str(e),
                code="ERR_BAD_RESPONSE",
            )
        except requests.exceptions.RequestException as e:
            logger.debug(f"Request to {url} failed: {e}")
            return HttpResponse(error=True, message=str(e), code=type(e).__name__)

        try:
            body = response.json()
        except ValueError:
            body = response.text

        return HttpResponse(
            error=False,
            data=body,
            status=response.status_code,
            headers=dict(response.headers),
        )
