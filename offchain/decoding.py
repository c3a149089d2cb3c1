"""Decoding of fulfillment result bytes into Python values."""

from enum import Enum
from typing import Union

from eth_abi import decode as abi_decode


class ReturnType(str, Enum):
    uint256 = 'uint256'
    int256 = 'int256'
    string = 'string'
    bytes = 'bytes'


def hex_to_bytes(hexstring: str) -> bytes:
    if hexstring.startswith(('0x', '0X')):
        hexstring = hexstring[2:]
    return bytes.fromhex(hexstring)


def decode_result(result_hexstring: str, return_type: Union[ReturnType, str]) -> Union[int, str]:
    """Decode a result hexstring as the given return type."""
    return_type = ReturnType(return_type)
    raw = hex_to_bytes(result_hexstring)

    if return_type in (ReturnType.uint256, ReturnType.int256):
        if len(raw) != 32:
            raise ValueError(
                f"'{result_hexstring}' is not a valid {return_type.value}: expected 32 bytes, got {len(raw)}"
            )
        return abi_decode([return_type.value], raw)[0]
    if return_type is ReturnType.string:
        return raw.decode('utf-8')
    return '0x' + raw.hex()
