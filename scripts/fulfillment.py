"""
Classification and reporting of request fulfillments.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum, IntEnum
from typing import Optional, Union

from web3 import Web3

from offchain.decoding import ReturnType, decode_result, hex_to_bytes

logger = logging.getLogger(__name__)


class FulfillmentCode(IntEnum):
    FULFILLED = 0
    USER_CALLBACK_ERROR = 1
    INVALID_REQUEST_ID = 2
    COST_EXCEEDS_COMMITMENT = 3
    INSUFFICIENT_GAS_PROVIDED = 4
    SUBSCRIPTION_BALANCE_INVARIANT_VIOLATION = 5
    INVALID_COMMITMENT = 6


class FulfillmentOutcome(str, Enum):
    FULFILLED = 'fulfilled'
    USER_CALLBACK_ERROR = 'user_callback_error'
    NOT_FULFILLED = 'not_fulfilled'
    NO_RESPONSE = 'no_response'


@dataclass
class FunctionsResponse:
    """A processed request as reported by the router's RequestProcessed event."""
    request_id: str
    subscription_id: int
    total_cost_in_juels: int
    response_bytes_hexstring: str
    error_string: str
    return_data_bytes_hexstring: str
    fulfillment_code: int


def format_link(juels: int) -> str:
    # Plain decimal notation, never 1E-18
    return format(Decimal(Web3.from_wei(juels, 'ether')), 'f')


def classify_fulfillment(response: Optional[FunctionsResponse]) -> FulfillmentOutcome:
    if response is None:
        return FulfillmentOutcome.NO_RESPONSE
    if response.fulfillment_code == FulfillmentCode.FULFILLED:
        return FulfillmentOutcome.FULFILLED
    if response.fulfillment_code == FulfillmentCode.USER_CALLBACK_ERROR:
        return FulfillmentOutcome.USER_CALLBACK_ERROR
    return FulfillmentOutcome.NOT_FULFILLED


def report_result(
    error_string: Optional[str],
    response_bytes_hexstring: Optional[str],
    return_type: Union[ReturnType, str],
    stage: str = "execution",
):
    """Log the error of an execution, or its decoded result when there is one."""
    if error_string:
        logger.error(f"❌ Error during the {stage}: {error_string}")
        return None

    if response_bytes_hexstring and len(hex_to_bytes(response_bytes_hexstring)) > 0:
        decoded = decode_result(response_bytes_hexstring, return_type)
        logger.info(f"✅ Decoded response to {ReturnType(return_type).value}: {decoded!r}")
        return decoded
    return None


def report_fulfillment(
    response: Optional[FunctionsResponse],
    return_type: Union[ReturnType, str] = ReturnType.string,
) -> FulfillmentOutcome:
    """Log which way a request was (or was not) fulfilled. Takes no corrective action."""
    outcome = classify_fulfillment(response)

    if outcome is FulfillmentOutcome.NO_RESPONSE:
        logger.error("❌ No response received for the request")
        return outcome

    cost = format_link(response.total_cost_in_juels)
    if outcome is FulfillmentOutcome.FULFILLED:
        logger.info(
            f"✅ Request {response.request_id} successfully fulfilled. "
            f"Cost is {cost} LINK. Complete response: {response}"
        )
    elif outcome is FulfillmentOutcome.USER_CALLBACK_ERROR:
        logger.warning(
            f"⚠️ Request {response.request_id} fulfilled. However, the consumer contract callback failed. "
            f"Cost is {cost} LINK. Complete response: {response}"
        )
    else:
        logger.error(
            f"❌ Request {response.request_id} not fulfilled. Code: {response.fulfillment_code}. "
            f"Cost is {cost} LINK. Complete response: {response}"
        )

    report_result(response.error_string, response.response_bytes_hexstring, return_type)
    return outcome
