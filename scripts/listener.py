"""
Waits for the router to report a request as processed.
"""

import time
import logging

from web3 import Web3
from web3.exceptions import TimeExhausted
from web3.logs import DISCARD

from contracts.abis import FUNCTIONS_ROUTER_ABI
from scripts.fulfillment import FunctionsResponse

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 300
DEFAULT_CONFIRMATIONS = 2
DEFAULT_POLL_INTERVAL = 2


class ListenerTimeout(TimeoutError):
    """No fulfillment was observed before the deadline."""


def _to_hex(value) -> str:
    return '0x' + bytes(value).hex()


class ResponseListener:
    def __init__(self, w3: Web3, functions_router_address: str):
        self.w3 = w3
        self.router = w3.eth.contract(
            address=Web3.to_checksum_address(functions_router_address),
            abi=FUNCTIONS_ROUTER_ABI,
        )

    def request_id_from_receipt(self, receipt) -> str:
        events = self.router.events.RequestStart().process_receipt(receipt, errors=DISCARD)
        if not events:
            raise ValueError(f"No RequestStart event in transaction {_to_hex(receipt['transactionHash'])}")
        return _to_hex(events[0]['args']['requestId'])

    def _wait_for_confirmations(self, receipt, confirmations: int, deadline: float, poll_interval: float):
        target = receipt['blockNumber'] + confirmations - 1
        while self.w3.eth.block_number < target:
            if time.monotonic() >= deadline:
                raise ListenerTimeout(f"Transaction not confirmed {confirmations} times before timeout")
            time.sleep(poll_interval)

    def listen_for_response(self, request_id: str, timeout: float = DEFAULT_TIMEOUT,
                            poll_interval: float = DEFAULT_POLL_INTERVAL, from_block='latest') -> FunctionsResponse:
        """Poll RequestProcessed logs for `request_id` until one appears or `timeout` passes."""
        deadline = time.monotonic() + timeout
        request_id_bytes = bytes.fromhex(request_id[2:] if request_id.startswith('0x') else request_id)

        while True:
            logs = self.router.events.RequestProcessed().get_logs(
                from_block=from_block,
                argument_filters={'requestId': request_id_bytes},
            )
            if logs:
                return self._to_response(logs[0])
            if time.monotonic() >= deadline:
                raise ListenerTimeout(f"Response not received for request {request_id} within {timeout}s")
            time.sleep(poll_interval)

    def listen_for_response_from_transaction(
        self,
        tx_hash: str,
        timeout: float = DEFAULT_TIMEOUT,
        confirmations: int = DEFAULT_CONFIRMATIONS,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
    ) -> FunctionsResponse:
        deadline = time.monotonic() + timeout
        try:
            receipt = self.w3.eth.wait_for_transaction_receipt(tx_hash, timeout=timeout)
        except TimeExhausted as e:
            raise ListenerTimeout(f"Transaction {tx_hash} not mined within {timeout}s") from e
        self._wait_for_confirmations(receipt, confirmations, deadline, poll_interval)

        request_id = self.request_id_from_receipt(receipt)
        logger.info(f"Listening for response to request {request_id}...")
        remaining = max(deadline - time.monotonic(), 0)
        return self.listen_for_response(
            request_id,
            timeout=remaining,
            poll_interval=poll_interval,
            from_block=receipt['blockNumber'],
        )

    @staticmethod
    def _to_response(log) -> FunctionsResponse:
        args = log['args']
        return FunctionsResponse(
            request_id=_to_hex(args['requestId']),
            subscription_id=args['subscriptionId'],
            total_cost_in_juels=args['totalCostJuels'],
            response_bytes_hexstring=_to_hex(args['response']),
            error_string=bytes(args['err']).decode('utf-8', errors='replace'),
            return_data_bytes_hexstring=_to_hex(args['callbackReturnData']),
            fulfillment_code=args['resultCode'],
        )
