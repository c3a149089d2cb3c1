"""
Subscription lookups and request cost estimation against the FunctionsRouter.
"""

import logging
from typing import Any, Dict

from web3 import Web3
from web3.exceptions import ContractLogicError

from contracts.abis import FUNCTIONS_ROUTER_ABI
from scripts.chain import get_coordinator

logger = logging.getLogger(__name__)

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


class SubscriptionManager:
    def __init__(self, w3: Web3, account: Any, link_token_address: str, functions_router_address: str):
        self.w3 = w3
        self.account = account
        self.link_token_address = Web3.to_checksum_address(link_token_address)
        self.functions_router_address = Web3.to_checksum_address(functions_router_address)
        self.router = None

    def initialize(self):
        self.router = self.w3.eth.contract(address=self.functions_router_address, abi=FUNCTIONS_ROUTER_ABI)
        logger.debug(f"SubscriptionManager bound to router {self.functions_router_address}")

    def _require_initialized(self):
        if self.router is None:
            raise RuntimeError("SubscriptionManager not initialized. Call initialize() first.")

    def get_subscription_info(self, subscription_id: int) -> Dict[str, Any]:
        self._require_initialized()
        try:
            balance, owner, blocked_balance, proposed_owner, consumers, flags = (
                self.router.functions.getSubscription(subscription_id).call()
            )
        except ContractLogicError as e:
            raise ValueError(f"Subscription {subscription_id} does not exist: {e}") from e

        if owner == ZERO_ADDRESS:
            raise ValueError(f"Subscription {subscription_id} does not exist")

        return {
            'balance': balance,
            'owner': owner,
            'blockedBalance': blocked_balance,
            'proposedOwner': proposed_owner,
            'consumers': list(consumers),
            'flags': flags,
        }

    def estimate_functions_request_cost(
        self,
        don_id: str,
        subscription_id: int,
        callback_gas_limit: int,
        gas_price_wei: int,
    ) -> int:
        """
        Estimate the fulfillment cost of a request in Juels.

        Args:
            don_id: ID of the DON the request will be sent to
            subscription_id: subscription paying for the request
            callback_gas_limit: gas available to the consumer's callback
            gas_price_wei: gas price used for the estimate

        Returns:
            Estimated cost in Juels
        """
        self._require_initialized()

        if not isinstance(subscription_id, int) or subscription_id <= 0:
            raise ValueError(f"Invalid subscription ID: {subscription_id}")
        if not isinstance(callback_gas_limit, int) or callback_gas_limit <= 0:
            raise ValueError(f"Invalid callback gas limit: {callback_gas_limit}")
        if not isinstance(gas_price_wei, int) or gas_price_wei <= 0:
            raise ValueError(f"Invalid gas price: {gas_price_wei}")

        self.get_subscription_info(subscription_id)

        coordinator = get_coordinator(self.w3, self.router, don_id)
        return coordinator.functions.estimateCost(
            subscription_id, b'', callback_gas_limit, gas_price_wei
        ).call()
