#!/usr/bin/env python3
"""
Tests for SubscriptionManager cost estimation
"""

import pytest
from unittest.mock import MagicMock

from scripts.chain import don_id_bytes32
from scripts.subscription import ZERO_ADDRESS, SubscriptionManager

ROUTER = "0xA9d587a00A31A52Ed70D6026794a8FC5E2F5dCb0"
LINK = "0x0b9d5D9136855f6FEc3c0993feE6E9CE8a297846"
OWNER = "0x" + "11" * 20
COORDINATOR = "0x" + "22" * 20


class TestSubscriptionManager:
    """Test class for SubscriptionManager"""

    def setup_method(self):
        self.w3 = MagicMock()
        self.router = MagicMock()
        self.coordinator = MagicMock()
        self.w3.eth.contract.side_effect = [self.router, self.coordinator]

        self.router.functions.getSubscription.return_value.call.return_value = (
            5 * 10 ** 18, OWNER, 0, ZERO_ADDRESS, [OWNER], b"\x00" * 32,
        )
        self.router.functions.getContractById.return_value.call.return_value = COORDINATOR
        self.coordinator.functions.estimateCost.return_value.call.return_value = 123456

        self.manager = SubscriptionManager(self.w3, MagicMock(), LINK, ROUTER)
        self.manager.initialize()

    def test_estimate_cost(self):
        cost = self.manager.estimate_functions_request_cost(
            don_id="fun-avalanche-fuji-1",
            subscription_id=1864,
            callback_gas_limit=300000,
            gas_price_wei=25 * 10 ** 9,
        )

        assert cost == 123456
        self.router.functions.getContractById.assert_called_once_with(don_id_bytes32("fun-avalanche-fuji-1"))
        self.coordinator.functions.estimateCost.assert_called_once_with(1864, b"", 300000, 25 * 10 ** 9)

    def test_requires_initialize(self):
        manager = SubscriptionManager(MagicMock(), MagicMock(), LINK, ROUTER)
        with pytest.raises(RuntimeError, match="initialize"):
            manager.estimate_functions_request_cost("fun-avalanche-fuji-1", 1864, 300000, 1)

    @pytest.mark.parametrize("sub_id, gas_limit, gas_price", [
        (0, 300000, 1),
        (1864, 0, 1),
        (1864, 300000, 0),
    ])
    def test_invalid_inputs(self, sub_id, gas_limit, gas_price):
        with pytest.raises(ValueError):
            self.manager.estimate_functions_request_cost("fun-avalanche-fuji-1", sub_id, gas_limit, gas_price)

    def test_missing_subscription(self):
        self.router.functions.getSubscription.return_value.call.return_value = (
            0, ZERO_ADDRESS, 0, ZERO_ADDRESS, [], b"\x00" * 32,
        )
        with pytest.raises(ValueError, match="does not exist"):
            self.manager.estimate_functions_request_cost("fun-avalanche-fuji-1", 1864, 300000, 1)

    def test_subscription_info(self):
        info = self.manager.get_subscription_info(1864)
        assert info['owner'] == OWNER
        assert info['consumers'] == [OWNER]


def test_don_id_bytes32():
    assert don_id_bytes32("fun-avalanche-fuji-1") == b"fun-avalanche-fuji-1".ljust(32, b"\x00")
    with pytest.raises(ValueError):
        don_id_bytes32("x" * 32)
