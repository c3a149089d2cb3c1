#!/usr/bin/env python3
"""
Tests for ResponseListener
"""

import pytest
from unittest.mock import MagicMock, patch
from web3.exceptions import TimeExhausted

from scripts.fulfillment import FulfillmentCode
from scripts.listener import ListenerTimeout, ResponseListener

ROUTER = "0xA9d587a00A31A52Ed70D6026794a8FC5E2F5dCb0"
REQUEST_ID = b"\xaa" * 32


def processed_log(code=0, err=b""):
    return {'args': {
        'requestId': REQUEST_ID,
        'subscriptionId': 1864,
        'totalCostJuels': 10 ** 17,
        'transmitter': "0x" + "33" * 20,
        'resultCode': code,
        'response': b"Luke",
        'err': err,
        'callbackReturnData': b"",
    }}


class TestResponseListener:
    """Test class for ResponseListener"""

    def setup_method(self):
        self.w3 = MagicMock()
        self.router = MagicMock()
        self.w3.eth.contract.return_value = self.router
        self.w3.eth.wait_for_transaction_receipt.return_value = {
            'blockNumber': 100,
            'transactionHash': b"\x01" * 32,
        }
        self.w3.eth.block_number = 101
        self.router.events.RequestStart.return_value.process_receipt.return_value = [
            {'args': {'requestId': REQUEST_ID}}
        ]
        self.listener = ResponseListener(self.w3, ROUTER)

    @patch('scripts.listener.time.sleep')
    def test_listen_from_transaction(self, mock_sleep):
        """Polls until the RequestProcessed log for the request appears"""
        get_logs = self.router.events.RequestProcessed.return_value.get_logs
        get_logs.side_effect = [[], [processed_log()]]

        response = self.listener.listen_for_response_from_transaction("0x" + "01" * 32, poll_interval=0)

        assert response.request_id == "0x" + "aa" * 32
        assert response.fulfillment_code == FulfillmentCode.FULFILLED
        assert response.response_bytes_hexstring == "0x" + b"Luke".hex()
        assert response.total_cost_in_juels == 10 ** 17
        assert get_logs.call_count == 2
        assert get_logs.call_args.kwargs == {
            'from_block': 100,
            'argument_filters': {'requestId': REQUEST_ID},
        }

    @patch('scripts.listener.time.sleep')
    def test_error_bytes_are_decoded(self, mock_sleep):
        self.router.events.RequestProcessed.return_value.get_logs.return_value = [
            processed_log(code=1, err=b"Response Error")
        ]

        response = self.listener.listen_for_response("0x" + "aa" * 32, timeout=1, poll_interval=0)

        assert response.error_string == "Response Error"
        assert response.fulfillment_code == FulfillmentCode.USER_CALLBACK_ERROR

    @patch('scripts.listener.time.sleep')
    def test_timeout(self, mock_sleep):
        self.router.events.RequestProcessed.return_value.get_logs.return_value = []

        with pytest.raises(ListenerTimeout):
            self.listener.listen_for_response("0x" + "aa" * 32, timeout=0, poll_interval=0)

    def test_receipt_timeout(self):
        """An unmined transaction times out like a missing response"""
        self.w3.eth.wait_for_transaction_receipt.side_effect = TimeExhausted("not mined")

        with pytest.raises(ListenerTimeout, match="not mined within 5s"):
            self.listener.listen_for_response_from_transaction("0x" + "01" * 32, timeout=5)
        self.router.events.RequestProcessed.return_value.get_logs.assert_not_called()

    def test_missing_request_start(self):
        self.router.events.RequestStart.return_value.process_receipt.return_value = []

        with pytest.raises(ValueError, match="No RequestStart"):
            self.listener.request_id_from_receipt({'transactionHash': b"\x01" * 32})
