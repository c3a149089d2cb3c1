"""
RPC connection and transaction helpers shared by the scripts and tasks.
"""

import logging
from typing import Any, Optional

from web3 import Web3
from web3.middleware import ExtraDataToPOAMiddleware

from contracts.abis import FUNCTIONS_COORDINATOR_ABI

logger = logging.getLogger(__name__)


def connect(rpc_url: str) -> Web3:
    """Connect to `rpc_url`, raising ConnectionError when it is unreachable."""
    w3 = Web3(Web3.HTTPProvider(rpc_url))
    w3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)
    if not w3.is_connected():
        raise ConnectionError(f"Could not connect to RPC URL: {rpc_url}")
    logger.info(f"Connected to blockchain at {rpc_url}")
    return w3


def don_id_bytes32(don_id: str) -> bytes:
    """bytes32 representation of a DON id (right padded UTF-8, at most 31 bytes)."""
    raw = don_id.encode('utf-8')
    if len(raw) > 31:
        raise ValueError(f"DON id '{don_id}' is too long for bytes32")
    return raw.ljust(32, b'\x00')


def get_coordinator(w3: Web3, router, don_id: str):
    """Resolve the coordinator contract serving `don_id` through the router."""
    coordinator_address = router.functions.getContractById(don_id_bytes32(don_id)).call()
    return w3.eth.contract(
        address=Web3.to_checksum_address(coordinator_address),
        abi=FUNCTIONS_COORDINATOR_ABI,
    )


def send_transaction(w3: Web3, account: Any, fn: Any, gas: Optional[int] = None, value: int = 0) -> str:
    """Sign and send a contract call or constructor. Returns the transaction hash."""
    tx_params = {
        'from': account.address,
        'nonce': w3.eth.get_transaction_count(account.address),
        'gasPrice': w3.eth.gas_price,
        'value': value,
    }
    if gas is not None:
        tx_params['gas'] = gas
    tx = fn.build_transaction(tx_params)

    signed_tx = account.sign_transaction(tx)
    tx_hash = w3.eth.send_raw_transaction(signed_tx.raw_transaction)
    tx_hash_hex = Web3.to_hex(tx_hash)
    logger.info(f"Transaction sent: {tx_hash_hex}")
    return tx_hash_hex
