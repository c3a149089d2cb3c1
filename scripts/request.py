#!/usr/bin/env python3
"""
Sends a Chainlink Functions request to the consumer on Avalanche Fuji and
waits for its fulfillment: simulate, estimate cost, encrypt secrets, send,
listen, report.
"""

import os
import sys
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from web3 import Web3

from config import Config, ConfigurationError, configure_logging
from contracts.abis import FUNCTIONS_CONSUMER_ABI
from offchain.decoding import ReturnType, hex_to_bytes
from offchain.functions import HANDLERS, SOURCES
from offchain.simulator import simulate_script
from scripts.chain import connect, don_id_bytes32, send_transaction
from scripts.fulfillment import FunctionsResponse, format_link, report_fulfillment, report_result
from scripts.listener import ResponseListener
from scripts.secrets_manager import SecretsManager
from scripts.subscription import SubscriptionManager

logger = logging.getLogger(__name__)

# Avalanche Fuji
ROUTER_ADDRESS = "0xA9d587a00A31A52Ed70D6026794a8FC5E2F5dCb0"
LINK_TOKEN_ADDRESS = "0x0b9d5D9136855f6FEc3c0993feE6E9CE8a297846"
DON_ID = "fun-avalanche-fuji-1"
GATEWAY_URLS = [
    "https://01.functions-gateway.testnet.chain.link/",
    "https://02.functions-gateway.testnet.chain.link/",
]
EXPLORER_URL = "https://testnet.snowtrace.io"
RPC_URL = "https://avalanche-fuji.drpc.org/"

CONSUMER_ADDRESS = "0x93ec732dC8D847aE8184aF2421cBc19916262723"
SUBSCRIPTION_ID = 1864
GAS_LIMIT = 300000


@dataclass
class RequestConfig:
    # Defaults to the source shipped for `handler`
    source_path: Optional[str] = None
    handler: str = "source-nft"
    args: List[str] = field(default_factory=lambda: ["excited puppy jumping up and down", "0"])
    bytes_args: List[str] = field(default_factory=list)
    secrets: Dict[str, str] = field(default_factory=dict)
    secrets_urls: List[str] = field(default_factory=list)
    gas_limit: int = GAS_LIMIT
    subscription_id: int = SUBSCRIPTION_ID
    don_id: str = DON_ID
    consumer_address: str = CONSUMER_ADDRESS
    router_address: str = ROUTER_ADDRESS
    link_token_address: str = LINK_TOKEN_ADDRESS
    rpc_url: str = RPC_URL
    return_type: ReturnType = ReturnType.string
    method: str = "mintRequest"

    @classmethod
    def from_env(cls, config: Config) -> 'RequestConfig':
        return cls(
            source_path=config.source_path,
            secrets={'apiKey': config.nft_api_key} if config.nft_api_key else {},
            secrets_urls=[config.secrets_url] if config.secrets_url else [],
            rpc_url=config.fuji_rpc_url or RPC_URL,
        )


def read_source(path: str) -> str:
    if not os.path.exists(path):
        raise ConfigurationError(f"Request source not found at {path}. Set FUNCTIONS_SOURCE_PATH.")
    with open(path, 'r') as f:
        return f.read()


def submit_request(w3: Web3, account, consumer, request_config: RequestConfig, source: str,
                   encrypted_secrets_urls: str) -> str:
    """Send the request transaction through the consumer contract."""
    encrypted = hex_to_bytes(encrypted_secrets_urls)
    if request_config.method == "mintRequest":
        fn = consumer.functions.mintRequest(
            source, encrypted, request_config.args, request_config.subscription_id
        )
    elif request_config.method == "sendRequest":
        fn = consumer.functions.sendRequest(
            source,
            encrypted,
            0,  # DON hosted secrets slot ID
            0,  # DON hosted secrets version
            request_config.args,
            [hex_to_bytes(arg) for arg in request_config.bytes_args],
            request_config.subscription_id,
            request_config.gas_limit,
            don_id_bytes32(request_config.don_id),
        )
    else:
        raise ValueError(f"Unsupported request method: {request_config.method}")
    return send_transaction(w3, account, fn)


def make_request(request_config: RequestConfig, config: Optional[Config] = None,
                 w3: Optional[Web3] = None) -> Optional[FunctionsResponse]:
    config = config or Config()

    # Checked before any network access
    private_key = config.require("PRIVATE_KEY")
    if request_config.handler not in HANDLERS:
        raise ConfigurationError(f"Unknown handler '{request_config.handler}'")
    source = read_source(request_config.source_path or SOURCES[request_config.handler])

    w3 = w3 or connect(request_config.rpc_url)
    account = w3.eth.account.from_key(private_key)
    logger.info(f"Using account: {account.address}")

    # --- 1. Simulation ---
    logger.info("Start simulation...")
    simulation = simulate_script(
        HANDLERS[request_config.handler],
        args=request_config.args,
        bytes_args=request_config.bytes_args,
        secrets=request_config.secrets,
    )
    logger.info(f"Simulation result {simulation}")
    report_result(
        simulation.error_string,
        simulation.response_bytes_hexstring,
        request_config.return_type,
        stage="simulation",
    )

    # --- 2. Estimate request costs ---
    logger.info("Estimate request costs...")
    subscription_manager = SubscriptionManager(
        w3, account,
        link_token_address=request_config.link_token_address,
        functions_router_address=request_config.router_address,
    )
    subscription_manager.initialize()

    gas_price_wei = w3.eth.gas_price
    estimated_cost_in_juels = subscription_manager.estimate_functions_request_cost(
        don_id=request_config.don_id,
        subscription_id=request_config.subscription_id,
        callback_gas_limit=request_config.gas_limit,
        gas_price_wei=gas_price_wei,
    )
    logger.info(f"Fulfillment cost estimated to {format_link(estimated_cost_in_juels)} LINK")

    # --- 3. Make request ---
    logger.info("Make request...")
    consumer = w3.eth.contract(
        address=Web3.to_checksum_address(request_config.consumer_address),
        abi=FUNCTIONS_CONSUMER_ABI,
    )

    if request_config.secrets_urls:
        secrets_manager = SecretsManager(
            w3, account,
            functions_router_address=request_config.router_address,
            don_id=request_config.don_id,
        )
        secrets_manager.initialize()
        encrypted_secrets_urls = secrets_manager.encrypt_secrets_urls(request_config.secrets_urls)
    else:
        logger.warning("No secrets URLs configured, sending the request without secrets")
        encrypted_secrets_urls = '0x'

    tx_hash = submit_request(w3, account, consumer, request_config, source, encrypted_secrets_urls)
    logger.info(f"✅ Functions request sent! Transaction hash {tx_hash}. Waiting for a response...")
    logger.info(f"See your request in the explorer {EXPLORER_URL}/tx/{tx_hash}")

    # --- 4. Wait for the fulfillment ---
    response_listener = ResponseListener(w3, request_config.router_address)
    response = None
    try:
        response = response_listener.listen_for_response_from_transaction(tx_hash)
        report_fulfillment(response, request_config.return_type)
    except Exception as e:
        logger.error(f"Error listening for response: {e}")
        if response is None:
            report_fulfillment(None, request_config.return_type)
    return response


def main():
    config = Config()
    configure_logging(config)
    try:
        make_request(RequestConfig.from_env(config), config)
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
