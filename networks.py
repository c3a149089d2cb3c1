"""
All supported networks and related contract addresses are defined here.

LINK token addresses: https://docs.chain.link/resources/link-token-contracts/
Chain IDs: https://chainlist.org/?testnets=true
"""

import os
from typing import Any, Dict, List

from config import ConfigurationError

DEFAULT_VERIFICATION_BLOCK_CONFIRMATIONS = 2
DEFAULT_NETWORK = "hardhat"
UNSET = "THIS HAS NOT BEEN SET"


def is_test_environment() -> bool:
    return os.getenv("FUNCTIONS_ENV") == "test"


def require_private_key() -> str:
    """Return PRIVATE_KEY, raising outside of tests when it is missing."""
    private_key = os.getenv("PRIVATE_KEY")
    if not private_key and not is_test_environment():
        raise ConfigurationError(
            "Set the PRIVATE_KEY environment variable with your EVM wallet private key"
        )
    return private_key or ""


def _accounts() -> List[str]:
    private_key = os.getenv("PRIVATE_KEY")
    return [private_key] if private_key else []


def build_networks() -> Dict[str, Dict[str, Any]]:
    return {
        "hardhat": {
            "url": os.getenv("HARDHAT_RPC_URL", "http://127.0.0.1:8545"),
            "chainId": 31337,
            "accounts": _accounts(),
            "confirmations": 1,
            "nativeCurrencySymbol": "ETH",
        },
        "fuji": {
            "url": os.getenv("AVALANCHE_FUJI_RPC_URL") or UNSET,
            "router": "0xA9d587a00A31A52Ed70D6026794a8FC5E2F5dCb0",
            "chainSelector": "14767482510784806043",
            "gasPrice": None,
            "accounts": _accounts(),
            "verifyApiKey": UNSET,
            "chainId": 43113,
            "confirmations": 2 * DEFAULT_VERIFICATION_BLOCK_CONFIRMATIONS,
            "nativeCurrencySymbol": "AVAX",
            "linkToken": "0x0b9d5D9136855f6FEc3c0993feE6E9CE8a297846",
        },
    }


NETWORKS = build_networks()


def get_network(name: str) -> Dict[str, Any]:
    """Look up a network by name, re-reading the environment."""
    networks = build_networks()
    if name not in networks:
        raise ConfigurationError(
            f"Unknown network '{name}'. Available: {', '.join(sorted(networks))}"
        )
    return networks[name]
