"""
Direct calls against the BetBlock API, used to check a key before wiring it
into an oracle request.
"""

import logging
from typing import Any, Optional

import requests

from config import Config, ConfigurationError, configure_logging

logger = logging.getLogger(__name__)

BETBLOCK_API = "https://api.betblock.fi"


def _api_key(api_key: Optional[str]) -> str:
    if not api_key:
        raise ConfigurationError("NFT_API_KEY not provided - check your environment variables")
    return api_key


def validate_key(api_key: Optional[str], timeout: Optional[float] = 30) -> Any:
    """Ask the API whether `api_key` is valid. HTTP errors are raised."""
    headers = {"x-api-key": _api_key(api_key)}
    response = requests.get(f"{BETBLOCK_API}/validateKey", headers=headers, timeout=timeout)
    response.raise_for_status()
    return response.json()


def generate_image(api_key: Optional[str], words: str, token_id: int = 0,
                   timeout: Optional[float] = 30) -> Any:
    """Request an image generated from `words` for `token_id`."""
    headers = {"x-api-key": _api_key(api_key)}
    response = requests.get(
        f"{BETBLOCK_API}/generateImage",
        headers=headers,
        params={'words': words, 'tokenId': token_id},
        timeout=timeout,
    )
    response.raise_for_status()
    return response.json()


def main():
    config = Config()
    configure_logging(config)

    try:
        logger.info(validate_key(config.nft_api_key))
    except (requests.exceptions.RequestException, ConfigurationError) as e:
        logger.error(str(e))

    try:
        logger.info(generate_image(
            config.nft_api_key,
            'futuristic football team battling out in the Superbowl',
            token_id=0,
        ))
    except (requests.exceptions.RequestException, ConfigurationError) as e:
        logger.error(str(e))


if __name__ == '__main__':
    main()
