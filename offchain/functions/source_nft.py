"""Checks a BetBlock API key and returns the API's answer as a string."""

import json
import logging

from offchain.runtime import HandlerError

logger = logging.getLogger(__name__)

VALIDATE_KEY_URL = "https://api.betblock.fi/validateKey"


def handle(functions, args, secrets):
    words = args[0] if args else ''
    logger.debug(f"Prompt words: {words!r}")

    if not secrets.get('apiKey'):
        raise HandlerError("Need betblock key!")

    api_response = functions.make_http_request(
        url=VALIDATE_KEY_URL,
        headers={"x-api-key": secrets['apiKey']},
        params={"words": ''},
    )
    logger.info(api_response)

    if api_response.error:
        raise HandlerError("Response Error")

    val = api_response.data
    logger.info(val)
    if not isinstance(val, str):
        val = json.dumps(val)
    return functions.encode_string(val)
