"""
Request Handlers
================

Handlers executed for an oracle request, each exposing
``handle(functions, args, secrets) -> bytes``:
- source_nft: validates a BetBlock API key
- simple_test: fetches a Star Wars character name

Each handler ships with the JavaScript source the DON runs for it
(``<handler>.js`` next to the module). The handler is what gets simulated
locally, the source is what gets submitted.
"""

import os

from . import simple_test, source_nft

SOURCES_DIR = os.path.dirname(os.path.abspath(__file__))

HANDLERS = {
    "source-nft": source_nft.handle,
    "simple-test": simple_test.handle,
}

SOURCES = {
    "source-nft": os.path.join(SOURCES_DIR, 'source_nft.js'),
    "simple-test": os.path.join(SOURCES_DIR, 'simple_test.js'),
}

__all__ = ['HANDLERS', 'SOURCES', 'simple_test', 'source_nft']
