"""
Off-chain Components
====================

Everything that runs outside of a contract:
- runtime: HTTP and encoding helpers handed to request handlers
- functions/: the request handlers executed for an oracle request
- simulator: local execution of a handler before a request is sent
- decoding: decoding of fulfillment results
- betblock_client: direct checks against the BetBlock API
"""

__version__ = "1.0.0"
__author__ = "BetBlock Team"
