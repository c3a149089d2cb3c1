"""
Request Scripts
===============

Scripts that talk to the Chainlink Functions contracts on Fuji.

Structure:
- chain: RPC connection, signing and sending transactions
- subscription: request cost estimation
- secrets_manager: encryption of secrets URLs for the DON
- listener: waiting for a request's fulfillment
- fulfillment: classification and reporting of fulfillment results
- request: the end-to-end make-request script
"""

__version__ = "1.0.0"
__author__ = "BetBlock Team"
