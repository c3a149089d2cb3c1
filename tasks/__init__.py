"""
Deployment Tasks
================

Command line tasks that compile and deploy the contracts:
- setup-nft-contract: ProfileNFTContract
- setup-avalance-lending-contract: AvalancheLending
- setup-basic: BaseCase

Run as ``functions-tasks --network fuji <task>``.
"""

from .cli import cli, main

__all__ = ['cli', 'main']
