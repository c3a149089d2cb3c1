"""
Contracts
=========

Solidity sources are compiled from this directory to ``build/artifacts``.
They are not kept in this repository: copy the consumer contracts (for
example from the Hardhat checkout, with ``node_modules`` installed for the
``@chainlink`` imports) here before running the setup tasks. Deployed by
the tasks:
- ProfileNFTContract: NFT minted from a Functions request
- AvalancheLending: lending contract on Fuji
- BaseCase: minimal Functions consumer
"""

__all__ = ['abis', 'artifacts']
