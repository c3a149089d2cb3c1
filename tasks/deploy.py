"""
Deployment of the Functions consumer contracts to Avalanche Fuji.
"""

import logging
from typing import Any, Optional

import click
from web3 import Web3

from config import ConfigurationError
from contracts.artifacts import ArtifactNotFoundError, compile_contracts, load_artifact
from networks import UNSET, get_network, require_private_key
from scripts.chain import connect, send_transaction
from .cli import cli

logger = logging.getLogger(__name__)

FUJI = "fuji"


class WrongNetworkError(click.ClickException):
    """A task was run against a network it does not support."""


def require_network(network_name: str, expected: str = FUJI):
    if network_name != expected:
        raise WrongNetworkError("This task is intended to be executed on the Fuji network.")


def deploy_contract(w3: Web3, account: Any, contract_name: str, *constructor_args) -> str:
    """Deploy a compiled contract and return its address."""
    abi, bytecode = load_artifact(contract_name)
    factory = w3.eth.contract(abi=abi, bytecode=bytecode)
    tx_hash = send_transaction(w3, account, factory.constructor(*constructor_args))

    receipt = w3.eth.wait_for_transaction_receipt(tx_hash, timeout=300)
    if receipt['status'] != 1:
        raise RuntimeError(f"Deployment of {contract_name} failed in transaction {tx_hash}")
    return receipt['contractAddress']


def run_setup(network_name: str, contract_name: str, w3: Optional[Web3] = None) -> str:
    """Compile, then deploy `contract_name` with the network's router as constructor argument."""
    require_network(network_name)

    network = get_network(network_name)
    router = network['router']
    private_key = require_private_key()

    logger.info("__Compiling Contracts__")
    compile_contracts()

    logger.info(f"Deploying {contract_name}.sol to {network_name}...")
    if w3 is None:
        if network['url'] == UNSET:
            raise ConfigurationError("AVALANCHE_FUJI_RPC_URL not provided - check your environment variables")
        w3 = connect(network['url'])
    account = w3.eth.account.from_key(private_key)

    address = deploy_contract(w3, account, contract_name, Web3.to_checksum_address(router))
    logger.info(f"Contract is deployed to {network_name} at {address}")
    return address


def _run_task(ctx, contract_name: str):
    try:
        address = run_setup(ctx.obj['network'], contract_name)
    except (ConfigurationError, ArtifactNotFoundError, ConnectionError) as e:
        raise click.ClickException(str(e))
    click.echo(address)


@cli.command('setup-nft-contract')
@click.pass_context
def setup_nft_contract(ctx):
    """deploy ProfileNFTContract.sol"""
    _run_task(ctx, "ProfileNFTContract")


@cli.command('setup-avalance-lending-contract')
@click.pass_context
def setup_avalanche_lending_contract(ctx):
    """deploy AvalancheLending.sol"""
    _run_task(ctx, "AvalancheLending")


@cli.command('setup-basic')
@click.pass_context
def setup_basic(ctx):
    """deploy BaseCase.sol"""
    _run_task(ctx, "BaseCase")
