"""Command line entry point collecting every task."""

import click

from config import configure_logging
from networks import DEFAULT_NETWORK


@click.group()
@click.option('--network', default=DEFAULT_NETWORK, envvar='FUNCTIONS_NETWORK', show_default=True,
              help='Network to run the task against')
@click.pass_context
def cli(ctx, network):
    """BetBlock Chainlink Functions tasks"""
    configure_logging()
    ctx.ensure_object(dict)
    ctx.obj['network'] = network


# Registers the deployment commands on the group
from . import deploy  # noqa: E402,F401


def main():
    cli(obj={})
