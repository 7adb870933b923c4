# dexpricing/cli/__main__.py

"""
Pricing CLI

Usage: python -m dexpricing.cli [command] [options]
"""

import click

from dexpricing.cli.context import DEFAULT_CLI_LOG_LEVEL, CLIContext
from dexpricing.core.logging import PricingLogger


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--config', 'config_file', type=click.Path(exists=True, dir_okay=False),
              help='Pricing config file (.yaml or .json), replaces the network preset')
@click.option('--network', help='Network preset name (default: okexchain)')
@click.pass_context
def cli(ctx, verbose, config_file, network):
    """DEX pricing CLI

    Evaluates native/USD prices, token derived prices and tracked
    volume/liquidity against entity snapshot files.
    """
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose
    ctx.obj['cli_context'] = CLIContext(
        config_file=config_file, network=network, verbose=verbose
    )

    PricingLogger.configure(
        log_level="DEBUG" if verbose else DEFAULT_CLI_LOG_LEVEL,
        console_enabled=True,
        file_enabled=False,
        structured_format=False,
        force=True,
    )


from dexpricing.cli.commands.config import config
from dexpricing.cli.commands.pricing import pricing

cli.add_command(config)
cli.add_command(pricing)


if __name__ == '__main__':
    cli()
