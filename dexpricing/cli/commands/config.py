# dexpricing/cli/commands/config.py

"""
Configuration CLI Commands
"""

import click
import msgspec


@click.group()
def config():
    """Inspect pricing configuration"""
    pass


@config.command('show')
@click.pass_context
def show(ctx):
    """Print the resolved pricing configuration as JSON

    Examples:
        config show
        --network okexchain config show
        --config pricing.yaml config show
    """
    cli_context = ctx.obj['cli_context']

    try:
        runtime_config = cli_context.runtime_config
    except (ValueError, FileNotFoundError, msgspec.ValidationError) as e:
        raise click.ClickException(f"Failed to load configuration: {e}")

    payload = msgspec.json.format(msgspec.json.encode(runtime_config.pricing), indent=2)
    click.echo(payload.decode())
