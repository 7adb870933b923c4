# dexpricing/cli/commands/pricing.py

"""
Pricing CLI Commands

Every command reads an entity snapshot file (.json or .yaml) holding the
bundle, tokens and pools. Pair lookups go to the factory contract when
DEXPRICING_FACTORY_ADDRESS and DEXPRICING_RPC_URL are both set, otherwise they
are answered from the snapshot's pools.
"""

import click
import msgspec

from ...types import Token
from ...utils.decimals import to_decimal

SNAPSHOT_OPTION = click.option(
    '--snapshot', required=True, type=click.Path(exists=True, dir_okay=False),
    help='Entity snapshot file (.json or .yaml)',
)


class DecimalParamType(click.ParamType):
    name = 'decimal'

    def convert(self, value, param, ctx):
        try:
            return to_decimal(value)
        except (ValueError, TypeError):
            self.fail(f"{value!r} is not a valid decimal", param, ctx)


DECIMAL = DecimalParamType()


def _service(ctx, snapshot):
    try:
        return ctx.obj['cli_context'].get_pricing_service(snapshot)
    except (ValueError, FileNotFoundError, msgspec.ValidationError, msgspec.DecodeError,
            ConnectionError) as e:
        raise click.ClickException(f"Failed to load pricing inputs: {e}")


def _token(service, address) -> Token:
    token = service.store.get_token(address)
    if token is None:
        raise click.ClickException(f"Token not found in snapshot: {address}")
    return token


@click.group()
def pricing():
    """Price derivation and tracked value attribution"""
    pass


@pricing.command('eth-price')
@SNAPSHOT_OPTION
@click.pass_context
def eth_price(ctx, snapshot):
    """Native asset price in USD from the stablecoin basket

    Examples:
        pricing eth-price --snapshot snapshot.json
    """
    service = _service(ctx, snapshot)
    click.echo(str(service.get_eth_price_in_usd()))


@pricing.command('token-price')
@click.argument('address')
@SNAPSHOT_OPTION
@click.option('--usd', is_flag=True, help='Also print the USD price at the bundle price')
@click.pass_context
def token_price(ctx, address, snapshot, usd):
    """Derived native price of a token through whitelist anchors

    Examples:
        pricing token-price 0x09973e7e3914eb5ba69c7c025f30ab9446e3e4e0 --snapshot snapshot.json
    """
    service = _service(ctx, snapshot)
    token = service.store.get_token(address) or Token(id=address.lower())

    click.echo(f"derivedETH: {service.find_eth_per_token(token)}")
    if usd:
        click.echo(f"USD: {service.price_token_usd(token)}")


@pricing.command('tracked-volume')
@SNAPSHOT_OPTION
@click.option('--pool', 'pool_address', required=True, help='Pool the trade went through')
@click.option('--amount0', required=True, type=DECIMAL, help='token0 amount')
@click.option('--amount1', required=True, type=DECIMAL, help='token1 amount')
@click.pass_context
def tracked_volume(ctx, snapshot, pool_address, amount0, amount1):
    """Tracked USD volume for a trade

    Examples:
        pricing tracked-volume --snapshot snapshot.json --pool 0x... --amount0 10 --amount1 2.5
    """
    service = _service(ctx, snapshot)

    pool = service.store.get_pool(pool_address)
    if pool is None:
        raise click.ClickException(f"Pool not found in snapshot: {pool_address}")

    token0 = _token(service, pool.token0)
    token1 = _token(service, pool.token1)
    click.echo(str(service.get_tracked_volume_usd(amount0, token0, amount1, token1, pool)))


@pricing.command('tracked-liquidity')
@SNAPSHOT_OPTION
@click.option('--token0', 'token0_address', required=True, help='token0 address')
@click.option('--token1', 'token1_address', required=True, help='token1 address')
@click.option('--amount0', required=True, type=DECIMAL, help='token0 amount')
@click.option('--amount1', required=True, type=DECIMAL, help='token1 amount')
@click.pass_context
def tracked_liquidity(ctx, snapshot, token0_address, token1_address, amount0, amount1):
    """Tracked USD liquidity for a pair of reserve amounts

    Examples:
        pricing tracked-liquidity --snapshot snapshot.json --token0 0x... --token1 0x... --amount0 100 --amount1 4
    """
    service = _service(ctx, snapshot)

    token0 = _token(service, token0_address)
    token1 = _token(service, token1_address)
    click.echo(str(service.get_tracked_liquidity_usd(amount0, token0, amount1, token1)))
