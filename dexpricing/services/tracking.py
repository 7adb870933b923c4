# dexpricing/services/tracking.py
"""
Tracked volume and liquidity attribution.

Only amounts of whitelisted tokens count toward aggregate USD figures:
- volume: both whitelisted -> average of the two USD values, one -> that
  side's USD value, neither -> zero
- liquidity: both whitelisted -> sum, one -> double that side, neither -> zero

Volume additionally zeroes trades through pools with too few liquidity
providers and too little reserve value, which are cheap to manipulate.
"""

from decimal import Decimal
from typing import Tuple

from ..core.logging import DEBUG, WARNING, PricingLogger, log_with_context
from ..database.interfaces import EntityStoreInterface
from ..types import TWO_BD, ZERO_BD, Pool, PricingConfig, Token
from ..utils.decimals import price_context

logger = PricingLogger.get_logger('services.tracking')


def load_eth_price(store: EntityStoreInterface) -> Decimal:
    bundle = store.get_bundle()
    if bundle is None:
        log_with_context(logger, WARNING, "Bundle not found, native price treated as zero")
        return ZERO_BD
    return bundle.eth_price


def usd_prices(token0: Token, token1: Token, eth_price: Decimal) -> Tuple[Decimal, Decimal]:
    with price_context():
        return (token0.derived_eth_or_zero * eth_price,
                token1.derived_eth_or_zero * eth_price)


def _below_new_pair_minimum(pool: Pool, price0: Decimal, price1: Decimal,
                            whitelisted0: bool, whitelisted1: bool,
                            config: PricingConfig) -> bool:
    threshold = config.minimum_usd_threshold_new_pairs
    with price_context():
        reserve0_usd = pool.reserve0 * price0
        reserve1_usd = pool.reserve1 * price1

        if whitelisted0 and whitelisted1:
            return reserve0_usd + reserve1_usd < threshold
        if whitelisted0:
            return reserve0_usd * TWO_BD < threshold
        if whitelisted1:
            return reserve1_usd * TWO_BD < threshold
    return False


def get_tracked_volume_usd(
    token_amount0: Decimal,
    token0: Token,
    token_amount1: Decimal,
    token1: Token,
    pool: Pool,
    store: EntityStoreInterface,
    config: PricingConfig,
) -> Decimal:
    """
    USD value of a swap that counts toward tracked volume.

    Args:
        token_amount0: Amount of token0 traded
        token0: token0 snapshot
        token_amount1: Amount of token1 traded
        token1: token1 snapshot
        pool: Pool the trade went through
        store: Entity store, read for the bundle
        config: Pricing configuration

    Returns:
        Tracked USD volume, zero when neither token is whitelisted or the pool
        fails the low-liquidity guard
    """
    price0, price1 = usd_prices(token0, token1, load_eth_price(store))
    whitelisted0 = config.is_whitelisted(token0.id)
    whitelisted1 = config.is_whitelisted(token1.id)

    if pool.liquidity_provider_count < config.minimum_liquidity_provider_count:
        if _below_new_pair_minimum(pool, price0, price1, whitelisted0, whitelisted1, config):
            log_with_context(logger, DEBUG, "Volume ignored for thin low-LP pool",
                             pool_address=pool.id)
            return ZERO_BD

    with price_context():
        if whitelisted0 and whitelisted1:
            return (token_amount0 * price0 + token_amount1 * price1) / TWO_BD
        if whitelisted0:
            return token_amount0 * price0
        if whitelisted1:
            return token_amount1 * price1

    return ZERO_BD


def get_tracked_liquidity_usd(
    token_amount0: Decimal,
    token0: Token,
    token_amount1: Decimal,
    token1: Token,
    store: EntityStoreInterface,
    config: PricingConfig,
) -> Decimal:
    """USD value of pool reserves that counts toward tracked liquidity"""
    price0, price1 = usd_prices(token0, token1, load_eth_price(store))
    whitelisted0 = config.is_whitelisted(token0.id)
    whitelisted1 = config.is_whitelisted(token1.id)

    with price_context():
        if whitelisted0 and whitelisted1:
            return token_amount0 * price0 + token_amount1 * price1
        # only one side is trusted, count it for both
        if whitelisted0:
            return token_amount0 * price0 * TWO_BD
        if whitelisted1:
            return token_amount1 * price1 * TWO_BD

    return ZERO_BD
