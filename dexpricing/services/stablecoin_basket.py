# dexpricing/services/stablecoin_basket.py
"""
Native asset USD price from the stablecoin pool basket.

The basket is a priority cascade over three configured pools, not a uniform
average of whatever pools exist:

1. all three pools exist: reserve-weighted average over the three
2. first and third exist: reserve-weighted average over those two
3. only the third exists: its price directly
4. otherwise zero
"""

from decimal import Decimal
from typing import List, Optional, Sequence, Tuple

from ..core.logging import DEBUG, WARNING, PricingLogger, log_with_context
from ..database.interfaces import EntityStoreInterface
from ..types import ONE_BD, ZERO_BD, Pool, PricingConfig, StablecoinPool
from ..utils.decimals import price_context, safe_div

WEIGHT_QUANTUM = Decimal('1e-18')

logger = PricingLogger.get_logger('services.stablecoin_basket')


def native_reserve(pool: Pool, basket_pool: StablecoinPool) -> Decimal:
    """Reserve of the native asset held by the pool"""
    return pool.reserve_of(basket_pool.native_side)


def native_price_usd(pool: Pool, basket_pool: StablecoinPool) -> Decimal:
    """Stablecoin units per native unit, read from the stablecoin side's price field"""
    return pool.price_of(basket_pool.stable_side)


def basket_weights(reserves: Sequence[Decimal]) -> List[Decimal]:
    """
    Liquidity weights for a set of native reserves.

    Every weight but the last is quantized to 18 places and the last one takes
    the remainder, so the weights always sum to exactly one. A zero total gives
    an empty list.
    """
    if not reserves:
        return []

    with price_context():
        total = sum(reserves, ZERO_BD)
        if total.is_zero():
            return []

        weights = [safe_div(reserve, total).quantize(WEIGHT_QUANTUM) for reserve in reserves[:-1]]
        weights.append(ONE_BD - sum(weights, ZERO_BD))
        return weights


def weighted_native_price(members: Sequence[Tuple[Pool, StablecoinPool]]) -> Decimal:
    reserves = [native_reserve(pool, basket_pool) for pool, basket_pool in members]
    weights = basket_weights(reserves)

    if not weights:
        log_with_context(logger, WARNING, "Stablecoin basket has no native liquidity",
                         pool_address=[pool.id for pool, _ in members])
        return ZERO_BD

    with price_context():
        price = ZERO_BD
        for (pool, basket_pool), weight in zip(members, weights):
            price += native_price_usd(pool, basket_pool) * weight
        return price


def get_eth_price_in_usd(store: EntityStoreInterface, config: PricingConfig) -> Decimal:
    first_cfg, second_cfg, third_cfg = config.stablecoin_pools

    first: Optional[Pool] = store.get_pool(first_cfg.address)
    second: Optional[Pool] = store.get_pool(second_cfg.address)
    third: Optional[Pool] = store.get_pool(third_cfg.address)

    if first is not None and second is not None and third is not None:
        branch = 'three_pool'
        price = weighted_native_price([(first, first_cfg), (second, second_cfg), (third, third_cfg)])
    elif first is not None and third is not None:
        branch = 'two_pool'
        price = weighted_native_price([(first, first_cfg), (third, third_cfg)])
    elif third is not None:
        branch = 'single_pool'
        price = native_price_usd(third, third_cfg)
    else:
        branch = 'none'
        price = ZERO_BD

    log_with_context(logger, DEBUG, "Native price derived from stablecoin basket",
                     branch=branch, eth_price=price)
    return price
