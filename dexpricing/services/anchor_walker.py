# dexpricing/services/anchor_walker.py
"""
Derived native price for a token via the whitelist anchors.

The whitelist is walked in order and the first anchor with a direct pool above
the liquidity threshold, holding both reserves, decides the price. This is a
first match, not a search for the deepest pool: whitelist order is the trust
ranking.
"""

from decimal import Decimal

from ..clients.interfaces import PairLookupInterface
from ..core.logging import DEBUG, WARNING, PricingLogger, log_with_context
from ..database.interfaces import EntityStoreInterface
from ..types import ONE_BD, ZERO_ADDRESS, ZERO_BD, Pool, PricingConfig, Token
from ..utils.decimals import price_context

logger = PricingLogger.get_logger('services.anchor_walker')


def _anchor_derived_eth(store: EntityStoreInterface, address: str) -> Decimal:
    anchor = store.get_token(address)
    if anchor is None or anchor.derived_eth is None:
        log_with_context(logger, DEBUG, "Anchor token has no derived price yet",
                         anchor_address=address)
        return ZERO_BD
    return anchor.derived_eth


def _price_through_pool(side: int, pool: Pool, store: EntityStoreInterface) -> Decimal:
    # other token per our token, times the other token's native price
    other_side = 1 - side
    other_token = pool.token1 if side == 0 else pool.token0
    with price_context():
        return pool.price_of(other_side) * _anchor_derived_eth(store, other_token)


def find_eth_per_token(token: Token, store: EntityStoreInterface,
                       pair_lookup: PairLookupInterface, config: PricingConfig) -> Decimal:
    token_address = token.id.lower()

    if config.is_native(token_address):
        return ONE_BD

    for anchor in config.whitelist:
        if anchor == token_address:
            continue

        pair_address = pair_lookup.get_pair(token_address, anchor)
        if pair_address.lower() == ZERO_ADDRESS:
            continue

        pool = store.get_pool(pair_address)
        if pool is None:
            log_with_context(logger, DEBUG, "Pair exists on chain but is not indexed",
                             token_address=token_address, anchor_address=anchor,
                             pool_address=pair_address)
            continue

        side = pool.side_of(token_address)
        if side is None:
            log_with_context(logger, WARNING, "Pair lookup returned a pool without the token",
                             token_address=token_address, anchor_address=anchor,
                             pool_address=pool.id)
            continue

        if pool.reserve_eth <= config.minimum_liquidity_threshold_eth:
            log_with_context(logger, DEBUG, "Anchor pool below liquidity threshold",
                             token_address=token_address, anchor_address=anchor,
                             pool_address=pool.id)
            continue

        if pool.is_degenerate:
            log_with_context(logger, WARNING, "Anchor pool has an empty reserve, spot price unusable",
                             token_address=token_address, anchor_address=anchor,
                             pool_address=pool.id)
            continue

        price = _price_through_pool(side, pool, store)

        log_with_context(logger, DEBUG, "Token priced through anchor",
                         token_address=token_address, anchor_address=anchor,
                         pool_address=pool.id, result=price)
        return price

    return ZERO_BD
