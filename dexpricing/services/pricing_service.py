# dexpricing/services/pricing_service.py

from decimal import Decimal

from ..clients.interfaces import PairLookupInterface
from ..core.logging import LoggingMixin
from ..database.interfaces import EntityStoreInterface
from ..types import Pool, PricingConfig, Token
from ..utils.decimals import price_context
from .anchor_walker import find_eth_per_token
from .stablecoin_basket import get_eth_price_in_usd
from .tracking import get_tracked_liquidity_usd, get_tracked_volume_usd, load_eth_price


class PricingService(LoggingMixin):
    """
    Pricing entry point for event handlers.

    Binds the pricing functions to one entity store, one pair lookup and one
    immutable configuration. Holds no other state, so a single instance can
    serve concurrent handlers.

    Handles:
    - Native asset USD price from the stablecoin basket
    - Token derived native price through whitelist anchors
    - Tracked volume and tracked liquidity in USD
    """

    def __init__(self, config: PricingConfig, store: EntityStoreInterface,
                 pair_lookup: PairLookupInterface):
        self.config = config
        self.store = store
        self.pair_lookup = pair_lookup

        self.log_info("PricingService initialized",
                      native_token=config.native_token,
                      whitelist_size=len(config.whitelist),
                      min_lp_count=config.minimum_liquidity_provider_count)

    def get_eth_price_in_usd(self) -> Decimal:
        return get_eth_price_in_usd(self.store, self.config)

    def find_eth_per_token(self, token: Token) -> Decimal:
        return find_eth_per_token(token, self.store, self.pair_lookup, self.config)

    def price_token_usd(self, token: Token) -> Decimal:
        """USD price of one unit of token at the current bundle price"""
        derived_eth = self.find_eth_per_token(token)
        with price_context():
            return derived_eth * load_eth_price(self.store)

    def get_tracked_volume_usd(self, token_amount0: Decimal, token0: Token,
                               token_amount1: Decimal, token1: Token, pool: Pool) -> Decimal:
        return get_tracked_volume_usd(token_amount0, token0, token_amount1, token1,
                                      pool, self.store, self.config)

    def get_tracked_liquidity_usd(self, token_amount0: Decimal, token0: Token,
                                  token_amount1: Decimal, token1: Token) -> Decimal:
        return get_tracked_liquidity_usd(token_amount0, token0, token_amount1, token1,
                                         self.store, self.config)
