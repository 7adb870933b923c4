# dexpricing/__init__.py

"""
USD pricing and tracked volume/liquidity attribution for a DEX analytics index.
"""

from .services.pricing_service import PricingService
from .services.stablecoin_basket import get_eth_price_in_usd, basket_weights
from .services.anchor_walker import find_eth_per_token
from .services.tracking import get_tracked_volume_usd, get_tracked_liquidity_usd

__version__ = "0.1.0"

__all__ = [
    "PricingService",
    "get_eth_price_in_usd",
    "basket_weights",
    "find_eth_per_token",
    "get_tracked_volume_usd",
    "get_tracked_liquidity_usd",
]
