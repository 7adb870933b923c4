# dexpricing/types/configs/pricing.py

from decimal import Decimal
from typing import Literal, Optional, Tuple

from msgspec import Struct

from ...utils.addresses import normalize_address
from ..constants import ONE_BD
from ..new import EvmAddress


class StablecoinPool(Struct, frozen=True):
    """A stablecoin/native pool in the USD basket.

    native_side is the side (0 or 1) of the pool that holds the native asset.
    """
    address: EvmAddress
    native_side: Literal[0, 1]
    label: Optional[str] = None

    def __post_init__(self):
        if normalize_address(self.address) != self.address:
            raise ValueError(f"Stablecoin pool address must be lowercase hex: {self.address}")

    @property
    def stable_side(self) -> int:
        return 1 - self.native_side


class PricingConfig(Struct, frozen=True):
    """Static pricing configuration.

    whitelist is a priority list: the anchor walker takes the first qualifying
    anchor in this order. stablecoin_pools is (first, second, third) for the
    basket cascade.
    """
    native_token: EvmAddress
    whitelist: Tuple[EvmAddress, ...]
    stablecoin_pools: Tuple[StablecoinPool, StablecoinPool, StablecoinPool]
    minimum_usd_threshold_new_pairs: Decimal = ONE_BD
    minimum_liquidity_threshold_eth: Decimal = ONE_BD
    minimum_liquidity_provider_count: int = 5

    def __post_init__(self):
        for address in (self.native_token,) + tuple(self.whitelist):
            if normalize_address(address) != address:
                raise ValueError(f"Config addresses must be lowercase hex: {address}")
        if len(set(self.whitelist)) != len(self.whitelist):
            raise ValueError("Whitelist contains duplicate addresses")
        if self.minimum_usd_threshold_new_pairs < 0:
            raise ValueError("minimum_usd_threshold_new_pairs must be non-negative")
        if self.minimum_liquidity_threshold_eth < 0:
            raise ValueError("minimum_liquidity_threshold_eth must be non-negative")
        if self.minimum_liquidity_provider_count < 0:
            raise ValueError("minimum_liquidity_provider_count must be non-negative")

    def is_whitelisted(self, address: str) -> bool:
        return address.lower() in self.whitelist

    def is_native(self, address: str) -> bool:
        return address.lower() == self.native_token
