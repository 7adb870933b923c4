# dexpricing/types/model/entities.py

import enum
from decimal import Decimal
from typing import List, Optional

from msgspec import Struct, field

from ..constants import BUNDLE_ID, ZERO_BD
from ..new import EntityId, EvmAddress


class EntityKind(str, enum.Enum):
    TOKEN = "token"
    POOL = "pool"
    BUNDLE = "bundle"


class Token(Struct, frozen=True):
    id: EvmAddress
    derived_eth: Optional[Decimal] = field(default=None, name="derivedETH")
    symbol: Optional[str] = None
    decimals: int = 18

    @property
    def derived_eth_or_zero(self) -> Decimal:
        return self.derived_eth if self.derived_eth is not None else ZERO_BD


class Pool(Struct, frozen=True):
    id: EvmAddress
    token0: EvmAddress
    token1: EvmAddress
    reserve0: Decimal = ZERO_BD
    reserve1: Decimal = ZERO_BD
    reserve_eth: Decimal = field(default=ZERO_BD, name="reserveETH")
    token0_price: Decimal = field(default=ZERO_BD, name="token0Price")
    token1_price: Decimal = field(default=ZERO_BD, name="token1Price")
    liquidity_provider_count: int = field(default=0, name="liquidityProviderCount")

    @property
    def is_degenerate(self) -> bool:
        # spot prices are meaningless while either side is empty
        return self.reserve0.is_zero() or self.reserve1.is_zero()

    def reserve_of(self, side: int) -> Decimal:
        return self.reserve0 if side == 0 else self.reserve1

    def price_of(self, side: int) -> Decimal:
        return self.token0_price if side == 0 else self.token1_price

    def side_of(self, token: str) -> Optional[int]:
        token = token.lower()
        if self.token0.lower() == token:
            return 0
        if self.token1.lower() == token:
            return 1
        return None


class Bundle(Struct, frozen=True):
    eth_price: Decimal = field(default=ZERO_BD, name="ethPrice")
    id: EntityId = EntityId(BUNDLE_ID)


class EntitySnapshot(Struct):
    """Point-in-time view of the entities the pricing functions read"""
    tokens: List[Token] = []
    pools: List[Pool] = []
    bundle: Optional[Bundle] = None
