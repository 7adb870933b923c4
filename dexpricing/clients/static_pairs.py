# dexpricing/clients/static_pairs.py

from typing import Dict, FrozenSet, Iterable

from ..types import ZERO_ADDRESS, EvmAddress, Pool
from .interfaces import PairLookupInterface


class StaticPairLookup(PairLookupInterface):
    """Pair lookup backed by a fixed token-pair -> pool mapping"""

    def __init__(self, pairs: Dict[FrozenSet[str], str] = None):
        self._pairs: Dict[FrozenSet[str], EvmAddress] = {}
        for key, pool_address in (pairs or {}).items():
            self._pairs[frozenset(token.lower() for token in key)] = EvmAddress(pool_address.lower())

    @classmethod
    def from_pools(cls, pools: Iterable[Pool]) -> 'StaticPairLookup':
        return cls({frozenset((pool.token0, pool.token1)): pool.id for pool in pools})

    def get_pair(self, token_a: str, token_b: str) -> EvmAddress:
        key = frozenset((token_a.lower(), token_b.lower()))
        return self._pairs.get(key, EvmAddress(ZERO_ADDRESS))

    def __len__(self) -> int:
        return len(self._pairs)
