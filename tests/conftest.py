# tests/conftest.py
"""
pytest configuration and fixtures for pricing tests
"""

from decimal import Decimal

import pytest

from dexpricing.clients.interfaces import PairLookupInterface
from dexpricing.clients.static_pairs import StaticPairLookup
from dexpricing.core.logging import PricingLogger
from dexpricing.database.memory_store import InMemoryEntityStore
from dexpricing.types import Bundle, EvmAddress, Pool, PricingConfig, StablecoinPool, Token


def address(n: int) -> EvmAddress:
    return EvmAddress(f"0x{n:040x}")


NATIVE = address(0x1)
USDX = address(0x2)
USDY = address(0x3)
USDZ = address(0x4)
BTC = address(0x5)
ALT = address(0x77)
MEME = address(0x78)

POOL_A = address(0xA0)
POOL_B = address(0xB0)
POOL_C = address(0xC0)


class FailingPairLookup(PairLookupInterface):
    """Pair lookup that must never be consulted"""

    def get_pair(self, token_a, token_b):
        raise AssertionError(f"unexpected pair lookup {token_a}/{token_b}")


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    PricingLogger.reset()


@pytest.fixture
def pricing_config() -> PricingConfig:
    return PricingConfig(
        native_token=NATIVE,
        whitelist=(NATIVE, USDX, USDY, USDZ, BTC),
        stablecoin_pools=(
            StablecoinPool(address=POOL_A, native_side=1, label='USDX-NATIVE'),
            StablecoinPool(address=POOL_B, native_side=1, label='USDY-NATIVE'),
            StablecoinPool(address=POOL_C, native_side=1, label='USDZ-NATIVE'),
        ),
        minimum_usd_threshold_new_pairs=Decimal('100'),
        minimum_liquidity_threshold_eth=Decimal('1'),
        minimum_liquidity_provider_count=5,
    )


@pytest.fixture
def make_pool():
    """Factory for pool snapshots with decimal-string friendly arguments"""
    def _make(pool_id, token0, token1, reserve0='0', reserve1='0', reserve_eth='0',
              token0_price='0', token1_price='0', lp_count=10) -> Pool:
        return Pool(
            id=pool_id,
            token0=token0,
            token1=token1,
            reserve0=Decimal(reserve0),
            reserve1=Decimal(reserve1),
            reserve_eth=Decimal(reserve_eth),
            token0_price=Decimal(token0_price),
            token1_price=Decimal(token1_price),
            liquidity_provider_count=lp_count,
        )
    return _make


@pytest.fixture
def make_token():
    def _make(token_id, derived_eth=None, symbol=None) -> Token:
        return Token(
            id=token_id,
            derived_eth=Decimal(derived_eth) if derived_eth is not None else None,
            symbol=symbol,
        )
    return _make


@pytest.fixture
def make_store():
    def _make(tokens=(), pools=(), eth_price=None) -> InMemoryEntityStore:
        bundle = Bundle(eth_price=Decimal(eth_price)) if eth_price is not None else None
        return InMemoryEntityStore(tokens=tokens, pools=pools, bundle=bundle)
    return _make


@pytest.fixture
def failing_pair_lookup() -> PairLookupInterface:
    return FailingPairLookup()


@pytest.fixture
def pairs_for():
    def _make(pools) -> StaticPairLookup:
        return StaticPairLookup.from_pools(pools)
    return _make
