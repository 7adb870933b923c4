# tests/test_anchor_walker.py

from decimal import Decimal

from dexpricing.clients.static_pairs import StaticPairLookup
from dexpricing.services.anchor_walker import find_eth_per_token

from conftest import BTC, MEME, NATIVE, USDX, USDY, ALT, address


ALT_NATIVE = address(0x1001)
ALT_USDX = address(0x1002)
ALT_BTC = address(0x1003)


def test_native_token_is_exactly_one(pricing_config, make_token, make_store, failing_pair_lookup):
    native = make_token(NATIVE, derived_eth='7')

    price = find_eth_per_token(native, make_store(), failing_pair_lookup, pricing_config)

    assert price == Decimal('1')


def test_unpriced_when_no_pool_exists(pricing_config, make_token, make_store):
    token = make_token(ALT)

    price = find_eth_per_token(token, make_store(), StaticPairLookup(), pricing_config)

    assert price == Decimal('0')


def test_unpriced_when_every_pool_is_below_threshold(pricing_config, make_token, make_pool,
                                                     make_store, pairs_for):
    pools = [
        make_pool(ALT_NATIVE, ALT, NATIVE, reserve0='100', reserve1='100', reserve_eth='0.5', token1_price='0.01'),
        make_pool(ALT_USDX, ALT, USDX, reserve0='100', reserve1='100', reserve_eth='1', token1_price='20'),
    ]
    store = make_store(tokens=[make_token(NATIVE, '1'), make_token(USDX, '0.0005')], pools=pools)

    price = find_eth_per_token(make_token(ALT), store, pairs_for(pools), pricing_config)

    assert price == Decimal('0')


def test_token0_side_uses_token1_price(pricing_config, make_token, make_pool, make_store, pairs_for):
    pools = [make_pool(ALT_USDX, ALT, USDX, reserve0='100', reserve1='100',
                       reserve_eth='10', token0_price='0.05', token1_price='20')]
    store = make_store(tokens=[make_token(USDX, '0.0005')], pools=pools)

    price = find_eth_per_token(make_token(ALT), store, pairs_for(pools), pricing_config)

    assert price == Decimal('0.0100')


def test_token1_side_uses_token0_price(pricing_config, make_token, make_pool, make_store, pairs_for):
    pools = [make_pool(ALT_BTC, BTC, ALT, reserve0='100', reserve1='100',
                       reserve_eth='50', token0_price='0.001', token1_price='1000')]
    store = make_store(tokens=[make_token(BTC, '15')], pools=pools)

    price = find_eth_per_token(make_token(ALT), store, pairs_for(pools), pricing_config)

    assert price == Decimal('0.015')


def test_first_anchor_wins_over_deeper_pool(pricing_config, make_token, make_pool, make_store, pairs_for):
    pools = [
        # USDX comes before BTC in the whitelist
        make_pool(ALT_USDX, ALT, USDX, reserve0='100', reserve1='100', reserve_eth='2', token1_price='20'),
        make_pool(ALT_BTC, ALT, BTC, reserve0='100', reserve1='100', reserve_eth='100000', token1_price='0.0001'),
    ]
    store = make_store(tokens=[make_token(USDX, '0.0005'), make_token(BTC, '15')], pools=pools)

    price = find_eth_per_token(make_token(ALT), store, pairs_for(pools), pricing_config)

    assert price == Decimal('0.0100')


def test_thin_anchor_pool_falls_through_to_next_anchor(pricing_config, make_token, make_pool,
                                                       make_store, pairs_for):
    pools = [
        make_pool(ALT_NATIVE, ALT, NATIVE, reserve0='100', reserve1='100', reserve_eth='0.9', token1_price='999'),
        make_pool(ALT_BTC, ALT, BTC, reserve0='100', reserve1='100', reserve_eth='30', token1_price='0.0002'),
    ]
    store = make_store(tokens=[make_token(NATIVE, '1'), make_token(BTC, '15')], pools=pools)

    price = find_eth_per_token(make_token(ALT), store, pairs_for(pools), pricing_config)

    assert price == Decimal('0.0030')


def test_pair_missing_from_store_is_skipped(pricing_config, make_token, make_pool, make_store, pairs_for):
    indexed = make_pool(ALT_BTC, ALT, BTC, reserve0='100', reserve1='100', reserve_eth='30', token1_price='0.0002')
    not_indexed = make_pool(ALT_NATIVE, ALT, NATIVE, reserve0='100', reserve1='100', reserve_eth='30', token1_price='0.5')
    store = make_store(tokens=[make_token(BTC, '15')], pools=[indexed])

    price = find_eth_per_token(make_token(ALT), store, pairs_for([not_indexed, indexed]), pricing_config)

    assert price == Decimal('0.0030')


def test_anchor_without_derived_price_still_wins(pricing_config, make_token, make_pool,
                                                  make_store, pairs_for):
    pools = [
        make_pool(ALT_USDX, ALT, USDX, reserve0='100', reserve1='100', reserve_eth='10', token1_price='20'),
        make_pool(ALT_BTC, ALT, BTC, reserve0='100', reserve1='100', reserve_eth='10', token1_price='0.0002'),
    ]
    store = make_store(tokens=[make_token(USDX, None), make_token(BTC, '15')], pools=pools)

    price = find_eth_per_token(make_token(ALT), store, pairs_for(pools), pricing_config)

    assert price == Decimal('0')


def test_whitelisted_token_is_priced_through_other_anchors(pricing_config, make_token, make_pool,
                                                           make_store, pairs_for):
    pools = [make_pool(address(0x2001), USDY, NATIVE, reserve0='100', reserve1='100',
                       reserve_eth='500', token1_price='0.0004')]
    store = make_store(tokens=[make_token(NATIVE, '1')], pools=pools)

    price = find_eth_per_token(make_token(USDY), store, pairs_for(pools), pricing_config)

    assert price == Decimal('0.0004')


def test_non_whitelisted_counterparty_is_never_an_anchor(pricing_config, make_token, make_pool,
                                                         make_store, pairs_for):
    pools = [make_pool(address(0x3001), ALT, MEME, reserve0='100', reserve1='100',
                       reserve_eth='1000', token1_price='3')]
    store = make_store(tokens=[make_token(MEME, '2')], pools=pools)

    assert find_eth_per_token(make_token(ALT), store, pairs_for(pools), pricing_config) == Decimal('0')


def test_empty_reserve_pool_is_skipped(pricing_config, make_token, make_pool, make_store, pairs_for):
    pools = [make_pool(ALT_USDX, ALT, USDX, reserve0='0', reserve1='1000', reserve_eth='10',
                       token1_price='20')]
    store = make_store(tokens=[make_token(USDX, '0.0005')], pools=pools)

    price = find_eth_per_token(make_token(ALT), store, pairs_for(pools), pricing_config)

    assert price == Decimal('0')


def test_empty_reserve_pool_falls_through_to_next_anchor(pricing_config, make_token, make_pool,
                                                         make_store, pairs_for):
    pools = [
        make_pool(ALT_USDX, ALT, USDX, reserve0='500', reserve1='0', reserve_eth='10', token1_price='20'),
        make_pool(ALT_BTC, ALT, BTC, reserve0='100', reserve1='100', reserve_eth='30', token1_price='0.0002'),
    ]
    store = make_store(tokens=[make_token(USDX, '0.0005'), make_token(BTC, '15')], pools=pools)

    price = find_eth_per_token(make_token(ALT), store, pairs_for(pools), pricing_config)

    assert price == Decimal('0.0030')
