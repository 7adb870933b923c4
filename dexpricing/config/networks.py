# dexpricing/config/networks.py

"""
Network presets for pricing configuration.

OKExChain: WOKT is the native asset. Basket pools are USDK-WOKT and
USDC-WOKT (stable is token0, WOKT is token1) and WOKT-USDT (WOKT is token0).
"""

from decimal import Decimal
from typing import Dict

from ..types import EvmAddress, PricingConfig, StablecoinPool


WOKT_ADDRESS = EvmAddress('0x70c1c53e991f31981d592c2d865383ac0d212225')

OKEXCHAIN = PricingConfig(
    native_token=WOKT_ADDRESS,
    whitelist=(
        WOKT_ADDRESS,                                            # WOKT
        EvmAddress('0x533367b864d9b9aa59d0dcb6554df0c89feef1ff'),  # USDK
        EvmAddress('0x3e33590013b24bf21d4ccca3a965ea10e570d5b2'),  # USDC
        EvmAddress('0xe579156f9decc4134b5e3a30a24ac46bb8b01281'),  # USDT
        EvmAddress('0x09973e7e3914eb5ba69c7c025f30ab9446e3e4e0'),  # BTCK
        EvmAddress('0xdf950cecf33e64176ada5dd733e170a56d11478e'),  # ETHK
        EvmAddress('0x72f8fa5da80dc6e20e00d02724cf05ebd302c35f'),  # DOTK
        EvmAddress('0xf6a0dc1fd1d2c0122ab075d7ef93ad79f02ccb93'),  # FILK
        EvmAddress('0xd616388f6533b6f1c31968a305fbee1727f55850'),  # LTCK
        EvmAddress('0x4888097d1b29b439c55c6d3e44031ee658237de3'),  # KKT
        EvmAddress('0x6fd9db63dbc6be452ae7b0fe9995c81d967870bb'),  # NAS
    ),
    stablecoin_pools=(
        StablecoinPool(
            address=EvmAddress('0xc3a9967c7ab0a4312e225feef19103168995643d'),
            native_side=1,
            label='USDK-WOKT',
        ),
        StablecoinPool(
            address=EvmAddress('0x4a8123ac977380198241e9edc64a986e483ba75d'),
            native_side=1,
            label='USDC-WOKT',
        ),
        StablecoinPool(
            address=EvmAddress('0x695ef962b4ee88ed193148e486208d58d184d203'),
            native_side=0,
            label='WOKT-USDT',
        ),
    ),
    minimum_usd_threshold_new_pairs=Decimal('1'),
    minimum_liquidity_threshold_eth=Decimal('1'),
    # deployed indexes compare the LP count against 1
    minimum_liquidity_provider_count=1,
)

NETWORKS: Dict[str, PricingConfig] = {
    'okexchain': OKEXCHAIN,
}


def get_network_config(name: str) -> PricingConfig:
    try:
        return NETWORKS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown network: {name}. Available: {', '.join(sorted(NETWORKS))}"
        ) from None
