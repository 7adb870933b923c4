# dexpricing/core/config.py

import os
from pathlib import Path
from typing import Mapping, Optional, Union

import msgspec
import msgspec.structs
from msgspec import Struct

from ..config.networks import get_network_config
from ..types import PricingConfig
from .logging import INFO, PricingLogger, log_with_context

ENV_PREFIX = "DEXPRICING_"
DEFAULT_NETWORK = "okexchain"


def load_pricing_config(path: Union[str, Path]) -> PricingConfig:
    """Decode a PricingConfig from a .yaml, .yml or .json file"""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Pricing config file not found: {path}")

    raw = path.read_bytes()
    suffix = path.suffix.lower()
    if suffix in ('.yaml', '.yml'):
        return msgspec.yaml.decode(raw, type=PricingConfig)
    if suffix == '.json':
        return msgspec.json.decode(raw, type=PricingConfig)
    raise ValueError(f"Unsupported config format: {path.suffix}")


class RuntimeConfig(Struct, frozen=True):
    network: str
    pricing: PricingConfig
    rpc_endpoint: Optional[str] = None
    factory_address: Optional[str] = None
    log_level: Optional[str] = None
    log_dir: Optional[Path] = None

    @classmethod
    def from_env(cls, env_vars: Optional[Mapping[str, str]] = None,
                 config_file: Optional[Union[str, Path]] = None,
                 network: Optional[str] = None) -> 'RuntimeConfig':
        """
        Build runtime configuration from the environment.

        Explicit config_file and network arguments win over DEXPRICING_CONFIG_FILE
        and DEXPRICING_NETWORK. A config file replaces the network preset.
        """
        logger = PricingLogger.get_logger('core.config')

        if env_vars is None:
            from dotenv import load_dotenv
            load_dotenv()
            env_vars = os.environ

        def env(name: str) -> Optional[str]:
            value = env_vars.get(f"{ENV_PREFIX}{name}")
            return value if value else None

        network = network or env("NETWORK") or DEFAULT_NETWORK
        config_file = config_file or env("CONFIG_FILE")

        if config_file:
            pricing = load_pricing_config(config_file)
        else:
            pricing = get_network_config(network)

        min_lp_count = env("MIN_LP_COUNT")
        if min_lp_count is not None:
            try:
                count = int(min_lp_count)
            except ValueError:
                raise ValueError(f"{ENV_PREFIX}MIN_LP_COUNT must be an integer, got {min_lp_count!r}") from None
            if count < 0:
                raise ValueError(f"{ENV_PREFIX}MIN_LP_COUNT must be non-negative, got {count}")
            pricing = msgspec.structs.replace(pricing, minimum_liquidity_provider_count=count)

        log_dir = env("LOG_DIR")

        config = cls(
            network=network,
            pricing=pricing,
            rpc_endpoint=env("RPC_URL"),
            factory_address=env("FACTORY_ADDRESS"),
            log_level=env("LOG_LEVEL"),
            log_dir=Path(log_dir) if log_dir else None,
        )

        log_with_context(logger, INFO, "Runtime configuration loaded",
                         network=network,
                         config_file=str(config_file) if config_file else None,
                         whitelist_size=len(pricing.whitelist))
        return config
