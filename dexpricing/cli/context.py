# dexpricing/cli/context.py

"""
CLI context: resolves configuration once and builds pricing services over
entity snapshots.
"""

from pathlib import Path
from typing import Dict, Optional, Union

from ..clients.factory_client import FactoryPairLookup
from ..clients.interfaces import PairLookupInterface
from ..clients.static_pairs import StaticPairLookup
from ..core.config import RuntimeConfig
from ..core.logging import LoggingMixin, PricingLogger
from ..database.memory_store import InMemoryEntityStore
from ..services.pricing_service import PricingService

DEFAULT_CLI_LOG_LEVEL = "WARNING"


class CLIContext(LoggingMixin):
    """Lazily loads runtime config and caches one PricingService per snapshot file"""

    def __init__(self, config_file: Optional[str] = None, network: Optional[str] = None,
                 verbose: bool = False):
        self.config_file = config_file
        self.network = network
        self.verbose = verbose
        self._runtime_config: Optional[RuntimeConfig] = None
        self._services: Dict[Path, PricingService] = {}

    @property
    def runtime_config(self) -> RuntimeConfig:
        if self._runtime_config is None:
            runtime_config = RuntimeConfig.from_env(
                config_file=self.config_file, network=self.network
            )
            self._configure_logging(runtime_config)
            self._runtime_config = runtime_config
        return self._runtime_config

    def _configure_logging(self, runtime_config: RuntimeConfig) -> None:
        # --verbose beats DEXPRICING_LOG_LEVEL
        if self.verbose:
            log_level = "DEBUG"
        else:
            log_level = runtime_config.log_level or DEFAULT_CLI_LOG_LEVEL

        PricingLogger.configure(
            log_dir=runtime_config.log_dir,
            log_level=log_level,
            console_enabled=True,
            file_enabled=runtime_config.log_dir is not None,
            structured_format=False,
            force=True,
        )

    def _pair_lookup(self, store: InMemoryEntityStore) -> PairLookupInterface:
        runtime_config = self.runtime_config
        if runtime_config.factory_address and runtime_config.rpc_endpoint:
            return FactoryPairLookup(runtime_config.factory_address,
                                     endpoint_url=runtime_config.rpc_endpoint)
        return StaticPairLookup.from_pools(store.pools)

    def get_pricing_service(self, snapshot_path: Union[str, Path]) -> PricingService:
        path = Path(snapshot_path).resolve()
        if path not in self._services:
            store = InMemoryEntityStore.from_file(path)
            pair_lookup = self._pair_lookup(store)
            self.log_debug("Snapshot loaded for pricing", snapshot=str(path),
                           pair_lookup=type(pair_lookup).__name__)
            self._services[path] = PricingService(
                config=self.runtime_config.pricing,
                store=store,
                pair_lookup=pair_lookup,
            )
        return self._services[path]
