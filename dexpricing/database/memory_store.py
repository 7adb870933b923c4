# dexpricing/database/memory_store.py

from pathlib import Path
from typing import Dict, Iterable, Optional, Union

import msgspec

from ..core.logging import LoggingMixin
from ..types import BUNDLE_ID, Bundle, EntityKind, EntitySnapshot, Pool, Token
from .interfaces import Entity, EntityStoreInterface


def load_snapshot(path: Union[str, Path]) -> EntitySnapshot:
    """Decode an entity snapshot from a .json, .yaml or .yml file"""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Snapshot file not found: {path}")

    raw = path.read_bytes()
    suffix = path.suffix.lower()
    if suffix == '.json':
        return msgspec.json.decode(raw, type=EntitySnapshot)
    if suffix in ('.yaml', '.yml'):
        return msgspec.yaml.decode(raw, type=EntitySnapshot)
    raise ValueError(f"Unsupported snapshot format: {path.suffix}")


class InMemoryEntityStore(EntityStoreInterface, LoggingMixin):
    """Entity store over an in-memory snapshot. Keys are lowercase addresses."""

    def __init__(
        self,
        tokens: Iterable[Token] = (),
        pools: Iterable[Pool] = (),
        bundle: Optional[Bundle] = None,
    ):
        self._tokens: Dict[str, Token] = {token.id.lower(): token for token in tokens}
        self._pools: Dict[str, Pool] = {pool.id.lower(): pool for pool in pools}
        self._bundle = bundle

        self.log_debug("Entity store loaded",
                       token_count=len(self._tokens),
                       pool_count=len(self._pools),
                       has_bundle=bundle is not None)

    @classmethod
    def from_snapshot(cls, snapshot: EntitySnapshot) -> 'InMemoryEntityStore':
        return cls(tokens=snapshot.tokens, pools=snapshot.pools, bundle=snapshot.bundle)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'InMemoryEntityStore':
        return cls.from_snapshot(load_snapshot(path))

    @property
    def pools(self) -> Iterable[Pool]:
        return self._pools.values()

    def load(self, kind: EntityKind, entity_id: str) -> Optional[Entity]:
        if kind == EntityKind.TOKEN:
            return self._tokens.get(entity_id.lower())
        if kind == EntityKind.POOL:
            return self._pools.get(entity_id.lower())
        if kind == EntityKind.BUNDLE:
            return self._bundle if entity_id == BUNDLE_ID else None
        raise ValueError(f"Unknown entity kind: {kind}")
