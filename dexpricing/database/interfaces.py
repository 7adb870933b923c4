# dexpricing/database/interfaces.py
"""
Entity store interface.

The pricing functions never write entities. They read Token, Pool and the
singleton Bundle through this interface, and a missing entity is an ordinary
outcome (not indexed yet), never an error.
"""
from abc import ABC, abstractmethod
from typing import Optional, Union

from ..types import BUNDLE_ID, Bundle, EntityKind, Pool, Token

Entity = Union[Token, Pool, Bundle]


class EntityStoreInterface(ABC):
    """Read-only keyed lookup of entity snapshots."""

    @abstractmethod
    def load(self, kind: EntityKind, entity_id: str) -> Optional[Entity]:
        """
        Load an entity snapshot.

        Args:
            kind: Entity kind
            entity_id: Address for tokens and pools, "1" for the bundle

        Returns:
            The snapshot, or None when the store has no such entity
        """
        pass

    def get_token(self, address: str) -> Optional[Token]:
        return self.load(EntityKind.TOKEN, address.lower())

    def get_pool(self, address: str) -> Optional[Pool]:
        return self.load(EntityKind.POOL, address.lower())

    def get_bundle(self) -> Optional[Bundle]:
        return self.load(EntityKind.BUNDLE, BUNDLE_ID)
