from .interfaces import EntityStoreInterface
from .memory_store import InMemoryEntityStore, load_snapshot

__all__ = ["EntityStoreInterface", "InMemoryEntityStore", "load_snapshot"]
