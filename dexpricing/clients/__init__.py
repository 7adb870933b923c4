from .interfaces import PairLookupInterface
from .static_pairs import StaticPairLookup
from .factory_client import FactoryPairLookup

__all__ = ["PairLookupInterface", "StaticPairLookup", "FactoryPairLookup"]
