# dexpricing/clients/interfaces.py
"""
Interface for resolving a token pair to its pool address.
"""
from abc import ABC, abstractmethod

from ..types import EvmAddress


class PairLookupInterface(ABC):
    """Maps an unordered token pair to the pool created for it."""

    @abstractmethod
    def get_pair(self, token_a: str, token_b: str) -> EvmAddress:
        """
        Get the pool address for a token pair.

        Args:
            token_a: Token address
            token_b: Token address

        Returns:
            Lowercase pool address, or ZERO_ADDRESS when no pool exists
        """
        pass
