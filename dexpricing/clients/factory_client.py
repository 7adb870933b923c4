# dexpricing/clients/factory_client.py

from typing import Optional

from web3 import Web3

from ..core.logging import LoggingMixin
from ..types import ZERO_ADDRESS, EvmAddress
from .interfaces import PairLookupInterface


FACTORY_GET_PAIR_ABI = [
    {
        "constant": True,
        "inputs": [
            {"internalType": "address", "name": "", "type": "address"},
            {"internalType": "address", "name": "", "type": "address"},
        ],
        "name": "getPair",
        "outputs": [{"internalType": "address", "name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function",
    }
]


class FactoryPairLookup(PairLookupInterface, LoggingMixin):
    """
    Resolves pairs through the AMM factory contract's getPair view.
    """

    def __init__(self, factory_address: str, endpoint_url: Optional[str] = None,
                 w3: Optional[Web3] = None):
        if w3 is None:
            if not endpoint_url:
                raise ValueError("endpoint_url is required when no Web3 instance is given")
            w3 = Web3(Web3.HTTPProvider(endpoint_url))
            if not w3.is_connected():
                raise ConnectionError("Failed to connect to RPC endpoint")

        self.w3 = w3
        self.factory_address = Web3.to_checksum_address(factory_address)
        self.contract = self.w3.eth.contract(address=self.factory_address, abi=FACTORY_GET_PAIR_ABI)

        self.log_info("FactoryPairLookup initialized", factory_address=self.factory_address)

    def get_pair(self, token_a: str, token_b: str) -> EvmAddress:
        pair = self.contract.functions.getPair(
            Web3.to_checksum_address(token_a),
            Web3.to_checksum_address(token_b),
        ).call()

        if not pair:
            return EvmAddress(ZERO_ADDRESS)
        return EvmAddress(str(pair).lower())
