# dexpricing/utils/addresses.py

import re

from ..types.new import EvmAddress


_ADDRESS_RE = re.compile(r"^0x[0-9a-f]{40}$")


def normalize_address(address: str) -> EvmAddress:
    """Lowercase and validate a hex address"""
    if not isinstance(address, str):
        raise ValueError(f"Address must be a string, got {type(address).__name__}")
    normalized = address.strip().lower()
    if not _ADDRESS_RE.match(normalized):
        raise ValueError(f"Invalid EVM address: {address!r}")
    return EvmAddress(normalized)
