# dexpricing/types/new.py

from typing import NewType


EvmAddress = NewType('EvmAddress', str)
EntityId = NewType('EntityId', str)
