# dexpricing/types/__init__.py

from .constants import ZERO_ADDRESS, BUNDLE_ID, ZERO_BD, ONE_BD, TWO_BD

# New Types
from .new import (
    EvmAddress,
    EntityId,
)

# Entity Types
from .model.entities import (
    EntityKind,
    Token,
    Pool,
    Bundle,
    EntitySnapshot,
)

# Configuration Types
from .configs.pricing import (
    StablecoinPool,
    PricingConfig,
)
