# dexpricing/utils/decimals.py
"""
Decimal helpers for pricing arithmetic.

All pricing math runs inside PRICE_CONTEXT: 34 significant digits (the
precision of the index's BigDecimal columns) with division by zero, invalid
operations and overflow trapped so an unguarded division fails loudly.
"""

from contextlib import contextmanager
from decimal import (
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
    ROUND_HALF_EVEN,
    localcontext,
)
from typing import Iterator, Optional, Union

from ..types.constants import ZERO_BD


PRICE_CONTEXT = Context(
    prec=34,
    rounding=ROUND_HALF_EVEN,
    traps=[DivisionByZero, InvalidOperation, Overflow],
)

DecimalLike = Union[Decimal, int, str]


@contextmanager
def price_context() -> Iterator[Context]:
    """Run the enclosed block in a thread-local copy of PRICE_CONTEXT"""
    with localcontext(PRICE_CONTEXT) as ctx:
        yield ctx


def to_decimal(value: Optional[DecimalLike]) -> Decimal:
    """Convert value to Decimal, None becomes zero. Floats are rejected."""
    if value is None:
        return ZERO_BD
    if isinstance(value, bool) or isinstance(value, float):
        raise TypeError(f"Refusing to convert {type(value).__name__} to Decimal: {value!r}")
    if isinstance(value, str):
        value = value.strip()
        if value == "":
            return ZERO_BD
    try:
        result = Decimal(value)
    except InvalidOperation as e:
        raise ValueError(f"Invalid decimal value: {value!r}") from e
    if not result.is_finite():
        raise ValueError(f"Decimal value must be finite: {value!r}")
    return result


def safe_div(numerator: Decimal, denominator: Decimal) -> Decimal:
    """Divide, returning zero instead of faulting when the denominator is zero"""
    if denominator.is_zero():
        return ZERO_BD
    return numerator / denominator
