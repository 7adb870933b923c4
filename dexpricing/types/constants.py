# dexpricing/types/constants.py

from decimal import Decimal

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

BUNDLE_ID = "1"

ZERO_BD = Decimal("0")
ONE_BD = Decimal("1")
TWO_BD = Decimal("2")
