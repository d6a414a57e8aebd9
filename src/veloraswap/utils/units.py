"""Conversion between human-readable amounts and token base units."""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Union

from veloraswap.errors import AmountParseError

# Enough digits for uint256 values at any realistic decimals count
_PRECISION = 100

MAX_UINT256 = 2**256 - 1


def parse_units(amount: Union[str, Decimal], decimals: int) -> int:
    """Convert a decimal amount to integer base units.

    Fraction digits beyond ``decimals`` are rounded half-up.

    Args:
        amount: Human-readable amount, e.g. "1.5"
        decimals: Token decimals

    Returns:
        Amount in base units, e.g. 1500000 for "1.5" at 6 decimals

    Raises:
        AmountParseError: If the amount is not a finite number or its
            base-unit value does not fit in a uint256
    """
    if decimals < 0:
        raise AmountParseError(amount)

    with localcontext() as ctx:
        ctx.prec = _PRECISION
        try:
            value = Decimal(str(amount).strip())
            if not value.is_finite():
                raise AmountParseError(amount)
            scaled = value.scaleb(decimals).quantize(Decimal(1), rounding=ROUND_HALF_UP)
        except (InvalidOperation, ValueError):
            raise AmountParseError(amount) from None

        units = int(scaled)

    if not 0 <= units <= MAX_UINT256:
        raise AmountParseError(amount)
    return units


def format_units(value: Union[int, str], decimals: int) -> str:
    """Convert integer base units back to a decimal string.

    Trailing fraction zeros are dropped: 1500000 at 6 decimals -> "1.5".
    """
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        amount = Decimal(int(value)).scaleb(-decimals)
        text = format(amount, "f")

    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text or "0"
