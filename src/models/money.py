"""
Exact decimal helpers.

Amounts are kept as ``Decimal`` with the scale they were given in. Binary
floats are refused outright: ``Decimal(0.1)`` is not ``Decimal("0.1")``.
"""

from decimal import (
    Context,
    Decimal,
    DecimalException,
    DivisionByZero,
    Inexact,
    InvalidOperation,
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    Overflow,
    Rounded,
)

from src.models.exceptions import InvalidAmountError

# Any result that would be rounded or overflow raises instead.
EXACT = Context(
    prec=MAX_PREC,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
    traps=[InvalidOperation, DivisionByZero, Overflow, Inexact, Rounded],
)


def to_decimal(value) -> Decimal:
    """
    Coerce an amount to ``Decimal`` without losing its scale.

    Args:
        value: A Decimal, int, or numeric string

    Returns:
        The value as a finite Decimal

    Raises:
        InvalidAmountError: If the value is a float, a bool, malformed, or not finite
    """
    if isinstance(value, bool) or isinstance(value, float):
        raise InvalidAmountError(
            f"Amount {value!r} must be a Decimal, int or string, not {type(value).__name__}"
        )
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, str)):
        try:
            result = Decimal(value.strip() if isinstance(value, str) else value)
        except InvalidOperation:
            raise InvalidAmountError(f"Invalid amount: {value!r}") from None
    else:
        raise InvalidAmountError(f"Unsupported amount type: {type(value).__name__}")

    if not result.is_finite():
        raise InvalidAmountError(f"Amount must be finite: {value!r}")
    return result


def to_positive_decimal(value) -> Decimal:
    """Coerce an operation amount, rejecting zero and negatives."""
    amount = to_decimal(value)
    if amount <= 0:
        raise InvalidAmountError(f"Amount must be greater than zero: {amount}")
    return amount


def to_plain_string(value: Decimal) -> str:
    """Render a decimal exactly, without exponent notation."""
    return format(value, "f")


def exact_add(a: Decimal, b: Decimal) -> Decimal:
    """
    Add two decimals without rounding.

    Raises:
        InvalidAmountError: If the exact sum cannot be represented
    """
    try:
        return EXACT.add(a, b)
    except DecimalException as err:
        raise InvalidAmountError(f"Cannot represent {a} + {b} exactly") from err


def exact_subtract(a: Decimal, b: Decimal) -> Decimal:
    """Subtract b from a without rounding; see exact_add."""
    try:
        return EXACT.subtract(a, b)
    except DecimalException as err:
        raise InvalidAmountError(f"Cannot represent {a} - {b} exactly") from err
