"""Exact conversion between human-readable amounts and integer base units.

Amounts such as ``"2.01"`` or ``"1,000.50"`` are converted to base units
(wei, satoshis, ...) by pure string manipulation; the value never passes
through a float or a ``Decimal`` context, so ``"0.1"`` at 18 decimals is
exactly ``10**17``.
"""

from __future__ import annotations

import logging
import re
from typing import Any, NamedTuple, Tuple, Union

from .constants import AMOUNT_CONSTANTS
from .errors import AmountErrorCode, create_amount_error

logger = logging.getLogger(__name__)

MAX_DECIMALS = int(AMOUNT_CONSTANTS["MAX_DECIMALS"])
GROUPING_SEPARATOR = str(AMOUNT_CONSTANTS["GROUPING_SEPARATOR"])
DECIMAL_POINT = str(AMOUNT_CONSTANTS["DECIMAL_POINT"])

# Integer part is either plain digits or thousands-grouped digits.
_AMOUNT_PATTERN = re.compile(
    r"(?P<integer>[0-9]+|[0-9]{1,3}(?:,[0-9]{3})+)(?:\.(?P<fraction>[0-9]+))?"
)
_SCIENTIFIC_PATTERN = re.compile(r"(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)[eE][+-]?[0-9]+")


class _Rejection(NamedTuple):
    code: AmountErrorCode
    message: str


def _is_valid_decimals(decimals: Any) -> bool:
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        return False
    return 0 <= decimals <= MAX_DECIMALS


def _split_amount(amount: Any, decimals: Any) -> Union[_Rejection, Tuple[str, str]]:
    """Validate ``amount`` and return its integer and fractional digit strings.

    Checks run in a fixed order and the first failure wins, so e.g. ``"-1e5"``
    is reported as a negative amount rather than as scientific notation.
    """
    if not _is_valid_decimals(decimals):
        return _Rejection(
            AmountErrorCode.INVALID_DECIMALS,
            f"Invalid decimals value: {decimals!r}. Must be a non-negative integer <= {MAX_DECIMALS}.",
        )

    if not isinstance(amount, str):
        return _Rejection(
            AmountErrorCode.INVALID_FORMAT,
            f"Amount must be a string, received {type(amount).__name__}.",
        )

    trimmed = amount.strip()
    if not trimmed.replace(GROUPING_SEPARATOR, ""):
        return _Rejection(AmountErrorCode.EMPTY_STRING, "Amount cannot be empty.")

    if trimmed.startswith("-"):
        return _Rejection(AmountErrorCode.NEGATIVE_AMOUNT, f'Negative amounts are not allowed: "{amount}".')

    if _SCIENTIFIC_PATTERN.fullmatch(trimmed.replace(GROUPING_SEPARATOR, "")):
        return _Rejection(
            AmountErrorCode.SCIENTIFIC_NOTATION_PRECISION,
            f'Scientific notation is not supported: "{amount}". Write the amount out in full (e.g., "1000000").',
        )

    match = _AMOUNT_PATTERN.fullmatch(trimmed)
    if match is None:
        return _Rejection(
            AmountErrorCode.INVALID_FORMAT,
            f'Invalid amount format: "{amount}". Expected a positive number (e.g., "100", "2.50", "1,000.00").',
        )

    integer_digits = match.group("integer").replace(GROUPING_SEPARATOR, "")
    fraction_digits = match.group("fraction") or ""
    if len(fraction_digits) > decimals:
        return _Rejection(
            AmountErrorCode.EXCESSIVE_PRECISION,
            f'Amount "{amount}" has {len(fraction_digits)} decimal places, but token only supports {decimals}. '
            "Please reduce precision to avoid unintended rounding.",
        )

    return integer_digits, fraction_digits


def parse_amount_to_base_units(amount: str, decimals: int) -> int:
    """Parse a human-readable amount string into integer base units.

    >>> parse_amount_to_base_units("2.01", 6)
    2010000
    >>> parse_amount_to_base_units("1,000.50", 6)
    1000500000

    Raises ``AmountParseError`` carrying an ``AmountErrorCode`` when the input
    is rejected. Amounts with more fractional digits than ``decimals`` are
    rejected rather than rounded.
    """
    result = _split_amount(amount, decimals)
    if isinstance(result, _Rejection):
        logger.debug("Rejected amount %r (decimals=%r): %s", amount, decimals, result.code.value)
        raise create_amount_error(result.code, result.message, amount)

    integer_digits, fraction_digits = result
    digits = integer_digits + fraction_digits.ljust(decimals, "0")
    try:
        return int(digits)
    except ValueError as exc:
        # int() refuses very long digit strings on interpreters with a conversion limit
        raise create_amount_error(
            AmountErrorCode.INVALID_FORMAT,
            f"Amount has too many digits ({len(digits)}).",
            amount,
        ) from exc


def format_base_units_to_amount(base_units: int, decimals: int) -> str:
    """Format integer base units as the canonical human-readable amount.

    No grouping separators, no trailing fractional zeros, and no decimal point
    when the fraction is zero. The result parses back to ``base_units``.
    """
    if isinstance(base_units, bool) or not isinstance(base_units, int):
        raise TypeError(f"base_units must be an int, received {type(base_units).__name__}")
    if base_units < 0:
        raise ValueError("base_units must be >= 0")
    if not _is_valid_decimals(decimals):
        raise ValueError(f"decimals must be an integer between 0 and {MAX_DECIMALS}")

    digits = str(base_units).rjust(decimals + 1, "0")
    if decimals == 0:
        return digits

    integer_part = digits[:-decimals]
    fraction_part = digits[-decimals:].rstrip("0")
    if not fraction_part:
        return integer_part
    return f"{integer_part}{DECIMAL_POINT}{fraction_part}"
