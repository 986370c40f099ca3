"""Amount conversion primitives."""

from .amount import MAX_DECIMALS, format_base_units_to_amount, parse_amount_to_base_units
from .constants import AMOUNT_CONSTANTS
from .errors import AmountErrorCode, AmountParseError, create_amount_error

__all__ = [
    "AMOUNT_CONSTANTS",
    "MAX_DECIMALS",
    "AmountErrorCode",
    "AmountParseError",
    "create_amount_error",
    "parse_amount_to_base_units",
    "format_base_units_to_amount",
]
