"""wdkmcp - exact amount conversion for wallet tool servers."""

from ._version import __version__
from .core import (
    AMOUNT_CONSTANTS,
    AmountErrorCode,
    AmountParseError,
    format_base_units_to_amount,
    parse_amount_to_base_units,
)

__all__ = [
    "__version__",
    "AMOUNT_CONSTANTS",
    "AmountErrorCode",
    "AmountParseError",
    "parse_amount_to_base_units",
    "format_base_units_to_amount",
]
