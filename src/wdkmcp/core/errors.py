from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class AmountErrorCode(str, Enum):
    EMPTY_STRING = "EMPTY_STRING"
    INVALID_FORMAT = "INVALID_FORMAT"
    NEGATIVE_AMOUNT = "NEGATIVE_AMOUNT"
    EXCESSIVE_PRECISION = "EXCESSIVE_PRECISION"
    INVALID_DECIMALS = "INVALID_DECIMALS"
    SCIENTIFIC_NOTATION_PRECISION = "SCIENTIFIC_NOTATION_PRECISION"

    def __str__(self) -> str:
        return self.value


@dataclass(eq=False)
class AmountParseError(ValueError):
    """Raised when a human-readable amount cannot be converted to base units.

    ``code`` is stable and meant for programmatic handling; ``message`` is
    suitable for showing to the user who typed the amount.
    """

    code: AmountErrorCode
    message: str
    amount: Optional[Any] = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


def create_amount_error(code: AmountErrorCode, message: str, amount: Optional[Any] = None) -> AmountParseError:
    return AmountParseError(code=code, message=message, amount=amount)
