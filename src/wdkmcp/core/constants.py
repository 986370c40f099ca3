from __future__ import annotations

from typing import Dict

AMOUNT_CONSTANTS: Dict[str, object] = {
    # 10**77 is the largest power of ten below 2**256
    "MAX_DECIMALS": 77,
    "GROUPING_SEPARATOR": ",",
    "DECIMAL_POINT": ".",
}
