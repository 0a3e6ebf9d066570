"""
Core math modules для share_ledger

Арифметические примитивы над количеством акций с гарантией диапазона.
"""

from share_ledger.core.math.share_arithmetic import (
    MAX_SHARE_COUNT,
    MIN_SHARE_COUNT,
    checked_add_shares,
    checked_sub_shares,
    is_zero_shares,
    validate_max_share_count,
    validate_share_argument,
)

__all__ = [
    # Constants
    "MAX_SHARE_COUNT",
    "MIN_SHARE_COUNT",
    # Checked arithmetic
    "checked_add_shares",
    "checked_sub_shares",
    "is_zero_shares",
    # Validation
    "validate_share_argument",
    "validate_max_share_count",
]
