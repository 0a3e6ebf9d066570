"""Ledger — учёт акций и истории покупок/продаж по символам."""

from .holdings_ledger import (
    Ledger,
    LedgerConfig,
    LedgerResult,
)

__all__ = [
    "Ledger",
    "LedgerConfig",
    "LedgerResult",
]
