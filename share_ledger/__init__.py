"""
share_ledger — in-process ledger of share holdings and transaction history.

Contains:
- share_ledger/ledger/          : Ledger aggregate (purchase/sell/history)
- share_ledger/core/domain/     : Immutable domain models and error taxonomy
- share_ledger/core/math/       : Checked share-count arithmetic
- share_ledger/core/contracts/  : JSON Schema contracts
"""

from share_ledger.core.domain import (
    LedgerError,
    LedgerErrorKind,
    LedgerSnapshot,
    TransactionKind,
    TransactionRecord,
)
from share_ledger.ledger import Ledger, LedgerConfig, LedgerResult

__all__ = [
    "Ledger",
    "LedgerConfig",
    "LedgerResult",
    "LedgerError",
    "LedgerErrorKind",
    "LedgerSnapshot",
    "TransactionKind",
    "TransactionRecord",
]
