"""
Domain models and value objects.

Contains fundamental domain entities like TransactionRecord, LedgerSnapshot
and the closed ledger error taxonomy.
"""

from share_ledger.core.domain.errors import LedgerError, LedgerErrorKind
from share_ledger.core.domain.snapshot import LedgerSnapshot
from share_ledger.core.domain.transaction import (
    FIXED_EPOCH_TS_UTC_MS,
    TransactionKind,
    TransactionRecord,
    fixed_epoch_clock,
    ts_utc_ms_to_datetime,
)

__all__ = [
    # Transaction model
    "FIXED_EPOCH_TS_UTC_MS",
    "TransactionKind",
    "TransactionRecord",
    "fixed_epoch_clock",
    "ts_utc_ms_to_datetime",
    # Snapshot model
    "LedgerSnapshot",
    # Errors
    "LedgerError",
    "LedgerErrorKind",
]
