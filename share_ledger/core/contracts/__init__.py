"""
Contract Validation Module

Модуль для валидации JSON контрактов ledger'а.
"""

from .validators import (
    ContractValidator,
    LedgerSnapshotValidator,
    SchemaLoader,
    TransactionRecordValidator,
    validate_ledger_snapshot,
    validate_transaction_record,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "TransactionRecordValidator",
    "LedgerSnapshotValidator",
    # Functions
    "validate_transaction_record",
    "validate_ledger_snapshot",
]
