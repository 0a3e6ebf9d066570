"""
Тесты для доменных моделей: TransactionRecord, LedgerSnapshot, LedgerErrorKind

Проверяет:
1. Создание и валидацию моделей Pydantic
2. Immutability (frozen=True)
3. Согласованность holdings и history в снапшоте
4. Сериализацию JSON
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from share_ledger import Ledger
from share_ledger.core.domain import (
    FIXED_EPOCH_TS_UTC_MS,
    LedgerError,
    LedgerErrorKind,
    LedgerSnapshot,
    TransactionKind,
    TransactionRecord,
    fixed_epoch_clock,
)


# =============================================================================
# TRANSACTION RECORD TESTS
# =============================================================================


class TestTransactionRecord:
    """Тесты для модели TransactionRecord"""

    @pytest.fixture
    def purchase_record(self) -> TransactionRecord:
        return TransactionRecord(ts_utc_ms=FIXED_EPOCH_TS_UTC_MS, shares=3, kind=TransactionKind.PURCHASE)

    def test_record_creation(self, purchase_record: TransactionRecord) -> None:
        assert purchase_record.shares == 3
        assert purchase_record.kind == TransactionKind.PURCHASE
        assert purchase_record.is_purchase()
        assert not purchase_record.is_sell()

    def test_record_immutable(self, purchase_record: TransactionRecord) -> None:
        """Запись должна быть immutable (frozen=True)"""
        with pytest.raises(ValidationError):
            purchase_record.shares = 10  # type: ignore

    def test_record_timestamp_is_epoch(self, purchase_record: TransactionRecord) -> None:
        assert purchase_record.timestamp() == datetime(1970, 1, 1, tzinfo=timezone.utc)

    def test_signed_shares(self) -> None:
        sell = TransactionRecord(ts_utc_ms=0, shares=4, kind=TransactionKind.SELL)
        buy = TransactionRecord(ts_utc_ms=0, shares=4, kind=TransactionKind.PURCHASE)
        assert sell.signed_shares() == -4
        assert buy.signed_shares() == 4

    @pytest.mark.parametrize("shares", [0, -1])
    def test_record_requires_positive_shares(self, shares: int) -> None:
        with pytest.raises(ValidationError) as exc_info:
            TransactionRecord(ts_utc_ms=0, shares=shares, kind=TransactionKind.PURCHASE)
        assert "shares" in str(exc_info.value)

    def test_record_rejects_unknown_kind(self) -> None:
        with pytest.raises(ValidationError):
            TransactionRecord(ts_utc_ms=0, shares=1, kind="dividend")

    def test_record_kind_from_string(self) -> None:
        record = TransactionRecord(ts_utc_ms=0, shares=1, kind="sell")
        assert record.kind is TransactionKind.SELL

    def test_record_json_roundtrip(self, purchase_record: TransactionRecord) -> None:
        data = purchase_record.model_dump(mode="json")
        assert data == {"ts_utc_ms": 0, "shares": 3, "kind": "purchase"}
        assert TransactionRecord.model_validate_json(purchase_record.model_dump_json()) == purchase_record

    def test_fixed_epoch_clock(self) -> None:
        assert fixed_epoch_clock() == FIXED_EPOCH_TS_UTC_MS == 0


# =============================================================================
# SNAPSHOT TESTS
# =============================================================================


class TestLedgerSnapshot:
    """Тесты для модели LedgerSnapshot"""

    def test_snapshot_of_empty_ledger(self) -> None:
        snapshot = Ledger().snapshot()
        assert snapshot.is_empty()
        assert snapshot.total_shares() == 0

    def test_snapshot_reflects_ledger(self) -> None:
        ledger = Ledger()
        ledger.purchase("IBM", 5).unwrap()
        ledger.sell("IBM", 2).unwrap()
        ledger.purchase("AAPL", 1).unwrap()

        snapshot = ledger.snapshot()

        assert snapshot.holdings == {"IBM": 3, "AAPL": 1}
        assert [r.kind for r in snapshot.history["IBM"]] == [TransactionKind.PURCHASE, TransactionKind.SELL]
        assert snapshot.total_shares() == 4

    def test_snapshot_is_detached_from_ledger(self) -> None:
        ledger = Ledger()
        ledger.purchase("IBM", 1).unwrap()
        snapshot = ledger.snapshot()

        ledger.purchase("IBM", 1).unwrap()

        assert snapshot.holdings["IBM"] == 1
        assert len(snapshot.history["IBM"]) == 1

    def test_snapshot_rejects_diverged_holdings(self) -> None:
        record = TransactionRecord(ts_utc_ms=0, shares=2, kind=TransactionKind.PURCHASE)
        with pytest.raises(ValidationError) as exc_info:
            LedgerSnapshot(holdings={"IBM": 3}, history={"IBM": (record,)})
        assert "net history" in str(exc_info.value)

    def test_snapshot_rejects_symbol_without_history(self) -> None:
        with pytest.raises(ValidationError):
            LedgerSnapshot(holdings={"IBM": 0}, history={})

    def test_snapshot_rejects_empty_history(self) -> None:
        with pytest.raises(ValidationError):
            LedgerSnapshot(holdings={"IBM": 0}, history={"IBM": ()})

    def test_snapshot_rejects_negative_holdings(self) -> None:
        with pytest.raises(ValidationError):
            LedgerSnapshot(holdings={"IBM": -1}, history={})


# =============================================================================
# ERROR TAXONOMY TESTS
# =============================================================================


class TestLedgerErrors:
    """Тесты для LedgerErrorKind и LedgerError"""

    @pytest.mark.parametrize(
        "kind,message",
        [
            (LedgerErrorKind.ZERO_SHARES, "Cannot perform transaction with zero shares"),
            (LedgerErrorKind.INVALID_SELL, "Cannot sell more shares than owned"),
            (LedgerErrorKind.INVALID_PURCHASE, "Too many shares purchased"),
            (LedgerErrorKind.NO_SYMBOL_HISTORY, "No history for symbol"),
        ],
    )
    def test_error_messages(self, kind: LedgerErrorKind, message: str) -> None:
        assert kind.message == message
        assert str(LedgerError(kind)) == message

    def test_error_with_details(self) -> None:
        error = LedgerError(LedgerErrorKind.NO_SYMBOL_HISTORY, "symbol='IBM'")
        assert error.kind == LedgerErrorKind.NO_SYMBOL_HISTORY
        assert str(error) == "No history for symbol: symbol='IBM'"
