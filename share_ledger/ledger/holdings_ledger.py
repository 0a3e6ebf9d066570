"""Ledger — учёт количества акций и истории транзакций по символам.

- holdings: symbol → текущее количество акций (нет символа ⇒ 0)
- history: symbol → append-only список TransactionRecord (нет символа ⇒ нет истории)
- purchase/sell проходят через один путь validate-then-apply (_transact)
- Любая отклонённая операция не изменяет ни holdings, ни history
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Generic, Iterator, Optional, TypeVar

from share_ledger.core.domain.errors import LedgerError, LedgerErrorKind
from share_ledger.core.domain.snapshot import LedgerSnapshot
from share_ledger.core.domain.transaction import (
    FIXED_EPOCH_TS_UTC_MS,
    TransactionKind,
    TransactionRecord,
    fixed_epoch_clock,
    ts_utc_ms_to_datetime,
)
from share_ledger.core.math.share_arithmetic import (
    MAX_SHARE_COUNT,
    checked_add_shares,
    checked_sub_shares,
    is_zero_shares,
    validate_max_share_count,
    validate_share_argument,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class LedgerConfig:
    """Конфигурация ledger'а.

    - max_share_count: верхняя граница количества акций по символу
    - clock: источник времени записей (UTC миллисекунды); по умолчанию
      всегда FIXED_EPOCH_TS_UTC_MS
    """
    max_share_count: int = MAX_SHARE_COUNT
    clock: Callable[[], int] = field(default=fixed_epoch_clock)

    def __post_init__(self):
        validate_max_share_count(self.max_share_count)
        if not callable(self.clock):
            raise TypeError(f"clock must be callable, got {type(self.clock).__name__}")


@dataclass(frozen=True)
class LedgerResult(Generic[T]):
    """Результат операции ledger'а."""

    ok: bool
    value: Optional[T] = None
    error: Optional[LedgerErrorKind] = None

    # Диагностика
    details: str = ""

    def __post_init__(self):
        if self.ok and self.error is not None:
            raise ValueError(f"successful result must not carry error, got {self.error.value}")
        if not self.ok and self.error is None:
            raise ValueError("failed result must carry an error kind")

    @classmethod
    def success(cls, value: Optional[T] = None, details: str = "") -> "LedgerResult[T]":
        return cls(ok=True, value=value, error=None, details=details)

    @classmethod
    def failure(cls, error: LedgerErrorKind, details: str = "") -> "LedgerResult[T]":
        return cls(ok=False, value=None, error=error, details=details)

    def unwrap(self) -> Optional[T]:
        """Значение успешного результата.

        Raises:
            LedgerError: если результат — отказ
        """
        if self.error is not None:
            raise LedgerError(self.error, self.details)
        return self.value


class Ledger:
    """Ledger акций: holdings и history, изменяемые только вместе.

    Порядок проверок в _transact:
    1. shares == 0 → ZERO_SHARES
    2. Новое количество вне [0, max_share_count] → INVALID_SELL / INVALID_PURCHASE
    3. PASS → запись holdings и добавление TransactionRecord одним шагом

    Продажа незнакомого символа — INVALID_SELL (текущее количество
    считается равным 0), а не NO_SYMBOL_HISTORY.
    """

    def __init__(self, config: Optional[LedgerConfig] = None):
        self.config = config or LedgerConfig()
        self._holdings: dict[str, int] = {}
        self._history: dict[str, list[TransactionRecord]] = {}

    @classmethod
    def create(cls, config: Optional[LedgerConfig] = None) -> "Ledger":
        """Новый пустой ledger."""
        return cls(config)

    @staticmethod
    def fixed_date_time() -> datetime:
        """Фиксированный момент времени всех записей (1970-01-01T00:00:00Z)."""
        return ts_utc_ms_to_datetime(FIXED_EPOCH_TS_UTC_MS)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def is_empty(self) -> bool:
        return not self._holdings

    def get_share_count(self, symbol: str) -> int:
        return self._holdings.get(symbol, 0)

    def get_history(self, symbol: str) -> LedgerResult[tuple[TransactionRecord, ...]]:
        """История транзакций по символу в порядке применения.

        Возвращает tuple frozen записей: через него нельзя изменить ledger.
        """
        records = self._history.get(symbol)
        if records is None:
            return LedgerResult.failure(
                LedgerErrorKind.NO_SYMBOL_HISTORY,
                details=f"symbol={symbol!r}",
            )
        return LedgerResult.success(tuple(records))

    def symbols(self) -> tuple[str, ...]:
        """Символы с историей, в порядке первой транзакции."""
        return tuple(self._history)

    def snapshot(self) -> LedgerSnapshot:
        """Копия holdings и history на текущий момент."""
        return LedgerSnapshot(
            holdings=dict(self._holdings),
            history={symbol: tuple(records) for symbol, records in self._history.items()},
        )

    def __len__(self) -> int:
        return len(self._holdings)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._history

    def __iter__(self) -> Iterator[str]:
        return iter(self.symbols())

    def __repr__(self) -> str:
        return f"Ledger(symbols={len(self)}, holdings={self._holdings!r})"

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def purchase(self, symbol: str, shares: int) -> LedgerResult[None]:
        return self._transact(symbol, shares, TransactionKind.PURCHASE)

    def sell(self, symbol: str, shares: int) -> LedgerResult[None]:
        return self._transact(symbol, shares, TransactionKind.SELL)

    def _transact(
        self,
        symbol: str,
        shares: int,
        kind: TransactionKind,
    ) -> LedgerResult[None]:
        """Единственный путь изменения состояния ledger'а.

        Args:
            symbol: символ инструмента (без нормализации)
            shares: количество акций (int >= 0)
            kind: PURCHASE или SELL

        Returns:
            LedgerResult с ok=True, либо с причиной отказа

        Raises:
            TypeError/ValueError: shares не int или отрицательный
        """
        validate_share_argument(shares)

        # 1. Нулевая транзакция
        if is_zero_shares(shares):
            return self._reject(symbol, shares, kind, LedgerErrorKind.ZERO_SHARES)

        # 2. Новое количество с проверкой диапазона
        current = self.get_share_count(symbol)
        if kind == TransactionKind.PURCHASE:
            new_count = checked_add_shares(current, shares, self.config.max_share_count)
            if new_count is None:
                return self._reject(
                    symbol, shares, kind, LedgerErrorKind.INVALID_PURCHASE,
                    details=f"current={current} max_share_count={self.config.max_share_count}",
                )
        else:
            new_count = checked_sub_shares(current, shares)
            if new_count is None:
                return self._reject(
                    symbol, shares, kind, LedgerErrorKind.INVALID_SELL,
                    details=f"current={current}",
                )

        # Запись валидируется до изменения состояния
        record = TransactionRecord(ts_utc_ms=self.config.clock(), shares=shares, kind=kind)

        # 3. Apply
        self._holdings[symbol] = new_count
        self._history.setdefault(symbol, []).append(record)

        logger.debug(
            "[LEDGER] applied kind=%s symbol=%s shares=%s new_count=%s",
            kind.value, symbol, shares, new_count,
        )
        return LedgerResult.success(details=f"{kind.value} {symbol} {shares} -> {new_count}")

    def _reject(
        self,
        symbol: str,
        shares: int,
        kind: TransactionKind,
        error: LedgerErrorKind,
        details: str = "",
    ) -> LedgerResult[None]:
        logger.info(
            "[LEDGER] rejected kind=%s symbol=%s shares=%s reason=%s",
            kind.value, symbol, shares, error.value,
        )
        base = f"{kind.value} {symbol} {shares}"
        return LedgerResult.failure(error, details=f"{base}: {details}" if details else base)
