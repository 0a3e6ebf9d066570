"""
TransactionRecord — Модель завершённой транзакции

Immutable Pydantic модель, представляющая одну применённую покупку или продажу.
История по символу — append-only последовательность таких записей.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Final

from pydantic import BaseModel, Field


# =============================================================================
# ФИКСИРОВАННОЕ ВРЕМЯ
# =============================================================================

# Все записи получают один и тот же момент времени (epoch zero)
FIXED_EPOCH_TS_UTC_MS: Final[int] = 0


def fixed_epoch_clock() -> int:
    """Детерминированные часы: всегда возвращают FIXED_EPOCH_TS_UTC_MS."""
    return FIXED_EPOCH_TS_UTC_MS


def ts_utc_ms_to_datetime(ts_utc_ms: int) -> datetime:
    """Конверсия UTC миллисекунд в aware datetime."""
    return datetime.fromtimestamp(ts_utc_ms / 1000, tz=timezone.utc)


# =============================================================================
# ENUMS
# =============================================================================


class TransactionKind(str, Enum):
    """Тип транзакции"""

    PURCHASE = "purchase"  # Покупка (+shares)
    SELL = "sell"  # Продажа (-shares)


# =============================================================================
# TRANSACTION RECORD MODEL
# =============================================================================


class TransactionRecord(BaseModel):
    """
    Модель завершённой транзакции.

    Immutable модель (frozen=True). Записи никогда не изменяются и не удаляются
    после создания.
    """

    ts_utc_ms: int = Field(..., ge=0, description="Время транзакции (UTC, миллисекунды)")
    shares: int = Field(..., gt=0, description="Количество акций (всегда положительное)")
    kind: TransactionKind = Field(..., description="Тип транзакции (purchase/sell)")

    model_config = {"frozen": True}  # Immutable

    def timestamp(self) -> datetime:
        """Время транзакции как UTC datetime."""
        return ts_utc_ms_to_datetime(self.ts_utc_ms)

    def signed_shares(self) -> int:
        """
        Изменение количества акций со знаком.

        Returns:
            +shares для покупки, -shares для продажи
        """
        if self.kind == TransactionKind.PURCHASE:
            return self.shares
        return -self.shares

    def is_purchase(self) -> bool:
        return self.kind == TransactionKind.PURCHASE

    def is_sell(self) -> bool:
        return self.kind == TransactionKind.SELL
