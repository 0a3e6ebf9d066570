"""
Ledger errors — закрытая таксономия ошибок ledger'а.

Все ошибки локально восстановимы вызывающей стороной. Операции ledger'а
возвращают их в LedgerResult; исключение LedgerError поднимается только
при явном unwrap().
"""

from enum import Enum


class LedgerErrorKind(str, Enum):
    """Причина отказа в операции ledger'а"""

    ZERO_SHARES = "zero_shares"  # purchase/sell с shares == 0
    INVALID_SELL = "invalid_sell"  # Продажа больше, чем во владении
    INVALID_PURCHASE = "invalid_purchase"  # Переполнение количества акций
    NO_SYMBOL_HISTORY = "no_symbol_history"  # Нет транзакций по символу

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES: dict[LedgerErrorKind, str] = {
    LedgerErrorKind.ZERO_SHARES: "Cannot perform transaction with zero shares",
    LedgerErrorKind.INVALID_SELL: "Cannot sell more shares than owned",
    LedgerErrorKind.INVALID_PURCHASE: "Too many shares purchased",
    LedgerErrorKind.NO_SYMBOL_HISTORY: "No history for symbol",
}


class LedgerError(Exception):
    """Ошибка ledger'а, поднятая из LedgerResult.unwrap()."""

    def __init__(self, kind: LedgerErrorKind, details: str = ""):
        self.kind = kind
        self.details = details
        message = kind.message if not details else f"{kind.message}: {details}"
        super().__init__(message)
