"""
LedgerSnapshot — Модель снапшота состояния ledger'а

Immutable Pydantic модель: копия holdings и history на один момент.
model_dump(mode="json") соответствует контракту ledger_snapshot.json.
"""

from pydantic import BaseModel, Field, NonNegativeInt, model_validator

from .transaction import TransactionRecord


class LedgerSnapshot(BaseModel):
    """
    Снапшот ledger'а.

    Immutable модель (frozen=True). Инвариант: количество акций по каждому
    символу равно сумме signed_shares() его истории.
    """

    holdings: dict[str, NonNegativeInt] = Field(
        default_factory=dict, description="Текущее количество акций по символу"
    )
    history: dict[str, tuple[TransactionRecord, ...]] = Field(
        default_factory=dict, description="Хронологическая история по символу"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_holdings_match_history(self) -> "LedgerSnapshot":
        """Проверка согласованности holdings и history"""
        if set(self.holdings) != set(self.history):
            raise ValueError(
                f"holdings symbols {sorted(self.holdings)} "
                f"do not match history symbols {sorted(self.history)}"
            )
        for symbol, records in self.history.items():
            if not records:
                raise ValueError(f"history for {symbol!r} must not be empty")
            net = sum(record.signed_shares() for record in records)
            if net != self.holdings[symbol]:
                raise ValueError(
                    f"holdings[{symbol!r}]={self.holdings[symbol]} "
                    f"does not equal net history {net}"
                )
        return self

    def is_empty(self) -> bool:
        return not self.holdings

    def total_shares(self) -> int:
        """Суммарное количество акций по всем символам."""
        return sum(self.holdings.values())
