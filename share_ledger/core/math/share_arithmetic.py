"""
Share Arithmetic — Checked Share-Count Primitives

Модуль обеспечивает безопасную арифметику над количеством акций:
- Проверенное сложение (overflow guard) и вычитание (underflow guard)
- Валидация аргумента shares (целое, неотрицательное)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Количество акций всегда в диапазоне [0, max_share_count]
2. Переполнение/уход в минус никогда не происходит (возвращается None)
3. Все операции детерминированы и не имеют побочных эффектов
"""

from typing import Final, Optional

# =============================================================================
# ГРАНИЦЫ ДИАПАЗОНА
# =============================================================================

# Минимальное количество акций по символу
MIN_SHARE_COUNT: Final[int] = 0

# Максимальное представимое количество акций (unsigned 32-bit)
MAX_SHARE_COUNT: Final[int] = 2**32 - 1


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_share_argument(shares: int, name: str = "shares") -> None:
    """
    Валидация аргумента shares для транзакции.

    Ноль допустим на этом уровне: нулевые транзакции отклоняются
    ledger'ом как доменная ошибка, а не как ошибка программиста.

    Args:
        shares: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        TypeError: Если shares не int (bool не допускается)
        ValueError: Если shares < 0
    """
    if isinstance(shares, bool) or not isinstance(shares, int):
        raise TypeError(f"{name} must be an int, got {type(shares).__name__}")

    if shares < MIN_SHARE_COUNT:
        raise ValueError(f"{name} must be non-negative, got {shares}")


def validate_max_share_count(max_share_count: int) -> None:
    """
    Валидация верхней границы количества акций.

    Raises:
        TypeError: Если значение не int
        ValueError: Если значение <= 0
    """
    if isinstance(max_share_count, bool) or not isinstance(max_share_count, int):
        raise TypeError(
            f"max_share_count must be an int, got {type(max_share_count).__name__}"
        )

    if max_share_count <= MIN_SHARE_COUNT:
        raise ValueError(f"max_share_count must be positive, got {max_share_count}")


def is_zero_shares(shares: int) -> bool:
    """Проверка нулевого количества акций."""
    return shares == 0


# =============================================================================
# ПРОВЕРЕННАЯ АРИФМЕТИКА
# =============================================================================


def checked_add_shares(
    current: int,
    shares: int,
    max_share_count: int = MAX_SHARE_COUNT,
) -> Optional[int]:
    """
    Сложение с защитой от переполнения.

    Args:
        current: Текущее количество акций
        shares: Добавляемое количество
        max_share_count: Верхняя граница диапазона

    Returns:
        current + shares, либо None если результат > max_share_count

    Examples:
        >>> checked_add_shares(1, 2)
        3
        >>> checked_add_shares(MAX_SHARE_COUNT, 1) is None
        True
    """
    new_count = current + shares
    if new_count > max_share_count:
        return None
    return new_count


def checked_sub_shares(current: int, shares: int) -> Optional[int]:
    """
    Вычитание с защитой от ухода ниже нуля.

    Args:
        current: Текущее количество акций (0 для незнакомого символа)
        shares: Вычитаемое количество

    Returns:
        current - shares, либо None если shares > current

    Examples:
        >>> checked_sub_shares(5, 3)
        2
        >>> checked_sub_shares(0, 1) is None
        True
    """
    if shares > current:
        return None
    return current - shares
