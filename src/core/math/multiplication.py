"""
Multiplication — умножение BigUInt через таблицу умножения

Школьное умножение, ускоренное таблицей кратных (times-table):
- Таблица max × d для d = 0..9 строится один раз за вызов
  (O(1) сложений длины len(max)) и отбрасывается после вызова
- Частичные произведения накапливаются через add_shifted:
  масштабирование на 10^i и сложение в одном проходе

Между вызовами ничего не кэшируется.
"""

import logging
from typing import Final

from src.core.domain.biguint import BigUInt
from src.core.math.shifted_addition import add_shifted

logger = logging.getLogger(__name__)


# =============================================================================
# TIMES-TABLE
# =============================================================================

# Разложение кратного d на сумму двух меньших кратных: d → (i, j), d = i + j
# Каждая запись ссылается только на уже построенные записи
TIMES_TABLE_RECIPE: Final[tuple[tuple[int, int], ...]] = (
    (1, 1),  # ×2
    (2, 1),  # ×3
    (2, 2),  # ×4
    (3, 2),  # ×5
    (3, 3),  # ×6
    (4, 3),  # ×7
    (4, 4),  # ×8
    (5, 4),  # ×9
)


def build_times_table(multiplicand: BigUInt) -> tuple[BigUInt, ...]:
    """
    Таблица кратных multiplicand × d для d = 0..9.

    Запись 0 — канонический ноль, запись 1 — сам multiplicand,
    остальные — сумма двух ранее построенных записей (TIMES_TABLE_RECIPE).

    Args:
        multiplicand: Множимое (обычно более длинный операнд)

    Returns:
        Кортеж из 10 BigUInt, индекс — цифра

    Examples:
        >>> [str(x) for x in build_times_table(BigUInt.from_u64(12))][:4]
        ['0', '12', '24', '36']
    """
    table = [BigUInt(), multiplicand]
    for i, j in TIMES_TABLE_RECIPE:
        table.append(add_shifted(table[i], table[j]))
    return tuple(table)


# =============================================================================
# MULTIPLY
# =============================================================================


def multiply(a: BigUInt, b: BigUInt) -> BigUInt:
    """
    Произведение a × b.

    Алгоритм:
        1. min — операнд с меньшим числом цифр, max — другой
        2. Таблица кратных max × 0..9
        3. Для каждой цифры min от младшей (i — расстояние от младшей):
           total = add_shifted(total, table[digit], i)

    Коммутативно, определено для нуля.

    Args:
        a: Первый множитель
        b: Второй множитель

    Returns:
        Новый BigUInt

    Examples:
        >>> multiply(BigUInt.from_u64(642), BigUInt.from_u64(8537)).to_text()
        '5480754'
    """
    if len(a) > len(b):
        shorter, longer = b, a
    else:
        shorter, longer = a, b

    table = build_times_table(longer)

    total = BigUInt()
    for i, digit in enumerate(reversed(shorter.buffer)):
        total = add_shifted(total, table[digit], i)

    logger.debug(
        "Multiplied %d-digit by %d-digit value into %d digits",
        len(longer),
        len(shorter),
        len(total),
    )
    return total
