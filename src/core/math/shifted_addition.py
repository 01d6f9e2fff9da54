"""
Shifted Addition — сложение со сдвигом на степень десяти

Единственный примитив сложения BigUInt:

    add_shifted(a, b, shift) = a + b × 10^shift

Сдвинутое значение b не материализуется: младшие shift позиций b
считаются нулевыми, позиции за пределами операндов дают цифру 0.
shift = 0 — обычное сложение. Используется везде, включая накопление
частичных произведений в multiplication.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ёмкость результата max(len(a), len(b) + shift) + 1 никогда не превышается
2. Ноль [0] обрабатывается как любое другое значение, без special case
3. Операнды не изменяются
"""

from typing import Iterable

from src.core.domain.biguint import BigUInt
from src.core.domain.integer_bounds import RADIX, validate_shift


# =============================================================================
# SHIFTED ADDITION
# =============================================================================


def add_shifted(a: BigUInt, b: BigUInt, shift: int = 0) -> BigUInt:
    """
    Вычисление a + b × 10^shift без промежуточного сдвинутого значения.

    Алгоритм:
        1. width = max(len(a), len(b) + shift)
        2. Проход по позициям от младшей к старшей; b даёт цифры только
           на позициях [shift, shift + len(b))
        3. sum = da + db + carry; цифра sum % 10, перенос sum // 10
        4. Остаточный перенос становится новой старшей цифрой

    Args:
        a: Несдвигаемое слагаемое
        b: Слагаемое, масштабируемое на 10^shift
        shift: Неотрицательный сдвиг (default: 0)

    Returns:
        Новый BigUInt (старшая цифра первой)

    Raises:
        pydantic.ValidationError: Если shift не int или отрицательный

    Examples:
        >>> add_shifted(BigUInt.from_u64(642), BigUInt.from_u64(8537)).to_text()
        '9179'
        >>> add_shifted(BigUInt.from_u64(1), BigUInt.from_u64(2), 3).to_text()
        '2001'
    """
    shift = validate_shift(shift)

    a_digits = a.buffer
    b_digits = b.buffer
    len_a = len(a_digits)
    len_b = len(b_digits)

    width = max(len_a, len_b + shift)
    capacity = width + 1

    # Заполняем с конца: младшая цифра в последнюю ячейку
    result = bytearray(capacity)
    cursor = capacity
    carry = 0

    for position in range(width):
        digit_a = a_digits[len_a - 1 - position] if position < len_a else 0
        offset = position - shift
        digit_b = b_digits[len_b - 1 - offset] if 0 <= offset < len_b else 0

        carry, digit = divmod(digit_a + digit_b + carry, RADIX)
        cursor -= 1
        result[cursor] = digit

    if carry:
        cursor -= 1
        result[cursor] = carry

    assert cursor >= 0, f"result exceeds capacity {capacity}"

    return BigUInt.from_buffer_unchecked(bytes(result[cursor:]))


def sum_all(values: Iterable[BigUInt]) -> BigUInt:
    """
    Сумма последовательности BigUInt, начиная с канонического нуля.

    Пустая последовательность → [0].
    """
    total = BigUInt()
    for value in values:
        total = add_shifted(total, value)
    return total
