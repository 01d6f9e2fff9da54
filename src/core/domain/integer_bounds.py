"""
Integer Bounds — границы машинных целых и sizing-хелперы

Модуль задаёт допустимые диапазоны для входов арифметики BigUInt:
- U64: беззнаковое 64-битное целое (границы, строгая валидация через pydantic)
- Shift: неотрицательный сдвиг на степень десяти
- log10_floor: floor(log10(n)) для u64, используется только для pre-sizing буфера

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Валидация строгая: bool, float и str не принимаются как целые
2. log10_floor — чистая функция без side effects
3. Корректность арифметики не зависит от log10_floor (только аллокация)
"""

from bisect import bisect_right
from typing import Annotated, Final

from pydantic import Field, StrictInt, TypeAdapter

# =============================================================================
# ГРАНИЦЫ МАШИННЫХ ЦЕЛЫХ
# =============================================================================

# Максимальное значение беззнакового 64-битного целого
U64_MAX: Final[int] = 2**64 - 1

# Максимальное значение беззнакового 32-битного целого (сужение до u64)
U32_MAX: Final[int] = 2**32 - 1

# Основание системы счисления digit store
RADIX: Final[int] = 10

# Степени десяти, представимые в u64: 10^0 .. 10^19
POWERS_OF_TEN_U64: Final[tuple[int, ...]] = tuple(RADIX**k for k in range(20))


# =============================================================================
# ТИПЫ
# =============================================================================

# u64: строгий int в [0, 2^64 - 1]
U64 = Annotated[StrictInt, Field(ge=0, le=U64_MAX)]

# Сдвиг на степень десяти: строгий int >= 0
Shift = Annotated[StrictInt, Field(ge=0)]

_U64_ADAPTER: Final[TypeAdapter[int]] = TypeAdapter(U64)
_SHIFT_ADAPTER: Final[TypeAdapter[int]] = TypeAdapter(Shift)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_u64(value: int) -> int:
    """
    Валидация, что значение — беззнаковое 64-битное целое.

    Args:
        value: Проверяемое значение

    Returns:
        value без изменений

    Raises:
        pydantic.ValidationError: Если value не int (bool тоже отвергается)
            или вне [0, U64_MAX]

    Examples:
        >>> validate_u64(123)
        123
        >>> validate_u64(18446744073709551615)
        18446744073709551615
    """
    return _U64_ADAPTER.validate_python(value)


def validate_shift(shift: int) -> int:
    """
    Валидация сдвига на степень десяти.

    Raises:
        pydantic.ValidationError: Если shift не int или отрицательный
    """
    return _SHIFT_ADAPTER.validate_python(shift)


def is_u64(value: object) -> bool:
    """Проверка принадлежности к u64 без exception."""
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and 0 <= value <= U64_MAX
    )


# =============================================================================
# SIZING
# =============================================================================


def log10_floor(value: int) -> int:
    """
    floor(log10(value)) для беззнакового 64-битного целого.

    Используется как подсказка для pre-sizing буфера цифр:
    число цифр value = log10_floor(value) + 1.

    Для value = 0 возвращает 0 (ноль записывается одной цифрой).

    Args:
        value: u64 (не валидируется повторно, ожидается корректный вход)

    Returns:
        Номер старшего разряда value

    Examples:
        >>> log10_floor(0)
        0
        >>> log10_floor(9)
        0
        >>> log10_floor(10)
        1
        >>> log10_floor(18446744073709551615)
        19
    """
    # bisect_right даёт число степеней <= value
    return max(bisect_right(POWERS_OF_TEN_U64, value) - 1, 0)
