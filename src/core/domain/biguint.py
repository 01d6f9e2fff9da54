"""
BigUInt — беззнаковое целое произвольной точности в десятичных цифрах

Immutable Pydantic модель. Digit store: непустая последовательность
десятичных цифр (один байт на цифру), старшая цифра первой.

Конструкторы:
- from_u64: из машинного целого (u64, u32 и usize сводятся к нему)
- from_text: из десятичного текста, '_' допускается как разделитель
- from_digits: из последовательности цифр 0..9

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Буфер непустой, каждая цифра в [0, 9]
2. Значение по умолчанию (ноль) — ровно [0]
3. Ведущие нули не подавляются: равенство и рендеринг определены
   над буквальной последовательностью цифр
4. Арифметика не изменяет операнды, результат всегда новый экземпляр
"""

import logging
from typing import Final, Iterable

from pydantic import BaseModel, Field, field_validator

from src.core.domain.integer_bounds import (
    RADIX,
    log10_floor,
    validate_shift,
    validate_u64,
)

logger = logging.getLogger(__name__)


# =============================================================================
# ПАРАМЕТРЫ ТЕКСТОВОГО ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Разделитель разрядов для читаемости ("1_000_000"), игнорируется при разборе
DIGIT_SEPARATOR: Final[str] = "_"

# Код ASCII символа '0'
_ASCII_ZERO: Final[int] = ord("0")

_ASCII_DIGITS: Final[frozenset[str]] = frozenset("0123456789")

# Таблица рендеринга: цифра 0..9 → ASCII символ
_RENDER_TABLE: Final[bytes] = bytes.maketrans(bytes(range(RADIX)), b"0123456789")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DigitTextError(ValueError):
    """
    Невалидный десятичный текст при построении BigUInt.

    Допустимы только ASCII цифры '0'..'9' и разделитель '_'.
    Знак, пробелы и не-ASCII цифры отвергаются.

    Attributes:
        text: Исходный текст
        char: Первый недопустимый символ (None, если в тексте нет цифр)
        position: Позиция недопустимого символа (None, если в тексте нет цифр)
    """

    def __init__(self, text: str, char: str | None = None, position: int | None = None):
        self.text = text
        self.char = char
        self.position = position
        if char is None:
            message = f"Text contains no digits: {text!r}"
        else:
            message = (
                f"The text can contain only digits and underscores, "
                f"got {char!r} at position {position}"
            )
        super().__init__(message)


# =============================================================================
# BIGUINT MODEL
# =============================================================================


class BigUInt(BaseModel):
    """
    Беззнаковое целое произвольной точности.

    Immutable модель (frozen=True): все операции создают новый экземпляр.
    BigUInt() — канонический ноль [0].

    Examples:
        >>> str(BigUInt.from_u64(642) + BigUInt.from_u64(8537))
        '9179'
        >>> BigUInt.from_text("1_000").digits()
        [1, 0, 0, 0]
    """

    buffer: bytes = Field(
        default=b"\x00",
        strict=True,
        min_length=1,
        description="Цифры 0..9 по одной на байт, старшая первой",
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("buffer")
    @classmethod
    def validate_digit_range(cls, v: bytes) -> bytes:
        """Каждый байт буфера — десятичная цифра."""
        if max(v) >= RADIX:
            raise ValueError(f"digit {max(v)} out of range [0, {RADIX - 1}]")
        return v

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_buffer_unchecked(cls, buffer: bytes) -> "BigUInt":
        """
        Построение без валидации буфера.

        Только для буферов, собранных из уже валидных цифр
        (результаты арифметики). Внешний ввод идёт через from_u64,
        from_text или from_digits.
        """
        return cls.model_construct(buffer=buffer)

    @classmethod
    def zero(cls) -> "BigUInt":
        """Канонический ноль [0]."""
        return cls()

    @classmethod
    def one(cls) -> "BigUInt":
        """Единица [1]."""
        return cls.from_buffer_unchecked(b"\x01")

    @classmethod
    def from_u64(cls, value: int) -> "BigUInt":
        """
        Построение из беззнакового 64-битного целого.

        Цифры получаются повторным делением на 10 (младшая первой)
        в буфер, заранее размеченный по log10_floor(value) + 1.
        u32 и usize — те же Python int, отдельного пути нет.

        Args:
            value: Целое в [0, 2^64 - 1]

        Returns:
            BigUInt без ведущих нулей (0 → [0])

        Raises:
            pydantic.ValidationError: Если value не u64

        Examples:
            >>> BigUInt.from_u64(123).digits()
            [1, 2, 3]
            >>> BigUInt.from_u64(0).digits()
            [0]
        """
        value = validate_u64(value)

        buffer = bytearray(log10_floor(value) + 1)
        position = len(buffer)
        while True:
            value, digit = divmod(value, RADIX)
            position -= 1
            assert position >= 0, "digit buffer capacity exceeded"
            buffer[position] = digit
            if value == 0:
                break

        return cls.from_buffer_unchecked(bytes(buffer[position:]))

    @classmethod
    def from_text(cls, text: str) -> "BigUInt":
        """
        Построение из десятичного текста.

        Текст читается слева направо, старшая цифра первой; '_' пропускается.
        Любой другой символ — ошибка ввода.

        Args:
            text: Строка из символов '0'..'9' и '_'

        Returns:
            BigUInt с цифрами в буквальном порядке (ведущие нули сохраняются)

        Raises:
            TypeError: Если text не str
            DigitTextError: Недопустимый символ или текст без цифр

        Examples:
            >>> BigUInt.from_text("18_446_744").digits()
            [1, 8, 4, 4, 6, 7, 4, 4]
        """
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")

        buffer = bytearray()
        for position, char in enumerate(text):
            if char in _ASCII_DIGITS:
                buffer.append(ord(char) - _ASCII_ZERO)
            elif char != DIGIT_SEPARATOR:
                logger.debug("Rejected decimal text %r at position %d", text, position)
                raise DigitTextError(text, char, position)

        if not buffer:
            raise DigitTextError(text)

        return cls.from_buffer_unchecked(bytes(buffer))

    @classmethod
    def from_digits(cls, digits: Iterable[int]) -> "BigUInt":
        """
        Построение из последовательности цифр (старшая первой).

        Raises:
            pydantic.ValidationError: Пустая последовательность или цифра вне [0, 9]
            ValueError: Значение вне [0, 255] (не помещается в байт)
        """
        return cls(buffer=bytes(digits))

    # -------------------------------------------------------------------------
    # Доступ к digit store
    # -------------------------------------------------------------------------

    def digits(self) -> list[int]:
        """Цифры значения, старшая первой."""
        return list(self.buffer)

    def __len__(self) -> int:
        return len(self.buffer)

    # -------------------------------------------------------------------------
    # Рендеринг
    # -------------------------------------------------------------------------

    def to_text(self) -> str:
        """
        Десятичный текст: каждая цифра → ASCII символ, в порядке хранения.

        Рендеринг буквальный: ведущие нули исходного буфера сохраняются.

        Examples:
            >>> BigUInt.from_u64(64285378537642).to_text()
            '64285378537642'
        """
        return self.buffer.translate(_RENDER_TABLE).decode("ascii")

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"BigUInt({self.to_text()!r})"

    # -------------------------------------------------------------------------
    # Сдвиг
    # -------------------------------------------------------------------------

    def times_ten(self, shift: int) -> "BigUInt":
        """
        Умножение на 10^shift: дописывает shift нулевых цифр.

        Args:
            shift: Неотрицательный сдвиг

        Returns:
            Новый BigUInt, исходное значение не изменяется

        Raises:
            pydantic.ValidationError: Если shift не int или отрицательный

        Examples:
            >>> BigUInt.from_u64(642).times_ten(3).to_text()
            '642000'
        """
        shift = validate_shift(shift)
        return self.from_buffer_unchecked(self.buffer + bytes(shift))

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "BigUInt":
        if not isinstance(other, BigUInt):
            return NotImplemented
        # Локальный импорт: math зависит от domain, не наоборот
        from src.core.math.shifted_addition import add_shifted

        return add_shifted(self, other)

    def __mul__(self, other: object) -> "BigUInt":
        if not isinstance(other, BigUInt):
            return NotImplemented
        from src.core.math.multiplication import multiply

        return multiply(self, other)
