"""
Тесты для Shifted Addition — a + b × 10^shift

Проверяемые инварианты:
1. Корректность относительно int арифметики
2. Аддитивная идентичность (ноль без special case)
3. Коммутативность при shift = 0
4. Эквивалентность сдвига: add_shifted(a, b, k) == a + times_ten(b, k)
5. Операнды не изменяются
"""

import pytest
from pydantic import ValidationError

from src.core.domain import U64_MAX, BigUInt
from src.core.math.shifted_addition import add_shifted, sum_all

SAMPLES = [0, 1, 5, 9, 10, 99, 642, 999, 8537, 99_999, 6428537, 10**12, U64_MAX]
SHIFTS = [0, 1, 2, 5, 8, 21]


def big(n: int) -> BigUInt:
    return BigUInt.from_text(str(n))


# =============================================================================
# ТЕСТЫ: Plain addition (shift = 0)
# =============================================================================


class TestPlainAddition:
    """Тесты сложения без сдвига."""

    def test_adds_0_123(self) -> None:
        assert add_shifted(big(0), big(123)) == BigUInt.from_u64(123)

    def test_adds_642_8537(self) -> None:
        assert add_shifted(BigUInt.from_u64(642), BigUInt.from_u64(8537)) == BigUInt.from_u64(9179)

    def test_final_carry_prepended(self) -> None:
        """Остаточный перенос → новая старшая цифра"""
        assert add_shifted(big(999), big(1)).to_text() == "1000"
        assert add_shifted(big(5), big(5)).to_text() == "10"

    def test_beyond_u64(self) -> None:
        """Сумма выходит за u64 без потери точности"""
        result = add_shifted(BigUInt.from_u64(U64_MAX), BigUInt.from_u64(U64_MAX))
        assert result.to_text() == str(2 * U64_MAX)

    def test_matches_int(self) -> None:
        for a in SAMPLES:
            for b in SAMPLES:
                assert add_shifted(big(a), big(b)).to_text() == str(a + b)

    def test_additive_identity(self) -> None:
        """add_shifted(a, 0) == a == add_shifted(0, a)"""
        zero = BigUInt()
        for n in SAMPLES:
            a = big(n)
            assert add_shifted(a, zero) == a
            assert add_shifted(zero, a) == a

    def test_commutativity(self) -> None:
        for a in SAMPLES:
            for b in SAMPLES:
                assert add_shifted(big(a), big(b)) == add_shifted(big(b), big(a))

    def test_operands_unchanged(self) -> None:
        a = big(642)
        b = big(8537)
        add_shifted(a, b, 3)
        assert a.to_text() == "642"
        assert b.to_text() == "8537"


# =============================================================================
# ТЕСТЫ: Shifted addition
# =============================================================================


class TestShiftedAddition:
    """Тесты сложения со сдвигом."""

    def test_shift_beyond_a(self) -> None:
        """Сдвинутый b длиннее a: нули между операндами"""
        assert add_shifted(big(1), big(2), 3).to_text() == "2001"

    def test_shift_inside_a(self) -> None:
        """Сдвинутый b короче a"""
        assert add_shifted(big(123456), big(7), 2).to_text() == "124156"

    def test_shift_with_carry(self) -> None:
        assert add_shifted(big(9950), big(5), 1).to_text() == "10000"

    def test_matches_int(self) -> None:
        for a in SAMPLES:
            for b in SAMPLES:
                for k in SHIFTS:
                    expected = a + b * 10**k
                    assert add_shifted(big(a), big(b), k).to_text().lstrip("0") == str(expected).lstrip("0")

    def test_shift_equivalence(self) -> None:
        """add_shifted(a, b, k) == a + times_ten(b, k)"""
        for a in SAMPLES:
            for b in SAMPLES:
                for k in SHIFTS:
                    assert add_shifted(big(a), big(b), k) == add_shifted(big(a), big(b).times_ten(k))

    def test_shifted_zero_keeps_width(self) -> None:
        """Сдвинутый ноль даёт ведущие нули, канонизации нет"""
        assert add_shifted(BigUInt(), BigUInt(), 3).digits() == [0, 0, 0, 0]

    def test_nonzero_results_canonical(self) -> None:
        """Для канонических операндов и ненулевого b результат без ведущих нулей"""
        for a in SAMPLES:
            for b in SAMPLES[1:]:
                for k in SHIFTS:
                    assert add_shifted(big(a), big(b), k).digits()[0] != 0

    def test_capacity_bound(self) -> None:
        """Длина результата <= max(len(a), len(b) + shift) + 1"""
        for a in SAMPLES:
            for b in SAMPLES:
                for k in SHIFTS:
                    result = add_shifted(big(a), big(b), k)
                    assert len(result) <= max(len(big(a)), len(big(b)) + k) + 1

    def test_negative_shift_rejected(self) -> None:
        with pytest.raises(ValidationError):
            add_shifted(big(1), big(1), -1)

    def test_non_int_shift_rejected(self) -> None:
        with pytest.raises(ValidationError):
            add_shifted(big(1), big(1), 1.0)


# =============================================================================
# ТЕСТЫ: sum_all
# =============================================================================


class TestSumAll:
    """Тесты sum_all: свёртка от канонического нуля."""

    def test_empty_is_zero(self) -> None:
        assert sum_all([]) == BigUInt()

    def test_single(self) -> None:
        assert sum_all([big(642)]) == big(642)

    def test_matches_int(self) -> None:
        assert sum_all(big(n) for n in SAMPLES).to_text() == str(sum(SAMPLES))
