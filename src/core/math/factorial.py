"""
Factorial — n! в BigUInt

Итеративное вычисление: n - 1 умножений бегущего произведения на
бегущий множитель 2, 3, ..., n. Множитель наращивается через
add_shifted с константой 1. Деревья произведений не используются.
"""

import logging

from src.core.domain.biguint import BigUInt
from src.core.domain.integer_bounds import validate_u64
from src.core.math.multiplication import multiply
from src.core.math.shifted_addition import add_shifted

logger = logging.getLogger(__name__)


def factorial(n: int) -> BigUInt:
    """
    Факториал беззнакового 64-битного целого.

    Args:
        n: Целое в [0, 2^64 - 1]

    Returns:
        n! (0! = 1! = 1)

    Raises:
        pydantic.ValidationError: Если n не u64

    Examples:
        >>> factorial(0).to_text()
        '1'
        >>> factorial(10).to_text()
        '3628800'
    """
    n = validate_u64(n)

    one = BigUInt.one()
    product = one
    multiplier = BigUInt.from_u64(2)

    for _ in range(n - 1):
        product = multiply(product, multiplier)
        multiplier = add_shifted(multiplier, one)

    logger.debug("Computed %d! with %d digits", n, len(product))
    return product
