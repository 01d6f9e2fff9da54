"""
Core math modules для BigUInt

Арифметика над десятичным digit store: сложение со сдвигом,
умножение через таблицу кратных, факториал.
"""

# Shifted Addition
from src.core.math.shifted_addition import add_shifted, sum_all

# Multiplication
from src.core.math.multiplication import (
    TIMES_TABLE_RECIPE,
    build_times_table,
    multiply,
)

# Factorial
from src.core.math.factorial import factorial

__all__ = [
    # Shifted Addition
    "add_shifted",
    "sum_all",
    # Multiplication — Constants
    "TIMES_TABLE_RECIPE",
    # Multiplication — Functions
    "build_times_table",
    "multiply",
    # Factorial
    "factorial",
]
