"""
Numerical Safeguards — числовые примитивы geomalg

Модуль содержит числовую политику библиотеки:
- Параметры округления (approx) и допуски сравнения float
- Генерацию случайных координат в заданном диапазоне
- Проверку валидности float (NaN/Inf)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Точные сравнения (equals) не используют допуски; допуски только в is_close
2. random_range(lo, hi) возвращает значение в [lo, hi)
3. Все функции чистые, кроме random_range
"""

import math
import random
from typing import Final

# =============================================================================
# ПАРАМЕТРЫ ТОЧНОСТИ
# =============================================================================

# Количество знаков после запятой для approx() по умолчанию
DEFAULT_APPROX_DIGITS: Final[int] = 12

# Относительная толерантность для is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для is_close
# Соответствует точности round-trip ротора (1e-13)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-13

# =============================================================================
# ДИАПАЗОН СЛУЧАЙНЫХ КООРДИНАТ
# =============================================================================

# Диапазон координат для фабрик random()
RANDOM_RANGE_MIN: Final[float] = -1.0
RANDOM_RANGE_MAX: Final[float] = 1.0


# =============================================================================
# ФУНКЦИИ
# =============================================================================


def random_range(lo: float, hi: float) -> float:
    """
    Случайное число из равномерного распределения на [lo, hi).

    Args:
        lo: Нижняя граница
        hi: Верхняя граница

    Returns:
        lo + (hi - lo) * U, где U ∈ [0, 1)

    Raises:
        ValueError: Если lo > hi

    Examples:
        >>> -1.0 <= random_range(-1.0, 1.0) < 1.0
        True
    """
    if lo > hi:
        raise ValueError(f"lo must not exceed hi, got lo={lo}, hi={hi}")
    return lo + (hi - lo) * random.random()


def approx_value(value: float, digits: int = DEFAULT_APPROX_DIGITS) -> float:
    """Округление одной координаты до digits знаков после запятой."""
    return round(value, digits)


def is_valid_float(value: float) -> bool:
    """
    Проверка, что значение — конечное число.

    Examples:
        >>> is_valid_float(1.0)
        True
        >>> is_valid_float(float('nan'))
        False
    """
    return isinstance(value, (int, float)) and math.isfinite(value)


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом допусков.

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность
        abs_tol: Абсолютная толерантность

    Returns:
        True если |a - b| <= max(rel_tol * max(|a|, |b|), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-15)
        True
        >>> is_close(0.0, 1e-10)
        False
    """
    if not is_valid_float(a) or not is_valid_float(b):
        return False
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
