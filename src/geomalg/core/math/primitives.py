"""
Primitives — элементарные формулы над координатами

- dot_vector_e3: скалярное произведение 3D-векторов
- wedge_yz / wedge_zx / wedge_xy: знаковые миноры 2×2 (компоненты a ∧ b)
- b2 / b3: базисы Бернштейна для квадратичной и кубической кривой Безье

Аргументы — любые объекты с атрибутами x, y, z (Vector3, Geometric3).
"""

from typing import Protocol


class CartesianE3(Protocol):
    x: float
    y: float
    z: float


# =============================================================================
# 3D ВЕКТОРЫ
# =============================================================================


def dot_vector_e3(a: CartesianE3, b: CartesianE3) -> float:
    """a·b = ax·bx + ay·by + az·bz"""
    return a.x * b.x + a.y * b.y + a.z * b.z


def wedge_yz(a: CartesianE3, b: CartesianE3) -> float:
    """Компонента e23 произведения a ∧ b."""
    return a.y * b.z - a.z * b.y


def wedge_zx(a: CartesianE3, b: CartesianE3) -> float:
    """Компонента e31 произведения a ∧ b."""
    return a.z * b.x - a.x * b.z


def wedge_xy(a: CartesianE3, b: CartesianE3) -> float:
    """Компонента e12 произведения a ∧ b."""
    return a.x * b.y - a.y * b.x


# =============================================================================
# БАЗИСЫ БЕРНШТЕЙНА
# =============================================================================


def b2(t: float, b: float, c: float, d: float) -> float:
    """
    Квадратичная кривая Безье в точке t.

    Args:
        t: Параметр кривой, обычно [0, 1]
        b: Начальная точка
        c: Контрольная точка
        d: Конечная точка

    Examples:
        >>> b2(0.5, 0.0, 1.0, 0.0)
        0.5
    """
    k = 1 - t
    return k * k * b + 2 * k * t * c + t * t * d


def b3(t: float, b: float, c: float, d: float, e: float) -> float:
    """
    Кубическая кривая Безье в точке t.

    Examples:
        >>> b3(1.0, 0.0, 1.0, 2.0, 3.0)
        3.0
    """
    k = 1 - t
    return k * k * k * b + 3 * k * k * t * c + 3 * k * t * t * d + t * t * t * e
