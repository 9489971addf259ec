"""
Rotors — построение роторов по направлениям

Общие формулы для Spinor2/Spinor3/Geometric2/Geometric3: координаты ротора R,
переводящего направление a в направление b (R a R~ ∥ b).

Для единичных â = a/|a| и b̂ = b/|b|:

    R = (s + b̂ ∧ â) / sqrt(s² + |b̂ ∧ â|²)

    s = 1 + b̂·â                  при b̂·â ≥ 0
    s = |b̂ ∧ â|² / (1 - b̂·â)     при b̂·â < 0

Обе формы s равны (|b̂ ∧ â|² = 1 - (b̂·â)²); вторая не теряет точность
для почти противоположных направлений.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Неединичные a и b допускаются, результат всегда единичный
2. a ∥ -b (|b̂ ∧ â| ≤ EPS_ANTIPARALLEL): R = -B̂, поворот на π в плоскости B̂,
   содержащей a; 2D: B̂ = e12
3. Нулевое направление → InvalidArgumentError
4. Длины считаются через math.hypot, без переполнения и потери малых значений
"""

import logging
import math
from typing import Final

from geomalg.core.errors import InvalidArgumentError
from geomalg.core.math.primitives import dot_vector_e3, wedge_xy, wedge_yz, wedge_zx

logger = logging.getLogger(__name__)

# Порог |sin(a, b)| при a·b < 0, ниже которого направления считаются противоположными
EPS_ANTIPARALLEL: Final[float] = 1e-15


class _Cartesian:
    """Вспомогательный вектор для промежуточных вычислений."""

    __slots__ = ("x", "y", "z")

    def __init__(self, x: float, y: float, z: float):
        self.x = x
        self.y = y
        self.z = z


def _unit(x: float, y: float, z: float = 0) -> _Cartesian:
    m = math.hypot(x, y, z)
    if m == 0:
        raise InvalidArgumentError("directions must be non-zero vectors")
    return _Cartesian(x / m, y / m, z / m)


def _scalar_part(dot: float, sin_ab: float) -> float:
    if dot >= 0:
        return 1 + dot
    return sin_ab * sin_ab / (1 - dot)


def rotor_from_directions_e2(a, b) -> tuple[float, float]:
    """
    Ротор G2, переводящий направление a в направление b.

    Args:
        a: Начальное направление (атрибуты x, y)
        b: Конечное направление (атрибуты x, y)

    Returns:
        (scalar, e12) координаты ротора

    Raises:
        InvalidArgumentError: Если a или b нулевой

    Examples:
        >>> rotor_from_directions_e2(_Cartesian(1, 0, 0), _Cartesian(-1, 0, 0))
        (0, -1)
    """
    ua = _unit(a.x, a.y)
    ub = _unit(b.x, b.y)

    dot = ub.x * ua.x + ub.y * ua.y
    wedge = ub.x * ua.y - ub.y * ua.x
    if dot < 0 and abs(wedge) <= EPS_ANTIPARALLEL:
        logger.debug("antiparallel directions in G2, using rotation by pi in e12")
        return 0, -1
    s = _scalar_part(dot, abs(wedge))
    m = math.hypot(s, wedge)
    return s / m, wedge / m


def _orthogonal_plane(a) -> tuple[float, float, float]:
    """
    Единичный бивектор плоскости, содержащей a.

    Плоскость a ∧ (a × e_k), где e_k — базисный вектор, наименее
    сонаправленный с a.
    """
    components = (abs(a.x), abs(a.y), abs(a.z))
    k = components.index(min(components))
    e = _Cartesian(*(1 if i == k else 0 for i in range(3)))
    c = _Cartesian(wedge_yz(a, e), wedge_zx(a, e), wedge_xy(a, e))
    yz, zx, xy = wedge_yz(a, c), wedge_zx(a, c), wedge_xy(a, c)
    m = math.hypot(yz, zx, xy)
    return yz / m, zx / m, xy / m


def rotor_from_directions_e3(a, b, B=None) -> tuple[float, float, float, float]:
    """
    Ротор G3, переводящий направление a в направление b.

    Args:
        a: Начальное направление (атрибуты x, y, z)
        b: Конечное направление (атрибуты x, y, z)
        B: Плоскость поворота для случая a ∥ -b (атрибуты yz, zx, xy);
           если не задана, выбирается плоскость, содержащая a

    Returns:
        (a, yz, zx, xy) координаты ротора

    Raises:
        InvalidArgumentError: Если a или b нулевой
    """
    ua = _unit(a.x, a.y, a.z)
    ub = _unit(b.x, b.y, b.z)

    dot = dot_vector_e3(ub, ua)
    yz, zx, xy = wedge_yz(ub, ua), wedge_zx(ub, ua), wedge_xy(ub, ua)
    sin_ab = math.hypot(yz, zx, xy)
    if dot < 0 and sin_ab <= EPS_ANTIPARALLEL:
        if B is not None:
            m = math.hypot(B.yz, B.zx, B.xy)
            if m == 0:
                raise InvalidArgumentError("plane of rotation must be non-zero")
            yz, zx, xy = B.yz / m, B.zx / m, B.xy / m
        else:
            yz, zx, xy = _orthogonal_plane(ua)
        logger.debug("antiparallel directions in G3, using rotation by pi in plane %s", (yz, zx, xy))
        return 0, -yz, -zx, -xy

    s = _scalar_part(dot, sin_ab)
    m = math.hypot(s, sin_ab)
    return s / m, yz / m, zx / m, xy / m


# =============================================================================
# ДЕЙСТВИЕ РОТОРА
# =============================================================================


def sandwich_e2(R, x: float, y: float) -> tuple[float, float]:
    """
    Координаты R v R~ для вектора v = x*e1 + y*e2 и R = a + b*e12.

    Результат масштабирован на |R|², для единичного R это поворот.
    """
    a = R.a
    b = R.b
    p = a * a - b * b
    q = 2 * a * b
    return p * x + q * y, p * y - q * x


def sandwich_e3(R, x: float, y: float, z: float) -> tuple[float, float, float]:
    """
    Координаты R v R~ для v = x*e1 + y*e2 + z*e3 и R = a + yz*e23 + zx*e31 + xy*e12.

    Та же формула применяется к бивектору (yz, zx, xy): поворот коммутирует
    с дуальностью.
    """
    a = R.xy
    b = R.yz
    c = R.zx
    w = R.a

    ix = w * x - c * z + a * y
    iy = w * y - a * x + b * z
    iz = w * z - b * y + c * x
    iw = b * x + c * y + a * z

    return (
        ix * w + iw * b + iy * a - iz * c,
        iy * w + iw * c + iz * b - ix * a,
        iz * w + iw * a + ix * c - iy * b,
    )
