"""
Core math modules для geomalg

Числовые примитивы, форматирование координат и решение линейных систем.
"""

# Numerical Safeguards
from geomalg.core.math.numerical_safeguards import (
    DEFAULT_APPROX_DIGITS,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    RANDOM_RANGE_MAX,
    RANDOM_RANGE_MIN,
    approx_value,
    is_close,
    is_valid_float,
    random_range,
)

# Primitives
from geomalg.core.math.primitives import (
    b2,
    b3,
    dot_vector_e3,
    wedge_xy,
    wedge_yz,
    wedge_zx,
)

# Gauss
from geomalg.core.math.gauss import gauss

# Formatting
from geomalg.core.math.formatting import (
    LABELS_E2,
    LABELS_E3,
    LABELS_G2,
    LABELS_G3,
    LABELS_SPINOR2,
    LABELS_SPINOR3,
    SCALAR_LABEL,
    string_from_coordinates,
    to_exponential,
    to_fixed,
    to_precision,
    to_string,
)

__all__ = [
    # Numerical Safeguards: Constants
    "DEFAULT_APPROX_DIGITS",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "RANDOM_RANGE_MAX",
    "RANDOM_RANGE_MIN",
    # Numerical Safeguards: Functions
    "approx_value",
    "is_close",
    "is_valid_float",
    "random_range",
    # Primitives
    "b2",
    "b3",
    "dot_vector_e3",
    "wedge_xy",
    "wedge_yz",
    "wedge_zx",
    # Gauss
    "gauss",
    # Formatting: Labels
    "LABELS_E2",
    "LABELS_E3",
    "LABELS_G2",
    "LABELS_G3",
    "LABELS_SPINOR2",
    "LABELS_SPINOR3",
    "SCALAR_LABEL",
    # Formatting: Functions
    "string_from_coordinates",
    "to_exponential",
    "to_fixed",
    "to_precision",
    "to_string",
]
