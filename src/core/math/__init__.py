"""
Core math modules

Численные guard'ы и таблица бинарных операторов калькулятора.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    ensure_finite,
    is_exact_zero,
    is_valid_float,
)

# Operators
from src.core.math.operators import (
    OPERATOR_CHARS,
    OPERATORS,
    OperatorSpec,
    apply_operator,
    is_operator_char,
    precedence,
)

__all__ = [
    # Numerical Safeguards
    "ensure_finite",
    "is_exact_zero",
    "is_valid_float",
    # Operators — Constants
    "OPERATOR_CHARS",
    "OPERATORS",
    # Operators — Types
    "OperatorSpec",
    # Operators — Functions
    "apply_operator",
    "is_operator_char",
    "precedence",
]
