"""
Numerical Safeguards — Safe Math Primitives

Модуль обеспечивает численную корректность арифметики калькулятора:
- Проверка конечности float (NaN/Inf детекция)
- Проверка точного нуля делителя (включая -0.0)
- Guard, превращающий невалидное значение в CalculationError нужного вида

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не попадают в токены и на стек значений
2. Деление на ноль детектируется до выполнения деления
3. Все операции детерминированы и воспроизводимы
"""

import math

from src.core.domain.outcome import CalculationError, ErrorKind


# =============================================================================
# NaN/Inf ДЕТЕКЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def is_exact_zero(value: float) -> bool:
    """
    Проверка точного нуля (без epsilon-толерантности).

    Делитель 1e-300 валиден; переполнение результата
    детектируется отдельно через ensure_finite.

    Examples:
        >>> is_exact_zero(0.0)
        True
        >>> is_exact_zero(-0.0)
        True
        >>> is_exact_zero(1e-300)
        False
    """
    return value == 0.0


# =============================================================================
# GUARDS
# =============================================================================


def ensure_finite(value: float, kind: ErrorKind, context: str = "") -> float:
    """
    Guard конечности значения.

    Args:
        value: Проверяемое значение
        kind: Вид ошибки, если значение не конечно
        context: Описание источника значения (для details)

    Returns:
        value без изменений, если оно конечно

    Raises:
        CalculationError: если value — NaN или Inf

    Examples:
        >>> ensure_finite(1.5, ErrorKind.NON_FINITE_RESULT)
        1.5
        >>> ensure_finite(float("inf"), ErrorKind.NON_FINITE_RESULT)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        CalculationError: NON_FINITE_RESULT: ...
    """
    if is_valid_float(value):
        return value

    details = f"{context} produced {value}" if context else f"non-finite value {value}"
    raise CalculationError(kind, details)
