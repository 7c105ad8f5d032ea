"""
Operators — Таблица бинарных операторов

Фиксированное отображение symbol → (precedence, apply).
Ассоциативность у всех операторов левая.

    +  precedence 1   a + b
    -  precedence 1   a - b
    *  precedence 2   a * b
    /  precedence 2   a / b  (b == 0 → DIVISION_BY_ZERO до деления)

Проверка конечности результата выполняется postfix evaluator,
а не функциями apply.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Final

from src.core.domain.outcome import CalculationError, ErrorKind
from src.core.domain.tokens import OperatorSymbol
from src.core.math.numerical_safeguards import is_exact_zero


@dataclass(frozen=True)
class OperatorSpec:
    """Описание бинарного оператора."""

    symbol: OperatorSymbol
    precedence: int
    apply: Callable[[float, float], float]


def _add(a: float, b: float) -> float:
    return a + b


def _sub(a: float, b: float) -> float:
    return a - b


def _mul(a: float, b: float) -> float:
    return a * b


def _div(a: float, b: float) -> float:
    if is_exact_zero(b):
        raise CalculationError(ErrorKind.DIVISION_BY_ZERO, f"{a!r} / {b!r}")
    return a / b


OPERATORS: Final[Dict[OperatorSymbol, OperatorSpec]] = {
    OperatorSymbol.ADD: OperatorSpec(OperatorSymbol.ADD, precedence=1, apply=_add),
    OperatorSymbol.SUB: OperatorSpec(OperatorSymbol.SUB, precedence=1, apply=_sub),
    OperatorSymbol.MUL: OperatorSpec(OperatorSymbol.MUL, precedence=2, apply=_mul),
    OperatorSymbol.DIV: OperatorSpec(OperatorSymbol.DIV, precedence=2, apply=_div),
}

# Символы операторов как строки (для посимвольного сканирования)
OPERATOR_CHARS: Final[frozenset] = frozenset(symbol.value for symbol in OPERATORS)


def is_operator_char(char: str) -> bool:
    """True если символ один из + - * /"""
    return char in OPERATOR_CHARS


def precedence(symbol: OperatorSymbol) -> int:
    """Приоритет оператора"""
    return OPERATORS[symbol].precedence


def apply_operator(symbol: OperatorSymbol, a: float, b: float) -> float:
    """
    Применение оператора к операндам (a — левый, b — правый).

    Raises:
        CalculationError: DIVISION_BY_ZERO для '/' с нулевым b
    """
    return OPERATORS[symbol].apply(a, b)
