"""Postfix Evaluator — стадия 4: свёртка postfix последовательности в число.

Стек значений:
- NUMBER → push
- OPERATOR → pop b, затем pop a (a — левый операнд); a op b;
  меньше двух значений → INSUFFICIENT_OPERANDS;
  деление на ноль → DIVISION_BY_ZERO (до деления);
  NaN/Inf результат → NON_FINITE_RESULT
- Конец → ровно одно значение на стеке, иначе MALFORMED_EXPRESSION
"""

from typing import List

from src.core.domain.outcome import CalculationError, ErrorKind
from src.core.domain.tokens import TokenKind, TokenStream
from src.core.math.numerical_safeguards import ensure_finite
from src.core.math.operators import apply_operator


def evaluate_postfix(tokens: TokenStream) -> float:
    """
    Вычисление postfix последовательности.

    Args:
        tokens: результат to_postfix()

    Returns:
        Конечный float результат

    Raises:
        CalculationError: INSUFFICIENT_OPERANDS, DIVISION_BY_ZERO,
            NON_FINITE_RESULT, MALFORMED_EXPRESSION
    """
    stack: List[float] = []

    for token in tokens:
        if token.kind == TokenKind.NUMBER:
            stack.append(token.value)
            continue

        if token.kind != TokenKind.OPERATOR:
            raise CalculationError(
                ErrorKind.MALFORMED_EXPRESSION,
                f"unexpected {token.kind.value} token in postfix sequence",
            )

        if len(stack) < 2:
            raise CalculationError(
                ErrorKind.INSUFFICIENT_OPERANDS,
                f"operator {token.symbol.value!r} needs 2 operands, stack has {len(stack)}",
            )

        b = stack.pop()
        a = stack.pop()
        value = apply_operator(token.symbol, a, b)
        stack.append(
            ensure_finite(value, ErrorKind.NON_FINITE_RESULT, f"{a!r} {token.symbol.value} {b!r}")
        )

    if len(stack) != 1:
        raise CalculationError(
            ErrorKind.MALFORMED_EXPRESSION,
            f"{len(stack)} values left on stack, expected 1",
        )

    return stack[0]
