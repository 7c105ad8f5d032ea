"""Converter — стадия 3: infix → postfix (shunting-yard).

Вспомогательный стек хранит операторы и PAREN_LEFT:
- NUMBER → сразу в output
- OPERATOR → из стека в output уходят операторы с приоритетом >= входящего
  (левая ассоциативность), до PAREN_LEFT или пустого стека; затем push
- PAREN_LEFT → push
- PAREN_RIGHT → pop в output до PAREN_LEFT; пустой стек → UNBALANCED_PARENTHESES;
  PAREN_LEFT отбрасывается
- Конец потока → весь стек в output; скобка в стеке → UNBALANCED_PARENTHESES
"""

from typing import List

from src.core.domain.outcome import CalculationError, ErrorKind
from src.core.domain.tokens import Token, TokenKind, TokenStream
from src.core.math.operators import precedence


def to_postfix(tokens: TokenStream) -> TokenStream:
    """
    Переупорядочивание infix токенов в postfix (RPN).

    Args:
        tokens: результат tokenize()

    Returns:
        Postfix последовательность (без скобок)

    Raises:
        CalculationError: UNBALANCED_PARENTHESES
    """
    output: List[Token] = []
    stack: List[Token] = []

    for token in tokens:
        if token.kind == TokenKind.NUMBER:
            output.append(token)

        elif token.kind == TokenKind.OPERATOR:
            incoming = precedence(token.symbol)
            while stack and stack[-1].is_operator and precedence(stack[-1].symbol) >= incoming:
                output.append(stack.pop())
            stack.append(token)

        elif token.kind == TokenKind.PAREN_LEFT:
            stack.append(token)

        elif token.kind == TokenKind.PAREN_RIGHT:
            while stack and stack[-1].kind != TokenKind.PAREN_LEFT:
                output.append(stack.pop())
            if not stack:
                raise CalculationError(
                    ErrorKind.UNBALANCED_PARENTHESES,
                    "')' without matching '('",
                )
            stack.pop()

    while stack:
        token = stack.pop()
        if token.is_paren:
            raise CalculationError(
                ErrorKind.UNBALANCED_PARENTHESES,
                "'(' without matching ')'",
            )
        output.append(token)

    return tuple(output)
