"""Tokenizer — стадия 2: посимвольное сканирование в TokenStream.

Единственное состояние сканера: вид последнего завершённого токена
(None в начале). Оно передаётся через цикл как локальная переменная,
буфер числа копится отдельно и сбрасывается (flush) в NUMBER токен.

Правила для символа (в порядке приоритета):
1. Цифра → в буфер числа
2. '.' → дробная часть; пустой буфер или '-' получает ведущий '0';
   вторая точка → INVALID_DECIMAL
3. '-' после None/OPERATOR/PAREN_LEFT при пустом буфере → унарный минус
4. '+', '-', '*', '/' → flush; после None/OPERATOR/PAREN_LEFT → MISSING_OPERAND
5. '(' → flush, PAREN_LEFT (без проверки операнда)
6. ')' → flush; после None/OPERATOR/PAREN_LEFT → MISSING_OPERAND
7. Иное → UNSUPPORTED_CHARACTER

Конец ввода: flush; поток, оканчивающийся на OPERATOR или PAREN_LEFT,
→ TRAILING_OPERATOR. Пустой поток возвращается как есть.
"""

from typing import Final, List, Optional

from src.core.domain.outcome import CalculationError, ErrorKind
from src.core.domain.tokens import Token, TokenKind, TokenStream
from src.core.math.numerical_safeguards import ensure_finite
from src.core.math.operators import is_operator_char

DIGITS: Final[frozenset] = frozenset("0123456789")
DECIMAL_POINT: Final[str] = "."
UNARY_MINUS: Final[str] = "-"

# Состояния, после которых ожидается операнд
_OPERAND_EXPECTED: Final[frozenset] = frozenset({None, TokenKind.OPERATOR, TokenKind.PAREN_LEFT})


def expects_operand(previous: Optional[TokenKind]) -> bool:
    """True если после токена вида previous должен идти операнд."""
    return previous in _OPERAND_EXPECTED


def parse_number(buffer: str) -> Token:
    """
    Преобразование буфера числа в NUMBER токен.

    Raises:
        CalculationError: INCOMPLETE_NUMBER для голого знака,
            UNPARSABLE_NUMBER если литерал не разбирается или не конечен
    """
    if buffer in ("-", "+"):
        raise CalculationError(ErrorKind.INCOMPLETE_NUMBER, f"bare sign {buffer!r}")

    try:
        value = float(buffer)
    except ValueError:
        raise CalculationError(ErrorKind.UNPARSABLE_NUMBER, f"cannot parse {buffer!r}")

    ensure_finite(value, ErrorKind.UNPARSABLE_NUMBER, f"literal {buffer[:32]!r}")
    return Token.number(value)


def _flush(buffer: str, tokens: List[Token], previous: Optional[TokenKind]) -> Optional[TokenKind]:
    # Пустой буфер не меняет состояние
    if not buffer:
        return previous
    tokens.append(parse_number(buffer))
    return TokenKind.NUMBER


def tokenize(expression: str) -> TokenStream:
    """
    Сканирование нормализованной строки в поток токенов.

    Args:
        expression: результат normalize()

    Returns:
        Неизменяемый кортеж токенов (может быть пустым)

    Raises:
        CalculationError: при первой синтаксической ошибке
    """
    tokens: List[Token] = []
    buffer = ""
    previous: Optional[TokenKind] = None

    for position, char in enumerate(expression):
        if char in DIGITS:
            buffer += char
            continue

        if char == DECIMAL_POINT:
            if DECIMAL_POINT in buffer:
                raise CalculationError(
                    ErrorKind.INVALID_DECIMAL,
                    f"second decimal point at position {position}",
                )
            if buffer in ("", UNARY_MINUS):
                buffer += "0"
            buffer += DECIMAL_POINT
            continue

        if char == UNARY_MINUS and not buffer and expects_operand(previous):
            buffer = UNARY_MINUS
            continue

        if is_operator_char(char):
            previous = _flush(buffer, tokens, previous)
            buffer = ""
            if expects_operand(previous):
                raise CalculationError(
                    ErrorKind.MISSING_OPERAND,
                    f"operator {char!r} at position {position} has no left operand",
                )
            tokens.append(Token.operator(char))
            previous = TokenKind.OPERATOR
            continue

        if char == "(":
            previous = _flush(buffer, tokens, previous)
            buffer = ""
            tokens.append(Token.paren_left())
            previous = TokenKind.PAREN_LEFT
            continue

        if char == ")":
            previous = _flush(buffer, tokens, previous)
            buffer = ""
            if expects_operand(previous):
                raise CalculationError(
                    ErrorKind.MISSING_OPERAND,
                    f"')' at position {position} closes an empty or dangling group",
                )
            tokens.append(Token.paren_right())
            previous = TokenKind.PAREN_RIGHT
            continue

        raise CalculationError(
            ErrorKind.UNSUPPORTED_CHARACTER,
            f"{char!r} at position {position}",
        )

    _flush(buffer, tokens, previous)

    if tokens and tokens[-1].kind in (TokenKind.OPERATOR, TokenKind.PAREN_LEFT):
        raise CalculationError(
            ErrorKind.TRAILING_OPERATOR,
            f"expression ends with {tokens[-1]}",
        )

    return tuple(tokens)
