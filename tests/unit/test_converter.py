"""
Тесты для Converter (shunting-yard)

Coverage:
- Приоритет операторов
- Левая ассоциативность
- Скобки и вложенность
- UNBALANCED_PARENTHESES
"""

import pytest

from src.calculator.converter import to_postfix
from src.calculator.tokenizer import tokenize
from src.core.domain import CalculationError, ErrorKind, Token


def _rpn(expression: str) -> str:
    return " ".join(str(token) for token in to_postfix(tokenize(expression)))


class TestToPostfix:
    """Тесты успешной конвертации"""

    def test_empty(self) -> None:
        assert to_postfix(()) == ()

    def test_single_number(self) -> None:
        assert to_postfix((Token.number(4.0),)) == (Token.number(4.0),)

    @pytest.mark.parametrize(
        "expression, expected",
        [
            ("1+2", "1.0 2.0 +"),
            ("1+2*3", "1.0 2.0 3.0 * +"),
            ("2*3+4", "2.0 3.0 * 4.0 +"),
            ("1-2+3", "1.0 2.0 - 3.0 +"),
            ("8/4/2", "8.0 4.0 / 2.0 /"),
            ("8/4*2", "8.0 4.0 / 2.0 *"),
            ("10-2*3+4/2", "10.0 2.0 3.0 * - 4.0 2.0 / +"),
        ],
    )
    def test_precedence_and_left_associativity(self, expression: str, expected: str) -> None:
        assert _rpn(expression) == expected

    @pytest.mark.parametrize(
        "expression, expected",
        [
            ("(2+3)*4", "2.0 3.0 + 4.0 *"),
            ("2*(3+4)", "2.0 3.0 4.0 + *"),
            ("((2+3)*(4-1))", "2.0 3.0 + 4.0 1.0 - *"),
            ("1-(2-3)", "1.0 2.0 3.0 - -"),
            ("(-1)", "-1.0"),
        ],
    )
    def test_parentheses(self, expression: str, expected: str) -> None:
        assert _rpn(expression) == expected

    def test_output_has_no_parens(self) -> None:
        assert not any(token.is_paren for token in to_postfix(tokenize("((1)+(2))")))

    def test_returns_tuple(self) -> None:
        assert isinstance(to_postfix(tokenize("1+2")), tuple)


class TestToPostfixErrors:
    """Тесты UNBALANCED_PARENTHESES"""

    @pytest.mark.parametrize("expression", ["(1+2", "((1)", "1)", "(1))", "1+2)*3", "(1)+(2"])
    def test_unbalanced(self, expression: str) -> None:
        with pytest.raises(CalculationError) as exc_info:
            to_postfix(tokenize(expression))
        assert exc_info.value.kind == ErrorKind.UNBALANCED_PARENTHESES

    def test_lone_paren_right(self) -> None:
        with pytest.raises(CalculationError) as exc_info:
            to_postfix((Token.paren_right(),))
        assert exc_info.value.kind == ErrorKind.UNBALANCED_PARENTHESES

    def test_lone_paren_left(self) -> None:
        with pytest.raises(CalculationError) as exc_info:
            to_postfix((Token.paren_left(),))
        assert exc_info.value.kind == ErrorKind.UNBALANCED_PARENTHESES
