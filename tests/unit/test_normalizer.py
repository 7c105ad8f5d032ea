"""
Тесты для Normalizer

Coverage:
- Серии разделителей → один '+'
- Удаление пробельных символов
- Прочие символы не изменяются
- Пользовательский набор разделителей
"""

import pytest

from src.calculator.normalizer import normalize


class TestNormalize:
    """Тесты normalize()"""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("1,2,3", "1+2+3"),
            ("1:2:3", "1+2+3"),
            ("1\n2\n3", "1+2+3"),
            ("1,:\n,2", "1+2"),
            ("1,,,2", "1+2"),
        ],
    )
    def test_separator_runs_collapse(self, raw: str, expected: str) -> None:
        """Любая серия разделителей → один '+'"""
        assert normalize(raw) == expected

    def test_whitespace_removed(self) -> None:
        assert normalize(" 1 +\t2.5 -  3 ") == "1+2.5-3"

    def test_separators_before_whitespace(self) -> None:
        """Пробел между разделителями не склеивает серии"""
        assert normalize("1, ,2") == "1++2"

    def test_crlf(self) -> None:
        """'\\r' — пробельный символ, '\\n' — разделитель"""
        assert normalize("1\r\n2") == "1+2"

    def test_other_characters_untouched(self) -> None:
        assert normalize("(2+3)*4/x^") == "(2+3)*4/x^"

    def test_empty(self) -> None:
        assert normalize("") == ""
        assert normalize("   ") == ""

    def test_leading_and_trailing_separators(self) -> None:
        """Нормализатор не валидирует: это делает tokenizer"""
        assert normalize(",1,") == "+1+"

    def test_custom_separators(self) -> None:
        assert normalize("1;2;;3", separators=(";",)) == "1+2+3"
        assert normalize("1,2", separators=(";",)) == "1,2"

    def test_regex_metacharacters_escaped(self) -> None:
        assert normalize("1]2^3", separators=("]", "^")) == "1+2+3"
