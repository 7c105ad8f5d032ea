"""Normalizer — стадия 1: каноническая infix-строка.

Каждая серия разделителей (',', ':', '\\n') заменяется одним '+',
затем удаляются все пробельные символы. Стадия никогда не падает.

    "1, 2:3"  →  "1+2+3"
    " (1 + 2) * 3 " →  "(1+2)*3"
"""

import re
from functools import lru_cache
from typing import Pattern, Sequence, Tuple

from src.calculator.config import DEFAULT_SEPARATORS

_WHITESPACE = re.compile(r"\s+")


@lru_cache(maxsize=16)
def _separator_pattern(separators: Tuple[str, ...]) -> Pattern[str]:
    charset = "".join(re.escape(separator) for separator in separators)
    return re.compile(f"[{charset}]+")


def normalize(raw: str, separators: Sequence[str] = DEFAULT_SEPARATORS) -> str:
    """Нормализация сырого текста в каноническую infix-строку.

    Args:
        raw: сырой текст из поля ввода
        separators: символы-разделители (по умолчанию ',', ':', '\\n')

    Returns:
        Строка без пробелов, где серии разделителей заменены на '+'
    """
    collapsed = _separator_pattern(tuple(separators)).sub("+", raw)
    return _WHITESPACE.sub("", collapsed)
