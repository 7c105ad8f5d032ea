"""Calculator Config — конфигурация pipeline калькулятора."""

from dataclasses import dataclass
from typing import Final, Tuple

from src.core.math.operators import OPERATOR_CHARS

# Символы грамматики выражения; они не могут быть разделителями
GRAMMAR_CHARS: Final[frozenset] = frozenset("0123456789.()") | OPERATOR_CHARS

DEFAULT_SEPARATORS: Final[Tuple[str, ...]] = (",", ":", "\n")


@dataclass(frozen=True)
class CalculatorConfig:
    """Конфигурация калькулятора.

    separators: символы режима "числа через запятую/двоеточие";
    каждая серия таких символов превращается в один '+'.
    """

    separators: Tuple[str, ...] = DEFAULT_SEPARATORS

    def __post_init__(self):
        if not self.separators:
            raise ValueError("separators must not be empty")

        for separator in self.separators:
            if len(separator) != 1:
                raise ValueError(f"separator must be a single character, got {separator!r}")
            if separator in GRAMMAR_CHARS:
                raise ValueError(f"separator {separator!r} collides with expression grammar")
