"""
Tokens — Типизированные токены арифметического выражения

Immutable Pydantic модели для токенов, которые производит tokenizer
и потребляют converter (shunting-yard) и postfix evaluator.

Виды токенов:
- NUMBER: число (value — всегда конечный float)
- OPERATOR: бинарный оператор (+, -, *, /)
- PAREN_LEFT / PAREN_RIGHT: круглые скобки

ИНВАРИАНТЫ:
1. NUMBER токен всегда содержит конечное значение (не NaN, не Inf)
2. OPERATOR токен всегда содержит symbol
3. Скобки не содержат ни value, ни symbol
"""

import math
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class TokenKind(str, Enum):
    """Вид токена"""

    NUMBER = "NUMBER"
    OPERATOR = "OPERATOR"
    PAREN_LEFT = "PAREN_LEFT"
    PAREN_RIGHT = "PAREN_RIGHT"


class OperatorSymbol(str, Enum):
    """Символ бинарного оператора"""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


# =============================================================================
# TOKEN MODEL
# =============================================================================


class Token(BaseModel):
    """
    Токен выражения.

    Используйте фабрики number(), operator(), paren_left(), paren_right()
    вместо прямого конструктора.
    """

    kind: TokenKind = Field(..., description="Вид токена")
    value: Optional[float] = Field(None, description="Значение (только NUMBER)")
    symbol: Optional[OperatorSymbol] = Field(None, description="Оператор (только OPERATOR)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_payload(self) -> "Token":
        """Проверка соответствия payload виду токена"""
        if self.kind == TokenKind.NUMBER:
            if self.value is None or not math.isfinite(self.value):
                raise ValueError(f"NUMBER token requires a finite value, got {self.value}")
            if self.symbol is not None:
                raise ValueError("NUMBER token must not carry a symbol")
        elif self.kind == TokenKind.OPERATOR:
            if self.symbol is None:
                raise ValueError("OPERATOR token requires a symbol")
            if self.value is not None:
                raise ValueError("OPERATOR token must not carry a value")
        elif self.value is not None or self.symbol is not None:
            raise ValueError(f"{self.kind.value} token must not carry a payload")
        return self

    @classmethod
    def number(cls, value: float) -> "Token":
        return cls(kind=TokenKind.NUMBER, value=value)

    @classmethod
    def operator(cls, symbol: str) -> "Token":
        return cls(kind=TokenKind.OPERATOR, symbol=OperatorSymbol(symbol))

    @classmethod
    def paren_left(cls) -> "Token":
        return cls(kind=TokenKind.PAREN_LEFT)

    @classmethod
    def paren_right(cls) -> "Token":
        return cls(kind=TokenKind.PAREN_RIGHT)

    @property
    def is_number(self) -> bool:
        return self.kind == TokenKind.NUMBER

    @property
    def is_operator(self) -> bool:
        return self.kind == TokenKind.OPERATOR

    @property
    def is_paren(self) -> bool:
        return self.kind in (TokenKind.PAREN_LEFT, TokenKind.PAREN_RIGHT)

    def __str__(self) -> str:
        if self.kind == TokenKind.NUMBER:
            return repr(self.value)
        if self.kind == TokenKind.OPERATOR:
            return self.symbol.value
        return "(" if self.kind == TokenKind.PAREN_LEFT else ")"


# Упорядоченная неизменяемая последовательность токенов
TokenStream = Tuple[Token, ...]
