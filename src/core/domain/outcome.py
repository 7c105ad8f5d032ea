"""
Outcome — Результат вычисления выражения и таксономия ошибок

Содержит:
- ErrorKind: закрытый перечень видов ошибок (все терминальные, без retry)
- PipelineStage: стадия pipeline, на которой произошла ошибка
- CalculationError: exception, которым стадии сигнализируют об ошибке
- Success / Failure: immutable Pydantic модели результата
- EvaluationOutcome: sum type Success | Failure

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Outcome: либо Success, либо Failure, никогда оба
2. Success.value всегда конечен (не NaN, не Inf)
3. Failure не содержит частичного результата
4. details — диагностика для разработчика, не пользовательский текст
"""

from enum import Enum
from typing import Any, Dict, Literal, Union

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class ErrorKind(str, Enum):
    """Вид ошибки вычисления.

    UI сопоставляет каждому виду локализованный текст; ядро текстов не производит.
    """

    EMPTY_INPUT = "EMPTY_INPUT"
    EMPTY_EXPRESSION = "EMPTY_EXPRESSION"
    INCOMPLETE_NUMBER = "INCOMPLETE_NUMBER"
    INVALID_DECIMAL = "INVALID_DECIMAL"
    UNPARSABLE_NUMBER = "UNPARSABLE_NUMBER"
    MISSING_OPERAND = "MISSING_OPERAND"
    UNSUPPORTED_CHARACTER = "UNSUPPORTED_CHARACTER"
    TRAILING_OPERATOR = "TRAILING_OPERATOR"
    UNBALANCED_PARENTHESES = "UNBALANCED_PARENTHESES"
    INSUFFICIENT_OPERANDS = "INSUFFICIENT_OPERANDS"
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"
    NON_FINITE_RESULT = "NON_FINITE_RESULT"
    MALFORMED_EXPRESSION = "MALFORMED_EXPRESSION"


class PipelineStage(str, Enum):
    """Стадия pipeline (для диагностики Failure)"""

    INPUT = "INPUT"
    NORMALIZER = "NORMALIZER"
    TOKENIZER = "TOKENIZER"
    CONVERTER = "CONVERTER"
    EVALUATOR = "EVALUATOR"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CalculationError(Exception):
    """
    Терминальная ошибка одной из стадий pipeline.

    Стадии (tokenizer, converter, postfix evaluator, операторы) поднимают
    CalculationError; orchestrator перехватывает её и превращает в Failure.
    Любой другой exception считается ошибкой программирования и пропагирует наружу.
    """

    def __init__(self, kind: ErrorKind, details: str = ""):
        self.kind = kind
        self.details = details
        super().__init__(f"{kind.value}: {details}" if details else kind.value)


# =============================================================================
# OUTCOME MODELS
# =============================================================================


class Success(BaseModel):
    """Успешное вычисление"""

    status: Literal["success"] = "success"
    value: float = Field(..., allow_inf_nan=False, description="Результат вычисления")

    model_config = {"frozen": True}

    @property
    def is_success(self) -> bool:
        return True

    def to_contract(self) -> Dict[str, Any]:
        """Сериализация в dict по схеме evaluation_outcome"""
        return self.model_dump(mode="json")


class Failure(BaseModel):
    """
    Неуспешное вычисление.

    kind — единственное поле контракта, на которое опирается UI;
    stage и details — диагностика.
    """

    status: Literal["failure"] = "failure"
    kind: ErrorKind = Field(..., description="Вид ошибки")
    stage: PipelineStage = Field(..., description="Стадия, на которой произошла ошибка")
    details: str = Field("", description="Диагностика для разработчика")

    model_config = {"frozen": True}

    @property
    def is_success(self) -> bool:
        return False

    def to_contract(self) -> Dict[str, Any]:
        """Сериализация в dict по схеме evaluation_outcome"""
        return self.model_dump(mode="json")


EvaluationOutcome = Union[Success, Failure]
