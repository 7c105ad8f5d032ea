"""Expression Calculator — стадия 5: orchestrator pipeline.

Порядок:
1. trim; пустой ввод → EMPTY_INPUT (pipeline не запускается)
2. Normalizer → Tokenizer; пустой поток → EMPTY_EXPRESSION
3. Converter (shunting-yard)
4. Postfix Evaluator

Первая ошибка прерывает pipeline, её ErrorKind возвращается без изменений.
Orchestrator является единственным местом, где CalculationError превращается в
Failure; evaluate() не поднимает exceptions для любого текстового ввода.

Stateless: экземпляр хранит только immutable config и безопасен
для одновременного использования из нескольких потоков.
"""

import logging
from typing import Optional

from src.calculator.config import CalculatorConfig
from src.calculator.converter import to_postfix
from src.calculator.normalizer import normalize
from src.calculator.postfix_evaluator import evaluate_postfix
from src.calculator.tokenizer import tokenize
from src.core.domain.outcome import (
    CalculationError,
    ErrorKind,
    EvaluationOutcome,
    Failure,
    PipelineStage,
    Success,
)

logger = logging.getLogger(__name__)


class ExpressionCalculator:
    """Калькулятор арифметических выражений.

    Поддерживает разделители (',', ':', '\\n' как сложение), операторы
    + - * /, скобки, десятичные дроби и унарный минус.
    """

    def __init__(self, config: Optional[CalculatorConfig] = None):
        """
        Args:
            config: конфигурация (default: CalculatorConfig())
        """
        self.config = config or CalculatorConfig()

    def evaluate(self, text: Optional[str]) -> EvaluationOutcome:
        """Вычисление выражения.

        Args:
            text: сырой текст (None трактуется как пустая строка)

        Returns:
            Success(value) или Failure(kind, stage, details)
        """
        # 1. Пустой ввод
        trimmed = (text or "").strip()
        if not trimmed:
            return self._fail(ErrorKind.EMPTY_INPUT, PipelineStage.INPUT, "input is empty")

        stage = PipelineStage.NORMALIZER
        try:
            # 2. Normalizer → Tokenizer
            normalized = normalize(trimmed, self.config.separators)

            stage = PipelineStage.TOKENIZER
            tokens = tokenize(normalized)
            if not tokens:
                return self._fail(
                    ErrorKind.EMPTY_EXPRESSION, stage, f"no tokens in {normalized!r}"
                )

            # 3. Converter
            stage = PipelineStage.CONVERTER
            postfix = to_postfix(tokens)

            # 4. Postfix Evaluator
            stage = PipelineStage.EVALUATOR
            value = evaluate_postfix(postfix)
        except CalculationError as e:
            return self._fail(e.kind, stage, e.details)

        return Success(value=value)

    def _fail(self, kind: ErrorKind, stage: PipelineStage, details: str) -> Failure:
        logger.debug("Evaluation failed at %s: %s (%s)", stage.value, kind.value, details)
        return Failure(kind=kind, stage=stage, details=details)


# Экземпляр по умолчанию (immutable, без состояния между вызовами)
_DEFAULT_CALCULATOR = ExpressionCalculator()


def evaluate(text: Optional[str]) -> EvaluationOutcome:
    """Вычисление выражения калькулятором с конфигурацией по умолчанию."""
    return _DEFAULT_CALCULATOR.evaluate(text)
