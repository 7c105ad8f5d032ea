"""Calculator — pipeline вычисления арифметических выражений.

Стадии (чистые функции без состояния):
- Normalizer: серии ',', ':', '\\n' → '+', удаление пробелов
- Tokenizer: строка → TokenStream
- Converter: infix → postfix (shunting-yard)
- Postfix Evaluator: postfix → float
- Evaluate: orchestrator, любая ошибка → Failure(kind)
"""

from .config import CalculatorConfig
from .converter import to_postfix
from .evaluator import ExpressionCalculator, evaluate
from .normalizer import normalize
from .postfix_evaluator import evaluate_postfix
from .tokenizer import tokenize

__all__ = [
    "CalculatorConfig",
    "ExpressionCalculator",
    "evaluate",
    "normalize",
    "tokenize",
    "to_postfix",
    "evaluate_postfix",
]
