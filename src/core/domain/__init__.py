"""
Domain models and value objects.

Contains the expression tokens and the evaluation outcome types
shared by every stage of the calculator pipeline.
"""

from src.core.domain.outcome import (
    CalculationError,
    ErrorKind,
    EvaluationOutcome,
    Failure,
    PipelineStage,
    Success,
)
from src.core.domain.tokens import OperatorSymbol, Token, TokenKind, TokenStream

__all__ = [
    # Tokens
    "Token",
    "TokenKind",
    "TokenStream",
    "OperatorSymbol",
    # Outcome
    "ErrorKind",
    "PipelineStage",
    "CalculationError",
    "Success",
    "Failure",
    "EvaluationOutcome",
]
