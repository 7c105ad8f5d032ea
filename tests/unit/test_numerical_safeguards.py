"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. NaN/Inf детекцию
2. Проверку точного нуля (включая -0.0)
3. Guard ensure_finite и вид поднимаемой ошибки
"""

import math

import pytest

from src.core.domain.outcome import CalculationError, ErrorKind
from src.core.math.numerical_safeguards import (
    ensure_finite,
    is_exact_zero,
    is_valid_float,
)


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite_values(self) -> None:
        assert is_valid_float(0.0)
        assert is_valid_float(-1.5)
        assert is_valid_float(1e308)

    def test_non_finite_values(self) -> None:
        assert not is_valid_float(math.inf)
        assert not is_valid_float(-math.inf)
        assert not is_valid_float(math.nan)


class TestIsExactZero:
    """Тесты для is_exact_zero"""

    def test_zero_and_negative_zero(self) -> None:
        """0.0 и -0.0 оба ноль"""
        assert is_exact_zero(0.0)
        assert is_exact_zero(-0.0)
        assert is_exact_zero(0)

    def test_tiny_values_are_not_zero(self) -> None:
        """Без epsilon-толерантности: малые значения не ноль"""
        assert not is_exact_zero(1e-300)
        assert not is_exact_zero(-5e-324)


class TestEnsureFinite:
    """Тесты для ensure_finite"""

    def test_returns_finite_value_unchanged(self) -> None:
        assert ensure_finite(2.5, ErrorKind.NON_FINITE_RESULT) == 2.5

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_raises_with_requested_kind(self, value: float) -> None:
        with pytest.raises(CalculationError) as exc_info:
            ensure_finite(value, ErrorKind.NON_FINITE_RESULT)
        assert exc_info.value.kind == ErrorKind.NON_FINITE_RESULT

    def test_kind_is_configurable(self) -> None:
        """Tokenizer использует тот же guard с UNPARSABLE_NUMBER"""
        with pytest.raises(CalculationError) as exc_info:
            ensure_finite(math.inf, ErrorKind.UNPARSABLE_NUMBER, "literal '999'")
        assert exc_info.value.kind == ErrorKind.UNPARSABLE_NUMBER
        assert "literal '999'" in exc_info.value.details
