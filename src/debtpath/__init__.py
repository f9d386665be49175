"""DebtPath: snowball vs. avalanche debt payoff planning."""

from __future__ import annotations

from .config import MAX_PAYOFF_MONTHS, BaseConfig, DevConfig
from .models import CalculationResult, Debt, MonthlyPayment, PayoffMethod, PayoffStrategy
from .services.debts import (
    calculate_avalanche,
    calculate_payoff,
    calculate_payoff_comparison,
    calculate_snowball,
)
from .services.validation import DebtValidationError

__all__ = [
    "BaseConfig",
    "CalculationResult",
    "Debt",
    "DebtValidationError",
    "DevConfig",
    "MAX_PAYOFF_MONTHS",
    "MonthlyPayment",
    "PayoffMethod",
    "PayoffStrategy",
    "calculate_avalanche",
    "calculate_payoff",
    "calculate_payoff_comparison",
    "calculate_snowball",
]
