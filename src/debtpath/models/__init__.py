"""Domain models for DebtPath."""

from __future__ import annotations

from .debt import CalculationResult, Debt, DebtPayment, MonthlyPayment, PayoffMethod, PayoffStrategy

__all__ = [
    "CalculationResult",
    "Debt",
    "DebtPayment",
    "MonthlyPayment",
    "PayoffMethod",
    "PayoffStrategy",
]
