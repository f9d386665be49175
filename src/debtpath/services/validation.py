"""Input validation for the payoff engine.

All checks run before any simulation so callers never receive a partial
result for bad input.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterable, Optional

from ..config import BaseConfig
from ..models.debt import Debt


class DebtValidationError(ValueError):
    """Raised when a debt or the extra payment fails validation."""

    def __init__(self, message: str, *, field: str, debt_id: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field
        self.debt_id = debt_id


def _label(debt: Debt) -> str:
    if isinstance(debt.name, str) and debt.name.strip():
        return f"Debt {debt.id!r} ({debt.name.strip()})"
    return f"Debt {debt.id!r}"


def _require_amount(value: object, *, field: str, label: str, debt_id: Optional[str]) -> float:
    """Return ``value`` as a float if it is a finite, non-negative number."""

    if isinstance(value, bool) or not isinstance(value, Real):
        raise DebtValidationError(
            f"{label}: {field} must be a number, got {value!r}", field=field, debt_id=debt_id
        )
    amount = float(value)
    if not math.isfinite(amount):
        raise DebtValidationError(
            f"{label}: {field} must be finite, got {amount}", field=field, debt_id=debt_id
        )
    if amount < 0:
        raise DebtValidationError(
            f"{label}: {field} cannot be negative, got {amount}", field=field, debt_id=debt_id
        )
    return amount


def validate_debt(debt: Debt) -> None:
    """Raise :class:`DebtValidationError` describing the first invalid field."""

    debt_id = debt.id
    label = _label(debt)

    if not isinstance(debt_id, str) or not debt_id.strip():
        raise DebtValidationError(f"{label}: id is required", field="id", debt_id=debt_id)

    if not isinstance(debt.name, str) or not debt.name.strip():
        raise DebtValidationError(f"{label}: name is required", field="name", debt_id=debt_id)
    if len(debt.name) > BaseConfig.NAME_MAX_LENGTH:
        raise DebtValidationError(
            f"{label}: name exceeds {BaseConfig.NAME_MAX_LENGTH} characters",
            field="name",
            debt_id=debt_id,
        )

    _require_amount(debt.balance, field="balance", label=label, debt_id=debt_id)
    _require_amount(debt.minimum_payment, field="minimum_payment", label=label, debt_id=debt_id)
    apr = _require_amount(debt.apr, field="apr", label=label, debt_id=debt_id)
    if apr > BaseConfig.APR_MAX:
        raise DebtValidationError(
            f"{label}: apr must be between 0 and {BaseConfig.APR_MAX:g}, got {apr}",
            field="apr",
            debt_id=debt_id,
        )


def validate_extra_payment(extra_payment: object) -> float:
    """Return the extra payment as a float, rejecting negative or non-finite values."""

    return _require_amount(
        extra_payment, field="extra_payment", label="Extra payment", debt_id=None
    )


def validate_max_months(max_months: object) -> int:
    if isinstance(max_months, bool) or not isinstance(max_months, int) or max_months <= 0:
        raise DebtValidationError(
            f"max_months must be a positive integer, got {max_months!r}", field="max_months"
        )
    return max_months


def validate_inputs(debts: Iterable[Debt], extra_payment: object) -> tuple[list[Debt], float]:
    """Validate every debt and the extra payment; return them normalized."""

    debt_list = list(debts)
    seen: set[str] = set()
    for debt in debt_list:
        if not isinstance(debt, Debt):
            raise DebtValidationError(
                f"Expected a Debt, got {type(debt).__name__}", field="debt"
            )
        validate_debt(debt)
        if debt.id in seen:
            raise DebtValidationError(
                f"{_label(debt)}: duplicate id", field="id", debt_id=debt.id
            )
        seen.add(debt.id)
    return debt_list, validate_extra_payment(extra_payment)
