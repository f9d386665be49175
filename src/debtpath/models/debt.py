"""Value types consumed and produced by the payoff engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


class PayoffMethod(str, Enum):
    """Repayment ordering policy."""

    SNOWBALL = "snowball"
    AVALANCHE = "avalanche"


@dataclass(frozen=True, slots=True)
class Debt:
    """A single liability as supplied by the caller."""

    id: str
    name: str
    balance: float
    minimum_payment: float
    apr: float

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Debt":
        """Build a debt from a dict, accepting snake_case or camelCase keys.

        Values are passed through untouched; validation happens in
        :mod:`debtpath.services.validation`.
        """
        minimum = data.get("minimum_payment", data.get("minimumPayment"))
        return cls(
            id=str(data.get("id", "")),
            name=data.get("name", ""),
            balance=data.get("balance"),
            minimum_payment=minimum,
            apr=data.get("apr"),
        )


@dataclass(frozen=True, slots=True)
class MonthlyPayment:
    """Payment applied to one debt in one simulated month."""

    month: int
    debt_id: str
    debt_name: str
    payment: float
    principal: float
    interest: float
    remaining_balance: float


@dataclass(frozen=True, slots=True)
class DebtPayment:
    """First-month payment snapshot for one debt."""

    debt_id: str
    debt_name: str
    monthly_payment: float


@dataclass(frozen=True, slots=True)
class PayoffStrategy:
    """Result of simulating one ordering policy."""

    method: PayoffMethod
    monthly_payments: tuple[MonthlyPayment, ...]
    total_interest_paid: float
    months_to_payoff: int
    debt_payments: tuple[DebtPayment, ...]
    converged: bool = True

    def payments_for_month(self, month: int) -> list[MonthlyPayment]:
        return [p for p in self.monthly_payments if p.month == month]

    def payments_for_debt(self, debt_id: str) -> list[MonthlyPayment]:
        return [p for p in self.monthly_payments if p.debt_id == debt_id]


@dataclass(frozen=True, slots=True)
class CalculationResult:
    """Snowball and avalanche strategies computed over the same inputs."""

    snowball: PayoffStrategy
    avalanche: PayoffStrategy
    debts: tuple[Debt, ...] = field(default_factory=tuple)
    extra_payment: float = 0.0

    def strategy(self, method: PayoffMethod | str) -> PayoffStrategy:
        return self.snowball if PayoffMethod(method) is PayoffMethod.SNOWBALL else self.avalanche
