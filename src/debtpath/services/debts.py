"""Debt payoff calculators (snowball and avalanche).

The simulator walks month by month over a fixed priority order:

- every unpaid debt first receives its minimum payment (capped at what is owed)
- a debt cleared by its minimum frees that minimum for the rest of the month
  and every later month ("rollover")
- the extra-payment pool then goes to the first unpaid debt in priority order
- a debt cleared by the extra pool frees its minimum from the next month on

The loop stops when every debt is paid off or the month cap is reached.
Hitting the cap is reported through ``PayoffStrategy.converged`` rather than
raised, because a plan that never pays off is a valid answer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence

from ..config import MAX_PAYOFF_MONTHS
from ..models.debt import (
    CalculationResult,
    Debt,
    DebtPayment,
    MonthlyPayment,
    PayoffMethod,
    PayoffStrategy,
)
from .validation import validate_inputs, validate_max_months

logger = logging.getLogger(__name__)

OrderingPolicy = Callable[[Sequence[Debt]], list[Debt]]


def snowball_order(debts: Sequence[Debt]) -> list[Debt]:
    """Smallest original balance first; ties keep input order."""
    return sorted(debts, key=lambda d: d.balance)


def avalanche_order(debts: Sequence[Debt]) -> list[Debt]:
    """Highest APR first; ties keep input order."""
    return sorted(debts, key=lambda d: d.apr, reverse=True)


ORDERING_POLICIES: dict[PayoffMethod, OrderingPolicy] = {
    PayoffMethod.SNOWBALL: snowball_order,
    PayoffMethod.AVALANCHE: avalanche_order,
}


@dataclass(slots=True)
class WorkingDebt:
    """Mutable per-simulation state for one input debt."""

    debt: Debt
    current_balance: float
    paid_off: bool = False

    @classmethod
    def from_debt(cls, debt: Debt) -> "WorkingDebt":
        balance = float(debt.balance)
        return cls(debt=debt, current_balance=balance, paid_off=balance <= 0)


@dataclass(slots=True)
class _MonthEntry:
    payment: float
    principal: float
    interest: float


def monthly_interest(balance: float, apr: float) -> float:
    """Interest accrued on ``balance`` over one month at ``apr`` percent."""
    return balance * (apr / 100 / 12)


def simulate_payoff(
    sorted_debts: Sequence[Debt],
    extra_payment: float,
    method: PayoffMethod,
    *,
    max_months: int = MAX_PAYOFF_MONTHS,
) -> PayoffStrategy:
    """Simulate amortization over debts already sorted by an ordering policy.

    Inputs are assumed valid; use :func:`calculate_payoff` for checked entry.
    ``method`` only labels the result.
    """

    max_months = validate_max_months(max_months)
    working = [WorkingDebt.from_debt(d) for d in sorted_debts]
    rolled_minimums = sum(w.debt.minimum_payment for w in working if w.paid_off)

    payments: list[MonthlyPayment] = []
    total_interest = 0.0
    month = 0

    while month < max_months and any(not w.paid_off for w in working):
        month += 1
        remaining_extra = extra_payment + rolled_minimums
        # Keyed by position in priority order; dict order is processing order.
        entries: dict[int, _MonthEntry] = {}

        for idx, work in enumerate(working):
            if work.paid_off:
                continue

            interest = monthly_interest(work.current_balance, work.debt.apr)
            applied = min(work.debt.minimum_payment, work.current_balance + interest)
            # Negative when the minimum does not cover interest; balance then grows.
            principal = applied - interest

            work.current_balance -= principal
            total_interest += interest
            entries[idx] = _MonthEntry(payment=applied, principal=principal, interest=interest)

            if work.current_balance <= 0:
                work.paid_off = True
                remaining_extra += work.debt.minimum_payment
                rolled_minimums += work.debt.minimum_payment

        if remaining_extra > 0:
            target_idx = next((i for i, w in enumerate(working) if not w.paid_off), None)
            if target_idx is not None:
                target = working[target_idx]
                amount = min(remaining_extra, target.current_balance)
                target.current_balance -= amount
                entry = entries[target_idx]
                entry.payment += amount
                entry.principal += amount
                if target.current_balance <= 0:
                    target.paid_off = True
                    # Spent from next month; not redistributed this month.
                    rolled_minimums += target.debt.minimum_payment

        for idx, entry in entries.items():
            work = working[idx]
            payments.append(
                MonthlyPayment(
                    month=month,
                    debt_id=work.debt.id,
                    debt_name=work.debt.name,
                    payment=entry.payment,
                    principal=entry.principal,
                    interest=entry.interest,
                    remaining_balance=max(0.0, work.current_balance),
                )
            )

    converged = all(w.paid_off for w in working)
    if not converged:
        unpaid = [w.debt.name for w in working if not w.paid_off]
        logger.warning(
            "%s plan did not pay off all debts within %d months",
            method.value,
            max_months,
            extra={"method": method.value, "unpaid_debts": unpaid},
        )

    debt_payments = tuple(
        DebtPayment(
            debt_id=debt.id,
            debt_name=debt.name,
            monthly_payment=debt.minimum_payment + (extra_payment if idx == 0 else 0.0),
        )
        for idx, debt in enumerate(sorted_debts)
    )

    return PayoffStrategy(
        method=method,
        monthly_payments=tuple(payments),
        total_interest_paid=round(total_interest, 2),
        months_to_payoff=month,
        debt_payments=debt_payments,
        converged=converged,
    )


def _run(
    debts: Sequence[Debt], extra_payment: float, method: PayoffMethod, max_months: int
) -> PayoffStrategy:
    sorted_debts = ORDERING_POLICIES[method](debts)
    return simulate_payoff(sorted_debts, extra_payment, method, max_months=max_months)


def calculate_payoff(
    debts: Iterable[Debt],
    extra_payment: float,
    method: PayoffMethod | str,
    *,
    max_months: Optional[int] = None,
) -> PayoffStrategy:
    """Validate inputs, order them by ``method`` and simulate."""

    try:
        method = PayoffMethod(method)
    except ValueError:
        raise ValueError(f"Invalid debt payoff strategy: {method!r}") from None
    months = validate_max_months(MAX_PAYOFF_MONTHS if max_months is None else max_months)
    debt_list, extra = validate_inputs(debts, extra_payment)
    return _run(debt_list, extra, method, months)


def calculate_snowball(
    debts: Iterable[Debt], extra_payment: float, *, max_months: Optional[int] = None
) -> PayoffStrategy:
    """Return the payoff strategy prioritizing smallest balances first."""
    return calculate_payoff(debts, extra_payment, PayoffMethod.SNOWBALL, max_months=max_months)


def calculate_avalanche(
    debts: Iterable[Debt], extra_payment: float, *, max_months: Optional[int] = None
) -> PayoffStrategy:
    """Return the payoff strategy prioritizing highest APR first."""
    return calculate_payoff(debts, extra_payment, PayoffMethod.AVALANCHE, max_months=max_months)


def calculate_payoff_comparison(
    debts: Iterable[Debt], extra_payment: float, *, max_months: Optional[int] = None
) -> CalculationResult:
    """Run snowball and avalanche over the same inputs and bundle both results."""

    months = validate_max_months(MAX_PAYOFF_MONTHS if max_months is None else max_months)
    debt_list, extra = validate_inputs(debts, extra_payment)

    snowball = _run(debt_list, extra, PayoffMethod.SNOWBALL, months)
    avalanche = _run(debt_list, extra, PayoffMethod.AVALANCHE, months)

    logger.info(
        "Calculated payoff comparison for %d debts",
        len(debt_list),
        extra={
            "extra_payment": extra,
            "snowball_months": snowball.months_to_payoff,
            "snowball_interest": snowball.total_interest_paid,
            "avalanche_months": avalanche.months_to_payoff,
            "avalanche_interest": avalanche.total_interest_paid,
        },
    )

    return CalculationResult(
        snowball=snowball,
        avalanche=avalanche,
        debts=tuple(debt_list),
        extra_payment=extra,
    )
