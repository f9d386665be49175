"""Reporting utilities built on top of payoff results.

These helpers only reshape data; drawing charts or tables is left to the
presentation layer.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..formatters import format_currency, format_duration
from ..models.debt import CalculationResult, PayoffMethod, PayoffStrategy


@dataclass(frozen=True, slots=True)
class ComparisonSummary:
    """Headline differences between the two strategies."""

    interest_savings: float  # snowball interest minus avalanche interest
    time_savings: int  # snowball months minus avalanche months
    recommended: PayoffMethod
    both_converged: bool

    def message(self) -> str:
        """Human-readable verdict for display under the comparison table."""

        if not self.both_converged:
            return (
                "At least one plan does not pay off all debts; "
                "increase the extra payment or minimum payments."
            )
        if self.interest_savings > 0:
            text = (
                f"The avalanche method saves you {format_currency(self.interest_savings)} in interest"
            )
            if self.time_savings > 0:
                text += f" and {format_duration(self.time_savings)}"
            return text
        if self.interest_savings < 0:
            return (
                f"The snowball method costs {format_currency(abs(self.interest_savings))} more "
                "but may provide better motivation"
            )
        return "Both methods cost the same in interest"


def compare_strategies(result: CalculationResult) -> ComparisonSummary:
    """Summarize how much avalanche saves over snowball for ``result``."""

    snowball, avalanche = result.snowball, result.avalanche
    interest_savings = round(snowball.total_interest_paid - avalanche.total_interest_paid, 2)
    time_savings = snowball.months_to_payoff - avalanche.months_to_payoff
    if interest_savings > 0 or (interest_savings == 0 and time_savings > 0):
        recommended = PayoffMethod.AVALANCHE
    else:
        recommended = PayoffMethod.SNOWBALL
    return ComparisonSummary(
        interest_savings=interest_savings,
        time_savings=time_savings,
        recommended=recommended,
        both_converged=snowball.converged and avalanche.converged,
    )


def balance_timeline(strategy: PayoffStrategy) -> dict[int, dict[str, float]]:
    """Map month -> {debt name: remaining balance} for per-debt charts."""

    timeline: dict[int, dict[str, float]] = {}
    for payment in strategy.monthly_payments:
        timeline.setdefault(payment.month, {})[payment.debt_name] = payment.remaining_balance
    return timeline


def total_balance_timeline(strategy: PayoffStrategy) -> list[tuple[int, float]]:
    """Return (month, total remaining balance) pairs in month order."""

    totals: dict[int, float] = {}
    for payment in strategy.monthly_payments:
        totals[payment.month] = totals.get(payment.month, 0.0) + payment.remaining_balance
    return sorted(totals.items())


def payoff_months(strategy: PayoffStrategy) -> dict[str, int]:
    """Return the month each debt reached a zero balance, keyed by debt id."""

    paid: dict[str, int] = {}
    for payment in strategy.monthly_payments:
        if payment.remaining_balance == 0 and payment.debt_id not in paid:
            paid[payment.debt_id] = payment.month
    return paid
