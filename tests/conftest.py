"""Pytest configuration and shared fixtures for DebtPath tests.

Provides debt factories and float helpers so tests can exercise the payoff
engine without touching real configuration or the user's data directory.
"""

from __future__ import annotations

import logging

import pytest

from debtpath.models.debt import Debt


@pytest.fixture(autouse=True)
def isolated_data_dir(tmp_path, monkeypatch):
    """Point DEBTPATH_DATA_DIR at a temp dir so logs/exports never leak."""

    data_dir = tmp_path / "data"
    monkeypatch.setenv("DEBTPATH_DATA_DIR", str(data_dir))
    monkeypatch.delenv("DEBTPATH_MAX_PAYOFF_MONTHS", raising=False)
    monkeypatch.delenv("DEBTPATH_LOG_LEVEL", raising=False)
    yield data_dir
    logger = logging.getLogger("debtpath")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def debt_factory():
    """Factory for Debt records with sensible defaults.

    Usage:
        debt = debt_factory(balance=500.0, apr=18.0)
    """

    counter = {"n": 0}

    def _create_debt(
        *,
        id: str | None = None,
        name: str | None = None,
        balance: float = 1000.0,
        minimum_payment: float = 50.0,
        apr: float = 12.0,
    ) -> Debt:
        counter["n"] += 1
        n = counter["n"]
        return Debt(
            id=id or f"debt-{n}",
            name=name or f"Debt {n}",
            balance=balance,
            minimum_payment=minimum_payment,
            apr=apr,
        )

    return _create_debt


@pytest.fixture
def two_debts(debt_factory):
    """Card A: $1,000 at 20%; Loan B: $3,000 at 12%."""

    return [
        debt_factory(id="a", name="Card A", balance=1000.0, minimum_payment=50.0, apr=20.0),
        debt_factory(id="b", name="Loan B", balance=3000.0, minimum_payment=90.0, apr=12.0),
    ]


@pytest.fixture
def diverging_debts(debt_factory):
    """Debts where snowball and avalanche pick different first targets."""

    return [
        debt_factory(id="big", name="Big Card", balance=3000.0, minimum_payment=60.0, apr=24.0),
        debt_factory(id="small", name="Small Loan", balance=1000.0, minimum_payment=30.0, apr=10.0),
    ]


# =============================================================================
# Helper Utilities
# =============================================================================


def assert_float_equal(actual: float, expected: float, tolerance: float = 0.01):
    """Assert that two floats are equal within a tolerance (default one cent)."""
    assert (
        abs(actual - expected) < tolerance
    ), f"Expected {expected}, got {actual} (diff: {abs(actual - expected)})"
