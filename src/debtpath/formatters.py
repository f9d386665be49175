"""Text formatting helpers for amounts, rates and durations."""

from __future__ import annotations

CURRENCY_DECIMALS = 2
PERCENT_DECIMALS = 2
MONTHS_PER_YEAR = 12


def format_number(value: float, decimals: int = 2) -> str:
    """Return ``value`` with thousands separators, e.g. ``1,234.56``."""
    return f"{value:,.{decimals}f}"


def format_currency(amount: float) -> str:
    """Return ``amount`` as US dollars, e.g. ``$1,234.56`` or ``-$12.00``."""
    text = format_number(abs(amount), CURRENCY_DECIMALS)
    # Avoid "-$0.00" for tiny negatives that round away.
    if amount < 0 and text != format_number(0, CURRENCY_DECIMALS):
        return f"-${text}"
    return f"${text}"


def format_percent(rate: float) -> str:
    """Return an APR-style percent, e.g. ``18.99%`` for ``18.99``."""
    return f"{rate:.{PERCENT_DECIMALS}f}%"


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def format_duration(months: int) -> str:
    """Return a month count as ``"2 years 3 months"``."""
    years, rest = divmod(int(months), MONTHS_PER_YEAR)
    if years and rest:
        return f"{_plural(years, 'year')} {_plural(rest, 'month')}"
    if years:
        return _plural(years, "year")
    return _plural(rest, "month")
