"""CSV export helpers for payoff schedules."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterable, Protocol

from ..models.debt import CalculationResult, MonthlyPayment, PayoffStrategy

logger = logging.getLogger(__name__)

SCHEDULE_HEADERS = [
    "month",
    "debt_id",
    "debt_name",
    "payment",
    "principal",
    "interest",
    "remaining_balance",
]


class ScheduleWriter(Protocol):
    """Persists payoff schedules for later retrieval."""

    def write_schedule(
        self, *, method: str, rows: list[dict]
    ) -> None:  # pragma: no cover - interface
        ...


def _money(value: float) -> str:
    return f"{value:.2f}"


def schedule_rows(payments: Iterable[MonthlyPayment]) -> list[dict]:
    """Flatten monthly payments into CSV-ready dicts, amounts rounded to cents."""

    return [
        {
            "month": p.month,
            "debt_id": p.debt_id,
            "debt_name": p.debt_name,
            "payment": _money(p.payment),
            "principal": _money(p.principal),
            "interest": _money(p.interest),
            "remaining_balance": _money(p.remaining_balance),
        }
        for p in payments
    ]


def _write_rows(rows: Iterable[dict], output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    # newline='' keeps csv from doubling line endings on Windows
    with output_path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(
            fh, fieldnames=SCHEDULE_HEADERS, extrasaction="ignore", quoting=csv.QUOTE_MINIMAL
        )
        writer.writeheader()
        writer.writerows(rows)
    return output_path


def export_strategy_csv(*, strategy: PayoffStrategy, output_path: Path) -> Path:
    """Write the strategy's monthly ledger to ``output_path`` and return it."""

    return _write_rows(schedule_rows(strategy.monthly_payments), Path(output_path))


class CsvScheduleWriter:
    """Writes each schedule to ``<output_dir>/<method>-schedule.csv``."""

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)
        self.written: list[Path] = []

    def write_schedule(self, *, method: str, rows: list[dict]) -> None:
        path = _write_rows(rows, self.output_dir / f"{method}-schedule.csv")
        self.written.append(path)
        logger.info("Exported %s schedule", method, extra={"path": str(path), "rows": len(rows)})


def persist_comparison(*, writer: ScheduleWriter, result: CalculationResult) -> None:
    """Hand both strategies' ledgers to the persistence layer."""

    for strategy in (result.snowball, result.avalanche):
        writer.write_schedule(
            method=strategy.method.value, rows=schedule_rows(strategy.monthly_payments)
        )
