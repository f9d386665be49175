"""Tests for CSV export of payoff schedules."""

from __future__ import annotations

import csv
from pathlib import Path

from debtpath.services import export_csv
from debtpath.services.debts import calculate_payoff_comparison, calculate_snowball


def _read(path: Path) -> list[dict]:
    with path.open(newline="", encoding="utf-8") as fh:
        return list(csv.DictReader(fh))


def test_export_strategy_csv_creates_file(tmp_path, two_debts):
    """Exporting a schedule writes a CSV with header and one row per payment."""

    strategy = calculate_snowball(two_debts, 100.0)
    output_path = tmp_path / "nested" / "snowball.csv"

    written = export_csv.export_strategy_csv(strategy=strategy, output_path=output_path)

    assert written == output_path
    rows = _read(output_path)
    assert len(rows) == len(strategy.monthly_payments)
    assert list(rows[0].keys()) == export_csv.SCHEDULE_HEADERS
    assert rows[0]["month"] == "1"
    assert rows[0]["debt_id"] == "a"
    assert rows[0]["payment"] == "150.00"
    assert rows[0]["interest"] == "16.67"
    assert rows[-1]["remaining_balance"] == "0.00"


def test_schedule_rows_round_to_cents(two_debts):
    strategy = calculate_snowball(two_debts, 100.0)

    rows = export_csv.schedule_rows(strategy.monthly_payments[:1])

    assert rows == [
        {
            "month": 1,
            "debt_id": "a",
            "debt_name": "Card A",
            "payment": "150.00",
            "principal": "133.33",
            "interest": "16.67",
            "remaining_balance": "866.67",
        }
    ]


def test_persist_comparison_calls_writer_per_method(two_debts):
    """Both ledgers are handed to the writer, snowball first."""

    written = []

    class MockWriter:
        def write_schedule(self, *, method: str, rows: list[dict]) -> None:
            written.append({"method": method, "rows": rows})

    result = calculate_payoff_comparison(two_debts, 100.0)
    export_csv.persist_comparison(writer=MockWriter(), result=result)

    assert [w["method"] for w in written] == ["snowball", "avalanche"]
    assert len(written[0]["rows"]) == len(result.snowball.monthly_payments)


def test_csv_schedule_writer(tmp_path, diverging_debts):
    result = calculate_payoff_comparison(diverging_debts, 300.0)
    writer = export_csv.CsvScheduleWriter(tmp_path / "exports")

    export_csv.persist_comparison(writer=writer, result=result)

    assert [p.name for p in writer.written] == ["snowball-schedule.csv", "avalanche-schedule.csv"]
    avalanche_rows = _read(tmp_path / "exports" / "avalanche-schedule.csv")
    assert avalanche_rows[0]["debt_id"] == "big"
