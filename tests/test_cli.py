"""CLI tests using click's CliRunner."""

from __future__ import annotations

import csv

import pytest
from click.testing import CliRunner

from debtpath.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def debts_csv(tmp_path):
    path = tmp_path / "debts.csv"
    path.write_text(
        "id,name,balance,minimum_payment,apr\n"
        "big,Big Card,3000,60,24\n"
        "small,Small Loan,1000,30,10\n",
        encoding="utf-8",
    )
    return path


def test_compare_prints_both_methods(runner, debts_csv):
    result = runner.invoke(cli, ["compare", str(debts_csv), "--extra", "300"])

    assert result.exit_code == 0, result.output
    assert "2 debts, extra payment $300.00" in result.output
    assert "Big Card: $3,000.00 at 24.00%, minimum $60.00" in result.output
    assert "Snowball" in result.output
    assert "Avalanche" in result.output
    assert "The avalanche method saves you" in result.output


def test_compare_exports_schedules(runner, debts_csv, tmp_path):
    export_dir = tmp_path / "out"

    result = runner.invoke(
        cli, ["compare", str(debts_csv), "--extra", "300", "--export-dir", str(export_dir)]
    )

    assert result.exit_code == 0, result.output
    assert (export_dir / "snowball-schedule.csv").exists()
    with (export_dir / "avalanche-schedule.csv").open(newline="", encoding="utf-8") as fh:
        rows = list(csv.DictReader(fh))
    assert rows[0]["debt_id"] == "big"
    assert "Export written" in result.output


def test_compare_reports_non_convergence(runner, tmp_path):
    path = tmp_path / "stuck.csv"
    path.write_text("name,balance,minimum_payment,apr\nStuck,10000,50,12\n", encoding="utf-8")

    result = runner.invoke(cli, ["compare", str(path), "--max-months", "24"])

    assert result.exit_code == 0, result.output
    assert "(not paid off)" in result.output
    assert "does not pay off" in result.output


def test_max_months_from_environment(runner, tmp_path, monkeypatch):
    monkeypatch.setenv("DEBTPATH_MAX_PAYOFF_MONTHS", "6")
    path = tmp_path / "stuck.csv"
    path.write_text("name,balance,minimum_payment,apr\nStuck,10000,50,12\n", encoding="utf-8")

    result = runner.invoke(cli, ["schedule", str(path), "--method", "snowball"])

    assert result.exit_code == 0, result.output
    assert "6 months" in result.output


def test_schedule_prints_rows(runner, debts_csv):
    result = runner.invoke(
        cli, ["schedule", str(debts_csv), "--extra", "300", "--method", "snowball", "--limit", "2"]
    )

    assert result.exit_code == 0, result.output
    lines = [line for line in result.output.splitlines() if line.strip()[:1].isdigit()]
    assert len(lines) == 4  # two debts x two months
    assert "Small Loan" in lines[0]
    assert "330.00" in lines[0]


def test_invalid_debt_file_fails_cleanly(runner, tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("name,balance,minimum_payment,apr\nVisa,-10,50,12\n", encoding="utf-8")

    result = runner.invoke(cli, ["compare", str(path)])

    assert result.exit_code == 1
    assert "balance cannot be negative" in result.output


def test_negative_extra_fails_cleanly(runner, debts_csv):
    result = runner.invoke(cli, ["compare", str(debts_csv), "--extra=-5"])

    assert result.exit_code == 1
    assert "extra_payment" in result.output


def test_empty_file_fails_cleanly(runner, tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")

    result = runner.invoke(cli, ["compare", str(path)])

    assert result.exit_code == 1
    assert "Could not read" in result.output


def test_bad_configuration_fails_cleanly(runner, debts_csv, monkeypatch):
    monkeypatch.setenv("DEBTPATH_MAX_PAYOFF_MONTHS", "never")

    result = runner.invoke(cli, ["compare", str(debts_csv)])

    assert result.exit_code == 1
    assert "Invalid configuration" in result.output
