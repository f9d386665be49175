"""Command line interface for DebtPath."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click
from pandas.errors import EmptyDataError, ParserError

from .config import BaseConfig
from .formatters import format_currency, format_duration, format_percent
from .logging_config import get_logger, setup_logging
from .models.debt import Debt, PayoffMethod, PayoffStrategy
from .services.debts import calculate_payoff, calculate_payoff_comparison
from .services.export_csv import CsvScheduleWriter, persist_comparison
from .services.import_csv import load_debts_csv
from .services.reports import compare_strategies
from .services.validation import DebtValidationError

logger = get_logger("cli")

_debts_argument = click.argument(
    "debts_csv", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
_extra_option = click.option(
    "--extra",
    "extra_payment",
    type=float,
    default=0.0,
    show_default=True,
    help="Extra amount paid each month on top of the minimums.",
)
_max_months_option = click.option(
    "--max-months",
    type=click.IntRange(min=1),
    default=None,
    help="Stop simulating after this many months (defaults to configuration).",
)


def _load(debts_csv: Path) -> list[Debt]:
    try:
        return load_debts_csv(debts_csv)
    except (EmptyDataError, ParserError, UnicodeDecodeError) as exc:
        raise click.ClickException(f"Could not read {debts_csv}: {exc}") from exc
    except DebtValidationError as exc:
        raise click.ClickException(str(exc)) from exc


def _strategy_line(strategy: PayoffStrategy) -> str:
    status = "" if strategy.converged else " (not paid off)"
    return (
        f"{strategy.method.value.capitalize():<10} "
        f"{strategy.months_to_payoff:>4} months ({format_duration(strategy.months_to_payoff)})  "
        f"interest {format_currency(strategy.total_interest_paid)}{status}"
    )


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Plan debt payoff with the snowball and avalanche methods."""

    try:
        config = BaseConfig()
    except ValueError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc
    setup_logging(config)
    ctx.obj = config


@cli.command("compare")
@_debts_argument
@_extra_option
@_max_months_option
@click.option(
    "--export-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Write snowball-schedule.csv and avalanche-schedule.csv here.",
)
@click.pass_obj
def compare(
    config: BaseConfig,
    debts_csv: Path,
    extra_payment: float,
    max_months: Optional[int],
    export_dir: Optional[Path],
) -> None:
    """Compare snowball and avalanche payoff for the debts in DEBTS_CSV."""

    debts = _load(debts_csv)
    try:
        result = calculate_payoff_comparison(
            debts, extra_payment, max_months=max_months or config.MAX_PAYOFF_MONTHS
        )
    except DebtValidationError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(f"{len(debts)} debts, extra payment {format_currency(result.extra_payment)}")
    for debt in result.debts:
        click.echo(
            f"  {debt.name}: {format_currency(debt.balance)} at {format_percent(debt.apr)}, "
            f"minimum {format_currency(debt.minimum_payment)}"
        )
    click.echo(_strategy_line(result.snowball))
    click.echo(_strategy_line(result.avalanche))
    click.echo(compare_strategies(result).message())

    if export_dir is not None:
        writer = CsvScheduleWriter(export_dir)
        persist_comparison(writer=writer, result=result)
        for path in writer.written:
            click.echo(f"Export written: {path}")


@cli.command("schedule")
@_debts_argument
@_extra_option
@_max_months_option
@click.option(
    "--method",
    type=click.Choice([m.value for m in PayoffMethod]),
    default=PayoffMethod.AVALANCHE.value,
    show_default=True,
)
@click.option("--limit", type=click.IntRange(min=1), default=None, help="Only show the first N months.")
@click.pass_obj
def schedule(
    config: BaseConfig,
    debts_csv: Path,
    extra_payment: float,
    max_months: Optional[int],
    method: str,
    limit: Optional[int],
) -> None:
    """Print the month-by-month payment schedule for one method."""

    debts = _load(debts_csv)
    try:
        strategy = calculate_payoff(
            debts, extra_payment, method, max_months=max_months or config.MAX_PAYOFF_MONTHS
        )
    except DebtValidationError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(_strategy_line(strategy))
    click.echo("month  debt                      payment   principal  interest  remaining")
    for payment in strategy.monthly_payments:
        if limit is not None and payment.month > limit:
            break
        click.echo(
            f"{payment.month:>5}  {payment.debt_name[:24]:<24} "
            f"{payment.payment:>9.2f} {payment.principal:>10.2f} "
            f"{payment.interest:>9.2f} {payment.remaining_balance:>10.2f}"
        )
    logger.debug("Printed %s schedule", method)


def main() -> None:
    cli()


if __name__ == "__main__":  # pragma: no cover
    main()
