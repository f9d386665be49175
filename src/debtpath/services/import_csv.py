"""CSV ingestion of debt records."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Mapping, Optional

import pandas as pd

from ..models.debt import Debt
from .validation import DebtValidationError, validate_debt

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DebtColumnMapping:
    """Maps debt fields to (lower-cased) CSV headers."""

    name: str = "name"
    balance: str = "balance"
    minimum_payment: str = "minimum_payment"
    apr: str = "apr"
    id: Optional[str] = "id"


def normalize_frame(*, file_path: Path, encoding: str = "utf-8") -> pd.DataFrame:
    """Load a CSV file into a DataFrame with stripped, lower-cased headers."""

    frame = pd.read_csv(file_path, encoding=encoding, skipinitialspace=True)
    frame.columns = [str(c).strip().lower() for c in frame.columns]
    return frame


def _is_blank(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return isinstance(value, str) and not value.strip()


def _parse_amount(value: object, *, field: str, row_number: int) -> float:
    if _is_blank(value):
        raise DebtValidationError(f"Row {row_number}: {field} is required", field=field)
    text = str(value).strip().replace(",", "").lstrip("$").rstrip("%")
    try:
        return float(text)
    except ValueError:
        raise DebtValidationError(
            f"Row {row_number}: {field} is not a number: {value!r}", field=field
        ) from None


def parse_debt_rows(
    *, rows: Iterable[Mapping], mapping: DebtColumnMapping | None = None
) -> list[Debt]:
    """Convert dict-like rows into validated :class:`Debt` records.

    Rows without an id column value get ``debt-<row number>``. Any bad row
    aborts the whole import so callers never work from a partial list.
    """

    mapping = mapping or DebtColumnMapping()
    debts: list[Debt] = []
    for row_number, row in enumerate(rows, start=1):
        raw_id = row.get(mapping.id) if mapping.id else None
        if _is_blank(raw_id):
            debt_id = f"debt-{row_number}"
        elif isinstance(raw_id, float) and raw_id.is_integer():
            debt_id = str(int(raw_id))
        else:
            debt_id = str(raw_id).strip()

        raw_name = row.get(mapping.name)
        name = "" if _is_blank(raw_name) else str(raw_name).strip()

        debt = Debt(
            id=debt_id,
            name=name,
            balance=_parse_amount(row.get(mapping.balance), field="balance", row_number=row_number),
            minimum_payment=_parse_amount(
                row.get(mapping.minimum_payment), field="minimum_payment", row_number=row_number
            ),
            apr=_parse_amount(row.get(mapping.apr), field="apr", row_number=row_number),
        )
        validate_debt(debt)
        debts.append(debt)
    return debts


def load_debts_csv(csv_path: Path, mapping: DebtColumnMapping | None = None) -> list[Debt]:
    """Read ``csv_path`` and return the debts it describes."""

    mapping = mapping or DebtColumnMapping()
    frame = normalize_frame(file_path=Path(csv_path))

    required = [mapping.name, mapping.balance, mapping.minimum_payment, mapping.apr]
    missing = [column for column in required if column not in frame.columns]
    if missing:
        raise DebtValidationError(
            f"{csv_path}: missing column(s): {', '.join(missing)}", field=missing[0]
        )

    rows = frame.to_dict(orient="records")
    debts = parse_debt_rows(rows=rows, mapping=mapping)
    logger.info("Loaded %d debts from %s", len(debts), csv_path)
    return debts
