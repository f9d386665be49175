"""Service module exports."""

from . import debts, export_csv, import_csv, reports, validation

__all__ = [
    "debts",
    "export_csv",
    "import_csv",
    "reports",
    "validation",
]
