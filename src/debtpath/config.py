"""Application configuration objects and helpers."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Safety cap on simulated months (50 years).
MAX_PAYOFF_MONTHS = 600


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_positive_int(name: str, default: int) -> int:
    """Read a positive integer from the environment, failing loudly on junk."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        parsed = int(value.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}.") from exc
    if parsed <= 0:
        raise ValueError(f"{name} must be positive, got {parsed}.")
    return parsed


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "DebtPath"
    LOG_FILENAME = "debtpath.log"
    NAME_MAX_LENGTH = 100
    APR_MAX = 100.0

    def __init__(self) -> None:
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("DEBTPATH_DEV_MODE", default=True)
        self.MAX_PAYOFF_MONTHS = _env_positive_int(
            "DEBTPATH_MAX_PAYOFF_MONTHS", MAX_PAYOFF_MONTHS
        )
        self.LOG_LEVEL = os.getenv("DEBTPATH_LOG_LEVEL", "INFO").strip().upper()
        if not isinstance(logging.getLevelName(self.LOG_LEVEL), int):
            raise ValueError(f"DEBTPATH_LOG_LEVEL is not a logging level: {self.LOG_LEVEL!r}.")

    def _resolve_data_dir(self) -> Path:
        """Return the directory where logs and exports are written."""

        data_root = os.getenv("DEBTPATH_DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def export_dir(self) -> Path:
        return Path(self.DATA_DIR) / "exports"


class DevConfig(BaseConfig):
    """Development configuration with verbose console logging."""

    DEBUG = True
    TESTING = False


class TestConfig(BaseConfig):
    """Configuration used by the test-suite."""

    __test__ = False  # keep pytest from collecting this class

    DEBUG = False
    TESTING = True

    def __init__(self) -> None:
        super().__init__()
        self.DEV_MODE = True
