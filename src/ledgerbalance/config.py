"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .domain.records import YearlyProration

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_proration(name: str, default: YearlyProration) -> YearlyProration:
    """Resolve the yearly income proration policy from the environment."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return YearlyProration(value.strip().lower())
    except ValueError as exc:
        allowed = ", ".join(p.value for p in YearlyProration)
        raise ValueError(f"{name} must be one of: {allowed} (got {value!r})") from exc


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "LedgerBalance"
    DB_FILENAME = "ledgerbalance.db"
    ENV_PREFIX = "LEDGERBALANCE_"

    def __init__(self) -> None:
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool(f"{self.ENV_PREFIX}DEV_MODE", default=True)
        self.LOG_LEVEL = os.getenv(f"{self.ENV_PREFIX}LOG_LEVEL", "INFO").upper()
        self.DATABASE_URL = os.getenv(f"{self.ENV_PREFIX}DATABASE_URL", self._build_sqlite_url())
        self.YEARLY_PRORATION = _env_proration(
            f"{self.ENV_PREFIX}YEARLY_PRORATION", default=YearlyProration.CALENDAR_YEAR
        )

    def _resolve_data_dir(self) -> Path:
        """Return the directory where the SQLite file and logs live."""

        data_root = os.getenv(f"{self.ENV_PREFIX}DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    def _build_sqlite_url(self) -> str:
        """Construct the default SQLite URL inside the data directory."""

        db_path = self.DATA_DIR / self.DB_FILENAME
        return f"sqlite:///{db_path}"

    def sqlalchemy_engine_options(self) -> dict[str, Any]:
        """Expose engine kwargs for SQLModel to consume."""

        engine_options: dict[str, Any] = {}
        if self.DATABASE_URL.startswith("sqlite"):
            engine_options["connect_args"] = {"check_same_thread": False}
        return engine_options


class DevConfig(BaseConfig):
    """Development configuration using local SQLite."""

    DEBUG = True
    TESTING = False


class TestConfig(BaseConfig):
    """Test configuration backed by in-memory SQLite unless a URL is set."""

    __test__ = False  # not a pytest test class

    DEBUG = False
    TESTING = True

    def __init__(self) -> None:
        super().__init__()
        if not os.getenv(f"{self.ENV_PREFIX}DATABASE_URL"):
            self.DATABASE_URL = "sqlite://"
