"""Runtime settings read from the environment (and an optional ``.env``)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path

from dotenv import load_dotenv

# When installed in editable mode the project root is the repo root.
ROOT_DIR = Path(__file__).resolve().parents[3]

STORAGE_BACKENDS = ("file", "memory")


class ConfigError(Exception):
    """An environment setting holds an unusable value."""


def _get_env(key: str, default: str) -> str:
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def _get_amount(key: str) -> Decimal:
    raw = _get_env(key, "0")
    try:
        value = Decimal(raw)
    except InvalidOperation:
        raise ConfigError(f"{key} must be a number, got {raw!r}") from None
    if not value.is_finite() or value < 0:
        raise ConfigError(f"{key} must be a non-negative number, got {raw!r}")
    return value


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    storage_file: str
    storage_backend: str
    log_level: str
    tax_rate: Decimal
    shipping_cost: Decimal

    @property
    def storage_path(self) -> Path:
        return self.data_dir / self.storage_file


def load_settings() -> Settings:
    load_dotenv(dotenv_path=ROOT_DIR / ".env")

    backend = _get_env("STOREFRONT_STORAGE", "file").lower()
    if backend not in STORAGE_BACKENDS:
        raise ConfigError(
            f"STOREFRONT_STORAGE must be one of {', '.join(STORAGE_BACKENDS)}, got {backend!r}"
        )

    return Settings(
        data_dir=Path(_get_env("STOREFRONT_DATA_DIR", str(ROOT_DIR / "data"))),
        storage_file=_get_env("STOREFRONT_STORAGE_FILE", "storage.json"),
        storage_backend=backend,
        log_level=_get_env("STOREFRONT_LOG_LEVEL", "WARNING").upper(),
        tax_rate=_get_amount("STOREFRONT_TAX_RATE"),
        shipping_cost=_get_amount("STOREFRONT_SHIPPING_COST"),
    )
