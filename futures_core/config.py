from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_CSV_PATH = Path("data") / "electricity-generation-2023.csv"
DEFAULT_EXCLUDED_REGIONS = ("Canada",)
DEFAULT_HTTP_TIMEOUT = 60.0


@dataclass(frozen=True)
class Settings:
    csv_path: Path = DEFAULT_CSV_PATH
    data_url: Optional[str] = None
    partition_url: Optional[str] = None
    excluded_regions: tuple[str, ...] = DEFAULT_EXCLUDED_REGIONS
    http_timeout: float = DEFAULT_HTTP_TIMEOUT

    @property
    def exclusions(self) -> dict[str, frozenset[str]]:
        """Exclusion table for the Filter Engine (empty when no regions are excluded)."""
        if not self.excluded_regions:
            return {}
        return {"Region": frozenset(self.excluded_regions)}


def _split_list(raw: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from environment variables (FUTURES_*).
    Unset or blank variables fall back to the defaults.
    """
    env = os.environ if environ is None else environ

    csv_path = env.get("FUTURES_CSV_PATH", "").strip()
    data_url = env.get("FUTURES_DATA_URL", "").strip() or None
    partition_url = env.get("FUTURES_PARTITION_URL", "").strip() or None

    excluded = env.get("FUTURES_EXCLUDED_REGIONS")
    excluded_regions = DEFAULT_EXCLUDED_REGIONS if excluded is None else _split_list(excluded)

    timeout_raw = env.get("FUTURES_HTTP_TIMEOUT", "").strip()
    try:
        http_timeout = float(timeout_raw) if timeout_raw else DEFAULT_HTTP_TIMEOUT
    except ValueError:
        raise ValueError(f"FUTURES_HTTP_TIMEOUT must be a number, got {timeout_raw!r}") from None
    if http_timeout <= 0:
        raise ValueError("FUTURES_HTTP_TIMEOUT must be positive")

    return Settings(
        csv_path=Path(csv_path) if csv_path else DEFAULT_CSV_PATH,
        data_url=data_url,
        partition_url=partition_url.rstrip("/") if partition_url else None,
        excluded_regions=excluded_regions,
        http_timeout=http_timeout,
    )
