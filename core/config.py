from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import List, Optional


PROJECT_DIR = Path(__file__).resolve().parents[1]
DEFAULT_DATASET_PATH = PROJECT_DIR / "public" / "hltb_dataset.csv"
DEFAULT_SAMPLE_SIZE = 500
DEFAULT_CORS_ORIGINS = ["http://localhost:3000", "http://127.0.0.1:3000"]


@dataclass(frozen=True)
class Settings:
    dataset_path: Path = DEFAULT_DATASET_PATH
    sample_size: int = DEFAULT_SAMPLE_SIZE
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    log_level: str = "INFO"


def _as_int(value: Optional[str], default: int) -> int:
    if value is None:
        return default
    try:
        out = int(value.strip())
    except Exception:
        return default
    return out if out > 0 else default


def _as_list(value: Optional[str], default: List[str]) -> List[str]:
    if not value:
        return list(default)
    items = [v.strip() for v in value.split(",")]
    return [v for v in items if v] or list(default)


def settings_from_env(env: Optional[dict] = None) -> Settings:
    env = os.environ if env is None else env

    raw_path = (env.get("HLTB_DATASET_PATH") or "").strip()
    dataset_path = Path(raw_path).expanduser() if raw_path else DEFAULT_DATASET_PATH
    if not dataset_path.is_absolute():
        dataset_path = PROJECT_DIR / dataset_path

    return Settings(
        dataset_path=dataset_path,
        sample_size=_as_int(env.get("HLTB_SAMPLE_SIZE"), DEFAULT_SAMPLE_SIZE),
        cors_origins=_as_list(env.get("HLTB_CORS_ORIGINS"), DEFAULT_CORS_ORIGINS),
        log_level=(env.get("HLTB_LOG_LEVEL") or "INFO").strip().upper() or "INFO",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, read from the environment on first use."""
    return settings_from_env()
