from __future__ import annotations

import logging
import math
import threading
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Iterable, List, Optional, Union

import pandas as pd

from core.config import get_settings


logger = logging.getLogger(__name__)

TEXT_COLUMNS = [
    "id",
    "name",
    "type",
    "platform",
    "genres",
    "developer",
    "publisher",
    "release_date",
]
INTEGER_COLUMNS = ["release_year", "release_month"]
DURATION_COLUMNS = ["main_story", "main_plus_sides", "completionist", "all_styles"]
MODE_COLUMNS = ["single_player", "co_op", "versus"]
ROW_COLUMNS = TEXT_COLUMNS + INTEGER_COLUMNS + DURATION_COLUMNS + MODE_COLUMNS
INT_LIMIT = 2**31


class DatasetError(Exception):
    """Base error for anything that prevents the dataset from loading."""


class DatasetNotFoundError(DatasetError):
    """The CSV file is missing or cannot be read."""


class DatasetParseError(DatasetError):
    """The CSV file could not be parsed."""


@dataclass(frozen=True, eq=False)
class Dataset:
    path: Path
    rows: pd.DataFrame

    def __len__(self) -> int:
        return len(self.rows)


def to_number(value: object) -> Optional[float]:
    """Parse a raw cell into a finite float, or None when blank/malformed."""
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        out = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    if math.isnan(out) or math.isinf(out):
        return None
    return out


def numeric_column(series: pd.Series) -> pd.Series:
    return series.map(to_number).astype("float64")


def integer_column(series: pd.Series, *, low: Optional[int] = None, high: Optional[int] = None) -> pd.Series:
    values = numeric_column(series)
    valid = values.notna() & (values % 1 == 0) & (values.abs() < INT_LIMIT)
    if low is not None:
        valid &= values >= low
    if high is not None:
        valid &= values <= high
    return values.where(valid).astype("Int64")


def text_column(series: pd.Series) -> pd.Series:
    values = series.astype("string")
    blank = values.str.strip().eq("").fillna(False).astype(bool)
    return values.mask(blank)


def decode_rows(frame: pd.DataFrame) -> pd.DataFrame:
    """Turn a raw (string) frame into the typed row table.

    Missing columns are added as all-absent so every aggregation can rely on
    the full column set. Extra columns are carried through untouched.
    """
    df = frame.copy().reset_index(drop=True)
    df.columns = [str(c).strip() for c in df.columns]
    for col in ROW_COLUMNS:
        if col not in df.columns:
            df[col] = pd.NA

    for col in TEXT_COLUMNS:
        df[col] = text_column(df[col])
    df["release_year"] = integer_column(df["release_year"])
    df["release_month"] = integer_column(df["release_month"], low=1, high=12)
    for col in DURATION_COLUMNS + MODE_COLUMNS:
        df[col] = numeric_column(df[col])
    return df


def explode_tokens(series: pd.Series) -> pd.Series:
    """Split a comma-delimited column into one entry per trimmed, non-empty token.

    The returned series keeps the originating row index, so a row listing
    several tokens appears once per token.
    """
    tokens = series.dropna().astype(str).str.split(",").explode()
    if tokens.empty:
        return pd.Series(dtype=object, name=series.name)
    tokens = tokens.astype(str).str.strip()
    return tokens[tokens.ne("")]


def clean_labels(series: pd.Series) -> pd.Series:
    values = series.dropna().astype(str).str.strip()
    return values[values.ne("")]


def read_dataset(path: Union[str, Path]) -> Dataset:
    csv_path = Path(path)
    if not csv_path.is_file():
        raise DatasetNotFoundError(f"Dataset file not found: {csv_path}")
    try:
        raw = pd.read_csv(csv_path, dtype=str, keep_default_na=False, encoding="utf-8")
    except OSError as exc:
        raise DatasetNotFoundError(f"Dataset file could not be read: {csv_path}") from exc
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
        raise DatasetParseError(f"Dataset file is not valid CSV: {csv_path}") from exc

    rows = decode_rows(raw)
    logger.info("Loaded HLTB dataset from %s (%d rows)", csv_path, len(rows))
    return Dataset(path=csv_path, rows=rows)


# ---------------- Process-wide cache ----------------
_LOAD_LOCK = threading.Lock()


@lru_cache(maxsize=4)
def _load_dataset_cached(path_key: str) -> Dataset:
    return read_dataset(Path(path_key))


def load_dataset(path: Union[str, Path, None] = None) -> Dataset:
    """Return the cached dataset, reading the CSV on first use only.

    Failed loads are not cached; the next call tries the file again.
    """
    csv_path = Path(path) if path is not None else get_settings().dataset_path
    with _LOAD_LOCK:
        return _load_dataset_cached(str(csv_path.resolve()))


def clear_dataset_cache() -> None:
    with _LOAD_LOCK:
        _load_dataset_cached.cache_clear()


def rows_from_records(records: Iterable[dict]) -> pd.DataFrame:
    """Build the typed row table from in-memory records (same decode as the CSV path)."""
    items: List[dict] = list(records)
    if not items:
        return decode_rows(pd.DataFrame(columns=ROW_COLUMNS))
    return decode_rows(pd.DataFrame.from_records(items))
