from __future__ import annotations

from typing import Any, Dict, List

import pandas as pd

from core.data import clean_labels, explode_tokens


RELEASE_TYPES = ["game", "dlc", "expansion"]
MODE_LABELS = [
    ("single_player", "Single Player"),
    ("co_op", "Co-op"),
    ("versus", "Versus"),
]


def _rank_counts(values: pd.Series, key: str, limit: int) -> List[Dict[str, Any]]:
    if values.empty:
        return []
    # first-appearance order breaks ties
    counts = values.groupby(values, sort=False).size().sort_values(ascending=False, kind="stable")
    counts = counts.head(max(0, int(limit)))
    return [{key: str(label), "count": int(n)} for label, n in counts.items()]


def compute_top_genres(rows: pd.DataFrame, *, limit: int = 10) -> List[Dict[str, Any]]:
    return _rank_counts(explode_tokens(rows["genres"]), "genre", limit)


def compute_top_platforms(rows: pd.DataFrame, *, limit: int = 10) -> List[Dict[str, Any]]:
    return _rank_counts(explode_tokens(rows["platform"]), "platform", limit)


def compute_top_developers(rows: pd.DataFrame, *, limit: int = 10) -> List[Dict[str, Any]]:
    return _rank_counts(clean_labels(rows["developer"]), "developer", limit)


def compute_year_count_by_type(rows: pd.DataFrame) -> List[Dict[str, Any]]:
    df = rows[["release_year", "type"]].dropna(subset=["release_year"])
    if df.empty:
        return []
    kind = df["type"].fillna("").astype(str).str.strip().str.lower()
    kind = kind.where(kind.isin(RELEASE_TYPES), "other")
    table = (
        pd.DataFrame({"year": df["release_year"].astype("int64"), "kind": kind})
        .groupby(["year", "kind"])
        .size()
        .unstack(fill_value=0)
        .reindex(columns=RELEASE_TYPES + ["other"], fill_value=0)
        .sort_index()
    )
    return [
        {
            "year": int(year),
            "gameCount": int(r.game),
            "dlcCount": int(r.dlc),
            "expansionCount": int(r.expansion),
            "otherCount": int(r.other),
        }
        for year, r in zip(table.index, table.itertuples(index=False))
    ]


def compute_mode_counts(rows: pd.DataFrame) -> List[Dict[str, Any]]:
    return [{"mode": label, "count": int((rows[col] > 0).sum())} for col, label in MODE_LABELS]
