from __future__ import annotations

from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd

from core.data import explode_tokens


YEAR_MIN = 1970
YEAR_MAX = 2030
HISTOGRAM_BINS = [1, 5, 10, 20, 40, 80, 160, 320, 640, 1000]
GENRE_MIN_SUPPORT = 50


def _mean(total: object, count: object) -> float:
    count = int(count)
    return float(total) / count if count else 0.0


def compute_yearly_averages(rows: pd.DataFrame) -> List[Dict[str, Any]]:
    df = rows[["release_year", "main_story", "all_styles"]].dropna(subset=["release_year"])
    if df.empty:
        return []
    df = df.assign(release_year=df["release_year"].astype("int64"))
    grouped = (
        df.groupby("release_year")
        .agg(
            sum_main=("main_story", "sum"),
            count_main=("main_story", "count"),
            sum_all=("all_styles", "sum"),
            count_all=("all_styles", "count"),
        )
        .reset_index()
        .sort_values("release_year")
    )
    grouped = grouped[(grouped["release_year"] > YEAR_MIN) & (grouped["release_year"] < YEAR_MAX)]
    return [
        {
            "year": int(r.release_year),
            "avgMainStory": _mean(r.sum_main, r.count_main),
            "avgAllStyles": _mean(r.sum_all, r.count_all),
            # main story support when there is any, else all styles support
            "count": int(r.count_main) or int(r.count_all),
        }
        for r in grouped.itertuples(index=False)
    ]


def compute_genre_durations(
    rows: pd.DataFrame, *, limit: int = 5, min_support: int = GENRE_MIN_SUPPORT
) -> List[Dict[str, Any]]:
    """Average Main / Main+Sides / Completionist hours per genre token.

    A genre is kept only when its combined sample count across the three
    durations is above ``min_support``; the best supported ``limit`` genres
    are returned.
    """
    genres = explode_tokens(rows["genres"])
    if genres.empty:
        return []
    df = genres.to_frame("genre").join(rows[["main_story", "main_plus_sides", "completionist"]])
    grouped = df.groupby("genre", sort=False).agg(
        sum_main=("main_story", "sum"),
        c_main=("main_story", "count"),
        sum_mps=("main_plus_sides", "sum"),
        c_mps=("main_plus_sides", "count"),
        sum_comp=("completionist", "sum"),
        c_comp=("completionist", "count"),
    )
    grouped["support"] = grouped["c_main"] + grouped["c_mps"] + grouped["c_comp"]
    grouped = grouped[grouped["support"] > min_support]
    grouped = grouped.sort_values("support", ascending=False, kind="stable").head(max(0, int(limit)))
    return [
        {
            "genre": str(genre),
            "main": _mean(r.sum_main, r.c_main),
            "mainPlusSides": _mean(r.sum_mps, r.c_mps),
            "completionist": _mean(r.sum_comp, r.c_comp),
            "support": int(r.support),
        }
        for genre, r in zip(grouped.index, grouped.itertuples(index=False))
    ]


def histogram_label(low: int, high: int) -> str:
    return f"{low}–{high} hours"


def compute_playtime_histogram(rows: pd.DataFrame) -> List[Dict[str, Any]]:
    values = rows["all_styles"].dropna()
    values = values[(values > 0) & (values < HISTOGRAM_BINS[-1])]
    n_bins = len(HISTOGRAM_BINS) - 1
    if values.empty:
        counts = pd.Series(0, index=range(n_bins))
    else:
        # right=False -> [low, high), a boundary value lands in the upper bucket
        codes = pd.cut(values, bins=HISTOGRAM_BINS, right=False, labels=False).dropna().astype(int)
        counts = codes.value_counts().reindex(range(n_bins), fill_value=0)
    return [
        {"binLabel": histogram_label(low, high), "count": int(counts.iloc[i])}
        for i, (low, high) in enumerate(zip(HISTOGRAM_BINS[:-1], HISTOGRAM_BINS[1:]))
    ]


def compute_main_vs_completionist(
    rows: pd.DataFrame, *, sample_size: int = 500, rng: Optional[np.random.Generator] = None
) -> List[Dict[str, float]]:
    pts = rows[["main_story", "completionist"]].dropna()
    pts = pts[(pts["main_story"] > 0) & (pts["completionist"] > 0)]
    sample_size = max(0, int(sample_size))
    if len(pts) > sample_size:
        rng = rng if rng is not None else np.random.default_rng()
        pts = pts.sample(n=sample_size, replace=False, random_state=rng)
    return [
        {"main_story": float(main), "completionist": float(comp)}
        for main, comp in pts.itertuples(index=False, name=None)
    ]


def compute_release_month_averages(rows: pd.DataFrame) -> List[Dict[str, Any]]:
    df = rows[["release_month", "all_styles"]].dropna()
    months = df["release_month"].astype("int64")
    grouped = (
        df["all_styles"]
        .groupby(months)
        .agg(total="sum", n="count")
        .reindex(range(1, 13), fill_value=0)
    )
    return [
        {"month": int(month), "avgAllStyles": _mean(r.total, r.n)}
        for month, r in zip(grouped.index, grouped.itertuples(index=False))
    ]
