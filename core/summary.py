from __future__ import annotations

from typing import Any, Dict, Optional

import numpy as np

from core.config import Settings, get_settings
from core.data import Dataset, load_dataset
from core.metrics_catalog import (
    compute_mode_counts,
    compute_top_developers,
    compute_top_genres,
    compute_top_platforms,
    compute_year_count_by_type,
)
from core.metrics_playtime import (
    compute_genre_durations,
    compute_main_vs_completionist,
    compute_playtime_histogram,
    compute_release_month_averages,
    compute_yearly_averages,
)


SUMMARY_FIELDS = (
    "byYearAvgMainStory",
    "topGenres",
    "topPlatforms",
    "genreAvgDurations",
    "playtimeHistogram",
    "mainVsCompletionist",
    "yearCountByType",
    "coopVsSingleCounts",
    "releaseMonthAverages",
    "topDevelopers",
)

SUMMARY_ERROR_MESSAGE = "Failed to load HLTB summary"


def build_summary(
    dataset: Optional[Dataset] = None,
    *,
    rng: Optional[np.random.Generator] = None,
    settings: Optional[Settings] = None,
) -> Dict[str, Any]:
    """Run every dashboard aggregation against one dataset.

    Loader errors propagate unchanged; when the dataset loads, all fields are
    present (empty lists for empty data).
    """
    settings = settings or get_settings()
    if dataset is None:
        dataset = load_dataset(settings.dataset_path)
    rows = dataset.rows

    return {
        "byYearAvgMainStory": compute_yearly_averages(rows),
        "topGenres": compute_top_genres(rows),
        "topPlatforms": compute_top_platforms(rows),
        "genreAvgDurations": compute_genre_durations(rows),
        "playtimeHistogram": compute_playtime_histogram(rows),
        "mainVsCompletionist": compute_main_vs_completionist(rows, sample_size=settings.sample_size, rng=rng),
        "yearCountByType": compute_year_count_by_type(rows),
        "coopVsSingleCounts": compute_mode_counts(rows),
        "releaseMonthAverages": compute_release_month_averages(rows),
        "topDevelopers": compute_top_developers(rows),
    }
