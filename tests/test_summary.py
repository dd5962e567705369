import numpy as np
import pytest

from core.config import Settings
from core.data import Dataset, DatasetNotFoundError, load_dataset, rows_from_records
from core.summary import SUMMARY_FIELDS, build_summary


def test_build_summary_has_all_fields(sample_csv):
    summary = build_summary(load_dataset(sample_csv), rng=np.random.default_rng(0))

    assert tuple(summary) == SUMMARY_FIELDS
    assert summary["byYearAvgMainStory"] == [
        {"year": 2010, "avgMainStory": 15.0, "avgAllStyles": 20.0, "count": 2},
        {"year": 2012, "avgMainStory": 5.0, "avgAllStyles": 40.0, "count": 1},
    ]
    assert summary["topGenres"][0] == {"genre": "Action", "count": 2}
    assert summary["topPlatforms"][0] == {"platform": "PC", "count": 3}
    assert summary["topDevelopers"] == [
        {"developer": "Studio A", "count": 2},
        {"developer": "Studio B", "count": 1},
        {"developer": "Studio C", "count": 1},
    ]
    assert summary["coopVsSingleCounts"] == [
        {"mode": "Single Player", "count": 2},
        {"mode": "Co-op", "count": 1},
        {"mode": "Versus", "count": 1},
    ]
    assert summary["yearCountByType"] == [
        {"year": 2010, "gameCount": 1, "dlcCount": 1, "expansionCount": 0, "otherCount": 0},
        {"year": 2012, "gameCount": 0, "dlcCount": 0, "expansionCount": 1, "otherCount": 0},
    ]
    # tiny dataset: no genre reaches the support threshold
    assert summary["genreAvgDurations"] == []
    assert len(summary["mainVsCompletionist"]) == 3
    assert len(summary["releaseMonthAverages"]) == 12
    assert sum(b["count"] for b in summary["playtimeHistogram"]) == 3


def test_build_summary_empty_dataset_keeps_shape(tmp_path):
    dataset = Dataset(path=tmp_path / "empty.csv", rows=rows_from_records([]))
    summary = build_summary(dataset)

    assert tuple(summary) == SUMMARY_FIELDS
    for name in ("byYearAvgMainStory", "topGenres", "topPlatforms", "genreAvgDurations",
                 "mainVsCompletionist", "yearCountByType", "topDevelopers"):
        assert summary[name] == []
    assert len(summary["playtimeHistogram"]) == 9
    assert len(summary["coopVsSingleCounts"]) == 3
    assert len(summary["releaseMonthAverages"]) == 12


def test_build_summary_sample_size_from_settings(tmp_path):
    rows = rows_from_records([{"main_story": i + 1, "completionist": i + 5} for i in range(20)])
    dataset = Dataset(path=tmp_path / "x.csv", rows=rows)
    settings = Settings(sample_size=4)

    summary = build_summary(dataset, settings=settings, rng=np.random.default_rng(1))
    assert len(summary["mainVsCompletionist"]) == 4


def test_build_summary_loads_from_settings(sample_csv, use_dataset):
    use_dataset(sample_csv)
    assert len(build_summary()["releaseMonthAverages"]) == 12


def test_build_summary_propagates_loader_errors(tmp_path):
    settings = Settings(dataset_path=tmp_path / "missing.csv")
    with pytest.raises(DatasetNotFoundError):
        build_summary(settings=settings)
