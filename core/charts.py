from __future__ import annotations

from typing import Any, Callable, Dict, List, Tuple

import altair as alt
import pandas as pd

alt.data_transformers.disable_max_rows()


CHART_CARDS: Dict[str, Tuple[str, str]] = {
    "byYearAvgMainStory": (
        "Average playtime per year",
        "Compare the average Main Story and All Styles durations by release year.",
    ),
    "topGenres": ("Top 10 genres", "Count of games for each of the most common genres."),
    "topPlatforms": ("Top 10 platforms", "Platforms with the largest number of titles in the dataset."),
    "genreAvgDurations": (
        "Playtime profile by genre",
        "Average Main Story, Main + Side, and Completionist times for popular genres.",
    ),
    "playtimeHistogram": (
        "Distribution of All Styles duration",
        "Rough histogram showing how long games take to fully complete.",
    ),
    "mainVsCompletionist": (
        "Main Story vs Completionist",
        "Relationship between just finishing the game and going for 100% completion.",
    ),
    "yearCountByType": ("Releases per year by type", "Distribution of game, DLC, and expansion releases over time."),
    "coopVsSingleCounts": (
        "Game modes",
        "Number of titles that support single-player, co-op, and versus modes.",
    ),
    "releaseMonthAverages": (
        "Average duration by release month",
        "Do games released in certain months tend to be longer?",
    ),
    "topDevelopers": ("Top 10 developers", "Developers with the largest number of titles in this dataset."),
}

PALETTE = ["#3b82f6", "#22c55e", "#f97316", "#e11d48", "#a855f7"]


def to_vega_spec(chart: alt.Chart) -> Dict[str, Any]:
    """Convert an Altair chart into a Vega-Lite spec dict (JSON-serializable)."""
    return chart.to_dict()


def _frame(records: List[Dict[str, Any]], columns: List[str]) -> pd.DataFrame:
    return pd.DataFrame.from_records(records, columns=columns)


def _ranked_bar(records: List[Dict[str, Any]], key: str, title: str, color: str) -> alt.Chart:
    df = _frame(records, [key, "count"])
    return (
        alt.Chart(df, title=title)
        .mark_bar(color=color)
        .encode(
            x=alt.X(f"{key}:N", sort="-y", title=None, axis=alt.Axis(labelAngle=-30)),
            y=alt.Y("count:Q", title="Number of games"),
            tooltip=[alt.Tooltip(f"{key}:N"), alt.Tooltip("count:Q", format=",")],
        )
    )


def yearly_averages_chart(records: List[Dict[str, Any]]) -> alt.Chart:
    df = _frame(records, ["year", "avgMainStory", "avgAllStyles", "count"])
    long_df = df.melt(
        id_vars=["year", "count"], value_vars=["avgMainStory", "avgAllStyles"], var_name="metric", value_name="hours"
    )
    long_df["metric"] = long_df["metric"].map({"avgMainStory": "Main Story", "avgAllStyles": "All Styles"})
    return (
        alt.Chart(long_df, title=CHART_CARDS["byYearAvgMainStory"][0])
        .mark_line()
        .encode(
            x=alt.X("year:Q", title="Release Year", axis=alt.Axis(format="d")),
            y=alt.Y("hours:Q", title="Average hours"),
            color=alt.Color("metric:N", title=None, scale=alt.Scale(range=PALETTE[:2])),
            tooltip=["year:Q", "metric:N", alt.Tooltip("hours:Q", format=".1f"), alt.Tooltip("count:Q", format=",")],
        )
    )


def top_genres_chart(records: List[Dict[str, Any]]) -> alt.Chart:
    return _ranked_bar(records, "genre", CHART_CARDS["topGenres"][0], PALETTE[0])


def top_platforms_chart(records: List[Dict[str, Any]]) -> alt.Chart:
    return _ranked_bar(records, "platform", CHART_CARDS["topPlatforms"][0], PALETTE[1])


def top_developers_chart(records: List[Dict[str, Any]]) -> alt.Chart:
    return _ranked_bar(records, "developer", CHART_CARDS["topDevelopers"][0], PALETTE[4])


def genre_durations_chart(records: List[Dict[str, Any]]) -> alt.Chart:
    df = _frame(records, ["genre", "main", "mainPlusSides", "completionist", "support"])
    long_df = df.melt(
        id_vars=["genre", "support"],
        value_vars=["main", "mainPlusSides", "completionist"],
        var_name="style",
        value_name="hours",
    )
    long_df["style"] = long_df["style"].map(
        {"main": "Main Story", "mainPlusSides": "Main + Side", "completionist": "Completionist"}
    )
    return (
        alt.Chart(long_df, title=CHART_CARDS["genreAvgDurations"][0])
        .mark_bar()
        .encode(
            x=alt.X("genre:N", title=None, sort=None),
            xOffset=alt.XOffset("style:N", sort=["Main Story", "Main + Side", "Completionist"]),
            y=alt.Y("hours:Q", title="Average hours"),
            color=alt.Color("style:N", title=None, scale=alt.Scale(range=PALETTE[:3])),
            tooltip=["genre:N", "style:N", alt.Tooltip("hours:Q", format=".1f"), alt.Tooltip("support:Q", format=",")],
        )
    )


def playtime_histogram_chart(records: List[Dict[str, Any]]) -> alt.Chart:
    df = _frame(records, ["binLabel", "count"])
    return (
        alt.Chart(df, title=CHART_CARDS["playtimeHistogram"][0])
        .mark_bar(color=PALETTE[2])
        .encode(
            x=alt.X("binLabel:N", sort=None, title="All Styles duration", axis=alt.Axis(labelAngle=-30)),
            y=alt.Y("count:Q", title="Number of games"),
            tooltip=[alt.Tooltip("binLabel:N", title="Bucket"), alt.Tooltip("count:Q", format=",")],
        )
    )


def main_vs_completionist_chart(records: List[Dict[str, Any]]) -> alt.Chart:
    df = _frame(records, ["main_story", "completionist"])
    return (
        alt.Chart(df, title=CHART_CARDS["mainVsCompletionist"][0])
        .mark_circle(size=24, opacity=0.6, color=PALETTE[0])
        .encode(
            x=alt.X("main_story:Q", title="Main Story (hours)"),
            y=alt.Y("completionist:Q", title="Completionist (hours)"),
            tooltip=[
                alt.Tooltip("main_story:Q", title="Main Story", format=".1f"),
                alt.Tooltip("completionist:Q", title="Completionist", format=".1f"),
            ],
        )
    )


def year_count_by_type_chart(records: List[Dict[str, Any]]) -> alt.Chart:
    df = _frame(records, ["year", "gameCount", "dlcCount", "expansionCount", "otherCount"])
    long_df = df.melt(id_vars="year", var_name="type", value_name="count")
    long_df["type"] = long_df["type"].map(
        {"gameCount": "Game", "dlcCount": "DLC", "expansionCount": "Expansion", "otherCount": "Other"}
    )
    return (
        alt.Chart(long_df, title=CHART_CARDS["yearCountByType"][0])
        .mark_bar()
        .encode(
            x=alt.X("year:O", title="Release Year"),
            y=alt.Y("count:Q", title="Releases", stack="zero"),
            color=alt.Color("type:N", title=None, scale=alt.Scale(range=PALETTE[:4])),
            tooltip=["year:O", "type:N", alt.Tooltip("count:Q", format=",")],
        )
    )


def mode_counts_chart(records: List[Dict[str, Any]]) -> alt.Chart:
    df = _frame(records, ["mode", "count"])
    return (
        alt.Chart(df, title=CHART_CARDS["coopVsSingleCounts"][0])
        .mark_arc(innerRadius=50)
        .encode(
            theta=alt.Theta("count:Q"),
            color=alt.Color("mode:N", title=None, scale=alt.Scale(range=PALETTE[:3])),
            tooltip=["mode:N", alt.Tooltip("count:Q", format=",")],
        )
    )


def release_month_chart(records: List[Dict[str, Any]]) -> alt.Chart:
    df = _frame(records, ["month", "avgAllStyles"])
    return (
        alt.Chart(df, title=CHART_CARDS["releaseMonthAverages"][0])
        .mark_bar(color=PALETTE[1])
        .encode(
            x=alt.X("month:O", title="Release Month"),
            y=alt.Y("avgAllStyles:Q", title="Average All Styles (hours)"),
            tooltip=["month:O", alt.Tooltip("avgAllStyles:Q", format=".1f")],
        )
    )


CHART_BUILDERS: Dict[str, Callable[[List[Dict[str, Any]]], alt.Chart]] = {
    "byYearAvgMainStory": yearly_averages_chart,
    "topGenres": top_genres_chart,
    "topPlatforms": top_platforms_chart,
    "genreAvgDurations": genre_durations_chart,
    "playtimeHistogram": playtime_histogram_chart,
    "mainVsCompletionist": main_vs_completionist_chart,
    "yearCountByType": year_count_by_type_chart,
    "coopVsSingleCounts": mode_counts_chart,
    "releaseMonthAverages": release_month_chart,
    "topDevelopers": top_developers_chart,
}


def build_dashboard_charts(summary: Dict[str, Any]) -> Dict[str, alt.Chart]:
    return {name: builder(summary.get(name) or []) for name, builder in CHART_BUILDERS.items()}


def build_dashboard_specs(summary: Dict[str, Any]) -> Dict[str, Dict[str, Any]]:
    return {name: to_vega_spec(chart) for name, chart in build_dashboard_charts(summary).items()}
