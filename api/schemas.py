from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class YearAverage(BaseModel):
    year: int
    avgMainStory: float
    avgAllStyles: float
    count: int


class GenreCount(BaseModel):
    genre: str
    count: int


class PlatformCount(BaseModel):
    platform: str
    count: int


class GenreDurations(BaseModel):
    genre: str
    main: float
    mainPlusSides: float
    completionist: float
    support: int


class HistogramBin(BaseModel):
    binLabel: str
    count: int


class MainVsCompletionistPoint(BaseModel):
    main_story: float
    completionist: float


class YearTypeCount(BaseModel):
    year: int
    gameCount: int
    dlcCount: int
    expansionCount: int
    otherCount: int


class ModeCount(BaseModel):
    mode: str
    count: int


class MonthAverage(BaseModel):
    month: int
    avgAllStyles: float


class DeveloperCount(BaseModel):
    developer: str
    count: int


class DashboardSummaryResponse(BaseModel):
    byYearAvgMainStory: List[YearAverage] = Field(default_factory=list)
    topGenres: List[GenreCount] = Field(default_factory=list)
    topPlatforms: List[PlatformCount] = Field(default_factory=list)
    genreAvgDurations: List[GenreDurations] = Field(default_factory=list)
    playtimeHistogram: List[HistogramBin] = Field(default_factory=list)
    mainVsCompletionist: List[MainVsCompletionistPoint] = Field(default_factory=list)
    yearCountByType: List[YearTypeCount] = Field(default_factory=list)
    coopVsSingleCounts: List[ModeCount] = Field(default_factory=list)
    releaseMonthAverages: List[MonthAverage] = Field(default_factory=list)
    topDevelopers: List[DeveloperCount] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    error: str
