from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

# Category score reserved for "no Likert questions in this category".
NOT_APPLICABLE = -1


class CategoryStatus(StrEnum):
    EXCELLENT = "excellent"
    GOOD = "good"
    ATTENTION = "attention"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        """Higher is better: excellent=3 ... critical=0."""
        return _STATUS_RANK[self]


_STATUS_RANK = {
    CategoryStatus.EXCELLENT: 3,
    CategoryStatus.GOOD: 2,
    CategoryStatus.ATTENTION: 1,
    CategoryStatus.CRITICAL: 0,
}


@dataclass(frozen=True)
class NpsResult:
    score: int = 0
    promoters: int = 0
    passives: int = 0
    detractors: int = 0
    total: int = 0


@dataclass(frozen=True)
class LikertResult:
    score: int = 0
    average: float = 0.0
    distribution: dict[int, int] = field(default_factory=dict, hash=False)
    count: int = 0


@dataclass(frozen=True)
class CategoryScore:
    score: int
    status: CategoryStatus
    question_scores: dict[str, LikertResult] = field(default_factory=dict, hash=False)

    @property
    def applicable(self) -> bool:
        return self.score != NOT_APPLICABLE

    def display_score(self) -> str:
        """Render the score for humans; the sentinel is never shown as a number."""
        if not self.applicable:
            return "n/a"
        return f"{self.score}%"


@dataclass(frozen=True)
class ResponseRate:
    rate: float
    responded: int
    pending: int


@dataclass(frozen=True)
class CategoryRanking:
    category: str
    score: int


class TrendDirection(StrEnum):
    IMPROVEMENT = "improvement"
    DECLINE = "decline"
    STABLE = "stable"


@dataclass(frozen=True)
class CategoryTrend:
    category: str
    current: int
    previous: int
    direction: TrendDirection

    @property
    def delta(self) -> int:
        return self.current - self.previous


@dataclass(frozen=True)
class TrendReport:
    improvements: tuple[CategoryTrend, ...] = ()
    declines: tuple[CategoryTrend, ...] = ()
    stable: tuple[CategoryTrend, ...] = ()
