"""Rank categories and compare them across survey periods."""
from __future__ import annotations

from typing import Mapping

from pulsecheck.model.results import (
    CategoryRanking,
    CategoryScore,
    CategoryTrend,
    TrendDirection,
    TrendReport,
)


def get_top_issues(
    category_scores: Mapping[str, CategoryScore],
    threshold: int = 60,
) -> tuple[CategoryRanking, ...]:
    """Applicable categories scoring below *threshold*, worst first."""
    issues = [
        CategoryRanking(category=name, score=cs.score)
        for name, cs in category_scores.items()
        if cs.applicable and cs.score < threshold
    ]
    return tuple(sorted(issues, key=lambda r: (r.score, r.category)))


def get_top_strengths(
    category_scores: Mapping[str, CategoryScore],
    threshold: int = 80,
) -> tuple[CategoryRanking, ...]:
    """Applicable categories scoring at or above *threshold*, best first."""
    strengths = [
        CategoryRanking(category=name, score=cs.score)
        for name, cs in category_scores.items()
        if cs.applicable and cs.score >= threshold
    ]
    return tuple(sorted(strengths, key=lambda r: (-r.score, r.category)))


def analyze_trends(
    current: Mapping[str, CategoryScore],
    previous: Mapping[str, CategoryScore],
    tolerance: int = 5,
) -> TrendReport:
    """Compare category scores between two periods.

    Only categories applicable in both periods are compared. A change of at
    most *tolerance* points is stable. Each bucket is ordered by the size of
    the change, largest first, then by category name.
    """
    if tolerance < 0:
        raise ValueError(f"tolerance must be non-negative, got {tolerance}")

    buckets: dict[TrendDirection, list[CategoryTrend]] = {d: [] for d in TrendDirection}
    for name, now in current.items():
        before = previous.get(name)
        if before is None or not now.applicable or not before.applicable:
            continue
        delta = now.score - before.score
        if abs(delta) <= tolerance:
            direction = TrendDirection.STABLE
        elif delta > 0:
            direction = TrendDirection.IMPROVEMENT
        else:
            direction = TrendDirection.DECLINE
        buckets[direction].append(
            CategoryTrend(
                category=name,
                current=now.score,
                previous=before.score,
                direction=direction,
            )
        )

    def ordered(trends: list[CategoryTrend]) -> tuple[CategoryTrend, ...]:
        return tuple(sorted(trends, key=lambda t: (-abs(t.delta), t.category)))

    return TrendReport(
        improvements=ordered(buckets[TrendDirection.IMPROVEMENT]),
        declines=ordered(buckets[TrendDirection.DECLINE]),
        stable=ordered(buckets[TrendDirection.STABLE]),
    )
