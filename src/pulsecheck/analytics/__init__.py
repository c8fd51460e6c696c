from __future__ import annotations

from pulsecheck.analytics.grouping import (
    collect_text_answers,
    count_choices,
    group_answers_by_question,
    group_questions_by_category,
)
from pulsecheck.analytics.insights import analyze_trends, get_top_issues, get_top_strengths
from pulsecheck.analytics.report import (
    QuestionBreakdown,
    SurveyAnalytics,
    analytics_to_dict,
    analyze_survey,
    find_enps_question,
)
from pulsecheck.analytics.scoring import (
    calculate_category_score,
    calculate_likert_score,
    calculate_nps,
    calculate_response_rate,
    get_category_status,
    round_half_up,
)
from pulsecheck.analytics.segments import SegmentResult, segment_analysis

__all__ = [
    # scoring
    "calculate_nps",
    "calculate_likert_score",
    "get_category_status",
    "calculate_category_score",
    "calculate_response_rate",
    "round_half_up",
    # grouping
    "group_answers_by_question",
    "group_questions_by_category",
    "count_choices",
    "collect_text_answers",
    # insights
    "get_top_issues",
    "get_top_strengths",
    "analyze_trends",
    # report
    "QuestionBreakdown",
    "SurveyAnalytics",
    "analyze_survey",
    "analytics_to_dict",
    "find_enps_question",
    # segments
    "SegmentResult",
    "segment_analysis",
]
