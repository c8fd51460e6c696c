from __future__ import annotations

from pulsecheck.model.question import QuestionType, SelectedQuestion, Survey, SurveyStatus
from pulsecheck.model.response import (
    Answer,
    NumericAnswer,
    SurveyResponse,
    TextAnswer,
    make_answer,
)
from pulsecheck.model.results import (
    NOT_APPLICABLE,
    CategoryRanking,
    CategoryScore,
    CategoryStatus,
    CategoryTrend,
    LikertResult,
    NpsResult,
    ResponseRate,
    TrendDirection,
    TrendReport,
)

__all__ = [
    # question
    "QuestionType",
    "SurveyStatus",
    "SelectedQuestion",
    "Survey",
    # response
    "Answer",
    "NumericAnswer",
    "TextAnswer",
    "SurveyResponse",
    "make_answer",
    # results
    "NOT_APPLICABLE",
    "CategoryStatus",
    "NpsResult",
    "LikertResult",
    "CategoryScore",
    "ResponseRate",
    "CategoryRanking",
    "TrendDirection",
    "CategoryTrend",
    "TrendReport",
]
