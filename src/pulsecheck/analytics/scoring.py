"""Scoring engine: NPS, Likert favorability, category rollups, response rate.

Every function here is pure. Empty inputs and an empty roster produce
defined zero states; values outside a scale raise ``InvalidScoreError``.

All rounding goes through :func:`round_half_up`, which rounds ties toward
positive infinity (12.5 -> 13, -12.5 -> -12). Percentages are computed with
``Fraction`` so a tie is detected exactly rather than after float error.
"""
from __future__ import annotations

import logging
import math
from collections import Counter
from fractions import Fraction
from numbers import Integral, Real
from typing import Iterable, Mapping, Sequence

from pulsecheck.errors import InvalidAnswerError, InvalidCountError, InvalidScoreError
from pulsecheck.model.question import QuestionType, SelectedQuestion
from pulsecheck.model.response import Answer, NumericAnswer
from pulsecheck.model.results import (
    NOT_APPLICABLE,
    CategoryScore,
    CategoryStatus,
    LikertResult,
    NpsResult,
    ResponseRate,
)

logger = logging.getLogger(__name__)

NPS_MIN, NPS_MAX = 0, 10
LIKERT_MIN, LIKERT_MAX = 1, 5
PROMOTER_MIN = 9
DETRACTOR_MAX = 6

EXCELLENT_MIN = 80
GOOD_MIN = 60
ATTENTION_MIN = 40


def round_half_up(value: Fraction | float | int) -> int:
    """Round to the nearest integer, ties toward positive infinity."""
    return math.floor(Fraction(value) + Fraction(1, 2))


def _validated(scores: Iterable[object], low: int, high: int, scale: str) -> list[int]:
    checked: list[int] = []
    for raw in scores:
        if isinstance(raw, bool):
            raise InvalidScoreError(
                f"{scale} score must be a number, got {raw!r}", value=raw, scale=scale
            )
        if isinstance(raw, Integral):
            value = int(raw)
        elif isinstance(raw, Real) and float(raw).is_integer():
            value = int(raw)
        else:
            raise InvalidScoreError(
                f"{scale} score must be an integer, got {raw!r}", value=raw, scale=scale
            )
        if not low <= value <= high:
            raise InvalidScoreError(
                f"{scale} score {value} outside {low}..{high}", value=raw, scale=scale
            )
        checked.append(value)
    return checked


def calculate_nps(scores: Iterable[int]) -> NpsResult:
    """Net Promoter Score over 0-10 ratings (eNPS or leadership NPS).

    Promoters rate 9-10, detractors 0-6, passives 7-8. The score is the
    promoter percentage minus the detractor percentage, rounded half up.
    """
    values = _validated(scores, NPS_MIN, NPS_MAX, "nps")
    if not values:
        return NpsResult()

    promoters = sum(1 for v in values if v >= PROMOTER_MIN)
    detractors = sum(1 for v in values if v <= DETRACTOR_MAX)
    total = len(values)
    passives = total - promoters - detractors

    score = round_half_up(Fraction(100 * (promoters - detractors), total))
    logger.debug(
        "NPS computed: total=%d promoters=%d detractors=%d score=%d",
        total, promoters, detractors, score,
    )
    return NpsResult(
        score=score,
        promoters=promoters,
        passives=passives,
        detractors=detractors,
        total=total,
    )


def calculate_likert_score(scores: Iterable[int]) -> LikertResult:
    """Favorability of 1-5 ratings: average 1 -> 0, 3 -> 50, 5 -> 100."""
    values = _validated(scores, LIKERT_MIN, LIKERT_MAX, "likert")
    if not values:
        return LikertResult()

    count = len(values)
    total = sum(values)
    # ((total/count - 1) / 4) * 100
    favorability = Fraction(25 * (total - count), count)
    distribution = dict(sorted(Counter(values).items()))

    return LikertResult(
        score=round_half_up(favorability),
        average=total / count,
        distribution=distribution,
        count=count,
    )


def get_category_status(score: float) -> CategoryStatus:
    if score >= EXCELLENT_MIN:
        return CategoryStatus.EXCELLENT
    if score >= GOOD_MIN:
        return CategoryStatus.GOOD
    if score >= ATTENTION_MIN:
        return CategoryStatus.ATTENTION
    return CategoryStatus.CRITICAL


def numeric_values(answers: Iterable[Answer], question_id: str = "") -> list[int]:
    """Extract the numeric payloads of answers to an NPS or Likert question.

    A text answer raises ``InvalidAnswerError``.
    """
    values: list[int] = []
    for answer in answers:
        if not isinstance(answer, NumericAnswer):
            raise InvalidAnswerError(
                f"expected a numeric answer, got {answer.value!r}", question_id=question_id
            )
        values.append(answer.value)
    return values


def calculate_category_score(
    questions: Sequence[SelectedQuestion],
    answers_by_question_id: Mapping[str, Sequence[Answer]],
) -> CategoryScore:
    """Average favorability of the Likert questions in one category.

    Questions nobody answered are left out of the mean. A category with no
    Likert questions at all gets the ``NOT_APPLICABLE`` sentinel, which
    callers must not display as a percentage.
    """
    likert_questions = [q for q in questions if q.type is QuestionType.LIKERT]
    if not likert_questions:
        return CategoryScore(score=NOT_APPLICABLE, status=CategoryStatus.GOOD)

    question_scores: dict[str, LikertResult] = {}
    answered: list[int] = []
    for q in likert_questions:
        result = calculate_likert_score(
            numeric_values(answers_by_question_id.get(q.id, ()), q.id)
        )
        question_scores[q.id] = result
        if result.count > 0:
            answered.append(result.score)

    score = round_half_up(Fraction(sum(answered), len(answered))) if answered else 0
    return CategoryScore(
        score=score,
        status=get_category_status(score),
        question_scores=question_scores,
    )


def _validated_count(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral) or value < 0:
        raise InvalidCountError(
            f"{name} must be a non-negative integer, got {value!r}", value=value
        )
    return int(value)


def calculate_response_rate(total_employees: int, total_responses: int) -> ResponseRate:
    """Share of the roster that responded, as a percentage with one decimal.

    ``pending`` is not clamped: more responses than roster entries yields a
    negative value.
    """
    employees = _validated_count(total_employees, "total_employees")
    responses = _validated_count(total_responses, "total_responses")
    if employees == 0:
        return ResponseRate(rate=0.0, responded=responses, pending=0)

    tenths = round_half_up(Fraction(1000 * responses, employees))
    return ResponseRate(
        rate=tenths / 10,
        responded=responses,
        pending=employees - responses,
    )
