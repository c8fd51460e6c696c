"""Compose the scoring engine into a full survey report."""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Sequence

from pulsecheck.analytics.grouping import (
    collect_text_answers,
    count_choices,
    group_answers_by_question,
    group_questions_by_category,
)
from pulsecheck.analytics.insights import get_top_issues, get_top_strengths
from pulsecheck.analytics.scoring import (
    calculate_category_score,
    calculate_likert_score,
    calculate_nps,
    calculate_response_rate,
    numeric_values,
)
from pulsecheck.config import PulseCheckConfig
from pulsecheck.model.question import QuestionType, SelectedQuestion, Survey
from pulsecheck.model.response import Answer, SurveyResponse
from pulsecheck.model.results import (
    CategoryRanking,
    CategoryScore,
    LikertResult,
    NpsResult,
    ResponseRate,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuestionBreakdown:
    question_id: str
    text: str
    type: QuestionType
    category: str
    answer_count: int = 0
    nps: NpsResult | None = None
    likert: LikertResult | None = None
    choices: dict[str, int] = field(default_factory=dict, hash=False)
    texts: tuple[str, ...] = ()


@dataclass(frozen=True)
class SurveyAnalytics:
    survey_id: str
    response_count: int
    response_rate: ResponseRate
    enps: NpsResult | None = None
    leadership_nps: NpsResult | None = None
    category_scores: dict[str, CategoryScore] = field(default_factory=dict, hash=False)
    questions: tuple[QuestionBreakdown, ...] = ()
    top_issues: tuple[CategoryRanking, ...] = ()
    top_strengths: tuple[CategoryRanking, ...] = ()


def _is_leadership(question: SelectedQuestion, config: PulseCheckConfig) -> bool:
    return question.category.casefold() == config.leadership_category.casefold()


def find_enps_question(
    survey: Survey, config: PulseCheckConfig | None = None
) -> SelectedQuestion | None:
    """The designated eNPS question.

    A question flagged ``is_nps_question`` wins; otherwise the first NPS
    question outside the leadership category.
    """
    config = config or PulseCheckConfig()
    nps_questions = [q for q in survey.questions if q.type is QuestionType.NPS]
    for q in nps_questions:
        if q.is_nps_question:
            return q
    for q in nps_questions:
        if not _is_leadership(q, config):
            return q
    return None


def _breakdown(question: SelectedQuestion, answers: Sequence[Answer]) -> QuestionBreakdown:
    base = dict(
        question_id=question.id,
        text=question.text,
        type=question.type,
        category=question.category,
        answer_count=len(answers),
    )
    if question.type is QuestionType.NPS:
        return QuestionBreakdown(**base, nps=calculate_nps(numeric_values(answers, question.id)))
    if question.type is QuestionType.LIKERT:
        likert = calculate_likert_score(numeric_values(answers, question.id))
        return QuestionBreakdown(**base, likert=likert)
    if question.type is QuestionType.MULTIPLE_CHOICE:
        return QuestionBreakdown(**base, choices=count_choices(answers))
    return QuestionBreakdown(**base, texts=collect_text_answers(answers))


def analyze_survey(
    survey: Survey,
    responses: Sequence[SurveyResponse],
    total_employees: int | None = None,
    config: PulseCheckConfig | None = None,
) -> SurveyAnalytics:
    """Build the full analytics for one survey from its responses.

    *total_employees* overrides ``survey.total_participants`` as the roster
    size used for the response rate; pass 0 when the roster is unknown.
    """
    config = config or PulseCheckConfig()
    answers_by_question = group_answers_by_question(responses)

    unknown = set(answers_by_question) - {q.id for q in survey.questions}
    if unknown:
        logger.debug(
            "Ignoring answers to %d question(s) not in survey %s",
            len(unknown), survey.id,
        )

    enps_question = find_enps_question(survey, config)
    enps = None
    if enps_question is not None:
        enps = calculate_nps(
            numeric_values(answers_by_question.get(enps_question.id, ()), enps_question.id)
        )

    leadership_questions = [
        q for q in survey.questions
        if q.type is QuestionType.NPS and _is_leadership(q, config) and q is not enps_question
    ]
    leadership_nps = None
    if leadership_questions:
        pooled: list[int] = []
        for q in leadership_questions:
            pooled.extend(numeric_values(answers_by_question.get(q.id, ()), q.id))
        leadership_nps = calculate_nps(pooled)

    category_scores = {
        category: calculate_category_score(questions, answers_by_question)
        for category, questions in group_questions_by_category(survey.questions).items()
    }

    roster = survey.total_participants if total_employees is None else total_employees
    response_rate = calculate_response_rate(roster, len(responses))

    logger.info(
        "Analyzed survey %s: %d responses, %d categories",
        survey.id, len(responses), len(category_scores),
    )
    return SurveyAnalytics(
        survey_id=survey.id,
        response_count=len(responses),
        response_rate=response_rate,
        enps=enps,
        leadership_nps=leadership_nps,
        category_scores=category_scores,
        questions=tuple(
            _breakdown(q, answers_by_question.get(q.id, ())) for q in survey.questions
        ),
        top_issues=get_top_issues(category_scores, config.issue_threshold),
        top_strengths=get_top_strengths(category_scores, config.strength_threshold),
    )


def category_score_to_dict(score: CategoryScore) -> dict[str, Any]:
    data = asdict(score)
    data["applicable"] = score.applicable
    return data


def analytics_to_dict(analytics: SurveyAnalytics) -> dict[str, Any]:
    """JSON-ready representation; sentinel categories carry ``applicable: false``."""
    data = asdict(analytics)
    data["category_scores"] = {
        name: category_score_to_dict(cs) for name, cs in analytics.category_scores.items()
    }
    return data
