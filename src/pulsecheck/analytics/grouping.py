"""Index responses and questions the way the report needs them."""
from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence

from pulsecheck.model.question import SelectedQuestion
from pulsecheck.model.response import Answer, SurveyResponse, TextAnswer


def group_answers_by_question(
    responses: Iterable[SurveyResponse],
) -> dict[str, tuple[Answer, ...]]:
    """Map each question id to its answers, in response order."""
    grouped: dict[str, list[Answer]] = {}
    for response in responses:
        for question_id, answer in response.answers.items():
            grouped.setdefault(question_id, []).append(answer)
    return {qid: tuple(answers) for qid, answers in grouped.items()}


def group_questions_by_category(
    questions: Sequence[SelectedQuestion],
) -> dict[str, tuple[SelectedQuestion, ...]]:
    """Map each category to its questions; categories keep first-seen order."""
    grouped: dict[str, list[SelectedQuestion]] = {}
    for question in questions:
        grouped.setdefault(question.category, []).append(question)
    return {category: tuple(qs) for category, qs in grouped.items()}


def count_choices(answers: Iterable[Answer]) -> dict[str, int]:
    """Count multiple-choice answers by label, most chosen first."""
    counts = Counter(str(a.value) for a in answers)
    return dict(sorted(counts.items(), key=lambda item: (-item[1], item[0])))


def collect_text_answers(answers: Iterable[Answer]) -> tuple[str, ...]:
    """Non-blank open-text answers."""
    return tuple(
        a.value.strip()
        for a in answers
        if isinstance(a, TextAnswer) and a.value.strip()
    )
