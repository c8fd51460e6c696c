from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Integral, Real
from typing import Union

from pulsecheck.errors import InvalidAnswerError
from pulsecheck.model.question import QuestionType

_NUMERIC_TYPES = frozenset({QuestionType.NPS, QuestionType.LIKERT})


@dataclass(frozen=True)
class NumericAnswer:
    question_text: str
    value: int


@dataclass(frozen=True)
class TextAnswer:
    question_text: str
    value: str


Answer = Union[NumericAnswer, TextAnswer]


@dataclass(frozen=True)
class SurveyResponse:
    id: str
    survey_id: str
    answers: dict[str, Answer] = field(default_factory=dict, hash=False)
    respondent_id: str = ""  # empty for anonymous submissions
    submitted_at: str = ""  # ISO 8601


def _as_int(raw: object) -> int | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, Integral):
        return int(raw)
    if isinstance(raw, Real) and float(raw).is_integer():
        return int(raw)
    return None


def make_answer(
    question_type: QuestionType,
    question_text: str,
    raw: object,
    *,
    question_id: str = "",
) -> Answer:
    """Build the answer variant that matches *question_type*.

    NPS and Likert questions only accept integral numbers. Multiple-choice
    answers stay numeric when the raw value is a number and become text
    otherwise. Open-text answers are always text.
    """
    if question_type in _NUMERIC_TYPES:
        value = _as_int(raw)
        if value is None:
            raise InvalidAnswerError(
                f"{question_type} question expects an integer answer, got {raw!r}",
                question_id=question_id,
            )
        return NumericAnswer(question_text=question_text, value=value)

    if question_type is QuestionType.MULTIPLE_CHOICE:
        value = _as_int(raw)
        if value is not None:
            return NumericAnswer(question_text=question_text, value=value)

    if raw is None:
        raise InvalidAnswerError("answer is missing", question_id=question_id)
    return TextAnswer(question_text=question_text, value=str(raw))
