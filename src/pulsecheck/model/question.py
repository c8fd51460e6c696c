from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from pulsecheck.errors import InvalidQuestionError


class QuestionType(StrEnum):
    NPS = "nps"
    LIKERT = "likert"
    MULTIPLE_CHOICE = "multiple-choice"
    OPEN_TEXT = "open-text"


class SurveyStatus(StrEnum):
    DRAFT = "draft"
    ACTIVE = "active"
    CLOSED = "closed"


@dataclass(frozen=True)
class SelectedQuestion:
    id: str  # unique within the survey instance
    text: str
    type: QuestionType
    category: str
    options: tuple[str, ...] = ()
    is_mandatory: bool = False
    question_id: str = ""  # reference into the question library
    is_nps_question: bool = False

    def __post_init__(self) -> None:
        if not self.category:
            raise InvalidQuestionError(
                f"Question {self.id!r} has an empty category", question_id=self.id
            )


@dataclass(frozen=True)
class Survey:
    id: str
    title: str
    questions: tuple[SelectedQuestion, ...] = ()
    description: str = ""
    status: SurveyStatus = SurveyStatus.DRAFT
    total_participants: int = 0
    is_anonymous: bool = True
    opens_at: str = ""  # ISO 8601
    closes_at: str = ""  # ISO 8601

    def question(self, question_id: str) -> SelectedQuestion | None:
        """Return the question with *question_id*, or None."""
        for q in self.questions:
            if q.id == question_id:
                return q
        return None
