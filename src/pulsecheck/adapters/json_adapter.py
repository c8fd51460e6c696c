from __future__ import annotations

import json
import logging
import uuid
from pathlib import Path
from typing import Any

from pulsecheck.errors import InvalidAnswerError, SurveyFormatError
from pulsecheck.model.question import QuestionType, SelectedQuestion, Survey, SurveyStatus
from pulsecheck.model.response import Answer, SurveyResponse, make_answer

logger = logging.getLogger(__name__)


def question_from_dict(data: dict[str, Any]) -> SelectedQuestion:
    """Build a question from its exported (camelCase) form."""
    if not isinstance(data, dict):
        raise SurveyFormatError(f"question must be an object, got {data!r}")
    try:
        qtype = QuestionType(data["type"])
        return SelectedQuestion(
            id=str(data["id"]),
            text=data.get("text", ""),
            type=qtype,
            category=data.get("category") or "",
            options=tuple(data.get("options") or ()),
            is_mandatory=bool(data.get("isMandatory", False)),
            question_id=str(data.get("questionId") or ""),
            is_nps_question=bool(data.get("isNpsQuestion", False)),
        )
    except KeyError as exc:
        raise SurveyFormatError(f"question is missing field {exc}") from exc
    except ValueError as exc:
        raise SurveyFormatError(f"invalid question {data.get('id')!r}: {exc}") from exc


def survey_from_dict(data: dict[str, Any]) -> Survey:
    """Build a survey (with its denormalized questions) from an export."""
    if not isinstance(data, dict) or "id" not in data:
        raise SurveyFormatError("survey must be an object with an 'id'")
    try:
        status = SurveyStatus(data.get("status", "draft"))
    except ValueError as exc:
        raise SurveyFormatError(f"invalid survey status: {data.get('status')!r}") from exc

    total = data.get("totalParticipants", 0) or 0
    if isinstance(total, bool) or not isinstance(total, int) or total < 0:
        raise SurveyFormatError(f"invalid totalParticipants: {total!r}")

    questions_raw = data.get("questions") or []
    if not isinstance(questions_raw, list):
        raise SurveyFormatError("survey questions must be a list")

    return Survey(
        id=str(data["id"]),
        title=data.get("title", ""),
        description=data.get("description", ""),
        status=status,
        questions=tuple(question_from_dict(q) for q in questions_raw),
        total_participants=total,
        is_anonymous=bool(data.get("isAnonymous", True)),
        opens_at=str(data.get("opensAt") or ""),
        closes_at=str(data.get("closesAt") or ""),
    )


def response_from_dict(data: dict[str, Any], survey: Survey) -> SurveyResponse:
    """Build a response, typing each answer by the question it belongs to.

    Answers to questions the survey does not know are kept, typed by their
    raw value.
    """
    if not isinstance(data, dict):
        raise SurveyFormatError("response must be an object")
    raw_answers = data.get("answers") or {}
    if not isinstance(raw_answers, dict):
        raise SurveyFormatError("response answers must be an object keyed by question id")

    answers: dict[str, Answer] = {}
    for question_id, raw in raw_answers.items():
        if not isinstance(raw, dict) or "answer" not in raw:
            raise SurveyFormatError(f"answer to {question_id!r} must have an 'answer' field")
        question = survey.question(question_id)
        qtype = question.type if question else QuestionType.MULTIPLE_CHOICE
        text = raw.get("questionText") or (question.text if question else "")
        answers[question_id] = make_answer(qtype, text, raw["answer"], question_id=question_id)

    return SurveyResponse(
        id=str(data.get("id") or uuid.uuid4().hex),
        survey_id=str(data.get("surveyId") or survey.id),
        answers=answers,
        respondent_id=str(data.get("respondentId") or ""),
        submitted_at=str(data.get("submittedAt") or ""),
    )


class JSONSurveyAdapter:
    """Adapter that reads a survey export: ``{"survey": {...}, "responses": [...]}``.

    The file is parsed on first access and cached.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._survey: Survey | None = None
        self._responses: tuple[SurveyResponse, ...] = ()

    def _load(self) -> None:
        if self._survey is not None:
            return
        if not self._path.exists():
            raise FileNotFoundError(f"Survey export not found: {self._path}")
        try:
            document = json.loads(self._path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise SurveyFormatError(f"invalid JSON: {exc}", source=str(self._path)) from exc
        if not isinstance(document, dict) or "survey" not in document:
            raise SurveyFormatError("export has no 'survey' object", source=str(self._path))

        survey = survey_from_dict(document["survey"])
        try:
            responses = tuple(
                response_from_dict(r, survey) for r in document.get("responses", [])
            )
        except InvalidAnswerError as exc:
            raise SurveyFormatError(
                f"invalid answer to {exc.question_id!r}: {exc}", source=str(self._path)
            ) from exc

        logger.info("Loaded survey %s with %d responses from %s",
                    survey.id, len(responses), self._path)
        self._survey = survey
        self._responses = responses

    @property
    def survey(self) -> Survey:
        self._load()
        assert self._survey is not None
        return self._survey

    @property
    def survey_id(self) -> str:
        return self.survey.id

    def fetch(self) -> tuple[SurveyResponse, ...]:
        """Return all responses in the export.

        Raises FileNotFoundError if the file does not exist and
        SurveyFormatError if it is not a valid export.
        """
        self._load()
        return self._responses
