from __future__ import annotations

from typing import Any

import pytest

from pulsecheck.model.question import QuestionType, SelectedQuestion, Survey, SurveyStatus
from pulsecheck.model.response import SurveyResponse, make_answer


# ---------------------------------------------------------------------------
# Shared factory helpers
# ---------------------------------------------------------------------------


def make_question(
    id: str = "q-1",
    type: QuestionType = QuestionType.LIKERT,
    category: str = "Engagement",
    text: str = "",
    options: tuple[str, ...] = (),
    is_nps_question: bool = False,
) -> SelectedQuestion:
    return SelectedQuestion(
        id=id,
        text=text or f"Question {id}",
        type=type,
        category=category,
        options=options,
        is_nps_question=is_nps_question,
    )


def make_response(
    survey: Survey,
    answers: dict[str, Any],
    id: str = "resp-1",
) -> SurveyResponse:
    """Build a response, typing each raw answer by its survey question."""
    typed = {}
    for question_id, raw in answers.items():
        question = survey.question(question_id)
        assert question is not None, question_id
        typed[question_id] = make_answer(question.type, question.text, raw, question_id=question_id)
    return SurveyResponse(id=id, survey_id=survey.id, answers=typed)


SAMPLE_QUESTIONS = (
    make_question("q_enps", QuestionType.NPS, "eNPS", is_nps_question=True),
    make_question("q_lead_nps", QuestionType.NPS, "Leadership"),
    make_question("q_eng1", QuestionType.LIKERT, "Engagement"),
    make_question("q_eng2", QuestionType.LIKERT, "Engagement"),
    make_question("q_lead1", QuestionType.LIKERT, "Leadership"),
    make_question("q_dept", QuestionType.MULTIPLE_CHOICE, "Demographics", options=("Sales", "Ops")),
    make_question("q_comment", QuestionType.OPEN_TEXT, "Feedback"),
)

SAMPLE_ANSWERS = (
    {"q_enps": 10, "q_lead_nps": 9, "q_eng1": 5, "q_eng2": 4, "q_lead1": 2,
     "q_dept": "Sales", "q_comment": "Great team"},
    {"q_enps": 9, "q_lead_nps": 6, "q_eng1": 4, "q_eng2": 5, "q_lead1": 1,
     "q_dept": "Sales", "q_comment": "  "},
    {"q_enps": 6, "q_lead_nps": 8, "q_eng1": 5, "q_eng2": 5, "q_lead1": 2,
     "q_dept": "Ops", "q_comment": "More training"},
    {"q_enps": 8, "q_lead_nps": 3, "q_eng1": 4, "q_lead1": 3, "q_dept": "Sales"},
)


def make_sample_survey(total_participants: int = 10) -> Survey:
    return Survey(
        id="srv-1",
        title="Q3 Pulse",
        questions=SAMPLE_QUESTIONS,
        status=SurveyStatus.ACTIVE,
        total_participants=total_participants,
    )


def make_sample_responses(survey: Survey) -> list[SurveyResponse]:
    return [
        make_response(survey, answers, id=f"resp-{i}")
        for i, answers in enumerate(SAMPLE_ANSWERS, start=1)
    ]


def make_sample_export() -> dict[str, Any]:
    """The sample survey in its exported (camelCase JSON) form."""
    return {
        "survey": {
            "id": "srv-1",
            "title": "Q3 Pulse",
            "status": "active",
            "totalParticipants": 10,
            "questions": [
                {
                    "id": q.id,
                    "text": q.text,
                    "type": q.type.value,
                    "category": q.category,
                    "options": list(q.options) or None,
                    "isMandatory": False,
                    "isNpsQuestion": q.is_nps_question,
                }
                for q in SAMPLE_QUESTIONS
            ],
        },
        "responses": [
            {
                "id": f"resp-{i}",
                "surveyId": "srv-1",
                "answers": {
                    qid: {"questionText": f"Question {qid}", "answer": value}
                    for qid, value in answers.items()
                },
            }
            for i, answers in enumerate(SAMPLE_ANSWERS, start=1)
        ],
    }


@pytest.fixture
def sample_survey() -> Survey:
    return make_sample_survey()


@pytest.fixture
def sample_responses(sample_survey) -> list[SurveyResponse]:
    return make_sample_responses(sample_survey)
