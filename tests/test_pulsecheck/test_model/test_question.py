from __future__ import annotations

import dataclasses

import pytest

from pulsecheck.errors import InvalidQuestionError, PulseCheckError
from pulsecheck.model.question import QuestionType, SelectedQuestion, Survey, SurveyStatus


class TestQuestionType:
    def test_all_values(self) -> None:
        expected = {"nps", "likert", "multiple-choice", "open-text"}
        assert {v.value for v in QuestionType} == expected

    def test_is_str(self) -> None:
        assert isinstance(QuestionType.LIKERT, str)
        assert QuestionType.MULTIPLE_CHOICE == "multiple-choice"


class TestSurveyStatus:
    def test_all_values(self) -> None:
        assert {v.value for v in SurveyStatus} == {"draft", "active", "closed"}


class TestSelectedQuestion:
    def test_defaults(self) -> None:
        q = SelectedQuestion(id="q1", text="I feel valued", type=QuestionType.LIKERT, category="Recognition")
        assert q.options == ()
        assert q.is_mandatory is False
        assert q.is_nps_question is False
        assert q.question_id == ""

    def test_empty_category_rejected(self) -> None:
        with pytest.raises(InvalidQuestionError) as exc_info:
            SelectedQuestion(id="q1", text="t", type=QuestionType.NPS, category="")
        assert isinstance(exc_info.value, PulseCheckError)
        assert exc_info.value.question_id == "q1"

    def test_frozen_immutability(self) -> None:
        q = SelectedQuestion(id="q1", text="t", type=QuestionType.NPS, category="eNPS")
        with pytest.raises(dataclasses.FrozenInstanceError):
            q.category = "Other"  # type: ignore[misc]


class TestSurvey:
    def test_question_lookup(self, sample_survey) -> None:
        assert sample_survey.question("q_dept").type == QuestionType.MULTIPLE_CHOICE
        assert sample_survey.question("nope") is None

    def test_defaults(self) -> None:
        survey = Survey(id="s", title="t")
        assert survey.status == SurveyStatus.DRAFT
        assert survey.total_participants == 0
        assert survey.is_anonymous is True
        assert survey.questions == ()
