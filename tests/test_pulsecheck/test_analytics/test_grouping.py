from __future__ import annotations

from pulsecheck.analytics.grouping import (
    collect_text_answers,
    count_choices,
    group_answers_by_question,
    group_questions_by_category,
)
from pulsecheck.model.response import NumericAnswer, SurveyResponse, TextAnswer

from tests.test_pulsecheck.conftest import make_question


class TestGroupAnswersByQuestion:
    def test_groups_in_response_order(self, sample_responses) -> None:
        grouped = group_answers_by_question(sample_responses)
        assert [a.value for a in grouped["q_enps"]] == [10, 9, 6, 8]
        assert len(grouped["q_eng2"]) == 3

    def test_skipped_question_absent(self, sample_responses) -> None:
        grouped = group_answers_by_question(sample_responses[3:])
        assert "q_comment" not in grouped

    def test_empty(self) -> None:
        assert group_answers_by_question([]) == {}

    def test_response_without_answers(self) -> None:
        assert group_answers_by_question([SurveyResponse(id="r", survey_id="s")]) == {}


class TestGroupQuestionsByCategory:
    def test_first_seen_order(self, sample_survey) -> None:
        grouped = group_questions_by_category(sample_survey.questions)
        assert list(grouped) == ["eNPS", "Leadership", "Engagement", "Demographics", "Feedback"]
        assert [q.id for q in grouped["Leadership"]] == ["q_lead_nps", "q_lead1"]

    def test_single_category(self) -> None:
        questions = [make_question("a"), make_question("b")]
        assert list(group_questions_by_category(questions)) == ["Engagement"]


class TestCountChoices:
    def test_most_chosen_first(self) -> None:
        answers = [TextAnswer("q", v) for v in ("Ops", "Sales", "Sales", "HR", "Ops", "Sales")]
        assert list(count_choices(answers).items()) == [("Sales", 3), ("Ops", 2), ("HR", 1)]

    def test_ties_alphabetical(self) -> None:
        answers = [TextAnswer("q", "b"), TextAnswer("q", "a")]
        assert list(count_choices(answers)) == ["a", "b"]

    def test_numeric_choices_use_label(self) -> None:
        assert count_choices([NumericAnswer("q", 3), NumericAnswer("q", 3)]) == {"3": 2}


class TestCollectTextAnswers:
    def test_drops_blank_and_strips(self) -> None:
        answers = [TextAnswer("q", "  Good  "), TextAnswer("q", "   "), TextAnswer("q", "")]
        assert collect_text_answers(answers) == ("Good",)

    def test_ignores_numeric(self) -> None:
        assert collect_text_answers([NumericAnswer("q", 4)]) == ()
