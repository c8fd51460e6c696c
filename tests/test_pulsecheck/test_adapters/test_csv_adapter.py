from __future__ import annotations

import logging

import pytest

from pulsecheck.adapters.csv_adapter import CSVResponseAdapter
from pulsecheck.model.response import NumericAnswer, TextAnswer


class TestCSVResponseAdapter:
    def test_read_rows(self, tmp_path, sample_survey) -> None:
        csv_file = tmp_path / "responses.csv"
        csv_file.write_text(
            "id,respondent_id,q_enps,q_eng1,q_dept,q_comment\n"
            "r1,u1,10,5,Sales,Great team\n"
            "r2,,6,,Ops,\n"
        )
        responses = CSVResponseAdapter(csv_file, sample_survey).fetch()
        assert len(responses) == 2

        first = responses[0]
        assert first.id == "r1"
        assert first.respondent_id == "u1"
        assert first.survey_id == "srv-1"
        assert first.answers["q_enps"] == NumericAnswer("Question q_enps", 10)
        assert first.answers["q_dept"] == TextAnswer("Question q_dept", "Sales")

        second = responses[1]
        assert set(second.answers) == {"q_enps", "q_dept"}

    def test_generates_ids_when_missing(self, tmp_path, sample_survey) -> None:
        csv_file = tmp_path / "responses.csv"
        csv_file.write_text("q_enps\n9\n")
        responses = CSVResponseAdapter(csv_file, sample_survey).fetch()
        assert responses[0].id

    def test_blank_rows_skipped(self, tmp_path, sample_survey) -> None:
        csv_file = tmp_path / "responses.csv"
        csv_file.write_text("id,q_enps,q_eng1\nr1,,\nr2,9,4\n")
        responses = CSVResponseAdapter(csv_file, sample_survey).fetch()
        assert [r.id for r in responses] == ["r2"]

    def test_malformed_numeric_cell_skipped(self, tmp_path, sample_survey, caplog) -> None:
        csv_file = tmp_path / "responses.csv"
        csv_file.write_text("q_enps,q_eng1\nten,4\n")
        with caplog.at_level(logging.WARNING, logger="pulsecheck.adapters.csv_adapter"):
            responses = CSVResponseAdapter(csv_file, sample_survey).fetch()
        assert set(responses[0].answers) == {"q_eng1"}
        assert "q_enps" in caplog.text

    def test_unknown_columns_ignored(self, tmp_path, sample_survey, caplog) -> None:
        csv_file = tmp_path / "responses.csv"
        csv_file.write_text("q_enps,department\n9,Sales\n")
        with caplog.at_level(logging.WARNING, logger="pulsecheck.adapters.csv_adapter"):
            responses = CSVResponseAdapter(csv_file, sample_survey).fetch()
        assert set(responses[0].answers) == {"q_enps"}
        assert "department" in caplog.text

    def test_empty_csv_returns_empty(self, tmp_path, sample_survey) -> None:
        csv_file = tmp_path / "responses.csv"
        csv_file.write_text("q_enps\n")
        assert CSVResponseAdapter(csv_file, sample_survey).fetch() == ()

    def test_file_not_found_raises(self, tmp_path, sample_survey) -> None:
        with pytest.raises(FileNotFoundError):
            CSVResponseAdapter(tmp_path / "nonexistent.csv", sample_survey).fetch()

    def test_fetch_consumes_file(self, tmp_path, sample_survey) -> None:
        csv_file = tmp_path / "responses.csv"
        csv_file.write_text("q_enps\n9\n")
        adapter = CSVResponseAdapter(csv_file, sample_survey)
        assert len(adapter.fetch()) == 1
        assert adapter.fetch() == ()

    def test_survey_id(self, tmp_path, sample_survey) -> None:
        assert CSVResponseAdapter(tmp_path / "x.csv", sample_survey).survey_id == "srv-1"
