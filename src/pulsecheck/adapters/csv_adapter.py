from __future__ import annotations

import csv
import logging
import uuid
from pathlib import Path

from pulsecheck.errors import InvalidAnswerError
from pulsecheck.model.question import QuestionType, Survey
from pulsecheck.model.response import Answer, SurveyResponse, make_answer

logger = logging.getLogger(__name__)

_META_COLUMNS = ("id", "respondent_id", "submitted_at")


def _parse_cell(qtype: QuestionType, cell: str) -> object:
    if qtype in (QuestionType.NPS, QuestionType.LIKERT):
        try:
            return int(cell)
        except ValueError:
            return cell
    return cell


class CSVResponseAdapter:
    """Adapter that reads responses from a wide CSV export.

    One row per respondent, one column per question id. Optional columns:
    id, respondent_id, submitted_at. Blank cells are unanswered questions,
    columns that are not questions of *survey* are ignored, and malformed
    numeric cells are skipped with a warning. ``fetch()`` reads the file
    once; later calls return an empty tuple.
    """

    def __init__(self, path: str | Path, survey: Survey) -> None:
        self._path = Path(path)
        self._survey = survey
        self._consumed = False

    @property
    def survey_id(self) -> str:
        return self._survey.id

    def fetch(self) -> tuple[SurveyResponse, ...]:
        """Read all rows from the CSV and return them as responses.

        Raises FileNotFoundError if the file does not exist.
        Returns an empty tuple on subsequent calls.
        """
        if self._consumed:
            return ()

        if not self._path.exists():
            raise FileNotFoundError(f"CSV file not found: {self._path}")

        responses: list[SurveyResponse] = []
        with self._path.open(newline="", encoding="utf-8-sig") as fh:
            reader = csv.DictReader(fh)
            columns = [c for c in (reader.fieldnames or []) if c not in _META_COLUMNS]
            questions = {c: self._survey.question(c) for c in columns}
            ignored = sorted(c for c, q in questions.items() if q is None)
            if ignored:
                logger.warning("Ignoring CSV columns that are not survey questions: %s", ignored)

            for line_no, row in enumerate(reader, start=2):
                answers: dict[str, Answer] = {}
                for column, question in questions.items():
                    cell = (row.get(column) or "").strip()
                    if question is None or not cell:
                        continue
                    try:
                        answers[column] = make_answer(
                            question.type,
                            question.text,
                            _parse_cell(question.type, cell),
                            question_id=question.id,
                        )
                    except InvalidAnswerError as exc:
                        logger.warning("Skipping cell %s on line %d: %s", column, line_no, exc)
                if not answers:
                    continue

                responses.append(
                    SurveyResponse(
                        id=(row.get("id") or "").strip() or uuid.uuid4().hex,
                        survey_id=self._survey.id,
                        answers=answers,
                        respondent_id=(row.get("respondent_id") or "").strip(),
                        submitted_at=(row.get("submitted_at") or "").strip(),
                    )
                )

        self._consumed = True
        logger.info("Read %d responses from %s", len(responses), self._path)
        return tuple(responses)
