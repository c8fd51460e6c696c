"""Error hierarchy for pulsecheck analytics."""
from __future__ import annotations


class PulseCheckError(Exception):
    """Base error for all pulsecheck errors."""


class InvalidScoreError(PulseCheckError, ValueError):
    """A rating outside its scale (NPS 0..10, Likert 1..5) or not an integer."""

    def __init__(self, message: str, *, value: object = None, scale: str = "") -> None:
        super().__init__(message)
        self.value = value
        self.scale = scale


class InvalidCountError(PulseCheckError, ValueError):
    """A negative or non-integral roster/response count."""

    def __init__(self, message: str, *, value: object = None) -> None:
        super().__init__(message)
        self.value = value


class InvalidQuestionError(PulseCheckError, ValueError):
    """A question definition that cannot be scored, such as one with no category."""

    def __init__(self, message: str, *, question_id: str = "") -> None:
        super().__init__(message)
        self.question_id = question_id


class InvalidAnswerError(PulseCheckError, ValueError):
    """An answer whose kind does not match its question type."""

    def __init__(self, message: str, *, question_id: str = "") -> None:
        super().__init__(message)
        self.question_id = question_id


class UnknownQuestionError(PulseCheckError, KeyError):
    """A question id that does not belong to the survey."""

    def __init__(self, question_id: str) -> None:
        super().__init__(question_id)
        self.question_id = question_id

    def __str__(self) -> str:
        return f"Unknown question: {self.question_id}"


class SurveyFormatError(PulseCheckError):
    """An export document that cannot be turned into a survey."""

    def __init__(self, message: str, *, source: str = "") -> None:
        super().__init__(message)
        self.source = source
