from __future__ import annotations

from typing import Protocol

from pulsecheck.model.response import SurveyResponse


class ResponseSource(Protocol):
    """Protocol for anything that supplies the responses of one survey."""

    def fetch(self) -> tuple[SurveyResponse, ...]:
        """Return every response collected for the survey."""
        ...

    @property
    def survey_id(self) -> str: ...
