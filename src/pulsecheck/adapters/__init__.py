from pulsecheck.adapters.base import ResponseSource
from pulsecheck.adapters.csv_adapter import CSVResponseAdapter
from pulsecheck.adapters.json_adapter import (
    JSONSurveyAdapter,
    question_from_dict,
    response_from_dict,
    survey_from_dict,
)

__all__ = [
    "ResponseSource",
    "CSVResponseAdapter",
    "JSONSurveyAdapter",
    "question_from_dict",
    "response_from_dict",
    "survey_from_dict",
]
