"""PulseCheck: employee pulse-survey analytics."""
from __future__ import annotations

from pulsecheck.config import PulseCheckConfig
from pulsecheck.analytics import analyze_survey, calculate_likert_score, calculate_nps

__version__ = "0.1.0"

__all__ = [
    "PulseCheckConfig",
    "analyze_survey",
    "calculate_nps",
    "calculate_likert_score",
]
