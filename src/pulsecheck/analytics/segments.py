"""Split survey results by a demographic question."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from pulsecheck.analytics.report import SurveyAnalytics, analyze_survey
from pulsecheck.config import PulseCheckConfig
from pulsecheck.errors import UnknownQuestionError
from pulsecheck.model.question import Survey
from pulsecheck.model.response import SurveyResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SegmentResult:
    segment: str
    response_count: int
    suppressed: bool = False
    analytics: SurveyAnalytics | None = None  # None when suppressed


def _segment_order(label: str) -> tuple[int, int, str]:
    try:
        return (0, int(label), label)
    except ValueError:
        return (1, 0, label)


def segment_analysis(
    survey: Survey,
    responses: Sequence[SurveyResponse],
    segment_question_id: str,
    min_group_size: int | None = None,
    config: PulseCheckConfig | None = None,
) -> dict[str, SegmentResult]:
    """Run the survey analytics separately for each answer to a segment question.

    Segments with fewer than *min_group_size* responses are suppressed: only
    their size is reported. Responses that skipped the segment question are
    left out, as are blank answers. Numeric segments (an NPS or Likert
    question) come first in numeric order, then text segments alphabetically.
    """
    config = config or PulseCheckConfig()
    if survey.question(segment_question_id) is None:
        raise UnknownQuestionError(segment_question_id)
    threshold = config.min_segment_size if min_group_size is None else min_group_size

    groups: dict[str, list[SurveyResponse]] = {}
    skipped = 0
    for response in responses:
        answer = response.answers.get(segment_question_id)
        label = "" if answer is None else str(answer.value).strip()
        if not label:
            skipped += 1
            continue
        groups.setdefault(label, []).append(response)
    if skipped:
        logger.debug("%d response(s) without a %s answer", skipped, segment_question_id)

    results: dict[str, SegmentResult] = {}
    for segment in sorted(groups, key=_segment_order):
        members = groups[segment]
        if len(members) < threshold:
            results[segment] = SegmentResult(
                segment=segment, response_count=len(members), suppressed=True
            )
            continue
        results[segment] = SegmentResult(
            segment=segment,
            response_count=len(members),
            # no per-segment roster is known
            analytics=analyze_survey(survey, members, total_employees=0, config=config),
        )
    return results
