from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PulseCheckConfig:
    issue_threshold: int = 60  # below the "good" bucket
    strength_threshold: int = 80  # the "excellent" bucket
    trend_tolerance: int = 5  # points of change still counted as stable
    min_segment_size: int = 3  # smaller segments are suppressed for anonymity
    leadership_category: str = "Leadership"
    host: str = "127.0.0.1"
    port: int = 5000
