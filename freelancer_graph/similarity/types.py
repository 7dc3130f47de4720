"""Type definitions for similarity scoring components."""

from typing import TypedDict


class ScoreComponents(TypedDict):
    """Per-attribute match flags and the resulting weighted score."""

    job_category: bool
    platform: bool
    client_region: bool
    experience_level: bool
    score: float
