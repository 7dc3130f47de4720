"""Freelancer record type."""

from __future__ import annotations

from dataclasses import dataclass

from freelancer_graph.utils.schema_utils import CATEGORICAL_COLUMNS

# Attributes compared by the similarity scorer, in scoring order
CATEGORICAL_ATTRIBUTES = tuple(CATEGORICAL_COLUMNS)


@dataclass(frozen=True)
class Freelancer:
    """One freelance worker.

    Attributes:
        id: Unique non-negative identifier
        job_category: Type of work the freelancer specializes in
        platform: Freelancing platform the freelancer operates on
        experience_level: Level of professional experience
        client_region: Geographic region of the freelancer's clients
        earnings_usd: Total earnings in USD
        hourly_rate: Charged hourly rate in USD
        job_success_rate: Percentage of successfully completed jobs (0-100)
    """

    id: int
    job_category: str
    platform: str
    experience_level: str
    client_region: str
    earnings_usd: float = 0.0
    hourly_rate: float = 0.0
    job_success_rate: float = 0.0
