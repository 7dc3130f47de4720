"""Weighted exact-match similarity between freelancer records."""

from __future__ import annotations

from freelancer_graph.records import CATEGORICAL_ATTRIBUTES, Freelancer
from freelancer_graph.similarity.types import ScoreComponents
from freelancer_graph.utils.schema_utils import (
    CLIENT_REGION,
    EXPERIENCE_LEVEL,
    JOB_CATEGORY,
    PLATFORM,
)

ATTRIBUTE_WEIGHTS: dict[str, float] = {
    JOB_CATEGORY: 0.30,
    PLATFORM: 0.25,
    CLIENT_REGION: 0.25,
    EXPERIENCE_LEVEL: 0.20,
}

# Sums of the weights are rounded so they compare exactly against decimal
# literals such as the 0.7 threshold.
SCORE_DECIMALS = 6


def similarity_score(a: Freelancer, b: Freelancer) -> float:
    """Score two records by the weights of their matching attributes.

    Only the four categorical attributes participate, compared by plain
    string equality. Two empty values are equal and contribute their weight.

    Args:
        a: First record
        b: Second record

    Returns:
        Score in [0, 1]; 1.0 when all four attributes match

    """
    total = 0.0
    for attribute in CATEGORICAL_ATTRIBUTES:
        if getattr(a, attribute) == getattr(b, attribute):
            total += ATTRIBUTE_WEIGHTS[attribute]
    return round(total, SCORE_DECIMALS)


def compute_score_components(a: Freelancer, b: Freelancer) -> ScoreComponents:
    """Break a similarity score down by attribute.

    Args:
        a: First record
        b: Second record

    Returns:
        Match flag per attribute and the total score

    """
    return {
        JOB_CATEGORY: a.job_category == b.job_category,
        PLATFORM: a.platform == b.platform,
        CLIENT_REGION: a.client_region == b.client_region,
        EXPERIENCE_LEVEL: a.experience_level == b.experience_level,
        "score": similarity_score(a, b),
    }
