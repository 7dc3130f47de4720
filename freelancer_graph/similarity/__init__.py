"""Similarity scoring for freelancer records."""

from .scoring import ATTRIBUTE_WEIGHTS, compute_score_components, similarity_score
from .types import ScoreComponents

__all__ = [
    "ATTRIBUTE_WEIGHTS",
    "ScoreComponents",
    "compute_score_components",
    "similarity_score",
]
