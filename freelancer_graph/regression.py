"""Linear model of hourly rate from success rate, job category and experience.

Features, in order:
    1. Job success rate scaled to 0-1
    2. Job category code (``regression.job_category_codes``)
    3. Experience level code (``regression.experience_level_codes``)

Labels missing from the code tables encode as 0.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence

import numpy as np

from freelancer_graph.records import Freelancer
from freelancer_graph.utils.io_utils import default_settings

logger = logging.getLogger(__name__)

FEATURE_NAMES = ("job_success_rate", "job_category_code", "experience_level_code")


@dataclass(frozen=True)
class RegressionModel:
    """Fitted linear model: ``rate = intercept + features @ coefficients``."""

    coefficients: np.ndarray
    intercept: float
    feature_names: tuple[str, ...] = FEATURE_NAMES

    def predict(self, features: np.ndarray) -> np.ndarray:
        features = np.atleast_2d(np.asarray(features, dtype=float))
        if features.shape[1] != len(self.coefficients):
            raise ValueError(
                f"Expected {len(self.coefficients)} features, got {features.shape[1]}",
            )
        return self.intercept + features @ self.coefficients


def encode_features(
    records: Sequence[Freelancer],
    settings: Optional[dict[str, Any]] = None,
) -> np.ndarray:
    """Encode records into an (N, 3) feature matrix."""
    regression_settings = (settings or default_settings()).get("regression", {})
    defaults = default_settings()["regression"]
    category_codes = regression_settings.get("job_category_codes", defaults["job_category_codes"])
    experience_codes = regression_settings.get(
        "experience_level_codes", defaults["experience_level_codes"],
    )

    rows = [
        [
            r.job_success_rate / 100.0,
            float(category_codes.get(r.job_category, 0.0)),
            float(experience_codes.get(r.experience_level, 0.0)),
        ]
        for r in records
    ]
    return np.array(rows, dtype=float).reshape(len(rows), len(FEATURE_NAMES))


def perform_regression(
    records: Sequence[Freelancer],
    settings: Optional[dict[str, Any]] = None,
) -> RegressionModel:
    """Fit hourly rate by ordinary least squares with an intercept.

    Underdetermined systems get the minimum-norm solution.

    Args:
        records: Training records
        settings: Settings dictionary holding the label code tables

    Returns:
        Fitted RegressionModel

    Raises:
        ValueError: If records is empty

    """
    if not records:
        raise ValueError("Regression requires at least one record")

    features = encode_features(records, settings)
    target = np.array([r.hourly_rate for r in records], dtype=float)

    design = np.column_stack([np.ones(len(records)), features])
    solution, _, rank, _ = np.linalg.lstsq(design, target, rcond=None)
    if rank < design.shape[1]:
        logger.warning(
            f"Design matrix is rank deficient ({rank} < {design.shape[1]}); "
            "using minimum-norm solution",
        )

    model = RegressionModel(coefficients=solution[1:], intercept=float(solution[0]))
    logger.info(f"Fitted rate model on {len(records)} records: intercept={model.intercept:.2f}")
    return model
