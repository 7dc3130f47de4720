"""Prediction error metrics."""

from __future__ import annotations

import math
from typing import Any, Sequence

import numpy as np


def _as_arrays(actual: Sequence[float], predicted: Sequence[float]) -> tuple[np.ndarray, np.ndarray]:
    actual_arr = np.asarray(actual, dtype=float)
    predicted_arr = np.asarray(predicted, dtype=float)
    if actual_arr.shape != predicted_arr.shape:
        raise ValueError(
            f"actual and predicted differ in length: {actual_arr.shape} vs {predicted_arr.shape}",
        )
    if actual_arr.size == 0:
        raise ValueError("Error analysis requires at least one value")
    return actual_arr, predicted_arr


def compute_error_metrics(actual: Sequence[float], predicted: Sequence[float]) -> dict[str, float]:
    """Compute MSE, RMSE, MAE and R-squared.

    R-squared is NaN when the actual values have no variance.
    """
    actual_arr, predicted_arr = _as_arrays(actual, predicted)
    residuals = predicted_arr - actual_arr

    mse = float(np.mean(residuals**2))
    mae = float(np.mean(np.abs(residuals)))
    total_ss = float(np.sum((actual_arr - actual_arr.mean()) ** 2))
    residual_ss = float(np.sum(residuals**2))
    r_squared = 1.0 - residual_ss / total_ss if total_ss > 0 else math.nan

    return {"mse": mse, "rmse": math.sqrt(mse), "mae": mae, "r_squared": r_squared}


def sample_predictions(
    actual: Sequence[float],
    predicted: Sequence[float],
    limit: int = 5,
) -> list[dict[str, Any]]:
    """First ``limit`` predictions alongside actual values and errors."""
    actual_arr, predicted_arr = _as_arrays(actual, predicted)
    return [
        {
            "sample": i + 1,
            "predicted": float(predicted_arr[i]),
            "actual": float(actual_arr[i]),
            "error": float(predicted_arr[i] - actual_arr[i]),
        }
        for i in range(min(limit, actual_arr.size))
    ]


def format_error_report(metrics: dict[str, float], samples: list[dict[str, Any]]) -> str:
    lines = [
        "Error Analysis:",
        f"Mean Squared Error (MSE): {metrics['mse']:.2f}",
        f"Root Mean Squared Error (RMSE): {metrics['rmse']:.2f}",
        f"Mean Absolute Error (MAE): {metrics['mae']:.2f}",
        f"R-squared: {metrics['r_squared']:.4f}",
        "",
        "Sample Predictions vs Actual:",
    ]
    for s in samples:
        lines.append(
            f"Sample {s['sample']}: Predicted ${s['predicted']:.2f}/hr, "
            f"Actual ${s['actual']:.2f}/hr, Error: ${s['error']:.2f}/hr",
        )
    return "\n".join(lines)
