"""Command-line entry point.

Usage:
    python -m freelancer_graph.cli cluster --input freelancer_data.csv
    python -m freelancer_graph.cli cluster --input data.csv --threshold 0.5 --no-chart
    python -m freelancer_graph.cli predict --input freelancer_data.csv
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Optional, Sequence

from freelancer_graph import __version__
from freelancer_graph.analysis import (
    compute_cluster_performance,
    compute_cluster_profiles,
    format_cluster_report,
)
from freelancer_graph.charts import plot_cluster_experience_rates
from freelancer_graph.error_analysis import (
    compute_error_metrics,
    format_error_report,
    sample_predictions,
)
from freelancer_graph.grouping import cluster_records
from freelancer_graph.grouping.graph_builder import SIMILARITY_THRESHOLD
from freelancer_graph.ingest import load_freelancers
from freelancer_graph.records import Freelancer
from freelancer_graph.regression import encode_features, perform_regression
from freelancer_graph.utils.io_utils import load_settings
from freelancer_graph.utils.logging_utils import setup_logging
from freelancer_graph.utils.path_utils import get_config_path

logger = logging.getLogger(__name__)

# (label, job success rate %, job category, experience level)
EXAMPLE_PROFILES = [
    ("Expert Web Developer", 95.0, "Web Development", "Expert"),
    ("Entry Level Designer", 75.0, "Design", "Entry Level"),
]


def _configured_threshold(settings: dict[str, Any]) -> float:
    value = settings.get("clustering", {}).get("threshold", SIMILARITY_THRESHOLD)
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"clustering.threshold must be a number, got {value!r}") from None


def run_cluster(args: argparse.Namespace, settings: dict[str, Any]) -> int:
    """Cluster records and print the cluster report."""
    records = load_freelancers(args.input, settings)

    threshold = args.threshold
    if threshold is None:
        threshold = _configured_threshold(settings)

    result = cluster_records(records, threshold=threshold)

    performance = compute_cluster_performance(result.clusters, records)
    profiles = compute_cluster_profiles(result.clusters, records)
    print(format_cluster_report(performance, profiles))

    if not args.no_chart:
        chart_settings = settings.get("charts", {})
        output_path = args.chart or chart_settings.get("output_path", "cluster_experience_rates.png")
        levels = chart_settings.get("experience_levels", ["Beginner", "Intermediate", "Expert"])
        plot_cluster_experience_rates(result.clusters, records, output_path, levels)
        print(f"\nChart saved to: {output_path}")

    return 0


def run_predict(args: argparse.Namespace, settings: dict[str, Any]) -> int:
    """Fit the hourly rate model and print coefficients and errors."""
    records = load_freelancers(args.input, settings)
    model = perform_regression(records, settings)

    print("Model Results:")
    print(f"Intercept: {model.intercept:.2f}")
    print("\nCoefficients:")
    print(f"Job Success Rate (0-1): {model.coefficients[0]:.2f}")
    print(f"Job Category (1-5): {model.coefficients[1]:.2f}")
    print(f"Experience Level (1-3): {model.coefficients[2]:.2f}")

    print("\nExample Predictions:")
    for label, success, category, experience in EXAMPLE_PROFILES:
        example = Freelancer(
            id=0,
            job_category=category,
            platform="",
            experience_level=experience,
            client_region="",
            job_success_rate=success,
        )
        features = encode_features([example], settings)
        print(f"{label}: ${model.predict(features)[0]:.2f}/hr")

    actual = [r.hourly_rate for r in records]
    predicted = model.predict(encode_features(records, settings))
    metrics = compute_error_metrics(actual, predicted)
    print()
    print(format_error_report(metrics, sample_predictions(actual, predicted)))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Freelancer similarity clustering and rate analysis",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"Freelancer Graph v{__version__}",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    cluster_parser = subparsers.add_parser("cluster", help="Cluster freelancers by similarity")
    cluster_parser.add_argument("--input", required=True, help="Input CSV file path")
    cluster_parser.add_argument(
        "--config",
        default=str(get_config_path()),
        help="Configuration file path",
    )
    cluster_parser.add_argument(
        "--threshold",
        type=float,
        help="Similarity threshold in [0,1] (overrides clustering.threshold)",
    )
    cluster_parser.add_argument("--chart", help="Chart output path (overrides charts.output_path)")
    cluster_parser.add_argument("--no-chart", action="store_true", help="Skip chart rendering")

    predict_parser = subparsers.add_parser("predict", help="Fit the hourly rate model")
    predict_parser.add_argument("--input", required=True, help="Input CSV file path")
    predict_parser.add_argument(
        "--config",
        default=str(get_config_path()),
        help="Configuration file path",
    )

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    settings = load_settings(args.config)
    setup_logging(settings.get("logging", {}))

    handlers = {"cluster": run_cluster, "predict": run_predict}
    try:
        return handlers[args.command](args, settings)
    except OSError as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    except ValueError as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    except KeyboardInterrupt:
        logger.warning("Interrupted by user (Ctrl+C)")
        return 130


if __name__ == "__main__":
    sys.exit(main())
