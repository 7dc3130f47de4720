#!/usr/bin/env python3
"""Score Pair CLI - Debug utility to trace similarity scoring for two freelancers.

Attributes are given in scoring order: job category, platform, client region,
experience level. Empty strings are valid values.

Usage:
    python scripts/score_pair.py "Design,Fiverr,Europe,Expert" "Design,Upwork,Europe,Expert"
    python scripts/score_pair.py "Writing,Upwork,,Beginner" "Writing,Upwork,,Expert" --threshold 0.5
"""

import argparse
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from freelancer_graph.grouping.graph_builder import SIMILARITY_THRESHOLD  # noqa: E402
from freelancer_graph.records import CATEGORICAL_ATTRIBUTES, Freelancer  # noqa: E402
from freelancer_graph.similarity.scoring import (  # noqa: E402
    ATTRIBUTE_WEIGHTS,
    compute_score_components,
)


def parse_attributes(text: str, record_id: int) -> Freelancer:
    """Build a record from a comma-separated attribute list."""
    values = text.split(",")
    if len(values) != len(CATEGORICAL_ATTRIBUTES):
        raise ValueError(
            f"Expected {len(CATEGORICAL_ATTRIBUTES)} comma-separated values, got {len(values)}: {text!r}",
        )
    return Freelancer(id=record_id, **dict(zip(CATEGORICAL_ATTRIBUTES, values)))


def trace_scoring(a: Freelancer, b: Freelancer, threshold: float) -> float:
    """Print the per-attribute contributions and the linking decision."""
    print("=" * 80)
    print("SIMILARITY SCORING TRACE")
    print("=" * 80)

    components = compute_score_components(a, b)

    print("\n1. ATTRIBUTES:")
    for attribute in CATEGORICAL_ATTRIBUTES:
        matched = components[attribute]  # type: ignore[literal-required]
        weight = ATTRIBUTE_WEIGHTS[attribute] if matched else 0.0
        print(
            f"   {attribute:<17} '{getattr(a, attribute)}' vs '{getattr(b, attribute)}'"
            f" -> {'match' if matched else 'no match'} (+{weight:.2f})",
        )

    score = components["score"]
    print(f"\n2. SCORE: {score:.2f}")

    print("\n3. LINKING DECISION:")
    if score > threshold:
        print(f"   ✅ LINKED: {score:.2f} > {threshold}")
    else:
        print(f"   ❌ NOT LINKED: {score:.2f} <= {threshold}")

    print("=" * 80)
    return score


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Trace similarity scoring for two freelancer attribute lists",
    )
    parser.add_argument("record_a", help="job_category,platform,client_region,experience_level")
    parser.add_argument("record_b", help="job_category,platform,client_region,experience_level")
    parser.add_argument(
        "--threshold", type=float, default=SIMILARITY_THRESHOLD, help="Linking threshold",
    )

    args = parser.parse_args()

    try:
        a = parse_attributes(args.record_a, 0)
        b = parse_attributes(args.record_b, 1)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    trace_scoring(a, b, args.threshold)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
