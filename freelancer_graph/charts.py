"""Bar chart of hourly rates by experience level per cluster."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
import pandas as pd  # noqa: E402

from freelancer_graph.analysis import cluster_membership_frame  # noqa: E402
from freelancer_graph.records import Freelancer  # noqa: E402
from freelancer_graph.utils.path_utils import ensure_directory_exists  # noqa: E402
from freelancer_graph.utils.schema_utils import CLUSTER, EXPERIENCE_LEVEL, HOURLY_RATE  # noqa: E402

logger = logging.getLogger(__name__)

DEFAULT_EXPERIENCE_LEVELS = ("Beginner", "Intermediate", "Expert")
LEVEL_COLORS = ("#ff0000", "#00ff00", "#0000ff")
BAR_WIDTH = 0.2


def experience_rate_table(
    clusters: Sequence[Sequence[int]],
    records: Sequence[Freelancer],
    levels: Sequence[str] = DEFAULT_EXPERIENCE_LEVELS,
) -> pd.DataFrame:
    """Average hourly rate per cluster and experience level.

    Indices that do not address a record are skipped.

    Returns:
        DataFrame indexed by 0-based cluster position with one column per
        level; 0.0 where a cluster has no member at that level

    """
    membership = cluster_membership_frame(clusters, records)
    rates = (
        membership[membership[EXPERIENCE_LEVEL].isin(list(levels))]
        .groupby([CLUSTER, EXPERIENCE_LEVEL])[HOURLY_RATE]
        .mean()
    )

    table = pd.DataFrame(0.0, index=pd.RangeIndex(len(clusters)), columns=list(levels))
    for (label, level), rate in rates.items():
        table.loc[label - 1, level] = rate
    return table


def plot_cluster_experience_rates(
    clusters: Sequence[Sequence[int]],
    records: Sequence[Freelancer],
    output_path: str | Path = "cluster_experience_rates.png",
    levels: Sequence[str] = DEFAULT_EXPERIENCE_LEVELS,
) -> Path:
    """Draw grouped bars of average hourly rate per experience level.

    Args:
        clusters: Clusters of record indices
        records: Records addressed by position
        output_path: Image file to write (format from the suffix)
        levels: Experience levels to plot, one bar each per cluster

    Returns:
        Path of the written image

    """
    table = experience_rate_table(clusters, records, levels)
    output_path = Path(output_path)
    if output_path.parent != Path(""):
        ensure_directory_exists(str(output_path.parent))

    max_rate = float(table.to_numpy().max()) if table.size else 0.0
    fig, ax = plt.subplots(figsize=(10.24, 7.68))
    try:
        for level_idx, level in enumerate(levels):
            offset = (level_idx - (len(levels) - 1) / 2) * BAR_WIDTH
            ax.bar(
                table.index + offset,
                table[level],
                width=BAR_WIDTH,
                color=LEVEL_COLORS[level_idx % len(LEVEL_COLORS)],
                label=level,
            )

        ax.set_title("Hourly Rates by Experience Level per Cluster")
        ax.set_xlabel("Cluster ID")
        ax.set_ylabel("Average Hourly Rate (USD)")
        ax.set_xlim(-0.5, max(len(clusters), 1) - 0.5)
        ax.set_ylim(0.0, max_rate * 1.1 if max_rate > 0 else 1.0)
        ax.grid(axis="y", alpha=0.2)
        ax.legend(loc="upper right")

        fig.tight_layout()
        fig.savefig(output_path)
    finally:
        plt.close(fig)

    logger.info(f"Cluster experience chart saved to {output_path}")
    return output_path
