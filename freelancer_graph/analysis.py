"""Cluster performance and profile summaries.

Turns clusters of record indices into pandas tables: average earnings and
hourly rate per cluster, and the dominant value of each categorical
attribute per cluster.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import asdict, fields
from typing import Sequence

import pandas as pd

from freelancer_graph.records import CATEGORICAL_ATTRIBUTES, Freelancer
from freelancer_graph.utils.schema_utils import (
    ATTRIBUTE,
    ATTRIBUTE_LABELS,
    AVG_EARNINGS,
    AVG_HOURLY_RATE,
    CLUSTER,
    DOMINANT_COUNT,
    DOMINANT_PCT,
    DOMINANT_VALUE,
    EARNINGS_USD,
    HOURLY_RATE,
    MEMBERS,
    NUMERIC_COLUMNS,
)

logger = logging.getLogger(__name__)

PERFORMANCE_COLUMNS = [CLUSTER, MEMBERS, AVG_EARNINGS, AVG_HOURLY_RATE]
PROFILE_COLUMNS = [CLUSTER, MEMBERS, ATTRIBUTE, DOMINANT_VALUE, DOMINANT_COUNT, DOMINANT_PCT]


def cluster_membership_frame(
    clusters: Sequence[Sequence[int]],
    records: Sequence[Freelancer],
) -> pd.DataFrame:
    """Explode clusters into one row per (cluster, member record).

    Clusters are labelled from 1 in the order given and members keep their
    cluster order. Indices that do not address a record are skipped.

    Args:
        clusters: Clusters of record indices
        records: Records addressed by position

    Returns:
        DataFrame with a ``cluster`` column followed by the record fields

    """
    rows = []
    for label, members in enumerate(clusters, start=1):
        valid = [index for index in members if 0 <= index < len(records)]
        if len(valid) != len(members):
            logger.warning(
                f"Cluster {label}: skipped {len(members) - len(valid)} out-of-range indices",
            )
        rows.extend({CLUSTER: label, **asdict(records[index])} for index in valid)

    columns = [CLUSTER, *(field.name for field in fields(Freelancer))]
    return pd.DataFrame(rows, columns=columns).astype(
        {CLUSTER: int, **{column: float for column in NUMERIC_COLUMNS}},
    )


def compute_cluster_performance(
    clusters: Sequence[Sequence[int]],
    records: Sequence[Freelancer],
) -> pd.DataFrame:
    """Average earnings and hourly rate per cluster.

    Clusters are labelled from 1 in the order given. Indices that do not
    address a record are skipped; a cluster with no valid members averages
    to 0.0.

    Args:
        clusters: Clusters of record indices
        records: Records addressed by position

    Returns:
        DataFrame with one row per cluster

    """
    grouped = cluster_membership_frame(clusters, records).groupby(CLUSTER)
    performance = pd.DataFrame(
        {
            MEMBERS: grouped.size(),
            AVG_EARNINGS: grouped[EARNINGS_USD].mean(),
            AVG_HOURLY_RATE: grouped[HOURLY_RATE].mean(),
        },
    ).reindex(pd.RangeIndex(1, len(clusters) + 1, name=CLUSTER))

    performance[MEMBERS] = performance[MEMBERS].fillna(0).astype(int)
    performance[[AVG_EARNINGS, AVG_HOURLY_RATE]] = performance[
        [AVG_EARNINGS, AVG_HOURLY_RATE]
    ].fillna(0.0)
    return performance.reset_index()[PERFORMANCE_COLUMNS]


def compute_cluster_profiles(
    clusters: Sequence[Sequence[int]],
    records: Sequence[Freelancer],
) -> pd.DataFrame:
    """Dominant categorical values per cluster.

    Ties go to the value seen first in cluster member order. Out-of-range
    indices are skipped and clusters left empty produce no rows.

    Args:
        clusters: Clusters of record indices
        records: Records addressed by position

    Returns:
        DataFrame with one row per (cluster, attribute)

    """
    rows = []
    membership = cluster_membership_frame(clusters, records)
    for label, group in membership.groupby(CLUSTER, sort=True):
        total = len(group)
        for attribute in CATEGORICAL_ATTRIBUTES:
            value, count = Counter(group[attribute]).most_common(1)[0]
            rows.append(
                {
                    CLUSTER: label,
                    MEMBERS: total,
                    ATTRIBUTE: attribute,
                    DOMINANT_VALUE: value,
                    DOMINANT_COUNT: count,
                    DOMINANT_PCT: count / total * 100.0,
                },
            )
    return pd.DataFrame(rows, columns=PROFILE_COLUMNS)


def format_cluster_report(performance: pd.DataFrame, profiles: pd.DataFrame) -> str:
    """Render performance and profile tables as a plain-text report."""
    lines: list[str] = []

    for row in performance.itertuples(index=False):
        lines.append(f"Cluster {getattr(row, CLUSTER)} Analysis:")
        lines.append(f"- Members: {getattr(row, MEMBERS)}")
        lines.append(f"- Average Earnings: ${getattr(row, AVG_EARNINGS):.2f}")
        lines.append(f"- Average Hourly Rate: ${getattr(row, AVG_HOURLY_RATE):.2f}")
        lines.append("")

    for label, group in profiles.groupby(CLUSTER, sort=True):
        lines.append(f"Cluster {label} Profile ({group[MEMBERS].iat[0]} members):")
        for row in group.itertuples(index=False):
            name = ATTRIBUTE_LABELS.get(getattr(row, ATTRIBUTE), getattr(row, ATTRIBUTE))
            lines.append(
                f"- Dominant {name}: {getattr(row, DOMINANT_VALUE)} "
                f"({getattr(row, DOMINANT_PCT):.1f}%)",
            )
        lines.append("")

    return "\n".join(lines).rstrip("\n")
