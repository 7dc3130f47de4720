"""Freelancer Graph: similarity clustering of freelance worker records.

Builds a similarity graph over freelancer records, partitions it into
connected components and summarizes each cluster.
"""

__version__ = "1.0.0"
