#!/usr/bin/env python3
"""Setup script for freelancer_graph package.
"""

from setuptools import find_packages, setup

setup(
    name="freelancer_graph",
    version="1.0.0",
    description="Similarity clustering and rate analysis for freelancer records",
    author="Freelancer Graph Team",
    packages=find_packages(include=["freelancer_graph*"]),
    python_requires=">=3.10",
    install_requires=[
        "pandas>=1.5.0",
        "numpy>=1.23.0",
        "matplotlib>=3.6.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "hypothesis>=6.0.0",
        ],
        "dev": [
            "pytest>=7.0.0",
            "hypothesis>=6.0.0",
            "black>=23.0.0",
            "ruff>=0.1.0",
            "mypy>=1.5.0",
            "pandas-stubs>=2.0.0",
            "types-PyYAML>=6.0.0",
        ],
    },
)
