from __future__ import annotations

import random
from pathlib import Path

import numpy as np
import pytest
from hypothesis import HealthCheck, settings

from freelancer_graph.records import Freelancer

# ---- Deterministic Testing Configuration ---------------------

# Global deterministic seed
DETERMINISTIC_SEED = 42


@pytest.fixture(autouse=True)
def set_deterministic_seed():
    """Set deterministic seed for all tests"""
    random.seed(DETERMINISTIC_SEED)
    np.random.seed(DETERMINISTIC_SEED)
    yield
    # Reset after test
    random.seed()
    np.random.seed()


# Hypothesis settings for all property-based tests
settings.register_profile(
    "deterministic",
    deadline=None,
    max_examples=200,
    derandomize=True,
    database=None,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("deterministic")


# ---- Shared fixtures -------------------------------------------

CSV_HEADER = (
    "Freelancer_ID,Job_Category,Platform,Experience_Level,Client_Region,"
    "Payment_Method,Job_Completed,Earnings_USD,Hourly_Rate,Job_Success_Rate"
)


def _make_freelancer(
    id: int,
    job_category: str = "Web Development",
    platform: str = "Upwork",
    client_region: str = "USA",
    experience_level: str = "Expert",
    earnings_usd: float = 0.0,
    hourly_rate: float = 0.0,
    job_success_rate: float = 0.0,
) -> Freelancer:
    return Freelancer(
        id=id,
        job_category=job_category,
        platform=platform,
        experience_level=experience_level,
        client_region=client_region,
        earnings_usd=earnings_usd,
        hourly_rate=hourly_rate,
        job_success_rate=job_success_rate,
    )


@pytest.fixture
def make_freelancer():
    """Factory for records with overridable attributes."""
    return _make_freelancer


@pytest.fixture
def sample_csv(tmp_path: Path) -> Path:
    """Small input file in the public dataset's column layout."""
    rows = [
        CSV_HEADER,
        "1,Web Development,Upwork,Expert,USA,PayPal,40,5000.0,50.0,95.0",
        "2,Web Development,Upwork,Expert,USA,PayPal,35,4000.0,40.0,90.0",
        "3,Design,Fiverr,Beginner,Europe,Crypto,10,1000.0,20.0,75.0",
        "4,Writing,Toptal,Intermediate,Asia,Bank Transfer,20,2000.0,30.0,80.0",
        "5,Design,Fiverr,Beginner,Europe,Crypto,12,1500.0,25.0,70.0",
    ]
    path = tmp_path / "freelancers.csv"
    path.write_text("\n".join(rows) + "\n", encoding="utf-8")
    return path
