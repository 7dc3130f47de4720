"""Canonical field names and input column mapping.

Canonical names are the ``Freelancer`` attribute names; input headers are
mapped onto them through the ``ingest.columns`` settings section.
"""

# Identity
FREELANCER_ID = "id"

# Categorical attributes (similarity participants)
JOB_CATEGORY = "job_category"
PLATFORM = "platform"
CLIENT_REGION = "client_region"
EXPERIENCE_LEVEL = "experience_level"

# Performance fields
EARNINGS_USD = "earnings_usd"
HOURLY_RATE = "hourly_rate"
JOB_SUCCESS_RATE = "job_success_rate"

CATEGORICAL_COLUMNS = [JOB_CATEGORY, PLATFORM, CLIENT_REGION, EXPERIENCE_LEVEL]
NUMERIC_COLUMNS = [EARNINGS_USD, HOURLY_RATE, JOB_SUCCESS_RATE]

# Headers of the public freelancer earnings dataset
DEFAULT_INPUT_COLUMNS = {
    FREELANCER_ID: "Freelancer_ID",
    JOB_CATEGORY: "Job_Category",
    PLATFORM: "Platform",
    EXPERIENCE_LEVEL: "Experience_Level",
    CLIENT_REGION: "Client_Region",
    EARNINGS_USD: "Earnings_USD",
    HOURLY_RATE: "Hourly_Rate",
    JOB_SUCCESS_RATE: "Job_Success_Rate",
}

# Analysis output columns
CLUSTER = "cluster"
MEMBERS = "members"
AVG_EARNINGS = "avg_earnings"
AVG_HOURLY_RATE = "avg_hourly_rate"
ATTRIBUTE = "attribute"
DOMINANT_VALUE = "dominant_value"
DOMINANT_COUNT = "dominant_count"
DOMINANT_PCT = "dominant_pct"

# Display labels used in profile reports
ATTRIBUTE_LABELS = {
    JOB_CATEGORY: "Job Category",
    PLATFORM: "Platform",
    CLIENT_REGION: "Region",
    EXPERIENCE_LEVEL: "Experience",
}
