"""
Pytest configuration and shared fixtures.

This module provides common fixtures and utilities used across all tests.
"""

import pandas as pd
import pytest

from aqicalc.pollutants import PollutantKind
from aqicalc.tables import TABLES

# ============================================================================
# Table Fixtures
# ============================================================================


@pytest.fixture(params=list(PollutantKind), ids=lambda kind: kind.value)
def table(request):
    """Each breakpoint table in turn."""
    return TABLES[request.param]


# ============================================================================
# Sample DataFrames for Testing Batch Calculation
# ============================================================================


@pytest.fixture
def sample_readings_df():
    """
    Sample DataFrame of readings, one per row, with a non-default index.

    Covers a numeric result, a scaled O3 reading, an advisory outcome,
    an unknown pollutant and an unparseable value.
    """
    return pd.DataFrame(
        {
            "site_code": ["MY1", "MY1", "MY1", "KC1", "KC1"],
            "pollutant": ["PM2.5", "O3-8hr", "SO2-1hr", "lead", "CO"],
            "value": [35.9, 54, 400, 3.0, "abc"],
        },
        index=[10, 11, 12, 13, 14],
    )


@pytest.fixture
def empty_readings_df():
    """Empty DataFrame with the expected columns."""
    return pd.DataFrame(columns=["pollutant", "value"])
