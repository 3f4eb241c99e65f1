# AQICalc: convert pollutant concentrations to US Air Quality Index values
# Copyright (C) 2025 Ruaraidh Dobson, South London Scientific

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.

# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.


"""
AQI calculation over tables of readings.

Applies compute_aqi() to every row of a DataFrame, for data that arrives as
a batch of (pollutant, concentration) readings rather than one at a time.
"""

import logging
import warnings

import pandas as pd

from .calculator import compute_aqi
from .decorators import log_readings
from .exceptions import AQICalcError, UnknownPollutantError

logger = logging.getLogger(__name__)

# Value of the aqi_outcome column for rows that could not be calculated
INVALID_OUTCOME = "invalid"


def validate_data(
    df: pd.DataFrame,
    pollutant_col: str = "pollutant",
    value_col: str = "value",
) -> None:
    """
    Validate that a DataFrame has the columns needed for AQI calculation.

    Raises:
        ValueError: If required columns are missing
    """
    required_columns = {pollutant_col, value_col}
    missing = required_columns - set(df.columns)

    if missing:
        raise ValueError(
            f"DataFrame missing required columns for AQI calculation: {missing}."
        )


@log_readings()
def aqi_table(
    data: pd.DataFrame,
    pollutant_col: str = "pollutant",
    value_col: str = "value",
    warn_unknown: bool = True,
) -> pd.DataFrame:
    """
    Calculate the AQI for every reading in a DataFrame.

    Args:
        data: DataFrame with one reading per row
        pollutant_col: Column holding pollutant names
        value_col: Column holding concentrations in each pollutant's input unit
        warn_unknown: Warn once listing pollutant names that are not supported

    Returns:
        Copy of the input with added columns:
            aqi_value: AQI (nullable integer; null for sentinel or invalid rows)
            aqi_category: Category label, or None
            aqi_outcome: Outcome name, or "invalid" for rows that could not
                         be calculated (unknown pollutant, missing or bad value)
            aqi_advisory: Advisory tag for sentinel outcomes, or None

    Example:
        >>> readings = pd.DataFrame(
        ...     {"pollutant": ["PM2.5", "O3-8hr"], "value": [35.9, 54]}
        ... )
        >>> aqi_table(readings)["aqi_value"].tolist()
        [102, 50]
    """
    validate_data(data, pollutant_col, value_col)

    values = []
    categories = []
    outcomes = []
    advisories = []
    unknown = set()

    for pollutant, concentration in zip(data[pollutant_col], data[value_col]):
        try:
            result = compute_aqi(pollutant, concentration)
        except UnknownPollutantError:
            unknown.add(pollutant)
            result = None
        except AQICalcError as e:
            logger.debug(f"Skipping {pollutant} reading {concentration!r}: {e}")
            result = None

        if result is None:
            values.append(pd.NA)
            categories.append(None)
            outcomes.append(INVALID_OUTCOME)
            advisories.append(None)
            continue

        values.append(result.value if result.is_numeric else pd.NA)
        categories.append(str(result.category) if result.category else None)
        outcomes.append(result.outcome.value)
        advisories.append(result.tag)

    if unknown and warn_unknown:
        warnings.warn(
            f"Unknown pollutants will be skipped: {unknown}",
            UserWarning,
            stacklevel=3,
        )

    df = data.copy()
    df["aqi_value"] = pd.array(values, dtype="Int64")
    df["aqi_category"] = pd.Series(categories, index=df.index, dtype="object")
    df["aqi_outcome"] = pd.Series(outcomes, index=df.index, dtype="object")
    df["aqi_advisory"] = pd.Series(advisories, index=df.index, dtype="object")
    return df
