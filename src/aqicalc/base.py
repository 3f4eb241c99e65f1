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
Base types and utilities for AQI calculations.

This module provides the breakpoint interpolation engine shared by every
pollutant table: the band types, truncation rules, the EPA linear formula
and the category classifier.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Union

from .exceptions import InvalidInputError
from .pollutants import PollutantKind

# =============================================================================
# Types
# =============================================================================


class CategoryLabel(str, Enum):
    """US EPA health category for an AQI value."""

    GOOD = "Good"
    MODERATE = "Moderate"
    UNHEALTHY_FOR_SENSITIVE = "Unhealthy for Sensitive Groups"
    UNHEALTHY = "Unhealthy"
    VERY_UNHEALTHY = "Very Unhealthy"
    HAZARDOUS = "Hazardous"
    OUT_OF_RANGE = "Out of Range"

    def __str__(self) -> str:
        return self.value


class Outcome(str, Enum):
    """Kind of result produced by a calculation."""

    AQI = "aqi"
    OUT_OF_RANGE = "out_of_range"
    REQUIRES_ALTERNATE_PERIOD = "requires_alternate_period"
    BEYOND_TABLE_CEILING = "beyond_table_ceiling"


class Advisory(str, Enum):
    """Tags identifying the advisory a consumer should show for a sentinel."""

    PM25 = "PM25message"
    PM10 = "PM10message"
    SO2_1HR = "SO21hrmessage"
    SO2_24HR = "SO224hrmessage"
    O3_8HR = "O3message"
    O3_1HR = "O31hrmessage"
    OUT_OF_RANGE = "Out of Range"

    def __str__(self) -> str:
        return self.value


class Truncation(Enum):
    """How a raw concentration is truncated before table lookup."""

    ONE_DECIMAL = "one_decimal"  # floor(10 * c) / 10
    INTEGER = "integer"  # floor(c)
    PPB_TO_PPM = "ppb_to_ppm"  # floor(c) / 1000, three decimals in ppm


@dataclass(frozen=True)
class _Band:
    match_low: float  # Lowest concentration matched (inclusive)
    match_high: float  # Highest concentration matched
    closed: bool  # Whether match_high itself is matched

    def matches(self, concentration: float) -> bool:
        if concentration < self.match_low:
            return False
        if self.closed:
            return concentration <= self.match_high
        return concentration < self.match_high


@dataclass(frozen=True)
class Breakpoint(_Band):
    """A single interpolating row of a breakpoint table."""

    low_conc: float
    high_conc: float
    low_aqi: int
    high_aqi: int

    def __post_init__(self):
        if not self.low_conc < self.high_conc:
            raise ValueError(
                f"Breakpoint concentration bounds must increase: "
                f"{self.low_conc} >= {self.high_conc}"
            )
        if not self.low_aqi < self.high_aqi:
            raise ValueError(
                f"Breakpoint AQI bounds must increase: "
                f"{self.low_aqi} >= {self.high_aqi}"
            )


@dataclass(frozen=True)
class AdvisoryBand(_Band):
    """A table row that yields an advisory instead of an AQI value."""

    outcome: Outcome
    advisory: Advisory


Band = Union[Breakpoint, AdvisoryBand]


@dataclass(frozen=True)
class BreakpointTable:
    """Ordered breakpoint bands for one pollutant, plus its lookup rules."""

    pollutant: PollutantKind
    truncation: Truncation
    bands: tuple[Band, ...]
    fallback_outcome: Outcome  # Returned when no band matches
    fallback_advisory: Advisory
    input_unit: str  # Unit the caller supplies
    table_unit: str  # Unit the bands are expressed in

    @property
    def breakpoints(self) -> tuple[Breakpoint, ...]:
        """The interpolating rows only, in table order."""
        return tuple(b for b in self.bands if isinstance(b, Breakpoint))


@dataclass(frozen=True)
class AQIResult:
    """Result of an AQI calculation for a single pollutant concentration."""

    pollutant: PollutantKind
    outcome: Outcome
    value: int | None  # AQI value (None for sentinel outcomes)
    category: CategoryLabel | None  # Category (None for sentinel outcomes)
    advisory: Advisory | None  # Advisory tag (None for numeric outcomes)
    concentration: float  # Input concentration
    truncated: float  # Concentration after truncation, in table units
    unit: str  # Unit of the input concentration

    @property
    def is_numeric(self) -> bool:
        return self.outcome is Outcome.AQI

    @property
    def tag(self) -> str | None:
        """Advisory tag string for sentinel outcomes."""
        return self.advisory.value if self.advisory is not None else None


# =============================================================================
# Truncation
# =============================================================================


def truncate(value: float, rule: Truncation) -> float:
    """
    Truncate a concentration according to a table's truncation rule.

    Note: This floors, it does not round. Values are never negative here.
    """
    if rule is Truncation.ONE_DECIMAL:
        scaled = 10 * value
        if math.isinf(scaled):
            # Floats this large are already whole numbers
            return value
        return math.floor(scaled) / 10
    if rule is Truncation.INTEGER:
        return float(math.floor(value))
    if rule is Truncation.PPB_TO_PPM:
        return math.floor(value) / 1000
    raise ValueError(f"Unknown truncation rule: {rule}")


# =============================================================================
# Breakpoint Interpolation
# =============================================================================


def linear(
    aqi_high: float,
    aqi_low: float,
    conc_high: float,
    conc_low: float,
    concentration: float,
) -> int:
    """
    Interpolate an AQI value between two breakpoints.

    This is the standard EPA calculation:

    AQI = (conc - conc_low) / (conc_high - conc_low) * (aqi_high - aqi_low) + aqi_low

    rounded half up to the nearest integer.

    Raises:
        ValueError: If conc_high equals conc_low
    """
    if conc_high == conc_low:
        raise ValueError(
            f"Degenerate breakpoint: conc_high equals conc_low ({conc_low})"
        )
    aqi = (concentration - conc_low) / (conc_high - conc_low) * (
        aqi_high - aqi_low
    ) + aqi_low
    return math.floor(aqi + 0.5)


def find_band(concentration: float, bands: Sequence[Band]) -> Band | None:
    """
    Find the first band matching a (truncated) concentration.

    Bands are evaluated in order and the first match wins, so overlapping
    boundaries resolve to the earlier band.

    Returns:
        The matching band, or None if the concentration is out of every band
    """
    for band in bands:
        if band.matches(concentration):
            return band
    return None


def interpolate(concentration: float, breakpoint: Breakpoint) -> int:
    """Calculate the AQI for a concentration within a breakpoint row."""
    return linear(
        breakpoint.high_aqi,
        breakpoint.low_aqi,
        breakpoint.high_conc,
        breakpoint.low_conc,
        concentration,
    )


# =============================================================================
# Category Classification
# =============================================================================

# Upper bound (inclusive) of each category, in ascending order
CATEGORY_UPPER_BOUNDS = (
    (50, CategoryLabel.GOOD),
    (100, CategoryLabel.MODERATE),
    (150, CategoryLabel.UNHEALTHY_FOR_SENSITIVE),
    (200, CategoryLabel.UNHEALTHY),
    (300, CategoryLabel.VERY_UNHEALTHY),
    (500, CategoryLabel.HAZARDOUS),
)


def to_number(value, what: str = "value") -> float:
    """
    Parse a value as a finite real number.

    Raises:
        InvalidInputError: If the value is not numeric, or is NaN or infinite
    """
    if isinstance(value, bool):
        raise InvalidInputError(value, f"{what} must be a number, not a boolean")
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise InvalidInputError(value, f"{what} is empty")
        try:
            number = float(text)
        except ValueError:
            raise InvalidInputError(value, f"{what} is not a number") from None
    else:
        try:
            number = float(value)
        except (TypeError, ValueError):
            raise InvalidInputError(value, f"{what} is not a number") from None
        except OverflowError:
            raise InvalidInputError(value, f"{what} is too large") from None

    if not math.isfinite(number):
        raise InvalidInputError(value, f"{what} must be finite")
    return number


def classify(aqi) -> CategoryLabel:
    """
    Classify an AQI value into its health category.

    Args:
        aqi: AQI value as a number or numeric string

    Returns:
        CategoryLabel; values above 500 are Out of Range

    Raises:
        InvalidInputError: If aqi is not a finite number
    """
    value = to_number(aqi, "AQI")
    for upper, label in CATEGORY_UPPER_BOUNDS:
        if value <= upper:
            return label
    return CategoryLabel.OUT_OF_RANGE
