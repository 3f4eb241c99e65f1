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
Pollutant index calculation.

Converts a single pollutant concentration into a US EPA AQI value and
category, or into one of the advisory outcomes the tables define:

- Out of Range: the concentration is above every band of the table
- Requires alternate period: the value must be computed from a different
  averaging period (SO2 1-hour/24-hour, O3 8-hour/1-hour)
- Beyond table ceiling: PM values above AQI 500, where the Hazardous
  guidance applies

Example:
    >>> from aqicalc import compute_aqi
    >>> result = compute_aqi("PM2.5", 35.9)
    >>> result.value, str(result.category)
    (102, 'Unhealthy for Sensitive Groups')
"""

import logging
from typing import Iterable

from .base import (
    AQIResult,
    Breakpoint,
    BreakpointTable,
    Outcome,
    classify,
    find_band,
    interpolate,
    to_number,
    truncate,
)
from .exceptions import InvalidInputError, UnknownPollutantError
from .pollutants import PollutantKind, standardise_pollutant
from .tables import TABLES

logger = logging.getLogger(__name__)


# =============================================================================
# Input Handling
# =============================================================================


def parse_concentration(value) -> float:
    """
    Parse a concentration reading into a non-negative real number.

    Text input may contain thousands separators ("1,004") and surrounding
    whitespace.

    Args:
        value: Concentration as a number or text

    Returns:
        Concentration as a float

    Raises:
        InvalidInputError: If the value is empty, not numeric, not finite
            or negative
    """
    if isinstance(value, str):
        number = to_number(value.replace(",", ""), "concentration")
    else:
        number = to_number(value, "concentration")

    if number < 0:
        raise InvalidInputError(value, "concentration must not be negative")
    return number


def get_table(pollutant: "str | PollutantKind") -> BreakpointTable:
    """
    Get the breakpoint table for a pollutant.

    Raises:
        UnknownPollutantError: If the pollutant is not recognised
    """
    kind = standardise_pollutant(pollutant)
    if kind is None:
        raise UnknownPollutantError(pollutant)
    return TABLES[kind]


def list_pollutants() -> list[PollutantKind]:
    """List all pollutants with a breakpoint table."""
    return list(TABLES.keys())


# =============================================================================
# Calculation Functions
# =============================================================================


def compute_aqi(pollutant: "str | PollutantKind", concentration) -> AQIResult:
    """
    Calculate the US EPA AQI for a single pollutant concentration.

    Args:
        pollutant: PollutantKind or pollutant name (e.g. "PM2.5", "so2 24hr")
        concentration: Concentration in the pollutant's input unit
                      (µg/m³ for PM, ppm for CO, ppb for SO2, O3 and NO2),
                      as a number or text

    Returns:
        AQIResult with the AQI value (0-500) and category, or a sentinel
        outcome with its advisory tag

    Raises:
        UnknownPollutantError: If pollutant is not supported
        InvalidInputError: If the concentration is not a non-negative number
    """
    table = get_table(pollutant)
    raw = parse_concentration(concentration)
    truncated = truncate(raw, table.truncation)

    band = find_band(truncated, table.bands)

    if isinstance(band, Breakpoint):
        value = interpolate(truncated, band)
        return AQIResult(
            pollutant=table.pollutant,
            outcome=Outcome.AQI,
            value=value,
            category=classify(value),
            advisory=None,
            concentration=raw,
            truncated=truncated,
            unit=table.input_unit,
        )

    if band is None:
        outcome = table.fallback_outcome
        advisory = table.fallback_advisory
    else:
        outcome = band.outcome
        advisory = band.advisory

    logger.debug(
        f"{table.pollutant} concentration {raw} {table.input_unit} "
        f"gave {outcome.value} ({advisory.value})"
    )
    return AQIResult(
        pollutant=table.pollutant,
        outcome=outcome,
        value=None,
        category=None,
        advisory=advisory,
        concentration=raw,
        truncated=truncated,
        unit=table.input_unit,
    )


def calculate(concentration, pollutant: "str | PollutantKind") -> AQIResult:
    """Calculate the AQI, taking the concentration first."""
    return compute_aqi(pollutant, concentration)


def overall_aqi(results: Iterable[AQIResult]) -> AQIResult | None:
    """
    Get the result driving the overall AQI.

    The overall AQI is the maximum across pollutants. Sentinel outcomes carry
    no value and are ignored.

    Args:
        results: Results for one location and period

    Returns:
        The numeric result with the highest AQI (the first one on ties),
        or None if no result is numeric
    """
    dominant = None
    for result in results:
        if not result.is_numeric:
            continue
        if dominant is None or result.value > dominant.value:
            dominant = result
    return dominant
