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
US Air Quality Index calculation from pollutant concentrations.

Quick Start:
    >>> import aqicalc
    >>> result = aqicalc.compute_aqi("PM10", 55)
    >>> result.value
    51
    >>> aqicalc.classify(result.value)
    <CategoryLabel.MODERATE: 'Moderate'>
    >>> aqicalc.compute_aqi("SO2-1hr", 400).tag
    'SO21hrmessage'
"""

from .base import (
    Advisory,
    AdvisoryBand,
    AQIResult,
    Breakpoint,
    BreakpointTable,
    CategoryLabel,
    Outcome,
    Truncation,
    classify,
    linear,
)
from .batch import aqi_table
from .calculator import (
    calculate,
    compute_aqi,
    get_table,
    list_pollutants,
    overall_aqi,
    parse_concentration,
)
from .exceptions import AQICalcError, InvalidInputError, UnknownPollutantError
from .pollutants import PollutantKind, get_unit, standardise_pollutant

__version__ = "0.1.0"

__all__ = [
    # Main API functions
    "compute_aqi",
    "calculate",
    "classify",
    "linear",
    "parse_concentration",
    "overall_aqi",
    "aqi_table",
    "get_table",
    "get_unit",
    "list_pollutants",
    "standardise_pollutant",
    # Types
    "Advisory",
    "AdvisoryBand",
    "AQIResult",
    "Breakpoint",
    "BreakpointTable",
    "CategoryLabel",
    "Outcome",
    "PollutantKind",
    "Truncation",
    # Exceptions
    "AQICalcError",
    "InvalidInputError",
    "UnknownPollutantError",
]
