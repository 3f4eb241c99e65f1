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
US EPA breakpoint tables for the supported pollutants.

Each table lists its bands in evaluation order. A concentration is truncated
with the table's rule and resolved by the first band whose range contains
it. Interpolating rows match the half-open range up to the next row's lower
breakpoint, so every truncated value between two rows is covered; the last
interpolating row of a table is closed at its upper breakpoint.

Pollutants and averaging periods:
- PM2.5: 24-hour average, µg/m³, truncated to 0.1
- PM10: 24-hour average, µg/m³, truncated to integer
- CO: 8-hour average, ppm, truncated to 0.1
- SO2: 1-hour (AQI 0-200) and 24-hour (AQI 201-500), ppb, truncated to integer
- O3: 8-hour (AQI 0-300) and 1-hour (AQI 101-500), ppb in, ppm in the table
- NO2: 1-hour average, ppb in, ppm in the table

Some bands deliberately overlap: the SO2 1-hour 186-304 row and its
alternate-period band both contain 304, as do the SO2 24-hour alternate-period
band and the 305-604 row. Band order decides these values.

Reference: 40 CFR Part 58, Appendix G (pre-2024 PM2.5 breakpoints)
"""

from types import MappingProxyType

from .base import (
    Advisory,
    AdvisoryBand,
    Breakpoint,
    BreakpointTable,
    Outcome,
    Truncation,
)
from .pollutants import INPUT_UNITS, PollutantKind


def _make_breakpoint(
    low_conc: float,
    high_conc: float,
    low_aqi: int,
    high_aqi: int,
    until: float | None = None,
    start: float | None = None,
) -> Breakpoint:
    """
    Create an interpolating row.

    Args:
        until: Exclusive upper match bound. None closes the row at high_conc.
        start: Inclusive lower match bound, if it differs from low_conc.
    """
    return Breakpoint(
        match_low=low_conc if start is None else start,
        match_high=high_conc if until is None else until,
        closed=until is None,
        low_conc=low_conc,
        high_conc=high_conc,
        low_aqi=low_aqi,
        high_aqi=high_aqi,
    )


def _make_advisory(
    low_conc: float,
    high_conc: float,
    advisory: Advisory,
    until: float | None = None,
) -> AdvisoryBand:
    """Create a band that asks for a different averaging period."""
    return AdvisoryBand(
        match_low=low_conc,
        match_high=high_conc if until is None else until,
        closed=until is None,
        outcome=Outcome.REQUIRES_ALTERNATE_PERIOD,
        advisory=advisory,
    )


def _make_table(
    pollutant: PollutantKind,
    truncation: Truncation,
    bands: list,
    table_unit: str,
    beyond_ceiling: Advisory | None = None,
) -> BreakpointTable:
    if beyond_ceiling is None:
        fallback_outcome = Outcome.OUT_OF_RANGE
        fallback_advisory = Advisory.OUT_OF_RANGE
    else:
        fallback_outcome = Outcome.BEYOND_TABLE_CEILING
        fallback_advisory = beyond_ceiling
    return BreakpointTable(
        pollutant=pollutant,
        truncation=truncation,
        bands=tuple(bands),
        fallback_outcome=fallback_outcome,
        fallback_advisory=fallback_advisory,
        input_unit=INPUT_UNITS[pollutant],
        table_unit=table_unit,
    )


# PM2.5 (µg/m³, 24-hour)
PM25_TABLE = _make_table(
    PollutantKind.PM25,
    Truncation.ONE_DECIMAL,
    [
        _make_breakpoint(0.0, 12.0, 0, 50, until=12.1),
        _make_breakpoint(12.1, 35.4, 51, 100, until=35.5),
        _make_breakpoint(35.5, 55.4, 101, 150, until=55.5),
        _make_breakpoint(55.5, 150.4, 151, 200, until=150.5),
        _make_breakpoint(150.5, 250.4, 201, 300, until=250.5),
        _make_breakpoint(250.5, 350.4, 301, 400, until=350.5),
        _make_breakpoint(350.5, 500.4, 401, 500, until=500.5),
    ],
    table_unit="µg/m³",
    beyond_ceiling=Advisory.PM25,
)

# PM10 (µg/m³, 24-hour)
PM10_TABLE = _make_table(
    PollutantKind.PM10,
    Truncation.INTEGER,
    [
        _make_breakpoint(0, 54, 0, 50, until=55),
        _make_breakpoint(55, 154, 51, 100, until=155),
        _make_breakpoint(155, 254, 101, 150, until=255),
        _make_breakpoint(255, 354, 151, 200, until=355),
        _make_breakpoint(355, 424, 201, 300, until=425),
        _make_breakpoint(425, 504, 301, 400, until=505),
        _make_breakpoint(505, 604, 401, 500, until=605),
    ],
    table_unit="µg/m³",
    beyond_ceiling=Advisory.PM10,
)

# CO (ppm, 8-hour)
CO_TABLE = _make_table(
    PollutantKind.CO,
    Truncation.ONE_DECIMAL,
    [
        _make_breakpoint(0.0, 4.4, 0, 50, until=4.5),
        _make_breakpoint(4.5, 9.4, 51, 100, until=9.5),
        _make_breakpoint(9.5, 12.4, 101, 150, until=12.5),
        _make_breakpoint(12.5, 15.4, 151, 200, until=15.5),
        _make_breakpoint(15.5, 30.4, 201, 300, until=30.5),
        _make_breakpoint(30.5, 40.4, 301, 400, until=40.5),
        _make_breakpoint(40.5, 50.4, 401, 500, until=50.5),
    ],
    table_unit="ppm",
)

# SO2 (ppb, 1-hour) - AQI 201 and above use 24-hour concentrations
SO2_1HR_TABLE = _make_table(
    PollutantKind.SO2_1HR,
    Truncation.INTEGER,
    [
        _make_breakpoint(0, 35, 0, 50, until=36),
        _make_breakpoint(36, 75, 51, 100, until=76),
        _make_breakpoint(76, 185, 101, 150, until=186),
        _make_breakpoint(186, 304, 151, 200),
        _make_advisory(304, 604, Advisory.SO2_1HR),
    ],
    table_unit="ppb",
)

# SO2 (ppb, 24-hour) - AQI below 201 uses 1-hour concentrations
SO2_24HR_TABLE = _make_table(
    PollutantKind.SO2_24HR,
    Truncation.INTEGER,
    [
        _make_advisory(0, 304, Advisory.SO2_24HR),
        _make_breakpoint(305, 604, 201, 300, until=605, start=304),
        _make_breakpoint(605, 804, 301, 400, until=805),
        _make_breakpoint(805, 1004, 401, 500),
    ],
    table_unit="ppb",
)

# O3 (ppm, 8-hour) - AQI 301 and above use 1-hour concentrations
O3_8HR_TABLE = _make_table(
    PollutantKind.O3_8HR,
    Truncation.PPB_TO_PPM,
    [
        _make_breakpoint(0.000, 0.054, 0, 50, until=0.055),
        _make_breakpoint(0.055, 0.070, 51, 100, until=0.071),
        _make_breakpoint(0.071, 0.085, 101, 150, until=0.086),
        _make_breakpoint(0.086, 0.105, 151, 200, until=0.106),
        _make_breakpoint(0.106, 0.200, 201, 300, until=0.201),
        _make_advisory(0.201, 0.604, Advisory.O3_8HR, until=0.605),
    ],
    table_unit="ppm",
)

# O3 (ppm, 1-hour) - AQI 100 and below use 8-hour concentrations
O3_1HR_TABLE = _make_table(
    PollutantKind.O3_1HR,
    Truncation.PPB_TO_PPM,
    [
        _make_advisory(0.000, 0.124, Advisory.O3_1HR),
        _make_breakpoint(0.125, 0.164, 101, 150, until=0.165),
        _make_breakpoint(0.165, 0.204, 151, 200, until=0.205),
        _make_breakpoint(0.205, 0.404, 201, 300, until=0.405),
        _make_breakpoint(0.405, 0.504, 301, 400, until=0.505),
        _make_breakpoint(0.505, 0.604, 401, 500),
    ],
    table_unit="ppm",
)

# NO2 (ppm, 1-hour)
NO2_TABLE = _make_table(
    PollutantKind.NO2,
    Truncation.PPB_TO_PPM,
    [
        _make_breakpoint(0.000, 0.053, 0, 50, until=0.054),
        _make_breakpoint(0.054, 0.100, 51, 100, until=0.101),
        _make_breakpoint(0.101, 0.360, 101, 150, until=0.361),
        _make_breakpoint(0.361, 0.649, 151, 200, until=0.650),
        _make_breakpoint(0.650, 1.249, 201, 300, until=1.250),
        _make_breakpoint(1.250, 1.649, 301, 400, until=1.650),
        _make_breakpoint(1.650, 2.049, 401, 500),
    ],
    table_unit="ppm",
)

TABLES = MappingProxyType(
    {
        PollutantKind.PM25: PM25_TABLE,
        PollutantKind.PM10: PM10_TABLE,
        PollutantKind.CO: CO_TABLE,
        PollutantKind.SO2_1HR: SO2_1HR_TABLE,
        PollutantKind.SO2_24HR: SO2_24HR_TABLE,
        PollutantKind.O3_8HR: O3_8HR_TABLE,
        PollutantKind.O3_1HR: O3_1HR_TABLE,
        PollutantKind.NO2: NO2_TABLE,
    }
)
