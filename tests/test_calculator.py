# AQICalc: convert pollutant concentrations to US Air Quality Index values
# Copyright (C) 2025 Ruaraidh Dobson, South London Scientific

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.


"""
Tests for per-pollutant AQI calculation.

Tests cover:
- Boundary values of every breakpoint table
- Advisory and out-of-range outcomes, including overlapping SO2 boundaries
- Input parsing and validation
- Table-wide properties (range, breakpoint round trips, monotonicity)
- Overall AQI across pollutants
"""

import logging

import pytest

from aqicalc import (
    Advisory,
    AQIResult,
    CategoryLabel,
    InvalidInputError,
    Outcome,
    PollutantKind,
    UnknownPollutantError,
    calculate,
    compute_aqi,
    get_table,
    list_pollutants,
    overall_aqi,
    parse_concentration,
)
from aqicalc.base import Breakpoint, Truncation, interpolate


def _value(pollutant, concentration):
    result = compute_aqi(pollutant, concentration)
    assert result.outcome is Outcome.AQI, result
    return result.value


def _tag(pollutant, concentration):
    result = compute_aqi(pollutant, concentration)
    assert result.value is None
    return result.tag


# =============================================================================
# Particulate Matter
# =============================================================================


class TestPM25:
    """Tests for PM2.5 (µg/m³, truncated to 0.1)."""

    def test_good_boundary(self):
        """Test 12.0 is the top of Good."""
        result = compute_aqi(PollutantKind.PM25, 12.0)
        assert result.value == 50
        assert result.category is CategoryLabel.GOOD

    def test_moderate_boundary(self):
        """Test 12.1 is the bottom of Moderate."""
        result = compute_aqi(PollutantKind.PM25, 12.1)
        assert result.value == 51
        assert result.category is CategoryLabel.MODERATE

    def test_truncation(self):
        """Test that 12.09 truncates to 12.0 rather than rounding up."""
        assert _value("PM2.5", 12.09) == 50

    def test_interpolation(self):
        """Test an interior value."""
        # (35.9 - 35.5) / 19.9 * 49 + 101 = 101.98
        result = compute_aqi("PM2.5", 35.9)
        assert result.value == 102
        assert result.category is CategoryLabel.UNHEALTHY_FOR_SENSITIVE

    def test_zero(self):
        """Test zero concentration."""
        assert _value("PM2.5", 0) == 0

    def test_beyond_ceiling(self):
        """Test values above the table ask for Hazardous guidance."""
        result = compute_aqi("PM2.5", 500.5)
        assert result.outcome is Outcome.BEYOND_TABLE_CEILING
        assert result.advisory is Advisory.PM25
        assert result.tag == "PM25message"
        assert result.category is None

    def test_far_beyond_ceiling(self):
        """Test very large values still give the ceiling advisory."""
        assert _tag("PM2.5", 10000) == "PM25message"

    def test_largest_floats(self):
        """Test floats too large to scale by 10 still reach the ceiling advisory."""
        result = compute_aqi("PM2.5", 1e308)
        assert result.outcome is Outcome.BEYOND_TABLE_CEILING
        assert result.tag == "PM25message"
        assert result.truncated == 1e308

    def test_integer_too_large_for_float(self):
        """Test integers beyond float range are invalid input."""
        with pytest.raises(InvalidInputError, match="too large"):
            compute_aqi("PM2.5", 10**400)


class TestPM10:
    """Tests for PM10 (µg/m³, truncated to integer)."""

    def test_good_boundary(self):
        """Test 54 is the top of Good."""
        assert _value("PM10", 54) == 50

    def test_moderate_boundary(self):
        """Test 55 is the bottom of Moderate."""
        assert _value("PM10", 55) == 51

    def test_truncation(self):
        """Test that 54.9 truncates to 54."""
        assert _value("PM10", 54.9) == 50

    def test_top_of_table(self):
        """Test the last breakpoint."""
        assert _value("PM10", 604) == 500

    def test_beyond_ceiling(self):
        """Test values above 604 ask for Hazardous guidance."""
        result = compute_aqi("PM10", 605)
        assert result.outcome is Outcome.BEYOND_TABLE_CEILING
        assert result.tag == "PM10message"


# =============================================================================
# Carbon Monoxide
# =============================================================================


class TestCO:
    """Tests for CO (ppm, truncated to 0.1)."""

    def test_good_boundary(self):
        """Test 4.4 is the top of Good."""
        assert _value("CO", 4.4) == 50

    def test_moderate_boundary(self):
        """Test 4.5 is the bottom of Moderate."""
        assert _value("CO", 4.5) == 51

    def test_hazardous(self):
        """Test a value in the top segment."""
        assert _value("CO", 40.5) == 401

    def test_out_of_range(self):
        """Test values above the table are Out of Range."""
        result = compute_aqi("CO", 50.5)
        assert result.outcome is Outcome.OUT_OF_RANGE
        assert result.tag == "Out of Range"

    def test_largest_floats(self):
        """Test huge text readings are Out of Range rather than an error."""
        assert _tag("CO", "1e308") == "Out of Range"
        assert _tag("CO", 1.7976931348623157e308) == "Out of Range"


# =============================================================================
# Sulphur Dioxide
# =============================================================================


class TestSO21Hour:
    """Tests for 1-hour SO2 (ppb, truncated to integer)."""

    def test_segment_boundaries(self):
        """Test the lower segment boundaries."""
        assert _value("SO2-1hr", 35) == 50
        assert _value("SO2-1hr", 36) == 51
        assert _value("SO2-1hr", 185) == 150

    def test_unhealthy_row_start(self):
        """Test 186 starts the closed 186-304 row."""
        result = compute_aqi("SO2-1hr", 186)
        assert result.value == 151
        assert result.category is CategoryLabel.UNHEALTHY

    def test_overlapping_304_resolves_to_row(self):
        """Test 304 belongs to the 186-304 row, not the 24-hour advisory."""
        assert _value("SO2-1hr", 304) == 200

    def test_requires_24_hour_above_304(self):
        """Test values above 304 ask for 24-hour concentrations."""
        result = compute_aqi("SO2-1hr", 305)
        assert result.outcome is Outcome.REQUIRES_ALTERNATE_PERIOD
        assert result.tag == "SO21hrmessage"
        assert _tag("SO2-1hr", 604) == "SO21hrmessage"

    def test_out_of_range(self):
        """Test values above 604 are Out of Range."""
        assert _tag("SO2-1hr", 605) == "Out of Range"


class TestSO224Hour:
    """Tests for 24-hour SO2 (ppb, truncated to integer)."""

    def test_requires_1_hour_up_to_304(self):
        """Test low values ask for 1-hour concentrations."""
        assert _tag("SO2-24hr", 0) == "SO224hrmessage"
        assert _tag("SO2-24hr", 304) == "SO224hrmessage"
        assert _tag("SO2-24hr", 304.9) == "SO224hrmessage"

    def test_very_unhealthy_row(self):
        """Test the 305-604 row."""
        assert _value("SO2-24hr", 305) == 201
        assert _value("SO2-24hr", 604) == 300

    def test_hazardous_rows(self):
        """Test the upper rows."""
        assert _value("SO2-24hr", 605) == 301
        assert _value("SO2-24hr", 805) == 401
        assert _value("SO2-24hr", 1004) == 500

    def test_thousands_separator(self):
        """Test text with a thousands separator."""
        assert _value("SO2-24hr", "1,004") == 500

    def test_out_of_range(self):
        """Test values above 1004 are Out of Range."""
        assert _tag("SO2-24hr", 1005) == "Out of Range"


# =============================================================================
# Ozone
# =============================================================================


class TestO38Hour:
    """Tests for 8-hour O3 (ppb input, ppm table)."""

    def test_good_boundary(self):
        """Test 54 ppb (0.054 ppm) is the top of Good."""
        result = compute_aqi("O3-8hr", 54)
        assert result.value == 50
        assert result.truncated == 0.054
        assert result.unit == "ppb"

    def test_moderate_boundary(self):
        """Test 55 ppb is the bottom of Moderate."""
        assert _value("O3-8hr", 55) == 51

    def test_truncation(self):
        """Test that fractional ppb are floored."""
        assert _value("O3-8hr", 54.9) == 50

    def test_top_of_table(self):
        """Test 200 ppb is the top of the 8-hour table."""
        assert _value("O3-8hr", 200) == 300

    def test_requires_1_hour(self):
        """Test higher values ask for 1-hour concentrations."""
        assert _tag("O3-8hr", 201) == "O3message"
        assert _tag("O3-8hr", 604) == "O3message"

    def test_out_of_range(self):
        """Test values above 604 ppb are Out of Range."""
        assert _tag("O3-8hr", 605) == "Out of Range"


class TestO31Hour:
    """Tests for 1-hour O3 (ppb input, ppm table)."""

    def test_requires_8_hour_up_to_124(self):
        """Test low values ask for 8-hour concentrations."""
        result = compute_aqi("O3-1hr", 124)
        assert result.outcome is Outcome.REQUIRES_ALTERNATE_PERIOD
        assert result.tag == "O31hrmessage"
        assert _tag("O3-1hr", 0) == "O31hrmessage"

    def test_first_row(self):
        """Test 125 ppb starts the table at AQI 101."""
        assert _value("O3-1hr", 125) == 101

    def test_top_of_table(self):
        """Test 604 ppb is AQI 500."""
        assert _value("O3-1hr", 604) == 500

    def test_out_of_range(self):
        """Test values above 604 ppb are Out of Range."""
        assert _tag("O3-1hr", 605) == "Out of Range"


# =============================================================================
# Nitrogen Dioxide
# =============================================================================


class TestNO2:
    """Tests for NO2 (ppb input, ppm table)."""

    def test_good_boundary(self):
        """Test 53 ppb is the top of Good and 54 starts Moderate."""
        assert _value("NO2", 53) == 50
        assert _value("NO2", 54) == 51

    def test_top_of_table(self):
        """Test 2049 ppb (2.049 ppm) is AQI 500."""
        result = compute_aqi("NO2", 2049)
        assert result.value == 500
        assert result.truncated == 2.049
        assert result.category is CategoryLabel.HAZARDOUS

    def test_out_of_range(self):
        """Test values above 2049 ppb are Out of Range."""
        assert _tag("NO2", 2050) == "Out of Range"


# =============================================================================
# Input Handling
# =============================================================================


class TestInputValidation:
    """Tests for concentration parsing and pollutant lookup."""

    def test_parse_plain_number(self):
        """Test numbers pass through."""
        assert parse_concentration(12) == 12.0

    def test_parse_text(self):
        """Test text with whitespace and separators."""
        assert parse_concentration(" 12.5 ") == 12.5
        assert parse_concentration("1,234.5") == 1234.5

    @pytest.mark.parametrize("bad", ["abc", "", "  ", None, float("nan"), True])
    def test_non_numeric_rejected(self, bad):
        """Test unparseable concentrations raise InvalidInputError."""
        with pytest.raises(InvalidInputError):
            compute_aqi("PM2.5", bad)

    def test_negative_rejected(self):
        """Test negative concentrations are invalid, not Out of Range."""
        with pytest.raises(InvalidInputError, match="negative"):
            compute_aqi("PM2.5", -0.1)
        with pytest.raises(InvalidInputError, match="negative"):
            parse_concentration("-5")

    def test_unknown_pollutant(self):
        """Test unsupported pollutants raise UnknownPollutantError."""
        with pytest.raises(UnknownPollutantError, match="lead"):
            compute_aqi("lead", 5)

    def test_errors_are_value_errors(self):
        """Test both input errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            compute_aqi("lead", 5)
        with pytest.raises(ValueError):
            compute_aqi("PM2.5", "abc")

    def test_pollutant_aliases(self):
        """Test common pollutant spellings are accepted."""
        assert compute_aqi("pm25", 12.0).pollutant is PollutantKind.PM25
        assert compute_aqi("ozone", 54).pollutant is PollutantKind.O3_8HR
        assert compute_aqi("so2_24hr", 305).pollutant is PollutantKind.SO2_24HR

    def test_calculate_argument_order(self):
        """Test calculate() takes the concentration first."""
        assert calculate(55, "PM10") == compute_aqi("PM10", 55)


# =============================================================================
# Table Properties
# =============================================================================


def _ppb(ppm: float) -> int:
    return round(ppm * 1000)


def _table_input(table, concentration):
    """Convert a table concentration back to the unit the caller supplies."""
    if table.truncation is Truncation.PPB_TO_PPM:
        return _ppb(concentration)
    return concentration


def _domain(table):
    """Every distinct input the table resolves, in increasing order."""
    if table.truncation is Truncation.ONE_DECIMAL:
        top = int(table.bands[-1].match_high * 10) + 10
        return [f"{i / 10:.1f}" for i in range(top)]
    if table.truncation is Truncation.PPB_TO_PPM:
        top = _ppb(table.bands[-1].match_high) + 10
    else:
        top = int(table.bands[-1].match_high) + 10
    return list(range(top))


class TestTableProperties:
    """Tests that hold for every breakpoint table."""

    def test_list_pollutants(self):
        """Test all eight tables are available."""
        assert set(list_pollutants()) == set(PollutantKind)
        assert len(list_pollutants()) == 8

    def test_get_table(self):
        """Test tables are found by name."""
        assert get_table("PM2.5").pollutant is PollutantKind.PM25

    def test_table_units(self):
        """Test scaled tables are expressed in ppm while input stays in ppb."""
        for name in ("O3-8hr", "O3-1hr", "NO2"):
            table = get_table(name)
            assert table.input_unit == "ppb"
            assert table.table_unit == "ppm"
        assert get_table("SO2-1hr").table_unit == "ppb"
        assert get_table("PM10").table_unit == "µg/m³"
        assert get_table("CO").table_unit == "ppm"

    def test_rows_increase(self, table):
        """Test rows are ordered with increasing bounds."""
        rows = table.breakpoints
        for lower, upper in zip(rows, rows[1:]):
            assert lower.high_conc < upper.low_conc
            assert lower.high_aqi < upper.low_aqi

    def test_breakpoints_round_trip(self, table):
        """Test each row maps its own bounds to its own AQI bounds."""
        for row in table.breakpoints:
            assert interpolate(row.low_conc, row) == row.low_aqi
            assert interpolate(row.high_conc, row) == row.high_aqi

    def test_lower_breakpoints_via_calculator(self, table):
        """Test each row's lower breakpoint gives its lower AQI end to end."""
        for row in table.breakpoints:
            value = _table_input(table, row.low_conc)
            assert _value(table.pollutant, value) == row.low_aqi

    def test_closed_rows_via_calculator(self, table):
        """Test closed rows reach their upper AQI end to end."""
        for row in table.breakpoints:
            if not row.closed:
                continue
            value = _table_input(table, row.high_conc)
            assert _value(table.pollutant, value) == row.high_aqi

    def test_values_in_range_and_monotonic(self, table):
        """Test numeric AQI values are integers in 0-500 and never decrease."""
        previous = -1
        for concentration in _domain(table):
            result = compute_aqi(table.pollutant, concentration)
            if not result.is_numeric:
                continue
            assert isinstance(result.value, int)
            assert 0 <= result.value <= 500
            assert result.value >= previous
            previous = result.value

    def test_every_value_resolves(self, table):
        """Test every input yields a result with a consistent shape."""
        for concentration in _domain(table):
            result = compute_aqi(table.pollutant, concentration)
            if result.is_numeric:
                assert result.advisory is None
                assert result.category is not None
            else:
                assert result.value is None
                assert result.advisory is not None

    def test_idempotent(self, table):
        """Test repeated calls give equal results."""
        concentration = _table_input(table, table.breakpoints[0].high_conc)
        first = compute_aqi(table.pollutant, concentration)
        second = compute_aqi(table.pollutant, concentration)
        assert first == second

    def test_tables_are_read_only(self):
        """Test the table registry cannot be modified."""
        from aqicalc.tables import TABLES

        with pytest.raises(TypeError):
            TABLES[PollutantKind.PM25] = None

    def test_results_are_immutable(self):
        """Test results cannot be modified."""
        result = compute_aqi("PM10", 55)
        with pytest.raises(AttributeError):
            result.value = 0


# =============================================================================
# Overall AQI
# =============================================================================


class TestOverallAQI:
    """Tests for the overall (dominant pollutant) AQI."""

    def test_maximum_wins(self):
        """Test the highest AQI is the overall AQI."""
        results = [
            compute_aqi("CO", 4.5),
            compute_aqi("PM2.5", 35.9),
            compute_aqi("NO2", 53),
        ]
        dominant = overall_aqi(results)
        assert dominant.pollutant is PollutantKind.PM25
        assert dominant.value == 102

    def test_sentinels_ignored(self):
        """Test advisory outcomes do not count towards the overall AQI."""
        results = [compute_aqi("SO2-1hr", 400), compute_aqi("PM10", 55)]
        assert overall_aqi(results).pollutant is PollutantKind.PM10

    def test_no_numeric_results(self):
        """Test None is returned when nothing is numeric."""
        assert overall_aqi([]) is None
        assert overall_aqi([compute_aqi("O3-1hr", 50)]) is None

    def test_accepts_generator(self):
        """Test any iterable of results is accepted."""
        dominant = overall_aqi(compute_aqi("PM10", c) for c in (10, 200, 60))
        assert isinstance(dominant, AQIResult)
        assert dominant.concentration == 200


# =============================================================================
# Logging
# =============================================================================


class TestLogging:
    """Tests for calculator logging."""

    def test_sentinel_logged_at_debug(self, caplog):
        """Test advisory outcomes are logged with their tag."""
        caplog.set_level(logging.DEBUG, logger="aqicalc.calculator")
        compute_aqi("SO2-1hr", 400)
        assert "SO21hrmessage" in caplog.text

    def test_numeric_not_logged(self, caplog):
        """Test ordinary results are not logged."""
        caplog.set_level(logging.DEBUG, logger="aqicalc.calculator")
        compute_aqi("PM10", 55)
        assert caplog.text == ""
