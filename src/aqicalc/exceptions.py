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
Exceptions raised by AQICalc.

Out-of-range and advisory outcomes are not errors; they are returned as
AQIResult values. Only malformed input is raised.
"""


class AQICalcError(Exception):
    """Base class for all AQICalc errors."""


class InvalidInputError(AQICalcError, ValueError):
    """A concentration or AQI value could not be used for calculation."""

    def __init__(self, value, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid input {value!r}: {reason}")


class UnknownPollutantError(AQICalcError, ValueError):
    """The pollutant name does not match any supported breakpoint table."""

    def __init__(self, pollutant):
        self.pollutant = pollutant
        super().__init__(f"Pollutant '{pollutant}' not supported")
