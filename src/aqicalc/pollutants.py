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
Pollutant identifiers, name standardisation and input units.

The calculator supports a fixed set of eight pollutant/averaging-period
combinations. SO2 and O3 each have two tables because the US EPA defines
different breakpoints for different averaging periods.
"""

from enum import Enum

from .exceptions import UnknownPollutantError


class PollutantKind(str, Enum):
    """A pollutant and averaging period with its own breakpoint table."""

    PM25 = "PM2.5"
    PM10 = "PM10"
    CO = "CO"
    SO2_1HR = "SO2-1hr"
    SO2_24HR = "SO2-24hr"
    O3_8HR = "O3-8hr"
    O3_1HR = "O3-1hr"
    NO2 = "NO2"

    def __str__(self) -> str:
        return self.value


# =============================================================================
# Units
# =============================================================================

# Units the concentration is expected in when passed to the calculator.
# O3 and NO2 are entered in ppb and scaled to ppm before table lookup.
INPUT_UNITS = {
    PollutantKind.PM25: "µg/m³",
    PollutantKind.PM10: "µg/m³",
    PollutantKind.CO: "ppm",
    PollutantKind.SO2_1HR: "ppb",
    PollutantKind.SO2_24HR: "ppb",
    PollutantKind.O3_8HR: "ppb",
    PollutantKind.O3_1HR: "ppb",
    PollutantKind.NO2: "ppb",
}


# =============================================================================
# Pollutant Standardisation
# =============================================================================

# Map common pollutant names to their PollutantKind. Keys are matched after
# lower-casing and collapsing whitespace, underscores and hyphens to a single
# space (see _normalise_name).
POLLUTANT_ALIASES = {
    # PM2.5 variants
    "pm2.5": PollutantKind.PM25,
    "pm25": PollutantKind.PM25,
    "pm 2.5": PollutantKind.PM25,
    "fine particulate": PollutantKind.PM25,
    "fine particles": PollutantKind.PM25,
    # PM10 variants
    "pm10": PollutantKind.PM10,
    "pm 10": PollutantKind.PM10,
    "coarse particulate": PollutantKind.PM10,
    # Carbon monoxide variants
    "co": PollutantKind.CO,
    "carbon monoxide": PollutantKind.CO,
    # Sulphur dioxide variants (1-hour is the default averaging period)
    "so2": PollutantKind.SO2_1HR,
    "so2 1hr": PollutantKind.SO2_1HR,
    "so2 1h": PollutantKind.SO2_1HR,
    "so2 1 hour": PollutantKind.SO2_1HR,
    "so2 24hr": PollutantKind.SO2_24HR,
    "so2 24h": PollutantKind.SO2_24HR,
    "so2 24 hour": PollutantKind.SO2_24HR,
    "sulfur dioxide": PollutantKind.SO2_1HR,
    "sulphur dioxide": PollutantKind.SO2_1HR,
    "sulfur dioxide 24hr": PollutantKind.SO2_24HR,
    "sulphur dioxide 24hr": PollutantKind.SO2_24HR,
    # Ozone variants (8-hour is the default averaging period)
    "o3": PollutantKind.O3_8HR,
    "ozone": PollutantKind.O3_8HR,
    "o3 8hr": PollutantKind.O3_8HR,
    "o3 8h": PollutantKind.O3_8HR,
    "o3 8 hour": PollutantKind.O3_8HR,
    "ozone 8hr": PollutantKind.O3_8HR,
    "ozone 8 hour": PollutantKind.O3_8HR,
    "o3 1hr": PollutantKind.O3_1HR,
    "o3 1h": PollutantKind.O3_1HR,
    "o3 1 hour": PollutantKind.O3_1HR,
    "ozone 1hr": PollutantKind.O3_1HR,
    "ozone 1 hour": PollutantKind.O3_1HR,
    # Nitrogen dioxide variants
    "no2": PollutantKind.NO2,
    "nitrogen dioxide": PollutantKind.NO2,
}


def _normalise_name(name: str) -> str:
    cleaned = name.strip().lower().replace("_", " ").replace("-", " ")
    return " ".join(cleaned.split())


def standardise_pollutant(pollutant: "str | PollutantKind") -> PollutantKind | None:
    """
    Standardise a pollutant name to its PollutantKind.

    Args:
        pollutant: Pollutant name in any common format, or a PollutantKind

    Returns:
        The matching PollutantKind, or None if not recognised
    """
    if isinstance(pollutant, PollutantKind):
        return pollutant
    if not isinstance(pollutant, str):
        return None

    # Check if already standard
    try:
        return PollutantKind(pollutant)
    except ValueError:
        pass

    # Check aliases
    return POLLUTANT_ALIASES.get(_normalise_name(pollutant))


def get_unit(pollutant: "str | PollutantKind") -> str:
    """
    Get the unit a pollutant concentration should be supplied in.

    Args:
        pollutant: Pollutant name or PollutantKind

    Returns:
        Unit string (e.g., "ppm", "ppb", "µg/m³")

    Raises:
        UnknownPollutantError: If the pollutant is not recognised
    """
    kind = standardise_pollutant(pollutant)
    if kind is None:
        raise UnknownPollutantError(pollutant)
    return INPUT_UNITS[kind]
