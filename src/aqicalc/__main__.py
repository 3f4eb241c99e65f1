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
Command line AQI calculator.

Usage:
    python -m aqicalc PM2.5 35.9
    python -m aqicalc --list
"""

import argparse
import logging
import sys

from .calculator import compute_aqi, get_table, list_pollutants
from .exceptions import AQICalcError

EXIT_INVALID = 2


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="aqicalc",
        description="Convert a pollutant concentration to a US EPA AQI value",
    )
    parser.add_argument(
        "pollutant", nargs="?", help="Pollutant, e.g. PM2.5, PM10, CO, SO2-1hr"
    )
    parser.add_argument(
        "concentration",
        nargs="?",
        help="Concentration in the pollutant's unit (see --list)",
    )
    parser.add_argument(
        "--list",
        "-l",
        action="store_true",
        help="List supported pollutants with input and table units",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list:
        for kind in list_pollutants():
            table = get_table(kind)
            print(f"{kind.value}\t{table.input_unit}\t{table.table_unit}")
        return 0

    if args.pollutant is None or args.concentration is None:
        parser.print_usage(sys.stderr)
        print("error: pollutant and concentration are required", file=sys.stderr)
        return EXIT_INVALID

    try:
        result = compute_aqi(args.pollutant, args.concentration)
    except AQICalcError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID

    if result.is_numeric:
        print(f"AQI {result.value} ({result.category})")
    else:
        print(result.tag)
    return 0


if __name__ == "__main__":
    sys.exit(main())
