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
Function decorators for cross-cutting concerns.

Calculations themselves are pure; these decorators add logging around the
entry points that process many readings at once.
"""

import logging
from functools import wraps
from typing import Callable, TypeVar

# Type variable for generic function signatures
F = TypeVar("F", bound=Callable)


def _tally(outcomes) -> str:
    counts = outcomes.value_counts()
    return ", ".join(f"{name}={counts[name]}" for name in sorted(counts.index))


def log_readings(
    logger_name: str | None = None,
    outcome_col: str = "aqi_outcome",
) -> Callable[[F], F]:
    """
    Decorator to log batch AQI calculations.

    The decorated function takes a DataFrame of readings as its first
    argument and returns a DataFrame with an outcome column. The number of
    readings is logged at INFO on entry, and the count of each outcome on
    exit. Errors are logged at ERROR level before being re-raised.

    Args:
        logger_name: Name of logger to use. If None, uses the module name.
        outcome_col: Column of the returned DataFrame holding outcomes

    Returns:
        Callable: Decorated function with logging

    Example:
        >>> @log_readings("aqicalc.batch")
        ... def score(readings):
        ...     return aqi_table(readings)
    """

    def decorator(func: F) -> F:
        func_logger = logging.getLogger(logger_name or func.__module__)

        @wraps(func)
        def wrapper(data, *args, **kwargs):
            n_readings = len(data)
            func_logger.info(
                f"Calculating AQI for {n_readings} readings",
                extra={"function": func.__name__, "readings": n_readings},
            )

            try:
                result = func(data, *args, **kwargs)
            except Exception as e:
                func_logger.error(
                    f"AQI calculation failed for {n_readings} readings: {e}",
                    extra={
                        "function": func.__name__,
                        "error_type": type(e).__name__,
                    },
                    exc_info=True,
                )
                raise

            func_logger.info(
                f"Calculated AQI for {n_readings} readings: "
                f"{_tally(result[outcome_col])}",
                extra={"function": func.__name__, "readings": n_readings},
            )
            return result

        return wrapper

    return decorator
