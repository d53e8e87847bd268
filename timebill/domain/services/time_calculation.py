# timebill/domain/services/time_calculation.py

"""
Calculation of worked hours and billed value for a time entry.

Times are same-day wall-clock strings in ``HH:MM`` format. A span whose end is
before its start clamps to zero hours; it never wraps into the next day.
"""

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional, Union

from timebill.domain.exceptions import InvalidInputException

CLOCK_TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")
TWO_PLACES = Decimal("0.01")
MINUTES_PER_HOUR = Decimal(60)

RateType = Union[Decimal, str, int, float]


@dataclass(frozen=True)
class TimeCalculation:
    """Derived totals of a time entry."""
    hours: Decimal
    value: Decimal


def parse_clock_time(value: str) -> int:
    """
    Convert an ``HH:MM`` string into minutes since midnight.

    Raises:
        InvalidInputException: If the value is not a valid ``HH:MM`` time
    """
    match = CLOCK_TIME_PATTERN.match(value or "")
    if not match:
        raise InvalidInputException(
            detail="Horário inválido",
            fields={"time": f"'{value}' não está no formato HH:MM"},
        )
    return int(match.group(1)) * 60 + int(match.group(2))


def to_rate(hourly_rate: RateType) -> Decimal:
    """Normalize an hourly rate into a non-negative Decimal."""
    try:
        rate = Decimal(str(hourly_rate))
    except (InvalidOperation, ValueError):
        raise InvalidInputException(
            detail="Valor por hora inválido",
            fields={"hourlyRate": f"'{hourly_rate}' não é um número"},
        )
    if not rate.is_finite() or rate < 0:
        raise InvalidInputException(
            detail="Valor por hora inválido",
            fields={"hourlyRate": "Valor deve ser maior ou igual a zero"},
        )
    return rate


def worked_minutes(
        start_time: str,
        end_time: str,
        break_start_time: Optional[str] = None,
        break_end_time: Optional[str] = None,
) -> int:
    """
    Minutes worked between start and end, minus the break when both break
    fields are present. The break interval is not checked against the work
    interval; the result is clamped at zero.
    """
    minutes = parse_clock_time(end_time) - parse_clock_time(start_time)

    if break_start_time and break_end_time:
        minutes -= parse_clock_time(break_end_time) - parse_clock_time(break_start_time)

    return max(0, minutes)


def calculate_hours_and_value(
        start_time: str,
        end_time: str,
        hourly_rate: RateType,
        break_start_time: Optional[str] = None,
        break_end_time: Optional[str] = None,
) -> TimeCalculation:
    """
    Compute total hours and total value for a work session.

    Both results are rounded half-up to two decimal places; the value is
    derived from the unrounded hours.

    Example:
        >>> calculate_hours_and_value("09:00", "17:00", "100.00", "12:00", "13:00")
        TimeCalculation(hours=Decimal('7.00'), value=Decimal('700.00'))
    """
    rate = to_rate(hourly_rate)
    minutes = Decimal(worked_minutes(start_time, end_time, break_start_time, break_end_time))

    hours = (minutes / MINUTES_PER_HOUR).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    value = (minutes * rate / MINUTES_PER_HOUR).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)

    return TimeCalculation(hours=hours, value=value)
