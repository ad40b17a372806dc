"""
Time expressions

A time expression is a run of ``(digits, unit letter)`` pairs such as
``2012y5M`` or ``1d3h``. The same expression drives both arithmetic modes:

- offset (``+1d3h``, ``-5M4d``): each value is added to its unit, with the
  usual carry into larger units;
- override (``2012y5M``): each unit is set to the value, leniently, so that an
  out-of-range value carries over instead of failing.

Both modes work on ``datetime`` values and return new ones; the instant given
by the caller is never changed.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterable, Tuple

from dateutil.relativedelta import relativedelta

from .exceptions import DateOutOfRangeError
from .fields import CalendarUnit, lookup_unit, unit_letter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldAssignment:
    """A magnitude attached to a calendar unit, e.g. ``2012y``."""
    unit: CalendarUnit
    magnitude: int

    def __str__(self) -> str:
        return "%d%s" % (self.magnitude, unit_letter(self.unit))


@dataclass(frozen=True)
class OffsetExpression:
    """A signed time expression. The sign applies to every assignment."""
    sign: int
    assignments: Tuple[FieldAssignment, ...]

    def __str__(self) -> str:
        return ("+" if self.sign > 0 else "-") + "".join(str(a) for a in self.assignments)


def parse_expression(expression: str) -> Tuple[FieldAssignment, ...]:
    """Parse a time expression into its assignments, in order of appearance.

    Digits accumulate into a base-10 magnitude which is emitted, and reset,
    each time a unit letter is read. Digits left over at the end of the
    expression have no unit and are dropped: ``"1d5"`` reads as ``"1d"``.

    :raises InvalidFieldError: on a character that is neither a digit nor a
        unit letter.
    """
    assignments = []
    magnitude = 0
    for char in expression:
        if char.isdecimal():
            magnitude = magnitude * 10 + int(char)
        else:
            assignments.append(FieldAssignment(lookup_unit(char, expression), magnitude))
            magnitude = 0
    return tuple(assignments)


# relativedelta keyword used to add to each unit
_RELATIVE_KEYWORDS: Dict[CalendarUnit, str] = {
    CalendarUnit.YEAR: "years",
    CalendarUnit.MONTH: "months",
    CalendarUnit.DAY: "days",
    CalendarUnit.HOUR: "hours",
    CalendarUnit.MINUTE: "minutes",
    CalendarUnit.SECOND: "seconds",
    CalendarUnit.MILLISECOND: "microseconds",
}


def _offset_delta(unit: CalendarUnit, value: int) -> relativedelta:
    if unit is CalendarUnit.MILLISECOND:
        value *= 1000
    return relativedelta(**{_RELATIVE_KEYWORDS[unit]: value})


def _override_delta(instant: datetime, unit: CalendarUnit, value: int) -> relativedelta:
    # Reset the unit to its lowest value, then add the requested one so that
    # out-of-range values carry (month 12 is January of the next year).
    # Year and month changes keep the day of month as a number of days from
    # the 1st, so January 31st with month 1 is March 3rd.
    if unit is CalendarUnit.YEAR:
        return relativedelta(year=value, day=1, days=instant.day - 1)
    if unit is CalendarUnit.MONTH:
        return relativedelta(month=1, months=value, day=1, days=instant.day - 1)
    if unit is CalendarUnit.DAY:
        return relativedelta(day=1, days=value - 1)
    if unit is CalendarUnit.HOUR:
        return relativedelta(hour=0, hours=value)
    if unit is CalendarUnit.MINUTE:
        return relativedelta(minute=0, minutes=value)
    if unit is CalendarUnit.SECOND:
        return relativedelta(second=0, seconds=value)
    return relativedelta(microsecond=0, microseconds=value * 1000)


def shift_instant(instant: datetime, delta: relativedelta) -> datetime:
    """Return ``instant + delta``.

    :raises DateOutOfRangeError: if the result is not a valid datetime.
    """
    try:
        return instant + delta
    except (OverflowError, ValueError) as e:
        raise DateOutOfRangeError(
            "Cannot apply %r to %s: %s" % (delta, instant.isoformat(), e)
        ) from e


def apply_offset(instant: datetime, assignments: Iterable[FieldAssignment], sign: int = 1) -> datetime:
    """Add ``sign * magnitude`` to each unit, in order.

    Each step is applied on the result of the previous one, so ``+1M1d`` from
    January 31st gives March 1st (February 29th/28th, then one more day).
    """
    for assignment in assignments:
        instant = shift_instant(instant, _offset_delta(assignment.unit, sign * assignment.magnitude))
    logger.debug("Offset applied, result %s", instant)
    return instant


def apply_override(instant: datetime, assignments: Iterable[FieldAssignment]) -> datetime:
    """Set each unit to its magnitude, in order.

    Values are passed through without clamping and carry like calendar
    arithmetic does: months count from 0 (``0M`` is January, ``12M`` January
    of the following year), day 0 is the last day of the previous month and
    hours are hours of the day.
    """
    for assignment in assignments:
        if assignment.unit is CalendarUnit.YEAR and assignment.magnitude < 1:
            raise DateOutOfRangeError("Year %d is out of range" % assignment.magnitude)
        instant = shift_instant(instant, _override_delta(instant, assignment.unit, assignment.magnitude))
    logger.debug("Override applied, result %s", instant)
    return instant
