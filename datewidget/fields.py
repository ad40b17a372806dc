"""
Time field letters

Maps the single letters accepted by time expressions to calendar units:

    y: year, M: month, d: day, h: hour, m: minute, s: second, S: millisecond

Letters are case sensitive (``m`` is a minute, ``M`` a month).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from .exceptions import InvalidFieldError


class CalendarUnit(Enum):
    """Calendar units a time expression can address."""
    YEAR = "YEAR"
    MONTH = "MONTH"
    DAY = "DAY"
    HOUR = "HOUR"
    MINUTE = "MINUTE"
    SECOND = "SECOND"
    MILLISECOND = "MILLISECOND"


@dataclass(frozen=True)
class TimeField:
    """One row of the field table: the letter used in options and its unit."""
    letter: str
    unit: CalendarUnit


FIELDS: Tuple[TimeField, ...] = (
    TimeField("y", CalendarUnit.YEAR),
    TimeField("M", CalendarUnit.MONTH),
    TimeField("d", CalendarUnit.DAY),
    TimeField("h", CalendarUnit.HOUR),
    TimeField("m", CalendarUnit.MINUTE),
    TimeField("s", CalendarUnit.SECOND),
    TimeField("S", CalendarUnit.MILLISECOND),
)

_FIELDS_BY_LETTER: Dict[str, TimeField] = {field.letter: field for field in FIELDS}


def lookup_unit(letter: str, expression: str = None) -> CalendarUnit:
    """Return the calendar unit for ``letter``.

    :raises InvalidFieldError: if the letter is not part of the field table.
    """
    try:
        return _FIELDS_BY_LETTER[letter].unit
    except KeyError:
        raise InvalidFieldError(letter, expression) from None


def unit_letter(unit: CalendarUnit) -> str:
    for field in FIELDS:
        if field.unit is unit:
            return field.letter
    raise KeyError(unit)
