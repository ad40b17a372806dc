"""
Date patterns

Explicit formats use the CLDR/LDML pattern alphabet as implemented by Babel
(``yyyy``, ``MM``, ``dd``, ``HH``, ``hh``, ``mm``, ``ss``, ``SS``, ...). Text
between single quotes is copied literally and ``''`` stands for a quote.

Babel copies unknown letters through unchanged; here an unquoted letter that
is not a pattern field is rejected so that typos fail when the options are
read rather than showing up in the rendered page.
"""

import logging
from datetime import datetime

import regex as re
from babel import Locale, UnknownLocaleError
from babel.dates import PATTERN_CHARS, DateTimePattern, parse_pattern

from .exceptions import InvalidFormatError

logger = logging.getLogger(__name__)

DEFAULT_DATE_FORMAT = "dd/MM/yyyy"
DEFAULT_DATETIME_FORMAT = "dd/MM/yyyy HH:mm"
DEFAULT_LOCALE = "en_US"

RE_ESCAPED_QUOTE = re.compile(r"''")
RE_QUOTED_TEXT = re.compile(r"'[^']*'")
RE_LETTER = re.compile(r"[A-Za-z]")


def validate_pattern(pattern: str) -> DateTimePattern:
    """Check ``pattern`` and return it compiled.

    :raises InvalidFormatError: on an unterminated quote, an unquoted letter
        that is not a pattern field, or a field of unsupported width
        (e.g. ``MMMMMM``).
    """
    unquoted = RE_QUOTED_TEXT.sub("", RE_ESCAPED_QUOTE.sub("", pattern))
    if "'" in unquoted:
        raise InvalidFormatError(pattern, "unterminated quote")

    unknown = sorted({c for c in RE_LETTER.findall(unquoted) if c not in PATTERN_CHARS})
    if unknown:
        raise InvalidFormatError(
            pattern, "illegal pattern character(s) %s" % ", ".join(repr(c) for c in unknown)
        )

    try:
        return parse_pattern(pattern)
    except ValueError as e:
        raise InvalidFormatError(pattern, str(e)) from e


def validate_locale(locale: str) -> Locale:
    try:
        return Locale.parse(locale)
    except (UnknownLocaleError, ValueError, TypeError) as e:
        raise ValueError("Unknown locale %r: %s" % (locale, e)) from e


def format_instant(instant: datetime, pattern: str, locale: str = DEFAULT_LOCALE) -> str:
    """Render ``instant`` with an LDML ``pattern``."""
    compiled = validate_pattern(pattern)
    result = compiled.apply(instant, locale)
    logger.debug("Formatted %s with %r: %r", instant, pattern, result)
    return result
