"""
Widget options

The text between the parentheses of a widget (``!now(2012y +1d -t)``) is a
list of whitespace separated options:

- ``-t``: show the time (hours and minutes) in addition to the date;
- ``-f<format>`` or ``-f"<format with spaces>"``: explicit output format;
- ``+<expression>`` / ``-<expression>``: time to add or subtract;
- ``<expression>``: fields to set, e.g. ``2012y5M``.

Options may appear in any order. When an offset or an override is given more
than once, the last one is used.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .expression import FieldAssignment, OffsetExpression, parse_expression
from .formatting import validate_pattern
from .tokenizer import QUOTE, tokenize

logger = logging.getLogger(__name__)

OPTION_WITH_TIME = "-t"
OPTION_EXPLICIT_FORMAT = "-f"


@dataclass(frozen=True)
class OptionSet:
    """Options parsed from one widget."""
    show_time: bool = False
    explicit_format: Optional[str] = None
    offset: Optional[OffsetExpression] = None
    override: Optional[Tuple[FieldAssignment, ...]] = None

    @property
    def has_format(self) -> bool:
        return self.explicit_format is not None


# Used when a widget carries no option at all.
DEFAULT_OPTIONS = OptionSet()


def _unquote_format(value: str) -> str:
    if len(value) >= 2 and value.startswith(QUOTE) and value.endswith(QUOTE):
        return value[1:-1]
    return value


def build_options(tokens: Iterable[str]) -> OptionSet:
    """Classify option tokens and build the resulting :class:`OptionSet`.

    :raises InvalidFieldError: if an offset or override expression holds an
        unknown unit letter.
    :raises InvalidFormatError: if the explicit format is not a valid pattern.
    """
    tokens = list(tokens)
    show_time = False
    explicit_format = None
    offset = None
    override = None

    for token in tokens:
        if token == OPTION_WITH_TIME:
            show_time = True
        elif token.startswith(OPTION_EXPLICIT_FORMAT):
            explicit_format = _unquote_format(token[len(OPTION_EXPLICIT_FORMAT):])
            validate_pattern(explicit_format)
        elif token.startswith(("+", "-")):
            sign = 1 if token.startswith("+") else -1
            offset = OffsetExpression(sign, parse_expression(token[1:]))
        else:
            override = parse_expression(token)

    options = OptionSet(
        show_time=show_time,
        explicit_format=explicit_format,
        offset=offset,
        override=override,
    )
    logger.debug("Options built from %r: %r", tokens, options)
    return options


def parse_options(option_text: Optional[str]) -> OptionSet:
    """Parse the raw option text of a widget.

    ``None`` means the widget had no option block and gives
    :data:`DEFAULT_OPTIONS`.
    """
    if option_text is None:
        return DEFAULT_OPTIONS
    return build_options(tokenize(option_text))
