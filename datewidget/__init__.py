__version__ = "1.0.0"

from .conf import apply_settings, Settings, SettingValidationError
from .exceptions import (
    DateWidgetError,
    InvalidFieldError,
    InvalidFormatError,
    DateOutOfRangeError,
    UnknownWidgetError,
)
from .fields import CalendarUnit, FIELDS, lookup_unit
from .tokenizer import tokenize
from .expression import (
    FieldAssignment,
    OffsetExpression,
    parse_expression,
    apply_offset,
    apply_override,
)
from .options import OptionSet, DEFAULT_OPTIONS, build_options, parse_options
from .renderer import DateRenderer, apply_options
from .widgets import DateWidget, WIDGETS, RenderSession, render_widgets


@apply_settings
def render(reference, option_text=None, settings=None):
    """Render a date from a reference instant and widget options.

    :param reference:
        The instant the options are relative to. It is not modified, so
        rendering several times against the same reference gives the same
        result.
    :type reference: datetime.datetime

    :param option_text:
        The options of the widget, e.g. ``"2012y +1d -t"``. ``None`` (no
        option block) renders the date with the default format.
    :type option_text: str

    :param settings:
        Configure customized behavior using settings defined in
        :mod:`datewidget.conf.Settings`.
    :type settings: dict

    :return: the formatted date.
    :rtype: str

    :raises:
        ``InvalidFieldError``: unknown unit letter in an expression,
        ``InvalidFormatError``: invalid explicit format,
        ``SettingValidationError``: a provided setting is not valid.

    Example usage::

        >>> import datewidget
        >>> from datetime import datetime
        >>> reference = datetime(2011, 9, 8, 9, 54)
        >>> datewidget.render(reference)
        '08/09/2011'
        >>> datewidget.render(reference, "+7d4h -t")
        '15/09/2011 13:54'
        >>> datewidget.render(reference, "2012y12M")
        '08/01/2013'
    """
    return DateRenderer(settings=settings).render(reference, parse_options(option_text))
