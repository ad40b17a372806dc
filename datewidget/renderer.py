import logging
from datetime import datetime

from .conf import apply_settings
from .expression import apply_offset, apply_override
from .formatting import format_instant
from .options import OptionSet

logger = logging.getLogger(__name__)


def apply_options(reference: datetime, options: OptionSet) -> datetime:
    """Return the instant described by ``options`` relative to ``reference``.

    The override is always applied before the offset, whatever their order in
    the option text: ``2012y +1M`` sets the year, then adds a month.
    """
    instant = reference
    if options.override is not None:
        instant = apply_override(instant, options.override)
    if options.offset is not None:
        instant = apply_offset(instant, options.offset.assignments, options.offset.sign)
    return instant


class DateRenderer:
    """Turns a reference instant and widget options into the displayed text."""

    @apply_settings
    def __init__(self, settings=None):
        self._settings = settings

    def select_format(self, options: OptionSet) -> str:
        if options.has_format:
            return options.explicit_format
        if options.show_time:
            return self._settings.DATETIME_FORMAT
        return self._settings.DATE_FORMAT

    def render(self, reference: datetime, options: OptionSet) -> str:
        if not isinstance(reference, datetime):
            raise TypeError("Reference must be a datetime, not %s" % type(reference).__name__)

        instant = apply_options(reference, options)
        pattern = self.select_format(options)
        logger.debug("Rendering %s (reference %s) with %r", instant, reference, pattern)
        return format_instant(instant, pattern, self._settings.LOCALE)
