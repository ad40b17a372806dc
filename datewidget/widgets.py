"""
Date widgets

Wiki pages refer to dates with the ``!now``, ``!tomorrow`` and ``!yesterday``
widgets. Each one may be followed by options in parentheses::

    !now                 08/09/2011
    !now(-t)             08/09/2011 09:54
    !now(+1d)            09/09/2011
    !now(2012y +1d -t)   09/09/2012 09:54
    !now(-fyyyy)         2011
    !tomorrow            09/09/2011

Widgets only differ by their reference date. All the widgets rendered
through one :class:`RenderSession` share a single reading of the clock, so
two ``!now(-t)`` on the same page always show the same time.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional, Tuple

import regex as re
from dateutil.relativedelta import relativedelta
from tzlocal import get_localzone

from .conf import apply_settings
from .exceptions import DateWidgetError, UnknownWidgetError
from .expression import shift_instant
from .options import parse_options
from .renderer import DateRenderer

logger = logging.getLogger(__name__)

# Matches the option block of a widget; the options stop at the first ')'.
OPTIONS_SUFFIX = r"(?:[(](.*?)[)])?"

ERROR_TEMPLATE = "[{text}: {error}]"


@dataclass(frozen=True)
class DateWidget:
    """A widget name and the shift, in days, of its reference date from now."""
    name: str
    days: int = 0

    def reference_date(self, now: datetime) -> datetime:
        if not self.days:
            return now
        return shift_instant(now, relativedelta(days=self.days))


WIDGETS: Tuple[DateWidget, ...] = (
    DateWidget("now"),
    DateWidget("tomorrow", days=1),
    DateWidget("yesterday", days=-1),
)

_WIDGETS_BY_NAME: Dict[str, DateWidget] = {widget.name: widget for widget in WIDGETS}

WIDGET_PATTERN = re.compile(
    r"!(%s)\b%s" % ("|".join(re.escape(w.name) for w in WIDGETS), OPTIONS_SUFFIX)
)


def get_widget(name: str) -> DateWidget:
    try:
        return _WIDGETS_BY_NAME[name]
    except KeyError:
        raise UnknownWidgetError(
            "Unknown date widget %r, expected one of %s" % (name, ", ".join(_WIDGETS_BY_NAME))
        ) from None


def current_time() -> datetime:
    """Current local wall time, without timezone information."""
    return datetime.now(get_localzone()).replace(tzinfo=None)


class RenderSession:
    """Renders date widgets against a clock read once per session.

    The reference instant is taken from the `RELATIVE_BASE` setting if set,
    otherwise from the local clock the first time it is needed, and kept for
    the lifetime of the session. Create one session per rendered page.
    """

    @apply_settings
    def __init__(self, settings=None):
        self._settings = settings
        self._renderer = DateRenderer(settings=settings)
        self._now = None

    @property
    def now(self) -> datetime:
        if self._now is None:
            self._now = self._settings.RELATIVE_BASE or current_time()
            logger.debug("Render session reference set to %s", self._now)
        return self._now

    def reference_date(self, widget_name: str) -> datetime:
        return get_widget(widget_name).reference_date(self.now)

    def render(self, widget_name: str, option_text: Optional[str] = None) -> str:
        """Render one widget from its name and raw option text."""
        reference = self.reference_date(widget_name)
        return self._renderer.render(reference, parse_options(option_text))

    def render_text(self, text: str, strict: bool = False) -> str:
        """Replace every date widget found in ``text`` by its rendered value.

        A widget that fails to render is replaced by an error marker and the
        other widgets are still rendered, unless ``strict`` is set, in which
        case the error is raised.
        """
        def replace(match):
            try:
                return self.render(match.group(1), match.group(2))
            except DateWidgetError as e:
                if strict:
                    raise
                logger.warning("Cannot render date widget %r: %s", match.group(0), e)
                return ERROR_TEMPLATE.format(text=match.group(0), error=e)

        return WIDGET_PATTERN.sub(replace, text)


@apply_settings
def render_widgets(text: str, settings=None, strict: bool = False) -> str:
    """Render all the date widgets of ``text`` in a new session."""
    return RenderSession(settings=settings).render_text(text, strict=strict)
