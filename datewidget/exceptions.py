class DateWidgetError(ValueError):
    """Base class for every error raised while parsing or rendering a date widget."""


class InvalidFieldError(DateWidgetError):
    """A time expression contains a character that is neither a digit nor a unit letter."""

    def __init__(self, field, expression=None):
        self.field = field
        self.expression = expression
        message = "%r is not a valid time field" % field
        if expression is not None:
            message += " in expression %r" % expression
        super().__init__(message)


class InvalidFormatError(DateWidgetError):
    """An explicit format is not a valid date pattern."""

    def __init__(self, pattern, reason):
        self.pattern = pattern
        self.reason = reason
        super().__init__("Invalid date format %r: %s" % (pattern, reason))


class DateOutOfRangeError(DateWidgetError):
    """Date arithmetic produced a value outside the supported datetime range."""


class UnknownWidgetError(DateWidgetError):
    """No date widget is registered under the requested name."""
