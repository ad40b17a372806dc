from datetime import datetime
from functools import wraps

from .formatting import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_DATETIME_FORMAT,
    DEFAULT_LOCALE,
    validate_locale,
    validate_pattern,
)
from .exceptions import InvalidFormatError

DEFAULT_SETTINGS = {
    "DATE_FORMAT": DEFAULT_DATE_FORMAT,
    "DATETIME_FORMAT": DEFAULT_DATETIME_FORMAT,
    "LOCALE": DEFAULT_LOCALE,
    "RELATIVE_BASE": None,
}


class Settings:
    """Control and configure default rendering behavior of datewidget.

    Currently, supported settings are:

    * `DATE_FORMAT`: pattern used when neither ``-t`` nor ``-f`` is given
    * `DATETIME_FORMAT`: pattern used with ``-t``
    * `LOCALE`: Babel locale used to format month and day names
    * `RELATIVE_BASE`: fixed reference instant for render sessions, instead
      of the current time
    """

    _default = True
    _mod_settings = dict()

    def __init__(self, settings=None):
        self._updateall(DEFAULT_SETTINGS.items())
        if settings:
            self._updateall(settings.items())

    def _updateall(self, iterable):
        for key, value in iterable:
            setattr(self, key, value)

    def replace(self, mod_settings=None, **kwds):
        for x in DEFAULT_SETTINGS.keys():
            kwds.setdefault(x, getattr(self, x))

        kwds["_default"] = False
        if mod_settings:
            kwds["_mod_settings"] = mod_settings

        return self.__class__(settings=kwds)

    def __repr__(self):
        return "{}({})".format(
            self.__class__.__name__,
            ", ".join("{}={!r}".format(k, getattr(self, k)) for k in DEFAULT_SETTINGS),
        )


settings = Settings()


def apply_settings(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        mod_settings = kwargs.get("settings")

        kwargs["settings"] = mod_settings or settings

        if isinstance(kwargs["settings"], dict):
            kwargs["settings"] = settings.replace(
                mod_settings=mod_settings, **kwargs["settings"]
            )
            check_settings(kwargs["settings"])

        if not isinstance(kwargs["settings"], Settings):
            raise TypeError(
                "settings can only be either dict or instance of Settings class"
            )

        return f(*args, **kwargs)

    return wrapper


class SettingValidationError(ValueError):
    pass


def _check_pattern(setting_name, setting_value):
    try:
        validate_pattern(setting_value)
    except InvalidFormatError as e:
        raise SettingValidationError(
            '"{}" is not a valid date pattern: {}'.format(setting_name, e.reason)
        ) from e


def _check_locale(setting_name, setting_value):
    try:
        validate_locale(setting_value)
    except ValueError as e:
        raise SettingValidationError('"{}": {}'.format(setting_name, e)) from e


def check_settings(settings):
    """
    Check if provided settings are valid, if not it raises `SettingValidationError`.
    Only checks for the modified settings.
    """
    settings_values = {
        "DATE_FORMAT": {
            "type": str,
            "extra_check": _check_pattern,
        },
        "DATETIME_FORMAT": {
            "type": str,
            "extra_check": _check_pattern,
        },
        "LOCALE": {
            "type": str,
            "extra_check": _check_locale,
        },
        "RELATIVE_BASE": {},
    }

    modified_settings = settings._mod_settings  # check only modified settings

    # check settings keys:
    for key in modified_settings:
        if key not in settings_values:
            raise SettingValidationError('"{}" is not a valid setting'.format(key))

    for setting_name, setting_value in modified_settings.items():
        setting_type = type(setting_value)
        setting_props = settings_values[setting_name]

        # check type:
        if not (
            "type" not in setting_props or isinstance(setting_value, setting_props["type"])
        ):
            raise SettingValidationError(
                '"{}" must be "{}", not "{}".'.format(
                    setting_name, setting_props["type"].__name__, setting_type.__name__
                )
            )

        # specific checks
        if setting_name == "RELATIVE_BASE":
            if setting_value is not None and not isinstance(setting_value, datetime):
                raise SettingValidationError(
                    '"RELATIVE_BASE" must be "datetime" or None, not "{}".'.format(
                        setting_type.__name__
                    )
                )

        extra_check = setting_props.get("extra_check")
        if extra_check:
            extra_check(setting_name, setting_value)
