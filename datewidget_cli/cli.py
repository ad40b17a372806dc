import argparse
import logging
import sys

from dateutil.parser import isoparse

from datewidget import RenderSession, DateWidgetError, SettingValidationError
from datewidget.widgets import WIDGETS


def _build_settings(args):
    settings = {}
    if args.base:
        settings["RELATIVE_BASE"] = args.base
    if args.locale:
        settings["LOCALE"] = args.locale
    return settings


def _reference(value):
    try:
        return isoparse(value).replace(tzinfo=None)
    except ValueError:
        raise argparse.ArgumentTypeError("invalid ISO 8601 date: %r" % value)


def build_parser():
    datewidget_argparse = argparse.ArgumentParser(
        prog="datewidget",
        description="Render !now, !tomorrow and !yesterday date widgets.",
        epilog='Options starting with "-" must follow "--", e.g.: datewidget -- "+1d -t"',
    )
    datewidget_argparse.add_argument(
        "options",
        nargs="?",
        help='Widget options, e.g. "2012y +1d -t" or \'-f"yyyy/MM/dd HH:mm"\'',
    )
    datewidget_argparse.add_argument(
        "--widget",
        choices=[widget.name for widget in WIDGETS],
        default="now",
        help="Widget whose reference date is used (default: now)",
    )
    datewidget_argparse.add_argument(
        "--expand",
        metavar="FILE",
        nargs="?",
        const="-",
        help="Render every widget found in FILE (or standard input) instead",
    )
    datewidget_argparse.add_argument(
        "--base",
        type=_reference,
        help="Reference date in ISO 8601 format, instead of the current time",
    )
    datewidget_argparse.add_argument(
        "--locale",
        help="Locale used to format names of months and days (default: en_US)",
    )
    datewidget_argparse.add_argument(
        "--strict",
        action="store_true",
        help="Fail on the first widget that cannot be rendered",
    )
    datewidget_argparse.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug information",
    )
    return datewidget_argparse


def _read(path):
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def main(argv=None):
    datewidget_argparse = build_parser()
    args = datewidget_argparse.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.expand and args.options:
        datewidget_argparse.error("datewidget: options cannot be combined with --expand")

    try:
        session = RenderSession(settings=_build_settings(args))
        if args.expand:
            output = session.render_text(_read(args.expand), strict=args.strict)
        else:
            output = session.render(args.widget, args.options)
    except (DateWidgetError, SettingValidationError) as e:
        logging.error("datewidget: %s", e)
        return 1

    sys.stdout.write(output)
    if not output.endswith("\n"):
        sys.stdout.write("\n")
    return 0


def entrance():
    sys.exit(main())
