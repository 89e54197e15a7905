import argparse
import locale
import logging
import os
import sys
from datetime import date

from cal import Locale, cal, parse_date, parse_day_range, parse_weekday
from table import render_calendar

logger = logging.getLogger(__name__)


def _argument_type(parser, name):
    def convert(text):
        try:
            return parser(text)
        except ValueError as e:
            raise argparse.ArgumentTypeError(f'invalid {name}: {text!r} ({e})')
    return convert


def build_parser():
    parser = argparse.ArgumentParser(
        prog='textcal',
        description='Print a text calendar for one or more months.',
    )
    parser.add_argument('start', nargs='?', type=_argument_type(parse_date, 'date'),
                        help='first month to show, YYYY-MM-DD (default: today)')
    parser.add_argument('end', nargs='?', type=_argument_type(parse_date, 'date'),
                        help='last month to show, YYYY-MM-DD (default: start)')
    parser.add_argument('-f', '--first-day', type=_argument_type(parse_weekday, 'weekday'),
                        help='weekday each row starts on (default: locale, or $CAL_FIRST_DAY)')
    parser.add_argument('-d', '--highlight-day', action='append', default=[],
                        type=_argument_type(parse_day_range, 'day'), metavar='N[-M]',
                        help='ascending day numbers to bracket, consumed once across all months')
    parser.add_argument('-D', '--highlight-date', action='append',
                        type=_argument_type(parse_date, 'date'), metavar='DATE',
                        help='exact dates to mark (default: today)')
    parser.add_argument('-v', '--verbose', action='store_true', help='debug logging')
    return parser


def resolve_locale(parser, environ):
    try:
        locale.setlocale(locale.LC_TIME, '')
    except locale.Error as e:
        logger.warning('falling back to the C locale: %s', e)

    first_day = environ.get('CAL_FIRST_DAY')
    if first_day:
        try:
            return Locale.from_system(parse_weekday(first_day))
        except ValueError as e:
            parser.error(f'CAL_FIRST_DAY: {e}')
    return Locale.from_system()


def main(argv=None, today=None, environ=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    today = today or date.today()
    start = args.start or today
    end = args.end or start
    highlight_days = [day for days in args.highlight_day for day in days]
    highlight_dates = args.highlight_date if args.highlight_date is not None else [today]

    cal_locale = resolve_locale(parser, os.environ if environ is None else environ)
    logger.debug('locale: %s', cal_locale)

    blocks = cal(start, end, args.first_day, highlight_days, highlight_dates, cal_locale)
    if blocks:
        print(render_calendar(blocks))
    else:
        logger.info('%s is before %s, nothing to show', end, start)
    return 0


if __name__ == '__main__':
    sys.exit(main())
