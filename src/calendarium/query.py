"""Show liturgical calendar information for a date, a month or a year."""

import argparse
import calendar as stdlib_calendar
import datetime
import logging
import sys

from .calendar import Calendar
from .data import load_sanctorale
from .dates import Date
from .errors import CalendarError
from .sanctorale import Sanctorale
from .titles import TITLES, WEEKDAYS, translator


logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description=__doc__,
        epilog='DATE is YYYY-MM-DD, YYYY-MM or YYYY; today if omitted.')
    parser.add_argument('--calendar', '-c', metavar='FILE',
                        help='sanctorale data file (YAML)')
    parser.add_argument('--locale', '-l', choices=sorted(TITLES),
                        default='en')
    parser.add_argument('--verbose', '-v', action='store_true')
    parser.add_argument('date', nargs='?')
    return parser.parse_args(argv)


def date_span(date_str, today=None):
    """Returns the first and last dates covered by a date argument."""
    if date_str is None:
        today = Date.from_date(today or datetime.date.today())
        return today, today

    try:
        parts = [int(x) for x in date_str.split('-')]
    except ValueError:
        raise ValueError('Invalid date: %s' % (date_str,))

    if len(parts) == 3:
        date = Date(*parts)
        return date, date
    if len(parts) == 2:
        year, month = parts
        last = stdlib_calendar.monthrange(year, month)[1]
        return Date(year, month, 1), Date(year, month, last)
    if len(parts) == 1:
        return Date(parts[0], 1, 1), Date(parts[0], 12, 31)
    raise ValueError('Invalid date: %s' % (date_str,))


def render_day(day, translate, locale='en'):
    lines = ['%s %s  %s, week %d' % (
        day.date.isoformat(),
        WEEKDAYS[locale][day.date.day_of_week],
        day.season.value,
        day.season_week,
    )]
    for celebration in day.celebrations:
        colour = celebration.colour or day.season.colour
        lines.append('  %s [%s, %s]' % (
            celebration.resolve_title(translate),
            colour.value,
            celebration.rank.desc,
        ))
    return '\n'.join(lines)


def days_between(start, end, sanctorale):
    calendar = Calendar.for_day(start, sanctorale)
    current = start
    while current <= end:
        if not calendar.temporale.contains(current):
            calendar = calendar.succ()
        yield calendar.day(current)
        current += 1


def main(argv=None):
    options = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if options.verbose else
                        logging.WARNING)

    try:
        if options.calendar:
            sanctorale = load_sanctorale(options.calendar)
        else:
            sanctorale = Sanctorale()
        sanctorale.freeze()

        start, end = date_span(options.date)
        logger.debug("Querying %s to %s", start, end)
        translate = translator(options.locale)
        for day in days_between(start, end, sanctorale):
            print(render_day(day, translate, options.locale))
    except (CalendarError, OSError, ValueError) as e:
        print('calendarium-query: %s' % (e,), file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
