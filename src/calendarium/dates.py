import calendar as stdlib_calendar
import datetime

from .errors import InvalidArguments


WEEK = 7

SUNDAY = 0
MONDAY = 1
THURSDAY = 4
FRIDAY = 5
SATURDAY = 6


class Date(datetime.date):
    # pylint: disable=unused-argument
    def __init__(self, *args, **kwargs):
        super().__init__()
        self._day_of_week = self.isoweekday() % 7

    @classmethod
    def from_date(cls, date):
        if isinstance(date, cls):
            return date
        return cls(date.year, date.month, date.day)

    def __add__(self, days):
        base_result = super().__add__(datetime.timedelta(days=days))
        return Date(base_result.year, base_result.month, base_result.day)

    def __sub__(self, days_or_date):
        if isinstance(days_or_date, datetime.date):
            return super().__sub__(days_or_date).days
        return self + (-days_or_date)

    def __repr__(self):
        return 'Date(%d, %d, %d)' % (self.year, self.month, self.day)

    @property
    def day_of_week(self):
        """Returns the index of the day of the week, starting from Sunday at
        zero.
        """
        return self._day_of_week

    @property
    def is_sunday(self):
        return self._day_of_week == SUNDAY


def mk_date(*args):
    """Builds a Date from either a single date object or three integers
    (year, month, day).
    """
    if len(args) == 3:
        if not all(isinstance(a, int) and not isinstance(a, bool)
                   for a in args):
            raise InvalidArguments('Date or three integers expected')
        try:
            return Date(*args)
        except ValueError as e:
            raise InvalidArguments(str(e)) from e
    if len(args) == 1 and isinstance(args[0], datetime.date):
        return Date.from_date(args[0])
    raise InvalidArguments('Date or three integers expected')


# pylint: disable=invalid-name,too-many-locals
def easter_sunday(year):
    """Returns the date of Easter Sunday in the Gregorian calendar,
    calculated using the algorithm in "A New York correspondent", "To find
    Easter", Nature 338 (1876), p. 487.
    """
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    n = h + l - 7 * m + 114
    month, day = divmod(n, 31)
    day += 1
    assert 1 <= month <= 12, month
    assert day <= stdlib_calendar.monthrange(year, month)[1], (day, month)
    return Date(year, month, day)


def weekday_before(weekday, date):
    """Returns the nearest date strictly before the given date falling on the
    given day of the week.
    """
    return date - ((date.day_of_week - weekday - 1) % WEEK + 1)


def weekday_after(weekday, date):
    """Returns the nearest date strictly after the given date falling on the
    given day of the week.
    """
    return date + ((weekday - date.day_of_week - 1) % WEEK + 1)


def sunday_before(date):
    return weekday_before(SUNDAY, date)


def sunday_after(date):
    return weekday_after(SUNDAY, date)


def monday_after(date):
    return weekday_after(MONDAY, date)


def thursday_after(date):
    return weekday_after(THURSDAY, date)


def friday_after(date):
    return weekday_after(FRIDAY, date)


def saturday_after(date):
    return weekday_after(SATURDAY, date)


def octave_of(date):
    return date + WEEK


# Movable dates of the liturgical year beginning with Advent of `year`.  The
# Easter cycle is therefore that of the following civil year.

def first_advent_sunday(year):
    """Returns the date of the first Sunday of Advent for the specified
    year.
    """
    christmas_eve = Date(year, 12, 24)
    advent4 = christmas_eve - christmas_eve.day_of_week
    return advent4 - WEEK * 3


def nativity(year):
    return Date(year, 12, 25)


def holy_family(year):
    # When Christmas falls on a Sunday, the following Sunday is taken by the
    # solemnity of Mary, Mother of God.
    christmas = nativity(year)
    if christmas.is_sunday:
        return Date(year, 12, 30)
    return sunday_after(christmas)


def mother_of_god(year):
    return octave_of(nativity(year))


def epiphany(year):
    return Date(year + 1, 1, 6)


def baptism_of_lord(year):
    return sunday_after(epiphany(year))


def easter(year):
    return easter_sunday(year + 1)


def ash_wednesday(year):
    return easter(year) - (6 * WEEK + 4)


def palm_sunday(year):
    return easter(year) - WEEK


def good_friday(year):
    return easter(year) - 2


def holy_saturday(year):
    return easter(year) - 1


def ascension(year):
    return easter(year) + 39


def pentecost(year):
    return easter(year) + 7 * WEEK


def holy_trinity(year):
    return octave_of(pentecost(year))


def body_blood(year):
    return thursday_after(holy_trinity(year))


def sacred_heart(year):
    return friday_after(sunday_after(body_blood(year)))


def immaculate_heart(year):
    return saturday_after(sacred_heart(year))


def christ_king(year):
    return sunday_before(first_advent_sunday(year + 1))
