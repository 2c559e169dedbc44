from dataclasses import dataclass
from typing import Tuple

from .celebrations import Celebration, Rank, Season
from .dates import Date, mk_date
from .errors import InvalidArguments, OutOfRangeDate
from .sanctorale import Sanctorale
from .temporale import Temporale
from .transfers import Transfers


# Day when the implemented calendar system became effective.
EFFECTIVE_FROM = Date(1970, 1, 1)

# Sunday lectionary cycles, indexed by year modulo 3.
LECTIONARY_CYCLES = ('A', 'B', 'C')


@dataclass(frozen=True)
class Day:
    date: Date
    season: Season
    season_week: int
    celebrations: Tuple[Celebration, ...]

    @property
    def celebration(self):
        """The celebration which is kept; any others are commemorated or
        may be chosen instead.
        """
        return self.celebrations[0]

    @property
    def colour(self):
        return self.celebration.colour or self.season.colour


def _system_not_effective():
    return OutOfRangeDate('Year out of range. The implemented calendar system '
                          'has been in use only since %s.' % (EFFECTIVE_FROM,))


class Calendar:
    """Complete information about the liturgical year beginning with Advent
    of the civil year `year`.
    """

    def __init__(self, year, sanctorale=None, temporale_factory=None):
        if year < EFFECTIVE_FROM.year - 1:
            raise _system_not_effective()

        self._year = year
        self._sanctorale = sanctorale if sanctorale is not None else Sanctorale()
        self._temporale_factory = temporale_factory or Temporale
        self._temporale = self._temporale_factory(year)
        self._transferred = Transfers(self._temporale, self._sanctorale)

    @classmethod
    def for_day(cls, date, *args, **kwargs):
        """Returns the Calendar of the liturgical year containing the given
        date.
        """
        return cls(Temporale.liturgical_year(date), *args, **kwargs)

    mk_date = staticmethod(mk_date)

    def __repr__(self):
        return '%s(%d)' % (self.__class__.__name__, self._year)

    def __eq__(self, other):
        if not isinstance(other, Calendar):
            return NotImplemented
        return self._year == other._year

    def __hash__(self):
        return hash(self._year)

    @property
    def year(self):
        return self._year

    @property
    def temporale(self):
        return self._temporale

    @property
    def sanctorale(self):
        return self._sanctorale

    @property
    def transferred(self):
        return self._transferred

    def range_check(self, date):
        self._temporale.range_check(date)

    def season(self, date):
        return self._temporale.season(date)

    def succ(self):
        """Returns the Calendar of the following liturgical year."""
        return self.__class__(self._year + 1, self._sanctorale,
                              self._temporale_factory)

    def pred(self):
        """Returns the Calendar of the preceding liturgical year."""
        return self.__class__(self._year - 1, self._sanctorale,
                              self._temporale_factory)

    @property
    def lectionary(self):
        """Sunday lectionary cycle."""
        return LECTIONARY_CYCLES[self._year % 3]

    @property
    def ferial_lectionary(self):
        """Weekday lectionary cycle."""
        return self._year % 2 + 1

    @property
    def frozen(self):
        return self._temporale.frozen and self._sanctorale.frozen

    def freeze(self):
        """Freezes the temporale and the (possibly shared) sanctorale."""
        self._temporale.freeze()
        self._sanctorale.freeze()
        return self

    def day(self, *args):
        """Returns the Day for a date given as a date object, as year, month
        and day, or as month and day within this liturgical year.
        """
        if len(args) == 2:
            date = self._temporale.concretize(*args)
        elif len(args) in (1, 3):
            date = mk_date(*args)
            self.range_check(date)
        else:
            raise InvalidArguments('Date, three integers or month and day '
                                   'expected')

        if date < EFFECTIVE_FROM:
            raise _system_not_effective()

        season = self._temporale.season(date)
        return Day(
            date=date,
            season=season,
            season_week=self._temporale.season_week(season, date),
            celebrations=tuple(self._celebrations_for(date)),
        )

    def days(self, start=None, end=None):
        """Yields the Day of every date from start to end inclusive, by
        default over the whole liturgical year.
        """
        current = mk_date(start) if start is not None else (
            self._temporale.start_date)
        end = mk_date(end) if end is not None else self._temporale.end_date
        while current <= end:
            yield self.day(current)
            current += 1

    def _celebrations_for(self, date):
        transferred = self._transferred.get(date)
        if transferred is not None:
            return [transferred]

        temporal = self._temporale.get(date)
        sanctoral = list(self._sanctorale.get(date))

        if sanctoral:
            if sanctoral[0].rank > temporal.rank:
                if sanctoral[0].rank is Rank.MEMORIAL_OPTIONAL:
                    # The ferial office may be kept instead.
                    return [temporal] + sanctoral
                return sanctoral
            if (temporal.rank is Rank.FERIAL_PRIVILEGED and
                    sanctoral[0].is_memorial):
                return [temporal] + [
                    c.demoted(Rank.COMMEMORATION, temporal.colour)
                    for c in sanctoral
                ]

        return [temporal]
