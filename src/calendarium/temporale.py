from dataclasses import dataclass
import functools
import itertools
import types
from typing import Callable, Optional

from . import dates
from .celebrations import (
    Celebration,
    Colour,
    DeferredTitle,
    Rank,
    Season,
    Title,
)
from .dates import Date, WEEK, mk_date
from .errors import FrozenTemporaleError, InvalidArguments, OutOfRangeDate


@dataclass(frozen=True)
class TemporaleEntry:
    """A movable celebration: `date_method` maps the liturgical year to the
    date of the celebration.  Without a colour the celebration takes that of
    the season in which it falls.
    """
    symbol: str
    date_method: Callable[[int], Date]
    rank: Rank
    colour: Optional[Colour] = None
    title: Optional[Title] = None


CELEBRATIONS = (
    TemporaleEntry('nativity', dates.nativity, Rank.PRIMARY),
    TemporaleEntry('holy_family', dates.holy_family, Rank.FEAST_LORD_GENERAL),
    TemporaleEntry('mother_of_god', dates.mother_of_god,
                   Rank.SOLEMNITY_GENERAL),
    TemporaleEntry('epiphany', dates.epiphany, Rank.PRIMARY),
    TemporaleEntry('baptism_of_lord', dates.baptism_of_lord,
                   Rank.FEAST_LORD_GENERAL),
    TemporaleEntry('ash_wednesday', dates.ash_wednesday, Rank.PRIMARY),
    TemporaleEntry('good_friday', dates.good_friday, Rank.TRIDUUM, Colour.RED),
    TemporaleEntry('holy_saturday', dates.holy_saturday, Rank.TRIDUUM),
    TemporaleEntry('palm_sunday', dates.palm_sunday, Rank.PRIMARY, Colour.RED),
    TemporaleEntry('easter_sunday', dates.easter, Rank.TRIDUUM),
    TemporaleEntry('ascension', dates.ascension, Rank.PRIMARY, Colour.WHITE),
    TemporaleEntry('pentecost', dates.pentecost, Rank.PRIMARY, Colour.RED),
    TemporaleEntry('holy_trinity', dates.holy_trinity, Rank.SOLEMNITY_GENERAL,
                   Colour.WHITE),
    TemporaleEntry('body_blood', dates.body_blood, Rank.SOLEMNITY_GENERAL,
                   Colour.WHITE),
    TemporaleEntry('sacred_heart', dates.sacred_heart, Rank.SOLEMNITY_GENERAL,
                   Colour.WHITE),
    TemporaleEntry('christ_king', dates.christ_king, Rank.SOLEMNITY_GENERAL,
                   Colour.WHITE),

    # The Immaculate Heart of Mary is a movable sanctoral memorial, but it
    # follows the Easter cycle, so it lives here.
    TemporaleEntry('immaculate_heart', dates.immaculate_heart,
                   Rank.MEMORIAL_GENERAL, Colour.WHITE),
)


# Date functions behind the accessors below, evaluated once per instance.
_MOVABLE_DATES = []


def _movable(date_function):
    _MOVABLE_DATES.append(date_function)
    name = date_function.__name__

    @functools.wraps(date_function)
    def accessor(self):
        return self._dates[name]
    return property(accessor)


class Temporale:
    """Dates, seasons and celebrations of the movable cycle for the liturgical
    year beginning with Advent of the civil year `year`.
    """

    # Seasons in which Sundays are primary liturgical days.
    SEASONS_SUNDAY_PRIMARY = (Season.ADVENT, Season.LENT, Season.EASTER)

    def __init__(self, year, extensions=()):
        self._year = year
        self._dates = {f.__name__: f(year) for f in _MOVABLE_DATES}
        self._end_date = dates.first_advent_sunday(year + 1) - 1
        self._entries = CELEBRATIONS + tuple(
            itertools.chain.from_iterable(extensions))
        self._prepare_solemnities()

    @classmethod
    def with_extensions(cls, *extensions):
        """Returns a factory building Temporale instances which include the
        celebrations of the given extensions.
        """
        return functools.partial(cls, extensions=extensions)

    @classmethod
    def liturgical_year(cls, date):
        """Returns the liturgical year to which the given date belongs."""
        date = mk_date(date)
        if date < dates.first_advent_sunday(date.year):
            return date.year - 1
        return date.year

    @classmethod
    def for_day(cls, date, *args, **kwargs):
        return cls(cls.liturgical_year(date), *args, **kwargs)

    def __repr__(self):
        return '%s(%d)' % (self.__class__.__name__, self._year)

    def __setattr__(self, name, value):
        if getattr(self, '_frozen', False):
            raise FrozenTemporaleError("Can't modify a frozen temporale")
        super().__setattr__(name, value)

    @property
    def frozen(self):
        return getattr(self, '_frozen', False)

    def freeze(self):
        for name in ('_dates', '_solemnities', '_feasts', '_memorials'):
            proxy = types.MappingProxyType(getattr(self, name))
            super().__setattr__(name, proxy)
        super().__setattr__('_frozen', True)
        return self

    @property
    def year(self):
        return self._year

    @property
    def entries(self):
        return self._entries

    first_advent_sunday = _movable(dates.first_advent_sunday)
    nativity = _movable(dates.nativity)
    holy_family = _movable(dates.holy_family)
    mother_of_god = _movable(dates.mother_of_god)
    epiphany = _movable(dates.epiphany)
    baptism_of_lord = _movable(dates.baptism_of_lord)
    ash_wednesday = _movable(dates.ash_wednesday)
    palm_sunday = _movable(dates.palm_sunday)
    good_friday = _movable(dates.good_friday)
    holy_saturday = _movable(dates.holy_saturday)
    easter_sunday = _movable(dates.easter)
    ascension = _movable(dates.ascension)
    pentecost = _movable(dates.pentecost)
    holy_trinity = _movable(dates.holy_trinity)
    body_blood = _movable(dates.body_blood)
    sacred_heart = _movable(dates.sacred_heart)
    immaculate_heart = _movable(dates.immaculate_heart)
    christ_king = _movable(dates.christ_king)

    @property
    def start_date(self):
        return self.first_advent_sunday

    @property
    def end_date(self):
        return self._end_date

    @property
    def date_range(self):
        """Yields every date of the liturgical year."""
        current = self.start_date
        end = self.end_date
        while current <= end:
            yield current
            current += 1

    def contains(self, date):
        return self.start_date <= date <= self.end_date

    def range_check(self, date):
        if not self.contains(date):
            raise OutOfRangeDate('Date out of range %s' % (date,))

    def concretize(self, month, day):
        """Returns the date within this liturgical year falling on the given
        month and day.
        """
        found = None
        for year in (self._year, self._year + 1):
            try:
                found = mk_date(year, month, day)
            except InvalidArguments:
                continue
            if self.contains(found):
                return found
        if found is None:
            raise InvalidArguments('No such date: %r-%r' % (month, day))
        raise OutOfRangeDate('Date out of range %s' % (found,))

    def season(self, date):
        """Returns the liturgical season of the given date."""
        date = mk_date(date)
        self.range_check(date)

        if self.first_advent_sunday <= date < self.nativity:
            return Season.ADVENT
        if self.nativity <= date <= self.baptism_of_lord:
            return Season.CHRISTMAS
        if self.ash_wednesday <= date < self.easter_sunday:
            return Season.LENT
        if self.easter_sunday <= date <= self.pentecost:
            return Season.EASTER
        return Season.ORDINARY

    def season_beginning(self, season):
        if season is Season.ADVENT:
            return self.first_advent_sunday
        if season is Season.CHRISTMAS:
            return self.nativity
        if season is Season.LENT:
            return self.ash_wednesday
        if season is Season.EASTER:
            return self.easter_sunday
        return dates.monday_after(self.baptism_of_lord)

    def season_week(self, season, date):
        date = mk_date(date)
        week1_beginning = self.season_beginning(season)
        if not week1_beginning.is_sunday:
            week1_beginning = dates.sunday_after(week1_beginning)

        week = (date - week1_beginning) // WEEK + 1

        if season is Season.ORDINARY:
            # Ordinary Time begins on a Monday, but that week is the first.
            week += 1

            # After Pentecost, count backwards from Advent so that the last
            # week is always the thirty-fourth.
            if date > self.pentecost:
                next_advent = self._end_date + 1
                week = 34 - (next_advent - date) // WEEK
                if date.is_sunday:
                    week += 1

        return week

    def get(self, *args):
        """Returns the Celebration of the movable cycle for the given date,
        passed either as a date or as month and day.
        """
        if len(args) == 2:
            date = self.concretize(*args)
        elif len(args) == 1:
            date = mk_date(*args)
            self.range_check(date)
        else:
            raise InvalidArguments('Date or month and day expected')

        return (self._solemnities.get(date) or
                self._feasts.get(date) or
                self._sunday(date) or
                self._memorials.get(date) or
                self._ferial(date))

    def _sunday(self, date):
        if not date.is_sunday:
            return None

        season = self.season(date)
        rank = Rank.SUNDAY_UNPRIVILEGED
        if season in self.SEASONS_SUNDAY_PRIMARY:
            rank = Rank.PRIMARY

        title = DeferredTitle.of('temporale.%s.sunday' % (season.value,),
                                 week=self.season_week(season, date))
        return Celebration(title, rank, season.colour)

    def _ferial(self, date):
        season = self.season(date)
        week = self.season_week(season, date)
        weekday = date.day_of_week
        rank = Rank.FERIAL
        title = None

        if season is Season.ADVENT:
            if date >= Date(self._year, 12, 17):
                rank = Rank.FERIAL_PRIVILEGED
        elif season is Season.CHRISTMAS:
            if date < self.mother_of_god:
                rank = Rank.FERIAL_PRIVILEGED
                title = DeferredTitle.of(
                    'temporale.christmas.nativity_octave.ferial',
                    day=date.day - self.nativity.day + 1)
            elif date > self.epiphany:
                title = DeferredTitle.of(
                    'temporale.christmas.after_epiphany.ferial',
                    weekday=weekday)
        elif season is Season.LENT:
            if week == 0:
                title = DeferredTitle.of('temporale.lent.after_ashes.ferial',
                                         weekday=weekday)
            elif date > self.palm_sunday:
                rank = Rank.PRIMARY
                title = DeferredTitle.of('temporale.lent.holy_week.ferial',
                                         weekday=weekday)
            rank = max(rank, Rank.FERIAL_PRIVILEGED)
        elif season is Season.EASTER:
            if week == 1:
                rank = Rank.PRIMARY
                title = DeferredTitle.of('temporale.easter.octave.ferial',
                                         weekday=weekday)

        if title is None:
            title = DeferredTitle.of('temporale.%s.ferial' % (season.value,),
                                     week=week, weekday=weekday)

        return Celebration(title, rank, season.colour)

    def _prepare_solemnities(self):
        self._solemnities = {}
        self._feasts = {}
        self._memorials = {}

        for entry in self._entries:
            date = entry.date_method(self._year)
            title = entry.title or DeferredTitle.of(
                'temporale.solemnity.%s' % (entry.symbol,))
            celebration = Celebration(
                title,
                entry.rank,
                entry.colour or self.season(date).colour,
                entry.symbol,
            )

            if celebration.is_feast:
                add_to = self._feasts
            elif celebration.is_memorial:
                add_to = self._memorials
            else:
                add_to = self._solemnities
            add_to[date] = celebration
