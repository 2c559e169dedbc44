import datetime

import pytest

from calendarium.calendar import EFFECTIVE_FROM, Calendar, Day
from calendarium.celebrations import Celebration, Colour, Rank, Season
from calendarium.dates import Date
from calendarium.errors import InvalidArguments, OutOfRangeDate
from calendarium.extensions import CHRIST_ETERNAL_PRIEST
from calendarium.sanctorale import Sanctorale
from calendarium.temporale import Temporale


@pytest.fixture
def c2023(sanctorale):
    return Calendar(2023, sanctorale)


def test_nativity_is_primary(c2023):
    day = c2023.day(2023, 12, 25)
    assert isinstance(day, Day)
    assert day.season is Season.CHRISTMAS
    assert day.celebration.rank is Rank.PRIMARY
    assert day.celebration.symbol == 'nativity'
    assert len(day.celebrations) == 1


def test_day_arguments(c2023):
    expected = c2023.day(Date(2024, 3, 31))
    assert c2023.day(2024, 3, 31) == expected
    assert c2023.day(3, 31) == expected
    assert c2023.day(datetime.date(2024, 3, 31)) == expected
    assert expected.celebration.symbol == 'easter_sunday'


def test_day_is_idempotent(c2023):
    assert c2023.day(2023, 12, 29) == c2023.day(2023, 12, 29)


@pytest.mark.parametrize('args', [('2024-03-31',), (2024, 3), (1, 2, 3, 4),
                                  (2024, 2, 30)])
def test_day_invalid_arguments(c2023, args):
    with pytest.raises(InvalidArguments):
        c2023.day(*args)


@pytest.mark.parametrize('date', [Date(2023, 12, 2), Date(2024, 12, 1)])
def test_day_out_of_range(c2023, date):
    with pytest.raises(OutOfRangeDate):
        c2023.day(date)


def test_effective_epoch():
    with pytest.raises(OutOfRangeDate):
        Calendar(1968)
    calendar = Calendar(1969)
    with pytest.raises(OutOfRangeDate):
        calendar.day(1969, 12, 31)
    assert calendar.day(EFFECTIVE_FROM).date == Date(1970, 1, 1)


def test_memorial_in_christmas_octave(c2023):
    day = c2023.day(2023, 12, 29)
    assert [c.rank for c in day.celebrations] == [Rank.FERIAL_PRIVILEGED,
                                                  Rank.COMMEMORATION]
    octave, commemoration = day.celebrations
    assert octave.title.key == 'temporale.christmas.nativity_octave.ferial'
    assert commemoration.title.text == 'Saint Thomas Becket'
    assert commemoration.colour is Colour.WHITE


def test_feast_beats_privileged_ferial(c2023):
    day = c2023.day(2023, 12, 26)
    assert [c.title.text for c in day.celebrations] == ['Saint Stephen']
    assert day.colour is Colour.RED


def test_memorial_in_lent_is_commemorated(c2023):
    day = c2023.day(2024, 3, 7)
    assert len(day.celebrations) == 2
    assert day.celebrations[0].rank is Rank.FERIAL_PRIVILEGED
    assert day.celebrations[1].rank is Rank.COMMEMORATION
    assert day.celebrations[1].colour is Colour.VIOLET


def test_obligatory_memorial_on_ferial(c2023):
    day = c2023.day(2024, 1, 17)
    assert [c.title.text for c in day.celebrations] == ['Saint Anthony, Abbot']


def test_optional_memorial_on_ferial(c2023):
    day = c2023.day(2024, 1, 9)
    assert [c.rank for c in day.celebrations] == [Rank.FERIAL,
                                                  Rank.MEMORIAL_OPTIONAL]
    assert day.colour is Colour.GREEN


def test_memorial_on_sunday_is_omitted(c2023):
    day = c2023.day(2024, 1, 28)
    assert len(day.celebrations) == 1
    assert day.celebration.rank is Rank.SUNDAY_UNPRIVILEGED


def test_solemnity_on_lenten_ferial(c2023):
    day = c2023.day(2024, 3, 19)
    assert [c.title.text for c in day.celebrations] == ['Saint Joseph']


def test_transferred_solemnity(c2023):
    holy_monday = c2023.day(2024, 3, 25)
    assert holy_monday.celebrations == (c2023.temporale.get(Date(2024, 3, 25)),)

    landing = c2023.day(2024, 4, 8)
    assert [c.title.text for c in landing.celebrations] == [
        'The Annunciation of the Lord']
    assert landing.celebration.rank is Rank.SOLEMNITY_GENERAL


def test_sanctorale_shared_by_siblings(c2023):
    following = c2023.succ()
    preceding = c2023.pred()
    assert following.year == 2024
    assert preceding.year == 2022
    assert following.sanctorale is c2023.sanctorale
    assert preceding.sanctorale is c2023.sanctorale
    assert following == Calendar(2024)
    assert c2023 != following


def test_temporale_factory_is_kept():
    calendar = Calendar(2023,
                        temporale_factory=Temporale.with_extensions(
                            CHRIST_ETERNAL_PRIEST))
    assert calendar.day(2024, 5, 23).celebration.symbol == (
        'christ_eternal_priest')
    assert calendar.succ().day(2025, 6, 12).celebration.symbol == (
        'christ_eternal_priest')


def test_for_day():
    assert Calendar.for_day(Date(2023, 12, 3)).year == 2023
    assert Calendar.for_day(Date(2023, 12, 2)).year == 2022


@pytest.mark.parametrize('year,lectionary,ferial', [
    (2022, 'A', 1),
    (2023, 'B', 2),
    (2024, 'C', 1),
])
def test_lectionary(year, lectionary, ferial):
    calendar = Calendar(year)
    assert calendar.lectionary == lectionary
    assert calendar.ferial_lectionary == ferial


def test_season(c2023):
    assert c2023.season(Date(2024, 2, 14)) is Season.LENT
    with pytest.raises(OutOfRangeDate):
        c2023.range_check(Date(2025, 1, 1))


def test_days(c2023):
    days = list(c2023.days())
    assert days[0].date == Date(2023, 12, 3)
    assert days[-1].date == Date(2024, 11, 30)
    assert all(day.celebrations for day in days)
    assert len({day.date for day in days}) == len(days)

    week = list(c2023.days(Date(2023, 12, 24), Date(2023, 12, 30)))
    assert [d.season for d in week] == [Season.ADVENT] + [Season.CHRISTMAS] * 6


def test_freeze():
    sanctorale = Sanctorale()
    calendar = Calendar(2023, sanctorale)
    assert not calendar.frozen
    assert calendar.freeze() is calendar
    assert calendar.frozen
    assert sanctorale.frozen
    assert calendar.temporale.frozen
    assert calendar.year == 2023
    assert calendar.day(2024, 3, 31).celebration.symbol == 'easter_sunday'


def test_solemnity_outranked_by_temporale_on_sunday():
    s = Sanctorale()
    s.add(3, 24, Celebration('Local patron', Rank.SOLEMNITY_PROPER))
    calendar = Calendar(2023, s)
    assert calendar.day(2024, 3, 24).celebration.symbol == 'palm_sunday'
    assert calendar.day(2024, 4, 8).celebration.title.text == 'Local patron'


def test_transfer_keeps_local_solemnity(sanctorale):
    s = Sanctorale()
    s.add(3, 25, sanctorale.get(3, 25)[0])
    s.add(4, 8, Celebration('Local patron', Rank.SOLEMNITY_PROPER))
    calendar = Calendar(2023, s)
    patron_days = [day.date for day in calendar.days()
                   if any(str(c.title) == 'Local patron'
                          for c in day.celebrations)]
    assert patron_days == [Date(2024, 4, 8)]
    assert calendar.day(2024, 4, 9).celebration == s.get(3, 25)[0]
