import textwrap

import pytest

from calendarium.calendar import Calendar
from calendarium.celebrations import Colour, Rank
from calendarium.data import (
    DataValidationError,
    load_sanctorale,
    maybe_labelled,
    parse_date_key,
    sanctorale_from_dict,
)


SAMPLE = textwrap.dedent("""\
    01-17:
      - title: Saint Anthony, Abbot
    03-19:
      - title: Saint Joseph, Spouse of the Blessed Virgin Mary
        rank: solemnity-general
    04-23:
      - title: Saint George, Martyr
        rank: memorial-optional
        colour: red
      - Saint Adalbert, Bishop and Martyr
    12-26:
      title: Saint Stephen, the First Martyr
      rank: feast-general
      colour: red
      symbol: stephen
""")


@pytest.fixture
def sample_path(tmp_path):
    path = tmp_path / 'universal-en.yaml'
    path.write_text(SAMPLE, encoding='utf-8')
    return path


def test_load_sanctorale(sample_path):
    sanctorale = load_sanctorale(str(sample_path))
    assert len(sanctorale) == 4

    (anthony,) = sanctorale.get(1, 17)
    assert anthony.rank is Rank.MEMORIAL_GENERAL
    assert anthony.colour is Colour.WHITE

    george, adalbert = sanctorale.get(4, 23)
    assert george.rank is Rank.MEMORIAL_OPTIONAL
    assert george.colour is Colour.RED
    assert adalbert.title.text == 'Saint Adalbert, Bishop and Martyr'

    (stephen,) = sanctorale.get(12, 26)
    assert stephen.symbol == 'stephen'
    assert set(sanctorale.solemnities()) == {(3, 19)}


def test_loaded_sanctorale_in_calendar(sample_path):
    calendar = Calendar(2023, load_sanctorale(str(sample_path)).freeze())
    assert calendar.day(2023, 12, 26).celebration.symbol == 'stephen'


def test_empty_file(tmp_path):
    path = tmp_path / 'empty.yaml'
    path.write_text('', encoding='utf-8')
    assert len(load_sanctorale(str(path))) == 0


@pytest.mark.parametrize('key,expected', [('01-17', (1, 17)),
                                          ('3-9', (3, 9))])
def test_parse_date_key(key, expected):
    assert parse_date_key(key) == expected


@pytest.mark.parametrize('raw', [
    {'13-01': ['Nobody']},
    {'02-30': ['Nobody']},
    {'January 1': ['Nobody']},
    {'01-01': [{'rank': 'memorial-general'}]},
    {'01-01': [{'title': 'Nobody', 'rank': 'major-double'}]},
    {'01-01': [{'title': 'Nobody', 'colour': 'blue'}]},
    {'01-01': [{'title': 'Nobody', 'octave': 'yes'}]},
    {'01-01': [{'title': 'One', 'rank': 'solemnity-general'},
               {'title': 'Two', 'rank': 'solemnity-proper'}]},
    ['01-01'],
])
def test_invalid_data(raw):
    with pytest.raises(DataValidationError):
        sanctorale_from_dict(raw)


def test_maybe_labelled_defaults():
    celebration = maybe_labelled('Saint Nobody')
    assert celebration.rank is Rank.MEMORIAL_GENERAL
    assert celebration.colour is Colour.WHITE
