import pytest

from calendarium.celebrations import Celebration, Colour, Rank
from calendarium.sanctorale import Sanctorale


@pytest.fixture
def sanctorale():
    s = Sanctorale()
    s.add(1, 17, Celebration('Saint Anthony, Abbot', Rank.MEMORIAL_GENERAL))
    s.add(1, 9, Celebration('Saint Adrian', Rank.MEMORIAL_OPTIONAL))
    s.add(1, 28, Celebration('Saint Thomas Aquinas', Rank.MEMORIAL_GENERAL))
    s.add(3, 7, Celebration('Saints Perpetua and Felicity',
                            Rank.MEMORIAL_GENERAL, Colour.RED))
    s.add(3, 19, Celebration('Saint Joseph', Rank.SOLEMNITY_GENERAL))
    s.add(3, 25, Celebration('The Annunciation of the Lord',
                             Rank.SOLEMNITY_GENERAL))
    s.add(12, 8, Celebration('The Immaculate Conception',
                             Rank.SOLEMNITY_GENERAL))
    s.add(12, 26, Celebration('Saint Stephen', Rank.FEAST_GENERAL, Colour.RED))
    s.add(12, 29, Celebration('Saint Thomas Becket', Rank.MEMORIAL_OPTIONAL,
                              Colour.RED))
    return s.freeze()
