"""Optional movable celebrations which are not in the General Calendar.

Each extension is an iterable of TemporaleEntry, passed to
Temporale.with_extensions().
"""

from . import dates
from .celebrations import Colour, Rank
from .temporale import TemporaleEntry


def christ_eternal_priest(year):
    """Thursday after Pentecost."""
    return dates.thursday_after(dates.pentecost(year))


CHRIST_ETERNAL_PRIEST = (
    TemporaleEntry('christ_eternal_priest', christ_eternal_priest,
                   Rank.FEAST_PROPER, Colour.WHITE),
)
