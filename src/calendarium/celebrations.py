from dataclasses import dataclass, replace
import enum
import functools
from typing import Any, Callable, Optional, Tuple, Union


@functools.total_ordering
class Rank(enum.Enum):
    """Precedence classes from the Table of Liturgical Days, highest first.
    The value of each member is its number in the table.
    """
    TRIDUUM = '1.1'
    PRIMARY = '1.2'
    SOLEMNITY_GENERAL = '1.3'
    SOLEMNITY_PROPER = '1.4'
    FEAST_LORD_GENERAL = '2.5'
    SUNDAY_UNPRIVILEGED = '2.6'
    FEAST_GENERAL = '2.7'
    FEAST_PROPER = '2.8'
    FERIAL_PRIVILEGED = '2.9'
    MEMORIAL_GENERAL = '3.10'
    MEMORIAL_PROPER = '3.11'
    MEMORIAL_OPTIONAL = '3.12'
    FERIAL = '3.13'
    COMMEMORATION = '4.0'

    def __lt__(self, other):
        if not isinstance(other, Rank):
            return NotImplemented
        return _PRECEDENCE[self] < _PRECEDENCE[other]

    @property
    def priority(self):
        return self.value

    @property
    def desc(self):
        return _DESCRIPTIONS[self]

    @property
    def is_solemnity(self):
        return self >= Rank.SOLEMNITY_PROPER

    @property
    def is_feast(self):
        return self in (Rank.FEAST_PROPER, Rank.FEAST_GENERAL,
                        Rank.FEAST_LORD_GENERAL)

    @property
    def is_memorial(self):
        return Rank.MEMORIAL_OPTIONAL <= self <= Rank.MEMORIAL_GENERAL

    @property
    def is_sunday(self):
        return self is Rank.SUNDAY_UNPRIVILEGED

    @property
    def is_ferial(self):
        return self in (Rank.FERIAL, Rank.FERIAL_PRIVILEGED)

    @classmethod
    def from_symbol(cls, symbol):
        """Looks up a rank by its lower-case, hyphenated name, e.g.
        'memorial-optional'.
        """
        return cls[symbol.strip().upper().replace('-', '_')]


# Members are declared from the highest rank down.
_PRECEDENCE = {rank: i for (i, rank) in enumerate(reversed(list(Rank)))}

_DESCRIPTIONS = {
    Rank.TRIDUUM: 'Easter triduum',
    Rank.PRIMARY: 'Primary liturgical days',
    Rank.SOLEMNITY_GENERAL: 'Solemnities in the General Calendar',
    Rank.SOLEMNITY_PROPER: 'Proper solemnities',
    Rank.FEAST_LORD_GENERAL: 'Feasts of the Lord in the General Calendar',
    Rank.SUNDAY_UNPRIVILEGED: 'Unprivileged Sundays',
    Rank.FEAST_GENERAL: 'Feasts of saints in the General Calendar',
    Rank.FEAST_PROPER: 'Proper feasts',
    Rank.FERIAL_PRIVILEGED: 'Privileged weekdays',
    Rank.MEMORIAL_GENERAL: 'Obligatory memorials in the General Calendar',
    Rank.MEMORIAL_PROPER: 'Proper obligatory memorials',
    Rank.MEMORIAL_OPTIONAL: 'Optional memorials',
    Rank.FERIAL: 'Unprivileged ferials',
    Rank.COMMEMORATION: 'Commemorations',
}


class Colour(enum.Enum):
    GREEN = 'green'
    VIOLET = 'violet'
    WHITE = 'white'
    RED = 'red'
    ROSE = 'rose'


class Season(enum.Enum):
    ADVENT = 'advent'
    CHRISTMAS = 'christmas'
    LENT = 'lent'
    EASTER = 'easter'
    ORDINARY = 'ordinary'

    @property
    def colour(self):
        return _SEASON_COLOURS[self]


_SEASON_COLOURS = {
    Season.ADVENT: Colour.VIOLET,
    Season.CHRISTMAS: Colour.WHITE,
    Season.LENT: Colour.VIOLET,
    Season.EASTER: Colour.WHITE,
    Season.ORDINARY: Colour.GREEN,
}


@dataclass(frozen=True)
class LiteralTitle:
    text: str

    def resolve(self, translate=None):
        return self.text

    def __str__(self):
        return self.text


@dataclass(frozen=True)
class DeferredTitle:
    """A title looked up by key only when it is rendered, so that the locale
    can be chosen after the calendar has been computed.
    """
    key: str
    params: Tuple[Tuple[str, Any], ...] = ()

    @classmethod
    def of(cls, key, **params):
        return cls(key, tuple(sorted(params.items())))

    def resolve(self, translate):
        return translate(self.key, dict(self.params))

    def __str__(self):
        return self.key


Title = Union[LiteralTitle, DeferredTitle]


@dataclass(frozen=True)
class Celebration:
    title: Title
    rank: Rank = Rank.FERIAL
    colour: Optional[Colour] = Colour.WHITE
    symbol: Optional[str] = None

    def __post_init__(self):
        if isinstance(self.title, str):
            object.__setattr__(self, 'title', LiteralTitle(self.title))
        if not isinstance(self.rank, Rank):
            raise TypeError('Rank expected, got %r' % (self.rank,))

    def __str__(self):
        return '%s (%s)' % (self.title, self.rank.desc)

    def resolve_title(self, translate: Callable[[str, dict], str]) -> str:
        return self.title.resolve(translate)

    def demoted(self, rank, colour):
        return replace(self, rank=rank, colour=colour)

    @property
    def is_solemnity(self):
        return self.rank.is_solemnity

    @property
    def is_feast(self):
        return self.rank.is_feast

    @property
    def is_memorial(self):
        return self.rank.is_memorial

    @property
    def is_sunday(self):
        return self.rank.is_sunday

    @property
    def is_ferial(self):
        return self.rank.is_ferial
