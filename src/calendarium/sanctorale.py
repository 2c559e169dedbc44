from .dates import mk_date
from .errors import FrozenSanctoraleError, InvalidArguments


class Sanctorale:
    """Celebrations of the fixed cycle, keyed by (month, day).  For each date
    the celebrations are kept in order of precedence.

    Instances shared between calendars or threads must be frozen first.
    """

    def __init__(self):
        self._days = {}
        self._frozen = False

    def __repr__(self):
        return '%s(%d days)' % (self.__class__.__name__, len(self._days))

    def __len__(self):
        return len(self._days)

    def __contains__(self, month_day):
        return month_day in self._days

    def __iter__(self):
        return iter(sorted(self._days))

    @property
    def frozen(self):
        return self._frozen

    def freeze(self):
        self._frozen = True
        return self

    def _check_mutable(self):
        if self._frozen:
            raise FrozenSanctoraleError("Can't modify a frozen sanctorale")

    @staticmethod
    def _key(*args):
        if len(args) == 2:
            month, day = args
            # Validate against a leap year so that 29 Feb is accepted.
            mk_date(2000, month, day)
            return (month, day)
        if len(args) == 1:
            date = mk_date(*args)
            return (date.month, date.day)
        raise InvalidArguments('Date or month and day expected')

    def add(self, month, day, celebration):
        self._check_mutable()
        key = self._key(month, day)
        existing = self._days.get(key, [])
        if celebration.is_solemnity and any(c.is_solemnity for c in existing):
            raise ValueError('%02d-%02d: only one solemnity is allowed on a '
                             'day' % key)
        self._days[key] = existing + [celebration]

    def replace(self, month, day, celebrations):
        self._check_mutable()
        key = self._key(month, day)
        if celebrations:
            self._days[key] = list(celebrations)
        else:
            self._days.pop(key, None)

    def update(self, other):
        """Overlays another sanctorale, replacing whole days."""
        for key in other:
            self.replace(*key, other.get(*key))

    def get(self, *args):
        """Returns the celebrations of the given date, or of the given month
        and day, in order of precedence.
        """
        return tuple(self._days.get(self._key(*args), ()))

    def solemnities(self):
        return {key: celebrations[0]
                for (key, celebrations) in self._days.items()
                if celebrations[0].is_solemnity}
