"""Loading of sanctorale data.

A data file is a YAML mapping from "MM-DD" to the list of celebrations of
that day, in order of precedence.  Each celebration is either a bare title
or a mapping:

    03-19:
      - title: Saint Joseph, Spouse of the Blessed Virgin Mary
        rank: solemnity-general
    04-23:
      - title: Saint George, Martyr
        rank: memorial-optional
        colour: red
      - Saint Adalbert, Bishop and Martyr
"""

import logging
import re

import yaml

from .celebrations import Celebration, Colour, Rank
from .errors import CalendarError
from .sanctorale import Sanctorale


logger = logging.getLogger(__name__)

DEFAULT_RANK = Rank.MEMORIAL_GENERAL
DEFAULT_COLOUR = Colour.WHITE

_DATE_KEY = re.compile(r'(\d{1,2})-(\d{1,2})$')


class DataValidationError(CalendarError):
    pass


def parse_date_key(key):
    m = _DATE_KEY.match(str(key).strip())
    if not m:
        raise DataValidationError("Invalid date: %r" % (key,))
    return int(m.group(1)), int(m.group(2))


def maybe_labelled(raw):
    """Builds a Celebration from either a bare title or a mapping with a
    title and optional rank, colour and symbol.
    """
    if not isinstance(raw, dict):
        return Celebration(str(raw), DEFAULT_RANK, DEFAULT_COLOUR)

    meta = dict(raw)
    try:
        title = meta.pop('title')
    except KeyError:
        raise DataValidationError("No title: %r" % (raw,))
    rank = DEFAULT_RANK
    if 'rank' in meta:
        try:
            rank = Rank.from_symbol(str(meta.pop('rank')))
        except KeyError:
            raise DataValidationError("Unrecognised rank: %s" % (raw['rank'],))
    try:
        colour = Colour(meta.pop('colour', DEFAULT_COLOUR.value))
    except ValueError:
        raise DataValidationError("Unrecognised colour: %s" % (raw['colour'],))
    symbol = meta.pop('symbol', None)
    if meta:
        raise DataValidationError("Unrecognised fields: %s" %
                                  (', '.join(sorted(meta)),))
    return Celebration(str(title), rank, colour, symbol)


def sanctorale_from_dict(raw, sanctorale=None):
    if sanctorale is None:
        sanctorale = Sanctorale()
    if not isinstance(raw, dict):
        raise DataValidationError("Expected a mapping of dates, got %s" %
                                  (type(raw).__name__,))

    for (key, entries) in raw.items():
        month, day = parse_date_key(key)
        if not isinstance(entries, list):
            entries = [entries]
        for entry in entries:
            celebration = maybe_labelled(entry)
            try:
                sanctorale.add(month, day, celebration)
            except (ValueError, TypeError) as e:
                raise DataValidationError("%s: %s" % (key, e)) from e

    logger.debug("Loaded %d days of sanctorale data", len(sanctorale))
    return sanctorale


def load_sanctorale(path, sanctorale=None):
    logger.debug("Loading sanctorale data from %s", path)
    with open(path) as f:
        raw = yaml.load(f, Loader=yaml.CSafeLoader)
    return sanctorale_from_dict(raw or {}, sanctorale)
