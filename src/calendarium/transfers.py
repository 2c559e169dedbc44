import logging

from .celebrations import Rank
from .errors import CalendarError


logger = logging.getLogger(__name__)


class Transfers:
    """Sanctoral solemnities impeded by a temporal celebration of equal or
    higher rank, moved to the next free day of the same liturgical year.
    """

    def __init__(self, temporale, sanctorale):
        self._temporale = temporale
        self._sanctorale = sanctorale
        self._transferred = {}

        impeded = []
        for (month, day) in sanctorale.solemnities():
            try:
                impeded.append(temporale.concretize(month, day))
            except CalendarError:
                # 29 Feb in a year without one.
                continue

        for date in sorted(impeded):
            self._transfer(date)

    def _transfer(self, date):
        celebrations = self._sanctorale.get(date)
        if len(celebrations) != 1:
            return
        loser = celebrations[0]
        temporal = self._temporale.get(date)
        if temporal.rank < loser.rank:
            return

        transfer_to = date + 1
        while self._temporale.contains(transfer_to):
            if self._valid_destination(transfer_to, loser):
                logger.debug("Transferring %s from %s to %s", loser, date,
                             transfer_to)
                self._transferred[transfer_to] = loser
                return
            transfer_to += 1

        logger.debug("No room for %s in liturgical year %d", loser,
                     self._temporale.year)

    def _valid_destination(self, date, celebration):
        if date in self._transferred:
            return False
        if self._temporale.get(date).rank >= celebration.rank:
            return False
        # A feast or solemnity of its own keeps the day.
        return all(c.rank < Rank.FEAST_PROPER
                   for c in self._sanctorale.get(date))

    def __iter__(self):
        return iter(sorted(self._transferred.items()))

    def __len__(self):
        return len(self._transferred)

    def get(self, date):
        return self._transferred.get(date)
