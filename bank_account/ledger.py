"""
Account Ledger Engine

Append-only, date-ordered history of the entries recorded on a single
account. The ledger is seeded with a zero entry on the account creation
date; every later entry carries the running balance, so the latest entry
always holds the current balance and historical balances are read back
from the history instead of being recomputed.
"""

from datetime import date
from typing import Iterator, List, Tuple
import logging

from .entry import Entry, opening_balance
from .periods import Period


class Ledger:
    """
    Chronological ledger of entries for one account

    Entries are only ever pushed on top of the history. Index 0 is the
    creation entry and the last index is the most recent entry.
    """

    def __init__(self, creation_date: date):
        self._entries: List[Entry] = [opening_balance(creation_date, 0)]
        self.logger = logging.getLogger("bank_account.ledger")

    @property
    def creation_date(self) -> date:
        """Date of the seed entry"""
        return self._entries[0].date

    def latest(self) -> Entry:
        """Get the most recently appended entry"""
        return self._entries[-1]

    def entries(self) -> Tuple[Entry, ...]:
        """Get a snapshot of the history, oldest first"""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries())

    def add_entry(self, amount: int, entry_date: date) -> Entry:
        """
        Add an entry on top of the ledger

        Args:
            amount: Signed delta of the entry, in cents
            entry_date: Effective day of the entry

        Returns:
            The appended Entry

        Raises:
            ValueError: If the date is before the date of the latest entry
        """
        latest = self.latest()
        if entry_date < latest.date:
            raise ValueError(
                f"Cannot add an entry dated {entry_date.isoformat()} "
                f"before the latest entry dated {latest.date.isoformat()}"
            )

        new_entry = Entry(amount, latest.balance + amount, entry_date)
        self._entries.append(new_entry)

        self.logger.debug(f"Recorded {new_entry!r}")
        return new_entry

    def balance(self) -> int:
        """Get the balance after the latest entry"""
        return self._entries[-1].balance

    def statement_for(self, start: date, period: Period) -> List[Entry]:
        """
        Produce a statement for a time period

        The window is ``[start, start + period]`` with both ends included.

        Args:
            start: First day of the window
            period: Length of the window

        Returns:
            Entries of the window, newest first, followed by an opening
            balance marker dated ``start`` that carries the balance from
            before the window. Empty if the whole window predates the
            creation of the ledger.
        """
        end = start + period

        if start > self.latest().date:
            return [opening_balance(start, self.balance())]

        if end < self.creation_date:
            return []

        result: List[Entry] = []

        i = len(self._entries) - 1
        while i > 0:
            current = self._entries[i]

            if current.date < start:
                break
            if current.date <= end:
                result.append(current)
            i -= 1

        result.append(opening_balance(start, self._entries[i].balance))

        self.logger.debug(
            f"Statement {start.isoformat()}..{end.isoformat()}: "
            f"{len(result) - 1} entries, opening balance {self._entries[i].balance}"
        )
        return result


def ledger(creation_date: date) -> Ledger:
    """Create a ledger seeded with a zero balance on the creation date"""
    return Ledger(creation_date)
