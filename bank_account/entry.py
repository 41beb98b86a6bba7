"""
Ledger Entry Module

An entry records one balance-affecting event on an account: the signed
amount in minor currency units (cents), the account balance once the
entry is applied, and the day it takes effect. Entries are immutable
values; all invariants are enforced by the ledger that holds them.
"""

from dataclasses import dataclass
from datetime import date as Date
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Entry:
    """
    Immutable record of a deposit, a withdrawal, or an opening balance marker
    Equality and hashing are by value
    """
    amount: int   # Signed delta in cents, 0 for opening balance markers
    balance: int  # Balance after the entry is applied
    date: Date

    @property
    def is_deposit(self) -> bool:
        return self.amount > 0

    @property
    def is_withdrawal(self) -> bool:
        return self.amount < 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging and event payloads"""
        return {
            'amount': self.amount,
            'balance': self.balance,
            'date': self.date.isoformat()
        }

    def __repr__(self) -> str:
        return f"Entry[date={self.date.isoformat()},amount={self.amount},balance={self.balance}]"


def entry(amount: int, balance: int, date: Optional[Date] = None) -> Entry:
    """
    Create an entry, dated today unless a date is given

    Args:
        amount: Signed amount in cents
        balance: Balance after the entry
        date: Effective day of the entry

    Returns:
        New Entry
    """
    return Entry(amount, balance, date if date is not None else Date.today())


def opening_balance(date: Date, balance: int) -> Entry:
    """Create the zero-amount marker carrying the balance before a statement window"""
    return Entry(0, balance, date)
