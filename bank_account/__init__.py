"""
Bank Account Ledger

A single bank account with an append-only, date-ordered ledger of deposits
and withdrawals, integer minor-unit amounts, and historical statements over
arbitrary calendar periods.
"""

from .accounts import Account
from .entry import Entry, entry, opening_balance
from .ledger import Ledger, ledger
from .periods import Period

__version__ = "1.0.0"

__all__ = [
    "Account",
    "Entry",
    "Ledger",
    "Period",
    "entry",
    "ledger",
    "opening_balance",
]
