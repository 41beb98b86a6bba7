"""
Account Management Module

The account is the entry point of the system. It validates user input
before committing it to the ledger that holds the account history, and
serializes every operation so that a balance check and the entry it
guards can never interleave with another call.
"""

from datetime import date, datetime
from typing import Callable, List, NoReturn, Optional
from zoneinfo import ZoneInfo
import logging
import threading
import uuid

from .config import get_config
from .entry import Entry
from .events import DomainEvent, EventDispatcher, create_account_event
from .ledger import Ledger
from .logging_config import log_action
from .periods import Period


Clock = Callable[[], date]


def today() -> date:
    """Current calendar day in the configured timezone, or the local day if none is set"""
    zone = get_config().timezone
    if zone:
        return datetime.now(ZoneInfo(zone)).date()
    return date.today()


class Account:
    """
    Bank account backed by a ledger

    Amounts are integers in cents. All public operations are mutually
    exclusive on a given account.
    """

    def __init__(
        self,
        creation_date: date,
        clock: Optional[Clock] = None,
        event_dispatcher: Optional[EventDispatcher] = None,
        account_id: Optional[str] = None
    ):
        self.id = account_id or str(uuid.uuid4())
        self._ledger = Ledger(creation_date)
        self._clock = clock or today
        self._lock = threading.RLock()
        self._event_dispatcher = event_dispatcher
        self.logger = logging.getLogger("bank_account.accounts")

        self._publish_event(DomainEvent.ACCOUNT_CREATED, {
            "creation_date": creation_date.isoformat()
        })

    @property
    def creation_date(self) -> date:
        return self._ledger.creation_date

    def _publish_event(self, event_type: DomainEvent, data: dict) -> None:
        """Publish a domain event if an event dispatcher is available"""
        if not self._event_dispatcher or not get_config().enable_events:
            return
        try:
            self._event_dispatcher.publish(create_account_event(event_type, self.id, data))
        except Exception as e:
            # Log but don't fail the operation
            self.logger.error(f"Failed to publish {event_type.value} for account {self.id}: {e}")

    def _reject(self, action: str, message: str, **extra) -> NoReturn:
        log_action(self.logger, "warning", message, account_id=self.id,
                   action=action, extra=extra or None)
        raise ValueError(message)

    def deposit(self, amount_in_cents: int) -> None:
        """
        Deposit money on the account

        Args:
            amount_in_cents: Amount to deposit, in cents

        Raises:
            ValueError: If the amount is less than or equal to zero
        """
        with self._lock:
            if amount_in_cents <= 0:
                self._reject("deposit", "The amount of money to deposit must be greater than zero",
                             amount=amount_in_cents)

            recorded = self._ledger.add_entry(amount_in_cents, self._clock())

            log_action(self.logger, "info", "Deposit recorded", account_id=self.id,
                       action="deposit", extra=recorded.to_dict())
            self._publish_event(DomainEvent.DEPOSIT_MADE, recorded.to_dict())

    def withdraw(self, amount_in_cents: int) -> None:
        """
        Withdraw money from the account

        Args:
            amount_in_cents: Amount to withdraw, in cents

        Raises:
            ValueError: If the amount is less than or equal to zero or greater
                than the current balance of the account
        """
        with self._lock:
            if amount_in_cents <= 0:
                self._reject("withdraw", "The amount of money to withdraw must be greater than zero",
                             amount=amount_in_cents)

            current_balance = self._ledger.balance()
            if amount_in_cents > current_balance:
                self._reject("withdraw",
                             f"Insufficient funds: cannot withdraw {amount_in_cents} "
                             f"from a balance of {current_balance}",
                             amount=amount_in_cents, balance=current_balance)

            recorded = self._ledger.add_entry(-amount_in_cents, self._clock())

            log_action(self.logger, "info", "Withdrawal recorded", account_id=self.id,
                       action="withdraw", extra=recorded.to_dict())
            self._publish_event(DomainEvent.WITHDRAWAL_MADE, recorded.to_dict())

    def statement(self, start: date, period: Optional[Period] = None) -> List[Entry]:
        """
        Produce a statement for a period of time

        Args:
            start: Start date of the period, included
            period: Period of time to include after the start date, the
                configured default statement period if omitted

        Returns:
            The entries of the period, newest first, followed by an entry
            with a nil amount carrying the balance from before the period.
            Empty if the period ends before the creation of the account.

        Raises:
            ValueError: If the period ends in the future
        """
        if period is None:
            period = get_config().statement_period

        with self._lock:
            end = start + period
            if end > self._clock():
                self._reject("statement", "Cannot create a statement in the future",
                             start=start.isoformat(), end=end.isoformat())

            result = self._ledger.statement_for(start, period)

            self._publish_event(DomainEvent.STATEMENT_GENERATED, {
                "start": start.isoformat(),
                "end": end.isoformat(),
                "entry_count": len(result)
            })
            return result

    def balance(self) -> int:
        """Get the current balance of the account, in cents"""
        with self._lock:
            return self._ledger.balance()
