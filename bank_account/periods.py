"""
Calendar Period Module

Date-based amounts of time expressed in years, months and days. Statements
are requested over a window that starts on a given day and spans one of these
periods, so the arithmetic follows calendar rules rather than fixed
day counts: adding one month to January 31st lands on the last day of
February.
"""

from dataclasses import dataclass
from datetime import date, timedelta
import calendar
import re


_ISO_PERIOD = re.compile(
    r"^([-+]?)P(?:([-+]?\d+)Y)?(?:([-+]?\d+)M)?(?:([-+]?\d+)W)?(?:([-+]?\d+)D)?$",
    re.IGNORECASE
)


def add_months(value: date, months: int) -> date:
    """
    Shift a date by a number of calendar months

    The day of month is clamped to the last valid day of the target month.
    """
    if months == 0:
        return value

    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


@dataclass(frozen=True)
class Period:
    """
    Immutable (years, months, days) offset applied to calendar dates
    """
    years: int = 0
    months: int = 0
    days: int = 0

    @classmethod
    def of(cls, years: int = 0, months: int = 0, days: int = 0) -> 'Period':
        return cls(years, months, days)

    @classmethod
    def of_days(cls, days: int) -> 'Period':
        return cls(days=days)

    @classmethod
    def of_weeks(cls, weeks: int) -> 'Period':
        return cls(days=weeks * 7)

    @classmethod
    def of_months(cls, months: int) -> 'Period':
        return cls(months=months)

    @classmethod
    def of_years(cls, years: int) -> 'Period':
        return cls(years=years)

    @classmethod
    def parse(cls, text: str) -> 'Period':
        """
        Parse an ISO 8601 date-based period such as ``P1Y2M3D`` or ``P2W``

        Args:
            text: Period text, optionally prefixed with a sign

        Returns:
            Parsed Period

        Raises:
            ValueError: If the text is not a date-based ISO 8601 period
        """
        if not text or not isinstance(text, str):
            raise ValueError("Period must be a non-empty string")

        match = _ISO_PERIOD.match(text.strip())
        if not match or not any(match.group(i) for i in range(2, 6)):
            raise ValueError(f"Cannot parse '{text}' as a period")

        sign = -1 if match.group(1) == "-" else 1
        years, months, weeks, days = (int(match.group(i) or 0) for i in range(2, 6))

        return cls(
            years=sign * years,
            months=sign * months,
            days=sign * (weeks * 7 + days)
        )

    @property
    def total_months(self) -> int:
        return self.years * 12 + self.months

    def is_zero(self) -> bool:
        """Check if the period has no length"""
        return self.years == 0 and self.months == 0 and self.days == 0

    def is_negative(self) -> bool:
        """Check if any component is negative"""
        return self.years < 0 or self.months < 0 or self.days < 0

    def negated(self) -> 'Period':
        return Period(-self.years, -self.months, -self.days)

    def add_to(self, value: date) -> date:
        """
        Add this period to a date

        Years and months are applied together as a month count, then days.
        """
        shifted = add_months(value, self.total_months)
        if self.days:
            shifted = shifted + timedelta(days=self.days)
        return shifted

    def subtract_from(self, value: date) -> date:
        """Subtract this period from a date"""
        return self.negated().add_to(value)

    def __radd__(self, other):
        if isinstance(other, date):
            return self.add_to(other)
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, date):
            return self.subtract_from(other)
        return NotImplemented

    def __neg__(self) -> 'Period':
        return self.negated()

    def __str__(self) -> str:
        if self.is_zero():
            return "P0D"

        parts = ["P"]
        if self.years:
            parts.append(f"{self.years}Y")
        if self.months:
            parts.append(f"{self.months}M")
        if self.days:
            parts.append(f"{self.days}D")
        return "".join(parts)
