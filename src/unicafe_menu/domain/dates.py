"""Menu dates anchored to the Unicafe fixed UTC+2 offset."""

import calendar
import re
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta, timezone

from unicafe_menu.domain.errors import DecodeError

UNICAFE_TZ = timezone(timedelta(hours=2))

_DATE_PATTERN = re.compile(r"[^\W\d_]+ ([0-9]{1,2})\.([0-9]{1,2})")

_FINNISH_WEEKDAYS = ("Ma", "Ti", "Ke", "To", "Pe", "La", "Su")


@dataclass(frozen=True)
class MenuDate:
    """Calendar date of a menu as observed at UTC+2."""

    value: date

    @classmethod
    def today(cls, now: datetime | None = None) -> "MenuDate":
        """Return the current date at UTC+2, ignoring the host timezone."""
        current = now or datetime.now(tz=UTC)
        return cls(current.astimezone(UNICAFE_TZ).date())

    @classmethod
    def decode(cls, text: str, today: "MenuDate | None" = None) -> "MenuDate":
        """Parse ``"<weekday> <day>.<month>"``; the year comes from today.

        The weekday word is not checked against the resulting date.
        """
        match = _DATE_PATTERN.fullmatch(text)
        if match is None:
            raise DecodeError("no date found")
        day = int(match.group(1))
        month = int(match.group(2))
        year = (today or cls.today()).value.year
        if not 1 <= month <= 12:
            raise DecodeError("invalid month")
        if not 1 <= day <= calendar.monthrange(year, month)[1]:
            raise DecodeError("invalid day")
        return cls(date(year, month, day))

    @property
    def weekday_abbrev(self) -> str:
        """Two-letter Finnish weekday abbreviation."""
        return _FINNISH_WEEKDAYS[self.value.weekday()]

    def format(self) -> str:
        """Render as ``"Ma 3.11"``."""
        return f"{self.weekday_abbrev} {self.value.day}.{self.value.month}"

    def __str__(self) -> str:
        return self.format()
