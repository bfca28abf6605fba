# domain/model/login_period.py

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date

from domain.model.errors import (
    ClosedPeriodError,
    ImmutableFieldError,
    IntervalError,
    OpenPeriodStartDateError,
    ValidationError,
)


def today() -> date:
    """Current wall-clock date. All period comparisons are date-only."""
    return date.today()


def check_interval(begin_date: date | None, end_date: date | None) -> None:
    """Raise unless begin_date is set and not after end_date (when present)."""
    if begin_date is None:
        raise ValidationError("beginDate cannot be null", kind='period.dates.required')
    if end_date is not None and begin_date > end_date:
        raise IntervalError(f"Begin date {begin_date} is after end date {end_date}")


@dataclass(eq=False)
class LoginPeriod:
    """A period in which the owning user is allowed to log in.

    A user may have several active periods at the same time, but at most
    one open period (a period without an end date).

    ``begin_date`` and ``end_date`` are write-once: after construction they
    can only change through :meth:`edit`.
    """

    _GUARDED_FIELDS = ('begin_date', 'end_date')

    user_id: str
    begin_date: date
    end_date: date | None = None
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def __post_init__(self):
        check_interval(self.begin_date, self.end_date)

    def __setattr__(self, name, value):
        if name in self._GUARDED_FIELDS and name in self.__dict__:
            raise ImmutableFieldError("Login period dates can only be changed through edit()")
        super().__setattr__(name, value)

    # ── factory ───────────────────────────────────────────

    @staticmethod
    def create(user_id: str, begin_date: date, end_date: date) -> 'LoginPeriod':
        """Create a period with exact dates. Both dates are required."""
        if begin_date is None or end_date is None:
            raise ValidationError("beginDate and endDate are required", kind='period.dates.required')
        return LoginPeriod(user_id=user_id, begin_date=begin_date, end_date=end_date)

    @staticmethod
    def open(user_id: str) -> 'LoginPeriod':
        """Create an open period starting today."""
        return LoginPeriod(user_id=user_id, begin_date=today())

    # ── queries ───────────────────────────────────────────

    @property
    def is_open(self) -> bool:
        return self.end_date is None

    def is_closed(self) -> bool:
        """Whether the end date is in the past."""
        return self.end_date is not None and self.end_date < today()

    def is_started(self) -> bool:
        """Whether the begin date is not in the future."""
        return self.begin_date <= today()

    def matches(self, begin_date: date | None, end_date: date | None) -> bool:
        """Whether this period has exactly the given dates."""
        return self.begin_date == begin_date and self.end_date == end_date

    # ── state transitions ─────────────────────────────────

    def check_editable(self, begin_date: date) -> None:
        """Raise if this period may not be edited to start on begin_date."""
        if self.is_closed():
            raise ClosedPeriodError()
        if begin_date != self.begin_date and self.is_started():
            raise OpenPeriodStartDateError()

    def edit(self, begin_date: date, end_date: date | None) -> None:
        """Change both dates.

        The begin date may only change while the period has not started, and
        closed periods cannot be edited at all.
        """
        self.check_editable(begin_date)
        check_interval(begin_date, end_date)
        object.__setattr__(self, 'begin_date', begin_date)
        object.__setattr__(self, 'end_date', end_date)
