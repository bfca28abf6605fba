from dataclasses import dataclass, field
from datetime import date, datetime

from domain.model.login_period import LoginPeriod, today


@dataclass
class User:
    """Domain model representing a user and its login periods."""
    id: str
    username: str
    created_at: datetime
    updated_at: datetime
    expiration: date | None = None
    login_periods: list[LoginPeriod] = field(default_factory=list)
    version: int = 0

    # ── queries ───────────────────────────────────────────

    @property
    def open_period(self) -> LoginPeriod | None:
        """The period without an end date, if any. There is at most one."""
        for period in self.login_periods:
            if period.end_date is None:
                return period
        return None

    def get_period(self, period_id: str) -> LoginPeriod | None:
        for period in self.login_periods:
            if period.id == period_id:
                return period
        return None

    def is_login_expired(self) -> bool:
        """Whether the user's access ended before today."""
        return self.expiration is not None and self.expiration < today()

    # ── state transitions ─────────────────────────────────

    def add_period(self, period: LoginPeriod) -> None:
        self.login_periods.append(period)

    def remove_period(self, period: LoginPeriod) -> None:
        self.login_periods.remove(period)

    def recompute_expiration(self) -> date | None:
        """Derive expiration from the current set of periods.

        An open period means no expiration. Otherwise the expiration is the
        latest end date. With no periods at all the previous value is kept.
        """
        if not self.login_periods:
            return self.expiration

        latest = None
        for period in self.login_periods:
            if period.end_date is None:
                latest = None
                break
            if latest is None or latest < period.end_date:
                latest = period.end_date
        self.expiration = latest
        return latest
