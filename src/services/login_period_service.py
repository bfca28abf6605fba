"""Login period service — manages when a user is allowed to log in.

Pure business logic with no storage dependencies beyond the UserRepository
port. Every operation validates first, mutates the loaded user in memory
and then writes it back with a single ``repo.save`` so the period change
and the recomputed expiration are stored together.

Raises domain errors that callers translate into user-facing messages.
"""

import logging
from datetime import date

from domain.model.errors import (
    ConcurrentModificationError,
    NotFoundError,
    StartedPeriodError,
    ValidationError,
)
from domain.model.login_period import LoginPeriod, today
from domain.model.user import User
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)


def _load_user(repo: UserRepository, user_id: str) -> User:
    user = repo.get_by_id(user_id)
    if user is None:
        raise NotFoundError(f"User {user_id} not found", kind='user.not.found')
    return user


def _find_period(user: User, period_id: str) -> LoginPeriod:
    period = user.get_period(period_id)
    if period is None:
        raise NotFoundError(f"Login period {period_id} not found", kind='login.period.not.found')
    return period


def _save(repo: UserRepository, user: User) -> None:
    if not repo.save(user):
        raise ConcurrentModificationError(f"User {user.id} was modified concurrently")


def get_period(repo: UserRepository, user_id: str, period_id: str) -> LoginPeriod:
    """Return a user's period by ID.

    Raises:
        NotFoundError: unknown user or period
    """
    return _find_period(_load_user(repo, user_id), period_id)


def create_period(
    repo: UserRepository,
    user_id: str,
    begin_date: date,
    end_date: date,
) -> LoginPeriod:
    """Create a period with exact dates and recompute the user's expiration.

    Raises:
        ValidationError: a date is missing
        IntervalError: begin_date is after end_date
        NotFoundError: unknown user
    """
    period = LoginPeriod.create(user_id, begin_date, end_date)
    user = _load_user(repo, user_id)

    user.add_period(period)
    user.recompute_expiration()
    _save(repo, user)

    logger.info("Login period created", extra={
        "userId": user_id, "periodId": period.id,
        "beginDate": str(begin_date), "endDate": str(end_date),
    })
    return period


def create_open_period(repo: UserRepository, user_id: str) -> LoginPeriod:
    """Return the user's open period, creating one starting today if needed."""
    user = _load_user(repo, user_id)
    existing = user.open_period
    if existing is not None:
        return existing

    period = LoginPeriod.open(user_id)
    user.add_period(period)
    # An open period means the user never expires
    user.expiration = None
    _save(repo, user)

    logger.info("Open login period created", extra={"userId": user_id, "periodId": period.id})
    return period


def close_open_period(repo: UserRepository, user_id: str) -> LoginPeriod | None:
    """Close the user's open period as of today. Does nothing if there is none."""
    user = _load_user(repo, user_id)
    period = user.open_period
    if period is None:
        return None

    period.edit(period.begin_date, today())
    user.recompute_expiration()
    _save(repo, user)

    logger.info("Open login period closed", extra={"userId": user_id, "periodId": period.id})
    return period


def edit_period(
    repo: UserRepository,
    user_id: str,
    period_id: str,
    begin_date: date,
    end_date: date | None,
) -> LoginPeriod:
    """Change a period's dates and recompute the user's expiration.

    Raises:
        ClosedPeriodError: the period already ended
        OpenPeriodStartDateError: begin_date changes on a started period
        IntervalError: begin_date is after end_date
        ValidationError: begin_date missing, or a second open period would result
        NotFoundError: unknown user or period
    """
    user = _load_user(repo, user_id)
    period = _find_period(user, period_id)

    period.check_editable(begin_date)
    if end_date is None:
        current_open = user.open_period
        if current_open is not None and current_open is not period:
            raise ValidationError(
                f"User {user_id} already has an open login period",
                kind='user.already.has.open.period',
            )

    period.edit(begin_date, end_date)
    user.recompute_expiration()
    _save(repo, user)

    logger.info("Login period edited", extra={
        "userId": user_id, "periodId": period_id,
        "beginDate": str(begin_date), "endDate": str(end_date),
    })
    return period


def delete_period(repo: UserRepository, user_id: str, period_id: str) -> None:
    """Delete a period that has not started yet.

    Raises:
        StartedPeriodError: the period's begin date is today or earlier
        NotFoundError: unknown user or period
    """
    user = _load_user(repo, user_id)
    period = _find_period(user, period_id)

    if period.is_started():
        raise StartedPeriodError()

    user.remove_period(period)
    user.recompute_expiration()
    _save(repo, user)

    logger.info("Login period deleted", extra={"userId": user_id, "periodId": period_id})


def recompute_expiration(repo: UserRepository, user_id: str) -> date | None:
    """Recompute and store the user's expiration from its periods.

    A user with no periods keeps its previous expiration.
    """
    user = _load_user(repo, user_id)
    expiration = user.recompute_expiration()
    _save(repo, user)
    return expiration
