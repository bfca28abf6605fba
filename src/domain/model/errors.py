"""Domain-level exceptions.

Services raise these errors to express business rule violations.
Each error carries a stable ``kind`` that callers translate into
user-facing messages.
"""


class DomainError(Exception):
    """Base class for all domain errors."""

    kind = 'domain.error'

    def __init__(self, message: str | None = None, *args: str, kind: str | None = None):
        if kind is not None:
            self.kind = kind
        self.params = args
        super().__init__(message or self.kind)


class NotFoundError(DomainError):
    """Requested entity does not exist."""

    kind = 'not.found'


class ValidationError(DomainError):
    """Input violates a business validation rule."""

    kind = 'invalid.input'


class IntervalError(ValidationError):
    """Begin date falls after end date."""

    kind = 'invalid.period.interval'


class ClosedPeriodError(DomainError):
    """Closed login periods cannot be edited."""

    kind = 'cannot.edit.closed.login'


class OpenPeriodStartDateError(DomainError):
    """The begin date of a started period cannot change."""

    kind = 'cannot.edit.open.period.start.date'


class StartedPeriodError(DomainError):
    """Started login periods cannot be deleted."""

    kind = 'cannot.delete.started.login.period'


class ImmutableFieldError(DomainError):
    """Period dates may only change through edit."""

    kind = 'cannot.overwrite.period.dates'


class ConcurrentModificationError(DomainError):
    """The user record changed in the store since it was loaded."""

    kind = 'concurrent.modification'
