from typing import Protocol
from domain.model.user import User


class UserRepository(Protocol):
    """Protocol defining the interface for user data access.

    Login periods are part of the user aggregate: they are loaded with the
    user and written back together with it by ``save``.
    """
    def create(self, username: str) -> User | None:
        """Create a new user. Return User or None if the username is taken."""
        ...

    def get_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        ...

    def get_by_username(self, username: str) -> User | None:
        """Find a user by username. Return User or None if not found."""
        ...

    def save(self, user: User) -> bool:
        """Persist the user with its periods and expiration in one write.

        Return False if the stored version no longer matches ``user.version``.
        On success ``user.version`` is incremented.
        """
        ...
