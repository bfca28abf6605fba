"""Username service — picks usernames that no existing user has.

The active generation strategy is held by a UsernameService instance and
can be replaced at startup with ``configure``.
"""

import logging
from typing import Any

from adapter.username.sequential import SequentialUsernameGenerator
from port.user_repository import UserRepository
from port.username_generator import UsernameGenerator

logger = logging.getLogger(__name__)


def generate_username(repo: UserRepository, generator: UsernameGenerator, parameter: Any = None) -> str:
    """Ask ``generator`` for candidates until one is not taken.

    There is no retry limit: a strategy that only produces taken names
    makes this loop forever.
    """
    while True:
        username = generator.do_generate(parameter)
        if repo.get_by_username(username) is None:
            logger.debug("Generated username %s for %s", username, parameter)
            return username
        logger.debug("Username %s already taken, retrying", username)


class UsernameService:
    def __init__(self, repo: UserRepository, generator: UsernameGenerator | None = None):
        self.repo = repo
        self.generator = generator or SequentialUsernameGenerator()

    def configure(self, generator: UsernameGenerator) -> None:
        """Replace the active strategy. Usernames already handed out are unaffected."""
        logger.debug("Setting UsernameGenerator to: %s", generator)
        self.generator = generator

    def generate(self, parameter: Any = None) -> str:
        return generate_username(self.repo, self.generator, parameter)
