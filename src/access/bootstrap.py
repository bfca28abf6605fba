"""Startup wiring for the login access services."""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from adapter.mongodb.connection import get_database_name, get_mongodb_client
from adapter.mongodb.user_repository import MongoUserRepository
from adapter.username.sequential import DEFAULT_PREFIX, SequentialUsernameGenerator
from domain.model.errors import DomainError
from port.user_repository import UserRepository
from services.username_service import UsernameService
from utils.logging import setup_structured_logging

logger = logging.getLogger(__name__)


@dataclass
class AccessContext:
    """Long-lived collaborators shared by callers of the services."""
    repo: UserRepository
    usernames: UsernameService


def build_username_service(repo: UserRepository) -> UsernameService:
    """Build the username service with the default strategy configured from env."""
    service = UsernameService(repo)
    service.configure(SequentialUsernameGenerator(prefix=os.getenv('USERNAME_PREFIX', DEFAULT_PREFIX)))
    return service


def bootstrap(repo: UserRepository | None = None) -> AccessContext:
    """Load .env, set up logging and connect the user store.

    Raises:
        DomainError: no repo was given and MongoDB is unavailable
    """
    # Must run before anything reads env vars
    load_dotenv()
    setup_structured_logging()

    if repo is None:
        client = get_mongodb_client()
        if client is None:
            raise DomainError("Database unavailable", kind='database.unavailable')
        mongo_repo = MongoUserRepository(client[get_database_name()])
        if not mongo_repo.ensure_indexes():
            logger.warning("Failed to create some MongoDB indexes")
        repo = mongo_repo

    logger.info("Access services ready", extra={"repository": type(repo).__name__})
    return AccessContext(repo=repo, usernames=build_username_service(repo))
