"""MongoDB connection for the user store, configured from the environment."""

import os
import logging
from pymongo import MongoClient
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)
logging.getLogger('pymongo').setLevel(logging.WARNING)

DEFAULT_DATABASE_NAME = 'access'
USERS_COLLECTION_NAME = 'users'

_client: MongoClient | None = None


def get_mongo_url() -> str | None:
    return os.getenv('MONGO_URL')


def get_database_name() -> str:
    return os.getenv('MONGODB_DATABASE', DEFAULT_DATABASE_NAME)


def get_mongodb_client() -> MongoClient | None:
    """Return a pinged client, reusing the cached one while it stays healthy.

    Returns None when MONGO_URL is unset or the server cannot be reached.
    """
    global _client

    if _client is not None:
        try:
            _client.admin.command('ping')
            return _client
        except PyMongoError:
            logger.warning("Cached MongoDB client failed ping, reconnecting")
            _client = None

    mongo_url = get_mongo_url()
    if not mongo_url:
        logger.error("MONGO_URL not configured")
        return None

    try:
        client = MongoClient(mongo_url, serverSelectionTimeoutMS=5000, retryWrites=True)
        client.admin.command('ping')
    except PyMongoError as e:
        logger.error("MongoDB connection failed", extra={"error": str(e)[:200]})
        return None

    logger.info("Connected to MongoDB", extra={"database": get_database_name()})
    _client = client
    return client
