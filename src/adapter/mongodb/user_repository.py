"""MongoDB implementation of UserRepository.

Login periods are embedded in the user document, so a period change and
the user's recomputed expiration are written by one ``update_one`` call.
"""

import uuid
from datetime import date, datetime, time, timezone
from logging import getLogger
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError
from adapter.mongodb.connection import USERS_COLLECTION_NAME
from domain.model.login_period import LoginPeriod
from domain.model.user import User

logger = getLogger(__name__)


def _to_datetime(value: date | None) -> datetime | None:
    # BSON has no date-only type
    if value is None:
        return None
    return datetime.combine(value, time.min)


def _to_date(value: datetime | None) -> date | None:
    if value is None:
        return None
    return value.date()


class MongoUserRepository:
    def __init__(self, db: Database):
        self.collection = db[USERS_COLLECTION_NAME]

    def ensure_indexes(self) -> bool:
        """Create indexes for users collection."""
        try:
            self.collection.create_index([('username', 1)], name='idx_users_username', unique=True)
            self.collection.create_index([('created_at', -1)], name='idx_users_created_at')
            return True
        except PyMongoError as e:
            logger.error("Failed to create users indexes", extra={"error": str(e)})
            return False

    # ── mapping ──────────────────────────────────────────────

    def _period_to_doc(self, period: LoginPeriod) -> dict:
        return {
            'id': period.id,
            'begin_date': _to_datetime(period.begin_date),
            'end_date': _to_datetime(period.end_date),
        }

    def _to_domain(self, doc: dict) -> User:
        """Convert MongoDB document to User domain model."""
        periods = [
            LoginPeriod(
                id=p['id'],
                user_id=doc['_id'],
                begin_date=_to_date(p['begin_date']),
                end_date=_to_date(p.get('end_date')),
            )
            for p in doc.get('login_periods', [])
        ]
        return User(
            id=doc['_id'],
            username=doc['username'],
            created_at=doc['created_at'],
            updated_at=doc['updated_at'],
            expiration=_to_date(doc.get('expiration')),
            login_periods=periods,
            version=doc.get('version', 0),
        )

    # ── write operations ─────────────────────────────────────

    def create(self, username: str) -> User | None:
        """Create a new user and return the User object."""
        try:
            user_id = uuid.uuid4().hex
            now = datetime.now(timezone.utc)
            user_doc = {
                '_id': user_id,
                'username': username,
                'created_at': now,
                'updated_at': now,
                'expiration': None,
                'login_periods': [],
                'version': 0,
            }
            self.collection.insert_one(user_doc)

            logger.info("User created", extra={"userId": user_id, "username": username})
            return self._to_domain(user_doc)
        except DuplicateKeyError:
            logger.warning("User creation failed: username already exists", extra={"username": username})
            return None
        except PyMongoError as e:
            logger.error("Failed to create user", extra={"username": username, "error": str(e)})
            return None

    def save(self, user: User) -> bool:
        """Write periods and expiration if the stored version still matches."""
        try:
            now = datetime.now(timezone.utc)
            result = self.collection.update_one(
                {'_id': user.id, 'version': user.version},
                {
                    '$set': {
                        'login_periods': [self._period_to_doc(p) for p in user.login_periods],
                        'expiration': _to_datetime(user.expiration),
                        'updated_at': now,
                    },
                    '$inc': {'version': 1},
                },
            )
            if result.matched_count == 0:
                logger.warning("Stale user version, save rejected", extra={
                    "userId": user.id, "version": user.version,
                })
                return False

            user.version += 1
            user.updated_at = now
            return True
        except PyMongoError as e:
            logger.error("Failed to save user", extra={"userId": user.id, "error": str(e)})
            return False

    # ── read operations ──────────────────────────────────────

    def get_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        try:
            doc = self.collection.find_one({'_id': user_id})
            return self._to_domain(doc) if doc else None
        except PyMongoError as e:
            logger.error("Failed to get user by ID", extra={"userId": user_id, "error": str(e)})
            return None

    def get_by_username(self, username: str) -> User | None:
        """Find a user by username. Return User or None if not found."""
        try:
            doc = self.collection.find_one({'username': username})
            return self._to_domain(doc) if doc else None
        except PyMongoError as e:
            logger.error("Failed to get user by username", extra={"username": username, "error": str(e)})
            return None
