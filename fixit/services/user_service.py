import json
from typing import Any, Dict, List, Optional

from pydantic import ValidationError
from sqlalchemy.orm import Session

from fixit.constants.repair import INITIAL_USERS, ROLE_USER
from fixit.core.logging_config import get_logger
from fixit.models.models import User
from fixit.schemas.user_schemas import UserCreate, UserOut

logger = get_logger(__name__)

BULK_CSV_FIELDS = ["user", "pass", "name", "role", "position", "dept"]


def parse_bulk_users(content: str) -> List[UserCreate]:
    """
    Parse a bulk import payload.

    The payload is either a JSON array of user objects or one CSV line per
    user (user,pass,name,role,position,dept; role defaults to "user").
    Entries without a username are skipped. Anything else that does not
    validate raises ValueError and nothing is imported.
    """
    try:
        raw = json.loads(content)
    except json.JSONDecodeError:
        entries: List[Dict[str, Any]] = []
        for line in content.strip().splitlines():
            if not line.strip():
                continue
            values = [s.strip() for s in line.split(",")]
            entry = dict(zip(BULK_CSV_FIELDS, values))
            entry["role"] = entry.get("role") or ROLE_USER
            entries.append(entry)
    else:
        if not isinstance(raw, list):
            raise ValueError("bulk import JSON must be an array of users")
        entries = raw

    users: List[UserCreate] = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise ValueError(f"not a user object: {entry!r}")
        if not (entry.get("user") or entry.get("username")):
            continue
        try:
            users.append(UserCreate.model_validate(entry))
        except ValidationError as e:
            raise ValueError(str(e)) from e
    return users


class UserService:
    @staticmethod
    def get_users(db: Session) -> List[User]:
        return db.query(User).order_by(User.username).all()

    @staticmethod
    def get_user(db: Session, username: str) -> Optional[User]:
        return db.get(User, username)

    @staticmethod
    def save_user(db: Session, user_in: UserCreate) -> User:
        """Create or overwrite the user keyed by username"""
        db_user = db.merge(User(**user_in.model_dump()))
        db.commit()
        return db_user

    @staticmethod
    def bulk_add_users(db: Session, users: List[UserCreate]) -> int:
        """Write all users in one transaction"""
        for user_in in users:
            db.merge(User(**user_in.model_dump()))
        db.commit()
        return len(users)

    @staticmethod
    def delete_user(db: Session, username: str) -> bool:
        db_user = db.get(User, username)
        if db_user is None:
            return False
        db.delete(db_user)
        db.commit()
        return True

    @staticmethod
    def init_auth(db: Session) -> int:
        """Seed the initial accounts when the users table is empty"""
        if db.query(User).count() > 0:
            return 0
        users = [UserCreate.model_validate(u) for u in INITIAL_USERS]
        count = UserService.bulk_add_users(db, users)
        logger.info("Seeded %d initial users", count)
        return count

    @staticmethod
    def authenticate(db: Session, username: str, password: str) -> Optional[UserOut]:
        """Plaintext comparison; returns the public record without the password"""
        db_user = db.get(User, username)
        if db_user is None or db_user.password != password:
            return None
        return UserOut.model_validate(db_user)
