"""Persistence operations for user records.

Every query is built with SQLAlchemy constructs, so values always travel as
bound parameters.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from signup_backend.database import Base, Database
from signup_backend.errors import ConflictError
from signup_backend.models.user import User

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MESSAGE = "Email already registered"


class UserStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_email(self, email: str) -> User | None:
        return self.db.execute(select(User).where(User.email == email)).scalars().first()

    def find_by_id(self, user_id: int) -> User | None:
        return self.db.get(User, user_id)

    def email_exists(self, email: str) -> bool:
        return self.db.execute(select(User.id).where(User.email == email)).first() is not None

    def insert(self, name: str, email: str, password_hash: str) -> int:
        """Insert a user and return its generated id.

        Raises ``ConflictError`` when the unique constraint on ``email``
        rejects the row, which covers two signups racing past the
        existence check.
        """
        user = User(name=name, email=email, password_hash=password_hash)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise ConflictError(DUPLICATE_EMAIL_MESSAGE) from exc
        self.db.refresh(user)
        return user.id

    @staticmethod
    def ensure_schema(database: Database) -> None:
        Base.metadata.create_all(bind=database.engine, tables=[User.__table__])
        logger.info("Table %s is ready", User.__tablename__)
