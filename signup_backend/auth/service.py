"""Signup and login: field validation, password hashing and token issuance."""

import logging
from dataclasses import dataclass

from signup_backend.auth import jwt_handler
from signup_backend.auth.password import MAX_PASSWORD_BYTES, hash_password, verify_password
from signup_backend.core.config import Settings
from signup_backend.errors import AuthError, ConflictError, ValidationError
from signup_backend.models.user import User
from signup_backend.store.users import DUPLICATE_EMAIL_MESSAGE, UserStore

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"


@dataclass(frozen=True)
class LoginResult:
    token: str
    user: dict


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def token_claims(user: User) -> dict:
    return {"sub": str(user.id), "id": user.id, "email": user.email, "name": user.name}


class CredentialService:
    def __init__(self, store: UserStore, settings: Settings) -> None:
        self.store = store
        self.settings = settings

    def validate_signup(self, name: str | None, email: str | None, password: str | None) -> None:
        if _is_blank(name) or _is_blank(email) or not password:
            raise ValidationError("name, email, password required")
        if len(password) < self.settings.min_password_length:
            raise ValidationError(
                f"Password must be at least {self.settings.min_password_length} characters long"
            )
        if len(password.encode()) > MAX_PASSWORD_BYTES:
            raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes long")

    def signup(self, name: str | None, email: str | None, password: str | None) -> int:
        """Register a user and return the new id.

        The existence check gives the common duplicate case a clean error;
        ``UserStore.insert`` still maps a unique-constraint rejection to the
        same ``ConflictError``.
        """
        self.validate_signup(name, email, password)
        name, email = name.strip(), email.strip()

        if self.store.email_exists(email):
            raise ConflictError(DUPLICATE_EMAIL_MESSAGE)

        hashed = hash_password(password, self.settings.salt_rounds)
        user_id = self.store.insert(name, email, hashed)
        logger.info("Created user %s", user_id)
        return user_id

    def login(self, email: str | None, password: str | None) -> LoginResult:
        if _is_blank(email) or not password:
            raise ValidationError("email and password required")

        user = self.store.find_by_email(email.strip())
        if user is None or not verify_password(password, user.password_hash):
            logger.info("Rejected login attempt")
            raise AuthError(INVALID_CREDENTIALS_MESSAGE)

        token = jwt_handler.create_access_token(token_claims(user), self.settings)
        return LoginResult(token=token, user=user.to_public_dict())
