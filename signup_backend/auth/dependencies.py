from collections.abc import Iterator
from dataclasses import dataclass

import jwt
from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from signup_backend.auth import jwt_handler
from signup_backend.auth.service import CredentialService
from signup_backend.core.config import Settings
from signup_backend.errors import AuthError
from signup_backend.store.users import UserStore


@dataclass(frozen=True)
class Identity:
    """Claims asserted by a verified session token."""

    id: int
    email: str
    name: str


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_db(request: Request) -> Iterator[Session]:
    with request.app.state.database.session() as db:
        yield db


def get_user_store(db: Session = Depends(get_db)) -> UserStore:
    return UserStore(db)


def get_credential_service(
    store: UserStore = Depends(get_user_store),
    settings: Settings = Depends(get_settings),
) -> CredentialService:
    return CredentialService(store, settings)


def authenticate(authorization: str | None, settings: Settings) -> Identity:
    """Resolve an ``Authorization`` header into the identity its token asserts.

    The store is not consulted, so the claims can be stale if the user
    record has changed since the token was minted.
    """
    if not authorization:
        raise AuthError("No token provided")

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer" or not parts[1]:
        raise AuthError("Invalid auth format")

    try:
        payload = jwt_handler.decode_access_token(parts[1], settings)
        return Identity(id=int(payload["id"]), email=payload["email"], name=payload["name"])
    except (jwt.PyJWTError, KeyError, TypeError, ValueError) as exc:
        raise AuthError("Invalid or expired token") from exc


def get_current_user(
    authorization: str | None = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> Identity:
    return authenticate(authorization, settings)
