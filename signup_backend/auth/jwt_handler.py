from datetime import datetime, timedelta, timezone

import jwt

from signup_backend.core.config import Settings


def create_access_token(claims: dict, settings: Settings, expires_minutes: int | None = None) -> str:
    expire_minutes = settings.jwt_expires_minutes if expires_minutes is None else expires_minutes
    now = datetime.now(timezone.utc)
    payload = {**claims, "exp": now + timedelta(minutes=expire_minutes), "iat": now}
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings) -> dict:
    return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
