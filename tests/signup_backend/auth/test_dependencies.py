from dataclasses import replace

import pytest

from signup_backend.auth import jwt_handler
from signup_backend.auth.dependencies import Identity, authenticate
from signup_backend.errors import AuthError


def _token(settings, **overrides) -> str:
    claims = {'sub': '7', 'id': 7, 'email': 'ana@x.com', 'name': 'Ana'}
    return jwt_handler.create_access_token(claims, settings, **overrides)


def test_authenticate_returns_identity_from_claims(settings) -> None:
    identity = authenticate(f'Bearer {_token(settings)}', settings)

    assert identity == Identity(id=7, email='ana@x.com', name='Ana')


@pytest.mark.parametrize(
    ('header', 'message'),
    [
        (None, 'No token provided'),
        ('', 'No token provided'),
        ('Token abc', 'Invalid auth format'),
        ('bearer abc', 'Invalid auth format'),
        ('Bearer', 'Invalid auth format'),
        ('Bearer a b', 'Invalid auth format'),
        ('Bearer garbage', 'Invalid or expired token'),
    ],
)
def test_authenticate_rejects_bad_headers(settings, header, message) -> None:
    with pytest.raises(AuthError) as exception_info:
        authenticate(header, settings)

    assert exception_info.value.message == message
    assert exception_info.value.status == 401


def test_authenticate_rejects_expired_token(settings) -> None:
    token = _token(settings, expires_minutes=-1)

    with pytest.raises(AuthError, match='Invalid or expired token'):
        authenticate(f'Bearer {token}', settings)


def test_authenticate_rejects_token_signed_with_other_secret(settings) -> None:
    other = replace(settings, jwt_secret_key='another-signing-secret-with-enough-bytes')
    token = _token(other)

    with pytest.raises(AuthError, match='Invalid or expired token'):
        authenticate(f'Bearer {token}', settings)


def test_authenticate_rejects_token_without_identity_claims(settings) -> None:
    token = jwt_handler.create_access_token({'sub': '7'}, settings)

    with pytest.raises(AuthError, match='Invalid or expired token'):
        authenticate(f'Bearer {token}', settings)
