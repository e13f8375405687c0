import pytest
from fastapi.testclient import TestClient

from signup_backend.core.config import Settings
from signup_backend.database import Database
from signup_backend.main import create_app
from signup_backend.store.users import UserStore


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        database_url=f'sqlite:///{tmp_path / "signup.db"}',
        jwt_secret_key='test-signing-secret-with-enough-bytes',
        salt_rounds=4,
    )


@pytest.fixture
def database(settings: Settings):
    database = Database(settings)
    UserStore.ensure_schema(database)
    try:
        yield database
    finally:
        database.dispose()


@pytest.fixture
def db_session(database: Database):
    with database.session() as db:
        yield db


@pytest.fixture
def app(settings: Settings, database: Database):
    return create_app(settings, database)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
