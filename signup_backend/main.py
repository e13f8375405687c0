import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from signup_backend.core.config import Settings, load_settings, validate_runtime_config
from signup_backend.database import Database
from signup_backend.errors import register_error_handlers
from signup_backend.routes import auth_routes
from signup_backend.store.users import UserStore

logger = logging.getLogger(__name__)


def initialize_database(database: Database) -> None:
    try:
        database.create_database_if_missing()
        UserStore.ensure_schema(database)
    except SQLAlchemyError:
        logger.exception('Database initialization failed. Check DB_HOST, DB_USER and DB_PASSWORD.')
        raise


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    settings = settings or load_settings()
    validate_runtime_config(settings)
    database = database or Database(settings)

    app = FastAPI()
    app.state.settings = settings
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials='*' not in settings.cors_origins,
        allow_methods=['*'],
        allow_headers=['*'],
    )
    register_error_handlers(app)

    @app.on_event('startup')
    def startup() -> None:
        initialize_database(database)

    @app.on_event('shutdown')
    def close_database() -> None:
        database.dispose()

    @app.get('/')
    def root():
        return {'status': 'Signup API Running'}

    app.include_router(auth_routes.router)
    app.include_router(auth_routes.router, prefix='/api')
    return app
