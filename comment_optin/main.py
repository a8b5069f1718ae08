from contextlib import asynccontextmanager

from fastapi import FastAPI

from comment_optin.application.use_cases.notifications import (
    register_optin_hooks,
    unregister_optin_hooks,
)
from comment_optin.config import get_optin_config
from comment_optin.infrastructure.database import SessionLocal, engine, initialize_database
from comment_optin.infrastructure.hooks import hooks
from comment_optin.interfaces.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and attach the recipient hooks while the app runs."""

    initialize_database()
    callback = register_optin_hooks(
        hooks, session_factory=SessionLocal, config=get_optin_config()
    )
    yield
    unregister_optin_hooks(hooks, callback)
    engine.dispose()


def create_app() -> FastAPI:
    """Build the FastAPI application serving the comment opt-in settings."""

    app = FastAPI(lifespan=lifespan)
    register_routes(app)
    return app
