"""Shared fixtures for the comment opt-in tests."""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "comment_optin_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"

from comment_optin.config import OptinConfig, reset_settings_cache  # noqa: E402

reset_settings_cache()

from comment_optin.application.use_cases.capabilities import CapabilityResolver  # noqa: E402
from comment_optin.application.use_cases.roles import ensure_default_roles  # noqa: E402
from comment_optin.domain.entities import Comment, CommentStatus, User  # noqa: E402
from comment_optin.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from comment_optin.infrastructure.hooks import HookRegistry  # noqa: E402
from comment_optin.infrastructure.repositories import (  # noqa: E402
    CommentRepository,
    RoleRepository,
    UserOptionRepository,
    UserRepository,
)


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure the test database starts from a clean state for each test."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session():
    with SessionLocal() as db:
        ensure_default_roles(db)
        yield db


@pytest.fixture()
def config() -> OptinConfig:
    return OptinConfig()


@pytest.fixture()
def registry() -> HookRegistry:
    return HookRegistry()


@pytest.fixture()
def capabilities(config, registry) -> CapabilityResolver:
    return CapabilityResolver(config, registry)


@pytest.fixture()
def make_user(session, config):
    """Return a factory inserting a user, optionally opted in."""

    def _make_user(email: str, *, optin: bool = False, role: str = "subscriber") -> User:
        role_entity = RoleRepository(session).get_by_alias(role)
        user = UserRepository(session).create(
            User(id=None, role=role_entity, name=email.split("@")[0], email=email)
        )
        if optin:
            UserOptionRepository(session).set(user.id, config.meta_key, config.yes_value)
        return user

    return _make_user


@pytest.fixture()
def make_comment(session):
    """Return a factory inserting a comment."""

    def _make_comment(
        *, user_id: int | None = None, status: CommentStatus = CommentStatus.APPROVED
    ) -> Comment:
        return CommentRepository(session).create(
            Comment(
                id=None,
                user_id=user_id,
                author_name="Commenter",
                author_email="commenter@example.com",
                content="Nice post!",
                status=status,
            )
        )

    return _make_comment

