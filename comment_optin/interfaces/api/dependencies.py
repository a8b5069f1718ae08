"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from comment_optin.application.use_cases.capabilities import CapabilityResolver
from comment_optin.config import OptinConfig, get_optin_config
from comment_optin.domain.entities import User
from comment_optin.infrastructure.database import get_db
from comment_optin.infrastructure.hooks import hooks
from comment_optin.infrastructure.repositories import UserRepository
from comment_optin.infrastructure.security import decode_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token")


def _credentials_error(detail: str = "Invalid credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_current_user(token: str, db: Session) -> User:
    """Resolve the authenticated user for the provided token."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _credentials_error() from exc

    subject = payload.get("sub")
    try:
        user_id = int(subject)
    except (TypeError, ValueError) as exc:
        raise _credentials_error() from exc

    user = UserRepository(db).get(user_id)
    if user is None:
        raise _credentials_error("User not found")
    return user


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Return the authenticated user from the provided token."""

    return resolve_current_user(token, db)


def get_capability_resolver(
    config: OptinConfig = Depends(get_optin_config),
) -> CapabilityResolver:
    """Return a resolver bound to the shared hook registry."""

    return CapabilityResolver(config, hooks)
