"""Routes exposing the all-comments opt-in on the user settings page."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from comment_optin.application.use_cases.capabilities import CapabilityResolver
from comment_optin.application.use_cases.preferences import (
    PreferenceStore,
    handle_save,
    render_control,
)
from comment_optin.config import OptinConfig, get_optin_config
from comment_optin.domain.entities import User
from comment_optin.domain.errors import PreferenceStoreUnavailable
from comment_optin.infrastructure.database import get_db
from comment_optin.infrastructure.repositories import UserRepository
from comment_optin.interfaces.api.dependencies import (
    get_capability_resolver,
    get_current_user,
)
from comment_optin.interfaces.api.schemas import PreferenceControlRead, PreferenceRead

router = APIRouter(prefix="/users", tags=["comment-notifications"])
logger = logging.getLogger(__name__)


def _store_unavailable(exc: PreferenceStoreUnavailable) -> HTTPException:
    return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc))


@router.get("/me/comment-notifications", response_model=PreferenceControlRead | None)
def read_comment_notifications_control(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    config: OptinConfig = Depends(get_optin_config),
    capabilities: CapabilityResolver = Depends(get_capability_resolver),
):
    """Return the opt-in checkbox, or ``null`` when the user may not subscribe."""

    try:
        control = render_control(db, current_user, config=config, capabilities=capabilities)
    except PreferenceStoreUnavailable as exc:
        raise _store_unavailable(exc) from exc
    if control is None:
        return None
    return PreferenceControlRead.model_validate(control)


@router.post("/{user_id}/comment-notifications", response_model=PreferenceRead)
async def save_comment_notifications(
    user_id: int,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    config: OptinConfig = Depends(get_optin_config),
    capabilities: CapabilityResolver = Depends(get_capability_resolver),
):
    """Save the settings form; an unchecked (absent) box opts the user out."""

    form = await request.form()
    submitted = form.get(config.option_name)
    submitted_value = submitted if isinstance(submitted, str) else None

    target = await run_in_threadpool(UserRepository(db).get, user_id)
    if target is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    def _save() -> PreferenceRead | None:
        saved = handle_save(
            db,
            target_user_id=user_id,
            submitted_value=submitted_value,
            acting_user=current_user,
            config=config,
            capabilities=capabilities,
        )
        if not saved:
            return None
        opted_in = PreferenceStore(db, config).get_preference(user_id)
        return PreferenceRead(user_id=user_id, opted_in=opted_in)

    try:
        result = await run_in_threadpool(_save)
    except PreferenceStoreUnavailable as exc:
        raise _store_unavailable(exc) from exc

    if result is None:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not authorized")
    return result
