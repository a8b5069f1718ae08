"""Tests for the opt-in preference store and settings form binder."""

from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError

from comment_optin.application.use_cases.preferences import (
    PreferenceStore,
    handle_save,
    render_control,
    save_preference,
)
from comment_optin.domain.errors import PreferenceStoreUnavailable
from comment_optin.infrastructure.hooks import HAS_CAP_HOOK
from comment_optin.infrastructure.repositories import UserOptionRepository


def restrict_to_editors(default: bool, capabilities: dict[str, bool]) -> bool:
    return bool(capabilities.get("administrator") or capabilities.get("editor"))


def test_preference_defaults_to_false(session, config, make_user):
    user = make_user("test@example.com")

    assert PreferenceStore(session, config).get_preference(user.id) is False


def test_opting_out_clears_the_stored_flag(session, config, make_user):
    user = make_user("test@example.com")
    store = PreferenceStore(session, config)

    assert store.set_preference(user.id, True) is True
    assert store.get_preference(user.id) is True
    assert UserOptionRepository(session).get(user.id, config.meta_key) == "1"

    assert store.set_preference(user.id, False) is True
    assert store.get_preference(user.id) is False
    assert UserOptionRepository(session).get(user.id, config.meta_key) is None


def test_unexpected_stored_value_reads_as_opted_out(session, config, make_user):
    user = make_user("test@example.com")
    UserOptionRepository(session).set(user.id, config.meta_key, "yes")

    assert PreferenceStore(session, config).get_preference(user.id) is False


def test_store_failures_are_raised(session, config, make_user, monkeypatch):
    user = make_user("test@example.com")
    store = PreferenceStore(session, config)

    def broken(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr(store.repository, "get", broken)
    monkeypatch.setattr(store.repository, "set", broken)
    monkeypatch.setattr(store.repository, "delete", broken)

    with pytest.raises(PreferenceStoreUnavailable):
        store.get_preference(user.id)
    with pytest.raises(PreferenceStoreUnavailable):
        store.set_preference(user.id, True)
    with pytest.raises(PreferenceStoreUnavailable):
        store.set_preference(user.id, False)


def test_save_denied_without_edit_permission(session, config, capabilities, make_user):
    target = make_user("target@example.com", optin=True)
    actor = make_user("actor@example.com")

    saved = save_preference(
        session,
        target_user_id=target.id,
        opted_in=False,
        acting_user=actor,
        config=config,
        capabilities=capabilities,
    )

    assert saved is False
    assert PreferenceStore(session, config).get_preference(target.id) is True


def test_save_denied_without_capability(session, config, capabilities, registry, make_user):
    user = make_user("subscriber@example.com")
    registry.add_filter(HAS_CAP_HOOK, restrict_to_editors)

    saved = save_preference(
        session,
        target_user_id=user.id,
        opted_in=True,
        acting_user=user,
        config=config,
        capabilities=capabilities,
    )

    assert saved is False
    assert PreferenceStore(session, config).get_preference(user.id) is False


def test_administrator_can_save_for_another_user(session, config, capabilities, make_user):
    admin = make_user("admin@example.com", role="administrator")
    target = make_user("target@example.com")

    assert save_preference(
        session,
        target_user_id=target.id,
        opted_in=True,
        acting_user=admin,
        config=config,
        capabilities=capabilities,
    )
    assert PreferenceStore(session, config).get_preference(target.id) is True


@pytest.mark.parametrize(
    ("submitted", "expected"),
    [("1", True), (None, False), ("0", False), ("", False), ("on", False), (" 1", False)],
)
def test_handle_save_only_accepts_the_sentinel(
    session, config, capabilities, make_user, submitted, expected
):
    user = make_user("test@example.com", optin=not expected)

    assert handle_save(
        session,
        target_user_id=user.id,
        submitted_value=submitted,
        acting_user=user,
        config=config,
        capabilities=capabilities,
    )
    assert PreferenceStore(session, config).get_preference(user.id) is expected


def test_checkbox_is_rendered_for_low_privilege_user(session, config, capabilities, make_user):
    user = make_user("test@example.com", role="subscriber")

    control = render_control(session, user, config=config, capabilities=capabilities)

    assert control is not None
    assert control.name == "optin_flag_field"
    assert control.value == "1"
    assert control.checked is False
    assert control.label == "New Comment Emails"


def test_checkbox_is_checked_when_option_is_set(session, config, capabilities, make_user):
    user = make_user("test@example.com", optin=True)

    control = render_control(session, user, config=config, capabilities=capabilities)

    assert control is not None
    assert control.checked is True


def test_checkbox_not_rendered_if_user_not_capable(
    session, config, capabilities, registry, make_user
):
    user = make_user("test@example.com", role="subscriber")
    registry.add_filter(HAS_CAP_HOOK, restrict_to_editors)

    assert render_control(session, user, config=config, capabilities=capabilities) is None
