from __future__ import annotations

import pytest

from fintechora.core.auth import AuthError, Session, authenticate, current_user, register
from fintechora.storage.database import DuplicateRecord, Store


def test_register_then_authenticate(store: Store):
    user = register(store, " Meera ", "Meera@Example.com ", "s3cret-pass")

    assert user.name == "Meera"
    assert user.email == "meera@example.com"
    assert authenticate(store, "MEERA@example.com", "s3cret-pass") == user


def test_password_is_stored_hashed(store: Store):
    register(store, "Meera", "meera@example.com", "s3cret-pass")
    row = store.get_user_by_email("meera@example.com")

    assert row["password_hash"] != "s3cret-pass"
    assert "password_hash" not in register(store, "B", "b@example.com", "another-pass").model_dump()


def test_wrong_password_and_unknown_email_fail_the_same_way(store: Store):
    register(store, "Meera", "meera@example.com", "s3cret-pass")

    with pytest.raises(AuthError) as wrong_password:
        authenticate(store, "meera@example.com", "nope-nope")
    with pytest.raises(AuthError) as unknown_email:
        authenticate(store, "ghost@example.com", "s3cret-pass")

    assert str(wrong_password.value) == str(unknown_email.value)


def test_duplicate_registration(store: Store):
    register(store, "Meera", "meera@example.com", "s3cret-pass")

    with pytest.raises(DuplicateRecord):
        register(store, "Other", "MEERA@example.com", "different-pass")


def test_current_user_requires_existing_record(store: Store):
    user = register(store, "Meera", "meera@example.com", "s3cret-pass")

    assert current_user(store, Session(user_id=user.id)) == user
    with pytest.raises(AuthError):
        current_user(store, Session(user_id=user.id + 100))


def test_blank_name_is_rejected(store: Store):
    with pytest.raises(ValueError):
        register(store, "   ", "blank@example.com", "s3cret-pass")

    assert store.get_user_by_email("blank@example.com") is None
