"""
Tests for SessionManager against the in-memory identity provider and store.
The cookie jar is used unbound, so cookie changes are read from ``pending``.
"""
from datetime import timedelta

import pytest

from app.core.exceptions import EMAIL_ALREADY_EXISTS, IdentityProviderError
from app.schemas.auth import SignInParams, SignUpParams
from app.services.auth import SessionCookies, SessionManager


def make_manager(identity, store, cookies=None, secure=False) -> SessionManager:
    return SessionManager(identity=identity, store=store, cookies=cookies or SessionCookies(), secure=secure)


async def test_sign_up_creates_user(identity, store):
    sessions = make_manager(identity, store)

    result = await sessions.sign_up(SignUpParams(uid="u1", name="Ada", email="ada@example.com"))

    assert result.success is True
    assert result.message == "Account created successfully. Please sign in."
    assert store.collections["users"]["u1"] == {"name": "Ada", "email": "ada@example.com"}


async def test_sign_up_twice_keeps_first_document(identity, store):
    sessions = make_manager(identity, store)
    await sessions.sign_up(SignUpParams(uid="u1", name="Ada", email="ada@example.com"))

    result = await sessions.sign_up(SignUpParams(uid="u1", name="Impostor", email="other@example.com"))

    assert result.success is False
    assert result.message == "User already exists. Please sign in."
    assert store.collections["users"]["u1"] == {"name": "Ada", "email": "ada@example.com"}


async def test_sign_up_reports_duplicate_email(identity, store):
    store.fail_with = IdentityProviderError("email taken", code=EMAIL_ALREADY_EXISTS)
    sessions = make_manager(identity, store)

    result = await sessions.sign_up(SignUpParams(uid="u1", name="Ada", email="ada@example.com"))

    assert result.success is False
    assert result.message == "This email is already in use"


async def test_sign_up_hides_unexpected_errors(identity, store):
    store.fail_with = RuntimeError("deadline exceeded on projects/secret-project")
    sessions = make_manager(identity, store)

    result = await sessions.sign_up(SignUpParams(uid="u1", name="Ada", email="ada@example.com"))

    assert result.success is False
    assert result.message == "Failed to create account. Please try again."


async def test_sign_in_unknown_email(identity, store):
    cookies = SessionCookies()
    sessions = make_manager(identity, store, cookies)

    result = await sessions.sign_in(SignInParams(email="nobody@example.com", idToken="id-token-u1"))

    assert result.success is False
    assert result.message == "User does not exist. Create an account."
    assert cookies.pending == {}


async def test_sign_in_sets_session_cookie(identity, store):
    identity.register("u1", "ada@example.com")
    cookies = SessionCookies()
    sessions = make_manager(identity, store, cookies)

    result = await sessions.sign_in(SignInParams(email="ada@example.com", idToken="id-token-u1"))

    assert result.success is True
    assert result.message == "Signed in successfully."
    spec = cookies.pending["session"]
    assert spec.value == "session-u1"
    assert spec.max_age == 604800
    assert spec.httponly is True
    assert spec.secure is False
    assert spec.path == "/"
    assert spec.samesite == "lax"
    assert identity.last_expires_in == timedelta(days=7)


async def test_sign_in_marks_cookie_secure_in_production(identity, store):
    identity.register("u1", "ada@example.com")
    cookies = SessionCookies()
    sessions = make_manager(identity, store, cookies, secure=True)

    await sessions.sign_in(SignInParams(email="ada@example.com", idToken="id-token-u1"))

    assert cookies.pending["session"].secure is True


async def test_sign_in_succeeds_even_if_cookie_exchange_fails(identity, store):
    identity.register("u1", "ada@example.com")
    cookies = SessionCookies()
    sessions = make_manager(identity, store, cookies)

    result = await sessions.sign_in(SignInParams(email="ada@example.com", idToken="forged"))

    assert result.success is True
    assert "session" not in cookies.pending


async def test_set_session_cookie_reports_failure(identity, store):
    sessions = make_manager(identity, store)

    assert await sessions.set_session_cookie("forged") is False
    assert await sessions.set_session_cookie("id-token-u1") is True


async def test_sign_in_lookup_error(identity, store):
    identity.lookup_error = IdentityProviderError("quota exceeded", code="quota-exceeded")
    sessions = make_manager(identity, store)

    result = await sessions.sign_in(SignInParams(email="ada@example.com", idToken="id-token-u1"))

    assert result.success is False
    assert result.message == "Failed to log into account. Please try again."


async def test_current_user_without_cookie(identity, store):
    sessions = make_manager(identity, store)

    assert await sessions.get_current_user() is None
    assert identity.verify_calls == []


async def test_current_user_with_tampered_cookie(identity, store):
    sessions = make_manager(identity, store, SessionCookies({"session": "session-forged"}))

    assert await sessions.get_current_user() is None


async def test_current_user_with_revoked_cookie(identity, store):
    await store.set("users", "u1", {"name": "Ada", "email": "ada@example.com"})
    identity.issued["session-u1"] = {"uid": "u1"}
    identity.revoked.add("session-u1")
    sessions = make_manager(identity, store, SessionCookies({"session": "session-u1"}))

    assert await sessions.get_current_user() is None
    assert identity.verify_calls == [True]


async def test_current_user_without_user_document(identity, store):
    identity.issued["session-u1"] = {"uid": "u1"}
    sessions = make_manager(identity, store, SessionCookies({"session": "session-u1"}))

    assert await sessions.get_current_user() is None


async def test_current_user_merges_document_and_id(identity, store):
    await store.set("users", "u1", {"name": "Ada", "email": "ada@example.com"})
    identity.issued["session-u1"] = {"uid": "u1"}
    sessions = make_manager(identity, store, SessionCookies({"session": "session-u1"}))

    user = await sessions.get_current_user()

    assert user is not None
    assert user.model_dump() == {"id": "u1", "name": "Ada", "email": "ada@example.com"}
    assert await sessions.is_authenticated() is True


async def test_sign_out_then_current_user_is_none(identity, store):
    await store.set("users", "u1", {"name": "Ada", "email": "ada@example.com"})
    identity.issued["session-u1"] = {"uid": "u1"}
    cookies = SessionCookies({"session": "session-u1"})
    sessions = make_manager(identity, store, cookies)
    assert await sessions.is_authenticated() is True

    await sessions.sign_out()

    assert cookies.pending["session"] is None
    assert await sessions.get_current_user() is None
    assert await sessions.is_authenticated() is False


@pytest.mark.parametrize("incoming", [{}, {"session": ""}])
async def test_sign_out_without_cookie_still_succeeds(identity, store, incoming):
    cookies = SessionCookies(incoming)
    sessions = make_manager(identity, store, cookies)

    await sessions.sign_out()

    assert cookies.pending == {"session": None}


async def test_cookie_secure_follows_production_environment(identity, store, monkeypatch):
    from app.core.config import settings

    monkeypatch.setattr(settings, "ENVIRONMENT", "production")
    identity.register("u1", "ada@example.com")
    cookies = SessionCookies()
    sessions = SessionManager(identity=identity, store=store, cookies=cookies)

    await sessions.sign_in(SignInParams(email="ada@example.com", idToken="id-token-u1"))

    assert sessions.secure is True
    assert cookies.pending["session"].secure is True
