"""
Shared fixtures: in-memory stand-ins for Firestore, Firebase Auth and Gemini,
wired into the FastAPI app through dependency overrides.
"""
import itertools
import os
from datetime import timedelta
from typing import Any, Dict, List, Optional

import pytest

# Settings are read at import time, so the environment goes first
os.environ.setdefault("ENVIRONMENT", "development")

from fastapi.testclient import TestClient

from app.api import deps
from app.core.exceptions import IdentityProviderError
from app.main import app


class FakeDocumentStore:
    def __init__(self):
        self.collections: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self.calls: List[str] = []
        self._ids = itertools.count(1)
        self.fail_with: Optional[Exception] = None

    def _check(self, op: str):
        self.calls.append(op)
        if self.fail_with is not None:
            raise self.fail_with

    async def get(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        self._check("get")
        doc = self.collections.get(collection, {}).get(doc_id)
        return dict(doc) if doc is not None else None

    async def set(self, collection: str, doc_id: str, data: Dict[str, Any]) -> None:
        self._check("set")
        self.collections.setdefault(collection, {})[doc_id] = dict(data)

    async def add(self, collection: str, data: Dict[str, Any]) -> str:
        self._check("add")
        doc_id = f"doc-{next(self._ids)}"
        self.collections.setdefault(collection, {})[doc_id] = dict(data)
        return doc_id

    def documents(self, collection: str) -> List[Dict[str, Any]]:
        return list(self.collections.get(collection, {}).values())


class FakeIdentityProvider:
    """
    Accepts ID tokens of the form ``id-token-<uid>`` and issues session
    cookies of the form ``session-<uid>``.
    """

    def __init__(self):
        self.users_by_email: Dict[str, Dict[str, Any]] = {}
        self.issued: Dict[str, Dict[str, Any]] = {}
        self.revoked: set = set()
        self.last_expires_in: Optional[timedelta] = None
        self.lookup_error: Optional[Exception] = None
        self.verify_calls: List[bool] = []

    def register(self, uid: str, email: str):
        self.users_by_email[email] = {"uid": uid, "email": email, "display_name": None}

    async def create_session_cookie(self, id_token: str, expires_in: timedelta) -> str:
        if not id_token.startswith("id-token-"):
            raise IdentityProviderError("invalid id token", code="invalid-id-token")
        uid = id_token[len("id-token-"):]
        cookie = f"session-{uid}"
        self.issued[cookie] = {"uid": uid}
        self.last_expires_in = expires_in
        return cookie

    async def verify_session_cookie(self, session_cookie: str, check_revoked: bool = True) -> Dict[str, Any]:
        self.verify_calls.append(check_revoked)
        if session_cookie not in self.issued:
            raise IdentityProviderError("invalid session cookie", code="invalid-session-cookie")
        if check_revoked and session_cookie in self.revoked:
            raise IdentityProviderError("session cookie revoked", code="session-cookie-revoked")
        return dict(self.issued[session_cookie])

    async def get_user_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        if self.lookup_error is not None:
            raise self.lookup_error
        return self.users_by_email.get(email)


class FakeTextGenerator:
    def __init__(self, text: str = '["Question 1", "Question 2", "Question 3"]'):
        self.text = text
        self.prompts: List[str] = []

    async def generate_text(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.text


@pytest.fixture
def store():
    return FakeDocumentStore()


@pytest.fixture
def identity():
    return FakeIdentityProvider()


@pytest.fixture
def generator():
    return FakeTextGenerator()


@pytest.fixture
def client(store, identity, generator):
    app.dependency_overrides[deps.get_document_store] = lambda: store
    app.dependency_overrides[deps.get_identity_provider] = lambda: identity
    app.dependency_overrides[deps.get_text_generator] = lambda: generator
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()
