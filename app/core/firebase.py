"""
Firebase Admin SDK setup and the adapters built on it.

This module provides:
- A process-wide Firebase app initialised from the service account in settings
- FirestoreDocumentStore: get/set/add over the async Firestore client
- FirebaseIdentityProvider: session cookie creation/verification and user lookup
"""
import asyncio
import logging
from datetime import timedelta
from functools import lru_cache
from typing import Any, Dict, Optional

import firebase_admin
from firebase_admin import auth, credentials, firestore_async
from firebase_admin.exceptions import FirebaseError

from app.core.config import settings
from app.core.exceptions import ConfigurationError, IdentityProviderError, EMAIL_ALREADY_EXISTS

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_firebase_app() -> firebase_admin.App:
    """Initialise the default Firebase app once; reuse it if already initialised."""
    try:
        return firebase_admin.get_app()
    except ValueError:
        pass

    if not (settings.FIREBASE_PROJECT_ID and settings.FIREBASE_CLIENT_EMAIL and settings.FIREBASE_PRIVATE_KEY):
        raise ConfigurationError("Firebase service account settings are incomplete")

    cred = credentials.Certificate({
        "type": "service_account",
        "project_id": settings.FIREBASE_PROJECT_ID,
        "client_email": settings.FIREBASE_CLIENT_EMAIL,
        "private_key": settings.firebase_private_key,
        "token_uri": "https://oauth2.googleapis.com/token",
    })
    app = firebase_admin.initialize_app(cred, {"projectId": settings.FIREBASE_PROJECT_ID})
    logger.info(f"Firebase app initialised for project {settings.FIREBASE_PROJECT_ID}")
    return app


def _provider_code(error: Exception) -> str:
    if isinstance(error, auth.EmailAlreadyExistsError):
        return EMAIL_ALREADY_EXISTS
    if isinstance(error, auth.ExpiredSessionCookieError):
        return "session-cookie-expired"
    if isinstance(error, auth.RevokedSessionCookieError):
        return "session-cookie-revoked"
    if isinstance(error, auth.UserDisabledError):
        return "user-disabled"
    if isinstance(error, auth.InvalidSessionCookieError):
        return "invalid-session-cookie"
    if isinstance(error, FirebaseError):
        return str(error.code).lower().replace("_", "-")
    return "invalid-argument"


class FirestoreDocumentStore:
    """Single-document operations over Firestore collections."""

    def __init__(self, client=None):
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = firestore_async.client(get_firebase_app())
        return self._client

    async def get(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        snapshot = await self.client.collection(collection).document(doc_id).get()
        if not snapshot.exists:
            return None
        return snapshot.to_dict() or {}

    async def set(self, collection: str, doc_id: str, data: Dict[str, Any]) -> None:
        await self.client.collection(collection).document(doc_id).set(data)

    async def add(self, collection: str, data: Dict[str, Any]) -> str:
        _, ref = await self.client.collection(collection).add(data)
        return ref.id


class FirebaseIdentityProvider:
    """
    Firebase Authentication calls used by the session manager.

    The Admin SDK auth API is synchronous, so each call runs in a worker thread.
    Provider failures are re-raised as IdentityProviderError with a normalised code.
    """

    def __init__(self, app: Optional[firebase_admin.App] = None):
        self._app = app

    @property
    def app(self) -> firebase_admin.App:
        if self._app is None:
            self._app = get_firebase_app()
        return self._app

    async def create_session_cookie(self, id_token: str, expires_in: timedelta) -> str:
        try:
            cookie = await asyncio.to_thread(
                auth.create_session_cookie, id_token, expires_in=expires_in, app=self.app
            )
        except (FirebaseError, ValueError) as e:
            raise IdentityProviderError(f"Could not create session cookie: {e}", code=_provider_code(e)) from e
        return cookie.decode("utf-8") if isinstance(cookie, bytes) else cookie

    async def verify_session_cookie(self, session_cookie: str, check_revoked: bool = True) -> Dict[str, Any]:
        try:
            return await asyncio.to_thread(
                auth.verify_session_cookie, session_cookie, check_revoked=check_revoked, app=self.app
            )
        except (FirebaseError, ValueError) as e:
            raise IdentityProviderError(f"Session cookie rejected: {e}", code=_provider_code(e)) from e

    async def get_user_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        try:
            record = await asyncio.to_thread(auth.get_user_by_email, email, app=self.app)
        except auth.UserNotFoundError:
            return None
        except (FirebaseError, ValueError) as e:
            raise IdentityProviderError(f"User lookup failed: {e}", code=_provider_code(e)) from e
        return {"uid": record.uid, "email": record.email, "display_name": record.display_name}
