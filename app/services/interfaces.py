"""
Narrow capability sets the handlers depend on.

Production code gets the Firebase and Gemini adapters from ``app.core``;
tests substitute in-memory fakes that implement the same methods.
"""
from datetime import timedelta
from typing import Any, Dict, Optional, Protocol


class DocumentStore(Protocol):
    async def get(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        """Return the document data, or None when it does not exist."""
        ...

    async def set(self, collection: str, doc_id: str, data: Dict[str, Any]) -> None:
        ...

    async def add(self, collection: str, data: Dict[str, Any]) -> str:
        """Insert with a generated key and return that key."""
        ...


class IdentityProvider(Protocol):
    async def create_session_cookie(self, id_token: str, expires_in: timedelta) -> str:
        ...

    async def verify_session_cookie(self, session_cookie: str, check_revoked: bool = True) -> Dict[str, Any]:
        """Return the decoded claims; raises IdentityProviderError when invalid."""
        ...

    async def get_user_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        """Return the provider user record, or None for an unknown email."""
        ...


class TextGenerator(Protocol):
    async def generate_text(self, prompt: str) -> str:
        ...
