"""
Session management over Firebase session cookies.

A browser is Anonymous until sign-in stores a verified session cookie, and
Authenticated while that cookie verifies and its uid has a users document.
Sign-out, expiry or revocation bring it back to Anonymous.
"""
import logging
from datetime import timedelta
from typing import Optional

from app.core.config import settings
from app.core.exceptions import EMAIL_ALREADY_EXISTS, IdentityProviderError
from app.schemas.auth import AuthResult, SignInParams, SignUpParams, User
from app.services.auth.cookies import CookieSpec, SessionCookies
from app.services.interfaces import DocumentStore, IdentityProvider

logger = logging.getLogger(__name__)


class SessionManager:
    """
    Sign-up, sign-in, sign-out and current-user resolution for one request.

    Every public method wraps its own body and answers with a curated result;
    provider errors never reach the caller.
    """

    def __init__(
        self,
        identity: IdentityProvider,
        store: DocumentStore,
        cookies: SessionCookies,
        cookie_name: Optional[str] = None,
        duration_seconds: Optional[int] = None,
        secure: Optional[bool] = None,
        users_collection: Optional[str] = None,
    ):
        self.identity = identity
        self.store = store
        self.cookies = cookies
        self.cookie_name = cookie_name or settings.SESSION_COOKIE_NAME
        self.duration_seconds = duration_seconds or settings.SESSION_DURATION_SECONDS
        self.secure = settings.is_production if secure is None else secure
        self.users_collection = users_collection or settings.USERS_COLLECTION

    async def set_session_cookie(self, id_token: str) -> bool:
        """
        Exchange a client ID token for a session cookie and store it.

        Failures are logged and swallowed; the return value tells whether the
        cookie was actually set.
        """
        try:
            session_cookie = await self.identity.create_session_cookie(
                id_token, expires_in=timedelta(seconds=self.duration_seconds)
            )
            self.cookies.set(self.cookie_name, CookieSpec(
                value=session_cookie,
                max_age=self.duration_seconds,
                httponly=True,
                secure=self.secure,
                path="/",
                samesite="lax",
            ))
        except Exception as e:
            logger.error(f"Error setting session cookie: {e}")
            return False

        logger.info("Session cookie set successfully.")
        return True

    async def sign_up(self, params: SignUpParams) -> AuthResult:
        try:
            existing = await self.store.get(self.users_collection, params.uid)
            if existing is not None:
                return AuthResult(success=False, message="User already exists. Please sign in.")

            await self.store.set(self.users_collection, params.uid, {
                "name": params.name,
                "email": params.email,
            })
            logger.info(f"User created: {params.name} ({params.email})")
            return AuthResult(success=True, message="Account created successfully. Please sign in.")

        except IdentityProviderError as e:
            # Only reachable once account creation goes through the identity provider;
            # the users store by itself never raises provider errors.
            logger.error(f"Error creating user: {e}")
            if e.code == EMAIL_ALREADY_EXISTS:
                return AuthResult(success=False, message="This email is already in use")
            return AuthResult(success=False, message="Failed to create account. Please try again.")
        except Exception as e:
            logger.error(f"Error creating user: {e}", exc_info=True)
            return AuthResult(success=False, message="Failed to create account. Please try again.")

    async def sign_in(self, params: SignInParams) -> AuthResult:
        try:
            user_record = await self.identity.get_user_by_email(params.email)
            if not user_record:
                return AuthResult(success=False, message="User does not exist. Create an account.")

            # A failed cookie exchange is logged inside and does not change the outcome
            cookie_set = await self.set_session_cookie(params.id_token)
            if not cookie_set:
                logger.warning(f"Signed in {params.email} without a session cookie")
            logger.info(f"User signed in: {params.email}")
            return AuthResult(success=True, message="Signed in successfully.")

        except Exception as e:
            logger.error(f"Error signing in: {e}")
            return AuthResult(success=False, message="Failed to log into account. Please try again.")

    async def sign_out(self) -> None:
        self.cookies.delete(self.cookie_name, path="/")
        logger.info("User signed out.")

    async def get_current_user(self) -> Optional[User]:
        session_cookie = self.cookies.get(self.cookie_name)
        if not session_cookie:
            logger.warning("No session cookie found.")
            return None

        try:
            claims = await self.identity.verify_session_cookie(session_cookie, check_revoked=True)
            uid = claims["uid"]
            data = await self.store.get(self.users_collection, uid)
            if data is None:
                logger.warning(f"User record not found for UID: {uid}")
                return None

            logger.info(f"User authenticated: {uid}")
            return User(**{**data, "id": uid})

        except Exception as e:
            logger.error(f"Error verifying session: {e}")
            return None

    async def is_authenticated(self) -> bool:
        return await self.get_current_user() is not None
