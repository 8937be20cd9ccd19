from .cookies import CookieSpec, SessionCookies
from .session_manager import SessionManager

__all__ = [
    "CookieSpec",
    "SessionCookies",
    "SessionManager",
]
