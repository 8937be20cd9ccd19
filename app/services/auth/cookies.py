from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from fastapi import Response


@dataclass(frozen=True)
class CookieSpec:
    """A cookie to be sent back to the browser."""
    value: str
    max_age: int
    httponly: bool = True
    secure: bool = False
    path: str = "/"
    samesite: str = "lax"


class SessionCookies:
    """
    Request-scoped cookie jar.

    Reads come from the incoming request, overlaid with whatever was set or
    deleted during the request. Mutations are recorded in ``pending`` and,
    when a response is bound, written to it right away.
    """

    def __init__(self, incoming: Optional[Mapping[str, str]] = None, response: Optional[Response] = None):
        self._incoming: Dict[str, str] = dict(incoming or {})
        self.pending: Dict[str, Optional[CookieSpec]] = {}
        self.response = response

    def get(self, name: str) -> Optional[str]:
        if name in self.pending:
            spec = self.pending[name]
            return spec.value if spec else None
        return self._incoming.get(name) or None

    def set(self, name: str, spec: CookieSpec) -> None:
        self.pending[name] = spec
        if self.response is not None:
            self.response.set_cookie(
                key=name,
                value=spec.value,
                max_age=spec.max_age,
                path=spec.path,
                secure=spec.secure,
                httponly=spec.httponly,
                samesite=spec.samesite,
            )

    def delete(self, name: str, path: str = "/") -> None:
        self.pending[name] = None
        if self.response is not None:
            self.response.delete_cookie(key=name, path=path)
