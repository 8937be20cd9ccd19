from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class SignUpParams(BaseModel):
    """Profile to store after the client created the account with Firebase Auth."""
    uid: str = Field(..., description="Firebase Auth user id, used as the users document key.")
    name: str
    email: str


class SignInParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: str
    id_token: str = Field(..., alias="idToken", description="Short-lived Firebase ID token from the client SDK.")


class AuthResult(BaseModel):
    success: bool
    message: str


class User(BaseModel):
    """A users document merged with its key."""
    model_config = ConfigDict(extra="allow")

    id: str
    name: Optional[str] = None
    email: Optional[str] = None


class AuthStatus(BaseModel):
    authenticated: bool
