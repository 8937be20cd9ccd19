from typing import Optional

from fastapi import APIRouter, Depends

from app.api.deps import get_session_manager
from app.schemas.auth import AuthResult, AuthStatus, SignInParams, SignUpParams, User
from app.services.auth import SessionManager


auth_router = APIRouter(prefix="/auth")

# Handlers return plain models so that cookies written to the injected
# response by SessionCookies are merged into the reply.


@auth_router.post("/sign-up", response_model=AuthResult)
async def sign_up(params: SignUpParams, sessions: SessionManager = Depends(get_session_manager)):
    return await sessions.sign_up(params)


@auth_router.post("/sign-in", response_model=AuthResult)
async def sign_in(params: SignInParams, sessions: SessionManager = Depends(get_session_manager)):
    return await sessions.sign_in(params)


@auth_router.post("/sign-out", response_model=AuthResult)
async def sign_out(sessions: SessionManager = Depends(get_session_manager)):
    await sessions.sign_out()
    return AuthResult(success=True, message="Signed out successfully.")


@auth_router.get("/me", response_model=Optional[User])
async def read_current_user(sessions: SessionManager = Depends(get_session_manager)):
    return await sessions.get_current_user()


@auth_router.get("/status", response_model=AuthStatus)
async def read_auth_status(sessions: SessionManager = Depends(get_session_manager)):
    return AuthStatus(authenticated=await sessions.is_authenticated())
