import logging
from fastapi import APIRouter, Depends, HTTPException, status
from typing import Dict, Optional

from dubai_horizon.data_managers import UserDataManager, get_user_data_manager
from dubai_horizon.dependencies import get_bearer_token, get_current_user
from dubai_horizon.models.user import (
    CurrentUser,
    PasswordResetConfirm,
    PasswordResetRequest,
    SessionToken,
    SignInRequest,
    SignUpRequest,
    User,
    build_full_name,
)
from dubai_horizon.services.auth import (
    SessionStore,
    expires_at,
    get_session_store,
    hash_password,
    is_admin_email,
    verify_password,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/auth",
    tags=["auth"],
    responses={401: {"description": "Not authenticated"}},
)

RESET_REQUESTED_MESSAGE = "If that email is registered, password reset instructions have been sent."


@router.post("/sign-up", response_model=User, status_code=status.HTTP_201_CREATED)
async def sign_up(
    payload: SignUpRequest,
    users: UserDataManager = Depends(get_user_data_manager),
):
    if users.email_exists(payload.email):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Email address '{payload.email}' is already registered"
        )
    new_user = User(
        email=payload.email,
        first_name=payload.first_name,
        last_name=payload.last_name,
        full_name=build_full_name(payload.first_name, payload.last_name),
        phone=payload.phone,
    )
    record = new_user.model_dump(mode="json")
    record["password_hash"] = hash_password(payload.password)
    users.add(record)
    logger.info("Registered user %s", new_user.id)
    return new_user


@router.post("/sign-in", response_model=SessionToken)
async def sign_in(
    payload: SignInRequest,
    users: UserDataManager = Depends(get_user_data_manager),
    sessions: SessionStore = Depends(get_session_store),
):
    user = users.get_by_email(payload.email)
    if not user or not verify_password(payload.password, user.get("password_hash", "")):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid login credentials"
        )
    session = sessions.create_session(user["id"])
    return SessionToken(
        access_token=session["token"],
        expires_at=expires_at(session),
        user=CurrentUser(**user, is_admin=is_admin_email(user["email"])),
    )


@router.post("/sign-out", response_model=Dict)
async def sign_out(
    token: Optional[str] = Depends(get_bearer_token),
    sessions: SessionStore = Depends(get_session_store),
):
    if not token or not sessions.destroy_session(token):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No active session"
        )
    return {"success": True, "message": "Signed out successfully"}


@router.get("/me", response_model=CurrentUser)
async def get_me(user: CurrentUser = Depends(get_current_user)):
    return user


@router.post("/password-reset", response_model=Dict, status_code=status.HTTP_202_ACCEPTED)
async def request_password_reset(
    payload: PasswordResetRequest,
    users: UserDataManager = Depends(get_user_data_manager),
    sessions: SessionStore = Depends(get_session_store),
):
    user = users.get_by_email(payload.email)
    if user:
        sessions.issue_reset_token(user["id"])
        # Mail delivery belongs to the hosting environment; the token is
        # only recorded here.
        logger.info("Password reset token issued for user %s", user["id"])
    return {"message": RESET_REQUESTED_MESSAGE}


@router.post("/password-reset/confirm", response_model=Dict)
async def confirm_password_reset(
    payload: PasswordResetConfirm,
    users: UserDataManager = Depends(get_user_data_manager),
    sessions: SessionStore = Depends(get_session_store),
):
    user_id = sessions.consume_reset_token(payload.token)
    if not user_id or not users.get_by_id(user_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Reset token is invalid or has expired"
        )
    users.update(user_id, {"password_hash": hash_password(payload.new_password)})
    sessions.destroy_user_sessions(user_id)
    logger.info("Password updated for user %s", user_id)
    return {"success": True, "message": "Password has been updated. Please sign in."}
