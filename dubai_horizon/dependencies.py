# dubai_horizon/dependencies.py
from typing import Optional

from fastapi import Depends, Header, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from dubai_horizon.data_managers import UserDataManager, get_user_data_manager
from dubai_horizon.models.user import CurrentUser
from dubai_horizon.services.auth import SessionStore, get_session_store, is_admin_email

bearer_scheme = HTTPBearer(auto_error=False)


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    return credentials.credentials if credentials else None


def get_current_user(
    token: Optional[str] = Depends(get_bearer_token),
    sessions: SessionStore = Depends(get_session_store),
    users: UserDataManager = Depends(get_user_data_manager),
) -> CurrentUser:
    session = sessions.validate_session(token)
    if not session:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required. Please sign in.",
            headers={"WWW-Authenticate": "Bearer"},
        )
    user = users.get_by_id(session["user_id"])
    if not user:
        sessions.destroy_session(token)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Session user no longer exists. Please sign in again.",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return CurrentUser(**user, is_admin=is_admin_email(user["email"]))


def require_admin(user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
    if not user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return user


def get_client_key(x_client_id: str = Header(..., min_length=1, max_length=128)) -> str:
    """Key of the caller's cart and wishlist, sent as ``X-Client-Id``."""
    return x_client_id
