# dubai_horizon/models/user.py
from pydantic import BaseModel, Field, EmailStr, field_validator
from typing import Optional
from datetime import datetime
from uuid import UUID, uuid4


class SignUpRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6, description="At least 6 characters")
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    phone: Optional[str] = None


class SignInRequest(BaseModel):
    email: EmailStr
    password: str


class PasswordResetRequest(BaseModel):
    email: EmailStr


class PasswordResetConfirm(BaseModel):
    token: str
    new_password: str = Field(..., min_length=6)


class User(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    email: EmailStr
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    full_name: str = ""
    phone: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)

    @field_validator('full_name')
    @classmethod
    def full_name_validation(cls, v):
        return v.strip()


class CurrentUser(User):
    is_admin: bool = False


class SessionToken(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_at: datetime
    user: CurrentUser


def build_full_name(first_name: Optional[str], last_name: Optional[str]) -> str:
    return f"{first_name or ''} {last_name or ''}".strip()


def review_display_name(user: User) -> str:
    """Name shown on reviews; 'Anonymous' stands in for a missing first name."""
    return f"{user.first_name or 'Anonymous'} {user.last_name or ''}".strip()
