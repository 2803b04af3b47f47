"""
User schemas.

Input validation and output serialization for user routes.
"""

from pydantic import BaseModel, EmailStr, Field, field_validator


# ── Request Schemas ───────────────────────────────────────────────────────────

class UserCreate(BaseModel):
    """Add a member to the organization. Email is not required to be unique."""
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    department: str = Field(..., min_length=1, max_length=100)
    is_admin: bool = False

    @field_validator("name", "department")
    @classmethod
    def strip_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Must not be blank")
        return v


class SwitchUserRequest(BaseModel):
    """Simulated login."""
    user_id: str = Field(..., min_length=1)


# ── Response Schemas ──────────────────────────────────────────────────────────

class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    avatar: str
    department: str
    is_admin: bool

    model_config = {"from_attributes": True}
