"""
Pydantic models for users
"""
from typing import Optional
from pydantic import BaseModel, Field, field_validator


def normalize_twitter_handle(handle: str) -> str:
    """
    Strip surrounding whitespace and a leading '@' from a twitter handle

    Raises:
        ValueError: If nothing is left after stripping
    """
    normalized = handle.strip().lstrip("@").strip()
    if not normalized:
        raise ValueError(f"Invalid twitter handle '{handle}'")
    return normalized


class User(BaseModel):
    """A persisted user record"""
    id: int
    username: str
    password: str
    salt: str
    twitter: Optional[str] = None


class SignUpRequest(BaseModel):
    """Request model for creating a user"""
    username: str = Field(..., min_length=1, max_length=255, description="Username (email address)")
    password: str = Field(..., min_length=1, description="Plain-text password")


class LoginRequest(BaseModel):
    """Request model for authenticating a user"""
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class TwitterHandleRequest(BaseModel):
    """Request model for setting a twitter handle"""
    twitter: str = Field(..., min_length=1, max_length=50, description="Twitter handle")

    @field_validator('twitter')
    @classmethod
    def validate_handle(cls, v: str) -> str:
        """Reject handles that are empty once '@' is removed"""
        return normalize_twitter_handle(v)
