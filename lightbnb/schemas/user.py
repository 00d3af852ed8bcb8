"""
Pydantic schemas for user inserts and rows.
"""

from pydantic import BaseModel, EmailStr, Field, field_validator


class UserCreate(BaseModel):
    """Schema for creating a new user."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="User's display name",
        examples=["Devin Sanders"]
    )

    email: EmailStr = Field(
        ...,
        description="User's email address",
        examples=["sebastianguerra@ymail.com"]
    )

    password: str = Field(
        ...,
        min_length=8,
        max_length=72,
        description="Plain text password, hashed before storage"
    )

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v):
        """Normalize email to lowercase."""
        return v.lower().strip()

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Validate and clean the name."""
        if not v.strip():
            raise ValueError("Name cannot be empty")
        return v.strip()


class UserRecord(BaseModel):
    """A row of the users table, including the password hash."""

    id: int
    name: str
    email: str
    password: str
