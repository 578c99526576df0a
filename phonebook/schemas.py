from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional


class ContactBase(BaseModel):
    """Shared fields for contact schemas."""

    name: str = Field(min_length=1, max_length=100)
    phone: str = Field(min_length=1, max_length=50)


class ContactCreate(ContactBase):
    """Schema for creating new contact."""

    pass


class ContactUpdate(BaseModel):
    """Schema for updating contact (all fields optional, no others allowed)."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    phone: Optional[str] = Field(default=None, min_length=1, max_length=50)

    class Config:
        extra = "forbid"


class ContactOut(ContactBase):
    """Schema for returning contact with ID."""

    id: int

    class Config:
        from_attributes = True  # allow SQLAlchemy objects


class Credentials(BaseModel):
    """Email and password sent to signup and login."""

    email: EmailStr
    password: str = Field(min_length=6, max_length=72)

    @field_validator("password")
    @classmethod
    def fits_bcrypt(cls, value: str) -> str:
        # bcrypt ignores everything past the first 72 bytes
        if len(value.encode("utf-8")) > 72:
            raise ValueError("password must be at most 72 bytes in UTF-8")
        return value


class UserOut(BaseModel):
    """Public view of a user."""

    id: int
    email: EmailStr

    class Config:
        from_attributes = True


class AuthResponse(BaseModel):
    """Token issued on signup or login together with the user it identifies."""

    token: str
    user: UserOut


class Message(BaseModel):
    """Plain confirmation message."""

    msg: str
