# shopcart/schemas/user.py
from datetime import datetime
from enum import Enum

from pydantic import EmailStr, ConfigDict, field_validator, model_validator
from sqlmodel import SQLModel, Field

MIN_PASSWORD_LENGTH = 6


class RegisterResult(str, Enum):
    SUCCESS = "success"
    ALREADY_EXISTS = "already_exists"


class LoginResult(str, Enum):
    SUCCESS = "success"
    INVALID_CREDENTIALS = "invalid_credentials"


class UserRegister(SQLModel):
    """
    Payload for creating the local user.

    Validation rules:
      - name, email, password cannot be empty or whitespace
      - email must be a valid EmailStr
      - password must have at least MIN_PASSWORD_LENGTH characters
      - confirm_password, when given, must equal password
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(max_length=50)
    email: EmailStr
    password: str
    confirm_password: str | None = None

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        return v

    @field_validator("password")
    @classmethod
    def password_length(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("password cannot be empty")
        if len(v) < MIN_PASSWORD_LENGTH:
            raise ValueError(
                f"password must have at least {MIN_PASSWORD_LENGTH} characters"
            )
        return v

    @model_validator(mode="after")
    def passwords_match(self) -> "UserRegister":
        if self.confirm_password is not None and self.confirm_password != self.password:
            raise ValueError("passwords do not match")
        return self


class UserLogin(SQLModel):
    """Payload for logging in with email + password."""

    model_config = ConfigDict(extra="forbid")

    email: EmailStr
    password: str

    @field_validator("password")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("password cannot be empty")
        return v


class UserRead(SQLModel):
    """Response schema returned to clients (never includes the password)."""

    id: str
    name: str
    email: str
    is_logged_in: bool
    created_at: datetime
    updated_at: datetime


class UserInfo(SQLModel):
    """
    What the UI shows about the user; empty values when nobody registered.
    """

    name: str = ""
    email: str = ""
    is_logged_in: bool = False
