import re
from datetime import datetime
from typing import Annotated, Optional
from uuid import UUID

from pydantic import EmailStr, Field, StringConstraints, field_validator

from app.schemas.base import CamelModel

FirstName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=30)]
LastName = Annotated[str, StringConstraints(strip_whitespace=True, max_length=30)]

PASSWORD_RULES = (
    re.compile(r"[a-z]"),
    re.compile(r"[A-Z]"),
    re.compile(r"[0-9]"),
    re.compile(r"[^A-Za-z0-9]"),
)


class UserCreate(CamelModel):
    first_name: FirstName
    last_name: Optional[LastName] = None
    email: EmailStr = Field(alias="emailId")
    password: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        return v.strip().lower()

    @field_validator("password")
    @classmethod
    def strong_password(cls, v):
        if len(v) < 8 or not all(rule.search(v) for rule in PASSWORD_RULES):
            raise ValueError(
                "Password must be at least 8 characters long and include uppercase, "
                "lowercase, number, and special character"
            )
        return v


class UserLogin(CamelModel):
    email: EmailStr = Field(alias="emailId")
    password: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        return v.strip().lower()


class UserRead(CamelModel):
    id: UUID
    first_name: str
    last_name: Optional[str] = None
    email: EmailStr = Field(alias="emailId")
    created_at: datetime
