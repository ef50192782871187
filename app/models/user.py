from sqlmodel import SQLModel, Field
from uuid import uuid4, UUID
from typing import Optional
from datetime import datetime

class User(SQLModel, table=True):
    id: UUID = Field(default_factory=uuid4, primary_key=True)
    first_name: str = Field(max_length=30, index=True)
    last_name: Optional[str] = Field(default=None, max_length=30)
    email: str = Field(index=True, unique=True)  # siempre en minúsculas
    hashed_password: str
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
