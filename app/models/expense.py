from sqlalchemy import Index
from sqlmodel import SQLModel, Field
from uuid import UUID
from typing import Optional
from datetime import datetime

from app.models.enums import ExpenseCategory

class Expense(SQLModel, table=True):
    __table_args__ = (
        Index("ix_expense_user_date", "user_id", "date"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: UUID = Field(foreign_key="user.id", index=True)
    name: str = Field(max_length=100)
    amount: float
    date: datetime = Field(default_factory=datetime.utcnow)
    category: ExpenseCategory = Field(default=ExpenseCategory.Other)
    # las automatizaciones dejan aquí su procedencia
    description: str = Field(default="", max_length=300)
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
