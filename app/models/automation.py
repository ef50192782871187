# app/models/automation.py

from sqlalchemy import Index
from sqlmodel import SQLModel, Field
from uuid import UUID
from typing import Optional
from datetime import datetime

from app.models.enums import ExpenseCategory, Frequency

class Automation(SQLModel, table=True):
    __table_args__ = (
        Index("ix_automation_user_active_frequency", "user_id", "is_active", "frequency"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: UUID = Field(foreign_key="user.id", index=True)
    name: str = Field(max_length=100)
    amount: float
    frequency: Frequency = Field(default=Frequency.Monthly)
    category: ExpenseCategory = Field(default=ExpenseCategory.Other)
    start_date: datetime = Field(default_factory=datetime.utcnow)
    end_date: Optional[datetime] = None
    is_active: bool = Field(default=True)
    last_processed_date: Optional[datetime] = None
    description: str = Field(default="", max_length=300)
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
