# app/schemas/ledger.py

from datetime import datetime
from typing import Annotated, Optional
from uuid import UUID

from pydantic import Field, StringConstraints, field_validator

from app.models.enums import ExpenseCategory, IncomeCategory
from app.schemas.base import CamelModel, to_naive_utc

Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]
Description = Annotated[str, StringConstraints(max_length=300)]
PositiveAmount = Annotated[float, Field(gt=0, allow_inf_nan=False)]


class _EntryCreate(CamelModel):
    name: Name
    amount: PositiveAmount
    date: Optional[datetime] = None
    description: Optional[Description] = None

    @field_validator("date")
    @classmethod
    def normalize_date(cls, v):
        return to_naive_utc(v)


class _EntryUpdate(CamelModel):
    name: Optional[Name] = None
    amount: Optional[PositiveAmount] = None
    date: Optional[datetime] = None
    description: Optional[Description] = None

    @field_validator("date")
    @classmethod
    def normalize_date(cls, v):
        return to_naive_utc(v)


class _EntryRead(CamelModel):
    id: int
    user_id: UUID
    name: str
    amount: float
    date: datetime
    description: str
    created_at: datetime
    updated_at: datetime


class IncomeCreate(_EntryCreate):
    category: Optional[IncomeCategory] = None

class IncomeUpdate(_EntryUpdate):
    category: Optional[IncomeCategory] = None

class IncomeRead(_EntryRead):
    category: IncomeCategory


class ExpenseCreate(_EntryCreate):
    category: Optional[ExpenseCategory] = None

class ExpenseUpdate(_EntryUpdate):
    category: Optional[ExpenseCategory] = None

class ExpenseRead(_EntryRead):
    category: ExpenseCategory
