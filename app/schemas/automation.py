from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field, field_validator

from app.models.enums import ExpenseCategory, Frequency
from app.schemas.base import CamelModel, to_naive_utc
from app.schemas.ledger import Description, ExpenseRead, Name


class AutomationCreate(CamelModel):
    name: Name
    amount: float = Field(gt=0, allow_inf_nan=False)
    frequency: Frequency
    category: Optional[ExpenseCategory] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    description: Optional[Description] = None

    @field_validator("start_date", "end_date")
    @classmethod
    def normalize_dates(cls, v):
        return to_naive_utc(v)


class AutomationUpdate(CamelModel):
    name: Optional[Name] = None
    amount: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False)
    frequency: Optional[Frequency] = None
    category: Optional[ExpenseCategory] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None  # null la elimina
    is_active: Optional[bool] = None
    description: Optional[Description] = None

    @field_validator("start_date", "end_date")
    @classmethod
    def normalize_dates(cls, v):
        return to_naive_utc(v)


class AutomationRead(CamelModel):
    id: int
    user_id: UUID
    name: str
    amount: float
    frequency: Frequency
    category: ExpenseCategory
    start_date: datetime
    end_date: Optional[datetime] = None
    is_active: bool
    last_processed_date: Optional[datetime] = None
    description: str
    created_at: datetime
    updated_at: datetime


class ProcessedAutomationRead(CamelModel):
    automation: AutomationRead
    expense: ExpenseRead
