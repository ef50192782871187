# app/schemas/dashboard.py

from datetime import datetime
from typing import List
from uuid import UUID

from app.models.enums import TransactionType
from app.schemas.base import CamelModel

class DashboardSummary(CamelModel):
    total_income: float
    total_expense: float
    balance: float
    income_count: int
    expense_count: int
    active_automations: int

class CategoryBreakdown(CamelModel):
    category: str
    total: float
    count: int

class MonthlyTotal(CamelModel):
    year: int
    month: int  # 1-12
    total: float

class MonthlyTrends(CamelModel):
    income: List[MonthlyTotal]
    expense: List[MonthlyTotal]

class RecentTransaction(CamelModel):
    id: int
    user_id: UUID
    type: TransactionType
    name: str
    amount: float
    date: datetime
    category: str
    description: str
    created_at: datetime
    updated_at: datetime
