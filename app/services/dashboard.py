# app/services/dashboard.py
"""
Vistas agregadas sobre ingresos y gastos.

Todo se recalcula en cada llamada; no hay tablas de resumen.
"""

import calendar
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import extract
from sqlmodel import Session, func, select

from app.models.enums import TransactionType
from app.schemas.dashboard import (
    CategoryBreakdown,
    DashboardSummary,
    MonthlyTotal,
    MonthlyTrends,
    RecentTransaction,
)
from app.services.automation import count_active
from app.services.ledger import LedgerStore, expense_store, income_store

TREND_MONTHS = 6
RECENT_PER_TYPE = 5
RECENT_LIMIT = 10


def months_ago(now: datetime, months: int) -> datetime:
    """Resta meses de calendario; el día se ajusta al último día del mes destino."""
    month_index = now.year * 12 + (now.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(now.day, calendar.monthrange(year, month)[1])
    return now.replace(year=year, month=month, day=day)


def financial_summary(session: Session, user_id: UUID) -> DashboardSummary:
    total_income = income_store.sum_total(session, user_id)
    total_expense = expense_store.sum_total(session, user_id)

    return DashboardSummary(
        total_income=total_income,
        total_expense=total_expense,
        balance=total_income - total_expense,
        income_count=income_store.count(session, user_id),
        expense_count=expense_store.count(session, user_id),
        active_automations=count_active(session, user_id),
    )


def _by_category(session: Session, store: LedgerStore, user_id: UUID) -> List[CategoryBreakdown]:
    model = store.model
    total = func.sum(model.amount).label("total")
    rows = session.exec(
        select(model.category, total, func.count(model.id))
        .where(model.user_id == user_id)
        .group_by(model.category)
        .order_by(total.desc())
    ).all()

    return [
        CategoryBreakdown(category=category.value, total=amount, count=count)
        for category, amount, count in rows
    ]


def expense_by_category(session: Session, user_id: UUID) -> List[CategoryBreakdown]:
    return _by_category(session, expense_store, user_id)


def income_by_category(session: Session, user_id: UUID) -> List[CategoryBreakdown]:
    return _by_category(session, income_store, user_id)


def _monthly_totals(session: Session, store: LedgerStore, user_id: UUID, since: datetime) -> List[MonthlyTotal]:
    model = store.model
    year = extract("year", model.date).label("year")
    month = extract("month", model.date).label("month")
    rows = session.exec(
        select(year, month, func.sum(model.amount))
        .where(model.user_id == user_id, model.date >= since)
        .group_by(year, month)
        .order_by(year, month)
    ).all()

    return [MonthlyTotal(year=int(y), month=int(m), total=amount) for y, m, amount in rows]


def monthly_trends(session: Session, user_id: UUID, now: Optional[datetime] = None) -> MonthlyTrends:
    since = months_ago(now or datetime.utcnow(), TREND_MONTHS)
    return MonthlyTrends(
        income=_monthly_totals(session, income_store, user_id, since),
        expense=_monthly_totals(session, expense_store, user_id, since),
    )


def _tagged(entries, type_: TransactionType) -> List[RecentTransaction]:
    return [
        RecentTransaction(
            id=e.id,
            user_id=e.user_id,
            type=type_,
            name=e.name,
            amount=e.amount,
            date=e.date,
            category=e.category.value,
            description=e.description,
            created_at=e.created_at,
            updated_at=e.updated_at,
        )
        for e in entries
    ]


def recent_transactions(session: Session, user_id: UUID) -> List[RecentTransaction]:
    """
    Los 5 ingresos y los 5 gastos más recientes, mezclados por fecha.

    Cada tipo se limita a 5 candidatos antes de mezclar, así que un sexto
    ingreso nunca aparece aunque sea más reciente que todos los gastos.
    """
    incomes = _tagged(income_store.recent(session, user_id, RECENT_PER_TYPE), TransactionType.income)
    expenses = _tagged(expense_store.recent(session, user_id, RECENT_PER_TYPE), TransactionType.expense)

    combined = sorted(incomes + expenses, key=lambda t: t.date, reverse=True)
    return combined[:RECENT_LIMIT]
