# app/api/dashboard.py

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.core.security import get_current_user
from app.database import get_session
from app.models.user import User
from app.services import dashboard as dashboard_service

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

@router.get("/summary")
def financial_summary(user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    return {
        "message": "Dashboard summary fetched successfully",
        "data": dashboard_service.financial_summary(session, user.id),
    }

@router.get("/expense-by-category")
def expense_by_category(user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    return {
        "message": "Category breakdown fetched successfully",
        "data": dashboard_service.expense_by_category(session, user.id),
    }

@router.get("/income-by-category")
def income_by_category(user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    return {
        "message": "Income category breakdown fetched successfully",
        "data": dashboard_service.income_by_category(session, user.id),
    }

# Últimos 6 meses, agrupado por (año, mes)
@router.get("/monthly-trends")
def monthly_trends(user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    return {
        "message": "Monthly trends fetched successfully",
        "data": dashboard_service.monthly_trends(session, user.id),
    }

@router.get("/recent-transactions")
def recent_transactions(user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    return {
        "message": "Recent transactions fetched successfully",
        "data": dashboard_service.recent_transactions(session, user.id),
    }
