# app/api/income.py

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.core.security import get_current_user
from app.database import get_session
from app.models.user import User
from app.schemas.ledger import IncomeCreate, IncomeRead, IncomeUpdate
from app.services.ledger import income_store

router = APIRouter(prefix="/income", tags=["income"])

@router.post("", status_code=status.HTTP_201_CREATED)
def add_income(
    data: IncomeCreate,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    income = income_store.create(session, user.id, data)
    return {"message": "Income added successfully", "data": IncomeRead.model_validate(income)}

@router.get("")
def list_incomes(user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    incomes = income_store.list(session, user.id)
    return {
        "message": "Incomes fetched successfully",
        "count": len(incomes),
        "data": [IncomeRead.model_validate(i) for i in incomes],
    }

@router.get("/total/sum")
def total_income(user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    return {
        "message": "Total income calculated successfully",
        "data": {"totalIncome": income_store.sum_total(session, user.id)},
    }

@router.get("/{income_id}")
def get_income(income_id: int, user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    income = income_store.get(session, user.id, income_id)
    return {"message": "Income fetched successfully", "data": IncomeRead.model_validate(income)}

@router.patch("/{income_id}")
def update_income(
    income_id: int,
    patch: IncomeUpdate,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    income = income_store.update(session, user.id, income_id, patch)
    return {"message": "Income updated successfully", "data": IncomeRead.model_validate(income)}

@router.delete("/{income_id}")
def delete_income(income_id: int, user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    income = income_store.delete(session, user.id, income_id)
    return {"message": "Income deleted successfully", "data": IncomeRead.model_validate(income)}
