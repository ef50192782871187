# app/api/expense.py

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.core.security import get_current_user
from app.database import get_session
from app.models.user import User
from app.schemas.ledger import ExpenseCreate, ExpenseRead, ExpenseUpdate
from app.services.ledger import expense_store

router = APIRouter(prefix="/expense", tags=["expense"])

# Se resuelve antes de validar el cuerpo: sin ingresos, el error es siempre el mismo
def require_income(user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    expense_store.ensure_income(session, user.id)

@router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(require_income)])
def add_expense(
    data: ExpenseCreate,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    expense = expense_store.create(session, user.id, data)
    return {"message": "Expense added successfully", "data": ExpenseRead.model_validate(expense)}

@router.get("")
def list_expenses(user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    expenses = expense_store.list(session, user.id)
    return {
        "message": "Expenses fetched successfully",
        "count": len(expenses),
        "data": [ExpenseRead.model_validate(e) for e in expenses],
    }

@router.get("/total/sum")
def total_expense(user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    return {
        "message": "Total expense calculated successfully",
        "data": {"totalExpense": expense_store.sum_total(session, user.id)},
    }

@router.get("/{expense_id}")
def get_expense(expense_id: int, user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    expense = expense_store.get(session, user.id, expense_id)
    return {"message": "Expense fetched successfully", "data": ExpenseRead.model_validate(expense)}

@router.patch("/{expense_id}")
def update_expense(
    expense_id: int,
    patch: ExpenseUpdate,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    expense = expense_store.update(session, user.id, expense_id, patch)
    return {"message": "Expense updated successfully", "data": ExpenseRead.model_validate(expense)}

@router.delete("/{expense_id}")
def delete_expense(expense_id: int, user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    expense = expense_store.delete(session, user.id, expense_id)
    return {"message": "Expense deleted successfully", "data": ExpenseRead.model_validate(expense)}
