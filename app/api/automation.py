# app/api/automation.py

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.core.security import get_current_user
from app.database import get_session
from app.models.user import User
from app.schemas.automation import AutomationCreate, AutomationRead, AutomationUpdate, ProcessedAutomationRead
from app.schemas.ledger import ExpenseRead
from app.services import automation as automation_service

router = APIRouter(prefix="/automation", tags=["automation"])

@router.post("", status_code=status.HTTP_201_CREATED)
def create_automation(
    data: AutomationCreate,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    automation = automation_service.create_automation(session, user.id, data)
    return {"message": "Automation created successfully", "data": AutomationRead.model_validate(automation)}

@router.get("")
def list_automations(user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    automations = automation_service.list_automations(session, user.id)
    return {
        "message": "Automations fetched successfully",
        "count": len(automations),
        "data": [AutomationRead.model_validate(a) for a in automations],
    }

@router.get("/{automation_id}")
def get_automation(automation_id: int, user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    automation = automation_service.get_automation(session, user.id, automation_id)
    return {"message": "Automation fetched successfully", "data": AutomationRead.model_validate(automation)}

@router.patch("/{automation_id}")
def update_automation(
    automation_id: int,
    patch: AutomationUpdate,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    automation = automation_service.update_automation(session, user.id, automation_id, patch)
    return {"message": "Automation updated successfully", "data": AutomationRead.model_validate(automation)}

@router.delete("/{automation_id}")
def delete_automation(automation_id: int, user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    automation = automation_service.delete_automation(session, user.id, automation_id)
    return {"message": "Automation deleted successfully", "data": AutomationRead.model_validate(automation)}

@router.patch("/{automation_id}/toggle")
def toggle_automation(automation_id: int, user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    automation = automation_service.toggle_automation(session, user.id, automation_id)
    state = "activated" if automation.is_active else "deactivated"
    return {"message": f"Automation {state} successfully", "data": AutomationRead.model_validate(automation)}

# Procesado manual: crea un gasto a partir de la automatización
@router.post("/{automation_id}/process", status_code=status.HTTP_201_CREATED)
def process_automation(automation_id: int, user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    automation, expense = automation_service.process_automation(session, user.id, automation_id)
    return {
        "message": "Automation processed successfully",
        "data": ProcessedAutomationRead(
            automation=AutomationRead.model_validate(automation),
            expense=ExpenseRead.model_validate(expense),
        ),
    }
