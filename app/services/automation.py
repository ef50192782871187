# app/services/automation.py

import logging
from datetime import datetime
from typing import List, Tuple
from uuid import UUID

from sqlmodel import Session, func, select

from app.core.errors import NotFound, PreconditionFailed
from app.models.automation import Automation
from app.models.expense import Expense
from app.schemas.automation import AutomationCreate, AutomationUpdate
from app.schemas.ledger import ExpenseCreate
from app.services.ledger import apply_patch, expense_store

logger = logging.getLogger(__name__)

# end_date y last_processed_date sí admiten null
NON_NULLABLE_FIELDS = {"name", "amount", "frequency", "category", "start_date", "is_active", "description"}


def create_automation(session: Session, user_id: UUID, data: AutomationCreate) -> Automation:
    fields = data.model_dump(exclude_none=True)
    automation = Automation(user_id=user_id, **fields)
    session.add(automation)
    session.commit()
    session.refresh(automation)
    logger.info("Automation %s created for user %s", automation.id, user_id)
    return automation


def list_automations(session: Session, user_id: UUID) -> List[Automation]:
    return session.exec(
        select(Automation)
        .where(Automation.user_id == user_id)
        .order_by(Automation.created_at.desc(), Automation.id.desc())
    ).all()


def get_automation(session: Session, user_id: UUID, automation_id: int) -> Automation:
    automation = session.exec(
        select(Automation).where(Automation.id == automation_id, Automation.user_id == user_id)
    ).first()
    if not automation:
        raise NotFound("Automation not found")
    return automation


def update_automation(session: Session, user_id: UUID, automation_id: int, patch: AutomationUpdate) -> Automation:
    automation = get_automation(session, user_id, automation_id)
    if apply_patch(automation, patch, NON_NULLABLE_FIELDS):
        automation.updated_at = datetime.utcnow()
        session.add(automation)
        session.commit()
        session.refresh(automation)
    return automation


def delete_automation(session: Session, user_id: UUID, automation_id: int) -> Automation:
    automation = get_automation(session, user_id, automation_id)
    session.delete(automation)
    session.commit()
    logger.info("Automation %s deleted for user %s", automation_id, user_id)
    return automation


def toggle_automation(session: Session, user_id: UUID, automation_id: int) -> Automation:
    automation = get_automation(session, user_id, automation_id)
    automation.is_active = not automation.is_active
    automation.updated_at = datetime.utcnow()
    session.add(automation)
    session.commit()
    session.refresh(automation)
    return automation


def count_active(session: Session, user_id: UUID) -> int:
    return session.exec(
        select(func.count(Automation.id)).where(
            Automation.user_id == user_id,
            Automation.is_active == True,  # noqa: E712
        )
    ).one()


def process_automation(session: Session, user_id: UUID, automation_id: int) -> Tuple[Automation, Expense]:
    """
    Genera un gasto a partir de la automatización y marca ``last_processed_date``.

    Son dos commits independientes: si el segundo falla, el gasto ya creado
    se queda sin automatización marcada. Reintentar crea otro gasto.
    """
    automation = get_automation(session, user_id, automation_id)
    if not automation.is_active:
        raise PreconditionFailed("Automation is not active")

    now = datetime.utcnow()
    expense = expense_store.create_unchecked(
        session,
        user_id,
        ExpenseCreate(
            name=automation.name,
            amount=automation.amount,
            date=now,
            category=automation.category,
            description=f"Auto-generated from {automation.frequency.value} automation",
        ),
    )

    try:
        automation.last_processed_date = now
        automation.updated_at = now
        session.add(automation)
        session.commit()
        session.refresh(automation)
    except Exception:
        logger.error(
            "Expense %s created but automation %s could not be stamped", expense.id, automation_id
        )
        raise

    logger.info("Automation %s processed into expense %s", automation_id, expense.id)
    return automation, expense
