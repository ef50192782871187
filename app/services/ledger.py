# app/services/ledger.py
"""
Acceso a los libros de ingresos y gastos.

Income y Expense tienen la misma forma, así que un mismo ``LedgerStore``
sirve a ambos. Toda consulta filtra por ``user_id``: un registro de otro
usuario se comporta igual que uno inexistente (``NotFound``).
"""

import logging
from datetime import datetime
from typing import Generic, List, Type, TypeVar
from uuid import UUID

from pydantic import BaseModel
from sqlmodel import Session, func, select

from app.core.errors import NotFound, PreconditionFailed
from app.models.expense import Expense
from app.models.income import Income

logger = logging.getLogger(__name__)

EntryT = TypeVar("EntryT", Income, Expense)

# columnas NOT NULL: un null explícito en un PATCH se ignora
NON_NULLABLE_FIELDS = {"name", "amount", "date", "category", "description"}


def apply_patch(record, patch: BaseModel, non_nullable=NON_NULLABLE_FIELDS) -> List[str]:
    """Copia en ``record`` solo los campos enviados en ``patch``; devuelve sus nombres."""
    changed = []
    for field, value in patch.model_dump(exclude_unset=True).items():
        if value is None and field in non_nullable:
            continue
        setattr(record, field, value)
        changed.append(field)
    return changed


class LedgerStore(Generic[EntryT]):
    def __init__(self, model: Type[EntryT], label: str):
        self.model = model
        self.label = label

    def create(self, session: Session, user_id: UUID, data: BaseModel) -> EntryT:
        fields = data.model_dump(exclude_none=True)
        fields["amount"] = float(fields["amount"])
        entry = self.model(user_id=user_id, **fields)
        session.add(entry)
        session.commit()
        session.refresh(entry)
        logger.info("%s %s created for user %s", self.label, entry.id, user_id)
        return entry

    def list(self, session: Session, user_id: UUID) -> List[EntryT]:
        return session.exec(
            select(self.model)
            .where(self.model.user_id == user_id)
            .order_by(self.model.date.desc(), self.model.id.desc())
        ).all()

    def recent(self, session: Session, user_id: UUID, limit: int) -> List[EntryT]:
        return session.exec(
            select(self.model)
            .where(self.model.user_id == user_id)
            .order_by(self.model.date.desc(), self.model.id.desc())
            .limit(limit)
        ).all()

    def get(self, session: Session, user_id: UUID, entry_id: int) -> EntryT:
        entry = session.exec(
            select(self.model).where(self.model.id == entry_id, self.model.user_id == user_id)
        ).first()
        if not entry:
            raise NotFound(f"{self.label} not found")
        return entry

    def update(self, session: Session, user_id: UUID, entry_id: int, patch: BaseModel) -> EntryT:
        entry = self.get(session, user_id, entry_id)
        if apply_patch(entry, patch):
            entry.updated_at = datetime.utcnow()
            session.add(entry)
            session.commit()
            session.refresh(entry)
        return entry

    def delete(self, session: Session, user_id: UUID, entry_id: int) -> EntryT:
        entry = self.get(session, user_id, entry_id)
        session.delete(entry)
        session.commit()
        logger.info("%s %s deleted for user %s", self.label, entry_id, user_id)
        return entry

    def count(self, session: Session, user_id: UUID) -> int:
        return session.exec(
            select(func.count(self.model.id)).where(self.model.user_id == user_id)
        ).one()

    def exists_any(self, session: Session, user_id: UUID) -> bool:
        return session.exec(
            select(self.model.id).where(self.model.user_id == user_id).limit(1)
        ).first() is not None

    def sum_total(self, session: Session, user_id: UUID) -> float:
        total = session.exec(
            select(func.sum(self.model.amount)).where(self.model.user_id == user_id)
        ).one()
        return total or 0


class ExpenseStore(LedgerStore[Expense]):
    def ensure_income(self, session: Session, user_id: UUID) -> None:
        # regla de negocio: primero debe existir algún ingreso
        if not income_store.exists_any(session, user_id):
            raise PreconditionFailed("Please add income first before adding expenses")

    def create(self, session: Session, user_id: UUID, data: BaseModel) -> Expense:
        self.ensure_income(session, user_id)
        return super().create(session, user_id, data)

    def create_unchecked(self, session: Session, user_id: UUID, data: BaseModel) -> Expense:
        """Alta sin la regla de "ingreso primero"; la usan las automatizaciones."""
        return super().create(session, user_id, data)


income_store = LedgerStore(Income, "Income")
expense_store = ExpenseStore(Expense, "Expense")
