# app/ticket/repository.py
from collections.abc import Callable
from datetime import datetime
from functools import wraps

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import PersistenceError
from app.ticket.models import Ticket, new_ticket_id, utcnow


def _guarded(method):
    @wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise PersistenceError(f"Ticket store failure: {exc.__class__.__name__}") from exc

    return wrapper


class TicketStore:
    def __init__(self, db: Session, clock: Callable[[], datetime] = utcnow):
        self.db = db
        self.clock = clock

    @_guarded
    def insert(self, *, title: str, description: str | None, status: str, inquiry: str) -> Ticket:
        ticket = Ticket(
            id=new_ticket_id(),
            title=title,
            description=description,
            status=status,
            inquiry=inquiry,
            created_at=self.clock(),
        )
        self.db.add(ticket)
        self.db.commit()
        self.db.refresh(ticket)
        return ticket

    @_guarded
    def find_all(self) -> list[Ticket]:
        return self.db.query(Ticket).order_by(Ticket.created_at.desc()).all()

    @_guarded
    def find_by_id(self, ticket_id: str) -> Ticket | None:
        return self.db.get(Ticket, ticket_id)

    @_guarded
    def update(self, ticket_id: str, **fields) -> Ticket | None:
        ticket = self.db.get(Ticket, ticket_id)
        if ticket is None:
            return None
        for field, value in fields.items():
            setattr(ticket, field, value)
        self.db.commit()
        self.db.refresh(ticket)
        return ticket

    @_guarded
    def delete(self, ticket_id: str) -> Ticket | None:
        ticket = self.db.get(Ticket, ticket_id)
        if ticket is None:
            return None
        self.db.delete(ticket)
        self.db.commit()
        return ticket


__all__ = ["TicketStore"]
