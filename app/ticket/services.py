# app/ticket/services.py
from app.core.exceptions import NotFoundError, PersistenceError, ValidationError
from app.core.logging import get_logger
from app.ticket.categorization import categorize
from app.ticket.models import Ticket, TicketStatus
from app.ticket.repository import TicketStore
from app.ticket.schemas import TicketCreate, TicketUpdate

logger = get_logger(__name__)

def list_tickets(store: TicketStore) -> list[Ticket]:
    try:
        return store.find_all()
    except PersistenceError:
        logger.exception("Listing tickets failed, returning empty list")
        return []

def get_ticket(store: TicketStore, ticket_id: str) -> Ticket:
    ticket = store.find_by_id(ticket_id)
    if ticket is None:
        raise NotFoundError()
    return ticket

def create_ticket(store: TicketStore, payload: TicketCreate) -> Ticket | None:
    # blank titles are dropped without writing anything
    if not payload.title.strip():
        logger.info("Ignoring ticket with blank title")
        return None
    inquiry = categorize(payload.title)
    ticket = store.insert(
        title=payload.title,
        description=payload.description,
        status=TicketStatus.OPEN.value,
        inquiry=inquiry.value,
    )
    logger.info("Ticket created", extra={"ticket_id": ticket.id, "inquiry": ticket.inquiry})
    return ticket

def update_ticket(store: TicketStore, ticket_id: str, payload: TicketUpdate) -> Ticket:
    # status and inquiry are never part of an edit
    if not payload.title.strip():
        raise ValidationError("Title must not be blank")
    ticket = store.update(ticket_id, title=payload.title, description=payload.description)
    if ticket is None:
        raise NotFoundError()
    logger.info("Ticket updated", extra={"ticket_id": ticket_id})
    return ticket

def resolve_ticket(store: TicketStore, ticket_id: str) -> Ticket:
    ticket = store.update(ticket_id, status=TicketStatus.FULFILLED.value)
    if ticket is None:
        raise NotFoundError()
    logger.info("Ticket resolved", extra={"ticket_id": ticket_id})
    return ticket

def delete_ticket(store: TicketStore, ticket_id: str) -> Ticket:
    ticket = store.delete(ticket_id)
    if ticket is None:
        raise NotFoundError()
    logger.info("Ticket deleted", extra={"ticket_id": ticket_id})
    return ticket
