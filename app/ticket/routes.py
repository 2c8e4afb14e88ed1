# app/ticket/routes.py
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.ticket.repository import TicketStore
from app.ticket.schemas import TicketCreate, TicketOut, TicketUpdate
from app.ticket import services as ticket_service

router = APIRouter(prefix="/tickets", tags=["Tickets"])


def get_store(db: Session = Depends(get_db)) -> TicketStore:
    return TicketStore(db)


@router.get("/", response_model=list[TicketOut])
def list_all(store: TicketStore = Depends(get_store)):
    return ticket_service.list_tickets(store)


@router.post(
    "/",
    response_model=TicketOut,
    status_code=201,
    responses={204: {"description": "Blank title, nothing created"}},
)
def create(ticket: TicketCreate, store: TicketStore = Depends(get_store)):
    created = ticket_service.create_ticket(store, ticket)
    if created is None:
        return Response(status_code=204)
    return created


@router.get("/{ticket_id}", response_model=TicketOut)
def get(ticket_id: str, store: TicketStore = Depends(get_store)):
    return ticket_service.get_ticket(store, ticket_id)


@router.put("/{ticket_id}", response_model=TicketOut)
def update(ticket_id: str, ticket: TicketUpdate, store: TicketStore = Depends(get_store)):
    return ticket_service.update_ticket(store, ticket_id, ticket)


@router.post("/{ticket_id}/resolve", response_model=TicketOut)
def resolve(ticket_id: str, store: TicketStore = Depends(get_store)):
    return ticket_service.resolve_ticket(store, ticket_id)


@router.delete("/{ticket_id}", response_model=TicketOut)
def delete(ticket_id: str, store: TicketStore = Depends(get_store)):
    return ticket_service.delete_ticket(store, ticket_id)
