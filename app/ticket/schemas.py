# app/ticket/schemas.py
from datetime import datetime

from pydantic import BaseModel, Field

from app.ticket.models import Inquiry, TicketStatus


class TicketCreate(BaseModel):
    # Blank titles are accepted here and dropped by the service
    title: str
    description: str | None = None


class TicketUpdate(BaseModel):
    title: str = Field(..., min_length=1)
    description: str | None = None


class TicketOut(BaseModel):
    id: str
    title: str
    description: str | None = None
    status: TicketStatus
    inquiry: Inquiry
    created_at: datetime = Field(serialization_alias="createdAt")

    model_config = {"from_attributes": True}
