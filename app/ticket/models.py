# app/ticket/models.py
import enum
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.types import TypeDecorator
from app.core.database import Base


class TicketStatus(str, enum.Enum):
    OPEN = "OPEN"
    FULFILLED = "FULFILLED"


class Inquiry(str, enum.Enum):
    SALES = "Sales"
    TECHNICAL = "Technical"
    LOGISTICS = "Logistics"
    GENERAL = "General"


class UTCDateTime(TypeDecorator):
    # SQLite drops the offset; values are always stored and read back as UTC
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value, dialect):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value


def new_ticket_id() -> str:
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Ticket(Base):
    __tablename__ = "tickets"

    id = Column(String(32), primary_key=True, default=new_ticket_id)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    status = Column(String(16), nullable=False, default=TicketStatus.OPEN.value, index=True)
    inquiry = Column(String(16), nullable=False, default=Inquiry.GENERAL.value)
    created_at = Column(UTCDateTime(), nullable=False, default=utcnow, index=True)
