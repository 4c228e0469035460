"""Event ORM model and the organizers join table."""
import uuid
from sqlalchemy import Column, String, DateTime, ForeignKey, Table
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from eventboard.database import Base
from eventboard.models.review import Reviewable


organizers = Table(
    "organizers",
    Base.metadata,
    Column("user_id", String(36), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("event_id", String(36), ForeignKey("events.id", ondelete="CASCADE"), primary_key=True),
)


class Event(Reviewable, Base):
    __tablename__ = "events"

    reviewable_type = "event"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(255), nullable=False)
    starts_at = Column(DateTime(timezone=True), nullable=True)
    ends_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    organizing_users = relationship("User", secondary=organizers, back_populates="events")
    slots = relationship("Slot", back_populates="event", cascade="all, delete-orphan")
    attendees = relationship("Attendee", back_populates="event", cascade="all, delete-orphan")
