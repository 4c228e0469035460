"""Attendee ORM model: a user's registration for an event."""
import uuid
from sqlalchemy import Column, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from eventboard.database import Base


class Attendee(Base):
    __tablename__ = "attendees"
    __table_args__ = (UniqueConstraint("user_id", "event_id", name="uq_attendees_user_event"),)

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    event_id = Column(String(36), ForeignKey("events.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User", back_populates="attendees")
    event = relationship("Event", back_populates="attendees")
