"""User ORM model: identity, flags and association wiring."""
import uuid
from datetime import datetime
from typing import Any
from sqlalchemy import Column, String, Boolean, DateTime
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship, validates
from eventboard.database import Base
from eventboard.models.concerns import HasCountry, HasSlug, Notifiable

PERSONAL_DATA_DOCUMENT = "user.json"


class User(Notifiable, HasSlug, HasCountry, Base):
    __tablename__ = "users"

    # Never exposed through attributes_to_dict or presenters
    hidden = ("password", "remember_token")

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True)
    password = Column(String(255), nullable=False)
    remember_token = Column(String(100), nullable=True)
    email_verified_at = Column(DateTime(timezone=True), nullable=True)
    admin = Column(Boolean, nullable=False, default=False)
    can_publish_events_immediately = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    reviews = relationship("Review", back_populates="user", cascade="all, delete-orphan")
    events = relationship("Event", secondary="organizers", back_populates="organizing_users")
    speakers = relationship("Speaker", back_populates="user")
    slots = relationship("Slot", secondary="speakers", viewonly=True)
    attendees = relationship("Attendee", back_populates="user", cascade="all, delete-orphan")
    attended_events = relationship("Event", secondary="attendees", viewonly=True)
    slot_ownership_claims = relationship(
        "SlotOwnershipClaim", back_populates="user", cascade="all, delete-orphan"
    )

    @validates("id")
    def _guard_id(self, key, value):
        if self.id is not None and value != self.id:
            raise ValueError("User id cannot be changed once assigned")
        return value

    def has_verified_email(self) -> bool:
        return self.email_verified_at is not None

    def attributes_to_dict(self) -> dict[str, Any]:
        """Flat snapshot of the stored, non-hidden columns (JSON-safe)."""
        data = {}
        for column in self.__table__.columns:
            if column.key in self.hidden:
                continue
            value = getattr(self, column.key)
            if isinstance(value, datetime):
                value = value.isoformat()
            data[column.key] = value
        return data

    def select_personal_data(self, selection) -> None:
        """Add this user's own attributes to a personal-data export."""
        selection.add(PERSONAL_DATA_DOCUMENT, self.attributes_to_dict())

    def personal_data_export_name(self) -> str:
        return f"personal-data-{self.slug}.zip"
