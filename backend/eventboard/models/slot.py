"""Slot, Speaker and SlotOwnershipClaim ORM models."""
import uuid
from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from eventboard.database import Base
from eventboard.models.review import Reviewable


class Slot(Reviewable, Base):
    __tablename__ = "slots"

    reviewable_type = "slot"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    event_id = Column(String(36), ForeignKey("events.id", ondelete="CASCADE"), nullable=False)
    title = Column(String(255), nullable=False)
    starts_at = Column(DateTime(timezone=True), nullable=True)
    ends_at = Column(DateTime(timezone=True), nullable=True)

    event = relationship("Event", back_populates="slots")
    speakers = relationship("Speaker", back_populates="slot", cascade="all, delete-orphan")
    ownership_claims = relationship("SlotOwnershipClaim", back_populates="slot", cascade="all, delete-orphan")


class Speaker(Base):
    """A presenter on a slot. Guest speakers have no user account."""

    __tablename__ = "speakers"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    slot_id = Column(String(36), ForeignKey("slots.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    name = Column(String(255), nullable=True)

    slot = relationship("Slot", back_populates="speakers")
    user = relationship("User", back_populates="speakers")


class SlotOwnershipClaim(Base):
    """A pending request by a user to be recognized as a slot's speaker."""

    __tablename__ = "slot_ownership_claims"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    slot_id = Column(String(36), ForeignKey("slots.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User", back_populates="slot_ownership_claims")
    slot = relationship("Slot", back_populates="ownership_claims")
