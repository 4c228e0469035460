"""Pydantic schemas for Users."""
from __future__ import annotations
from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class UserOut(BaseModel):
    """Public view of a user. Credentials are never part of it."""

    id: str
    name: str
    slug: str
    email: str
    email_verified_at: Optional[datetime] = None
    admin: bool
    can_publish_events_immediately: bool
    country: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
