"""User association service — answers what a user organizes, speaks at,
attends, claims and has reviewed.

Every function takes the session explicitly and issues its own query, so
results never depend on which relationships the caller happened to load.
Predicates called with an unsaved user or target (no id yet) return False
without touching the store.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import Query, Session

from eventboard.models.attendee import Attendee
from eventboard.models.event import Event, organizers
from eventboard.models.review import Review, Reviewable
from eventboard.models.slot import Slot, SlotOwnershipClaim, Speaker
from eventboard.models.user import User
from eventboard.services import credentials

logger = logging.getLogger(__name__)


def _exists(db: Session, query: Query) -> bool:
    return bool(db.query(query.exists()).scalar())


def _saved(*instances) -> bool:
    return all(instance.id is not None for instance in instances)


# ---------------------------------------------------------------------------
# Registration & email verification
# ---------------------------------------------------------------------------
def register_user(
    db: Session,
    name: str,
    email: str,
    password: str,
    admin: bool = False,
    can_publish_events_immediately: bool = False,
    country: Optional[str] = None,
) -> User:
    """Create a user with a hashed password. Duplicate emails raise IntegrityError."""
    user = User(
        name=name,
        email=email,
        password=credentials.hash_password(password),
        admin=admin,
        can_publish_events_immediately=can_publish_events_immediately,
        country=country,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered user %s (%s)", user.id, user.email)
    return user


def mark_email_as_verified(db: Session, user: User) -> User:
    """Stamp the verification time; an already verified user keeps its stamp."""
    if user.email_verified_at is None:
        user.email_verified_at = datetime.now(timezone.utc)
        db.add(user)
        db.commit()
        db.refresh(user)
        logger.info("Marked email of user %s as verified", user.id)
    return user


def mark_email_as_unverified(db: Session, user: User) -> User:
    """Clear the verification time and persist it. Safe to call repeatedly."""
    user.email_verified_at = None
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Marked email of user %s as unverified", user.id)
    return user


# ---------------------------------------------------------------------------
# Association accessors
# ---------------------------------------------------------------------------
def reviews(db: Session, user: User) -> list[Review]:
    return db.query(Review).filter(Review.user_id == user.id).all()


def events(db: Session, user: User) -> list[Event]:
    """Events the user organizes."""
    return (
        db.query(Event)
        .join(organizers, organizers.c.event_id == Event.id)
        .filter(organizers.c.user_id == user.id)
        .all()
    )


def slots(db: Session, user: User) -> list[Slot]:
    """Slots the user speaks at."""
    return (
        db.query(Slot)
        .join(Speaker, Speaker.slot_id == Slot.id)
        .filter(Speaker.user_id == user.id)
        .distinct()
        .all()
    )


def attendees(db: Session, user: User) -> list[Attendee]:
    return db.query(Attendee).filter(Attendee.user_id == user.id).all()


def attended_events(db: Session, user: User) -> list[Event]:
    """Events reached through the user's attendee records."""
    return (
        db.query(Event)
        .join(Attendee, Attendee.event_id == Event.id)
        .filter(Attendee.user_id == user.id)
        .all()
    )


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------
def organizes(db: Session, user: User, event: Event) -> bool:
    if not _saved(user, event):
        return False
    query = db.query(organizers.c.user_id).filter(
        organizers.c.user_id == user.id,
        organizers.c.event_id == event.id,
    )
    return _exists(db, query)


def is_speaker(db: Session, user: User, slot: Slot) -> bool:
    if not _saved(user, slot):
        return False
    query = db.query(Speaker).filter(Speaker.slot_id == slot.id, Speaker.user_id == user.id)
    return _exists(db, query)


def is_claiming_slot(db: Session, user: User, slot: Slot) -> bool:
    if not _saved(user, slot):
        return False
    query = db.query(SlotOwnershipClaim).filter(
        SlotOwnershipClaim.user_id == user.id,
        SlotOwnershipClaim.slot_id == slot.id,
    )
    return _exists(db, query)


def attended(db: Session, user: User, event: Event) -> bool:
    if not _saved(user, event):
        return False
    count = (
        db.query(Attendee)
        .filter(Attendee.user_id == user.id, Attendee.event_id == event.id)
        .count()
    )
    return count > 0


def has_reviewed(db: Session, user: User, reviewable: Reviewable) -> bool:
    if not _saved(user, reviewable):
        return False
    return _exists(db, reviewable.reviews(db).filter(Review.user_id == user.id))


def organises_events(db: Session, user: User) -> bool:
    return db.query(organizers.c.user_id).filter(organizers.c.user_id == user.id).count() > 0


def speaks_at_events(db: Session, user: User) -> bool:
    return db.query(Speaker).filter(Speaker.user_id == user.id).count() > 0


def attends_events(db: Session, user: User) -> bool:
    return db.query(Attendee).filter(Attendee.user_id == user.id).count() > 0


# ---------------------------------------------------------------------------
# Admin scope
# ---------------------------------------------------------------------------
def scope_admin(query: Query) -> Query:
    """Restrict a User query to admin-flagged rows."""
    return query.filter(User.admin.is_(True))


def admins(db: Session) -> list[User]:
    return scope_admin(db.query(User)).all()
