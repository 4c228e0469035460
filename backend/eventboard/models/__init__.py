"""ORM models. Importing this package registers every table on Base.metadata."""
from eventboard.models.review import Review, Reviewable
from eventboard.models.user import User
from eventboard.models.event import Event, organizers
from eventboard.models.slot import Slot, Speaker, SlotOwnershipClaim
from eventboard.models.attendee import Attendee

__all__ = [
    "Attendee",
    "Event",
    "Review",
    "Reviewable",
    "Slot",
    "SlotOwnershipClaim",
    "Speaker",
    "User",
    "organizers",
]
