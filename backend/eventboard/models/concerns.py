"""Reusable model mixins shared by several entities."""
import logging

from sqlalchemy import Column, String
from sqlalchemy.orm import validates
from slugify import slugify

from eventboard import notifications

logger = logging.getLogger(__name__)


class HasSlug:
    """Derives a URL-safe slug from one of the model's attributes.

    The slug is recomputed on every access and is not unique.
    """

    slug_source = "name"

    @property
    def slug(self) -> str:
        return slugify(getattr(self, self.slug_source) or "")


class HasCountry:
    """Optional ISO 3166 alpha-2 country code."""

    country = Column(String(2), nullable=True)

    @validates("country")
    def _normalize_country(self, key, value):
        if value is None or value == "":
            return None
        value = value.strip().upper()
        if len(value) != 2 or not value.isalpha():
            raise ValueError(f"Invalid country code: {value!r}")
        return value

    @property
    def has_country(self) -> bool:
        return self.country is not None


class Notifiable:
    """Lets a model receive notifications through the installed notifier."""

    def route_notification_for(self, channel: str):
        if channel == "mail":
            return self.email
        return None

    def notify(self, notification) -> None:
        logger.info("Notifying %s with %s", self.id, type(notification).__name__)
        notifications.get_notifier().send(self, notification)
