"""Notification dispatch for notifiable models.

Delivery is delegated to a pluggable notifier; the default one only
records each delivery in the log.
"""
import logging

logger = logging.getLogger(__name__)


class Notification:
    """Base class for messages sent to a notifiable entity."""

    channels = ("mail",)

    def via(self, notifiable) -> list[str]:
        return list(self.channels)


class LoggingNotifier:
    """Default notifier: logs every delivery instead of sending it."""

    def send(self, notifiable, notification: Notification) -> None:
        for channel in notification.via(notifiable):
            route = notifiable.route_notification_for(channel)
            if route is None:
                logger.warning("No %s route for %s, skipping %s",
                               channel, notifiable, type(notification).__name__)
                continue
            logger.info("Sending %s via %s to %s", type(notification).__name__, channel, route)


_notifier = LoggingNotifier()


def get_notifier():
    return _notifier


def set_notifier(notifier):
    """Install a notifier (anything with ``send(notifiable, notification)``); returns the previous one."""
    global _notifier
    previous, _notifier = _notifier, notifier
    return previous
