"""User identity and association model for the event board."""

__version__ = "0.1.0"
