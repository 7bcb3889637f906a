"""Domain entities exposed by the application."""

from .notification_channel import NotificationChannel

__all__ = ["NotificationChannel"]
