"""Repository implementations."""

from .notification_channel_repository import NotificationChannelRepository

__all__ = ["NotificationChannelRepository"]
