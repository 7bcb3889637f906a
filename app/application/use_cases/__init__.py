"""Aggregate application use cases."""

from .notification_channels import NotificationChannelService

__all__ = ["NotificationChannelService"]
