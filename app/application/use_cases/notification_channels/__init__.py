"""Use cases for managing notification channels."""

from .service import NotificationChannelService
from .validators import ensure_not_blank

__all__ = ["NotificationChannelService", "ensure_not_blank"]
