"""Domain entity representing a user notification channel."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class NotificationChannel:
    """Delivery destination (Discord, email, SMS...) configured for a user."""

    user_id: str
    channel_type: str
    identifier: str
    is_active: bool
    created_at: datetime
    updated_at: datetime


__all__ = ["NotificationChannel"]
