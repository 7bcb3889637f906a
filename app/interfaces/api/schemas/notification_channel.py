"""Pydantic models describing notification channel payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.domain.entities import NotificationChannel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateNotificationChannelRequest(_CamelModel):
    """Body accepted when creating a notification channel.

    Fields are optional here so that missing values reach the service and are
    reported with their field-specific validation message. Unknown fields,
    including ``isActive``, make the body malformed.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid"
    )

    channel_type: str | None = None
    identifier: str | None = None


class CreateNotificationChannelResponse(_CamelModel):
    """Representation returned after creating a channel."""

    user_id: str
    channel_type: str
    identifier: str
    is_active: bool

    @classmethod
    def from_entity(cls, channel: NotificationChannel) -> "CreateNotificationChannelResponse":
        return cls(
            user_id=channel.user_id,
            channel_type=channel.channel_type,
            identifier=channel.identifier,
            is_active=channel.is_active,
        )


class NotificationChannelRead(CreateNotificationChannelResponse):
    """Representation of a stored channel delivered to the client."""

    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, channel: NotificationChannel) -> "NotificationChannelRead":
        return cls(
            user_id=channel.user_id,
            channel_type=channel.channel_type,
            identifier=channel.identifier,
            is_active=channel.is_active,
            created_at=channel.created_at,
            updated_at=channel.updated_at,
        )


class GetNotificationChannelsResponse(_CamelModel):
    notification_channels: list[NotificationChannelRead]


class ErrorResponse(BaseModel):
    message: str


__all__ = [
    "CreateNotificationChannelRequest",
    "CreateNotificationChannelResponse",
    "ErrorResponse",
    "GetNotificationChannelsResponse",
    "NotificationChannelRead",
]
