from .notification_channel import (
    CreateNotificationChannelRequest,
    CreateNotificationChannelResponse,
    ErrorResponse,
    GetNotificationChannelsResponse,
    NotificationChannelRead,
)

__all__ = [
    "CreateNotificationChannelRequest",
    "CreateNotificationChannelResponse",
    "ErrorResponse",
    "GetNotificationChannelsResponse",
    "NotificationChannelRead",
]
