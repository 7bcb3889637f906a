"""Transport-neutral request handlers for the channel directory."""

from .base import HandlerResponse
from .create_notification_channel import CREATE_ERROR_MESSAGE, CreateNotificationChannelHandler
from .get_notification_channels import GetNotificationChannelsHandler, LIST_ERROR_MESSAGE

__all__ = [
    "CREATE_ERROR_MESSAGE",
    "CreateNotificationChannelHandler",
    "GetNotificationChannelsHandler",
    "HandlerResponse",
    "LIST_ERROR_MESSAGE",
]
