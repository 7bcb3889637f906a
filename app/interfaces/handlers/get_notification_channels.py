"""Handler listing the notification channels of a user."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from app.application.results import Err
from app.application.use_cases.notification_channels import NotificationChannelService
from app.domain.errors import InvalidInputError, MalformedRequestError
from app.interfaces.api.schemas import GetNotificationChannelsResponse, NotificationChannelRead
from .base import HandlerResponse, error_response, json_response, path_parameter

logger = logging.getLogger(__name__)

LIST_ERROR_MESSAGE = "Error getting notification channels"


class GetNotificationChannelsHandler:
    """Translate a list request into a service call and back."""

    def __init__(self, service: NotificationChannelService) -> None:
        self.service = service

    def handle(self, event: Mapping[str, Any]) -> HandlerResponse:
        try:
            user_id = path_parameter(event, "userId")
        except MalformedRequestError as exc:
            logger.warning("Malformed get notification channels request: %s", exc)
            return error_response(LIST_ERROR_MESSAGE)

        try:
            result = self.service.get_notification_channels(user_id)
        except InvalidInputError as exc:
            return error_response(exc.message)
        except Exception:
            logger.exception("Unexpected error getting notification channels for user %s", user_id)
            return error_response(LIST_ERROR_MESSAGE)

        if isinstance(result, Err):
            return error_response(result.message)
        payload = GetNotificationChannelsResponse(
            notification_channels=[
                NotificationChannelRead.from_entity(channel) for channel in result.value
            ]
        )
        return json_response(200, payload)


@lru_cache(maxsize=1)
def _default_handler() -> GetNotificationChannelsHandler:
    from app.container import build_channel_directory_from_environment

    return build_channel_directory_from_environment().list_handler


def handler(event: Mapping[str, Any], context: Any = None) -> dict[str, Any]:
    """Function entry point for the list operation."""

    return _default_handler().handle(event).to_dict()


__all__ = ["GetNotificationChannelsHandler", "LIST_ERROR_MESSAGE", "handler"]
