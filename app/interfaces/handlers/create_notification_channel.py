"""Handler creating a notification channel for a user."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from app.application.results import Err
from app.application.use_cases.notification_channels import NotificationChannelService
from app.domain.errors import InvalidInputError, MalformedRequestError
from app.interfaces.api.schemas import (
    CreateNotificationChannelRequest,
    CreateNotificationChannelResponse,
)
from .base import HandlerResponse, error_response, json_response, parse_body, path_parameter

logger = logging.getLogger(__name__)

CREATE_ERROR_MESSAGE = "Error creating notification channel"


class CreateNotificationChannelHandler:
    """Translate a create request into a service call and back."""

    def __init__(self, service: NotificationChannelService) -> None:
        self.service = service

    def handle(self, event: Mapping[str, Any]) -> HandlerResponse:
        try:
            user_id = path_parameter(event, "userId")
            request = parse_body(event, CreateNotificationChannelRequest)
        except MalformedRequestError as exc:
            logger.warning("Malformed create notification channel request: %s", exc)
            return error_response(CREATE_ERROR_MESSAGE)

        try:
            result = self.service.create_notification_channel(
                user_id, request.channel_type, request.identifier
            )
        except InvalidInputError as exc:
            return error_response(exc.message)
        except Exception:
            logger.exception("Unexpected error creating notification channel for user %s", user_id)
            return error_response(CREATE_ERROR_MESSAGE)

        if isinstance(result, Err):
            return error_response(result.message)
        return json_response(200, CreateNotificationChannelResponse.from_entity(result.value))


@lru_cache(maxsize=1)
def _default_handler() -> CreateNotificationChannelHandler:
    from app.container import build_channel_directory_from_environment

    return build_channel_directory_from_environment().create_handler


def handler(event: Mapping[str, Any], context: Any = None) -> dict[str, Any]:
    """Function entry point for the create operation."""

    return _default_handler().handle(event).to_dict()


__all__ = ["CREATE_ERROR_MESSAGE", "CreateNotificationChannelHandler", "handler"]
