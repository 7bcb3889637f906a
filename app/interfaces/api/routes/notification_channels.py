"""Rutas HTTP para los canales de notificación de un usuario."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response

from app.interfaces.api.dependencies import get_create_handler, get_list_handler
from app.interfaces.handlers import (
    CreateNotificationChannelHandler,
    GetNotificationChannelsHandler,
    HandlerResponse,
)

router = APIRouter(prefix="/users/{user_id}/notification-channels", tags=["notification-channels"])


def _to_http_response(result: HandlerResponse) -> Response:
    return Response(
        content=result.body,
        status_code=result.status_code,
        headers=result.headers,
    )


@router.post("")
async def create_notification_channel(
    user_id: str,
    request: Request,
    handler: CreateNotificationChannelHandler = Depends(get_create_handler),
) -> Response:
    """Create a channel for ``user_id``; responds with the handler's status and body."""

    raw_body = await request.body()
    event = {
        "pathParameters": {"userId": user_id},
        "body": raw_body,
    }
    return _to_http_response(handler.handle(event))


@router.get("")
def list_notification_channels(
    user_id: str,
    handler: GetNotificationChannelsHandler = Depends(get_list_handler),
) -> Response:
    """Return every channel configured for ``user_id``."""

    return _to_http_response(handler.handle({"pathParameters": {"userId": user_id}}))
