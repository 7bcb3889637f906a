"""FastAPI dependency utilities."""

from fastapi import HTTPException, Request, status

from app.container import ChannelDirectory
from app.interfaces.handlers import (
    CreateNotificationChannelHandler,
    GetNotificationChannelsHandler,
)


def get_channel_directory(request: Request) -> ChannelDirectory:
    """Return the directory assembled for the running application."""

    directory = getattr(request.app.state, "channel_directory", None)
    if directory is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Channel directory is not initialized",
        )
    return directory


def get_create_handler(request: Request) -> CreateNotificationChannelHandler:
    return get_channel_directory(request).create_handler


def get_list_handler(request: Request) -> GetNotificationChannelsHandler:
    return get_channel_directory(request).list_handler
