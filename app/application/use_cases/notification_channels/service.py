"""Use cases for creating and listing notification channels."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from app.application.results import Err, Ok, Result
from app.domain.entities import NotificationChannel
from app.domain.errors import InvalidInputError
from app.infrastructure.repositories import NotificationChannelRepository
from .validators import ensure_not_blank

logger = logging.getLogger(__name__)


class NotificationChannelService:
    """Entry point for composing notification channel operations.

    Validation failures are returned as :class:`Err` values; storage failures
    are raised as :class:`~app.domain.errors.StorageError`.
    """

    def __init__(self, repository: NotificationChannelRepository) -> None:
        self.repository = repository

    def create_notification_channel(
        self,
        user_id: str | None,
        channel_type: str | None,
        identifier: str | None,
    ) -> Result[NotificationChannel]:
        """Create an active channel of ``channel_type`` for ``user_id``."""

        try:
            ensure_not_blank(user_id, "userId")
            ensure_not_blank(channel_type, "channelType")
            ensure_not_blank(identifier, "identifier")
            channel = self.repository.create(
                user_id, channel_type, identifier, is_active=True
            )
        except InvalidInputError as exc:
            logger.info("Notification channel creation rejected: %s", exc.message)
            return Err(exc)
        return Ok(channel)

    def get_notification_channels(
        self, user_id: str | None
    ) -> Result[Sequence[NotificationChannel]]:
        """Return every channel configured for ``user_id``."""

        try:
            ensure_not_blank(user_id, "userId")
            channels = self.repository.list(user_id)
        except InvalidInputError as exc:
            logger.info("Notification channel lookup rejected: %s", exc.message)
            return Err(exc)
        return Ok(channels)


__all__ = ["NotificationChannelService"]
