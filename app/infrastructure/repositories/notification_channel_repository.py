"""Persistence helpers for notification channel entities."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from app.domain.entities import NotificationChannel
from app.domain.errors import InvalidInputError
from app.infrastructure.keys import (
    NOTIFICATION_CHANNEL_PREFIX,
    decode_channel_item,
    encode_channel_item,
    user_partition_key,
)
from app.infrastructure.storage import KeyValueTable
from app.utils import now_utc

logger = logging.getLogger(__name__)


def _require_text(value: str | None, field: str) -> None:
    if not isinstance(value, str) or not value.strip():
        logger.warning("Rejected notification channel input: %s is null or empty", field)
        raise InvalidInputError(field)


class NotificationChannelRepository:
    """Read and write :class:`NotificationChannel` items in the directory table."""

    def __init__(self, table: KeyValueTable) -> None:
        self.table = table

    def create(
        self,
        user_id: str,
        channel_type: str,
        identifier: str,
        is_active: bool,
    ) -> NotificationChannel:
        """Store a channel for ``user_id``, overwriting any channel of the same type."""

        logger.info("Creating notification channel for user %s of type %s", user_id, channel_type)
        _require_text(user_id, "userId")
        _require_text(channel_type, "channelType")
        _require_text(identifier, "identifier")
        if not isinstance(is_active, bool):
            logger.warning("Rejected notification channel input: isActive is null")
            raise InvalidInputError("isActive", "isActive cannot be null")

        now = now_utc()
        channel = NotificationChannel(
            user_id=user_id,
            channel_type=channel_type,
            identifier=identifier,
            is_active=is_active,
            created_at=now,
            updated_at=now,
        )
        pk, sk, attributes = encode_channel_item(channel)
        self.table.put_item(pk, sk, attributes)
        logger.info("Created notification channel for user %s", user_id)
        return channel

    def list(self, user_id: str) -> Sequence[NotificationChannel]:
        """Return every channel stored for ``user_id`` (possibly none)."""

        logger.info("Getting notification channels for user %s", user_id)
        _require_text(user_id, "userId")

        items = self.table.query(user_partition_key(user_id), NOTIFICATION_CHANNEL_PREFIX)
        channels = [decode_channel_item(item) for item in items]
        logger.debug("Retrieved %d notification channels for user %s", len(channels), user_id)
        return channels


__all__ = ["NotificationChannelRepository"]
