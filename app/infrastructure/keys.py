"""Key layout of the channel directory table.

Every item lives under a partition key derived from its owner and a sort key
whose prefix names the entity kind, so several kinds can share a partition
and be read back with a single prefix scan.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from app.domain.entities import NotificationChannel
from app.domain.errors import StorageError
from app.utils import parse_iso8601, to_iso8601

KEY_SEPARATOR = "#"
USER_PREFIX = f"USER{KEY_SEPARATOR}"
NOTIFICATION_CHANNEL_PREFIX = f"NOTIFICATION{KEY_SEPARATOR}"

USER_ID = "userId"
CHANNEL_TYPE = "channelType"
IDENTIFIER = "identifier"
IS_ACTIVE = "isActive"
CREATED_AT = "createdAt"
UPDATED_AT = "updatedAt"

_STRING_ATTRIBUTES = (USER_ID, CHANNEL_TYPE, IDENTIFIER, CREATED_AT, UPDATED_AT)


def user_partition_key(user_id: str) -> str:
    return f"{USER_PREFIX}{user_id}"


def channel_sort_key(channel_type: str) -> str:
    return f"{NOTIFICATION_CHANNEL_PREFIX}{channel_type}"


def encode_channel_item(
    channel: NotificationChannel,
) -> tuple[str, str, dict[str, Any]]:
    """Return the ``(pk, sk, attributes)`` triple stored for ``channel``."""

    attributes: dict[str, Any] = {
        USER_ID: channel.user_id,
        CHANNEL_TYPE: channel.channel_type,
        IDENTIFIER: channel.identifier,
        IS_ACTIVE: channel.is_active,
        CREATED_AT: to_iso8601(channel.created_at),
        UPDATED_AT: to_iso8601(channel.updated_at),
    }
    return (
        user_partition_key(channel.user_id),
        channel_sort_key(channel.channel_type),
        attributes,
    )


def decode_channel_item(attributes: Mapping[str, Any]) -> NotificationChannel:
    """Rebuild a :class:`NotificationChannel` from stored attributes.

    Raises :class:`StorageError` when the item is missing attributes or holds
    values of the wrong type.
    """

    for name in _STRING_ATTRIBUTES:
        if not isinstance(attributes.get(name), str):
            raise StorageError(f"Stored notification channel has an invalid '{name}' attribute")
    if not isinstance(attributes.get(IS_ACTIVE), bool):
        raise StorageError(f"Stored notification channel has an invalid '{IS_ACTIVE}' attribute")

    try:
        created_at = parse_iso8601(attributes[CREATED_AT])
        updated_at = parse_iso8601(attributes[UPDATED_AT])
    except ValueError as exc:
        raise StorageError("Stored notification channel has an invalid timestamp") from exc

    return NotificationChannel(
        user_id=attributes[USER_ID],
        channel_type=attributes[CHANNEL_TYPE],
        identifier=attributes[IDENTIFIER],
        is_active=attributes[IS_ACTIVE],
        created_at=created_at,
        updated_at=updated_at,
    )


__all__ = [
    "NOTIFICATION_CHANNEL_PREFIX",
    "USER_PREFIX",
    "channel_sort_key",
    "decode_channel_item",
    "encode_channel_item",
    "user_partition_key",
]
