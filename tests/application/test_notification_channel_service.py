"""Tests for the notification channel service."""

from datetime import datetime, timezone

import pytest

from app.application.results import Err, Ok
from app.application.use_cases.notification_channels import NotificationChannelService
from app.domain.entities import NotificationChannel
from app.domain.errors import InvalidInputError, StorageError

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


class FakeRepository:
    """Records calls and returns canned channels."""

    def __init__(self, channels=None, error=None):
        self.channels = list(channels or [])
        self.error = error
        self.created = []
        self.listed = []

    def create(self, user_id, channel_type, identifier, is_active):
        if self.error is not None:
            raise self.error
        self.created.append((user_id, channel_type, identifier, is_active))
        return NotificationChannel(
            user_id=user_id,
            channel_type=channel_type,
            identifier=identifier,
            is_active=is_active,
            created_at=NOW,
            updated_at=NOW,
        )

    def list(self, user_id):
        if self.error is not None:
            raise self.error
        self.listed.append(user_id)
        return [channel for channel in self.channels if channel.user_id == user_id]


def test_create_notification_channel_forces_active_flag():
    repository = FakeRepository()
    service = NotificationChannelService(repository)

    result = service.create_notification_channel("user123", "DISCORD", "123456789")

    assert isinstance(result, Ok)
    assert result.is_ok
    assert result.value.is_active is True
    assert result.value.created_at == result.value.updated_at
    assert repository.created == [("user123", "DISCORD", "123456789", True)]


@pytest.mark.parametrize(
    ("arguments", "message"),
    [
        ((None, "DISCORD", "123"), "userId cannot be null or empty"),
        (("  ", "DISCORD", "123"), "userId cannot be null or empty"),
        (("user123", None, "123"), "channelType cannot be null or empty"),
        (("user123", " ", "123"), "channelType cannot be null or empty"),
        (("user123", "DISCORD", None), "identifier cannot be null or empty"),
        (("user123", "DISCORD", ""), "identifier cannot be null or empty"),
    ],
)
def test_create_notification_channel_rejects_blank_fields(arguments, message):
    repository = FakeRepository()
    service = NotificationChannelService(repository)

    result = service.create_notification_channel(*arguments)

    assert isinstance(result, Err)
    assert not result.is_ok
    assert result.message == message
    assert repository.created == []


def test_create_notification_channel_folds_repository_validation_into_err():
    service = NotificationChannelService(FakeRepository(error=InvalidInputError("isActive", "isActive cannot be null")))

    result = service.create_notification_channel("user123", "DISCORD", "123")

    assert isinstance(result, Err)
    assert result.error.field == "isActive"


def test_create_notification_channel_propagates_storage_errors():
    service = NotificationChannelService(FakeRepository(error=StorageError("down")))

    with pytest.raises(StorageError):
        service.create_notification_channel("user123", "DISCORD", "123")


def test_get_notification_channels_returns_repository_result():
    channel = NotificationChannel("user123", "EMAIL", "test@example.com", True, NOW, NOW)
    repository = FakeRepository(channels=[channel])
    service = NotificationChannelService(repository)

    result = service.get_notification_channels("user123")

    assert isinstance(result, Ok)
    assert list(result.value) == [channel]
    assert repository.listed == ["user123"]


def test_get_notification_channels_for_user_without_channels_is_empty():
    service = NotificationChannelService(FakeRepository())

    result = service.get_notification_channels("user123")

    assert isinstance(result, Ok)
    assert list(result.value) == []


@pytest.mark.parametrize("user_id", [None, "   "])
def test_get_notification_channels_rejects_blank_user_id(user_id):
    repository = FakeRepository()
    service = NotificationChannelService(repository)

    result = service.get_notification_channels(user_id)

    assert isinstance(result, Err)
    assert result.message == "userId cannot be null or empty"
    assert repository.listed == []


def test_service_on_real_repository_overwrites_same_channel_type(repository):
    service = NotificationChannelService(repository)

    service.create_notification_channel("user123", "DISCORD", "first")
    service.create_notification_channel("user123", "DISCORD", "second")
    result = service.get_notification_channels("user123")

    assert [(c.channel_type, c.identifier) for c in result.value] == [("DISCORD", "second")]
