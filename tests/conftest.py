"""Shared fixtures for the channel directory test-suite."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.config import StorageConfig
from app.container import ChannelDirectory, build_channel_directory, build_key_value_table
from app.infrastructure.repositories import NotificationChannelRepository
from app.infrastructure.storage import KeyValueTable


@pytest.fixture()
def storage_config() -> StorageConfig:
    """In-memory table so every test starts from an empty directory."""

    return StorageConfig(table_name="notification_channel_test", database_url="sqlite://")


@pytest.fixture()
def key_value_table(storage_config: StorageConfig) -> KeyValueTable:
    return build_key_value_table(storage_config)


@pytest.fixture()
def repository(key_value_table: KeyValueTable) -> NotificationChannelRepository:
    return NotificationChannelRepository(key_value_table)


@pytest.fixture()
def channel_directory(storage_config: StorageConfig) -> ChannelDirectory:
    return build_channel_directory(storage_config)
