"""Explicit assembly of the channel directory object graph."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy import Engine

from app.application.use_cases.notification_channels import NotificationChannelService
from app.config import StorageConfig, get_settings
from app.infrastructure.database import build_engine, build_session_factory, initialize_table
from app.infrastructure.repositories import NotificationChannelRepository
from app.infrastructure.storage import KeyValueTable
from app.interfaces.handlers import (
    CreateNotificationChannelHandler,
    GetNotificationChannelsHandler,
)
from app.logging_config import configure_logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChannelDirectory:
    """Service and handlers sharing one repository."""

    service: NotificationChannelService
    create_handler: CreateNotificationChannelHandler
    list_handler: GetNotificationChannelsHandler
    engine: Engine | None = None

    def close(self) -> None:
        """Release the database connections held by the directory."""

        if self.engine is not None:
            self.engine.dispose()


def build_key_value_table(config: StorageConfig, engine: Engine | None = None) -> KeyValueTable:
    if engine is None:
        engine = build_engine(config)
    table = initialize_table(engine, config)
    return KeyValueTable(build_session_factory(engine), table)


def build_channel_directory(config: StorageConfig) -> ChannelDirectory:
    """Build repository, service and handlers for ``config``."""

    engine = build_engine(config)
    repository = NotificationChannelRepository(build_key_value_table(config, engine))
    service = NotificationChannelService(repository)
    return ChannelDirectory(
        service=service,
        create_handler=CreateNotificationChannelHandler(service),
        list_handler=GetNotificationChannelsHandler(service),
        engine=engine,
    )


def build_channel_directory_from_environment() -> ChannelDirectory:
    """Build the directory from the process settings, configuring logging first."""

    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Assembling channel directory for table '%s'", settings.notification_channel_table_name)
    return build_channel_directory(settings.storage_config())


__all__ = [
    "ChannelDirectory",
    "build_channel_directory",
    "build_channel_directory_from_environment",
    "build_key_value_table",
]
