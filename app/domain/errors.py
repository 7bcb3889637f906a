"""Error vocabulary shared by every layer of the channel directory."""

from __future__ import annotations


class ChannelDirectoryError(Exception):
    """Base class for failures raised by the channel directory."""


class InvalidInputError(ChannelDirectoryError, ValueError):
    """A caller supplied value failed a precondition."""

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        self.message = message or f"{field} cannot be null or empty"
        super().__init__(self.message)


class StorageError(ChannelDirectoryError):
    """The key-value table could not complete a read or write."""


class MalformedRequestError(ChannelDirectoryError):
    """An inbound request payload could not be parsed."""


__all__ = [
    "ChannelDirectoryError",
    "InvalidInputError",
    "MalformedRequestError",
    "StorageError",
]
