"""Common validation helpers for notification channel use cases."""

from app.domain.errors import InvalidInputError


def ensure_not_blank(value: str | None, field: str) -> str:
    """Return ``value`` unchanged or raise :class:`InvalidInputError` for ``field``."""

    if not isinstance(value, str) or not value.strip():
        raise InvalidInputError(field, f"{field} cannot be null or empty")
    return value
