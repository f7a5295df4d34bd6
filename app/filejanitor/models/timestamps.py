"""Timestamp helpers shared by the serialized models."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(UTC)


def format_timestamp(value: datetime) -> str:
    """Format a datetime as ISO 8601 with milliseconds and a "Z" suffix.

    Naive datetimes are assumed to be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    text = value.astimezone(UTC).isoformat(timespec="milliseconds")
    return text.replace("+00:00", "Z")


def parse_timestamp(text: str) -> datetime:
    """Parse an ISO 8601 timestamp into an aware UTC datetime.

    Raises:
        ValueError: If the text is not a valid ISO 8601 timestamp.
        TypeError: If the value is not a string.
    """
    if not isinstance(text, str):
        msg = f"Timestamp must be a string, got {type(text).__name__}"
        raise TypeError(msg)
    value = datetime.fromisoformat(text.strip())
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def filename_safe_timestamp(value: datetime) -> str:
    """Format a timestamp for use inside a file name (no ":" or ".")."""
    return format_timestamp(value).replace(":", "-").replace(".", "-")
