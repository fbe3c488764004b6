import re
from datetime import datetime, timezone


def to_slug(text: str) -> str:
    """Convert a collection name to a folder name.

    Example: "My Cool Dogs!" -> "my-cool-dogs"
    """
    slug = re.sub(r"\s+", "-", text.strip().lower())
    return re.sub(r"[^a-z0-9-]", "", slug)


def from_slug(slug: str) -> str:
    """Title-case a folder name back into a display name.

    Example: "my-cool-dogs" -> "My Cool Dogs"
    """
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), slug.replace("-", " "))


def iso_timestamp(now: datetime | None = None) -> str:
    """UTC timestamp with millisecond precision, e.g. 2024-05-01T12:00:00.000Z."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
