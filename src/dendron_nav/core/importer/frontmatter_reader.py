"""Parse Dendron note frontmatter into import results."""

from datetime import UTC, date, datetime
from typing import Any

import frontmatter

from dendron_nav.config import DEFAULT_ORDER, NOTE_SUFFIX
from dendron_nav.models.node import ImportFailure, ImportResult, ImportSuccess

REQUIRED_FIELDS: tuple[str, ...] = ("id", "title", "created", "updated")


def parse_timestamp(value: Any) -> datetime | None:
    """Parse a frontmatter date, returning None when it is not a valid date.

    Numbers (and numeric strings) are epoch milliseconds, as Dendron writes
    them. ISO-8601 strings and YAML dates are accepted too; naive values
    are taken as UTC.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=UTC)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=UTC)
    if isinstance(value, str):
        text = value.strip()
        try:
            value = float(text)
        except ValueError:
            try:
                parsed = datetime.fromisoformat(text)
            except ValueError:
                return None
            return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)
    if isinstance(value, int | float):
        try:
            return datetime.fromtimestamp(value / 1000, tz=UTC)
        except (OverflowError, OSError, ValueError):
            return None
    return None


def _doc_entry_payload(metadata: dict[str, Any]) -> Any:
    vpd = metadata.get("vpd")
    if not isinstance(vpd, dict):
        return None
    return vpd.get("doc")


def _nav_order(metadata: dict[str, Any]) -> int | float:
    value = metadata.get("nav_order")
    if isinstance(value, int | float) and not isinstance(value, bool):
        return value
    return DEFAULT_ORDER


def parse_note(text: str, *, filename: str) -> ImportResult:
    """Validate a note's frontmatter and build its import result.

    Args:
        text: Full file contents, frontmatter included.
        filename: Base name of the note file, e.g. ``"cs.web.md"``.

    Returns:
        ImportSuccess, or ImportFailure listing every problem found.
    """
    key = filename.removesuffix(NOTE_SUFFIX)
    try:
        metadata = frontmatter.loads(text).metadata
    except Exception as e:
        return ImportFailure(key=key, filename=filename, errors=(f"Error when reading file {e}",))

    errors = [f"Field missing: {name}" for name in REQUIRED_FIELDS if not metadata.get(name)]

    created_at = updated_at = None
    if metadata.get("created"):
        created_at = parse_timestamp(metadata["created"])
        if created_at is None:
            errors.append("Invalid created date")
    if metadata.get("updated"):
        updated_at = parse_timestamp(metadata["updated"])
        if updated_at is None:
            errors.append("Invalid updated date")

    if errors or created_at is None or updated_at is None:
        return ImportFailure(key=key, filename=filename, errors=tuple(errors))

    return ImportSuccess(
        key=key,
        uid=str(metadata["id"]),
        title=str(metadata["title"]),
        created_at=created_at,
        updated_at=updated_at,
        filename=filename,
        order=_nav_order(metadata),
        doc_entry_raw=_doc_entry_payload(metadata),
    )
