"""Fake implementations for testing the resolution pipeline."""

import json
from datetime import UTC, datetime
from typing import Any

from dendron_nav.models.node import ImportFailure, ImportResult, ImportSuccess

CREATED = datetime(2024, 1, 1, 10, 0, tzinfo=UTC)
UPDATED = datetime(2024, 1, 2, 10, 0, tzinfo=UTC)


def make_note(
    key: str, *, order: int | float = 999, entry: Any = None, **kwargs: Any
) -> ImportSuccess:
    """Build a successful import result for ``key`` with sensible defaults."""
    fields: dict[str, Any] = {
        "key": key,
        "uid": f"uid-{key}",
        "title": key.split(".")[-1].capitalize(),
        "created_at": CREATED,
        "updated_at": UPDATED,
        "filename": f"{key}.md",
        "order": order,
        "doc_entry_raw": entry,
    }
    fields.update(kwargs)
    return ImportSuccess(**fields)


def make_failure(key: str, *errors: str) -> ImportFailure:
    return ImportFailure(key=key, filename=f"{key}.md", errors=errors or ("Field missing: id",))


class FakeImporter:
    """In-memory fake for NoteImporter.

    Returns predefined results and counts calls.
    """

    def __init__(self, results: list[ImportResult]) -> None:
        self.results = results
        self.calls = 0

    def import_notes(self) -> list[ImportResult]:
        self.calls += 1
        return list(self.results)


class FakeWriter:
    """In-memory fake for FileWriter, storing serialized files in a dict."""

    def __init__(self) -> None:
        self.files: dict[str, str] = {}

    def make_data_file(self, fname_rel: str, *, data: Any) -> None:
        self.files[fname_rel] = json.dumps(data, sort_keys=True, indent=4) + "\n"

    def read_json(self, fname_rel: str) -> Any:
        return json.loads(self.files[fname_rel])
