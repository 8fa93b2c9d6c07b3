"""Tests for importing a vault directory."""

from pathlib import Path

import pytest

from dendron_nav.core.importer.loader import NoteImporter
from dendron_nav.models.node import ImportFailure, ImportSuccess


def test_import_notes_skips_excluded_and_non_markdown(vault_dir: Path) -> None:
    results = NoteImporter(vault_dir).import_notes()
    assert [r.key for r in results] == [
        "blog.post",
        "broken",
        "guide.advanced.topics",
        "guide.intro",
        "guide",
    ]


def test_import_notes_reports_invalid_notes(vault_dir: Path) -> None:
    results = NoteImporter(vault_dir).import_notes()
    failures = [r for r in results if isinstance(r, ImportFailure)]
    assert len(failures) == 1
    assert failures[0].key == "broken"
    assert failures[0].errors == ("Field missing: title", "Invalid updated date")
    assert sum(isinstance(r, ImportSuccess) for r in results) == 4


def test_unreadable_note_becomes_failure(tmp_path: Path) -> None:
    (tmp_path / "latin.md").write_bytes(b"---\nid: \xff\xfe\n---\n")
    results = NoteImporter(tmp_path).import_notes()
    assert len(results) == 1
    assert isinstance(results[0], ImportFailure)
    assert results[0].errors[0].startswith("Error when reading file")


def test_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        NoteImporter(tmp_path / "nope").import_notes()
