"""Shared test fixtures."""

from pathlib import Path

import pytest

VAULT_NOTES = {
    "root.md": "---\nid: root\ntitle: Root\ncreated: 1700000000000\nupdated: 1700000000000\n---\n",
    "guide.md": (
        "---\n"
        "id: g1\n"
        "title: Guide\n"
        "created: 1700000000000\n"
        "updated: 1700000500000\n"
        "nav_order: 1\n"
        "vpd:\n"
        "  doc:\n"
        "    leafLandingPoint: first\n"
        "    collapseOtherFirstLevels: true\n"
        "---\n"
        "# Guide\n"
    ),
    "guide.intro.md": (
        "---\nid: g2\ntitle: Intro\ncreated: 1700000000000\nupdated: 1700000000000\n"
        "nav_order: 1\n---\nIntro text.\n"
    ),
    "guide.advanced.topics.md": (
        "---\nid: g3\ntitle: Topics\ncreated: 2024-01-01T10:00:00Z\n"
        "updated: 2024-01-02T10:00:00Z\n---\n"
    ),
    "blog.post.md": (
        "---\nid: b1\ntitle: First Post\ncreated: 1700000000000\nupdated: 1700000000000\n"
        "nav_order: 2\n---\n"
    ),
    "broken.md": "---\nid: x1\ncreated: 1700000000000\nupdated: not a date\n---\n",
    "notes.txt": "not a note",
}


@pytest.fixture
def vault_dir(tmp_path: Path) -> Path:
    """Return a notes directory with a small Dendron vault."""
    notes = tmp_path / "notes"
    notes.mkdir()
    for name, text in VAULT_NOTES.items():
        (notes / name).write_text(text, encoding="utf-8")
    return notes
