"""Import every note of a Dendron vault directory."""

from pathlib import Path

from loguru import logger

from dendron_nav.config import EXCLUDED_NOTE_FILES, NOTE_SUFFIX
from dendron_nav.core.importer.frontmatter_reader import parse_note
from dendron_nav.models.node import ImportFailure, ImportResult


class NoteImporter:
    """Read ``*.md`` notes from one directory into import results."""

    def __init__(self, notes_dir: str | Path) -> None:
        self.notes_dir = Path(notes_dir)

    def import_notes(self) -> list[ImportResult]:
        """Import all notes, sorted by file name.

        Files that cannot be read become ImportFailure records rather than
        aborting the import.

        Raises:
            FileNotFoundError: If the notes directory does not exist.
        """
        if not self.notes_dir.is_dir():
            msg = f"Notes directory not found: {self.notes_dir}"
            raise FileNotFoundError(msg)

        results: list[ImportResult] = []
        for path in sorted(self.notes_dir.glob(f"*{NOTE_SUFFIX}")):
            if path.name in EXCLUDED_NOTE_FILES or not path.is_file():
                continue
            try:
                text = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                key = path.name.removesuffix(NOTE_SUFFIX)
                results.append(
                    ImportFailure(
                        key=key, filename=path.name, errors=(f"Error when reading file {e}",)
                    )
                )
                continue
            results.append(parse_note(text, filename=path.name))

        failed = sum(isinstance(r, ImportFailure) for r in results)
        logger.debug(
            "Imported {} note(s) from {} ({} failed)", len(results) - failed, self.notes_dir, failed
        )
        return results
