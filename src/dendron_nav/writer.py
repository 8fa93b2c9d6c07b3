"""Write resolved navigation tables as JSON files."""

import json
from pathlib import Path
from typing import Any

from loguru import logger


class FileWriter:
    """Write output files, leaving unchanged ones untouched.

    A rebuild that produces the same tables keeps every file's mtime, so
    downstream site builds are not invalidated needlessly.
    """

    def __init__(self, datadir: str | Path, dry_run: bool = False) -> None:
        self.datadir = Path(datadir).resolve()
        self.dry_run = dry_run

        if not dry_run:
            self.datadir.mkdir(parents=True, exist_ok=True)

        logger.debug("Writer ready, datadir {!r}, dry_run {!r}", str(self.datadir), dry_run)
        self.files_made: list[Path] = []
        self.num_same = 0
        self.num_changed = 0

    def make_data_file(self, fname_rel: str, *, data: Any) -> None:
        """Serialize ``data`` to a JSON file relative to the output directory."""
        if Path(fname_rel).is_absolute():
            msg = f"must be relative: {fname_rel!r}"
            raise ValueError(msg)

        fname = (self.datadir / fname_rel).resolve()
        if not fname.is_relative_to(self.datadir):
            msg = f"Path escapes datadir: {str(fname)!r}"
            raise ValueError(msg)

        contents = json.dumps(data, sort_keys=True, indent=4, ensure_ascii=False) + "\n"
        self.files_made.append(fname)

        action = "create"
        try:
            if fname.read_text(encoding="utf-8") == contents:
                self.num_same += 1
                return
            self.num_changed += 1
            action = "update"
        except (FileNotFoundError, UnicodeDecodeError):
            pass

        if self.dry_run:
            logger.info("dry-run: would {} {!r}", action, str(fname))
            return
        logger.debug("Writing ({}) {!r}", action, str(fname))
        fname.parent.mkdir(parents=True, exist_ok=True)
        fname.write_text(contents, encoding="utf-8")

    def summary(self) -> str:
        new = len(self.files_made) - self.num_same - self.num_changed
        return f"Outputs: {self.num_same} same, {self.num_changed} changed, {new} new"
