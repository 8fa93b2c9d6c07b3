"""Configuration constants for dendron-nav."""

from pathlib import Path

# Sort order of notes without a numeric nav_order.
DEFAULT_ORDER: int = 999

# Sort order of synthesized ancestors, so they come before ordered notes.
VIRTUAL_ORDER: int = 0

NOTE_SUFFIX: str = ".md"

# Vault files that never become navigation nodes.
EXCLUDED_NOTE_FILES: tuple[str, ...] = ("root.md", "index.md", "README.md")

# Prefix of redirect targets, normally the site base path.
DEFAULT_BASE_URL: str = "/"

DEFAULT_NOTES_DIR: Path = Path("notes")

# Output table -> file name written by `dendron-nav build --output-dir`.
OUTPUT_FILES: dict[str, str] = {
    "nav": "nav.json",
    "sidebar": "sidebar.json",
    "linksVocabulary": "links-vocabulary.json",
    "leafNodes": "leaf-nodes.json",
    "redirects": "redirects.json",
    "srcExclude": "src-exclude.json",
}
