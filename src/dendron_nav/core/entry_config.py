"""Interpret the per-note entry payload (frontmatter ``vpd.doc``)."""

from typing import Any

from dendron_nav.models.node import LANDING_POINTS, DocEntryConfig

# Field names recognised in the object form of the payload.
LANDING_POINT_FIELD = "leafLandingPoint"
COLLAPSE_FIELD = "collapseOtherFirstLevels"


def resolve_doc_entry_config(raw: Any) -> DocEntryConfig | None:
    """Turn a raw entry payload into a DocEntryConfig, or None if not an entry.

    ``True`` selects the defaults. A mapping may override the landing point
    and the collapse flag; unrecognised values fall back to the defaults.
    Absent, ``False`` and any other shape mean the note is not an entry.
    """
    if raw is True:
        return DocEntryConfig()
    if not isinstance(raw, dict):
        return None

    landing_point = raw.get(LANDING_POINT_FIELD)
    if landing_point not in LANDING_POINTS:
        landing_point = "first"

    collapse = raw.get(COLLAPSE_FIELD)
    if not isinstance(collapse, bool):
        collapse = False

    return DocEntryConfig(landing_point=landing_point, collapse_non_landing_children=collapse)
