"""Resolve Dendron-style dotted notes into site navigation."""

from dendron_nav.core.importer.loader import NoteImporter
from dendron_nav.core.repository import NodeRepository, build_repository
from dendron_nav.core.resolver import EmptyCorpusError, resolve_config, resolve_hierarchy
from dendron_nav.protocols import ImporterProtocol, WriterProtocol

__all__ = [
    "EmptyCorpusError",
    "ImporterProtocol",
    "NodeRepository",
    "NoteImporter",
    "WriterProtocol",
    "build_repository",
    "resolve_config",
    "resolve_hierarchy",
]
