"""Protocols for dependency injection in the resolution pipeline."""

from typing import Any, Protocol, runtime_checkable

from dendron_nav.models.node import ImportResult


@runtime_checkable
class ImporterProtocol(Protocol):
    """Protocol for note importers feeding the resolver."""

    def import_notes(self) -> list[ImportResult]:
        """Return one import result per note file."""
        ...


@runtime_checkable
class WriterProtocol(Protocol):
    """Protocol for writers of the resolved tables."""

    def make_data_file(self, fname_rel: str, *, data: Any) -> None:
        """Write ``data`` as JSON to a file relative to the output directory."""
        ...
